"""jobform test suite.

- test_validators.py: individual field validators
- test_field_group.py: field state and the nested field tree
- test_application_form.py: category switching and the submission gate
- test_submission.py: submission results and read-only snapshots
- test_settings.py / test_logging_config.py / test_cli.py: ambient layers
- tui/: headless Textual runs
"""

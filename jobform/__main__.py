"""Entry point for the job application form.

Usage:
    python -m jobform                          # Fill in the form interactively
    python -m jobform --validate answers.yaml  # Check a YAML file of values
    python -m jobform --list-categories        # Show the job categories
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml

from jobform import __version__
from jobform.constants import JOB_CATEGORIES, get_error_text
from jobform.errors import FormError, SettingsError
from jobform.logging_config import parse_log_level, setup_logging
from jobform.models import ApplicationForm
from jobform.settings import FormSettings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobform",
        description="Job application form with conditional validation",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        help="Path to settings YAML (default: ./.jobform.yaml)",
    )
    parser.add_argument(
        "--validate",
        type=Path,
        metavar="PATH",
        help="Validate a YAML file of form values and exit",
    )
    parser.add_argument(
        "--list-categories",
        action="store_true",
        help="List the selectable job categories and exit",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write JSON logs to this file",
    )
    parser.add_argument(
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR). Can also set via JOBFORM_LOG_LEVEL",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit console logs as JSON",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"jobform {__version__}",
        help="Show version and exit",
    )
    return parser


def validate_file(path: Path) -> int:
    """Load values from YAML, submit them and print the outcome.

    Returns:
        0 when the values form a valid application, 1 when they do not, 2 when
        the file names fields the form does not have
    """
    with open(path, encoding="utf-8") as f:
        values = yaml.safe_load(f) or {}
    if not isinstance(values, dict):
        print(f"{path}: expected a mapping of field values", file=sys.stderr)
        return 2

    form = ApplicationForm.from_schema_defaults()
    try:
        form.set_values(values)
    except FormError as e:
        logger.error("Rejected %s: %s", path, e.message, extra={"error": e.to_dict()})
        print(f"{path}: {e.message}", file=sys.stderr)
        if e.suggestion:
            print(f"Suggestion: {e.suggestion}", file=sys.stderr)
        return 2
    result = form.submit()

    if result.ok:
        print(json.dumps(result.to_dict(), indent=2, default=str))
        return 0

    print(f"{path}: {result.error_count()} invalid field(s)")
    for field_path, kinds in result.errors.items():
        messages = "; ".join(get_error_text(kind) for kind in kinds)
        print(f"  {field_path}: {messages}")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_categories:
        print("Job categories:")
        for category in JOB_CATEGORIES:
            print(f"  - {category.value}")
        return 0

    try:
        settings = FormSettings.load(args.settings, strict=args.settings is not None)
    except SettingsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    level = parse_log_level(args.log_level or settings.log_level)
    log_file = args.log_file or settings.get_log_file()
    interactive = args.validate is None

    # While the TUI owns the terminal, logs only go to the file
    setup_logging(
        level=level,
        format_type="json" if args.json_logs else settings.log_format,
        log_file=log_file,
        console=not interactive,
    )

    if not interactive:
        try:
            return validate_file(args.validate)
        except (OSError, yaml.YAMLError) as e:
            logger.error("Cannot read %s: %s", args.validate, e)
            print(f"Error: cannot read {args.validate}: {e}", file=sys.stderr)
            return 2

    from jobform.tui.app import run_app

    run_app(settings=settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())

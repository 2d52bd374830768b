"""Job application form with conditional validation.

The core is a UI-agnostic form model (``jobform.models``) plus pure
validators (``jobform.validators``). A Textual front end lives in
``jobform.tui``.

Usage:
    python -m jobform                      # Fill in the form in the terminal
    python -m jobform --settings my.yaml   # Use a specific settings file
"""

from __future__ import annotations

from jobform.constants import JobCategory
from jobform.models import ApplicationForm, SubmissionResult
from jobform.validators import ErrorKind

__version__ = "0.1.0"

__all__ = [
    "ApplicationForm",
    "ErrorKind",
    "JobCategory",
    "SubmissionResult",
    "JobApplicationApp",
]


def __getattr__(name: str):
    """Lazy import of TUI components."""
    if name == "JobApplicationApp":
        from jobform.tui.app import JobApplicationApp
        return JobApplicationApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

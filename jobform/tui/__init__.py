"""Textual TUI for filling in the job application form.

Usage:
    python -m jobform
"""

from __future__ import annotations

__all__ = [
    "JobApplicationApp",
    "run_app",
]


def __getattr__(name: str):
    """Lazy import of TUI components."""
    if name == "JobApplicationApp":
        from jobform.tui.app import JobApplicationApp
        return JobApplicationApp
    if name == "run_app":
        from jobform.tui.app import run_app
        return run_app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

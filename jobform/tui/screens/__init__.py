"""TUI screen components."""

from __future__ import annotations

from jobform.tui.screens.application import ApplicationScreen

__all__ = [
    "ApplicationScreen",
]

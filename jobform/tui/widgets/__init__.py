"""TUI widget components."""

from __future__ import annotations

from jobform.tui.widgets.validated_input import ValidatedInput
from jobform.tui.widgets.enum_select import EnumSelect

__all__ = [
    "ValidatedInput",
    "EnumSelect",
]

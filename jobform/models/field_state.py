"""Single form field with its validators and touched flag."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jobform.constants import get_error_text
from jobform.validators import ErrorKind, Validator, collect_errors


@dataclass
class FieldState:
    """Represents a single field's value and validation state.

    Errors are not stored: every read recomputes them from the current
    validators and value, so they always reflect the latest edit.

    Attributes:
        name: The field name (e.g., "firstname", "zip")
        value: The current value
        validators: Validators applied in order
        touched: Whether errors should be shown to the user
    """

    name: str
    value: Any = ""
    validators: tuple[Validator, ...] = field(default_factory=tuple, repr=False)
    touched: bool = False

    @property
    def error_list(self) -> list[ErrorKind]:
        """Errors in validator order."""
        return collect_errors(self.value, self.validators)

    @property
    def errors(self) -> frozenset[ErrorKind]:
        """Set of current errors."""
        return frozenset(self.error_list)

    @property
    def is_valid(self) -> bool:
        return not self.error_list

    @property
    def visible_errors(self) -> list[ErrorKind]:
        """Errors the user should see (empty until touched)."""
        return self.error_list if self.touched else []

    @property
    def is_required(self) -> bool:
        """Check if the installed validators reject an empty value."""
        return any(v("") is ErrorKind.MISSING for v in self.validators)

    def set_value(self, value: Any) -> None:
        """Set a new value."""
        self.value = value

    def mark_touched(self) -> None:
        self.touched = True

    def error_messages(self) -> list[str]:
        """User-facing text for the visible errors."""
        return [get_error_text(kind) for kind in self.visible_errors]

    def __str__(self) -> str:
        marker = "" if self.is_valid else f" {[e.value for e in self.error_list]}"
        return f"{self.name}={self.value!r}{marker}"

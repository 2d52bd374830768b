"""Exception hierarchy for programming and configuration faults.

User input errors are never raised; they live on fields as ``ErrorKind``
values. These exceptions cover misuse of the API (unknown field paths) and
broken settings files.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "FormError",
    "UnknownFieldError",
    "SettingsError",
]


class FormError(Exception):
    """Base exception for all form errors.

    Provides structured error information for debugging.
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.field = field
        self.details = details or {}
        self.suggestion = suggestion

        parts = [message]

        if field:
            parts.insert(0, f"[{field}]")

        if details:
            detail_lines = [f"  {k}: {v}" for k, v in details.items()]
            parts.append("\nDetails:")
            parts.extend(detail_lines)

        if suggestion:
            parts.append(f"\nSuggestion: {suggestion}")

        super().__init__("\n".join(parts) if len(parts) > 1 else message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "field": self.field,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class UnknownFieldError(FormError, KeyError):
    """A field path does not exist in the form."""

    def __init__(self, path: str, *, available: Optional[list[str]] = None) -> None:
        details: Dict[str, Any] = {}
        if available:
            details["available"] = ", ".join(available)
        super().__init__(
            f"Unknown field '{path}'",
            field=path,
            details=details,
            suggestion="Nested fields use dotted paths, e.g. 'address.zip'",
        )

    def __str__(self) -> str:
        return Exception.__str__(self)


class SettingsError(FormError):
    """A settings file exists but cannot be used."""

    def __init__(self, message: str, *, path: Optional[str] = None, **kwargs: Any) -> None:
        self.path = path
        details = kwargs.pop("details", {})
        if path:
            details["path"] = path
        super().__init__(message, details=details, **kwargs)

"""Outcome of a submit attempt."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping, Optional

from jobform.validators import ErrorKind


def freeze(values: Mapping[str, Any]) -> Mapping[str, Any]:
    """Read-only view over a fresh copy of ``values``, nested groups included."""
    return MappingProxyType(
        {
            key: freeze(value) if isinstance(value, Mapping) else value
            for key, value in values.items()
        }
    )


def thaw(values: Mapping[str, Any]) -> dict[str, Any]:
    """Plain nested dict copy of a frozen mapping."""
    return {
        key: thaw(value) if isinstance(value, Mapping) else value
        for key, value in values.items()
    }


@dataclass(frozen=True)
class SubmissionResult:
    """Result of ``ApplicationForm.submit``.

    Attributes:
        ok: Whether the form was valid and the snapshot taken
        snapshot: Read-only copy of all values (None on failure)
        errors: Errors per dotted path (empty on success)
        submitted_at: When the attempt was made (UTC)
    """

    ok: bool
    snapshot: Optional[Mapping[str, Any]] = None
    errors: Mapping[str, list[ErrorKind]] = field(default_factory=dict)
    submitted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def success(cls, values: Mapping[str, Any]) -> "SubmissionResult":
        return cls(ok=True, snapshot=freeze(values))

    @classmethod
    def failure(cls, errors: Mapping[str, list[ErrorKind]]) -> "SubmissionResult":
        return cls(ok=False, errors=MappingProxyType(dict(errors)))

    def to_dict(self) -> dict[str, Any]:
        """Plain copy of the snapshot (empty on failure)."""
        return thaw(self.snapshot) if self.snapshot is not None else {}

    def error_count(self) -> int:
        return len(self.errors)

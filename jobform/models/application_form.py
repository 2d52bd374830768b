"""Main state container for the job application form.

This class provides a UI-agnostic representation of the form that can be
tested without Textual. It owns the field tree, reacts to changes of the job
category by rebuilding the category fields, and gates submission.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from jobform.constants import DISCRIMINATOR_FIELD, JobCategory
from jobform.models.field_group import FieldGroup, FieldPath, split_path
from jobform.models.field_metadata import (
    build_root_group,
    derive_fields,
    get_conditional_visibility,
)
from jobform.models.field_state import FieldState
from jobform.models.submission import SubmissionResult
from jobform.validators import ErrorKind

logger = logging.getLogger(__name__)


@dataclass
class ApplicationForm:
    """UI-agnostic state for a single job application.

    Attributes:
        root: Field tree holding every field, including the address group
        category: Currently selected job category
        discriminator: Name of the field that selects the category
    """

    root: FieldGroup = field(default_factory=build_root_group)
    category: JobCategory = JobCategory.UNSELECTED
    discriminator: str = DISCRIMINATOR_FIELD

    @classmethod
    def from_schema_defaults(cls) -> "ApplicationForm":
        """Create a new form with every field empty and category fields unvalidated."""
        return cls()

    @property
    def show_additional_fields(self) -> bool:
        """Whether the category-specific section should be displayed.

        An unrecognised category value owns no fields, so there is no section
        to show for it even though the discriminator is not blank.
        """
        return self.category is not JobCategory.UNSELECTED

    def get_field(self, path: FieldPath) -> FieldState:
        """Look up a field by dotted path (e.g. ``address.zip``)."""
        return self.root.get_field(path)

    def get_value(self, path: FieldPath) -> Any:
        return self.get_field(path).value

    def set_value(self, path: FieldPath, value: Any) -> None:
        """Apply an edit event.

        Writing the discriminator, even with an unchanged value, rebuilds the
        category fields.

        Raises:
            UnknownFieldError: If the path does not name a field
        """
        target = self.get_field(path)
        target.set_value(value)
        if split_path(path) == (self.discriminator,):
            self._on_category_changed(value)

    def set_values(self, values: Mapping[str, Any]) -> None:
        """Apply a nested mapping of values.

        The discriminator is written first so that the category reset does
        not wipe category fields given in the same mapping.
        """
        if self.discriminator in values:
            self.set_value(self.discriminator, values[self.discriminator])
        for path, value in _flatten(values):
            if path != self.discriminator:
                self.set_value(path, value)

    def _on_category_changed(self, value: Any) -> None:
        category = JobCategory.parse(value)
        if category is None:
            logger.warning("Unknown job category %r; treating as unselected", value)
            category = JobCategory.UNSELECTED
        else:
            self.get_field(self.discriminator).set_value(category.value)

        previous = self.category
        self.category = category
        for spec in derive_fields(category):
            self.root.replace(spec.name, spec.build())

        logger.debug(
            "Job category changed from %r to %r",
            previous.value,
            category.value,
            extra={"installed": [n for n, shown in self.visibility().items() if shown]},
        )

    def visibility(self) -> dict[str, bool]:
        """Category field name -> whether it applies to the current category."""
        return get_conditional_visibility(self.category)

    def mark_touched(self, path: FieldPath) -> None:
        self.get_field(path).mark_touched()

    def mark_all_touched(self) -> None:
        self.root.mark_all_touched()

    def errors(self) -> dict[str, list[ErrorKind]]:
        """Current errors for every invalid field."""
        return self.root.errors()

    def visible_errors(self) -> dict[str, list[ErrorKind]]:
        """Errors for fields the user has touched."""
        return self.root.visible_errors()

    def error_messages(self, path: FieldPath) -> list[str]:
        """User-facing messages for one field's visible errors."""
        return self.get_field(path).error_messages()

    def is_valid(self) -> bool:
        return self.root.is_valid()

    def values(self) -> dict[str, Any]:
        """Plain nested copy of every value."""
        return self.root.to_dict()

    def reset(self) -> None:
        """Return every field to its schema default."""
        self.root = build_root_group(self.root.name)
        self.category = JobCategory.UNSELECTED

    def submit(self) -> SubmissionResult:
        """Validate the whole form and take a snapshot if it passes.

        On failure every field is marked touched so latent errors become
        visible. Never raises.
        """
        if self.is_valid():
            result = SubmissionResult.success(self.values())
            logger.info(
                "Application submitted",
                extra={"job_category": self.category.value},
            )
            return result

        self.mark_all_touched()
        errors = self.errors()
        logger.info(
            "Application rejected with %d invalid field(s)",
            len(errors),
            extra={"invalid_fields": sorted(errors)},
        )
        return SubmissionResult.failure(errors)


def _flatten(values: Mapping[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
    """Flatten nested values into dotted paths."""
    result: list[tuple[str, Any]] = []
    for key, value in values.items():
        path = f"{prefix}{key}"
        if isinstance(value, Mapping):
            result.extend(_flatten(value, f"{path}."))
        else:
            result.append((path, value))
    return result

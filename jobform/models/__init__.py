"""UI-agnostic state management for the application form.

This module provides testable state classes that can be used without
Textual dependencies. The state layer tracks field values, rebuilds the
category-specific fields when the job category changes, and gates
submission.
"""

from jobform.models.field_state import FieldState
from jobform.models.field_group import FieldGroup
from jobform.models.field_metadata import (
    BASE_FIELDS,
    CATEGORY_VALIDATORS,
    FieldSpec,
    GroupSpec,
    derive_fields,
    get_conditional_visibility,
)
from jobform.models.submission import SubmissionResult
from jobform.models.application_form import ApplicationForm

__all__ = [
    "ApplicationForm",
    "FieldState",
    "FieldGroup",
    "FieldSpec",
    "GroupSpec",
    "SubmissionResult",
    "BASE_FIELDS",
    "CATEGORY_VALIDATORS",
    "derive_fields",
    "get_conditional_visibility",
]

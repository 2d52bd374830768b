"""Field classification and conditional validation rules.

This module defines the base fields that are always validated, the
category-specific fields, and the table that decides which validators those
fields carry for each job category.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from jobform import validators as v
from jobform.constants import (
    CATEGORY_FIELDS,
    CGPA_RANGE,
    CITY_LENGTH,
    DISCRIMINATOR_FIELD,
    EMAIL_MAX_LENGTH,
    EMPLOYER_LENGTH,
    GRADUATION_YEARS,
    INTERN_DURATION_MONTHS,
    JOB_CATEGORIES,
    MAX_AGE,
    MIN_AGE,
    MOBILE_PATTERN,
    NAME_LENGTH,
    NOTICE_PERIOD_DAYS,
    QUALIFICATION_LENGTH,
    ROLE_LENGTH,
    STATE_LENGTH,
    STREET_LENGTH,
    ZIP_PATTERN,
    JobCategory,
)
from jobform.models.field_group import FieldGroup
from jobform.models.field_state import FieldState
from jobform.validators import Validator


@dataclass(frozen=True)
class FieldSpec:
    """Declarative description of a field."""

    name: str
    validators: tuple[Validator, ...] = ()
    default: Any = ""

    def build(self) -> FieldState:
        """Create a fresh, untouched field from this spec."""
        return FieldState(name=self.name, value=self.default, validators=self.validators)


@dataclass(frozen=True)
class GroupSpec:
    """Declarative description of a nested group of fields."""

    name: str
    fields: tuple[Union[FieldSpec, "GroupSpec"], ...] = field(default_factory=tuple)

    def build(self) -> FieldGroup:
        group = FieldGroup(name=self.name)
        for spec in self.fields:
            group.add(spec.build())
        return group


def _name_validators() -> tuple[Validator, ...]:
    return (
        v.required(),
        v.length(*NAME_LENGTH),
        v.alpha_space(),
        v.no_whitespace(),
    )


ADDRESS_FIELDS = GroupSpec(
    "address",
    (
        FieldSpec("street", (v.required(), v.length(*STREET_LENGTH))),
        FieldSpec("city", (v.required(), v.no_whitespace(), v.length(*CITY_LENGTH))),
        FieldSpec("state", (v.required(), v.no_whitespace(), v.length(*STATE_LENGTH))),
        FieldSpec("zip", (v.required(), v.pattern(ZIP_PATTERN))),
    ),
)

# Fields validated the same way regardless of category
BASE_FIELDS: tuple[Union[FieldSpec, GroupSpec], ...] = (
    FieldSpec("firstname", _name_validators()),
    FieldSpec("lastname", _name_validators()),
    FieldSpec(
        "email",
        (v.required(), v.email(), v.length(max_length=EMAIL_MAX_LENGTH)),
    ),
    FieldSpec("mobile", (v.required(), v.pattern(MOBILE_PATTERN))),
    FieldSpec("birthday", (v.required(), v.age_range(MIN_AGE, MAX_AGE))),
    ADDRESS_FIELDS,
    FieldSpec(
        DISCRIMINATOR_FIELD,
        (v.required(), v.one_of(c.value for c in JOB_CATEGORIES)),
    ),
)

# Validators installed on category fields, per category
CATEGORY_VALIDATORS: dict[JobCategory, dict[str, tuple[Validator, ...]]] = {
    JobCategory.UNSELECTED: {},
    JobCategory.FRESHER: {
        "graduationYear": (v.required(), v.year_range(*GRADUATION_YEARS)),
        "highestQualification": (
            v.required(),
            v.no_whitespace(),
            v.length(*QUALIFICATION_LENGTH),
        ),
        "cgpa": (v.required(), v.numeric_range(*CGPA_RANGE)),
    },
    JobCategory.INTERNSHIP: {
        "internshipType": (v.required(),),
        "internDuration": (v.required(), v.numeric_range(*INTERN_DURATION_MONTHS)),
    },
    JobCategory.WORKING_PROFESSIONAL: {
        "currentEmployer": (
            v.required(),
            v.length(*EMPLOYER_LENGTH),
            v.no_whitespace(),
        ),
        "currentRole": (
            v.required(),
            v.length(*ROLE_LENGTH),
            v.no_whitespace(),
        ),
        "noticePeriod": (v.required(), v.numeric_range(*NOTICE_PERIOD_DAYS)),
    },
}


def derive_fields(category: JobCategory) -> list[FieldSpec]:
    """Specs for every category field under ``category``.

    Fields the category does not own get no validators, so rebuilding from
    this list leaves nothing behind from a previous category.

    Args:
        category: Selected job category

    Returns:
        One spec per name in ``CATEGORY_FIELDS``, in that order
    """
    owned = CATEGORY_VALIDATORS.get(category, {})
    return [FieldSpec(name, owned.get(name, ())) for name in CATEGORY_FIELDS]


def get_owned_fields(category: JobCategory) -> list[str]:
    """Category fields that are validated under ``category``."""
    return list(CATEGORY_VALIDATORS.get(category, {}))


def get_conditional_visibility(category: JobCategory) -> dict[str, bool]:
    """Map each category field to whether it is shown for ``category``."""
    owned = set(get_owned_fields(category))
    return {name: name in owned for name in CATEGORY_FIELDS}


def build_root_group(name: str = "application") -> FieldGroup:
    """Build the full field tree with category fields unvalidated."""
    root = GroupSpec(name, BASE_FIELDS).build()
    for spec in derive_fields(JobCategory.UNSELECTED):
        root.add(spec.build())
    return root

"""Shared constants for the application form.

Centralizes field names, bounds, categories and user-facing error text. None
of these are runtime-configurable.
"""

from __future__ import annotations

from enum import Enum

from jobform.validators import ErrorKind


class JobCategory(str, Enum):
    """Values of the discriminator field."""

    UNSELECTED = ""
    FRESHER = "Fresher"
    INTERNSHIP = "Internship"
    WORKING_PROFESSIONAL = "Working Professional"

    @classmethod
    def parse(cls, value: object) -> "JobCategory | None":
        """Map a raw discriminator value to a category.

        Returns None for values outside the enumerated list. Blank input is
        ``UNSELECTED``; the compact token ``WorkingProfessional`` is accepted.
        """
        if value is None:
            return cls.UNSELECTED
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for category in cls:
            if text == category.value or text == category.value.replace(" ", ""):
                return category
        return None


# Selectable categories, in display order
JOB_CATEGORIES: tuple[JobCategory, ...] = (
    JobCategory.FRESHER,
    JobCategory.INTERNSHIP,
    JobCategory.WORKING_PROFESSIONAL,
)

DISCRIMINATOR_FIELD = "jobCategory"
ADDRESS_GROUP = "address"

# Fields whose validators depend on the selected category
CATEGORY_FIELDS: tuple[str, ...] = (
    "graduationYear",
    "highestQualification",
    "cgpa",
    "internshipType",
    "internDuration",
    "currentEmployer",
    "currentRole",
    "noticePeriod",
)

MOBILE_PATTERN = r"^[0-9]{10}$"
ZIP_PATTERN = r"^[0-9]{6}$"

MIN_AGE = 18
MAX_AGE = 50

NAME_LENGTH = (2, 40)
EMAIL_MAX_LENGTH = 40
STREET_LENGTH = (5, 80)
CITY_LENGTH = (2, 30)
STATE_LENGTH = (2, 30)

GRADUATION_YEARS = (2022, 2024)
QUALIFICATION_LENGTH = (2, 30)
CGPA_RANGE = (60, 100)
INTERN_DURATION_MONTHS = (3, 6)
EMPLOYER_LENGTH = (2, 60)
ROLE_LENGTH = (2, 50)
NOTICE_PERIOD_DAYS = (1, 90)

# Display labels, keyed by field name
FIELD_LABELS: dict[str, str] = {
    "firstname": "First Name",
    "lastname": "Last Name",
    "email": "Email",
    "mobile": "Mobile Number",
    "birthday": "Date of Birth",
    "street": "Street",
    "city": "City",
    "state": "State",
    "zip": "Postal Code",
    "jobCategory": "Job Category",
    "graduationYear": "Graduation Year",
    "highestQualification": "Highest Qualification",
    "cgpa": "CGPA (%)",
    "internshipType": "Internship Type",
    "internDuration": "Internship Duration (months)",
    "currentEmployer": "Current Employer",
    "currentRole": "Current Role",
    "noticePeriod": "Notice Period (days)",
}

ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.MISSING: "This field is required",
    ErrorKind.TOO_SHORT: "Value is too short",
    ErrorKind.TOO_LONG: "Value is too long",
    ErrorKind.PATTERN_MISMATCH: "Value is not in the expected format",
    ErrorKind.ALPHA_SPACE: "Only letters and spaces are allowed",
    ErrorKind.BLANK_VALUE: "Value cannot be blank",
    ErrorKind.INVALID_EMAIL: "Enter a valid email address",
    ErrorKind.AGE_OUT_OF_RANGE: f"Age must be between {MIN_AGE} and {MAX_AGE}",
    ErrorKind.OUT_OF_RANGE: "Value is out of range",
    ErrorKind.YEAR_OUT_OF_RANGE: "Year is out of range",
    ErrorKind.INVALID_CHOICE: "Select one of the listed options",
}

UNKNOWN_ERROR_MESSAGE = "Unknown error"


def get_error_text(kind: ErrorKind) -> str:
    """User-facing text for an error kind."""
    return ERROR_MESSAGES.get(kind, UNKNOWN_ERROR_MESSAGE)


def get_field_label(field_name: str) -> str:
    """Display label for a field, falling back to its name."""
    return FIELD_LABELS.get(field_name, field_name)

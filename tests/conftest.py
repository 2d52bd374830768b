"""Shared fixtures for jobform tests."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any, Generator

import pytest

from jobform.models import ApplicationForm


@pytest.fixture
def form() -> ApplicationForm:
    """A fresh form with every field empty."""
    return ApplicationForm.from_schema_defaults()


@pytest.fixture
def birthday() -> str:
    """ISO birth date that is comfortably inside the accepted age range."""
    return date(date.today().year - 30, 1, 1).isoformat()


@pytest.fixture
def base_values(birthday: str) -> dict[str, Any]:
    """Valid values for every field that does not depend on the category."""
    return {
        "firstname": "Asha",
        "lastname": "Menon",
        "email": "asha.menon@example.com",
        "mobile": "9876543210",
        "birthday": birthday,
        "address": {
            "street": "12 Lake View Road",
            "city": "Pune",
            "state": "Maharashtra",
            "zip": "411001",
        },
    }


@pytest.fixture
def fresher_values(base_values: dict[str, Any]) -> dict[str, Any]:
    """A complete, valid application for the Fresher category."""
    return {
        **base_values,
        "jobCategory": "Fresher",
        "graduationYear": "2023",
        "highestQualification": "B.Tech",
        "cgpa": "75",
    }


@pytest.fixture
def tmp_settings_yaml(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a settings file with a custom notification timeout."""
    settings_file = tmp_path / ".jobform.yaml"
    settings_file.write_text(
        """
form:
  notification_timeout_ms: 3000
  organization: Acme
  log_level: DEBUG
""",
        encoding="utf-8",
    )
    yield settings_file


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Put the root logger's handlers and level back after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)

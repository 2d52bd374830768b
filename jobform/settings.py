"""Project settings loader.

Reads project-specific configuration from .jobform.yaml in the project root.
Only presentation and logging are configurable; validation bounds and the
category list are fixed in ``jobform.constants``.

Example .jobform.yaml:
    form:
      notification_timeout_ms: 6000
      organization: Altimetrik
      log_level: DEBUG
      log_file: ./logs/jobform.log
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from jobform.errors import SettingsError

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = ".jobform.yaml"

DEFAULT_ACKNOWLEDGEMENT = (
    "Job submitted successfully! {organization} HR team will review and contact you!"
)


@dataclass
class FormSettings:
    """Application settings."""

    # How long the acknowledgement stays on screen
    notification_timeout_ms: int = 6000

    organization: str = "Altimetrik"
    acknowledgement_template: str = DEFAULT_ACKNOWLEDGEMENT

    log_level: str = "INFO"
    log_format: str = "human"
    log_file: str | None = None

    @classmethod
    def load(cls, path: Path | None = None, *, strict: bool = False) -> "FormSettings":
        """Load settings from a YAML file.

        Args:
            path: Settings file. Defaults to .jobform.yaml in the cwd.
            strict: Raise instead of falling back to defaults on a bad file.

        Returns:
            FormSettings with values from the file or defaults.

        Raises:
            SettingsError: If ``strict`` and the file cannot be used.
        """
        config_path = path or Path.cwd() / SETTINGS_FILENAME

        if not config_path.exists():
            return cls()

        try:
            return cls.from_dict(_read_section(config_path))
        except (OSError, yaml.YAMLError, SettingsError, TypeError, ValueError) as e:
            if strict:
                if isinstance(e, SettingsError):
                    raise
                raise SettingsError(
                    f"Cannot load settings: {e}", path=str(config_path)
                ) from e
            logger.warning("Ignoring malformed settings file %s: %s", config_path, e)
            return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FormSettings":
        """Build settings from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise SettingsError(
                "Unknown settings keys",
                details={"keys": ", ".join(unknown)},
                suggestion=f"Valid keys: {', '.join(sorted(known))}",
            )

        settings = cls(**data)
        settings.notification_timeout_ms = int(settings.notification_timeout_ms)
        if settings.notification_timeout_ms <= 0:
            raise SettingsError("notification_timeout_ms must be positive")
        return settings

    @property
    def notification_timeout(self) -> float:
        """Acknowledgement duration in seconds."""
        return self.notification_timeout_ms / 1000

    def acknowledgement(self) -> str:
        """Text shown after a successful submission."""
        return self.acknowledgement_template.format(organization=self.organization)

    def get_log_file(self, project_root: Path | None = None) -> Path | None:
        """Absolute path to the log file, if one is configured."""
        if not self.log_file:
            return None
        root = project_root or Path.cwd()
        return (root / self.log_file).resolve()


def _read_section(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise SettingsError("Settings file must contain a mapping", path=str(path))
    section = config.get("form", {}) or {}
    if not isinstance(section, dict):
        raise SettingsError("'form' section must be a mapping", path=str(path))
    return section


# Global settings instance (loaded on first access)
_settings: FormSettings | None = None


def get_settings(reload: bool = False) -> FormSettings:
    """Get the global settings.

    Args:
        reload: Force reload from the settings file.

    Returns:
        FormSettings instance.
    """
    global _settings
    if _settings is None or reload:
        _settings = FormSettings.load()
    return _settings

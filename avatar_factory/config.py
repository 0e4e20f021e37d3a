"""User configuration for the avatar-factory CLI.

Settings live in a YAML file at $AVATAR_FACTORY_CONFIG, or
~/.config/avatar-factory/config.yaml by default. Missing files mean
defaults. Keys are addressed with dotted names, e.g. `render.strict`.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_ENV = "AVATAR_FACTORY_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "avatar-factory" / "config.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when the config file cannot be read or fails validation."""


class TemplateSettings(BaseModel):
    """Where templates and the catalog are read from."""

    directory: str | None = Field(
        default=None, description="Template directory (packaged templates if unset)"
    )
    catalog: str | None = Field(
        default=None, description="Catalog YAML file (packaged catalog if unset)"
    )


class RenderSettings(BaseModel):
    """Defaults for the render command."""

    strict: bool = Field(default=False, description="Reject parts from the other head group")
    data_uri: bool = Field(default=False, description="Print a base64 data URI instead of SVG")


class LoggingSettings(BaseModel):
    level: str = Field(default="WARNING", description="Root log level for the CLI")


class AvatarConfig(BaseModel):
    """Complete CLI configuration."""

    templates: TemplateSettings = Field(default_factory=TemplateSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @staticmethod
    def path() -> Path:
        """Configuration file location."""
        override = os.environ.get(CONFIG_ENV)
        return Path(override) if override else DEFAULT_CONFIG_PATH

    @classmethod
    def load(cls, path: Path | None = None) -> "AvatarConfig":
        """Load configuration, falling back to defaults if the file is absent.

        Raises:
            ConfigError: Unreadable YAML or values that fail validation
        """
        path = path or cls.path()
        if not path.is_file():
            return cls()
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            return cls.model_validate(data)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
        except ValidationError as e:
            raise ConfigError(f"Invalid config file {path}:\n{e}") from e

    def save(self, path: Path | None = None) -> Path:
        path = path or self.path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self.model_dump(), f, sort_keys=False)
        return path

    def keys(self) -> list[str]:
        """All settable dotted keys."""
        return [
            f"{section}.{field}"
            for section, model in self
            for field in type(model).model_fields
        ]

    def set_value(self, key: str, raw: str) -> None:
        """Set a dotted key from its string form.

        Raises:
            ValueError: Unknown key or a value that does not parse
        """
        section_name, _, field_name = key.partition(".")
        section = getattr(self, section_name, None)
        if not isinstance(section, BaseModel) or field_name not in type(section).model_fields:
            raise ValueError(f"Unknown key '{key}'. Valid keys: {', '.join(self.keys())}")

        current = getattr(section, field_name)
        if isinstance(current, bool):
            value = _parse_bool(raw)
        elif key == "logging.level":
            value = raw.upper()
            if value not in LOG_LEVELS:
                raise ValueError(f"Invalid level '{raw}'. Choose from: {', '.join(LOG_LEVELS)}")
        elif raw.lower() in ("", "none", "null"):
            value = None
        else:
            value = raw

        setattr(section, field_name, value)

    def log_level(self) -> int:
        return getattr(logging, self.logging.level.upper(), logging.WARNING)


def _parse_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in ("true", "yes", "on", "1"):
        return True
    if lowered in ("false", "no", "off", "0"):
        return False
    raise ValueError(f"Invalid boolean '{raw}'. Use true or false")

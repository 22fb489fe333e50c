# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings file model for the CellML validator."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# ###############
# Public Interface
# ###############

SETTINGS_FILE_NAME = ".cellml-validator.yaml"


class SettingsError(Exception):
    """Raised when a settings file cannot be read or is invalid."""


class ValidatorSettings(BaseModel):
    """Options read from a ``.cellml-validator.yaml`` file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    mathml_dtd: Path | None = Field(alias="mathml-dtd", default=None)
    log_level: str = Field(alias="log-level", default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level


def load_settings(path: Path) -> ValidatorSettings:
    """Load and validate a settings file.

    An empty file yields the default settings. A relative ``mathml-dtd`` path
    is resolved against the directory holding the settings file.

    Args:
        path: Path to the settings file.

    Returns:
        A validated ValidatorSettings instance.

    Raises:
        SettingsError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in settings file '{path}': {exc}") from exc

    if data is None:
        data = {}

    try:
        settings = ValidatorSettings.model_validate(data)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings file '{path}': {exc}") from exc

    if settings.mathml_dtd is not None and not settings.mathml_dtd.is_absolute():
        settings.mathml_dtd = path.parent / settings.mathml_dtd
    return settings

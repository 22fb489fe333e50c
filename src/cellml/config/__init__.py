# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings for the CellML validator."""

from cellml.config.settings import (
    SETTINGS_FILE_NAME,
    SettingsError,
    ValidatorSettings,
    load_settings,
)

__all__ = [
    "SETTINGS_FILE_NAME",
    "SettingsError",
    "ValidatorSettings",
    "load_settings",
]

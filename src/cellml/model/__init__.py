# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic model for CellML (models, components, units, variables)."""

from cellml.model.entities import (
    Component,
    ImportSource,
    Model,
    Unit,
    Units,
    Variable,
)
from cellml.model.units import (
    SI_PREFIXES,
    STANDARD_UNIT_NAMES,
    StandardUnit,
    check_unit_entries,
    is_standard_unit,
)

__all__ = [
    # Units vocabulary
    "StandardUnit",
    "STANDARD_UNIT_NAMES",
    "SI_PREFIXES",
    "is_standard_unit",
    "check_unit_entries",
    # Entities
    "ImportSource",
    "Unit",
    "Units",
    "Variable",
    "Component",
    "Model",
]

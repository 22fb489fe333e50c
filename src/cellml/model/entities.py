# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Core entities of the CellML model: models, components, units and variables.

Attribute values are kept as the raw strings found in the document (``""``
when absent) so that the validator can report on malformed values instead of
the reader rejecting them.
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

from cellml.model.units import check_unit_entries

# ###############
# Public Interface
# ###############


class ImportSource(BaseModel):
    """The document an imported component or units is taken from."""

    href: str = ""


class Unit(BaseModel):
    """One ``unit`` child of a units definition."""

    units: str = ""
    prefix: str = ""
    exponent: str = ""
    multiplier: str = ""


class Units(BaseModel):
    """A named units definition, either local or imported."""

    name: str = ""
    units: list[Unit] = _Field(default_factory=list)
    import_source: ImportSource | None = None
    import_reference: str = ""

    @property
    def is_import(self) -> bool:
        """Return True if this units is imported from another document."""
        return self.import_source is not None

    def unit_validation_errors(self, units_names: list[str]) -> list[str]:
        """Return messages for invalid unit entries, given the units names in scope."""
        return check_unit_entries(self.name, self.units, units_names)


class Variable(BaseModel):
    """A variable declared in a component."""

    name: str = ""
    units: str = ""
    interface_type: str = ""
    initial_value: str = ""


class Component(BaseModel):
    """A component holding units, variables and the MathML relating them."""

    name: str = ""
    units: list[Units] = _Field(default_factory=list)
    variables: list[Variable] = _Field(default_factory=list)
    math: str = ""
    import_source: ImportSource | None = None
    import_reference: str = ""

    @property
    def is_import(self) -> bool:
        """Return True if this component is imported from another document."""
        return self.import_source is not None

    def has_units(self, name: str) -> bool:
        """Return True if this component declares a units called *name*."""
        return any(units.name == name for units in self.units)


class Model(BaseModel):
    """Top-level CellML model."""

    name: str = ""
    components: list[Component] = _Field(default_factory=list)
    units: list[Units] = _Field(default_factory=list)

# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Standard unit names, SI prefixes and checks for the entries of a units definition."""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING

from cellml.literals import is_invalid_double

if TYPE_CHECKING:
    from cellml.model.entities import Unit

# ###############
# Public Interface
# ###############


class StandardUnit(Enum):
    """Unit names built into CellML. User-defined units may not reuse them."""

    AMPERE = "ampere"
    BECQUEREL = "becquerel"
    CANDELA = "candela"
    CELSIUS = "celsius"
    COULOMB = "coulomb"
    DIMENSIONLESS = "dimensionless"
    FARAD = "farad"
    GRAM = "gram"
    GRAY = "gray"
    HENRY = "henry"
    HERTZ = "hertz"
    JOULE = "joule"
    KATAL = "katal"
    KELVIN = "kelvin"
    KILOGRAM = "kilogram"
    LITER = "liter"
    LITRE = "litre"
    LUMEN = "lumen"
    LUX = "lux"
    METER = "meter"
    METRE = "metre"
    MOLE = "mole"
    NEWTON = "newton"
    OHM = "ohm"
    PASCAL = "pascal"
    RADIAN = "radian"
    SECOND = "second"
    SIEMENS = "siemens"
    SIEVERT = "sievert"
    STERADIAN = "steradian"
    TESLA = "tesla"
    VOLT = "volt"
    WATT = "watt"
    WEBER = "weber"


STANDARD_UNIT_NAMES: frozenset[str] = frozenset(unit.value for unit in StandardUnit)

# SI prefix names and the power of ten each one stands for.
SI_PREFIXES: dict[str, int] = {
    "yotta": 24,
    "zetta": 21,
    "exa": 18,
    "peta": 15,
    "tera": 12,
    "giga": 9,
    "mega": 6,
    "kilo": 3,
    "hecto": 2,
    "deca": 1,
    "deci": -1,
    "centi": -2,
    "milli": -3,
    "micro": -6,
    "nano": -9,
    "pico": -12,
    "femto": -15,
    "atto": -18,
    "zepto": -21,
    "yocto": -24,
}


def is_standard_unit(name: str) -> bool:
    """Return True if *name* is one of the reserved standard unit names."""
    return name in STANDARD_UNIT_NAMES


def check_unit_entries(units_name: str, entries: list[Unit], units_names: list[str]) -> list[str]:
    """Check the ``unit`` children of a units definition.

    Args:
        units_name: Name of the owning units, used in messages.
        entries: The unit entries to check.
        units_names: Names of the units declared in the enclosing scope. A
            unit may reference any of these or a standard unit.

    Returns:
        One message per problem found, in entry order.
    """
    messages: list[str] = []
    for entry in entries:
        reference = entry.units
        if not reference:
            messages.append(f"Unit in units '{units_name}' does not have a valid units reference.")
        elif not is_standard_unit(reference) and reference not in units_names:
            messages.append(
                f"Units reference '{reference}' in units '{units_name}' is not a valid reference "
                "to a local units or a standard unit type."
            )
        if entry.prefix and entry.prefix not in SI_PREFIXES and _INTEGER.fullmatch(entry.prefix) is None:
            messages.append(
                f"Prefix '{entry.prefix}' of a unit referencing '{reference}' in units '{units_name}' "
                "is not a valid integer or an SI prefix."
            )
        if entry.exponent and is_invalid_double(entry.exponent):
            messages.append(
                f"Exponent '{entry.exponent}' of a unit referencing '{reference}' in units '{units_name}' "
                "cannot be converted to a real number."
            )
        if entry.multiplier and is_invalid_double(entry.multiplier):
            messages.append(
                f"Multiplier '{entry.multiplier}' of a unit referencing '{reference}' in units '{units_name}' "
                "cannot be converted to a real number."
            )
    return messages


# ################
# Implementation
# ################

_INTEGER = re.compile(r"[+-]?[0-9]+")

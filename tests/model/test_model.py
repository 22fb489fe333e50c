# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the CellML entity model and the standard unit vocabulary."""

import pytest

from cellml.model import (
    SI_PREFIXES,
    STANDARD_UNIT_NAMES,
    Component,
    ImportSource,
    Model,
    StandardUnit,
    Unit,
    Units,
    Variable,
    check_unit_entries,
    is_standard_unit,
)

# ###############
# Entities
# ###############


def test_model_defaults_are_empty() -> None:
    """A bare model has an empty name and no children."""
    model = Model()
    assert model.name == ""
    assert model.components == []
    assert model.units == []


def test_component_holds_variables_units_and_math() -> None:
    component = Component(
        name="membrane",
        units=[Units(name="millivolt", units=[Unit(units="volt", prefix="milli")])],
        variables=[Variable(name="V", units="millivolt", interface_type="public", initial_value="-80")],
        math="<math/>",
    )
    assert component.variables[0].initial_value == "-80"
    assert component.units[0].units[0].prefix == "milli"
    assert component.math == "<math/>"
    assert not component.is_import


def test_component_has_units() -> None:
    component = Component(name="c", units=[Units(name="millivolt"), Units(name="per_second")])
    assert component.has_units("millivolt")
    assert component.has_units("per_second")
    assert not component.has_units("volt")


def test_imported_component() -> None:
    component = Component(name="gate", import_source=ImportSource(href="gates.cellml"), import_reference="m_gate")
    assert component.is_import
    assert component.import_source.href == "gates.cellml"
    assert component.import_reference == "m_gate"


def test_imported_units() -> None:
    units = Units(name="mV", import_source=ImportSource(href="units.cellml"), import_reference="millivolt")
    assert units.is_import
    assert not Units(name="mV").is_import


def test_models_compare_by_value() -> None:
    """Entities are plain values; a deep copy compares equal to the original."""
    model = Model(name="m", components=[Component(name="c", variables=[Variable(name="x", units="second")])])
    assert model.model_copy(deep=True) == model


# ###############
# Standard Units
# ###############


class TestStandardUnits:
    def test_there_are_34_standard_units(self) -> None:
        assert len(StandardUnit) == 34
        assert len(STANDARD_UNIT_NAMES) == 34

    @pytest.mark.parametrize("name", ["ampere", "second", "litre", "liter", "metre", "meter", "weber", "dimensionless"])
    def test_standard_names(self, name: str) -> None:
        assert is_standard_unit(name)

    @pytest.mark.parametrize("name", ["", "Second", "seconds", "millivolt", "kilometre", " volt"])
    def test_non_standard_names(self, name: str) -> None:
        assert not is_standard_unit(name)

    def test_enum_values_match_name_set(self) -> None:
        assert {unit.value for unit in StandardUnit} == STANDARD_UNIT_NAMES

    def test_si_prefixes(self) -> None:
        assert SI_PREFIXES["milli"] == -3
        assert SI_PREFIXES["kilo"] == 3
        assert len(SI_PREFIXES) == 20


# ###############
# Unit Entries
# ###############


class TestUnitEntries:
    def test_standard_and_local_references_are_valid(self) -> None:
        units = Units(name="mV_per_ms", units=[Unit(units="millivolt"), Unit(units="second", exponent="-1")])
        assert units.unit_validation_errors(["millivolt", "mV_per_ms"]) == []

    def test_no_entries_no_errors(self) -> None:
        assert Units(name="empty").unit_validation_errors([]) == []

    def test_missing_reference(self) -> None:
        units = Units(name="u", units=[Unit()])
        assert units.unit_validation_errors([]) == ["Unit in units 'u' does not have a valid units reference."]

    def test_unknown_reference(self) -> None:
        units = Units(name="u", units=[Unit(units="furlong")])
        assert units.unit_validation_errors(["u"]) == [
            "Units reference 'furlong' in units 'u' is not a valid reference to a local units or a standard unit type."
        ]

    @pytest.mark.parametrize("prefix", ["milli", "kilo", "3", "-6", "+2"])
    def test_valid_prefixes(self, prefix: str) -> None:
        assert check_unit_entries("u", [Unit(units="volt", prefix=prefix)], []) == []

    @pytest.mark.parametrize("prefix", ["Milli", "kilo ", "1.5", "mega-"])
    def test_invalid_prefixes(self, prefix: str) -> None:
        messages = check_unit_entries("u", [Unit(units="volt", prefix=prefix)], [])
        assert len(messages) == 1
        assert f"Prefix '{prefix}'" in messages[0]
        assert "is not a valid integer or an SI prefix" in messages[0]

    def test_invalid_exponent_and_multiplier(self) -> None:
        messages = check_unit_entries("u", [Unit(units="volt", exponent="two", multiplier="x1")], [])
        assert len(messages) == 2
        assert messages[0].startswith("Exponent 'two' of a unit referencing 'volt' in units 'u'")
        assert messages[1].startswith("Multiplier 'x1' of a unit referencing 'volt' in units 'u'")

    def test_messages_follow_entry_order(self) -> None:
        entries = [Unit(units="bogus"), Unit(units="volt", prefix="huge")]
        messages = check_unit_entries("u", entries, [])
        assert "'bogus'" in messages[0]
        assert "'huge'" in messages[1]

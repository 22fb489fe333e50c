# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the CellML XML reader."""

from pathlib import Path

import pytest

from cellml.model import Model
from cellml.parser import ParseError, parse_model, parse_model_file
from cellml.validation import validate_model

_EXAMPLE = Path(__file__).parents[2] / "docs" / "examples" / "membrane.cellml"


def _doc(body: str, name: str = "m") -> str:
    return (
        '<model xmlns="http://www.cellml.org/cellml/2.0#" '
        'xmlns:cellml="http://www.cellml.org/cellml/2.0#" '
        f'xmlns:xlink="http://www.w3.org/1999/xlink" name="{name}">{body}</model>'
    )


# ###############
# Entities
# ###############


class TestReadEntities:
    def test_empty_model(self) -> None:
        assert parse_model(_doc("")) == Model(name="m")

    def test_model_without_name(self) -> None:
        assert parse_model('<model xmlns="http://www.cellml.org/cellml/2.0#"/>').name == ""

    def test_units(self) -> None:
        model = parse_model(
            _doc('<units name="per_mV"><unit units="volt" prefix="milli" exponent="-1" multiplier="2"/></units>')
        )
        units = model.units[0]
        assert units.name == "per_mV"
        assert not units.is_import
        unit = units.units[0]
        assert (unit.units, unit.prefix, unit.exponent, unit.multiplier) == ("volt", "milli", "-1", "2")

    def test_component_variables(self) -> None:
        model = parse_model(
            _doc(
                '<component name="c">'
                '<variable name="V" units="volt" interface="public" initial_value="-80"/>'
                '<variable name="t"/>'
                "</component>"
            )
        )
        component = model.components[0]
        assert component.name == "c"
        first, second = component.variables
        assert (first.name, first.units, first.interface_type, first.initial_value) == ("V", "volt", "public", "-80")
        assert (second.units, second.interface_type, second.initial_value) == ("", "", "")

    def test_component_units(self) -> None:
        model = parse_model(_doc('<component name="c"><units name="ms"><unit units="second"/></units></component>'))
        assert model.components[0].has_units("ms")

    def test_component_math(self) -> None:
        model = parse_model(
            _doc(
                '<component name="c"><variable name="x" units="second"/>'
                '<math xmlns="http://www.w3.org/1998/Math/MathML"><apply><eq/><ci>x</ci>'
                '<cn cellml:units="second">1</cn></apply></math></component>'
            )
        )
        math = model.components[0].math
        assert math.startswith("<math")
        assert "<ci>x</ci>" in math
        assert 'cellml:units="second"' in math

    def test_imports(self) -> None:
        model = parse_model(
            _doc(
                '<import xlink:href="lib.cellml">'
                '<component name="gate" component_ref="m_gate"/>'
                '<units name="mV" units_ref="millivolt"/>'
                "</import>"
            )
        )
        component = model.components[0]
        assert component.is_import
        assert component.import_source.href == "lib.cellml"
        assert component.import_reference == "m_gate"
        units = model.units[0]
        assert units.is_import
        assert units.import_reference == "millivolt"

    def test_import_without_href(self) -> None:
        model = parse_model(_doc('<import><component name="gate" component_ref="g"/></import>'))
        assert model.components[0].import_source.href == ""

    def test_document_order_is_kept(self) -> None:
        model = parse_model(
            _doc(
                '<component name="a"/>'
                '<import xlink:href="lib.cellml"><component name="b" component_ref="b"/></import>'
                '<component name="c"/>'
            )
        )
        assert [c.name for c in model.components] == ["a", "b", "c"]


# ###############
# Errors
# ###############


class TestReadErrors:
    def test_malformed_xml(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_model("<model")
        assert exc_info.value.line is not None

    def test_wrong_root(self) -> None:
        with pytest.raises(ParseError, match="not a CellML 2.0 model element"):
            parse_model('<component xmlns="http://www.cellml.org/cellml/2.0#"/>')

    def test_wrong_namespace(self) -> None:
        with pytest.raises(ParseError):
            parse_model('<model xmlns="http://www.cellml.org/cellml/1.1#" name="m"/>')

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ParseError, match="Cannot read"):
            parse_model_file(tmp_path / "missing.cellml")


# ###############
# Files
# ###############


def test_parse_model_file(tmp_path: Path) -> None:
    path = tmp_path / "model.cellml"
    path.write_text(_doc('<component name="c"/>', name="from_file"), encoding="utf-8")
    model = parse_model_file(path)
    assert model.name == "from_file"
    assert model.components[0].name == "c"


def test_example_model_is_valid() -> None:
    model = parse_model_file(_EXAMPLE)
    assert model.name == "membrane_model"
    assert [c.name for c in model.components] == ["sodium_gate", "membrane"]
    errors = validate_model(model)
    assert errors == [], [e.description for e in errors]

# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reader for CellML 2.0 XML documents.

Builds the :class:`~cellml.model.entities.Model` tree from a document. The
reader is lenient about attribute values (they are stored verbatim for the
validator to judge) but rejects documents that are not well-formed XML or
whose root is not a CellML ``model`` element.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from cellml.model.entities import Component, ImportSource, Model, Unit, Units, Variable
from cellml.xml.document import CELLML_NAMESPACE, MATHML_NAMESPACE, local_name, serialize

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Raised when a document cannot be read as a CellML model.

    Attributes:
        line: 1-based line number of the error, if known.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(f"Line {line}: {message}" if line is not None else message)
        self.line = line


def parse_model(text: str) -> Model:
    """Parse CellML 2.0 XML text into a Model.

    Args:
        text: The full text of a CellML document.

    Returns:
        The model described by the document.

    Raises:
        ParseError: If the text is not well-formed XML or its root element is
            not a CellML ``model``.
    """
    parser = etree.XMLParser(remove_blank_text=True, resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(text.encode("utf-8"), parser)
    except etree.XMLSyntaxError as exc:
        raise ParseError(exc.msg, exc.lineno) from exc

    if root.tag != _cellml("model"):
        raise ParseError(f"Root element '{local_name(root)}' is not a CellML 2.0 model element.", root.sourceline)
    return _read_model(root)


def parse_model_file(path: Path | str) -> Model:
    """Read and parse the CellML document at *path*.

    Raises:
        ParseError: If the file cannot be read or does not hold a CellML model.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ParseError(f"Cannot read '{path}': {exc}") from exc
    logger.debug("Parsing CellML document %s", path)
    return parse_model(text)


# ################
# Implementation
# ################

_XLINK_HREF = "{http://www.w3.org/1999/xlink}href"


def _cellml(tag: str) -> str:
    return f"{{{CELLML_NAMESPACE}}}{tag}"


def _read_model(element: etree._Element) -> Model:
    model = Model(name=element.get("name", ""))
    for child in element:
        if child.tag == _cellml("component"):
            model.components.append(_read_component(child))
        elif child.tag == _cellml("units"):
            model.units.append(_read_units(child))
        elif child.tag == _cellml("import"):
            _read_import(child, model)
    return model


def _read_import(element: etree._Element, model: Model) -> None:
    source = ImportSource(href=element.get(_XLINK_HREF, ""))
    for child in element:
        if child.tag == _cellml("component"):
            model.components.append(
                Component(
                    name=child.get("name", ""),
                    import_source=source,
                    import_reference=child.get("component_ref", ""),
                )
            )
        elif child.tag == _cellml("units"):
            model.units.append(
                Units(
                    name=child.get("name", ""),
                    import_source=source,
                    import_reference=child.get("units_ref", ""),
                )
            )


def _read_component(element: etree._Element) -> Component:
    component = Component(name=element.get("name", ""))
    math_parts: list[str] = []
    for child in element:
        if child.tag == _cellml("variable"):
            component.variables.append(
                Variable(
                    name=child.get("name", ""),
                    units=child.get("units", ""),
                    interface_type=child.get("interface", ""),
                    initial_value=child.get("initial_value", ""),
                )
            )
        elif child.tag == _cellml("units"):
            component.units.append(_read_units(child))
        elif child.tag == f"{{{MATHML_NAMESPACE}}}math":
            math_parts.append(serialize(child))
    component.math = "".join(math_parts)
    return component


def _read_units(element: etree._Element) -> Units:
    units = Units(name=element.get("name", ""))
    for child in element:
        if child.tag == _cellml("unit"):
            units.units.append(
                Unit(
                    units=child.get("units", ""),
                    prefix=child.get("prefix", ""),
                    exponent=child.get("exponent", ""),
                    multiplier=child.get("multiplier", ""),
                )
            )
    return units

# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation of the MathML embedded in a component.

The math string is parsed into a private lxml tree, which is walked twice:

1. Names bound by ``bvar`` elements are gathered so that ``ci`` references to
   them are accepted, and so that they can be checked against the
   component's own variable names.
2. Every ``ci`` and ``cn`` element is checked against the component's
   variables and units, and its ``cellml:units`` attribute is removed.

The cleaned tree is then validated against the MathML DTD. The component
itself is never modified.
"""

from __future__ import annotations

import logging

from lxml import etree

from cellml.literals import is_invalid_double, is_whitespace
from cellml.model.entities import Component
from cellml.model.units import is_standard_unit
from cellml.validation.errors import ErrorKind, ErrorSink, ValidationError
from cellml.xml.document import (
    CELLML_NAMESPACE,
    CELLML_NAMESPACE_DECLARATION,
    local_name,
    parse_mathml,
    parse_xml,
    serialize,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def validate_math(
    math: str,
    component: Component,
    variable_names: list[str],
    sink: ErrorSink,
    mathml_dtd: etree.DTD,
) -> None:
    """Validate the math of *component*, adding any errors to *sink*.

    Args:
        math: The component's MathML string.
        component: The component the math belongs to.
        variable_names: Non-empty variable names declared in the component.
        sink: Receives XML and MATHML errors in discovery order.
        mathml_dtd: DTD the cleaned MathML is validated against.
    """
    _MathWalker(component, variable_names, sink).run(math, mathml_dtd)


# ################
# Implementation
# ################


class _MathWalker:
    """Checks one component's math against its variables and units."""

    def __init__(self, component: Component, variable_names: list[str], sink: ErrorSink) -> None:
        self._component = component
        self._variable_names = variable_names
        self._sink = sink

    def run(self, math: str, mathml_dtd: etree.DTD) -> None:
        document = parse_xml(math)
        for message in document.errors:
            self._error(message, ErrorKind.XML)

        root = document.root
        if root is None:
            self._error(
                f"Could not get a valid XML root node from the math on component '{self._component.name}'.",
                ErrorKind.XML,
            )
            return
        root_type = local_name(root)
        if root_type != "math":
            self._error(
                f"Math root node is of invalid type '{root_type}' on component '{self._component.name}'. "
                "A valid math root node should be of type 'math'.",
                ErrorKind.XML,
            )
            return

        bvar_names = _gather_bvar_names(root)
        for variable_name in self._variable_names:
            if variable_name in bvar_names:
                self._error(
                    f"Math in component '{self._component.name}' contains '{variable_name}' as a bvar ci element "
                    "but it is already a variable name.",
                    ErrorKind.MATHML,
                )

        self._check_and_clean(root, bvar_names)

        etree.cleanup_namespaces(root)
        clean_mathml = serialize(root).replace(CELLML_NAMESPACE_DECLARATION, "")
        mathml_document = parse_mathml(clean_mathml, mathml_dtd)
        logger.debug(
            "MathML DTD reported %d error(s) for component '%s'", len(mathml_document.errors), self._component.name
        )
        for message in mathml_document.errors:
            self._error(message, ErrorKind.MATHML)

    def _check_and_clean(self, root: etree._Element, bvar_names: list[str]) -> None:
        """Check every ci/cn element in document order and strip its cellml:units attribute."""
        stack = [root]
        while stack:
            node = stack.pop()
            node_type = local_name(node)
            if node_type in ("ci", "cn"):
                self._check_token(node, node_type, bvar_names)
            else:
                stack.extend(reversed(node))

    def _check_token(self, node: etree._Element, node_type: str, bvar_names: list[str]) -> None:
        text = ""
        if node.text is not None:
            text = node.text
            if is_whitespace(text):
                self._error(f"MathML {node_type} element has a whitespace-only child element.", ErrorKind.MATHML)
            elif node_type == "ci":
                if text not in self._variable_names and text not in bvar_names:
                    self._error(
                        f"MathML ci element has the child text '{text}', which does not correspond with any "
                        f"variable names present in component '{self._component.name}' and is not a variable "
                        "defined within a bvar element.",
                        ErrorKind.MATHML,
                    )
            elif is_invalid_double(text):
                self._error(
                    f"MathML cn element has the value '{text}', which cannot be converted to a real number.",
                    ErrorKind.MATHML,
                )
        elif len(node) == 0:
            self._error(f"MathML {node_type} element has no child.", ErrorKind.MATHML)

        units_name = ""
        units_key = None
        for key, value in node.attrib.items():
            qname = etree.QName(key)
            if qname.namespace != CELLML_NAMESPACE or not value:
                continue
            if qname.localname == "units":
                units_name = value
                units_key = key
            else:
                self._error(
                    f"Math {node_type} element has an invalid attribute type '{qname.localname}' "
                    "in the cellml namespace.",
                    ErrorKind.MATHML,
                )

        if not units_name:
            if node_type == "cn":
                self._error(
                    f"Math cn element with the value '{text}' does not have a cellml:units attribute.",
                    ErrorKind.MATHML,
                )
            elif local_name(node.getparent()) == "bvar":
                self._error(
                    f"Math bvar ci element with the value '{text}' does not have a valid cellml:units attribute.",
                    ErrorKind.MATHML,
                )
        elif not self._component.has_units(units_name) and not is_standard_unit(units_name):
            self._error(
                f"Math has a {node_type} element with a cellml:units attribute '{units_name}' that is not a valid "
                f"reference to units in component '{self._component.name}' or a standard unit.",
                ErrorKind.MATHML,
            )

        if units_key is not None:
            del node.attrib[units_key]

    def _error(self, description: str, kind: ErrorKind) -> None:
        self._sink.add(ValidationError(description=description, kind=kind, subject=self._component))


def _gather_bvar_names(root: etree._Element) -> list[str]:
    """Return the names bound by bvar elements, in document order.

    A name is taken from a bvar whose first child is a ci holding
    non-whitespace text. The walk does not descend into bvar elements.
    """
    names: list[str] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if local_name(node) != "bvar":
            stack.extend(reversed(node))
            continue
        # Text directly inside bvar is its first child, so it cannot start with a ci.
        if node.text is not None or len(node) == 0:
            continue
        first = node[0]
        if local_name(first) == "ci" and first.text is not None and not is_whitespace(first.text):
            names.append(first.text)
    return names

# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Thin lxml wrappers for parsing math fragments and validating them against the MathML DTD.

Parsing never raises on malformed input: problems are collected in
:attr:`XmlDocument.errors` and :attr:`XmlDocument.root` is ``None`` when the
input is not well-formed. Malformed input is never repaired into a guessed tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from lxml import etree

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

CELLML_NAMESPACE = "http://www.cellml.org/cellml/2.0#"
MATHML_NAMESPACE = "http://www.w3.org/1998/Math/MathML"

# Declaration stripped from serialized math before DTD validation.
CELLML_NAMESPACE_DECLARATION = f' xmlns:cellml="{CELLML_NAMESPACE}"'

DEFAULT_MATHML_DTD = Path(__file__).parent / "mathml-content.dtd"


class DtdLoadError(Exception):
    """Raised when a MathML DTD file cannot be read or parsed."""


@dataclass
class XmlDocument:
    """Result of parsing an XML string.

    Attributes:
        root: The root element, or ``None`` if the input is not well-formed XML.
        errors: Parser and validation messages, in the order reported.
    """

    root: etree._Element | None = None
    errors: list[str] = field(default_factory=list)


def parse_xml(text: str) -> XmlDocument:
    """Parse *text* as XML without error recovery."""
    document = XmlDocument()
    parser = etree.XMLParser(remove_blank_text=True, resolve_entities=False, no_network=True)
    try:
        document.root = etree.fromstring(text.encode("utf-8"), parser)
    except etree.XMLSyntaxError as exc:
        document.errors.extend(_log_messages(exc.error_log))
        if not document.errors:
            document.errors.append(str(exc))
        return document
    document.errors.extend(_log_messages(parser.error_log))
    return document


def parse_mathml(text: str, dtd: etree.DTD) -> XmlDocument:
    """Parse *text* and validate the result against the MathML *dtd*."""
    document = parse_xml(text)
    if document.root is None:
        return document
    if not dtd.validate(document.root):
        document.errors.extend(_log_messages(dtd.error_log))
    return document


def load_mathml_dtd(path: Path | None = None) -> etree.DTD:
    """Load a MathML DTD, defaulting to the bundled content-MathML DTD.

    Raises:
        DtdLoadError: If the file is missing or is not a valid DTD.
    """
    dtd_path = path if path is not None else DEFAULT_MATHML_DTD
    if not dtd_path.exists():
        raise DtdLoadError(f"MathML DTD not found: {dtd_path}")
    try:
        dtd = etree.DTD(str(dtd_path))
    except etree.DTDParseError as exc:
        raise DtdLoadError(f"Cannot parse MathML DTD '{dtd_path}': {exc}") from exc
    logger.debug("Loaded MathML DTD from %s", dtd_path)
    return dtd


def local_name(node: object) -> str:
    """Return the tag of *node* without its namespace.

    Comments and processing instructions have no name and yield ``""``.
    """
    tag = getattr(node, "tag", None)
    if not isinstance(tag, str):
        return ""
    return etree.QName(tag).localname


def serialize(node: etree._Element) -> str:
    """Serialize *node* (without its tail text) to a string."""
    return etree.tostring(node, encoding="unicode", with_tail=False)


# ################
# Implementation
# ################


def _log_messages(error_log: etree._ListErrorLog) -> list[str]:
    return [entry.message for entry in error_log]

# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""XML and MathML parsing primitives used by the reader and the validator."""

from cellml.xml.document import (
    CELLML_NAMESPACE,
    CELLML_NAMESPACE_DECLARATION,
    DEFAULT_MATHML_DTD,
    MATHML_NAMESPACE,
    DtdLoadError,
    XmlDocument,
    load_mathml_dtd,
    local_name,
    parse_mathml,
    parse_xml,
    serialize,
)

__all__ = [
    "CELLML_NAMESPACE",
    "CELLML_NAMESPACE_DECLARATION",
    "DEFAULT_MATHML_DTD",
    "MATHML_NAMESPACE",
    "DtdLoadError",
    "XmlDocument",
    "load_mathml_dtd",
    "local_name",
    "parse_mathml",
    "parse_xml",
    "serialize",
]

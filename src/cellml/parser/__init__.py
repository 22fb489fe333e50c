# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reader for CellML 2.0 XML documents."""

from cellml.parser.reader import ParseError, parse_model, parse_model_file

__all__ = [
    "parse_model",
    "parse_model_file",
    "ParseError",
]

# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical checks shared by the model and the validator."""

import re

# ###############
# Public Interface
# ###############


def is_invalid_double(text: str) -> bool:
    """Return True if *text* cannot be read as a real number.

    Accepted forms are an optional sign, an integer part and/or a fractional
    part, and an optional ``e``/``E`` exponent. The whole string must match;
    surrounding whitespace is not trimmed.
    """
    return _REAL_NUMBER.fullmatch(text) is None


def is_whitespace(text: str) -> bool:
    """Return True if *text* is empty or consists only of XML/C whitespace."""
    return not text.strip(_WHITESPACE)


# ################
# Implementation
# ################

_REAL_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_WHITESPACE = " \t\n\v\f\r"

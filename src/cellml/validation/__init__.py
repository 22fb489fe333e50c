# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic validation of CellML models and their embedded MathML."""

from cellml.validation.errors import ErrorKind, ErrorSink, ValidationError
from cellml.validation.math import validate_math
from cellml.validation.validator import INTERFACE_TYPES, Validator, validate_model

__all__ = [
    "ErrorKind",
    "ErrorSink",
    "INTERFACE_TYPES",
    "ValidationError",
    "Validator",
    "validate_math",
    "validate_model",
]

# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation error records and the ordered sink that collects them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from cellml.model.entities import Component, ImportSource, Model, Units, Variable

# ###############
# Public Interface
# ###############


class ErrorKind(Enum):
    """The part of the document a validation error belongs to."""

    MODEL = "model"
    COMPONENT = "component"
    UNITS = "units"
    VARIABLE = "variable"
    IMPORT = "import"
    XML = "xml"
    MATHML = "mathml"


# The entity a validation error is attributed to.
Subject = Model | Component | Units | Variable | ImportSource


@dataclass(frozen=True)
class ValidationError:
    """A rule violation found while validating a model.

    Attributes:
        description: Human-readable description of the problem.
        kind: Category of the problem.
        subject: The most specific entity the problem was found on, if any.
    """

    description: str
    kind: ErrorKind
    subject: Subject | None = None


class ErrorSink:
    """Append-only, ordered collection of validation errors."""

    def __init__(self) -> None:
        self._errors: list[ValidationError] = []

    def add(self, error: ValidationError) -> None:
        self._errors.append(error)

    def clear(self) -> None:
        self._errors.clear()

    def __len__(self) -> int:
        return len(self._errors)

    def __getitem__(self, index: int) -> ValidationError:
        return self._errors[index]

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

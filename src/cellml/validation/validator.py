# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic validation of CellML models.

Checks the rules the XML schema cannot express: naming and uniqueness within
each scope, import attributes, protected standard unit names, variable
attributes, and the MathML of every component. Validation never stops at the
first problem; every violation found is recorded, in depth-first order.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from cellml.literals import is_invalid_double
from cellml.model.entities import Component, Model, Units, Variable
from cellml.model.units import is_standard_unit
from cellml.validation.errors import ErrorKind, ErrorSink, Subject, ValidationError
from cellml.validation.math import validate_math
from cellml.xml.document import load_mathml_dtd

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

INTERFACE_TYPES: frozenset[str] = frozenset({"public", "private", "none", "public_and_private"})


class Validator:
    """Validates models and keeps the errors found by the latest run.

    A validator can be reused; each call to :meth:`validate_model` replaces
    the errors of the previous call.

    Args:
        mathml_dtd: Optional path to the DTD used for MathML validation.
            Defaults to the bundled content-MathML DTD. The DTD is loaded the
            first time a component with math is validated.
    """

    def __init__(self, mathml_dtd: Path | None = None) -> None:
        self._sink = ErrorSink()
        self._mathml_dtd_path = mathml_dtd
        self._mathml_dtd: etree.DTD | None = None

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        """Errors found by the latest run, in discovery order."""
        return tuple(self._sink)

    @property
    def error_count(self) -> int:
        return len(self._sink)

    def get_error(self, index: int) -> ValidationError:
        return self._sink[index]

    def clear_errors(self) -> None:
        self._sink.clear()

    def validate_model(self, model: Model) -> None:
        """Validate *model*, replacing any previously recorded errors."""
        self.clear_errors()
        logger.debug("Validating model '%s'", model.name)
        self._validate_model(model)
        logger.debug("Model '%s' has %d validation error(s)", model.name, len(self._sink))

    def _validate_model(self, model: Model) -> None:
        if not model.name:
            self._error("Model does not have a valid name attribute.", ErrorKind.MODEL, model)

        component_names: list[str] = []
        component_sources: list[str] = []
        component_refs: list[str] = []
        for component in model.components:
            name = component.name
            if name:
                if component.is_import:
                    source = component.import_source.href
                    reference = component.import_reference
                    found_import_error = False
                    if not reference:
                        self._error(
                            f"Imported component '{name}' does not have a valid component_ref attribute.",
                            ErrorKind.COMPONENT,
                            component,
                        )
                        found_import_error = True
                    if not source:
                        self._error(
                            f"Import of component '{name}' does not have a valid locator xlink:href attribute.",
                            ErrorKind.IMPORT,
                            component.import_source,
                        )
                        found_import_error = True
                    if not found_import_error and _is_duplicate_import(
                        component_sources, component_refs, source, reference
                    ):
                        self._error(
                            f"Model '{model.name}' contains multiple imported components from '{source}' "
                            f"with the same component_ref attribute '{reference}'.",
                            ErrorKind.MODEL,
                            model,
                        )
                    component_sources.append(source)
                    component_refs.append(reference)
                if name in component_names:
                    self._error(
                        f"Model '{model.name}' contains multiple components with the name '{name}'. "
                        "Valid component names should be unique to their model.",
                        ErrorKind.MODEL,
                        model,
                    )
                component_names.append(name)
            self._validate_component(component)

        units_names: list[str] = []
        units_sources: list[str] = []
        units_refs: list[str] = []
        for units in model.units:
            name = units.name
            if not name:
                continue
            if units.is_import:
                source = units.import_source.href
                reference = units.import_reference
                found_import_error = False
                if not reference:
                    self._error(
                        f"Imported units '{name}' does not have a valid units_ref attribute.",
                        ErrorKind.UNITS,
                        units,
                    )
                    found_import_error = True
                if not source:
                    self._error(
                        f"Import of units '{name}' does not have a valid locator xlink:href attribute.",
                        ErrorKind.IMPORT,
                        units.import_source,
                    )
                    found_import_error = True
                if not found_import_error and _is_duplicate_import(units_sources, units_refs, source, reference):
                    self._error(
                        f"Model '{model.name}' contains multiple imported units from '{source}' "
                        f"with the same units_ref attribute '{reference}'.",
                        ErrorKind.MODEL,
                        model,
                    )
                units_sources.append(source)
                units_refs.append(reference)
            if name in units_names:
                self._error(
                    f"Model '{model.name}' contains multiple units with the name '{name}'. "
                    "Valid units names should be unique to their model.",
                    ErrorKind.MODEL,
                    model,
                )
            units_names.append(name)

        # Structural units errors come after all uniqueness errors.
        for units in model.units:
            self._validate_units(units, units_names)

    def _validate_component(self, component: Component) -> None:
        logger.debug("Validating component '%s'", component.name)
        if not component.name:
            self._error("Component does not have a valid name attribute.", ErrorKind.COMPONENT, component)

        units_names: list[str] = []
        for units in component.units:
            if not units.name:
                continue
            if units.name in units_names:
                self._error(
                    f"Component '{component.name}' contains multiple units with the name '{units.name}'. "
                    "Valid units names should be unique to their component.",
                    ErrorKind.COMPONENT,
                    component,
                )
            units_names.append(units.name)
        for units in component.units:
            self._validate_units(units, units_names)

        # Collected up front so initial values may reference any sibling variable.
        variable_names: list[str] = []
        for variable in component.variables:
            if not variable.name:
                continue
            if variable.name in variable_names:
                self._error(
                    f"Component '{component.name}' contains multiple variables with the name '{variable.name}'. "
                    "Valid variable names should be unique to their component.",
                    ErrorKind.COMPONENT,
                    component,
                )
            variable_names.append(variable.name)
        for variable in component.variables:
            self._validate_variable(variable, variable_names)

        if component.math:
            validate_math(component.math, component, variable_names, self._sink, self._dtd())

    def _validate_units(self, units: Units, units_names: list[str]) -> None:
        if not units.name:
            self._error("Units does not have a valid name attribute.", ErrorKind.UNITS, units)
        elif is_standard_unit(units.name):
            self._error(
                f"Units is named '{units.name}', which is a protected standard unit name.",
                ErrorKind.UNITS,
                units,
            )
        for message in units.unit_validation_errors(units_names):
            self._error(message, ErrorKind.UNITS, units)

    def _validate_variable(self, variable: Variable, variable_names: list[str]) -> None:
        if not variable.name:
            self._error("Variable does not have a valid name attribute.", ErrorKind.VARIABLE, variable)
        if not variable.units:
            self._error(
                f"Variable '{variable.name}' does not have a valid units attribute.",
                ErrorKind.VARIABLE,
                variable,
            )
        interface_type = variable.interface_type
        if interface_type and interface_type not in INTERFACE_TYPES:
            self._error(
                f"Variable '{variable.name}' has an invalid interface attribute value '{interface_type}'.",
                ErrorKind.VARIABLE,
                variable,
            )
        initial_value = variable.initial_value
        if initial_value and initial_value not in variable_names and is_invalid_double(initial_value):
            self._error(
                f"Variable '{variable.name}' has an invalid initial value '{initial_value}'. "
                "Initial values must be a real number string or a variable reference.",
                ErrorKind.VARIABLE,
                variable,
            )

    def _dtd(self) -> etree.DTD:
        if self._mathml_dtd is None:
            self._mathml_dtd = load_mathml_dtd(self._mathml_dtd_path)
        return self._mathml_dtd

    def _error(self, description: str, kind: ErrorKind, subject: Subject | None) -> None:
        self._sink.add(ValidationError(description=description, kind=kind, subject=subject))


def validate_model(model: Model, *, mathml_dtd: Path | None = None) -> list[ValidationError]:
    """Validate *model* with a fresh :class:`Validator` and return its errors."""
    validator = Validator(mathml_dtd=mathml_dtd)
    validator.validate_model(model)
    return list(validator.errors)


def _is_duplicate_import(sources: list[str], refs: list[str], source: str, ref: str) -> bool:
    """Return True if (source, ref) was already recorded as one import.

    The two lists are filled in parallel, one entry per import. A pair is a
    duplicate when the first recorded occurrence of *source* and the first
    recorded occurrence of *ref* sit at the same position.
    """
    if source not in sources or ref not in refs:
        return False
    return sources.index(source) == refs.index(ref)

# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the CellML command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from cellml.config.settings import SETTINGS_FILE_NAME, SettingsError, ValidatorSettings, load_settings
from cellml.model.units import StandardUnit
from cellml.parser.reader import ParseError, parse_model_file
from cellml.validation.validator import Validator
from cellml.xml.document import DtdLoadError

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the CellML CLI."""
    parser = argparse.ArgumentParser(
        prog="cellml",
        description="CellML - semantic validation for CellML models",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # validate subcommand
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate one or more CellML documents",
        description="Read CellML documents and report every semantic rule they violate.",
    )
    validate_parser.add_argument(
        "files",
        nargs="+",
        help="CellML documents to validate",
    )
    validate_parser.add_argument(
        "--config",
        default=None,
        help=f"Settings file (default: {SETTINGS_FILE_NAME} in the current directory, if present)",
    )
    validate_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )

    # standard-units subcommand
    subparsers.add_parser(
        "standard-units",
        help="List the reserved standard unit names",
        description="Print the unit names that user-defined units may not use.",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "validate":
        return _cmd_validate(args)
    if args.command == "standard-units":
        return _cmd_standard_units(args)
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate subcommand."""
    try:
        settings = _load_settings(args.config)
    except SettingsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    level = logging.DEBUG if args.verbose else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    validator = Validator(mathml_dtd=settings.mathml_dtd)
    files = [Path(f) for f in args.files]
    print(f"Validating {len(files)} CellML file(s)...")

    has_errors = False
    for path in files:
        try:
            model = parse_model_file(path)
        except ParseError as exc:
            print(f"Error: {path}: {exc}", file=sys.stderr)
            has_errors = True
            continue

        try:
            validator.validate_model(model)
        except DtdLoadError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

        for error in validator.errors:
            print(f"Error: {path}: [{error.kind.name}] {error.description}", file=sys.stderr)
            has_errors = True

    if has_errors:
        return 1

    print("No issues found.")
    return 0


def _cmd_standard_units(args: argparse.Namespace) -> int:
    """Handle the standard-units subcommand."""
    for unit in StandardUnit:
        print(unit.value)
    return 0


def _load_settings(config: str | None) -> ValidatorSettings:
    """Load settings from *config*, or from the working directory if present."""
    if config is not None:
        return load_settings(Path(config))
    default_path = Path.cwd() / SETTINGS_FILE_NAME
    if default_path.exists():
        return load_settings(default_path)
    return ValidatorSettings()

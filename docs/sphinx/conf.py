# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the CellML validator documentation."""

project = "cellml-validator"
author = "CellML Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"

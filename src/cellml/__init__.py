# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""CellML model representation, reader and semantic validator."""

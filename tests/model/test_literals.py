# Copyright 2026 CellML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the real-number and whitespace checks."""

import pytest

from cellml.literals import is_invalid_double, is_whitespace


@pytest.mark.parametrize(
    "text",
    ["0", "1", "-1", "+1.5", "1.", ".5", "1e3", "1.5E-3", "-2.5e+10", "007"],
)
def test_real_numbers_are_valid(text: str) -> None:
    assert not is_invalid_double(text)


@pytest.mark.parametrize(
    "text",
    ["", "abc", " 1", "1 ", "1e", "e3", ".", "+", "-.e1", "inf", "nan", "0x1p3", "1_000", "1.5e-3x", "1,5"],
)
def test_non_numbers_are_invalid(text: str) -> None:
    assert is_invalid_double(text)


@pytest.mark.parametrize("text", ["", " ", "\t\n", "\r\f\v "])
def test_whitespace(text: str) -> None:
    assert is_whitespace(text)


@pytest.mark.parametrize("text", ["x", " x ", "\n1\n"])
def test_not_whitespace(text: str) -> None:
    assert not is_whitespace(text)

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from rentledger.floors import parse_floor_from_unit_name


@pytest.mark.parametrize(
    "unit_name, expected",
    [
        ("A-101", "A"),
        ("GF-01", "GF"),
        ("Block C - 303", "BLOCK C"),
        ("A101", "A"),
        ("GMA202", "GMA"),
        ("1405", "14"),
        ("301", "3"),
        ("99", None),
        ("Penthouse", "PENTHOUSE"),
        ("", None),
        ("12", None),
        ("A", "A"),
        ("gma-annex-404", "GMA-ANNEX"),
    ],
)
def test_floor_table(unit_name, expected):
    assert parse_floor_from_unit_name(unit_name) == expected


@pytest.mark.parametrize(
    "unit_name, expected",
    [
        ("a-101", "A"),
        ("  block   a 101 ", "BLOCK A"),
        ("gf 02", "GF"),
        ("Block  C-303", "BLOCK C"),
        ("101-A", "101"),
        ("12-B4", "12"),
        ("-101", "1"),
        ("Penthouse Suite", "PENTHOUSE SUITE"),
    ],
)
def test_normalization_and_mixed_forms(unit_name, expected):
    assert parse_floor_from_unit_name(unit_name) == expected


@pytest.mark.parametrize("unit_name", [None, "   ", "\t\n", 101, ["A-101"]])
def test_unreadable_input_returns_none(unit_name):
    assert parse_floor_from_unit_name(unit_name) is None


def test_output_is_upper_case_and_deterministic():
    names = ["a-1", "b202", "Annex", "block d - 4"]
    first = [parse_floor_from_unit_name(n) for n in names]
    second = [parse_floor_from_unit_name(n) for n in names]
    assert first == second
    assert all(code == code.upper() for code in first if code)

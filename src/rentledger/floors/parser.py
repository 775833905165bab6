# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Floor / block codes from free-form unit names.

Unit names are typed by hand ("A-101", "GF-01", "Block C - 303", "1405",
"Penthouse"), so the grouping key is recovered heuristically. The parser is
only used to group units for analytics and never influences billing. When a
name does not carry a recognisable floor it returns None rather than guess.
"""

from __future__ import annotations

import re
from typing import Optional

_WHITESPACE = re.compile(r"\s+")
_DIGIT = re.compile(r"\d")
_LEADING_DIGITS = re.compile(r"^(\d+)")
_LETTER_PREFIX = re.compile(r"^([A-Za-z][A-Za-z ]*?)\s*\d")

# Trailing two digits of a numeric unit name are the door number on the floor
_DOOR_DIGITS = 2


def _normalize(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip().upper()


def _parse_segment(name: str) -> Optional[str]:
    """Floor code of a name without hyphens."""
    if not name:
        return None

    digits = _LEADING_DIGITS.match(name)
    if digits:
        number = digits.group(1)
        if len(number) > _DOOR_DIGITS:
            return number[:-_DOOR_DIGITS]
        return None

    if not _DIGIT.search(name):
        return name

    prefix = _LETTER_PREFIX.match(name)
    if prefix:
        return prefix.group(1).strip()

    return None


def parse_floor_from_unit_name(unit_name: Optional[str]) -> Optional[str]:
    """
    Derive an upper-cased floor or block code from a unit name.

    Rules:
    - Hyphenated names drop their trailing digit-bearing segments and keep the
      rest: "A-101" -> "A", "Block C - 303" -> "BLOCK C",
      "gma-annex-404" -> "GMA-ANNEX". When nothing is dropped, or nothing
      would remain, the token before the first hyphen is the floor as written:
      "101-A" -> "101", "12-B4" -> "12". A name that starts with a hyphen
      falls back to parsing its first non-empty segment with the rules below.
    - A letter prefix before the first digit: "A101" -> "A", "GMA202" -> "GMA".
    - Leading digits: all but the last two ("1405" -> "14", "301" -> "3");
      fewer than three digits carry no floor ("99" -> None).
    - No digits at all: the whole name ("Penthouse" -> "PENTHOUSE").
    - Empty input: None.

    Never raises; any input it cannot read returns None.
    """
    if not isinstance(unit_name, str):
        return None
    name = _normalize(unit_name)
    if not name:
        return None

    if not _DIGIT.search(name):
        return name

    if "-" in name:
        segments = [segment.strip() for segment in name.split("-")]
        kept = list(segments)
        while kept and (not kept[-1] or _DIGIT.search(kept[-1])):
            kept.pop()
        kept = [segment for segment in kept if segment]
        if kept and len(kept) < len(segments):
            return "-".join(kept)
        if segments[0]:
            return segments[0]
        first = next((segment for segment in segments if segment), "")
        return _parse_segment(first)

    return _parse_segment(name)

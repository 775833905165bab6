# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Floor grouping of units for analytics.
"""

from .analytics import floor_occupancy
from .parser import parse_floor_from_unit_name

__all__ = [
    "floor_occupancy",
    "parse_floor_from_unit_name",
]

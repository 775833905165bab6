# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from ..core.primitives import OwnershipEnum
from ..portfolio import Property, Tenant, UnitIndex
from .parser import parse_floor_from_unit_name

logger = logging.getLogger(__name__)

FLOOR_COLUMNS = ["floor", "unit_type", "total_units", "rented_sm", "rented_landlord", "vacant"]


def floor_occupancy(prop: Property, tenants: Iterable[Tenant]) -> pd.DataFrame:
    """
    Unit counts per floor and unit type for one property.

    A unit with an active resident counts as rented under its ownership (SM or
    landlord); an unoccupied unit counts as vacant only when its status says
    so. Units whose floor cannot be parsed, or that have no unit type, are left
    out.

    Returns:
        DataFrame with columns ``floor, unit_type, total_units, rented_sm,
        rented_landlord, vacant``, numeric floors first in numeric order, then
        named floors alphabetically, then unit type.
    """
    index = UnitIndex([prop], tenants)

    records = []
    skipped = 0
    for key, _prop, unit in index.items():
        floor = parse_floor_from_unit_name(unit.name)
        if floor is None or not unit.unit_type:
            skipped += 1
            continue
        occupied = index.occupant(key) is not None
        records.append(
            {
                "floor": floor,
                "unit_type": unit.unit_type,
                "total_units": 1,
                "rented_sm": int(occupied and unit.ownership == OwnershipEnum.SM),
                "rented_landlord": int(occupied and unit.ownership == OwnershipEnum.LANDLORD),
                "vacant": int(not occupied and unit.is_vacant),
            }
        )

    if skipped:
        logger.debug(f"Skipped {skipped} units of property {prop.id!r} with no floor or unit type")

    if not records:
        return pd.DataFrame(columns=FLOOR_COLUMNS)

    summary = pd.DataFrame(records).groupby(["floor", "unit_type"], as_index=False, sort=False).sum()
    summary["_floor_number"] = pd.to_numeric(summary["floor"], errors="coerce")
    summary = summary.sort_values(
        by=["_floor_number", "floor", "unit_type"], na_position="last", kind="stable"
    )
    return summary.drop(columns="_floor_number").reset_index(drop=True)[FLOOR_COLUMNS]

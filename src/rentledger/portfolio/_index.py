# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Explicit lookup between residents and the units they occupy.

Resident records reference their unit by ``propertyId`` + ``unitName`` rather
than by object. ``UnitIndex`` turns that pair into a ``UnitKey`` and resolves
it through dictionaries built once per computation, so callers never scan the
catalog per resident. It is also the one place where the occupancy invariant
(at most one active resident per unit) is checked.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple

if TYPE_CHECKING:
    from ._property import Property, Unit
    from ._tenant import Tenant

logger = logging.getLogger(__name__)


class UnitKey(NamedTuple):
    """Composite identity of a unit: owning property plus unit name."""

    property_id: str
    unit_name: str


class UnitIndex:
    """
    Index of units by ``UnitKey`` with their active occupants.

    Units keep catalog order (property order, then unit order). When two active
    residents claim the same unit the first one in caller order is the
    occupant; the clash is logged and reported by ``duplicate_occupancies``.
    """

    def __init__(
        self,
        properties: Iterable["Property"],
        tenants: Iterable["Tenant"] = (),
    ):
        self._units: Dict[UnitKey, Tuple["Property", "Unit"]] = {}
        self._occupants: Dict[UnitKey, "Tenant"] = {}
        self._duplicates: Dict[UnitKey, List["Tenant"]] = {}

        for prop in properties:
            for unit in prop.units:
                key = UnitKey(prop.id, unit.name)
                if key in self._units:
                    logger.warning(
                        f"Duplicate unit name {unit.name!r} in property {prop.id!r}; keeping the first"
                    )
                    continue
                self._units[key] = (prop, unit)

        for tenant in tenants:
            if not tenant.is_active:
                continue
            key = tenant.unit_key
            current = self._occupants.get(key)
            if current is None:
                self._occupants[key] = tenant
                continue
            clash = self._duplicates.setdefault(key, [current])
            clash.append(tenant)
            logger.warning(
                f"Unit {key.unit_name!r} in property {key.property_id!r} has more than one "
                f"active resident ({current.id!r}, {tenant.id!r}); using {current.id!r}"
            )

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, key: object) -> bool:
        return key in self._units

    def unit(self, key: UnitKey) -> Optional["Unit"]:
        found = self._units.get(key)
        return found[1] if found else None

    def property_of(self, key: UnitKey) -> Optional["Property"]:
        found = self._units.get(key)
        return found[0] if found else None

    def unit_for(self, tenant: "Tenant") -> Optional["Unit"]:
        """Resolve the unit a resident points at, or None."""
        return self.unit(tenant.unit_key)

    def occupant(self, key: UnitKey) -> Optional["Tenant"]:
        return self._occupants.get(key)

    def items(self) -> Iterator[Tuple[UnitKey, "Property", "Unit"]]:
        for key, (prop, unit) in self._units.items():
            yield key, prop, unit

    def units_for_landlord(self, landlord_id: str) -> Iterator[Tuple[UnitKey, "Property", "Unit"]]:
        """
        Units owned by a landlord, in catalog order.

        A unit's own ``landlord_id`` decides; units without one inherit the
        property's.
        """
        for key, prop, unit in self.items():
            owner = unit.landlord_id if unit.landlord_id is not None else prop.landlord_id
            if owner == landlord_id:
                yield key, prop, unit

    def duplicate_occupancies(self) -> Dict[UnitKey, List["Tenant"]]:
        """Units claimed by more than one active resident, with every claimant."""
        return {key: list(tenants) for key, tenants in self._duplicates.items()}

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio Records

Residents, units, properties and payments as supplied by the data-access
layer, plus the index that joins residents to their units.
"""

from ._index import UnitIndex, UnitKey
from ._owner import AssignedUnits, PropertyOwner
from ._payment import Payment, WaterBill
from ._property import Property, Unit
from ._tenant import Lease, Tenant

__all__ = [
    "AssignedUnits",
    "Lease",
    "Payment",
    "Property",
    "PropertyOwner",
    "Tenant",
    "Unit",
    "UnitIndex",
    "UnitKey",
    "WaterBill",
]

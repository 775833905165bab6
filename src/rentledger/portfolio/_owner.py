# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field, field_validator

from ..core.primitives import Model
from ._index import UnitKey


class AssignedUnits(Model):
    """Units an owner holds within one property."""

    property_id: str
    unit_names: List[str] = Field(default_factory=list)


class PropertyOwner(Model):
    """
    Homeowner holding one or more units.

    A multi-unit owner is billed through a single resident account: each
    month's service charge for all their handed-over units is one statement
    line.
    """

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    user_id: Optional[str] = None
    assigned_units: List[AssignedUnits] = Field(default_factory=list)

    @field_validator("assigned_units", mode="before")
    @classmethod
    def missing_units_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    def unit_keys(self) -> List[UnitKey]:
        """Assigned units in the order they were assigned, without repeats."""
        keys: List[UnitKey] = []
        for assignment in self.assigned_units:
            for unit_name in assignment.unit_names:
                key = UnitKey(assignment.property_id, unit_name)
                if key not in keys:
                    keys.append(key)
        return keys

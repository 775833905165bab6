# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Any, List, Optional

from pydantic import Field, field_validator

from ..core.primitives import (
    HandoverStatusEnum,
    ManagementStatusEnum,
    Model,
    OwnershipEnum,
    PositiveFloat,
    UnitStatusEnum,
    coerce_optional_date,
)


class Unit(Model):
    """
    A rentable or sellable space inside a Property.

    Unit names are free-form ("A101", "GF-01", "1405") and unique within their
    property. Monetary fields are monthly figures.
    """

    name: str
    status: UnitStatusEnum = UnitStatusEnum.VACANT
    ownership: OwnershipEnum = OwnershipEnum.LANDLORD
    unit_type: Optional[str] = None
    landlord_id: Optional[str] = None
    management_status: Optional[ManagementStatusEnum] = None
    rent_amount: Optional[PositiveFloat] = None
    service_charge: Optional[PositiveFloat] = None
    handover_status: Optional[HandoverStatusEnum] = None
    handover_date: Optional[date] = None

    @field_validator("handover_date", mode="before")
    @classmethod
    def lenient_handover_date(cls, v: Any) -> Optional[date]:
        return coerce_optional_date(v, field_name="handover_date")

    @property
    def is_handed_over(self) -> bool:
        """Handed over by status, or by a recorded date when no status is set."""
        if self.handover_status is not None:
            return self.handover_status == HandoverStatusEnum.HANDED_OVER
        return self.handover_date is not None

    @property
    def is_vacant(self) -> bool:
        return self.status == UnitStatusEnum.VACANT


class Property(Model):
    """Container of units; ``units`` keeps the caller's order."""

    id: str
    name: Optional[str] = None
    address: Optional[str] = None
    landlord_id: Optional[str] = None
    units: List[Unit] = Field(default_factory=list)

    @field_validator("units", mode="before")
    @classmethod
    def missing_units_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    def get_unit(self, name: str) -> Optional[Unit]:
        for unit in self.units:
            if unit.name == name:
                return unit
        return None

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import pandas as pd
from pydantic import Field

from ..core.primitives import Model, Money
from ..portfolio import Property, Tenant, Unit, UnitIndex
from ._tenant_arrears import rent_arrears

logger = logging.getLogger(__name__)

BREAKDOWN_COLUMNS = [
    "property_id",
    "unit_name",
    "tenant_id",
    "tenant_arrears",
    "vacant_service_charge",
]


class LandlordArrearsRow(Model):
    """
    One landlord unit's contribution to the remittance deductions.

    Attributes:
        property_id: Property the unit belongs to
        unit: The unit
        tenant: Active occupant, or None when vacant
        tenant_arrears: Occupant's rent arrears
        vacant_service_charge: Service charge the landlord owes on a vacant,
            handed-over unit
    """

    property_id: str
    unit: Unit
    tenant: Optional[Tenant] = None
    tenant_arrears: float = 0.0
    vacant_service_charge: float = 0.0


class LandlordArrearsSummary(Model):
    """
    Amounts to deduct from a landlord's collected rent remittance.

    ``total_deductions`` is always ``total_tenant_arrears`` plus
    ``vacant_unit_service_charge``.
    """

    landlord_id: Optional[str] = None
    total_tenant_arrears: float = 0.0
    vacant_unit_service_charge: float = 0.0
    total_deductions: float = 0.0
    breakdown: List[LandlordArrearsRow] = Field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        rows = [
            {
                "property_id": row.property_id,
                "unit_name": row.unit.name,
                "tenant_id": row.tenant.id if row.tenant else None,
                "tenant_arrears": row.tenant_arrears,
                "vacant_service_charge": row.vacant_service_charge,
            }
            for row in self.breakdown
        ]
        return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)


def get_landlord_arrears_breakdown(
    landlord_id: str,
    properties: Iterable[Property],
    tenants: Iterable[Tenant],
) -> LandlordArrearsSummary:
    """
    Break down what a landlord's remittance must absorb, unit by unit.

    For each unit the landlord owns, across all properties:
    - occupied by an active resident: the resident's rent arrears;
    - vacant and handed over: the unit's monthly service charge, which the
      landlord owes in place of a resident;
    - vacant and not handed over: nothing.

    Residents are matched to units through ``UnitIndex`` on
    ``(property_id, unit_name)``.
    """
    index = UnitIndex(properties, tenants)

    tenant_total = Money(0)
    vacant_total = Money(0)
    rows: List[LandlordArrearsRow] = []

    for key, _prop, unit in index.units_for_landlord(landlord_id):
        tenant = index.occupant(key)
        if tenant is not None:
            arrears = rent_arrears(tenant)
            tenant_total += arrears
            rows.append(
                LandlordArrearsRow(
                    property_id=key.property_id,
                    unit=unit,
                    tenant=tenant,
                    tenant_arrears=arrears,
                )
            )
            continue

        service_charge = Money(0)
        if unit.is_handed_over:
            service_charge = Money(unit.service_charge or 0)
            vacant_total += service_charge
        rows.append(
            LandlordArrearsRow(
                property_id=key.property_id,
                unit=unit,
                vacant_service_charge=service_charge.to_float(),
            )
        )

    if not rows:
        logger.info(f"Landlord {landlord_id!r} owns no units in the supplied catalog")

    return LandlordArrearsSummary(
        landlord_id=landlord_id,
        total_tenant_arrears=tenant_total.to_float(),
        vacant_unit_service_charge=vacant_total.to_float(),
        total_deductions=(tenant_total + vacant_total).to_float(),
        breakdown=rows,
    )

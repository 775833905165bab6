# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from ..core.primitives import Model, Money
from ..portfolio import Tenant, WaterBill

logger = logging.getLogger(__name__)


class TenantArrears(Model):
    """
    A resident and the rent arrears they carry.

    ``pending_water`` is the resident's unpaid water, reported alongside the
    arrears. Water sits on its own account, so it is not part of ``arrears``.
    """

    tenant: Tenant
    arrears: float
    pending_water: float = 0.0


def pending_water_by_tenant(water_bills: Optional[Iterable[WaterBill]]) -> Dict[str, Money]:
    """Total of unpaid water bills per resident id."""
    totals: Dict[str, Money] = {}
    for bill in water_bills or ():
        if bill.is_pending:
            totals[bill.tenant_id] = totals.get(bill.tenant_id, Money(0)) + bill.amount
    return totals


def rent_arrears(tenant: Tenant) -> float:
    """
    Rent arrears of one resident: the cached ``due_balance``, never below zero.

    ``due_balance`` is written by ``reconcile_tenant`` from the rent /
    service-charge account only, so it is read here as-is.
    """
    return Money(tenant.due_balance).clamp_positive().to_float()


def get_tenants_in_arrears(
    tenants: Iterable[Tenant],
    water_bills: Optional[Iterable[WaterBill]] = None,
) -> List[TenantArrears]:
    """
    Residents who owe rent, largest arrears first.

    Reads the cached ``due_balance`` rather than regenerating each ledger, so
    this is a single pass over the population. Residents with equal arrears
    keep their input order (``sorted`` is stable).

    Args:
        tenants: Resident population, in the order ties should keep.
        water_bills: Optional water bills; each row reports the resident's
            unpaid total as ``pending_water`` without changing ``arrears``.

    Returns:
        ``TenantArrears`` rows with ``arrears > 0``, sorted descending.
    """
    pending_water = pending_water_by_tenant(water_bills)

    in_arrears = []
    for tenant in tenants:
        arrears = rent_arrears(tenant)
        if arrears > 0:
            water = pending_water.get(tenant.id, Money(0)).to_float()
            in_arrears.append(TenantArrears(tenant=tenant, arrears=arrears, pending_water=water))

    logger.debug(f"{len(in_arrears)} residents in arrears")
    return sorted(in_arrears, key=lambda row: row.arrears, reverse=True)

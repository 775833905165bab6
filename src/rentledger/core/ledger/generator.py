# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Resident ledger generation.

Turns a resident's lease and units into a monthly charge schedule, adds water
bills, merges in their paid payments, and produces a statement with a running
balance.
"""

from __future__ import annotations

import datetime
import logging
from typing import Iterable, List, Optional, Sequence, Union

import pandas as pd

from ...portfolio import Payment, Property, PropertyOwner, Tenant, Unit, UnitIndex, WaterBill
from ..primitives import (
    BillingSettings,
    BillingWindow,
    Money,
    format_month,
    parse_billing_period,
    to_month,
)
from .builder import LedgerBuilder
from .records import LedgerResult

logger = logging.getLogger(__name__)

SECURITY_DEPOSIT_DESCRIPTION = "Security Deposit"
PAYMENT_DESCRIPTION = "Payment Received"
WATER_DESCRIPTION = "Water Bill"


def monthly_charge(tenant: Tenant, unit: Optional[Unit]) -> float:
    """
    Monthly amount billed to a resident.

    Tenants pay the unit's rent; homeowners pay its service charge. A unit that
    cannot be resolved bills nothing. A resolved unit with the figure unset
    (as opposed to zero) falls back to the lease's agreed amount.
    """
    if unit is None:
        return 0.0
    if tenant.is_homeowner:
        amount = unit.service_charge
        if amount is None:
            amount = tenant.lease.service_charge
    else:
        amount = unit.rent_amount
        if amount is None:
            amount = tenant.lease.rent_amount
    return float(amount or 0.0)


def first_billable_month(
    tenant: Tenant,
    unit: Optional[Unit],
    settings: Optional[BillingSettings] = None,
) -> Optional[pd.Period]:
    """
    First month a resident is billed for, or None if billing has not started.

    Rules, in order:
    1. A valid ``last_billed_period`` resumes billing the month after it.
    2. A handed-over unit with a handover date: a handover on or before the
       cutoff day bills from the handover month; a later handover bills from
       ``late_handover_offset_months`` after it.
    3. A handed-over unit without a date bills from the lease start month.
    4. Otherwise nothing is billable yet.
    """
    settings = settings or BillingSettings()

    last_billed = parse_billing_period(tenant.lease.last_billed_period)
    if last_billed is not None:
        return last_billed + 1

    if unit is None or not unit.is_handed_over:
        return None

    if unit.handover_date is not None:
        handover_month = to_month(unit.handover_date)
        if unit.handover_date.day <= settings.handover_cutoff_day:
            return handover_month
        return handover_month + settings.late_handover_offset_months

    if tenant.lease.start_date is not None:
        return to_month(tenant.lease.start_date)

    return None


def charge_description(tenant: Tenant, unit_names: Sequence[str]) -> str:
    units = ", ".join(unit_names)
    if tenant.is_homeowner:
        return f"S.Charge for Units: {units}"
    return f"Rent for Units: {units}"


def payment_description(payment: Payment) -> str:
    description = PAYMENT_DESCRIPTION
    if payment.payment_method is not None:
        description += f" - {payment.payment_method.value}"
    if payment.notes:
        description += f" ({payment.notes})"
    return description


def water_description(bill: WaterBill) -> str:
    description = WATER_DESCRIPTION
    if bill.unit_name:
        description += f" for Units: {bill.unit_name}"
    if bill.consumption is not None:
        description += f" ({bill.consumption:g} units)"
    return description


def billed_units(
    tenant: Tenant,
    index: UnitIndex,
    owner: Optional[PropertyOwner] = None,
) -> List[Unit]:
    """
    Units whose monthly charge lands on this resident's account.

    Normally the resident's own unit. For a homeowner billed on behalf of a
    multi-unit owner, every assigned unit. Unresolvable units are logged and
    left out.
    """
    keys = (owner.unit_keys() if owner is not None else []) or [tenant.unit_key]
    units = []
    for key in keys:
        unit = index.unit(key)
        if unit is None:
            logger.warning(
                f"Unit {key.unit_name!r} in property {key.property_id!r} not found for "
                f"tenant {tenant.id!r}; no charges will accrue for it"
            )
            continue
        units.append(unit)
    return units


def generate_ledger(
    tenant: Tenant,
    payments: Iterable[Payment],
    properties: Union[Iterable[Property], UnitIndex],
    water_bills: Optional[Iterable[WaterBill]] = None,
    owner: Optional[PropertyOwner] = None,
    *,
    as_of: Optional[datetime.date] = None,
    opening_balance: float = 0.0,
    settings: Optional[BillingSettings] = None,
    include_rent: bool = True,
    include_service_charge: bool = True,
    include_water: bool = True,
) -> LedgerResult:
    """
    Build a resident's chronological statement.

    The account has two silos. The rent / service-charge silo holds monthly
    charges (rent for tenants, service charge for homeowners), the security
    deposit and every non-water payment. The water silo holds water bills and
    ``Water`` payments. The include flags pick which silos appear, so one
    resident can have a rent-only, a water-only or a combined statement.

    Args:
        tenant: The resident.
        payments: Full payment history; filtered here to this resident's PAID payments.
        properties: Property catalog, or a prebuilt ``UnitIndex`` when generating
            many ledgers against the same catalog.
        water_bills: Water bills; those of this resident are charged when
            ``include_water`` is set.
        owner: Multi-unit owner whose assigned units are all billed on this
            resident's account, one line per month.
        as_of: Any date in the last month to bill. Defaults to ``settings.as_of``,
            then today.
        opening_balance: Balance carried forward into the first entry.
        settings: Billing configuration.
        include_rent: Bill rent for a tenant.
        include_service_charge: Bill service charge for a homeowner.
        include_water: Include water bills and water payments.

    Returns:
        LedgerResult with entries sorted by date (charges before payments on the
        same date) and the closing due / credit balances.

    Example:
        >>> result = generate_ledger(tenant, payments, properties, as_of=date(2025, 4, 1))
        >>> result.final_due_balance
        40000.0
        >>> water = generate_ledger(tenant, payments, properties, water_bills,
        ...                         include_rent=False, include_service_charge=False)
    """
    settings = settings or BillingSettings()
    as_of = as_of or settings.current_date()
    index = properties if isinstance(properties, UnitIndex) else UnitIndex(properties)
    account_included = include_service_charge if tenant.is_homeowner else include_rent

    builder = LedgerBuilder(tenant_id=tenant.id, opening_balance=opening_balance)

    schedule = []
    for unit in billed_units(tenant, index, owner):
        amount = monthly_charge(tenant, unit)
        start_month = first_billable_month(tenant, unit, settings)
        if amount > 0 and start_month is not None:
            schedule.append((unit.name, Money(amount), start_month))

    if account_included and schedule:
        window = BillingWindow.through(min(start for _, _, start in schedule), as_of)
        for period in window.period_index:
            due = [(name, amount) for name, amount, start in schedule if start <= period]
            if not due:
                continue
            builder.add_charge(
                date=period.start_time.date(),
                description=charge_description(tenant, [name for name, _ in due]),
                amount=Money.total(amount for _, amount in due).to_float(),
                for_month=format_month(period),
            )

    if account_included and settings.include_security_deposit and tenant.lease.security_deposit > 0:
        deposit_date = tenant.lease.start_date
        if deposit_date is None and schedule:
            deposit_date = min(start for _, _, start in schedule).start_time.date()
        if deposit_date is not None:
            builder.add_charge(
                date=deposit_date,
                description=SECURITY_DEPOSIT_DESCRIPTION,
                amount=tenant.lease.security_deposit,
            )
        else:
            logger.debug(f"No date to charge the security deposit of tenant {tenant.id!r}")

    if include_water:
        for bill in water_bills or ():
            if bill.tenant_id != tenant.id:
                continue
            if bill.date is None:
                logger.warning(f"Water bill {bill.id!r} of tenant {tenant.id!r} has no date; skipped")
                continue
            builder.add_charge(
                date=bill.date,
                description=water_description(bill),
                amount=bill.amount,
                for_month=format_month(to_month(bill.date)),
            )

    for payment in payments:
        if payment.tenant_id != tenant.id or not payment.is_paid:
            continue
        if not (include_water if payment.is_water else account_included):
            continue
        builder.add_payment(
            date=payment.date,
            description=payment_description(payment),
            amount=payment.amount,
        )

    logger.debug(
        f"Tenant {tenant.id!r}: {len(schedule)} billed unit(s), {builder.entry_count()} "
        f"statement lines through {to_month(as_of)}"
    )
    return builder.build()

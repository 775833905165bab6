# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Landlord remittance figures.

For every rent payment collected on a landlord's behalf the managing agent
keeps a management fee and the unit's service charge; the rest is remitted.
Vacant units that have been handed over still owe service charge, which comes
off the total remittance.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .core.primitives import (
    BillingSettings,
    Model,
    Money,
    PaymentStatusEnum,
    PaymentTypeEnum,
)
from .portfolio import Payment, Property, Tenant, UnitIndex

logger = logging.getLogger(__name__)


class TransactionBreakdown(Model):
    """
    Split of one month's standard rent between agent and landlord.

    Attributes:
        gross: The unit's standard monthly rent
        service_charge_deduction: Service charge kept back
        management_fee: Agent's fee on the standard rent
        net_to_landlord: gross - service_charge_deduction - management_fee
    """

    gross: float
    service_charge_deduction: float
    management_fee: float
    net_to_landlord: float


class FinancialSummary(Model):
    """Remittance totals over a set of rent payments."""

    total_revenue: float = 0.0
    total_management_fees: float = 0.0
    total_service_charges: float = 0.0
    total_net_remittance: float = 0.0
    transaction_count: int = 0
    vacant_unit_service_charge_deduction: float = 0.0


def calculate_transaction_breakdown(
    unit_rent: float,
    service_charge: float = 0.0,
    *,
    fee_rate: Optional[float] = None,
) -> TransactionBreakdown:
    """
    Break a unit's standard rent into fee, service charge and landlord share.

    The fee is charged on the standard rent, not on what a particular payment
    happened to be, so partial or discounted payments do not change it.
    """
    if fee_rate is None:
        fee_rate = BillingSettings().management_fee_rate
    if not 0 <= fee_rate <= 1:
        raise ValueError(f"fee_rate must be between 0 and 1, got {fee_rate}")

    gross = Money(unit_rent)
    deduction = Money(service_charge)
    fee = gross * fee_rate
    return TransactionBreakdown(
        gross=gross.to_float(),
        service_charge_deduction=deduction.to_float(),
        management_fee=fee.to_float(),
        net_to_landlord=(gross - deduction - fee).to_float(),
    )


def aggregate_financials(
    payments: Iterable[Payment],
    tenants: Iterable[Tenant],
    properties: Iterable[Property],
    settings: Optional[BillingSettings] = None,
) -> FinancialSummary:
    """
    Remittance totals over paid rent payments.

    Each paid ``Rent`` payment contributes one breakdown of its unit's standard
    rent; when the resident's unit is unknown the lease rent is used. The
    monthly service charge of every vacant, handed-over unit in the catalog is
    then deducted from the net remittance.
    """
    settings = settings or BillingSettings()
    tenants = list(tenants)
    index = UnitIndex(properties)
    tenants_by_id = {tenant.id: tenant for tenant in tenants}

    revenue = Money(0)
    fees = Money(0)
    service_charges = Money(0)
    net = Money(0)
    count = 0

    for payment in payments:
        if payment.status != PaymentStatusEnum.PAID or payment.type != PaymentTypeEnum.RENT:
            continue
        count += 1
        tenant = tenants_by_id.get(payment.tenant_id)
        if tenant is None:
            logger.warning(f"Rent payment {payment.id!r} has no matching tenant {payment.tenant_id!r}")
        unit = index.unit_for(tenant) if tenant else None

        unit_rent = unit.rent_amount if unit and unit.rent_amount is not None else None
        if unit_rent is None:
            unit_rent = tenant.lease.rent_amount if tenant else 0.0
        unit_service = unit.service_charge if unit and unit.service_charge is not None else None
        if unit_service is None:
            unit_service = (tenant.lease.service_charge or 0.0) if tenant else 0.0

        breakdown = calculate_transaction_breakdown(
            unit_rent, unit_service, fee_rate=settings.management_fee_rate
        )
        revenue += breakdown.gross
        fees += breakdown.management_fee
        service_charges += breakdown.service_charge_deduction
        net += breakdown.net_to_landlord

    vacant = Money.total(
        unit.service_charge or 0
        for _key, _prop, unit in index.items()
        if unit.is_vacant and unit.is_handed_over
    )

    return FinancialSummary(
        total_revenue=revenue.to_float(),
        total_management_fees=fees.to_float(),
        total_service_charges=service_charges.to_float(),
        total_net_remittance=(net - vacant).to_float(),
        transaction_count=count,
        vacant_unit_service_charge_deduction=vacant.to_float(),
    )

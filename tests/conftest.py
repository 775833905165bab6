# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for rentledger testing.

Factories build valid records with sensible defaults so each test only spells
out the fields it is about.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from rentledger.core.primitives import (
    BillingSettings,
    HandoverStatusEnum,
    PaymentStatusEnum,
    PaymentTypeEnum,
    ResidentTypeEnum,
    UnitStatusEnum,
)
from rentledger.portfolio import Payment, Property, Tenant, Unit, WaterBill


def make_unit(
    name: str = "A1",
    rent_amount: Optional[float] = 20000.0,
    service_charge: Optional[float] = 3000.0,
    status: UnitStatusEnum = UnitStatusEnum.RENTED,
    handover_status: Optional[HandoverStatusEnum] = HandoverStatusEnum.HANDED_OVER,
    handover_date: Optional[date] = None,
    **kwargs,
) -> Unit:
    """Create a handed-over, rented unit unless told otherwise."""
    return Unit(
        name=name,
        rent_amount=rent_amount,
        service_charge=service_charge,
        status=status,
        handover_status=handover_status,
        handover_date=handover_date,
        **kwargs,
    )


def make_property(property_id: str = "P1", units=None, **kwargs) -> Property:
    """Create a property holding the given units (one default unit if omitted)."""
    if units is None:
        units = [make_unit()]
    return Property(id=property_id, name=f"Property {property_id}", units=units, **kwargs)


def make_tenant(
    tenant_id: str = "T1",
    property_id: str = "P1",
    unit_name: str = "A1",
    resident_type: ResidentTypeEnum = ResidentTypeEnum.TENANT,
    due_balance: float = 0.0,
    lease: Optional[dict] = None,
    **kwargs,
) -> Tenant:
    """
    Create an active resident.

    Example:
        >>> tenant = make_tenant(lease={"lastBilledPeriod": "2025-01"})
        >>> tenant.lease.last_billed_period
        '2025-01'
    """
    return Tenant(
        id=tenant_id,
        name=f"Resident {tenant_id}",
        email=f"{tenant_id.lower()}@example.com",
        property_id=property_id,
        unit_name=unit_name,
        resident_type=resident_type,
        due_balance=due_balance,
        lease=lease if lease is not None else {"rentAmount": 20000},
        **kwargs,
    )


def make_payment(
    amount: float = 20000.0,
    on: date = date(2025, 2, 15),
    tenant_id: str = "T1",
    status: PaymentStatusEnum = PaymentStatusEnum.PAID,
    type: PaymentTypeEnum = PaymentTypeEnum.RENT,
    payment_id: Optional[str] = None,
    **kwargs,
) -> Payment:
    """Create a paid rent payment."""
    return Payment(
        id=payment_id,
        tenant_id=tenant_id,
        amount=amount,
        date=on,
        status=status,
        type=type,
        **kwargs,
    )


def make_water_bill(
    amount: float = 1500.0,
    on: Optional[date] = date(2025, 3, 5),
    tenant_id: str = "T1",
    status: PaymentStatusEnum = PaymentStatusEnum.PENDING,
    **kwargs,
) -> WaterBill:
    """Create an unpaid water bill."""
    return WaterBill(tenant_id=tenant_id, amount=amount, date=on, status=status, **kwargs)


@pytest.fixture
def april_2025() -> date:
    """A fixed 'today' inside April 2025."""
    return date(2025, 4, 20)


@pytest.fixture
def sample_settings(april_2025) -> BillingSettings:
    """Default billing settings pinned to April 2025."""
    return BillingSettings(as_of=april_2025)


@pytest.fixture
def sample_properties():
    """One property with a single rented, handed-over unit A1 at 20,000."""
    return [make_property()]

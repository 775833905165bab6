# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for landlord remittance calculations.
"""

from __future__ import annotations

from datetime import date

import pytest
from conftest import make_payment, make_property, make_tenant, make_unit

from rentledger.core.primitives import (
    BillingSettings,
    HandoverStatusEnum,
    PaymentStatusEnum,
    PaymentTypeEnum,
    UnitStatusEnum,
)
from rentledger.remittance import aggregate_financials, calculate_transaction_breakdown


class TestTransactionBreakdown:
    def test_default_fee_is_five_percent_of_rent(self):
        breakdown = calculate_transaction_breakdown(20000, 3000)
        assert breakdown.gross == 20000.0
        assert breakdown.management_fee == 1000.0
        assert breakdown.service_charge_deduction == 3000.0
        assert breakdown.net_to_landlord == 16000.0

    def test_custom_fee_rate(self):
        breakdown = calculate_transaction_breakdown(15000, fee_rate=0.1)
        assert breakdown.management_fee == 1500.0
        assert breakdown.service_charge_deduction == 0.0
        assert breakdown.net_to_landlord == 13500.0

    def test_fee_rounds_to_the_cent(self):
        breakdown = calculate_transaction_breakdown(333.4)
        assert breakdown.management_fee == 16.67
        assert breakdown.net_to_landlord == 316.73

    def test_invalid_fee_rate(self):
        with pytest.raises(ValueError):
            calculate_transaction_breakdown(1000, fee_rate=1.5)

    def test_json_shape(self):
        data = calculate_transaction_breakdown(20000, 3000).to_json_dict()
        assert data == {
            "gross": 20000.0,
            "serviceChargeDeduction": 3000.0,
            "managementFee": 1000.0,
            "netToLandlord": 16000.0,
        }


@pytest.fixture
def portfolio():
    properties = [
        make_property(
            "P",
            units=[
                make_unit("U1", rent_amount=20000, service_charge=3000),
                make_unit("U2", rent_amount=None, service_charge=None),
                make_unit("U3", status=UnitStatusEnum.VACANT, service_charge=2000),
                make_unit(
                    "U4",
                    status=UnitStatusEnum.VACANT,
                    service_charge=5000,
                    handover_status=HandoverStatusEnum.PENDING,
                ),
            ],
        )
    ]
    tenants = [
        make_tenant("T1", property_id="P", unit_name="U1"),
        make_tenant(
            "T2",
            property_id="P",
            unit_name="U2",
            lease={"rentAmount": 10000, "serviceCharge": 1000},
        ),
    ]
    return properties, tenants


def test_aggregate_financials(portfolio):
    properties, tenants = portfolio
    payments = [
        make_payment(20000, date(2025, 2, 5), tenant_id="T1"),
        make_payment(5000, date(2025, 3, 5), tenant_id="T1"),
        make_payment(10000, date(2025, 2, 5), tenant_id="T2"),
        make_payment(20000, date(2025, 4, 5), tenant_id="T1", status=PaymentStatusEnum.PENDING),
        make_payment(40000, date(2025, 1, 5), tenant_id="T1", type=PaymentTypeEnum.DEPOSIT),
    ]

    summary = aggregate_financials(payments, tenants, properties)

    assert summary.transaction_count == 3
    assert summary.total_revenue == 50000.0
    assert summary.total_management_fees == 2500.0
    assert summary.total_service_charges == 7000.0
    assert summary.vacant_unit_service_charge_deduction == 2000.0
    assert summary.total_net_remittance == 38500.0


def test_no_payments_still_deducts_vacant_units(portfolio):
    properties, tenants = portfolio

    summary = aggregate_financials([], tenants, properties)

    assert summary.transaction_count == 0
    assert summary.total_revenue == 0.0
    assert summary.total_net_remittance == -2000.0


def test_fee_rate_from_settings(portfolio):
    properties, tenants = portfolio
    payments = [make_payment(20000, date(2025, 2, 5), tenant_id="T1")]

    summary = aggregate_financials(
        payments, tenants, properties, settings=BillingSettings(management_fee_rate=0.1)
    )

    assert summary.total_management_fees == 2000.0


def test_json_field_names(portfolio):
    properties, tenants = portfolio
    data = aggregate_financials([], tenants, properties).to_json_dict()
    assert set(data) == {
        "totalRevenue",
        "totalManagementFees",
        "totalServiceCharges",
        "totalNetRemittance",
        "transactionCount",
        "vacantUnitServiceChargeDeduction",
    }

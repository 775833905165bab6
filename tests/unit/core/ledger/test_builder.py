# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for LedgerBuilder ordering and running-balance arithmetic.
"""

from __future__ import annotations

from datetime import date

import pytest

from rentledger.core.ledger import LedgerBuilder
from rentledger.core.primitives import LedgerEntryKindEnum


def test_empty_builder_produces_empty_statement():
    result = LedgerBuilder(tenant_id="T1").build()
    assert result.ledger == []
    assert result.final_due_balance == 0.0
    assert result.final_account_balance == 0.0
    assert result.tenant_id == "T1"


def test_entries_sorted_by_date_regardless_of_insertion_order():
    builder = LedgerBuilder()
    builder.add_payment(date(2025, 3, 5), "Payment Received", 100)
    builder.add_charge(date(2025, 2, 1), "Rent", 100)
    builder.add_charge(date(2025, 3, 1), "Rent", 100)

    result = builder.build()

    assert [e.date for e in result.ledger] == [date(2025, 2, 1), date(2025, 3, 1), date(2025, 3, 5)]
    assert [e.balance for e in result.ledger] == [100.0, 200.0, 100.0]


def test_same_day_charge_sorts_before_payment():
    builder = LedgerBuilder()
    builder.add_payment(date(2025, 3, 1), "Payment Received", 500)
    builder.add_charge(date(2025, 3, 1), "Rent", 500)

    result = builder.build()

    assert [e.kind for e in result.ledger] == [LedgerEntryKindEnum.CHARGE, LedgerEntryKindEnum.PAYMENT]
    assert [e.balance for e in result.ledger] == [500.0, 0.0]


def test_same_day_same_kind_keeps_insertion_order():
    builder = LedgerBuilder()
    builder.add_payment(date(2025, 3, 2), "first", 10)
    builder.add_payment(date(2025, 3, 2), "second", 20)
    builder.add_payment(date(2025, 3, 2), "third", 30)

    result = builder.build()

    assert [e.description for e in result.ledger] == ["first", "second", "third"]


def test_overpayment_becomes_credit():
    builder = LedgerBuilder()
    builder.add_charge(date(2025, 1, 1), "Rent", 1000)
    builder.add_payment(date(2025, 1, 3), "Payment Received", 1500)

    result = builder.build()

    assert result.final_due_balance == 0.0
    assert result.final_account_balance == 500.0
    assert result.closing_balance == -500.0


def test_opening_balance_carries_into_first_entry():
    builder = LedgerBuilder(opening_balance=250)
    builder.add_charge(date(2025, 1, 1), "Rent", 1000)

    result = builder.build()

    assert result.ledger[0].balance == 1250.0
    assert result.opening_balance == 250.0
    assert result.final_due_balance == 1250.0


def test_fractional_amounts_accumulate_exactly():
    builder = LedgerBuilder()
    for day in range(1, 11):
        builder.add_charge(date(2025, 1, day), "Water", 0.1)

    result = builder.build()

    assert result.final_due_balance == 1.0
    assert result.ledger[-1].balance == 1.0


def test_zero_charge_is_skipped_and_invalid_amounts_raise():
    builder = LedgerBuilder()
    builder.add_charge(date(2025, 1, 1), "Rent", 0)
    assert builder.entry_count() == 0

    with pytest.raises(ValueError):
        builder.add_charge(date(2025, 1, 1), "Rent", -1)
    with pytest.raises(ValueError):
        builder.add_payment(date(2025, 1, 1), "Payment Received", 0)


def test_clear_discards_entries():
    builder = LedgerBuilder()
    builder.add_charge(date(2025, 1, 1), "Rent", 100)
    builder.clear()
    assert builder.entry_count() == 0
    assert builder.build().ledger == []


def test_statement_dataframe():
    builder = LedgerBuilder()
    builder.add_charge(date(2025, 2, 1), "Rent for Units: A1", 20000, for_month="Feb 2025")
    builder.add_payment(date(2025, 2, 15), "Payment Received", 20000)

    df = builder.build().to_dataframe()

    assert list(df.columns) == ["date", "description", "for_month", "charge", "payment", "balance"]
    assert len(df) == 2
    assert df["balance"].tolist() == [20000.0, 0.0]
    assert df["for_month"].iloc[0] == "Feb 2025"


def test_empty_statement_dataframe_keeps_columns():
    df = LedgerBuilder().build().to_dataframe()
    assert df.empty
    assert list(df.columns) == ["date", "description", "for_month", "charge", "payment", "balance"]

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Resident ledger engine.

Charge schedules, chronological statements with running balances, and the
recompute-on-write helpers that keep cached resident balances honest.
"""

from .builder import LedgerBuilder
from .generator import (
    billed_units,
    first_billable_month,
    generate_ledger,
    monthly_charge,
)
from .records import LedgerEntry, LedgerResult
from .reconcile import account_ledger, balance_drift, reconcile_tenant, record_payment

__all__ = [
    "LedgerBuilder",
    "LedgerEntry",
    "LedgerResult",
    "account_ledger",
    "balance_drift",
    "billed_units",
    "first_billable_month",
    "generate_ledger",
    "monthly_charge",
    "reconcile_tenant",
    "record_payment",
]

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Record structures for resident statements.

``LedgerEntry`` is one row of a statement; ``LedgerResult`` is the whole
statement with its closing figures. Both are computed, never stored.
"""

from __future__ import annotations

import datetime
from typing import List, Optional

import pandas as pd
from pydantic import Field

from ..primitives import LedgerEntryKindEnum, Model

STATEMENT_COLUMNS = ["date", "description", "for_month", "charge", "payment", "balance"]


class LedgerEntry(Model):
    """
    One row of a resident statement.

    Attributes:
        date: Charge month start, or the payment's date
        description: Human-readable line ("Rent for Units: A1", "Payment Received")
        charge: Amount billed on this row (>= 0)
        payment: Amount received on this row (>= 0)
        balance: Running balance after this row (+ = owed, - = credit)
        kind: Whether the row is a charge or a payment
        for_month: Billing month display label for charge rows ("Feb 2025")
    """

    date: datetime.date
    description: str
    charge: float = 0.0
    payment: float = 0.0
    balance: float = 0.0
    kind: LedgerEntryKindEnum
    for_month: Optional[str] = None


class LedgerResult(Model):
    """
    A resident's chronological statement and its closing position.

    A resident either owes money or holds credit, never both:
    ``final_due_balance`` and ``final_account_balance`` are never both positive.
    """

    tenant_id: Optional[str] = None
    ledger: List[LedgerEntry] = Field(default_factory=list)
    opening_balance: float = 0.0
    final_due_balance: float = 0.0
    final_account_balance: float = 0.0

    @property
    def closing_balance(self) -> float:
        """Signed closing balance (+ = owed, - = credit)."""
        return self.final_due_balance - self.final_account_balance

    @property
    def total_charges(self) -> float:
        return round(sum(entry.charge for entry in self.ledger), 2)

    @property
    def total_payments(self) -> float:
        return round(sum(entry.payment for entry in self.ledger), 2)

    def charges(self) -> List[LedgerEntry]:
        return [e for e in self.ledger if e.kind == LedgerEntryKindEnum.CHARGE]

    def payments(self) -> List[LedgerEntry]:
        return [e for e in self.ledger if e.kind == LedgerEntryKindEnum.PAYMENT]

    def to_dataframe(self) -> pd.DataFrame:
        """Statement rows as a DataFrame, the shape CSV and PDF exports consume."""
        if not self.ledger:
            return pd.DataFrame(columns=STATEMENT_COLUMNS)
        rows = [
            {
                "date": entry.date,
                "description": entry.description,
                "for_month": entry.for_month,
                "charge": entry.charge,
                "payment": entry.payment,
                "balance": entry.balance,
            }
            for entry in self.ledger
        ]
        return pd.DataFrame(rows, columns=STATEMENT_COLUMNS)

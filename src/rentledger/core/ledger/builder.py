# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Statement construction with the pass-the-builder pattern.

Callers add charges and payments in any order; ``build()`` sorts them into a
chronological statement and walks the running balance once.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..primitives import LedgerEntryKindEnum, Money
from .records import LedgerEntry, LedgerResult

logger = logging.getLogger(__name__)

# Charges sort ahead of payments on the same date
_KIND_ORDER = {
    LedgerEntryKindEnum.CHARGE: 0,
    LedgerEntryKindEnum.PAYMENT: 1,
}


@dataclass(frozen=True, slots=True)
class _PendingEntry:
    date: datetime.date
    kind: LedgerEntryKindEnum
    description: str
    amount: Money
    sequence: int
    for_month: Optional[str] = None

    @property
    def sort_key(self):
        return (self.date, _KIND_ORDER[self.kind], self.sequence)


@dataclass
class LedgerBuilder:
    """
    Accumulates statement lines for one resident.

    THREAD SAFETY: Single-threaded use. Each ledger computation creates its own
    builder; nothing is shared between computations.

    Amounts are held as ``Money`` (integer cents) and the running balance is
    accumulated in cents, so the closing balance is exact no matter how many
    entries the statement holds.
    """

    tenant_id: Optional[str] = None
    opening_balance: float = 0.0

    _entries: List[_PendingEntry] = field(default_factory=list, init=False, repr=False)

    def add_charge(
        self,
        date: datetime.date,
        description: str,
        amount: float,
        for_month: Optional[str] = None,
    ) -> None:
        """Add an amount billed to the resident. Zero charges are skipped."""
        money = Money(amount)
        if money < 0:
            raise ValueError(f"Charge amount must be non-negative, got {amount}")
        if not money:
            return
        self._append(date, LedgerEntryKindEnum.CHARGE, description, money, for_month)

    def add_payment(self, date: datetime.date, description: str, amount: float) -> None:
        """Add an amount received from the resident."""
        money = Money(amount)
        if money <= 0:
            raise ValueError(f"Payment amount must be positive, got {amount}")
        self._append(date, LedgerEntryKindEnum.PAYMENT, description, money, None)

    def _append(
        self,
        date: datetime.date,
        kind: LedgerEntryKindEnum,
        description: str,
        amount: Money,
        for_month: Optional[str],
    ) -> None:
        self._entries.append(
            _PendingEntry(
                date=date,
                kind=kind,
                description=description,
                amount=amount,
                sequence=len(self._entries),
                for_month=for_month,
            )
        )

    def entry_count(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def build(self) -> LedgerResult:
        """
        Sort the lines and walk the running balance.

        Order is by date, then charges before payments, then insertion order.
        Each row's balance is the previous balance plus its charge minus its
        payment, starting from ``opening_balance``.
        """
        balance = Money(self.opening_balance)
        rows: List[LedgerEntry] = []

        for pending in sorted(self._entries, key=lambda e: e.sort_key):
            if pending.kind == LedgerEntryKindEnum.CHARGE:
                balance = balance + pending.amount
                charge, payment = pending.amount, Money.from_cents(0)
            else:
                balance = balance - pending.amount
                charge, payment = Money.from_cents(0), pending.amount

            rows.append(
                LedgerEntry(
                    date=pending.date,
                    description=pending.description,
                    charge=charge.to_float(),
                    payment=payment.to_float(),
                    balance=balance.to_float(),
                    kind=pending.kind,
                    for_month=pending.for_month,
                )
            )

        due = balance.clamp_positive()
        credit = (-balance).clamp_positive()

        logger.debug(
            f"Built ledger for {self.tenant_id or 'resident'} with {len(rows)} entries, "
            f"closing balance {balance.to_float():,.2f}"
        )

        return LedgerResult(
            tenant_id=self.tenant_id,
            ledger=rows,
            opening_balance=Money(self.opening_balance).to_float(),
            final_due_balance=due.to_float(),
            final_account_balance=credit.to_float(),
        )

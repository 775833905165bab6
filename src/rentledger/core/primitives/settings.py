# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from .model import Model
from .types import DayOfMonth, FloatBetween0And1, PositiveFloat, PositiveInt


class BillingSettings(Model):
    """
    Configuration for the billing engine.

    Settings are passed explicitly to each computation; nothing here is global
    or mutable. ``as_of`` pins "the current month" so that ledgers are
    reproducible (tests, back-dated statements).

    Usage Examples:
        # Defaults: bill through the current calendar month
        settings = BillingSettings()

        # Statement as it stood at the end of April 2025
        settings = BillingSettings(as_of=date(2025, 4, 30))
    """

    as_of: Optional[date] = Field(
        default=None,
        description="Date whose month is the last billed month. None means today.",
    )
    handover_cutoff_day: DayOfMonth = Field(
        default=10,
        description=(
            "Handover on or before this day of the month bills from the handover "
            "month itself; a later handover gets a grace period."
        ),
    )
    late_handover_offset_months: PositiveInt = Field(
        default=2,
        description="Months after the handover month that billing starts for a late handover.",
    )
    management_fee_rate: FloatBetween0And1 = Field(
        default=0.05,
        description="Management fee as a fraction of a unit's standard rent.",
    )
    include_security_deposit: bool = Field(
        default=False,
        description="Charge the lease's security deposit as an opening statement entry.",
    )
    balance_tolerance: PositiveFloat = Field(
        default=1.0,
        description="Allowed gap between a cached balance and the ledger before it is reported as drift.",
    )

    def current_date(self) -> date:
        """The effective 'today' for billing."""
        return self.as_of or date.today()

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import datetime
from typing import Any, Optional

from pydantic import field_validator

from ..core.primitives import (
    Model,
    PaymentMethodEnum,
    PaymentStatusEnum,
    PaymentTypeEnum,
    PositiveFloat,
    StrictlyPositiveFloat,
    coerce_optional_date,
)


class Payment(Model):
    """
    Immutable record of money received from a resident.

    Attributes:
        tenant_id: Owning resident.
        amount: Amount received, always positive.
        date: Date the money was received; orders the statement.
        type: Reporting classification.
        status: Only PAID payments affect balances.
        rent_for_month: Month the payer said the payment covers ("YYYY-MM").
    """

    id: Optional[str] = None
    tenant_id: str
    amount: StrictlyPositiveFloat
    date: datetime.date
    type: PaymentTypeEnum = PaymentTypeEnum.RENT
    status: PaymentStatusEnum = PaymentStatusEnum.PAID
    payment_method: Optional[PaymentMethodEnum] = None
    transaction_id: Optional[str] = None
    notes: Optional[str] = None
    rent_for_month: Optional[str] = None

    @property
    def is_paid(self) -> bool:
        return self.status == PaymentStatusEnum.PAID

    @property
    def is_water(self) -> bool:
        """Water payments settle water bills, not the rent / service-charge account."""
        return self.type == PaymentTypeEnum.WATER


class WaterBill(Model):
    """
    Metered water charge billed to a resident.

    Water is accounted separately from rent and service charge: it appears only
    on water statements (``generate_ledger(..., include_water=True)``), is paid
    by ``Water`` payments, and is never part of the cached ``due_balance``.

    Attributes:
        amount: Billed amount, ``consumption`` x ``rate`` when metered.
        status: PAID once a water payment has been matched to the bill.
        date: Reading date; dates the statement line.
        consumption: Units consumed between readings, if metered.
    """

    id: Optional[str] = None
    tenant_id: str
    amount: PositiveFloat
    status: PaymentStatusEnum = PaymentStatusEnum.PENDING
    date: Optional[datetime.date] = None
    property_id: Optional[str] = None
    unit_name: Optional[str] = None
    consumption: Optional[PositiveFloat] = None
    rate: Optional[PositiveFloat] = None

    @field_validator("date", mode="before")
    @classmethod
    def lenient_date(cls, v: Any) -> Optional[datetime.date]:
        return coerce_optional_date(v, field_name="water bill date")

    @property
    def is_pending(self) -> bool:
        return self.status != PaymentStatusEnum.PAID

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import AliasChoices, Field, field_validator

from ..core.primitives import (
    LeasePaymentStatusEnum,
    Model,
    PositiveFloat,
    ResidentStatusEnum,
    ResidentTypeEnum,
    coerce_optional_date,
)
from ._index import UnitKey


class Lease(Model):
    """
    Lease terms embedded in a resident record.

    Attributes:
        rent_amount: Agreed monthly rent (documents may call it ``rent``).
        service_charge: Agreed monthly service charge, for homeowners.
        start_date: Lease start; used when a unit was handed over without a date.
        end_date: Lease end.
        last_payment_date: Date of the most recent paid payment.
        last_billed_period: Last month already billed, "YYYY-MM" or empty.
        security_deposit: Deposit held against the lease.
        payment_status: Display status derived from the balances.
    """

    rent_amount: PositiveFloat = Field(
        default=0.0,
        validation_alias=AliasChoices("rentAmount", "rent", "rent_amount"),
    )
    service_charge: Optional[PositiveFloat] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    last_payment_date: Optional[date] = None
    last_billed_period: Optional[str] = None
    security_deposit: PositiveFloat = 0.0
    payment_status: Optional[LeasePaymentStatusEnum] = None

    @field_validator("start_date", "end_date", "last_payment_date", mode="before")
    @classmethod
    def lenient_dates(cls, v: Any, info) -> Optional[date]:
        return coerce_optional_date(v, field_name=info.field_name)

    @field_validator("rent_amount", "security_deposit", mode="before")
    @classmethod
    def missing_amount_is_zero(cls, v: Any) -> Any:
        return 0.0 if v is None else v


class Tenant(Model):
    """
    One lease occupancy: a tenant renting a unit or a homeowner living in one.

    ``due_balance`` and ``account_balance`` are cached figures. They are only
    trustworthy when produced by ``reconcile_tenant``, which recomputes them
    from the payment ledger.
    """

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    property_id: str
    unit_name: str
    resident_type: ResidentTypeEnum = ResidentTypeEnum.TENANT
    status: ResidentStatusEnum = ResidentStatusEnum.ACTIVE
    lease: Lease = Field(default_factory=Lease)
    due_balance: float = 0.0
    account_balance: float = 0.0

    @field_validator("due_balance", "account_balance", mode="before")
    @classmethod
    def missing_balance_is_zero(cls, v: Any) -> Any:
        return 0.0 if v is None else v

    @field_validator("lease", mode="before")
    @classmethod
    def missing_lease_is_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def unit_key(self) -> UnitKey:
        return UnitKey(self.property_id, self.unit_name)

    @property
    def is_active(self) -> bool:
        return self.status == ResidentStatusEnum.ACTIVE

    @property
    def is_homeowner(self) -> bool:
        return self.resident_type == ResidentTypeEnum.HOMEOWNER

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentledger Core Primitives

Building blocks shared by every computation: the immutable model base,
enumerations, billing settings, exact money arithmetic and billing periods.
"""

from .enums import (
    HandoverStatusEnum,
    LeasePaymentStatusEnum,
    LedgerEntryKindEnum,
    ManagementStatusEnum,
    OwnershipEnum,
    PaymentMethodEnum,
    PaymentStatusEnum,
    PaymentTypeEnum,
    ResidentStatusEnum,
    ResidentTypeEnum,
    UnitStatusEnum,
)
from .model import Model
from .money import Money
from .periods import (
    BillingWindow,
    coerce_optional_date,
    format_month,
    parse_billing_period,
    to_month,
)
from .settings import BillingSettings
from .types import (
    DayOfMonth,
    FloatBetween0And1,
    PositiveFloat,
    PositiveInt,
    StrictlyPositiveFloat,
)

__all__ = [
    # Core models
    "Model",
    "Money",
    "BillingWindow",
    # Settings
    "BillingSettings",
    # Enums
    "HandoverStatusEnum",
    "LeasePaymentStatusEnum",
    "LedgerEntryKindEnum",
    "ManagementStatusEnum",
    "OwnershipEnum",
    "PaymentMethodEnum",
    "PaymentStatusEnum",
    "PaymentTypeEnum",
    "ResidentStatusEnum",
    "ResidentTypeEnum",
    "UnitStatusEnum",
    # Periods
    "coerce_optional_date",
    "format_month",
    "parse_billing_period",
    "to_month",
    # Types
    "DayOfMonth",
    "FloatBetween0And1",
    "PositiveFloat",
    "PositiveInt",
    "StrictlyPositiveFloat",
]

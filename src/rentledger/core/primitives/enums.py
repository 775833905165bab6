# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class ResidentTypeEnum(str, Enum):
    """
    Kind of resident occupying a unit.

    Attributes:
        TENANT: Pays monthly rent on the unit.
        HOMEOWNER: Owns the unit and pays the monthly service charge.
    """

    TENANT = "Tenant"
    HOMEOWNER = "Homeowner"


class ResidentStatusEnum(str, Enum):
    """Lifecycle status of a resident record. Move-out archives, never deletes."""

    ACTIVE = "active"
    ARCHIVED = "archived"


class OwnershipEnum(str, Enum):
    """Entity the managing agent remits collected rent to."""

    SM = "SM"
    LANDLORD = "Landlord"


class UnitStatusEnum(str, Enum):
    VACANT = "vacant"
    RENTED = "rented"
    AIRBNB = "airbnb"
    CLIENT_OCCUPIED = "client occupied"


class HandoverStatusEnum(str, Enum):
    """Whether the developer has handed the unit over to its owner."""

    PENDING = "Pending Hand Over"
    HANDED_OVER = "Handed Over"


class ManagementStatusEnum(str, Enum):
    RENTED_FOR_SM = "Rented for Soil Merchants"
    RENTED_FOR_CLIENTS = "Rented for Clients"
    CLIENT_MANAGED = "Client Managed"
    AIRBNB = "Airbnb"


class PaymentTypeEnum(str, Enum):
    """
    Classification of a recorded payment.

    Once paid, WATER payments settle water bills; every other type settles the
    rent / service-charge account. Remittance counts RENT payments only.
    """

    RENT = "Rent"
    DEPOSIT = "Deposit"
    SERVICE_CHARGE = "ServiceCharge"
    WATER = "Water"
    OTHER = "Other"
    ADJUSTMENT = "Adjustment"


class PaymentStatusEnum(str, Enum):
    """Settlement status. Only PAID payments move a balance."""

    PAID = "Paid"
    PENDING = "Pending"
    FAILED = "Failed"


class PaymentMethodEnum(str, Enum):
    CASH = "Cash"
    MPESA = "M-Pesa"
    BANK_TRANSFER = "Bank Transfer"
    CARD = "Card"


class LeasePaymentStatusEnum(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"
    OVERDUE = "Overdue"


class LedgerEntryKindEnum(str, Enum):
    """
    Kind of row in a resident statement.

    Ordering matters: on the same date a CHARGE sorts before a PAYMENT so that
    a same-day payment settles that day's charge.
    """

    CHARGE = "charge"
    PAYMENT = "payment"

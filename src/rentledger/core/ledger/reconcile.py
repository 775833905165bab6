# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Recompute-on-write for cached resident balances.

``Tenant.due_balance`` and ``Tenant.account_balance`` are a materialized view
of the rent / service-charge ledger. Water is a separate silo and never enters
them. Every write path goes through ``reconcile_tenant`` so the cache and the
ledger cannot diverge; ``balance_drift`` detects records written elsewhere.
"""

from __future__ import annotations

import datetime
import logging
from typing import Iterable, List, Optional, Tuple, Union

from ...portfolio import Payment, Property, PropertyOwner, Tenant, UnitIndex
from ..primitives import BillingSettings, LeasePaymentStatusEnum, Money
from .generator import generate_ledger
from .records import LedgerResult

logger = logging.getLogger(__name__)


def account_ledger(
    tenant: Tenant,
    payments: Iterable[Payment],
    properties: Union[Iterable[Property], UnitIndex],
    owner: Optional[PropertyOwner] = None,
    *,
    as_of: Optional[datetime.date] = None,
    settings: Optional[BillingSettings] = None,
) -> LedgerResult:
    """The ledger the cached balances mirror: rent or service charge, no water."""
    return generate_ledger(
        tenant,
        payments,
        properties,
        owner=owner,
        as_of=as_of,
        settings=settings,
        include_water=False,
    )


def reconcile_tenant(
    tenant: Tenant,
    payments: Iterable[Payment],
    properties: Union[Iterable[Property], UnitIndex],
    owner: Optional[PropertyOwner] = None,
    *,
    as_of: Optional[datetime.date] = None,
    settings: Optional[BillingSettings] = None,
) -> Tenant:
    """Return a copy of ``tenant`` with balances recomputed from the account ledger."""
    result = account_ledger(tenant, payments, properties, owner, as_of=as_of, settings=settings)
    status = (
        LeasePaymentStatusEnum.PAID
        if result.final_due_balance <= 0
        else LeasePaymentStatusEnum.PENDING
    )
    lease = tenant.lease.model_copy(update={"payment_status": status})
    return tenant.model_copy(
        update={
            "due_balance": result.final_due_balance,
            "account_balance": result.final_account_balance,
            "lease": lease,
        }
    )


def record_payment(
    tenant: Tenant,
    payment: Payment,
    payments: Iterable[Payment],
    properties: Union[Iterable[Property], UnitIndex],
    owner: Optional[PropertyOwner] = None,
    *,
    as_of: Optional[datetime.date] = None,
    settings: Optional[BillingSettings] = None,
) -> Tuple[Tenant, List[Payment]]:
    """
    Record a payment and recompute the resident's balances.

    A ``Water`` payment joins the history but settles water bills, so the
    cached balances and ``last_payment_date`` only move for other payments.

    Returns:
        The updated resident and the payment history including the new payment.

    Raises:
        ValueError: If the payment belongs to a different resident.
    """
    if payment.tenant_id != tenant.id:
        raise ValueError(
            f"Payment for tenant {payment.tenant_id!r} cannot be recorded against {tenant.id!r}"
        )

    history = list(payments)
    history.append(payment)

    if payment.is_paid and not payment.is_water:
        last = tenant.lease.last_payment_date
        if last is None or payment.date > last:
            lease = tenant.lease.model_copy(update={"last_payment_date": payment.date})
            tenant = tenant.model_copy(update={"lease": lease})

    updated = reconcile_tenant(tenant, history, properties, owner, as_of=as_of, settings=settings)
    logger.info(
        f"Recorded {payment.status.value} {payment.type.value} payment of {payment.amount:,.2f} "
        f"for tenant {tenant.id!r}; due {updated.due_balance:,.2f}, "
        f"credit {updated.account_balance:,.2f}"
    )
    return updated, history


def balance_drift(
    tenant: Tenant,
    payments: Iterable[Payment],
    properties: Union[Iterable[Property], UnitIndex],
    owner: Optional[PropertyOwner] = None,
    *,
    as_of: Optional[datetime.date] = None,
    settings: Optional[BillingSettings] = None,
) -> float:
    """
    Cached net balance minus the account ledger's net balance.

    Zero means the cached ``due_balance``/``account_balance`` agree with the
    payment history. Gaps above ``settings.balance_tolerance`` are logged.
    """
    settings = settings or BillingSettings()
    result = account_ledger(tenant, payments, properties, owner, as_of=as_of, settings=settings)

    cached = Money(tenant.due_balance) - Money(tenant.account_balance)
    computed = Money(result.final_due_balance) - Money(result.final_account_balance)
    drift = (cached - computed).to_float()

    if abs(drift) > settings.balance_tolerance:
        logger.warning(
            f"Cached balance of tenant {tenant.id!r} is off by {drift:,.2f} from its ledger"
        )
    return drift

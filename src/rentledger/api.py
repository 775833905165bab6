# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
JSON HTTP surface over the billing core.

``create_app`` builds a Flask application around any object satisfying the
``Repository`` protocol; the handlers only read records and call the pure
ledger and arrears functions. Persistence and authentication live elsewhere.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Protocol

from flask import Blueprint, Flask, current_app, jsonify, request
from werkzeug.exceptions import BadRequest, HTTPException, NotFound

from .arrears import get_landlord_arrears_breakdown, get_tenants_in_arrears
from .core.ledger import generate_ledger
from .core.primitives import BillingSettings
from .portfolio import Payment, Property, Tenant, UnitIndex, WaterBill

logger = logging.getLogger(__name__)

SETTINGS_KEY = "RENTLEDGER_SETTINGS"
REPOSITORY_KEY = "RENTLEDGER_REPOSITORY"


class Repository(Protocol):
    """Read access to the record store."""

    def get_tenant(self, tenant_id: str) -> Optional[Tenant]: ...

    def get_tenants(self) -> List[Tenant]: ...

    def get_properties(self) -> List[Property]: ...

    def get_payments(self, tenant_id: Optional[str] = None) -> List[Payment]: ...

    def get_water_bills(self) -> List[WaterBill]: ...


class InMemoryRepository:
    """Repository over plain lists, for tests and scripts."""

    def __init__(
        self,
        tenants: Iterable[Tenant] = (),
        properties: Iterable[Property] = (),
        payments: Iterable[Payment] = (),
        water_bills: Iterable[WaterBill] = (),
    ):
        self._tenants: Dict[str, Tenant] = {tenant.id: tenant for tenant in tenants}
        self._properties = list(properties)
        self._payments = list(payments)
        self._water_bills = list(water_bills)

    def get_tenant(self, tenant_id: str) -> Optional[Tenant]:
        return self._tenants.get(tenant_id)

    def get_tenants(self) -> List[Tenant]:
        return list(self._tenants.values())

    def get_properties(self) -> List[Property]:
        return list(self._properties)

    def get_payments(self, tenant_id: Optional[str] = None) -> List[Payment]:
        if tenant_id is None:
            return list(self._payments)
        return [payment for payment in self._payments if payment.tenant_id == tenant_id]

    def get_water_bills(self) -> List[WaterBill]:
        return list(self._water_bills)


bp = Blueprint("rentledger", __name__, url_prefix="/api")


def _repository() -> Repository:
    return current_app.config[REPOSITORY_KEY]


def _settings() -> BillingSettings:
    return current_app.config[SETTINGS_KEY]


def _require_tenant(tenant_id: str) -> Tenant:
    tenant = _repository().get_tenant(tenant_id)
    if tenant is None:
        raise NotFound(f"Tenant {tenant_id} not found")
    return tenant


def _flag(name: str) -> bool:
    """Boolean query parameter, true when absent."""
    raw = request.args.get(name)
    if raw is None:
        return True
    value = raw.strip().lower()
    if value in ("1", "true", "yes"):
        return True
    if value in ("0", "false", "no"):
        return False
    raise BadRequest(f"Query parameter {name} must be true or false, got {raw!r}")


@bp.get("/tenants/<tenant_id>/arrears")
def tenant_arrears(tenant_id: str):
    tenant = _require_tenant(tenant_id)
    return jsonify(arrears=tenant.due_balance)


@bp.get("/tenants/<tenant_id>/ledger")
def tenant_ledger(tenant_id: str):
    repo = _repository()
    tenant = _require_tenant(tenant_id)
    result = generate_ledger(
        tenant,
        repo.get_payments(tenant_id),
        repo.get_properties(),
        repo.get_water_bills(),
        settings=_settings(),
        include_rent=_flag("includeRent"),
        include_service_charge=_flag("includeServiceCharge"),
        include_water=_flag("includeWater"),
    )
    return jsonify(result.to_json_dict())


@bp.get("/tenants/arrears")
def tenants_in_arrears():
    repo = _repository()
    tenants = repo.get_tenants()
    index = UnitIndex(repo.get_properties())

    rows = []
    for row in get_tenants_in_arrears(tenants, repo.get_water_bills()):
        tenant = row.tenant.to_json_dict()
        unit = index.unit_for(row.tenant)
        tenant["unit"] = unit.to_json_dict() if unit else None
        rows.append({"tenant": tenant, "arrears": row.arrears, "pendingWater": row.pending_water})
    return jsonify(rows)


@bp.get("/notify/arrears")
def arrears_reminders():
    repo = _repository()
    reminders = [
        {
            "tenantId": row.tenant.id,
            "name": row.tenant.name,
            "email": row.tenant.email,
            "arrears": row.arrears,
        }
        for row in get_tenants_in_arrears(repo.get_tenants())
    ]
    return jsonify(reminders)


@bp.get("/landlords/<landlord_id>/arrears")
def landlord_arrears(landlord_id: str):
    repo = _repository()
    summary = get_landlord_arrears_breakdown(
        landlord_id,
        repo.get_properties(),
        repo.get_tenants(),
    )
    return jsonify(summary.to_json_dict())


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return jsonify(error=e.description), e.code

    @app.errorhandler(Exception)
    def server_error(e: Exception):
        logger.exception("Unhandled error while serving request")
        return jsonify(error="Internal server error"), 500


def create_app(repository: Repository, settings: Optional[BillingSettings] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        repository: Source of residents, properties, payments and water bills.
        settings: Billing settings; ``settings.as_of`` pins the current month.
    """
    app = Flask(__name__)
    app.config[REPOSITORY_KEY] = repository
    app.config[SETTINGS_KEY] = settings or BillingSettings()
    app.register_blueprint(bp)
    register_error_handlers(app)
    return app

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Arrears aggregation across residents and across a landlord's portfolio.
"""

from ._landlord_arrears import (
    LandlordArrearsRow,
    LandlordArrearsSummary,
    get_landlord_arrears_breakdown,
)
from ._tenant_arrears import (
    TenantArrears,
    get_tenants_in_arrears,
    pending_water_by_tenant,
    rent_arrears,
)

__all__ = [
    "LandlordArrearsRow",
    "LandlordArrearsSummary",
    "TenantArrears",
    "get_landlord_arrears_breakdown",
    "get_tenants_in_arrears",
    "pending_water_by_tenant",
    "rent_arrears",
]

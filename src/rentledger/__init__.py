# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
rentledger - Billing and Arrears Core for Property Management

Pure computations over resident, unit, property and payment records: monthly
charge schedules, running-balance ledgers, arrears aggregation, landlord
remittance figures and floor grouping of unit names.

Key Entry Points:
- rentledger.core.ledger.generate_ledger() - Chronological statement for one resident
- rentledger.arrears.get_tenants_in_arrears() - Residents owing money, largest first
- rentledger.arrears.get_landlord_arrears_breakdown() - Deductions from a landlord's remittance
- rentledger.floors.parse_floor_from_unit_name() - Floor/block key for analytics

Example Usage:
    ```python
    from datetime import date

    from rentledger.core.ledger import generate_ledger

    result = generate_ledger(tenant, payments, properties, as_of=date(2025, 4, 1))
    print(f"Due: {result.final_due_balance:,.0f}")
    ```
"""

# Applications configure their own handlers; the library stays silent by default.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "api",
    "arrears",
    "core",
    "floors",
    "portfolio",
    "remittance",
]


_LAZY_MODULES = {
    "api": "rentledger.api",
    "arrears": "rentledger.arrears",
    "core": "rentledger.core",
    "floors": "rentledger.floors",
    "portfolio": "rentledger.portfolio",
    "remittance": "rentledger.remittance",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'rentledger' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentledger Core

Primitives shared by every computation and the resident ledger engine
(``rentledger.core.ledger``).
"""

from . import primitives
from .primitives import (
    BillingSettings,
    BillingWindow,
    Model,
    Money,
)

__all__ = [
    "primitives",
    "BillingSettings",
    "BillingWindow",
    "Model",
    "Money",
]

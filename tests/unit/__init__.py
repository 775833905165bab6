# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for rentledger components.

Each module exercises one component in isolation against plain in-memory
records; the clock is pinned with ``as_of``.
"""

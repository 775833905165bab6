# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from rentledger.core.primitives import BillingSettings


def test_billing_settings_defaults():
    """Test that BillingSettings initializes with the documented defaults."""
    settings = BillingSettings()
    assert settings.as_of is None
    assert settings.handover_cutoff_day == 10
    assert settings.late_handover_offset_months == 2
    assert settings.management_fee_rate == pytest.approx(0.05)
    assert settings.include_security_deposit is False
    assert settings.balance_tolerance == pytest.approx(1.0)


def test_current_date_prefers_as_of():
    assert BillingSettings(as_of=date(2025, 4, 1)).current_date() == date(2025, 4, 1)
    assert BillingSettings().current_date() == date.today()


def test_camel_case_configuration_is_accepted():
    settings = BillingSettings.model_validate({"asOf": "2025-04-01", "handoverCutoffDay": 15})
    assert settings.as_of == date(2025, 4, 1)
    assert settings.handover_cutoff_day == 15


@pytest.mark.parametrize(
    "overrides",
    [
        {"handover_cutoff_day": 0},
        {"handover_cutoff_day": 31},
        {"management_fee_rate": 1.5},
        {"late_handover_offset_months": -1},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(ValidationError):
        BillingSettings(**overrides)


def test_settings_are_immutable():
    settings = BillingSettings()
    with pytest.raises(ValidationError):
        settings.handover_cutoff_day = 5

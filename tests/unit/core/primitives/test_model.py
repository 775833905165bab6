# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Optional

import pytest
from pydantic import ValidationError

from rentledger.core.primitives import Model


class _Sample(Model):
    unit_name: str
    due_balance: float = 0.0
    start_date: Optional[date] = None


def test_accepts_camel_and_snake_case():
    assert _Sample(unitName="A1").unit_name == "A1"
    assert _Sample(unit_name="A1").unit_name == "A1"


def test_unknown_fields_are_ignored():
    sample = _Sample.model_validate({"unitName": "A1", "createdAt": "2024-01-01"})
    assert not hasattr(sample, "created_at")


def test_to_json_dict_uses_camel_case():
    sample = _Sample(unit_name="A1", due_balance=10.5, start_date=date(2024, 1, 10))
    assert sample.to_json_dict() == {
        "unitName": "A1",
        "dueBalance": 10.5,
        "startDate": "2024-01-10",
    }


def test_models_are_frozen():
    sample = _Sample(unit_name="A1")
    with pytest.raises(ValidationError):
        sample.due_balance = 1.0
    updated = sample.model_copy(update={"due_balance": 1.0})
    assert updated.due_balance == 1.0
    assert sample.due_balance == 0.0

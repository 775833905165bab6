# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models; updated records are produced with ``model_copy``.
    Field names are snake_case in Python and camelCase on the wire, matching
    the documents the records are loaded from.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Immutable models; recomputed values come back as copies
        alias_generator=to_camel,
        populate_by_name=True,  # Accept both unitName and unit_name
        extra="ignore",  # Source documents carry display fields we do not model
    )

    def to_json_dict(self) -> dict:
        """Dump to a JSON-compatible dict using the camelCase wire names."""
        return self.model_dump(mode="json", by_alias=True)

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model for propdiff configuration objects.

    Immutable, slot-based models. Mutable runtime state (the descriptor cache,
    the comparator registry) lives in explicit service objects, never here.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        slots=True,
        extra="forbid",  # Catches typos in setting names immediately
    )

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .model import Model


class ScanSettings(Model):
    """
    Configuration for record type introspection.

    Controls which members of a record type the scanner turns into property
    descriptors. Declared fields (pydantic fields, dataclass fields, class
    annotations) are always scanned; these settings widen or narrow the rest.

    Usage Examples:
        # Default: fields plus public @property getters
        settings = ScanSettings()

        # Declared fields only, ignore computed getters
        settings = ScanSettings(include_properties=False)
    """

    include_properties: bool = Field(
        default=True,
        description="Scan @property getters (and pydantic computed fields) in addition to declared fields.",
    )
    include_private: bool = Field(
        default=False,
        description=(
            "Admit single-underscore names. Dunder names are never scanned "
            "regardless of this flag."
        ),
    )

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propdiff Core Primitives

Configuration base model, settings and the enumerations shared by the scanner,
the comparison engine and reporting.
"""

from .enums import (
    OUTCOME_FLAGS,
    ComparisonResult,
    Outcome,
    PropertyKind,
    PropertyMapOperation,
)
from .model import Model
from .settings import ScanSettings

__all__ = [
    "ComparisonResult",
    "Model",
    "OUTCOME_FLAGS",
    "Outcome",
    "PropertyKind",
    "PropertyMapOperation",
    "ScanSettings",
]

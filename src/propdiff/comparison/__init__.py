# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propdiff Comparison Engine

The comparison session (ObjectComparer), its fluent configuration builder and
the result models it produces.
"""

from .comparer import ObjectComparer, convert_to_string
from .configuration import ComparerConfiguration
from .results import (
    ComparisonReport,
    PropertyComparisonResult,
    PropertyComparisonResultCollection,
)

__all__ = [
    "ObjectComparer",
    "convert_to_string",
    "ComparerConfiguration",
    "ComparisonReport",
    "PropertyComparisonResult",
    "PropertyComparisonResultCollection",
]

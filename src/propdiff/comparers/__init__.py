# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propdiff Comparers

Three-way comparers, the process-wide comparer registry and comparer resolution.
"""

from .base import (
    Comparer,
    FunctionComparer,
    KeyComparer,
    NaturalComparer,
    StringComparer,
    as_comparer,
)
from .registry import (
    NATURALLY_ORDERED_TYPES,
    ComparerRegistry,
    get_global_comparer,
    global_comparers,
    register_global_comparer,
    resolve_comparer,
)

__all__ = [
    "Comparer",
    "FunctionComparer",
    "KeyComparer",
    "NaturalComparer",
    "StringComparer",
    "as_comparer",
    "NATURALLY_ORDERED_TYPES",
    "ComparerRegistry",
    "get_global_comparer",
    "global_comparers",
    "register_global_comparer",
    "resolve_comparer",
]

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propdiff Core

Shared primitives (settings, enumerations) and the exception hierarchy.
"""

from . import primitives
from .exceptions import (
    InvalidArgumentError,
    InvalidPropertyReferenceError,
    NoComparerError,
    NoTypeInformationError,
    NullArgumentError,
    PropDiffError,
    SameInstanceError,
    TypeMismatchError,
)
from .primitives import (
    ComparisonResult,
    Model,
    Outcome,
    PropertyKind,
    PropertyMapOperation,
    ScanSettings,
)

__all__ = [
    "primitives",
    # Primitives
    "ComparisonResult",
    "Model",
    "Outcome",
    "PropertyKind",
    "PropertyMapOperation",
    "ScanSettings",
    # Exceptions
    "InvalidArgumentError",
    "InvalidPropertyReferenceError",
    "NoComparerError",
    "NoTypeInformationError",
    "NullArgumentError",
    "PropDiffError",
    "SameInstanceError",
    "TypeMismatchError",
]

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propdiff - Property-by-property comparison of structured records

Compares two records, possibly of different types, one first-level property at
a time, and reports a verdict per property plus an overall "is different"
summary. Properties are matched by name unless a property map redirects or
ignores them for a given destination type.

Key Entry Points:
- propdiff.register_types() - Scan record types into the shared cache
- propdiff.create_session() - Comparer for registered types, no overrides
- propdiff.configure() - Fluent builder for property maps and comparers

Example Usage:
    ```python
    from propdiff import configure

    comparer = (
        configure(Person, PersonDto)
        .map_property("age", "years_old", force_string_value=True)
        .create_comparer()
    )
    results, is_different = comparer.compare(person, dto)
    for result in results:
        print(result.name, result.outcome.value)
    ```
"""

import importlib
import logging

from .api import (
    configure,
    create_session,
    get_global_comparer,
    register_global_comparer,
    register_module,
    register_type,
    register_types,
)
from .comparers import (
    Comparer,
    ComparerRegistry,
    FunctionComparer,
    KeyComparer,
    NaturalComparer,
    StringComparer,
    global_comparers,
)
from .comparison import (
    ComparerConfiguration,
    ComparisonReport,
    ObjectComparer,
    PropertyComparisonResult,
    PropertyComparisonResultCollection,
)
from .core import (
    ComparisonResult,
    InvalidArgumentError,
    InvalidPropertyReferenceError,
    NoComparerError,
    NoTypeInformationError,
    NullArgumentError,
    Outcome,
    PropDiffError,
    PropertyMapOperation,
    SameInstanceError,
    ScanSettings,
    TypeMismatchError,
)
from .scanner import (
    PropertyDescriptor,
    PropertyMap,
    TypeDescriptor,
    TypeScanner,
    declare_property_map,
    default_scanner,
    property_map,
    scannable,
)

# Library logging: applications configure their own handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Subpackages with heavy dependencies load on first attribute access
_LAZY_MODULES = {
    "reporting": "propdiff.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'propdiff' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module


__all__ = [
    # API
    "configure",
    "create_session",
    "get_global_comparer",
    "register_global_comparer",
    "register_module",
    "register_type",
    "register_types",
    # Comparers
    "Comparer",
    "ComparerRegistry",
    "FunctionComparer",
    "KeyComparer",
    "NaturalComparer",
    "StringComparer",
    "global_comparers",
    # Comparison
    "ComparerConfiguration",
    "ComparisonReport",
    "ObjectComparer",
    "PropertyComparisonResult",
    "PropertyComparisonResultCollection",
    # Core
    "ComparisonResult",
    "Outcome",
    "PropertyMapOperation",
    "ScanSettings",
    "InvalidArgumentError",
    "InvalidPropertyReferenceError",
    "NoComparerError",
    "NoTypeInformationError",
    "NullArgumentError",
    "PropDiffError",
    "SameInstanceError",
    "TypeMismatchError",
    # Scanner
    "PropertyDescriptor",
    "PropertyMap",
    "TypeDescriptor",
    "TypeScanner",
    "declare_property_map",
    "default_scanner",
    "property_map",
    "scannable",
]

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Public entry points.

Thin functions over the process-wide default scanner and comparer registry.
Every function accepts explicit scanner/registry instances for callers that
manage their own lifetimes (tests, multi-tenant hosts).
"""

from __future__ import annotations

from types import ModuleType
from typing import Any, List, Mapping, Optional

from .comparers.registry import (
    ComparerRegistry,
    get_global_comparer,
    register_global_comparer,
)
from .comparison.comparer import ObjectComparer
from .comparison.configuration import ComparerConfiguration
from .scanner.descriptors import TypeDescriptor
from .scanner.scanner import TypeScanner, default_scanner


def configure(
    source_type: type,
    destination_type: type,
    include_attribute_mappings: bool = False,
    *,
    scanner: Optional[TypeScanner] = None,
    registry: Optional[ComparerRegistry] = None,
) -> ComparerConfiguration:
    """
    Begin configuring a comparer between two record types.

    Example:
        ```python
        comparer = (
            configure(Person, PersonDto)
            .ignore_property("notes")
            .map_property("age", "years_old")
            .create_comparer()
        )
        ```
    """
    return ComparerConfiguration(
        source_type,
        destination_type,
        include_attribute_mappings,
        scanner=scanner,
        registry=registry,
    )


def create_session(
    type1: type,
    type2: Optional[type] = None,
    comparers: Optional[Mapping[Any, Any]] = None,
    *,
    scanner: Optional[TypeScanner] = None,
    registry: Optional[ComparerRegistry] = None,
) -> ObjectComparer:
    """
    Create a comparer for registered types without any overrides.

    type2 defaults to type1. Both types must have been registered.

    Raises:
        NoTypeInformationError: If either type was never registered
    """
    return ObjectComparer(type1, type2, comparers, scanner=scanner, registry=registry)


def register_type(
    type_: type,
    include_attribute_mappings: bool = True,
    *,
    scanner: Optional[TypeScanner] = None,
) -> TypeDescriptor:
    """Scan and cache a record type."""
    return (scanner or default_scanner).register_type(type_, include_attribute_mappings)


def register_types(
    *types: type,
    include_attribute_mappings: bool = True,
    scanner: Optional[TypeScanner] = None,
) -> List[TypeDescriptor]:
    return (scanner or default_scanner).register_types(
        *types, include_attribute_mappings=include_attribute_mappings
    )


def register_module(
    module: ModuleType,
    include_attribute_mappings: bool = True,
    *,
    scanner: Optional[TypeScanner] = None,
) -> List[TypeDescriptor]:
    """Register every @scannable class defined in a module."""
    return (scanner or default_scanner).register_module(module, include_attribute_mappings)


__all__ = [
    "configure",
    "create_session",
    "get_global_comparer",
    "register_global_comparer",
    "register_module",
    "register_type",
    "register_types",
]

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propdiff Scanner

Record type introspection, declarative property maps and the thread-safe type
descriptor cache.
"""

from .attributes import declare_property_map, is_scannable, property_map, scannable
from .descriptors import PropertyDescriptor, PropertyMap, TypeDescriptor
from .introspection import discover_properties, unwrap_annotation
from .scanner import TypeScanner, default_scanner

__all__ = [
    # Descriptors
    "PropertyDescriptor",
    "PropertyMap",
    "TypeDescriptor",
    # Declarative input
    "declare_property_map",
    "is_scannable",
    "property_map",
    "scannable",
    # Introspection
    "discover_properties",
    "unwrap_annotation",
    # Cache
    "TypeScanner",
    "default_scanner",
]

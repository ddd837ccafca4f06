# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Type descriptor cache.

TypeScanner introspects a record type once and caches the resulting
TypeDescriptor, keyed by (type, include_attribute_mappings). The variant that
honors declared property maps and the variant that ignores them can coexist.

Cached descriptors are shared between every comparer built from the scanner
and must not be modified. Callers that need private overrides ask for a clone.
"""

from __future__ import annotations

import inspect
import logging
import threading
from types import ModuleType
from typing import Dict, List, Optional, Tuple

from ..core.exceptions import InvalidArgumentError, NoTypeInformationError, NullArgumentError
from ..core.primitives import ScanSettings
from .attributes import declared_maps_for, is_scannable
from .descriptors import PropertyDescriptor, TypeDescriptor
from .introspection import discover_properties

logger = logging.getLogger(__name__)

_CacheKey = Tuple[type, bool]


class TypeScanner:
    """
    Thread-safe, lazily populated cache of scanned record types.

    A single lock guards the check-then-store sequence of the cache. Scanning
    runs outside the lock; when two threads race to scan the same key, the
    first descriptor stored wins and both callers receive it. Lookups that find
    an existing entry never take the lock.

    Example:
        ```python
        scanner = TypeScanner()
        scanner.register_types(Person, PersonDto)
        descriptor = scanner.get(Person)
        print(list(descriptor.properties))
        ```
    """

    def __init__(self, settings: Optional[ScanSettings] = None):
        self.settings = settings or ScanSettings()
        self._lock = threading.Lock()
        self._cache: Dict[_CacheKey, TypeDescriptor] = {}

    # -------------------------
    # Scanning
    # -------------------------

    def build_type_descriptor(
        self, type_: type, include_attribute_mappings: bool = True
    ) -> TypeDescriptor:
        """
        Scan a record type without touching the cache.

        Args:
            type_: Record type to scan
            include_attribute_mappings: Seed mapping tables from declared property maps

        Returns:
            A new TypeDescriptor owned by the caller

        Raises:
            NullArgumentError: If type_ is None
            InvalidArgumentError: If type_ is not a class
        """
        if type_ is None:
            raise NullArgumentError("type_")
        if not isinstance(type_, type):
            raise InvalidArgumentError(f"Expected a class, got {type_!r}.", "type_")

        properties: Dict[str, PropertyDescriptor] = {}
        for descriptor, annotated_maps in discover_properties(type_, self.settings):
            if include_attribute_mappings:
                # Side-table declarations are applied last so they win
                for property_map in annotated_maps + declared_maps_for(type_, descriptor.name):
                    descriptor.set_map(property_map)
            properties[descriptor.name] = descriptor

        logger.debug(
            f"Scanned {type_.__qualname__}: {len(properties)} properties "
            f"(include_attribute_mappings={include_attribute_mappings})"
        )
        return TypeDescriptor(
            type_, properties, mappings_include_declared_attributes=include_attribute_mappings
        )

    def get_or_scan(
        self, type_: type, include_attribute_mappings: bool = True, clone: bool = False
    ) -> TypeDescriptor:
        """
        Return the cached descriptor for a type, scanning it on first use.

        When only the variant including declared mappings is cached and the
        request excludes them, the excluded variant is derived from it by
        cloning with empty mapping tables.

        Args:
            type_: Record type
            include_attribute_mappings: Which variant to return
            clone: Return a private copy the caller may modify

        Returns:
            The shared cached TypeDescriptor, or a clone of it
        """
        key = (type_, include_attribute_mappings)
        descriptor = self._cache.get(key)
        if descriptor is None:
            derived_from = None if include_attribute_mappings else self._cache.get((type_, True))
            if derived_from is not None:
                candidate = derived_from.clone(include_maps=False)
            else:
                candidate = self.build_type_descriptor(type_, include_attribute_mappings)
            with self._lock:
                descriptor = self._cache.setdefault(key, candidate)
        return descriptor.clone() if clone else descriptor

    def register_type(
        self, type_: type, include_attribute_mappings: bool = True
    ) -> TypeDescriptor:
        """Scan and cache a record type so comparers can be created for it."""
        return self.get_or_scan(type_, include_attribute_mappings)

    def register_types(
        self, *types: type, include_attribute_mappings: bool = True
    ) -> List[TypeDescriptor]:
        return [self.register_type(t, include_attribute_mappings) for t in types]

    def register_module(
        self, module: ModuleType, include_attribute_mappings: bool = True
    ) -> List[TypeDescriptor]:
        """
        Register every @scannable class defined in a module.

        Classes imported into the module from elsewhere are not registered.

        Returns:
            Descriptors of the registered classes, ordered by class name
        """
        if module is None:
            raise NullArgumentError("module")
        registered = []
        for _, member in inspect.getmembers(module, inspect.isclass):
            if member.__module__ != module.__name__ or not is_scannable(member):
                continue
            registered.append(self.register_type(member, include_attribute_mappings))
        logger.debug(f"Registered {len(registered)} scannable types from {module.__name__}")
        return registered

    # -------------------------
    # Lookup without scanning
    # -------------------------

    def try_get(
        self, type_: type, include_attribute_mappings: Optional[bool] = None
    ) -> Optional[TypeDescriptor]:
        """
        Cached descriptor for a type, or None if it was never scanned.

        Args:
            type_: Record type
            include_attribute_mappings: Variant to look up. None accepts either
                variant, preferring the one that includes declared mappings.
        """
        if include_attribute_mappings is not None:
            return self._cache.get((type_, include_attribute_mappings))
        descriptor = self._cache.get((type_, True))
        if descriptor is None:
            descriptor = self._cache.get((type_, False))
        return descriptor

    def get(
        self, type_: type, include_attribute_mappings: Optional[bool] = None
    ) -> TypeDescriptor:
        """
        Cached descriptor for a type.

        Raises:
            NoTypeInformationError: If the type was never scanned
        """
        descriptor = self.try_get(type_, include_attribute_mappings)
        if descriptor is None:
            raise NoTypeInformationError(type_)
        return descriptor

    def is_registered(self, type_: type) -> bool:
        return self.try_get(type_) is not None

    def registered_types(self) -> List[type]:
        with self._lock:
            keys = list(self._cache)
        return list(dict.fromkeys(type_ for type_, _ in keys))


default_scanner = TypeScanner()

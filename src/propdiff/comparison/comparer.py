# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property-by-property object comparison.

ObjectComparer is a comparison session bound to two record types. It walks the
properties of the first type, resolves the matching property of the second
type (through a property map, or by name), picks a comparer and classifies the
outcome of each property.

Precondition failures raise before any property is compared. Failures while
comparing a single property are captured on that property's result and never
abort the walk.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from ..comparers.base import Comparer, as_comparer
from ..comparers.registry import ComparerRegistry, global_comparers, resolve_comparer
from ..core.exceptions import (
    NoComparerError,
    NullArgumentError,
    SameInstanceError,
    TypeMismatchError,
)
from ..core.primitives import Outcome
from ..scanner.descriptors import PropertyDescriptor, PropertyMap, TypeDescriptor
from ..scanner.scanner import TypeScanner, default_scanner
from .results import (
    ComparisonReport,
    PropertyComparisonResult,
    PropertyComparisonResultCollection,
)

logger = logging.getLogger(__name__)


def convert_to_string(value: Any, format_string: Optional[str] = None) -> Optional[str]:
    """
    Convert a property value to its string form for coerced comparison.

    None stays None. A non-blank format string is applied with format(); values
    that reject the format spec fall back to str().
    """
    if value is None:
        return None
    if format_string is None or not format_string.strip():
        return str(value)
    try:
        return format(value, format_string)
    except (TypeError, ValueError):
        return str(value)


class ObjectComparer:
    """
    Compares objects of two record types property by property.

    Both record types must be registered with the scanner unless descriptors
    are supplied explicitly. Once constructed, a comparer is immutable and may
    be shared between threads.

    Attributes:
        type1: Exact type of the first object of every comparison
        type2: Exact type of the second object of every comparison
        comparers: Session comparers, keyed by value type

    Example:
        ```python
        register_types(Person, PersonDto)
        comparer = ObjectComparer(Person, PersonDto)
        results, is_different = comparer.compare(person, dto)
        for result in results.differences():
            print(f"{result.name}: {result.source_value} vs {result.target_value}")
        ```
    """

    def __init__(
        self,
        type1: type,
        type2: Optional[type] = None,
        comparers: Optional[Mapping[Any, Any]] = None,
        *,
        source_descriptor: Optional[TypeDescriptor] = None,
        destination_descriptor: Optional[TypeDescriptor] = None,
        scanner: Optional[TypeScanner] = None,
        registry: Optional[ComparerRegistry] = None,
    ):
        if type1 is None:
            raise NullArgumentError("type1")
        scanner = scanner if scanner is not None else default_scanner
        self.type1 = type1
        self.type2 = type1 if type2 is None else type2
        self.comparers: Mapping[Any, Comparer] = MappingProxyType(
            {value_type: as_comparer(c) for value_type, c in (comparers or {}).items()}
        )
        self._registry = registry if registry is not None else global_comparers
        self._source = source_descriptor if source_descriptor is not None else scanner.get(self.type1)
        self._destination = (
            destination_descriptor
            if destination_descriptor is not None
            else scanner.get(self.type2)
        )

    @classmethod
    def create(
        cls,
        type1: type,
        type2: Optional[type] = None,
        comparers: Optional[Mapping[Any, Any]] = None,
        **kwargs: Any,
    ) -> "ObjectComparer":
        """Create a comparer for registered types; type2 defaults to type1."""
        return cls(type1, type2, comparers, **kwargs)

    @property
    def source_descriptor(self) -> TypeDescriptor:
        return self._source

    @property
    def destination_descriptor(self) -> TypeDescriptor:
        return self._destination

    def _resolve_comparer(self, value_type: Any) -> Optional[Comparer]:
        return resolve_comparer(value_type, self.comparers, self._registry)

    def _validate(self, object1: Any, object2: Any) -> None:
        if object1 is None:
            raise NullArgumentError("object1")
        if object2 is None:
            raise NullArgumentError("object2")
        if type(object1) is not self.type1:
            raise TypeMismatchError("object1", self.type1, type(object1))
        if type(object2) is not self.type2:
            raise TypeMismatchError("object2", self.type2, type(object2))
        if object1 is object2:
            raise SameInstanceError()

    def _compare_values(
        self,
        prop1: PropertyDescriptor,
        prop2: PropertyDescriptor,
        mapping: Optional[PropertyMap],
        val1: Any,
        val2: Any,
    ) -> Tuple[Outcome, bool, Any, Any, Optional[BaseException]]:
        coerce = (mapping is not None and mapping.force_string_value) or (
            prop1.value_type != prop2.value_type
        )
        try:
            if coerce:
                val1 = convert_to_string(val1, mapping.format_string if mapping else None)
                val2 = convert_to_string(val2, mapping.target_format_string if mapping else None)
                value_type = str
            else:
                value_type = prop1.value_type
            comparer = self._resolve_comparer(value_type)
            if comparer is None:
                raise NoComparerError(value_type)
            comp = comparer.compare(val1, val2)
            if comp < 0:
                outcome = Outcome.LESS_THAN
            elif comp > 0:
                outcome = Outcome.GREATER_THAN
            elif comp == 0:
                outcome = Outcome.EQUAL
            else:
                raise TypeError(f"Comparer returned an unordered result {comp!r}.")
        except Exception as e:
            logger.warning(f"Could not compare property '{prop1.name}' against '{prop2.name}': {e}")
            return Outcome.UNDEFINED, coerce, val1, val2, e
        return outcome, coerce, val1, val2, None

    def compare(
        self,
        object1: Any,
        object2: Any,
        results: Optional[PropertyComparisonResultCollection] = None,
    ) -> ComparisonReport:
        """
        Compare the properties of object1 against the properties of object2.

        Args:
            object1: Object of type1
            object2: Object of type2, a different instance than object1
            results: Optional collection to append results to

        Returns:
            ComparisonReport of the results collection (the one passed in, if
            any) and whether any property compared as less-than or greater-than

        Raises:
            NullArgumentError: If either object is None
            TypeMismatchError: If either object is not exactly of its expected type
            SameInstanceError: If both arguments are the same object
        """
        self._validate(object1, object2)
        if results is None:
            results = PropertyComparisonResultCollection()

        # Collected locally so a failing property getter leaves results untouched
        collected = []
        is_different = False
        for prop1 in self._source:
            mapping = prop1.get_map(self.type2)
            if mapping is not None and mapping.is_ignore:
                continue
            target_name = mapping.target_property if mapping is not None else prop1.name
            val1 = prop1.get_value(object1)
            prop2 = self._destination.get(target_name)

            if prop2 is None:
                result = PropertyComparisonResult(
                    prop1, val1, None, None, mapping, Outcome.PROPERTY_NOT_FOUND
                )
            else:
                val2 = prop2.get_value(object2)
                outcome, coerced, val1, val2, error = self._compare_values(
                    prop1, prop2, mapping, val1, val2
                )
                result = PropertyComparisonResult(
                    prop1, val1, prop2, val2, mapping, outcome, coerced, error
                )

            collected.append(result)
            is_different = is_different or result.is_different

        for result in collected:
            results.add(result)

        logger.debug(
            f"Compared {self.type1.__qualname__} against {self.type2.__qualname__}: "
            f"{len(collected)} results, is_different={is_different}"
        )
        return ComparisonReport(results, is_different)

    def is_different(self, object1: Any, object2: Any) -> bool:
        """Compare two objects and return only the overall verdict."""
        return self.compare(object1, object2).is_different

    def __repr__(self) -> str:
        return (
            f"ObjectComparer({self.type1.__qualname__}, {self.type2.__qualname__}, "
            f"comparers={list(self.comparers)})"
        )

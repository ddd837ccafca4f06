# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fluent configuration of object comparers.

ComparerConfiguration layers property maps and session comparers on top of the
scanned descriptors of a (source, destination) type pair, then produces an
ObjectComparer. Overrides are applied to a private clone of the source
descriptor and never reach the scanner's shared cache.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..comparers.base import Comparer, as_comparer
from ..comparers.registry import ComparerRegistry
from ..core.exceptions import InvalidPropertyReferenceError, NullArgumentError
from ..core.primitives import PropertyMapOperation
from ..scanner.descriptors import PropertyDescriptor, PropertyMap, TypeDescriptor
from ..scanner.scanner import TypeScanner, default_scanner
from .comparer import ObjectComparer

logger = logging.getLogger(__name__)


class ComparerConfiguration:
    """
    Builder for an ObjectComparer between a source and a destination type.

    Both types are scanned on demand, so they need not be registered
    beforehand. Every builder method returns the builder for chaining.

    Example:
        ```python
        comparer = (
            ComparerConfiguration(Person, PersonDto)
            .map_property("age", "years_old", force_string_value=True)
            .ignore_property("notes")
            .add_comparer(str, StringComparer(ignore_case=True))
            .create_comparer()
        )
        ```
    """

    def __init__(
        self,
        source_type: type,
        destination_type: type,
        include_attribute_mappings: bool = False,
        *,
        scanner: Optional[TypeScanner] = None,
        registry: Optional[ComparerRegistry] = None,
    ):
        if source_type is None:
            raise NullArgumentError("source_type")
        if destination_type is None:
            raise NullArgumentError("destination_type")
        self._scanner = scanner if scanner is not None else default_scanner
        self._registry = registry
        self.source_type = source_type
        self.destination_type = destination_type
        self.include_attribute_mappings = include_attribute_mappings
        self._source = self._scanner.get_or_scan(
            source_type, include_attribute_mappings, clone=True
        )
        self._destination = self._scanner.get_or_scan(destination_type, include_attribute_mappings)
        self._comparers: Dict[Any, Comparer] = {}

    @property
    def source_descriptor(self) -> TypeDescriptor:
        """The builder's working copy of the source descriptor."""
        return self._source

    @property
    def destination_descriptor(self) -> TypeDescriptor:
        return self._destination

    def _property(
        self, descriptor: TypeDescriptor, name: str, param_name: str
    ) -> PropertyDescriptor:
        if not name:
            raise NullArgumentError(param_name)
        prop = descriptor.get(name)
        if prop is None:
            raise InvalidPropertyReferenceError(name, descriptor.source_type, param_name)
        return prop

    def map_property(
        self,
        source_property: str,
        target_property: str,
        force_string_value: bool = False,
        format_string: Optional[str] = None,
        target_format_string: Optional[str] = None,
    ) -> "ComparerConfiguration":
        """
        Compare a source property against a differently named destination property.

        Args:
            source_property: Property name on the source type
            target_property: Property name on the destination type
            force_string_value: Coerce both values to strings before comparing
            format_string: Format spec for the source value when coercing
            target_format_string: Format spec for the destination value when coercing

        Raises:
            NullArgumentError: If a property name is empty
            InvalidPropertyReferenceError: If a name is not a property of its type
        """
        prop = self._property(self._source, source_property, "source_property")
        target = self._property(self._destination, target_property, "target_property")
        prop.set_map(
            PropertyMap(
                self.destination_type,
                target.name,
                operation=PropertyMapOperation.MAP_TO_PROPERTY,
                force_string_value=force_string_value,
                format_string=format_string,
                target_format_string=target_format_string,
            )
        )
        logger.debug(
            f"Mapped {self.source_type.__qualname__}.{prop.name} -> "
            f"{self.destination_type.__qualname__}.{target.name}"
        )
        return self

    def ignore_property(self, source_property: str) -> "ComparerConfiguration":
        """Skip a source property when comparing against the destination type."""
        prop = self._property(self._source, source_property, "source_property")
        prop.set_map(PropertyMap.ignore(self.destination_type))
        logger.debug(
            f"Ignoring {self.source_type.__qualname__}.{prop.name} against "
            f"{self.destination_type.__qualname__}"
        )
        return self

    def add_comparer(self, value_type: Any, comparer: Any) -> "ComparerConfiguration":
        """Use a comparer for a value type in comparers created by this builder."""
        if value_type is None:
            raise NullArgumentError("value_type")
        self._comparers[value_type] = as_comparer(comparer)
        return self

    def create_comparer(self) -> ObjectComparer:
        """
        Create an ObjectComparer from the current configuration.

        The comparer receives its own copy of the configured descriptor, so later
        builder calls do not affect comparers already created.
        """
        return ObjectComparer(
            self.source_type,
            self.destination_type,
            dict(self._comparers),
            source_descriptor=self._source.clone(),
            destination_descriptor=self._destination,
            registry=self._registry,
        )

    build = create_comparer

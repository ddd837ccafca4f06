# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Type and property descriptors.

A TypeDescriptor is the scanned metadata of one record type: an ordered table
of PropertyDescriptor objects, each carrying the property maps that redirect or
mask the property when it is compared against a specific destination type.

Descriptors held by a TypeScanner are shared and must be treated as read-only.
Code that needs private overrides works on a clone.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from ..core.exceptions import InvalidArgumentError, NullArgumentError
from ..core.primitives import PropertyKind, PropertyMapOperation


@dataclass(frozen=True)
class PropertyMap:
    """
    Mapping directive attached to a source property for one destination type.

    Instances can be used directly as ``typing.Annotated`` metadata on a record
    field to declare the mapping at class definition time.

    Attributes:
        target_type: Destination record type the directive applies to
        target_property: Destination property name (MAP_TO_PROPERTY only)
        operation: Map to another property, or ignore the property
        force_string_value: Coerce both values to strings before comparing
        format_string: Format spec applied to the source value when coercing
        target_format_string: Format spec applied to the destination value when coercing

    Example:
        ```python
        class Person(BaseModel):
            age: Annotated[int, PropertyMap(PersonDto, "years_old")]
        ```
    """

    target_type: type
    target_property: Optional[str] = None
    operation: PropertyMapOperation = PropertyMapOperation.MAP_TO_PROPERTY
    force_string_value: bool = False
    format_string: Optional[str] = None
    target_format_string: Optional[str] = None

    def __post_init__(self):
        if self.target_type is None:
            raise NullArgumentError("target_type")
        if not isinstance(self.target_type, type):
            raise InvalidArgumentError(
                f"target_type must be a class, got {self.target_type!r}.", "target_type"
            )
        if self.operation == PropertyMapOperation.MAP_TO_PROPERTY:
            if not self.target_property:
                raise NullArgumentError(
                    "target_property",
                    "A property map that maps to a property requires a target property name.",
                )
        elif (
            self.target_property is not None
            or self.force_string_value
            or self.format_string is not None
            or self.target_format_string is not None
        ):
            raise InvalidArgumentError(
                "An ignore-property map cannot carry target property data.", "operation"
            )

    @classmethod
    def ignore(cls, target_type: type) -> "PropertyMap":
        """Create a map that skips the property when compared against target_type."""
        return cls(target_type, operation=PropertyMapOperation.IGNORE_PROPERTY)

    @property
    def is_ignore(self) -> bool:
        return self.operation == PropertyMapOperation.IGNORE_PROPERTY


class PropertyDescriptor:
    """
    One readable property of a scanned record type.

    Holds the property's normalized value type, its value accessor and a
    mapping table keyed by destination type. The table keeps at most one map
    per destination type; installing a map for a destination that already has
    one replaces it.
    """

    __slots__ = ("name", "value_type", "declared_type", "kind", "_getter", "_maps")

    def __init__(
        self,
        name: str,
        value_type: Any,
        getter: Callable[[Any], Any],
        kind: PropertyKind = PropertyKind.FIELD,
        declared_type: Any = None,
        maps: Optional[Mapping[type, PropertyMap]] = None,
    ):
        self.name = name
        self.value_type = value_type
        self.declared_type = value_type if declared_type is None else declared_type
        self.kind = kind
        self._getter = getter
        self._maps: Dict[type, PropertyMap] = dict(maps) if maps else {}

    def get_value(self, instance: Any) -> Any:
        """Read this property's value off an instance of the scanned type."""
        return self._getter(instance)

    @property
    def maps(self) -> Mapping[type, PropertyMap]:
        """Read-only view of the mapping table keyed by destination type."""
        return MappingProxyType(self._maps)

    def get_map(self, target_type: type) -> Optional[PropertyMap]:
        return self._maps.get(target_type)

    def set_map(self, property_map: PropertyMap) -> None:
        """Install a map, replacing any map for the same destination type."""
        self._maps[property_map.target_type] = property_map

    def remove_map(self, target_type: type) -> Optional[PropertyMap]:
        return self._maps.pop(target_type, None)

    def clone(self, include_maps: bool = True) -> "PropertyDescriptor":
        # PropertyMap objects are immutable, only the table itself is copied
        return PropertyDescriptor(
            self.name,
            self.value_type,
            self._getter,
            kind=self.kind,
            declared_type=self.declared_type,
            maps=self._maps if include_maps else None,
        )

    def __repr__(self) -> str:
        type_name = getattr(self.value_type, "__name__", repr(self.value_type))
        return f"PropertyDescriptor(name={self.name!r}, value_type={type_name}, kind={self.kind.value})"


class TypeDescriptor:
    """
    Scanned metadata for one record type.

    Attributes:
        source_type: The record type described
        properties: Ordered mapping of property name to PropertyDescriptor
        mappings_include_declared_attributes: Whether declarative property maps
            were honored when the type was scanned
    """

    def __init__(
        self,
        source_type: type,
        properties: Mapping[str, PropertyDescriptor],
        mappings_include_declared_attributes: bool = True,
    ):
        self.source_type = source_type
        self._properties: Dict[str, PropertyDescriptor] = dict(properties)
        self.mappings_include_declared_attributes = mappings_include_declared_attributes

    @property
    def properties(self) -> Mapping[str, PropertyDescriptor]:
        return MappingProxyType(self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __iter__(self) -> Iterator[PropertyDescriptor]:
        return iter(self._properties.values())

    def __len__(self) -> int:
        return len(self._properties)

    def __getitem__(self, name: str) -> PropertyDescriptor:
        return self._properties[name]

    def get(self, name: str) -> Optional[PropertyDescriptor]:
        return self._properties.get(name)

    def clone(self, include_maps: bool = True) -> "TypeDescriptor":
        """
        Copy this descriptor so that overrides on the copy never reach the original.

        Args:
            include_maps: Keep the existing property maps. When False the clone
                starts with empty mapping tables.

        Returns:
            A new TypeDescriptor with independent mapping tables
        """
        return TypeDescriptor(
            self.source_type,
            {name: prop.clone(include_maps) for name, prop in self._properties.items()},
            mappings_include_declared_attributes=(
                self.mappings_include_declared_attributes and include_maps
            ),
        )

    def __repr__(self) -> str:
        return (
            f"TypeDescriptor({self.source_type.__qualname__}, "
            f"properties={list(self._properties)}, "
            f"mappings_include_declared_attributes={self.mappings_include_declared_attributes})"
        )

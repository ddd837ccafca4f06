# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Record type introspection.

Discovers the public readable properties of a record type, in definition
order, for three families of record types:

- pydantic models: model fields, then computed fields and @property getters
- dataclasses: dataclass fields, then @property getters
- any other class (plain classes, NamedTuple): annotated class attributes,
  then @property getters

Introspection is pure: it reads class metadata and never touches shared state.
"""

from __future__ import annotations

import dataclasses
import operator
import types
import typing
from typing import Annotated, Any, ClassVar, Dict, List, Tuple, Union

from pydantic import BaseModel

from ..core.exceptions import InvalidArgumentError
from ..core.primitives import PropertyKind, ScanSettings
from .attributes import maps_from_metadata
from .descriptors import PropertyDescriptor, PropertyMap

DiscoveredProperty = Tuple[PropertyDescriptor, List[PropertyMap]]

# Bases whose members are never record properties
_SKIPPED_MODULE_PREFIXES = ("builtins", "typing", "abc", "pydantic", "enum")


def unwrap_annotation(hint: Any) -> Tuple[Any, List[Any]]:
    """
    Strip Annotated and Optional wrappers from a type hint.

    Args:
        hint: A resolved type hint

    Returns:
        Tuple of (value type, Annotated metadata collected along the way)

    Example:
        >>> unwrap_annotation(Optional[Annotated[int, "meta"]])
        (<class 'int'>, ['meta'])
    """
    metadata: List[Any] = []
    while True:
        origin = typing.get_origin(hint)
        if origin is Annotated:
            metadata.extend(hint.__metadata__)
            hint = typing.get_args(hint)[0]
            continue
        if origin is Union or origin is types.UnionType:
            args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
            if len(args) == 1 and len(args) < len(typing.get_args(hint)):
                hint = args[0]
                continue
            if len(args) < len(typing.get_args(hint)):
                hint = Union[tuple(args)]
        return hint, metadata


def _is_public(name: str, settings: ScanSettings) -> bool:
    if name.startswith("__"):
        return False
    return settings.include_private or not name.startswith("_")


def _record_bases(record_type: type) -> List[type]:
    """MRO of record_type, base classes first, without library bases."""
    return [
        base
        for base in reversed(record_type.__mro__)
        if not base.__module__.startswith(_SKIPPED_MODULE_PREFIXES)
    ]


def _resolve_hints(obj: Any, owner: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(obj, include_extras=True)
    except (NameError, TypeError) as e:
        raise InvalidArgumentError(
            f"Could not resolve type annotations of {owner.__qualname__}: {e}", "type_"
        ) from e


def _describe(
    name: str, hint: Any, kind: PropertyKind, extra_metadata: Tuple[Any, ...] = ()
) -> DiscoveredProperty:
    value_type, metadata = unwrap_annotation(hint)
    metadata.extend(extra_metadata)
    descriptor = PropertyDescriptor(
        name,
        value_type,
        operator.attrgetter(name),
        kind=kind,
        declared_type=hint,
    )
    return descriptor, maps_from_metadata(metadata)


def _pydantic_fields(record_type: type, settings: ScanSettings) -> List[DiscoveredProperty]:
    found = []
    for name, field_info in record_type.model_fields.items():
        if not _is_public(name, settings):
            continue
        hint = field_info.annotation if field_info.annotation is not None else object
        found.append(_describe(name, hint, PropertyKind.FIELD, tuple(field_info.metadata)))
    return found


def _dataclass_fields(record_type: type, settings: ScanSettings) -> List[DiscoveredProperty]:
    hints = _resolve_hints(record_type, record_type)
    found = []
    for field in dataclasses.fields(record_type):
        if not _is_public(field.name, settings):
            continue
        found.append(_describe(field.name, hints.get(field.name, field.type), PropertyKind.FIELD))
    return found


def _annotated_attributes(record_type: type, settings: ScanSettings) -> List[DiscoveredProperty]:
    hints = _resolve_hints(record_type, record_type)
    found = []
    for name, hint in hints.items():
        if not _is_public(name, settings):
            continue
        if typing.get_origin(hint) is ClassVar or hint is ClassVar:
            continue
        found.append(_describe(name, hint, PropertyKind.ATTRIBUTE))
    return found


def _property_getters(
    record_type: type, settings: ScanSettings, seen: set
) -> List[DiscoveredProperty]:
    computed = getattr(record_type, "__pydantic_computed_fields__", None) or {}
    found = []
    for base in _record_bases(record_type):
        for name, member in vars(base).items():
            if name in seen or not isinstance(member, property) or member.fget is None:
                continue
            if not _is_public(name, settings):
                continue
            hint = _resolve_hints(member.fget, record_type).get("return", object)
            kind = PropertyKind.COMPUTED_FIELD if name in computed else PropertyKind.PROPERTY
            found.append(_describe(name, hint, kind))
            seen.add(name)
    return found


def discover_properties(
    record_type: type, settings: ScanSettings
) -> List[DiscoveredProperty]:
    """
    Discover the readable properties of a record type.

    Args:
        record_type: Class to introspect
        settings: Scan settings controlling which members qualify

    Returns:
        List of (PropertyDescriptor, annotated PropertyMaps) in definition order.
        Descriptors are returned with empty mapping tables.
    """
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        found = _pydantic_fields(record_type, settings)
    elif dataclasses.is_dataclass(record_type):
        found = _dataclass_fields(record_type, settings)
    else:
        found = _annotated_attributes(record_type, settings)

    if settings.include_properties:
        seen = {descriptor.name for descriptor, _ in found}
        found.extend(_property_getters(record_type, settings, seen))
    return found

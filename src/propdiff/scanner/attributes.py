# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Declarative property map input.

Record types declare how their properties map onto other record types in two
ways, both read once when the type is scanned:

- ``typing.Annotated`` metadata: a PropertyMap placed among the extras of a
  field annotation (or a property getter's return annotation).
- A side table filled through declare_property_map() or the @property_map class
  decorator, for declarations that must wait until both types exist.

The @scannable decorator marks classes for TypeScanner.register_module().
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Iterable, List, Optional, Set

from ..core.exceptions import InvalidArgumentError, NullArgumentError
from ..core.primitives import PropertyMapOperation
from .descriptors import PropertyMap

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_DECLARED_MAPS: Dict[type, Dict[str, List[PropertyMap]]] = {}
_SCANNABLE: Set[type] = set()


def declare_property_map(record_type: type, property_name: str, *maps: PropertyMap) -> None:
    """
    Record property maps for a property of record_type in the side table.

    Declarations take effect for scans performed after the call. Existing
    cached descriptors are not updated.

    Args:
        record_type: The source record type owning the property
        property_name: Name of the source property
        *maps: One or more PropertyMap directives

    Raises:
        NullArgumentError: If record_type or property_name is missing
        InvalidArgumentError: If a map is not a PropertyMap
    """
    if record_type is None:
        raise NullArgumentError("record_type")
    if not property_name:
        raise NullArgumentError("property_name")
    for property_map in maps:
        if not isinstance(property_map, PropertyMap):
            raise InvalidArgumentError(
                f"Expected a PropertyMap, got {type(property_map).__name__}.", "maps"
            )
    with _lock:
        _DECLARED_MAPS.setdefault(record_type, {}).setdefault(property_name, []).extend(maps)
    logger.debug(
        f"Declared {len(maps)} property map(s) for {record_type.__qualname__}.{property_name}"
    )


def declared_maps_for(record_type: type, property_name: str) -> List[PropertyMap]:
    """Side-table declarations for one property, in declaration order."""
    with _lock:
        return list(_DECLARED_MAPS.get(record_type, {}).get(property_name, ()))


def property_map(
    property_name: str,
    target_type: type,
    target_property: Optional[str] = None,
    *,
    operation: PropertyMapOperation = PropertyMapOperation.MAP_TO_PROPERTY,
    force_string_value: bool = False,
    format_string: Optional[str] = None,
    target_format_string: Optional[str] = None,
) -> Callable[[type], type]:
    """
    Class decorator declaring a property map for one property of the decorated class.

    Example:
        ```python
        @property_map("age", PersonDto, "years_old", force_string_value=True)
        @dataclass
        class Person:
            name: str
            age: int
        ```
    """
    directive = PropertyMap(
        target_type,
        target_property,
        operation=operation,
        force_string_value=force_string_value,
        format_string=format_string,
        target_format_string=target_format_string,
    )

    def decorator(cls: type) -> type:
        declare_property_map(cls, property_name, directive)
        return cls

    return decorator


def scannable(cls: type) -> type:
    """Mark a class for registration by TypeScanner.register_module()."""
    with _lock:
        _SCANNABLE.add(cls)
    return cls


def is_scannable(cls: Any) -> bool:
    with _lock:
        return cls in _SCANNABLE


def maps_from_metadata(metadata: Iterable[Any]) -> List[PropertyMap]:
    """Pick the PropertyMap directives out of annotation metadata."""
    return [item for item in metadata if isinstance(item, PropertyMap)]

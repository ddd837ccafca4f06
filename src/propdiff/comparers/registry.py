# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Comparer registry and resolution.

The registry maps an exact value type to the comparer used for it by default.
Lookups do not walk the type's MRO: a comparer registered for int is not used
for bool, and vice versa.

Resolution order for a property value type:
    1. comparers supplied to the comparison session
    2. the registry (global_comparers unless another is passed)
    3. none; the engine reports the property as failed
"""

from __future__ import annotations

import logging
import threading
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from fractions import Fraction
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
from uuid import UUID

from ..core.exceptions import NullArgumentError
from .base import Comparer, NaturalComparer, StringComparer, as_comparer

logger = logging.getLogger(__name__)

NATURALLY_ORDERED_TYPES = (
    object,
    int,
    float,
    bool,
    Decimal,
    Fraction,
    bytes,
    date,
    datetime,
    time,
    timedelta,
    UUID,
)


class ComparerRegistry:
    """
    Process-wide registry of default comparers keyed by value type.

    Registration is last-write-wins per type and is guarded by a lock.
    Register comparers before sharing sessions across threads; a comparison
    reads the registry once per property.
    """

    def __init__(self, comparers: Optional[Mapping[Any, Any]] = None):
        self._lock = threading.Lock()
        self._comparers: Dict[Any, Comparer] = {}
        for value_type, comparer in (comparers or {}).items():
            self.register(value_type, comparer)

    @classmethod
    def with_defaults(cls) -> "ComparerRegistry":
        """Registry seeded with natural ordering for standard scalar types."""
        registry = cls({value_type: NaturalComparer() for value_type in NATURALLY_ORDERED_TYPES})
        registry.register(str, StringComparer())
        return registry

    def register(self, value_type: Any, comparer: Any) -> "ComparerRegistry":
        """
        Register the default comparer for a value type.

        Args:
            value_type: Exact value type the comparer applies to
            comparer: Comparer, object with compare(a, b), or three-way callable

        Returns:
            Self for chaining
        """
        if value_type is None:
            raise NullArgumentError("value_type")
        resolved = as_comparer(comparer)
        with self._lock:
            self._comparers[value_type] = resolved
        logger.debug(f"Registered comparer for {getattr(value_type, '__name__', value_type)}: {resolved!r}")
        return self

    def unregister(self, value_type: Any) -> Optional[Comparer]:
        with self._lock:
            return self._comparers.pop(value_type, None)

    def get(self, value_type: Any) -> Optional[Comparer]:
        with self._lock:
            return self._comparers.get(value_type)

    def __contains__(self, value_type: Any) -> bool:
        return self.get(value_type) is not None

    def snapshot(self) -> Mapping[Any, Comparer]:
        """Read-only copy of the current registrations."""
        with self._lock:
            return MappingProxyType(dict(self._comparers))


global_comparers = ComparerRegistry.with_defaults()


def register_global_comparer(value_type: Any, comparer: Any) -> None:
    """Register a process-wide default comparer for a value type."""
    global_comparers.register(value_type, comparer)


def get_global_comparer(value_type: Any) -> Optional[Comparer]:
    return global_comparers.get(value_type)


def resolve_comparer(
    value_type: Any,
    session_comparers: Optional[Mapping[Any, Comparer]] = None,
    registry: Optional[ComparerRegistry] = None,
) -> Optional[Comparer]:
    """
    Pick the comparer for a value type.

    Args:
        value_type: The property value type (or str when values were coerced)
        session_comparers: Comparers scoped to one comparison session
        registry: Fallback registry, global_comparers by default

    Returns:
        The session comparer, else the registry comparer, else None
    """
    if session_comparers and value_type in session_comparers:
        return session_comparers[value_type]
    return (registry if registry is not None else global_comparers).get(value_type)

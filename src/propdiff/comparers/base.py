# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Three-way comparers.

A comparer exposes compare(a, b) returning a negative number, zero or a
positive number. It is the only extension point of the comparison engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..core.exceptions import InvalidArgumentError, NullArgumentError


class Comparer(ABC):
    """Base class for three-way comparers."""

    @abstractmethod
    def compare(self, a: Any, b: Any) -> int:
        """Return a negative number if a < b, zero if a == b, a positive number if a > b."""

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)


class NaturalComparer(Comparer):
    """
    Orders values with their own rich comparison operators.

    None sorts before any other value and two Nones are equal. Values that are
    neither ordered nor equal (NaN, or unrelated types) raise TypeError.
    """

    def compare(self, a: Any, b: Any) -> int:
        if a is None or b is None:
            return (a is not None) - (b is not None)
        if a < b:
            return -1
        if a > b:
            return 1
        if a == b:
            return 0
        raise TypeError(f"Values {a!r} and {b!r} are not mutually ordered.")

    def __repr__(self) -> str:
        return "NaturalComparer()"


class StringComparer(NaturalComparer):
    """Ordinal string comparer, optionally case-insensitive."""

    def __init__(self, ignore_case: bool = False):
        self.ignore_case = ignore_case

    def compare(self, a: Any, b: Any) -> int:
        if self.ignore_case:
            a = a.casefold() if a is not None else None
            b = b.casefold() if b is not None else None
        return super().compare(a, b)

    def __repr__(self) -> str:
        return f"StringComparer(ignore_case={self.ignore_case})"


class FunctionComparer(Comparer):
    """Wraps a plain three-way function (a cmp-style callable)."""

    def __init__(self, func: Callable[[Any, Any], int]):
        if func is None:
            raise NullArgumentError("func")
        self.func = func

    def compare(self, a: Any, b: Any) -> int:
        return self.func(a, b)

    def __repr__(self) -> str:
        return f"FunctionComparer({getattr(self.func, '__qualname__', self.func)!r})"


class KeyComparer(NaturalComparer):
    """
    Orders values by a projected key.

    Example:
        ```python
        by_length = KeyComparer(len)
        by_length.compare("abc", "xy")  # 1
        ```
    """

    def __init__(self, key: Callable[[Any], Any]):
        if key is None:
            raise NullArgumentError("key")
        self.key = key

    def compare(self, a: Any, b: Any) -> int:
        return super().compare(
            None if a is None else self.key(a), None if b is None else self.key(b)
        )

    def __repr__(self) -> str:
        return f"KeyComparer({getattr(self.key, '__qualname__', self.key)!r})"


def as_comparer(obj: Any) -> Comparer:
    """
    Adapt an object to the Comparer interface.

    Accepts Comparer instances, any object exposing a callable compare(a, b),
    or a plain three-way callable.

    Raises:
        NullArgumentError: If obj is None
        InvalidArgumentError: If obj cannot act as a comparer
    """
    if obj is None:
        raise NullArgumentError("comparer")
    if isinstance(obj, Comparer):
        return obj
    compare = getattr(obj, "compare", None)
    if callable(compare):
        return FunctionComparer(compare)
    if callable(obj):
        return FunctionComparer(obj)
    raise InvalidArgumentError(
        f"{type(obj).__name__} is not a comparer: expected a compare(a, b) method or a callable.",
        "comparer",
    )

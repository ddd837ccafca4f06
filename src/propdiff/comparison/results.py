# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Comparison result models.

A PropertyComparisonResult records how one source property compared against
its matched destination property. Results are collected, in source property
order, into a PropertyComparisonResultCollection. ObjectComparer.compare()
returns both the collection and the overall verdict as a ComparisonReport.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Union, overload

from ..core.primitives import OUTCOME_FLAGS, ComparisonResult, Outcome
from ..scanner.descriptors import PropertyDescriptor, PropertyMap

_ORDERED_OUTCOMES = (Outcome.LESS_THAN, Outcome.EQUAL, Outcome.GREATER_THAN)


@dataclass(frozen=True)
class PropertyComparisonResult:
    """
    Outcome of comparing one property of two objects.

    Attributes:
        source_property: Descriptor of the property on the first object
        source_value: Value compared for the first object (post-coercion when coerced)
        target_property: Matched property on the second object, None if not found
        target_value: Value compared for the second object (post-coercion when coerced)
        property_map: Map that redirected the comparison, if any
        outcome: Primary outcome. UNDEFINED only when the comparison raised
        string_coercion: Both values were compared as strings
        exception: Failure captured while comparing, if any
    """

    source_property: PropertyDescriptor
    source_value: Any
    target_property: Optional[PropertyDescriptor]
    target_value: Any
    property_map: Optional[PropertyMap]
    outcome: Outcome
    string_coercion: bool = False
    exception: Optional[BaseException] = None

    def __post_init__(self):
        if self.exception is not None:
            if self.outcome != Outcome.UNDEFINED:
                raise ValueError("A failed comparison cannot carry an ordering outcome.")
        elif self.outcome == Outcome.UNDEFINED:
            raise ValueError("Outcome must be set unless the comparison failed.")
        if self.outcome == Outcome.PROPERTY_NOT_FOUND and (
            self.target_property is not None or self.string_coercion
        ):
            raise ValueError("A property-not-found result cannot reference a target property.")

    @property
    def name(self) -> str:
        """Target property name when matched, else the source property name."""
        if self.target_property is not None:
            return self.target_property.name
        return self.source_property.name

    @property
    def flags(self) -> ComparisonResult:
        flags = OUTCOME_FLAGS[self.outcome]
        if self.string_coercion:
            flags |= ComparisonResult.STRING_COERCION
        if self.exception is not None:
            flags |= ComparisonResult.EXCEPTION
        return flags

    @property
    def is_different(self) -> bool:
        return self.outcome in (Outcome.LESS_THAN, Outcome.GREATER_THAN)

    @property
    def is_comparable(self) -> bool:
        """The property was matched and compared without failure."""
        return self.outcome in _ORDERED_OUTCOMES

    def __repr__(self) -> str:
        parts = [f"name={self.name!r}", f"outcome={self.outcome.value}"]
        if self.string_coercion:
            parts.append("string_coercion=True")
        if self.exception is not None:
            parts.append(f"exception={self.exception!r}")
        return f"PropertyComparisonResult({', '.join(parts)})"


class PropertyComparisonResultCollection:
    """
    Ordered collection of property comparison results.

    Iterates results in the order they were added. Results can be looked up by
    position or by result name; when several results share a name, name lookup
    returns the first one and get_all() returns every one of them.
    """

    def __init__(self):
        self._results: List[PropertyComparisonResult] = []
        self._by_name: Dict[str, List[PropertyComparisonResult]] = {}

    def add(self, result: PropertyComparisonResult) -> None:
        self._results.append(result)
        self._by_name.setdefault(result.name, []).append(result)

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[PropertyComparisonResult]:
        return iter(self._results)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @overload
    def __getitem__(self, key: int) -> PropertyComparisonResult: ...

    @overload
    def __getitem__(self, key: str) -> PropertyComparisonResult: ...

    def __getitem__(self, key: Union[int, str]) -> PropertyComparisonResult:
        if isinstance(key, str):
            return self._by_name[key][0]
        return self._results[key]

    def get(self, name: str, default: Any = None) -> Any:
        matches = self._by_name.get(name)
        return matches[0] if matches else default

    def get_all(self, name: str) -> List[PropertyComparisonResult]:
        return list(self._by_name.get(name, ()))

    def names(self) -> List[str]:
        return [result.name for result in self._results]

    def differences(self) -> List[PropertyComparisonResult]:
        """Results whose values compared as less-than or greater-than."""
        return [result for result in self._results if result.is_different]

    def with_outcome(self, outcome: Outcome) -> List[PropertyComparisonResult]:
        return [result for result in self._results if result.outcome == outcome]

    def failures(self) -> List[PropertyComparisonResult]:
        return [result for result in self._results if result.exception is not None]

    def __repr__(self) -> str:
        return f"PropertyComparisonResultCollection({self._results!r})"


class ComparisonReport(NamedTuple):
    """
    Results of one comparison plus the overall verdict.

    Unpacks as ``results, is_different = comparer.compare(a, b)``.
    """

    results: PropertyComparisonResultCollection
    is_different: bool

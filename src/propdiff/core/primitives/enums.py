# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum, Flag


class PropertyMapOperation(str, Enum):
    """Operation a property map applies against one destination type."""

    MAP_TO_PROPERTY = "map_to_property"  # Compare against a differently named property
    IGNORE_PROPERTY = "ignore_property"  # Skip the property entirely


class PropertyKind(str, Enum):
    """How a scanned property was discovered on its record type."""

    FIELD = "field"  # pydantic or dataclass field
    COMPUTED_FIELD = "computed_field"  # pydantic @computed_field
    PROPERTY = "property"  # plain @property getter
    ATTRIBUTE = "attribute"  # annotated class attribute (plain classes, NamedTuple)


class Outcome(str, Enum):
    """
    Primary outcome of a single property comparison.

    Exactly one primary outcome applies per result. UNDEFINED is reserved for
    results whose comparison raised, in which case the captured exception is
    carried by the result itself.
    """

    UNDEFINED = "undefined"
    LESS_THAN = "less_than"
    EQUAL = "equal"
    GREATER_THAN = "greater_than"
    PROPERTY_NOT_FOUND = "property_not_found"


class ComparisonResult(Flag):
    """
    Bitwise view of a property comparison outcome.

    STRING_COERCION and EXCEPTION are modifiers combined with the primary
    outcome flag.
    """

    UNDEFINED = 0
    LESS_THAN = 1
    GREATER_THAN = 2
    EQUAL = 4
    STRING_COERCION = 8
    PROPERTY_NOT_FOUND = 16
    EXCEPTION = 32


OUTCOME_FLAGS = {
    Outcome.UNDEFINED: ComparisonResult.UNDEFINED,
    Outcome.LESS_THAN: ComparisonResult.LESS_THAN,
    Outcome.EQUAL: ComparisonResult.EQUAL,
    Outcome.GREATER_THAN: ComparisonResult.GREATER_THAN,
    Outcome.PROPERTY_NOT_FOUND: ComparisonResult.PROPERTY_NOT_FOUND,
}

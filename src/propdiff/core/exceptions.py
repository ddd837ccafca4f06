# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Exceptions raised by propdiff.

Precondition failures (NullArgumentError, InvalidArgumentError and its
subclasses, NoTypeInformationError) abort an operation before any work is done.
NoComparerError is never raised by the comparison engine; it is attached to the
result of the property that could not be compared.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


def _type_name(type_: Any) -> str:
    return getattr(type_, "__qualname__", None) or repr(type_)


class PropDiffError(Exception):
    """Base exception for propdiff."""

    def __init__(
        self, message: str, code: str = "PROPDIFF_ERROR", details: Optional[dict] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "code": self.code,
            "details": self.details,
        }


class NullArgumentError(PropDiffError, ValueError):
    """A required argument was None or empty."""

    def __init__(self, param_name: str, message: Optional[str] = None):
        self.param_name = param_name
        super().__init__(
            message or f"Argument '{param_name}' is required.",
            "NULL_ARGUMENT",
            {"param_name": param_name},
        )


class InvalidArgumentError(PropDiffError, ValueError):
    """A supplied argument fails a structural precondition."""

    def __init__(
        self,
        message: str,
        param_name: Optional[str] = None,
        code: str = "INVALID_ARGUMENT",
        details: Optional[dict] = None,
    ):
        self.param_name = param_name
        det: Dict[str, Any] = {}
        if param_name:
            det["param_name"] = param_name
        if details:
            det.update(details)
        super().__init__(message, code, det)


class TypeMismatchError(InvalidArgumentError):
    """An object is not exactly of the type a comparer was built for."""

    def __init__(self, param_name: str, expected_type: type, actual_type: type):
        self.expected_type = expected_type
        self.actual_type = actual_type
        super().__init__(
            f"The provided object is not of the expected type ({_type_name(expected_type)}); "
            f"got {_type_name(actual_type)}.",
            param_name,
            "TYPE_MISMATCH",
            {
                "expected_type": _type_name(expected_type),
                "actual_type": _type_name(actual_type),
            },
        )


class SameInstanceError(InvalidArgumentError):
    """Both comparison arguments are the very same object."""

    def __init__(self):
        super().__init__("The objects to compare must be different.", code="SAME_INSTANCE")


class InvalidPropertyReferenceError(InvalidArgumentError):
    """A property name does not resolve to a property of the expected type."""

    def __init__(self, property_name: str, expected_type: type, param_name: Optional[str] = None):
        self.property_name = property_name
        self.expected_type = expected_type
        super().__init__(
            f"'{property_name}' is not a property of type {_type_name(expected_type)}.",
            param_name,
            "INVALID_PROPERTY_REFERENCE",
            {"property_name": property_name, "expected_type": _type_name(expected_type)},
        )


class NoTypeInformationError(PropDiffError, LookupError):
    """A type was referenced for comparison without ever being scanned."""

    def __init__(self, type_: type):
        self.type = type_
        super().__init__(
            f"No type information is available for type {_type_name(type_)}. "
            "Register the type with the scanner first.",
            "NO_TYPE_INFORMATION",
            {"type": _type_name(type_)},
        )


class NoComparerError(PropDiffError, LookupError):
    """No comparer is registered for a property value type."""

    def __init__(self, value_type: Any):
        self.value_type = value_type
        super().__init__(
            f"No comparer available for type {_type_name(value_type)}.",
            "NO_COMPARER",
            {"value_type": _type_name(value_type)},
        )

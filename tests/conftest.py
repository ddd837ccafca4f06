# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for propdiff testing.

Every fixture hands out fresh scanner and registry instances so tests never
share cached descriptors or comparer registrations with each other or with the
process-wide defaults.
"""

from __future__ import annotations

import pytest

from propdiff.comparers import ComparerRegistry
from propdiff.comparison import ComparerConfiguration, ObjectComparer
from propdiff.scanner import TypeScanner

from tests.records import Person, PersonDto, PersonSnapshot, PersonSummary


@pytest.fixture
def scanner() -> TypeScanner:
    return TypeScanner()


@pytest.fixture
def registry() -> ComparerRegistry:
    return ComparerRegistry.with_defaults()


@pytest.fixture
def make_comparer(scanner: TypeScanner, registry: ComparerRegistry):
    """Factory fixture registering both types and returning an ObjectComparer."""

    def _create(type1: type, type2: type = None, comparers=None) -> ObjectComparer:
        scanner.register_types(type1, type2 or type1)
        return ObjectComparer(type1, type2, comparers, scanner=scanner, registry=registry)

    return _create


@pytest.fixture
def configure_comparer(scanner: TypeScanner, registry: ComparerRegistry):
    """Factory fixture returning a ComparerConfiguration bound to the test scanner."""

    def _configure(
        source_type: type, destination_type: type, include_attribute_mappings: bool = False
    ) -> ComparerConfiguration:
        return ComparerConfiguration(
            source_type,
            destination_type,
            include_attribute_mappings,
            scanner=scanner,
            registry=registry,
        )

    return _configure


@pytest.fixture
def ann() -> Person:
    return Person(name="Ann", age=30)


@pytest.fixture
def ann_older() -> PersonSnapshot:
    return PersonSnapshot(name="Ann", age=31)


@pytest.fixture
def ann_dto() -> PersonDto:
    return PersonDto(name="Ann", years_old="30")


@pytest.fixture
def ann_summary() -> PersonSummary:
    return PersonSummary(name="Ann")

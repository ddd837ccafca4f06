# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass

import pytest

from propdiff.core import InvalidArgumentError, NullArgumentError, PropertyMapOperation
from propdiff.scanner import PropertyMap, declare_property_map, property_map, scannable
from propdiff.scanner.attributes import declared_maps_for, is_scannable, maps_from_metadata

from tests.records import NotScannable, PersonDto, PersonSummary, Shipment


def test_declare_property_map_records_in_order():
    @dataclass
    class Employee:
        name: str
        age: int

    first = PropertyMap(PersonDto, "years_old")
    second = PropertyMap.ignore(PersonSummary)
    declare_property_map(Employee, "age", first)
    declare_property_map(Employee, "age", second)

    assert declared_maps_for(Employee, "age") == [first, second]
    assert declared_maps_for(Employee, "name") == []


def test_declare_property_map_validates_input():
    with pytest.raises(NullArgumentError):
        declare_property_map(None, "age", PropertyMap.ignore(PersonDto))
    with pytest.raises(NullArgumentError):
        declare_property_map(PersonDto, "", PropertyMap.ignore(PersonDto))
    with pytest.raises(InvalidArgumentError):
        declare_property_map(PersonDto, "name", "years_old")


def test_property_map_decorator():
    @property_map("age", PersonDto, "years_old", force_string_value=True)
    @property_map("nickname", PersonDto, operation=PropertyMapOperation.IGNORE_PROPERTY)
    @dataclass
    class Employee:
        name: str
        age: int
        nickname: str

    assert declared_maps_for(Employee, "age") == [
        PropertyMap(PersonDto, "years_old", force_string_value=True)
    ]
    assert declared_maps_for(Employee, "nickname")[0].is_ignore


def test_property_map_decorator_validates_eagerly():
    with pytest.raises(NullArgumentError):
        property_map("age", PersonDto)


def test_scannable_marks_class():
    assert is_scannable(Shipment)
    assert not is_scannable(NotScannable)

    @scannable
    class Local:
        value: int

    assert is_scannable(Local)


def test_maps_from_metadata_filters_other_metadata():
    directive = PropertyMap.ignore(PersonDto)
    assert maps_from_metadata(["doc", directive, 42]) == [directive]

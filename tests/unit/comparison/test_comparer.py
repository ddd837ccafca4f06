# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for ObjectComparer: preconditions, outcome classification, string
coercion and per-property failure capture.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from propdiff.comparers import FunctionComparer, StringComparer
from propdiff.comparison import (
    ComparisonReport,
    ObjectComparer,
    PropertyComparisonResultCollection,
    convert_to_string,
)
from propdiff.core import (
    ComparisonResult,
    NoComparerError,
    NoTypeInformationError,
    NullArgumentError,
    Outcome,
    SameInstanceError,
    TypeMismatchError,
)

from tests.records import (
    Account,
    AccountDto,
    AuditedPerson,
    Color,
    Person,
    PersonDto,
    PersonFloatAge,
    PersonSnapshot,
    Swatch,
)


class Employee(Person):
    pass


class Fragile:
    value: int

    def __init__(self, value: int):
        self.value = value

    @property
    def broken(self) -> int:
        raise RuntimeError("getter failed")


def _raising_comparer(a, b):
    raise ArithmeticError("cannot compare")


class TestConvertToString:
    def test_none_stays_none(self):
        assert convert_to_string(None, ".2f") is None

    def test_blank_format_uses_str(self):
        assert convert_to_string(Decimal("5"), "  ") == "5"
        assert convert_to_string(30) == "30"

    def test_format_string(self):
        assert convert_to_string(Decimal("5"), ".2f") == "5.00"
        assert convert_to_string(date(2024, 1, 31), "%d/%m/%Y") == "31/01/2024"

    def test_unformattable_value_falls_back_to_str(self):
        assert convert_to_string(Color, ">10") == str(Color)

    @pytest.mark.parametrize(
        "value, format_string, expected",
        [("x", ".2f", "x"), (30, "%Y", "30"), (Decimal("5"), "%Q", "5")],
    )
    def test_rejected_format_spec_falls_back_to_str(self, value, format_string, expected):
        assert convert_to_string(value, format_string) == expected


class TestPreconditions:
    def test_unregistered_type(self, scanner, registry):
        with pytest.raises(NoTypeInformationError):
            ObjectComparer(Person, scanner=scanner, registry=registry)

    def test_missing_type(self, scanner):
        with pytest.raises(NullArgumentError):
            ObjectComparer(None, scanner=scanner)

    def test_type2_defaults_to_type1(self, make_comparer):
        comparer = make_comparer(Person)
        assert comparer.type2 is Person

    def test_create(self, scanner, registry):
        scanner.register_types(Person, PersonDto)
        comparer = ObjectComparer.create(Person, PersonDto, scanner=scanner, registry=registry)
        assert comparer.source_descriptor is scanner.get(Person)
        assert comparer.destination_descriptor is scanner.get(PersonDto)

    @pytest.mark.parametrize("position", [0, 1])
    def test_null_objects(self, make_comparer, ann, ann_older, position):
        comparer = make_comparer(Person, PersonSnapshot)
        args = [ann, ann_older]
        args[position] = None
        with pytest.raises(NullArgumentError) as exc_info:
            comparer.compare(*args)
        assert exc_info.value.param_name == f"object{position + 1}"

    def test_type_mismatch(self, make_comparer, ann, ann_dto):
        comparer = make_comparer(Person, PersonSnapshot)
        with pytest.raises(TypeMismatchError) as exc_info:
            comparer.compare(ann, ann_dto)
        assert exc_info.value.param_name == "object2"

    def test_subclass_instance_is_a_mismatch(self, make_comparer, ann):
        comparer = make_comparer(Person)
        with pytest.raises(TypeMismatchError):
            comparer.compare(Employee(name="Ann", age=30), ann)

    def test_same_instance(self, make_comparer, ann):
        comparer = make_comparer(Person)
        with pytest.raises(SameInstanceError):
            comparer.compare(ann, ann)

    def test_type_checked_before_identity(self, make_comparer, ann):
        comparer = make_comparer(Person, PersonDto)
        with pytest.raises(TypeMismatchError):
            comparer.compare(ann, ann)

    def test_equal_distinct_instances_are_fine(self, make_comparer, ann):
        comparer = make_comparer(Person)
        results, is_different = comparer.compare(ann, Person(name="Ann", age=30))
        assert not is_different
        assert [r.outcome for r in results] == [Outcome.EQUAL, Outcome.EQUAL]


class TestOutcomes:
    def test_differing_age(self, make_comparer, ann, ann_older):
        report = make_comparer(Person, PersonSnapshot).compare(ann, ann_older)

        assert isinstance(report, ComparisonReport)
        assert report.is_different
        assert report.results["name"].outcome == Outcome.EQUAL
        assert report.results["age"].outcome == Outcome.LESS_THAN
        assert report.results["age"].source_value == 30
        assert report.results["age"].target_value == 31

    def test_greater_than(self, make_comparer, ann, ann_older):
        comparer = make_comparer(PersonSnapshot, Person)
        assert comparer.compare(ann_older, ann).results["age"].outcome == Outcome.GREATER_THAN

    def test_results_follow_source_order(self, make_comparer, ann, ann_older):
        results, _ = make_comparer(Person, PersonSnapshot).compare(ann, ann_older)
        assert results.names() == ["name", "age"]

    def test_property_not_found_does_not_make_different(self, make_comparer, ann, ann_dto):
        results, is_different = make_comparer(Person, PersonDto).compare(ann, ann_dto)

        age = results["age"]
        assert age.outcome == Outcome.PROPERTY_NOT_FOUND
        assert age.target_property is None
        assert age.flags == ComparisonResult.PROPERTY_NOT_FOUND
        assert not is_different

    def test_declared_maps_are_honored(self, make_comparer, ann_dto):
        comparer = make_comparer(AuditedPerson, PersonDto)
        audited = AuditedPerson(name="Ann", age=30, notes="vip")
        results, is_different = comparer.compare(audited, ann_dto)

        assert results.names() == ["name", "years_old"]
        years_old = results["years_old"]
        assert years_old.source_property.name == "age"
        assert years_old.outcome == Outcome.EQUAL
        assert years_old.string_coercion
        assert years_old.source_value == "30"
        assert not is_different

    def test_session_comparer_overrides_registry(self, make_comparer):
        comparer = make_comparer(Person, PersonSnapshot, {str: StringComparer(ignore_case=True)})
        results, _ = comparer.compare(Person(name="ann", age=1), PersonSnapshot(name="ANN", age=1))
        assert results["name"].outcome == Outcome.EQUAL

    def test_none_values_sort_first(self, make_comparer):
        comparer = make_comparer(Account, AccountDto)
        results, is_different = comparer.compare(
            Account("A-1"), AccountDto("A-1", Decimal("5"), date(2024, 1, 1))
        )
        assert results["balance"].outcome == Outcome.LESS_THAN
        assert not results["balance"].string_coercion
        assert results["opened"].outcome == Outcome.LESS_THAN
        assert is_different

    def test_is_different_shortcut(self, make_comparer, ann, ann_older):
        assert make_comparer(Person, PersonSnapshot).is_different(ann, ann_older)


class TestStringCoercion:
    def test_differing_value_types_are_coerced(self, make_comparer, ann):
        results, _ = make_comparer(Person, PersonFloatAge).compare(
            ann, PersonFloatAge(name="Ann", age=30.0)
        )
        age = results["age"]
        assert age.string_coercion
        assert (age.source_value, age.target_value) == ("30", "30.0")
        assert age.outcome == Outcome.LESS_THAN
        assert age.flags == ComparisonResult.LESS_THAN | ComparisonResult.STRING_COERCION

    def test_equal_value_types_are_not_coerced(self, make_comparer, ann, ann_older):
        results, _ = make_comparer(Person, PersonSnapshot).compare(ann, ann_older)
        assert not any(r.string_coercion for r in results)

    def test_coerced_none_stays_none(self, configure_comparer):
        comparer = (
            configure_comparer(Account, AccountDto)
            .map_property("balance", "balance", force_string_value=True)
            .create_comparer()
        )
        results, _ = comparer.compare(
            Account("A-1"), AccountDto("A-1", Decimal("5"), date(2024, 1, 1))
        )
        balance = results["balance"]
        assert balance.string_coercion
        assert balance.source_value is None
        assert balance.target_value == "5"
        assert balance.outcome == Outcome.LESS_THAN

    def test_format_strings(self, configure_comparer):
        comparer = (
            configure_comparer(Account, AccountDto)
            .map_property("balance", "balance", force_string_value=True, format_string=".2f")
            .create_comparer()
        )
        results, _ = comparer.compare(
            Account("A-1", Decimal("5")), AccountDto("A-1", Decimal("5.00"), date(2024, 1, 1))
        )
        assert results["balance"].source_value == "5.00"
        assert results["balance"].outcome == Outcome.EQUAL

    def test_format_string_rejected_by_value(self, configure_comparer):
        comparer = (
            configure_comparer(Account, AccountDto)
            .map_property("number", "number", force_string_value=True, format_string=".2f")
            .create_comparer()
        )
        results, _ = comparer.compare(
            Account("A-1"), AccountDto("A-1", Decimal("5"), date(2024, 1, 1))
        )
        number = results["number"]
        assert number.exception is None
        assert number.outcome == Outcome.EQUAL
        assert number.flags == ComparisonResult.EQUAL | ComparisonResult.STRING_COERCION


class TestCapturedFailures:
    def test_missing_comparer(self, make_comparer):
        comparer = make_comparer(Swatch)
        results, is_different = comparer.compare(Swatch("S1", Color("red")), Swatch("S1", Color("red")))

        color = results["color"]
        assert color.outcome == Outcome.UNDEFINED
        assert isinstance(color.exception, NoComparerError)
        assert color.exception.value_type is Color
        assert color.flags == ComparisonResult.EXCEPTION
        assert results["code"].outcome == Outcome.EQUAL
        assert not is_different

    def test_comparer_exception(self, make_comparer, ann, ann_older):
        comparer = make_comparer(Person, PersonSnapshot, {int: _raising_comparer})
        results, is_different = comparer.compare(ann, ann_older)

        assert isinstance(results["age"].exception, ArithmeticError)
        assert results.failures() == [results["age"]]
        assert not is_different

    def test_non_numeric_comparer_result(self, make_comparer, ann, ann_older):
        comparer = make_comparer(Person, PersonSnapshot, {int: FunctionComparer(lambda a, b: "x")})
        results, _ = comparer.compare(ann, ann_older)
        assert isinstance(results["age"].exception, TypeError)

    def test_unordered_comparer_result(self, make_comparer, ann, ann_older):
        """A NaN from a comparer is a failure, never an equality."""
        comparer = make_comparer(Person, PersonSnapshot, {int: lambda a, b: float("nan")})
        results, is_different = comparer.compare(ann, ann_older)

        age = results["age"]
        assert age.outcome == Outcome.UNDEFINED
        assert isinstance(age.exception, TypeError)
        assert age.flags == ComparisonResult.EXCEPTION
        assert not is_different

    def test_failures_are_logged(self, make_comparer, caplog):
        comparer = make_comparer(Swatch)
        with caplog.at_level("WARNING", logger="propdiff.comparison.comparer"):
            comparer.compare(Swatch("S1", Color("red")), Swatch("S2", Color("blue")))
        assert "color" in caplog.text

    def test_getter_failure_propagates(self, make_comparer):
        comparer = make_comparer(Fragile)
        results = PropertyComparisonResultCollection()
        with pytest.raises(RuntimeError):
            comparer.compare(Fragile(1), Fragile(2), results)
        assert len(results) == 0


class TestResultsCollection:
    def test_appends_to_supplied_collection(self, make_comparer, ann, ann_older):
        comparer = make_comparer(Person, PersonSnapshot)
        results = PropertyComparisonResultCollection()

        report = comparer.compare(ann, ann_older, results)
        comparer.compare(ann, PersonSnapshot(name="Ann", age=30), results)

        assert report.results is results
        assert len(results) == 4
        assert [r.outcome for r in results.get_all("age")] == [Outcome.LESS_THAN, Outcome.EQUAL]

    def test_repeated_comparisons_are_identical(self, make_comparer, ann, ann_older):
        comparer = make_comparer(Person, PersonSnapshot)
        first = comparer.compare(ann, ann_older)
        second = comparer.compare(ann, ann_older)

        assert first.is_different == second.is_different
        assert [(r.name, r.outcome) for r in first.results] == [
            (r.name, r.outcome) for r in second.results
        ]

    def test_session_comparers_are_read_only(self, make_comparer):
        comparer = make_comparer(Person, comparers={str: StringComparer()})
        with pytest.raises(TypeError):
            comparer.comparers[int] = StringComparer()

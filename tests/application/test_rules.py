"""Rule evaluator tests: value, type and range membership over subject lists."""

from __future__ import annotations

import math
from collections import OrderedDict
from typing import Protocol

import pytest

from cert_is.application.rules import DESCRIPTOR_SHAPES, check_ranges, check_types, check_values, strictly_equal
from cert_is.domain.errors import (
    RangeArgumentError,
    RangeAssertionError,
    TypeArgumentError,
    TypeAssertionError,
    ValueArgumentError,
    ValueAssertionError,
)


# --- values ---------------------------------------------------------------


def test_values_all_subjects_must_be_allowed() -> None:
    check_values(["foo", "bar"], valid=["bar", "foo"])
    with pytest.raises(ValueAssertionError):
        check_values(["foo", "qux"], valid=["bar", "foo"])


def test_values_no_subject_may_be_forbidden() -> None:
    check_values([1, 2], invalid=[3])
    with pytest.raises(ValueAssertionError):
        check_values([1, 2], invalid=[2])


def test_values_empty_subjects_always_pass() -> None:
    check_values([], valid=[])
    check_values([], invalid=[1])


def test_values_empty_allowed_set_rejects_everything() -> None:
    with pytest.raises(ValueAssertionError):
        check_values([None], valid=[])


def test_values_require_exactly_one_set() -> None:
    with pytest.raises(ValueArgumentError) as neither:
        check_values([1])
    assert neither.value.param_name == "valid"
    with pytest.raises(ValueArgumentError) as both:
        check_values([1], valid=[1], invalid=[2])
    assert both.value.param_name == "invalid"
    assert both.value.valid == (None,)


def test_values_use_message_override() -> None:
    with pytest.raises(ValueAssertionError, match=r"^\[ERR_INVALID_VALUE\]: custom$"):
        check_values([1], valid=[2], message="custom")


def test_value_error_does_not_name_the_offending_value() -> None:
    with pytest.raises(ValueAssertionError) as caught:
        check_values(["secret-token"], valid=["public"])
    assert "secret-token" not in caught.value.message


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (1, 1, True),
        (1, 1.0, True),
        (1, True, False),
        (0, False, False),
        (1, "1", False),
        (None, None, True),
        (None, 0, False),
        ("a", "a", True),
        (math.nan, math.nan, True),
        ([1], [1], False),
        (tuple([1]), tuple([1]), False),
    ],
)
def test_strict_equality(left: object, right: object, expected: bool) -> None:
    assert strictly_equal(left, right) is expected
    assert strictly_equal(right, left) is expected


def test_objects_compare_by_identity() -> None:
    shared = {"a": 1}
    check_values([shared], valid=[shared])
    with pytest.raises(ValueAssertionError):
        check_values([shared], valid=[{"a": 1}])


# --- types ----------------------------------------------------------------


def test_types_by_tag() -> None:
    check_types(["foo", 3], valid_types=["string", "number"])
    with pytest.raises(TypeAssertionError):
        check_types(["foo", 3], valid_types=["string"])


def test_types_by_class_include_supertypes() -> None:
    ordered = OrderedDict()
    check_types([ordered], valid_types=[OrderedDict])
    check_types([ordered], valid_types=[object])
    with pytest.raises(TypeAssertionError):
        check_types([ordered], valid_types=[set])


def test_forbidden_types_fail_on_any_match() -> None:
    check_types([1, 2.5], invalid_types=["string", dict])
    with pytest.raises(TypeAssertionError):
        check_types([1, "x"], invalid_types=[set, "string"])


def test_booleans_are_not_numbers() -> None:
    with pytest.raises(TypeAssertionError):
        check_types([True], valid_types=["number"])
    check_types([True], valid_types=[int])


@pytest.mark.parametrize("descriptor", [{}, 42, None, "bar"])
def test_invalid_descriptor_names_its_position(descriptor: object) -> None:
    with pytest.raises(TypeArgumentError) as allowed:
        check_types(["foo"], valid_types=["string", descriptor])
    assert allowed.value.param_name == "valid_types[1]"
    assert allowed.value.valid_types == DESCRIPTOR_SHAPES
    with pytest.raises(TypeArgumentError) as forbidden:
        check_types(["foo"], invalid_types=[descriptor])
    assert forbidden.value.param_name == "invalid_types[0]"


def test_invalid_descriptor_surfaces_without_subjects() -> None:
    with pytest.raises(TypeArgumentError):
        check_types([], valid_types=[{}])


def test_types_require_exactly_one_set() -> None:
    with pytest.raises(ValueArgumentError):
        check_types([1])
    with pytest.raises(ValueArgumentError):
        check_types([1], valid_types=["number"], invalid_types=["string"])


# --- ranges ---------------------------------------------------------------


@pytest.mark.parametrize(
    ("args", "name", "valid_type"),
    [
        (("0", 1, True, True), "lower", "number"),
        ((0, None, True, True), "upper", "number"),
        ((True, 1, True, True), "lower", "number"),
        ((0, 1, 1, True), "lower_inclusive", "boolean"),
        ((0, 1, True, "yes"), "upper_inclusive", "boolean"),
    ],
)
def test_range_parameter_kinds(args: tuple[object, ...], name: str, valid_type: str) -> None:
    with pytest.raises(TypeArgumentError) as caught:
        check_ranges([0.5], *args)  # type: ignore[arg-type]
    assert caught.value.param_name == name
    assert caught.value.valid_types == (valid_type,)


def test_inverted_range_is_an_argument_error() -> None:
    with pytest.raises(RangeArgumentError) as caught:
        check_ranges([1], 5, 1, True, False)
    assert caught.value.param_name == "upper"
    assert caught.value.range == '5 <= "upper" <= inf'


@pytest.mark.parametrize(("lower_inclusive", "upper_inclusive"), [(False, False), (True, False), (False, True)])
def test_degenerate_range_is_an_argument_error(lower_inclusive: bool, upper_inclusive: bool) -> None:
    with pytest.raises(RangeArgumentError) as caught:
        check_ranges([3], 3, 3, lower_inclusive, upper_inclusive)
    assert caught.value.range == '3 < "upper" <= inf'


def test_single_point_range() -> None:
    check_ranges([3, 3.0], 3, 3, True, True)
    with pytest.raises(RangeAssertionError):
        check_ranges([4], 3, 3, True, True)


def test_nan_bounds_are_rejected() -> None:
    with pytest.raises(RangeArgumentError) as caught:
        check_ranges([1], math.nan, 2, True, True)
    assert caught.value.param_name == "lower"
    assert caught.value.range is None


def test_non_numeric_subject_names_its_position() -> None:
    with pytest.raises(TypeArgumentError) as caught:
        check_ranges([1, 2, "3"], 0, 10, True, True)
    assert caught.value.param_name == "values[2]"
    assert caught.value.valid_types == ("number",)


def test_subject_kinds_are_checked_before_ranges() -> None:
    with pytest.raises(TypeArgumentError):
        check_ranges([100, "x"], 0, 10, True, True)


def test_argument_checks_precede_subject_checks() -> None:
    with pytest.raises(RangeArgumentError):
        check_ranges(["not a number"], 2, 1, True, True)


def test_all_subjects_must_be_in_range() -> None:
    check_ranges([12, 22, 32], 2, math.inf, False, True)
    with pytest.raises(RangeAssertionError):
        check_ranges([12, 22, 32], 20, math.inf, False, True)


def test_nan_subject_is_out_of_range() -> None:
    with pytest.raises(RangeAssertionError):
        check_ranges([math.nan], -math.inf, math.inf, True, True)


def test_range_message_override() -> None:
    with pytest.raises(RangeAssertionError, match="too small"):
        check_ranges([1], 5, 10, True, True, message="too small")


# --- ints beyond float range ------------------------------------------------

HUGE = 10**400


def test_huge_ints_compare_exactly() -> None:
    check_values([HUGE], valid=[HUGE])
    with pytest.raises(ValueAssertionError):
        check_values([HUGE], valid=[HUGE + 1])
    assert strictly_equal(HUGE, math.inf) is False


def test_huge_int_subject_in_range() -> None:
    check_ranges([HUGE], 0, math.inf, False, True)
    with pytest.raises(RangeAssertionError):
        check_ranges([HUGE], 0, 10, True, True)


def test_huge_int_bounds() -> None:
    check_ranges([1], -math.inf, HUGE, True, False)
    with pytest.raises(RangeAssertionError):
        check_ranges([1], HUGE, math.inf, False, True)
    with pytest.raises(RangeArgumentError) as caught:
        check_ranges([1], HUGE, 0, True, True)
    assert caught.value.range == f'{HUGE} <= "upper" <= inf'


# --- classes that reject isinstance -----------------------------------------


class Named(Protocol):
    name: str


def test_non_runtime_protocol_is_an_argument_error() -> None:
    with pytest.raises(TypeArgumentError) as caught:
        check_types(["x"], valid_types=["number", Named])
    assert caught.value.param_name == "valid_types[1]"
    with pytest.raises(TypeArgumentError):
        check_types([], invalid_types=[Named])

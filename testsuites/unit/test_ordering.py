from datetime import datetime
from functools import cmp_to_key

import pytest

from testsuites.ui_testing.framework.errors import ConversionError
from testsuites.ui_testing.framework.ordering import (
    SortKind,
    all_contain,
    all_equal,
    all_in,
    convert_all,
    is_sorted,
    to_date,
    to_float,
)


def test_empty_sequence_is_sorted():
    assert is_sorted([])
    assert is_sorted([], descending=True)


def test_string_order():
    assert is_sorted(["a", "b", "c"])
    assert not is_sorted(["b", "a", "c"])
    assert is_sorted(["c", "b", "a"], descending=True)
    assert not is_sorted(["a", "b", "c"], descending=True)


def test_sort_key_decides_order():
    assert not is_sorted(["a", "B", "c"])
    assert is_sorted(["a", "B", "c"], key=str.lower)
    assert not is_sorted(["b", "A", "c"], key=str.lower)
    assert is_sorted(["c", "B", "a"], descending=True, key=str.lower)


def test_two_argument_comparator():
    by_length = cmp_to_key(lambda a, b: len(a) - len(b))
    assert not is_sorted(["b", "aa"])
    assert is_sorted(["b", "aa"], key=by_length)


def test_duplicates_are_allowed():
    assert is_sorted(["a", "a", "b"])
    assert is_sorted([3.0, 3.0, 1.0], descending=True)


def test_amounts_sorted_descending_after_stripping_currency():
    values = convert_all(["$1,000.50", "$200.00"], SortKind.FLOAT)
    assert values == [1000.5, 200.0]
    assert is_sorted(values, descending=True)
    assert not is_sorted(values)


def test_amounts_compare_numerically_not_lexically():
    assert not is_sorted(["$9.00", "$10.00"])
    assert is_sorted(convert_all(["$9.00", "$10.00"], SortKind.FLOAT))


def test_to_float_rejects_text():
    with pytest.raises(ConversionError):
        to_float("free")


def test_to_date_strips_periods():
    assert to_date("Jan. 05 2021") == datetime(2021, 1, 5)
    assert to_date("Jan 05 2021") == datetime(2021, 1, 5)


def test_to_date_accepts_full_month_names():
    assert to_date("January 05 2021") == datetime(2021, 1, 5)
    assert is_sorted(convert_all(["January 05 2021", "February 01 2021"], SortKind.DATE))


def test_to_date_rejects_other_formats():
    with pytest.raises(ConversionError):
        to_date("2021-01-05")


def test_dates_sorted_chronologically():
    dates = convert_all(["Dec. 31 2020", "Jan. 05 2021", "Feb 01 2021"], SortKind.DATE)
    assert is_sorted(dates)


def test_conversion_failure_propagates_from_convert_all():
    with pytest.raises(ConversionError):
        convert_all(["Jan 05 2021", "yesterday"], SortKind.DATE)


def test_keyword_checks_are_vacuously_true_for_no_results():
    assert all_equal([], "x")
    assert all_contain([], "x")


def test_keyword_checks_trim_texts():
    assert all_equal(["  phone ", "phone"], "phone")
    assert not all_equal(["phone", "phones"], "phone")
    assert all_contain(["iPhone 15 ", " phone case"], "hone")
    assert not all_contain(["iPhone", "tablet"], "hone")


def test_all_in_expected_values():
    assert all_in(["Open", "Closed"], ("Open", "Closed", "Pending"))
    assert not all_in(["Open", "Archived"], ("Open", "Closed"))

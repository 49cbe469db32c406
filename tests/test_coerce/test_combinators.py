"""Tests for coercer combinators and unit list extrapolation."""

import logging
import math

import pytest

from cssrules.coerce import (
    css_unit3,
    css_unit4,
    css_unit_list,
    extrapolate,
    list_of,
    number,
    optional,
    string,
)
from cssrules.model import CssUnit


def _px(n: float) -> CssUnit:
    return CssUnit(float(n), "px")


# ---------------------------------------------------------------------------
# optional
# ---------------------------------------------------------------------------


class TestOptional:
    def test_fallback_when_absent(self):
        opacity = optional(number, "1")
        assert opacity() == 1.0
        assert opacity(None) == 1.0

    def test_value_when_present(self):
        assert optional(number, "1")("0.5") == 0.5

    def test_exposes_wrapped_coercer(self):
        assert optional(number, "1").__wrapped__ is number

    def test_empty_string_is_not_absent(self):
        assert optional(string, "fallback")("") == ""


# ---------------------------------------------------------------------------
# list_of
# ---------------------------------------------------------------------------


class TestListOf:
    def test_numbers(self):
        assert list_of(number)("1, 2,3") == [1.0, 2.0, 3.0]

    def test_empty(self):
        assert list_of(number)("") == []

    def test_absent(self):
        assert list_of(number)(None) == []

    def test_drops_empty_segments(self):
        assert list_of(string)("a,, b ,") == ["a", "b"]

    def test_custom_separator(self):
        assert list_of(string, "|")("a | b") == ["a", "b"]

    def test_keeps_nan_items(self):
        result = list_of(number)("1, x")
        assert result[0] == 1.0
        assert math.isnan(result[1])


class TestCssUnitList:
    def test_space_separated(self):
        assert css_unit_list("1px  2em") == [_px(1), CssUnit(2.0, "em")]

    def test_absent(self):
        assert css_unit_list(None) == []


# ---------------------------------------------------------------------------
# css_unit3
# ---------------------------------------------------------------------------


class TestCssUnit3:
    def test_one_value(self):
        assert css_unit3("1px") == [_px(1), _px(1), _px(1)]

    def test_two_values(self):
        assert css_unit3("1px 2px") == [_px(1), _px(2), _px(2)]

    def test_three_values(self):
        assert css_unit3("1px 2px 3px") == [_px(1), _px(2), _px(3)]

    def test_no_values(self):
        assert css_unit3("") == []
        assert css_unit3(None) == []

    def test_too_many_values_truncated(self, caplog):
        with caplog.at_level(logging.WARNING, logger="cssrules.coerce.combinators"):
            assert css_unit3("1px 2px 3px 4px") == [_px(1), _px(2), _px(3)]
        assert "at most 3 values" in caplog.text


# ---------------------------------------------------------------------------
# css_unit4
# ---------------------------------------------------------------------------


class TestCssUnit4:
    def test_one_value(self):
        assert css_unit4("1px") == [_px(1)] * 4

    def test_two_values(self):
        assert css_unit4("1px 2px") == [_px(1), _px(1), _px(2), _px(2)]

    def test_three_values(self):
        assert css_unit4("1px 2px 3px") == [_px(1), _px(2), _px(2), _px(3)]

    def test_four_values(self):
        assert css_unit4("1px 2px 3px 4px") == [_px(1), _px(2), _px(3), _px(4)]

    def test_five_values_uses_first_four(self):
        assert css_unit4("1px 2px 3px 4px 5px") == [_px(1), _px(2), _px(3), _px(4)]

    def test_no_values(self):
        assert css_unit4(None) == []


class TestExtrapolate:
    def test_generic_items(self):
        assert extrapolate(["a", "b"], 4) == ["a", "a", "b", "b"]

    def test_unsupported_arity(self):
        with pytest.raises(ValueError, match="Unsupported arity"):
            extrapolate(["a"], 2)

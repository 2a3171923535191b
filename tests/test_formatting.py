# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Test driver for package 'repdec' (formatting)."""

from fractions import Fraction
import sys

from hypothesis import given, strategies
import pytest

from repdec import (
    DisplayOptions, Rational, format_decimal, format_fraction,
    format_literal, parse_decimal)


@pytest.mark.parametrize(("num", "den", "result"),
                         ((1, 2, "0.5"),
                          (1, 3, "0.333..."),
                          (1, 30, "0.0333..."),
                          (5, 6, "0.8333..."),
                          (83, 99, "0.838383..."),
                          (123, 1000, "0.123"),
                          (123, 999, "0.123123123..."),
                          (123, 1, "123"),
                          (187, 1665, "0.1123123123..."),
                          (61111, 4950, "12.34565656..."),
                          (-1, -1, "1"),
                          (19, -10, "-1.9"),
                          (-1, 3, "-0.333..."),
                          (1, -9, "-0.111..."),
                          (0, -5, "0"),
                          (10, 4, "2.5"),
                          (1, 1024, "0.0009765625")),
                         ids=("1/2", "1/3", "1/30", "5/6", "83/99",
                              "123/1000", "123/999", "123/1", "187/1665",
                              "61111/4950", "-1/-1", "19/-10", "-1/3",
                              "1/-9", "0/-5", "10/4", "1/1024"))
def test_format_decimal(num, den, result):
    assert format_decimal(num, den) == result


@pytest.mark.parametrize(("options", "result"),
                         ((DisplayOptions(repeats=1), "12.3456..."),
                          (DisplayOptions(repeats=5), "12.345656565656..."),
                          (DisplayOptions(ellipsis="…"),
                           "12.34565656…"),
                          (DisplayOptions(literal=True), "12.34~56")),
                         ids=("repeats=1", "repeats=5", "unicode-ellipsis",
                              "literal"))
def test_format_decimal_options(options, result):
    assert format_decimal(61111, 4950, options) == result


def test_format_decimal_dflt_options(with_single_repeat):
    assert format_decimal(1, 7) == "0.142857..."
    assert format_decimal(1, 8) == "0.125"


def test_format_decimal_dflt_literal(with_literal):
    assert format_decimal(-1, 6) == "-0.1~6"


@pytest.mark.parametrize("num", (0, 1, -1), ids=("0", "1", "-1"))
def test_format_decimal_zero_denominator(num):
    with pytest.raises(ZeroDivisionError):
        format_decimal(num, 0)
    with pytest.raises(ZeroDivisionError):
        format_literal(num, 0)


@pytest.mark.parametrize(("num", "den", "result"),
                         ((1, 3, "0.~3"),
                          (61111, 4950, "12.34~56"),
                          (-187, 1665, "-0.1~123"),
                          (123, 1000, "0.123"),
                          (-4, 2, "-2"),
                          (22, 7, "3.~142857")),
                         ids=("1/3", "61111/4950", "-187/1665", "123/1000",
                              "-4/2", "22/7"))
def test_format_literal(num, den, result):
    assert format_literal(num, den) == result


@given(num=strategies.integers(min_value=-10 ** 9, max_value=10 ** 9),
       den=strategies.integers(min_value=1, max_value=2000))
def test_literal_round_trip_hypo(num, den):
    rn = Rational(num, den)
    text = format_literal(rn.numerator, rn.denominator)
    assert parse_decimal(text) == rn


@given(num=strategies.integers(min_value=-10 ** 9, max_value=10 ** 9),
       exp2=strategies.integers(min_value=0, max_value=30),
       exp5=strategies.integers(min_value=0, max_value=30))
def test_terminating_round_trip_hypo(num, exp2, exp5):
    rn = Rational(num, 2 ** exp2 * 5 ** exp5)
    text = format_decimal(rn.numerator, rn.denominator)
    assert "..." not in text
    assert parse_decimal(text) == rn
    # idempotence
    assert format_decimal(rn.numerator, rn.denominator) == text
    assert text == format_literal(rn.numerator, rn.denominator)


@given(num=strategies.integers(min_value=-10 ** 6, max_value=10 ** 6),
       den=strategies.integers(min_value=1, max_value=2000))
def test_decimal_prefix_hypo(num, den):
    # the displayed digits are the leading digits of the exact value
    text = format_decimal(num, den).rstrip(".")
    value = Fraction(num, den)
    shown = Fraction(text)
    digits = len(text.partition(".")[2])
    assert abs(value - shown) < Fraction(1, 10 ** digits)


@pytest.mark.parametrize(("value", "result"),
                         ((Rational(4, 6), "2/3"),
                          (Fraction(-10, 5), "-2"),
                          (7, "7"),
                          (Rational(61111, 4950), "61111/4950")),
                         ids=("Rational", "Fraction", "int", "61111/4950"))
def test_format_fraction(value, result):
    assert format_fraction(value) == result


@pytest.mark.skipif(not getattr(sys, "get_int_max_str_digits", lambda: 0)(),
                    reason="no integer string conversion limit")
def test_format_beyond_str_digits_limit():
    big = 10 ** sys.get_int_max_str_digits()
    with pytest.raises(OverflowError, match="conversion limit"):
        format_decimal(big, 1)
    with pytest.raises(OverflowError, match="conversion limit"):
        format_fraction(Rational(1, big))

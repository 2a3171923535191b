# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rendering of ratios as decimal or fraction strings."""

from __future__ import annotations

from itertools import islice
from typing import Iterator, Optional, Tuple

from .config import DisplayOptions, get_dflt_display_options
from .cycle import find_cycle, long_division
from .intwidth import to_digits
from .rational import Rational, RationalT


__all__ = ['format_decimal', 'format_literal', 'format_fraction']


def _take(digits: Iterator[int], count: Optional[int] = None) -> str:
    return ''.join(str(digit) for digit in islice(digits, count))


def _expand(numerator: int, denominator: int) \
        -> Tuple[str, str, str, str]:
    # returns sign, integral digits, non-repeating digits, repeating digits
    if denominator == 0:
        raise ZeroDivisionError(f"{numerator}/0: division by zero")
    sign = '-' if numerator != 0 and (numerator < 0) != (denominator < 0) \
        else ''
    numerator, denominator = abs(numerator), abs(denominator)
    cycle = find_cycle(numerator, denominator)
    digits = long_division(numerator, denominator)
    integral = to_digits(numerator // denominator)
    if cycle is None:
        return sign, integral, _take(digits), ''
    return (sign, integral, _take(digits, cycle.start),
            _take(digits, cycle.length))


def format_decimal(numerator: int, denominator: int,
                   options: Optional[DisplayOptions] = None) -> str:
    """Return decimal representation of `numerator` / `denominator`.

    A terminating expansion is written out completely, without a decimal
    point for integral values. For a repeating expansion the repeating block
    is written `options.repeats` times, followed by `options.ellipsis`.

    Args:
        numerator (int): numerator of the ratio
        denominator (int): denominator of the ratio
        options (DisplayOptions): display options (defaults to the current
            default display options)

    Returns:
        str: decimal representation

    Raises:
        ZeroDivisionError: `denominator` is equal to 0
        OverflowError: the integral part exceeds the integer string
            conversion limit
    """
    if options is None:
        options = get_dflt_display_options()
    if options.literal:
        return format_literal(numerator, denominator)
    sign, integral, prefix, block = _expand(numerator, denominator)
    if block:
        return (f"{sign}{integral}.{prefix}{block * options.repeats}"
                f"{options.ellipsis}")
    if prefix:
        return f"{sign}{integral}.{prefix}"
    return f"{sign}{integral}"


def format_literal(numerator: int, denominator: int) -> str:
    """Return decimal literal of `numerator` / `denominator`.

    The result uses the notation accepted by `parse_decimal`, with the
    repeating block marked by '~' (`'12.34~56'`).

    Raises:
        ZeroDivisionError: `denominator` is equal to 0
    """
    sign, integral, prefix, block = _expand(numerator, denominator)
    if block:
        return f"{sign}{integral}.{prefix}~{block}"
    if prefix:
        return f"{sign}{integral}.{prefix}"
    return f"{sign}{integral}"


def format_fraction(value: RationalT) -> str:
    """Return `value` as 'numerator/denominator' in lowest terms.

    The denominator is omitted if it is 1.
    """
    return str(Rational(value))

# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Parsing of decimal literals and fractions."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Optional

from .intwidth import checked, from_digits
from .rational import Rational


__all__ = ['FormatError', 'DecimalLiteral', 'parse_decimal_literal',
           'parse_decimal', 'parse_fraction', 'parse_rational']


# Decimal literal: optional sign, mandatory integer part, optional
# non-repeating fractional digits after '.', optional repeating digits
# after '~'. Equivalent to ^[-+]?\d+\.?\d*(~\d+)?$ with ASCII digits.
_DECIMAL_PATTERN = re.compile(r"""
    (?P<sign>[-+])?
    (?P<integer>[0-9]+)
    (?:\.(?P<fraction>[0-9]*))?
    (?:~(?P<cycle>[0-9]+))?
    """, re.VERBOSE)

# Fraction: optionally signed integers on both sides of '/'.
_FRACTION_PATTERN = re.compile(r"""
    (?P<numerator>[-+]?[0-9]+)
    /
    (?P<denominator>[-+]?[0-9]+)
    """, re.VERBOSE)


class FormatError(ValueError):
    """Raised when a string does not match the expected notation.

    Attributes:
        text (str): the offending input
    """

    def __init__(self, text: str, notation: str) -> None:
        super().__init__(f"Invalid {notation}: {text!r}")
        self.text = text


@dataclass(frozen=True)
class DecimalLiteral:
    """Structured content of a decimal literal.

    The digit strings keep their leading zeros; their numeric value and
    their digit count both enter the reconstruction.
    """

    negative: bool
    integer: int
    fraction: Optional[str] = None
    cycle: Optional[str] = None

    def as_rational(self) -> Rational:
        """Return the exact value of `self`, reduced to lowest terms."""
        if self.fraction:
            scale = _pow10(len(self.fraction))
            value = Rational(checked(checked(self.integer * scale) +
                                     from_digits(self.fraction)),
                             scale)
        else:
            scale = 1
            value = Rational(checked(self.integer))
        if self.cycle:
            nines = checked(_pow10(len(self.cycle)) - 1)
            value += Rational(from_digits(self.cycle),
                              checked(nines * scale))
        return -value if self.negative else value


def _pow10(exp: int) -> int:
    return checked(10 ** exp)


def parse_decimal_literal(text: str) -> DecimalLiteral:
    """Split decimal literal `text` into its parts.

    Raises:
        FormatError: `text` is not a valid decimal literal
        OverflowError: the integer part exceeds the integer string
            conversion limit or the current default integer width
    """
    match = _DECIMAL_PATTERN.fullmatch(text)
    if match is None:
        raise FormatError(text, "decimal")
    return DecimalLiteral(negative=match['sign'] == '-',
                          integer=from_digits(match['integer']),
                          fraction=match['fraction'] or None,
                          cycle=match['cycle'])


def parse_decimal(text: str) -> Rational:
    """Return the exact value of decimal literal `text`.

    Examples:
        >>> parse_decimal("12.34~56")
        Rational(61111, 4950)
        >>> parse_decimal("-1.~9")
        Rational(-2)

    Raises:
        FormatError: `text` is not a valid decimal literal
        OverflowError: an intermediate value exceeds the current default
            integer width, or a digit string the integer string conversion
            limit
    """
    return parse_decimal_literal(text).as_rational()


def parse_fraction(text: str) -> Rational:
    """Return the value of fraction `text` ('numerator/denominator').

    Raises:
        FormatError: `text` is not a valid fraction
        ZeroDivisionError: the denominator is 0
        OverflowError: a component exceeds the current default integer width
            or the integer string conversion limit
    """
    match = _FRACTION_PATTERN.fullmatch(text)
    if match is None:
        raise FormatError(text, "fraction")
    numerator = from_digits(match['numerator'])
    denominator = from_digits(match['denominator'])
    if denominator == 0:
        raise ZeroDivisionError(f"{text}: division by zero")
    return Rational(numerator, denominator)


def parse_rational(text: str) -> Rational:
    """Return the value of `text`, given either as fraction or as decimal."""
    if '/' in text:
        return parse_fraction(text)
    return parse_decimal(text)

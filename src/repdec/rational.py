# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Exact rational numbers kept in lowest terms."""

from __future__ import annotations

from fractions import Fraction
from math import gcd, isfinite
import numbers
import operator
from typing import Any, Callable, Optional, Tuple, Union

from .intwidth import checked, to_digits


__all__ = ['Rational']


RationalT = Union['Rational', numbers.Rational, int]


def _as_ratio(value: Any) -> Tuple[int, int]:
    """Return `value` as (numerator, denominator) pair (not normalized)."""
    if value is None:
        return 0, 1
    if isinstance(value, Rational):
        return value._numerator, value._denominator
    if isinstance(value, numbers.Integral):
        return int(operator.index(value)), 1
    if isinstance(value, numbers.Rational):
        return int(value.numerator), int(value.denominator)
    if isinstance(value, float):
        # exact binary value
        if not isfinite(value):
            raise ValueError(f"Can't convert {value!r} to Rational.")
        return value.as_integer_ratio()
    if isinstance(value, str):
        from .parsing import parse_rational
        q = parse_rational(value.strip())
        return q._numerator, q._denominator
    raise TypeError(f"Can't convert {value!r} to Rational.")


class Rational:
    """Rational number with unlimited or checked integer components.

    Args:
        numerator (Union[Rational, numbers.Rational, int, float, str]):
            value of the numerator or of the whole number (if `denominator`
            is not given)
        denominator (Union[Rational, numbers.Rational, int]): value of the
            denominator

    If no argument is given, a Rational equal to 0 is returned.

    A string is interpreted either as fraction (`'-1/3'`) or as decimal
    literal, optionally with a repeating part (`'0.1~6'`).

    The result is always normalized: numerator and denominator are coprime,
    the denominator is positive and carries no sign.

    Raises:
        TypeError: an argument can not be converted
        ValueError: a string argument is malformed or a float argument is
            not finite
        ZeroDivisionError: `denominator` is equal to 0
        OverflowError: a component exceeds the current default integer width
    """

    __slots__ = ('_numerator', '_denominator')

    def __new__(cls, numerator: Optional[Any] = None,
                denominator: Optional[RationalT] = None) -> Rational:
        """Create new Rational instance."""
        if denominator is None:
            num, den = _as_ratio(numerator)
        else:
            if isinstance(denominator, (str, float)):
                raise TypeError(
                    f"Denominator must be an int or a rational number, "
                    f"not {type(denominator).__name__}.")
            n_num, n_den = _as_ratio(numerator)
            d_num, d_den = _as_ratio(denominator)
            num, den = n_num * d_den, n_den * d_num
        return cls._from_ratio(num, den)

    @classmethod
    def _from_ratio(cls, num: int, den: int) -> Rational:
        if den == 0:
            raise ZeroDivisionError(f"Rational({num}, 0)")
        div = gcd(num, den)
        if den < 0:
            div = -div
        rn = object.__new__(cls)
        rn._numerator = checked(num // div)
        rn._denominator = checked(den // div)
        return rn

    @property
    def numerator(self) -> int:
        """Numerator of `self` in lowest terms, carrying the sign."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Positive denominator of `self` in lowest terms."""
        return self._denominator

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair (numerator, denominator) of `self`."""
        return self._numerator, self._denominator

    def as_fraction(self) -> Fraction:
        """Return an instance of `Fraction` equal to `self`."""
        return Fraction(self._numerator, self._denominator)

    def is_integer(self) -> bool:
        """Return True if `self` has no fractional part."""
        return self._denominator == 1

    def __copy__(self) -> Rational:
        return self

    def __deepcopy__(self, memo: Any) -> Rational:
        return self

    def __reduce__(self) -> Tuple[type, Tuple[int, int]]:
        return Rational, (self._numerator, self._denominator)

    def __repr__(self) -> str:
        """repr(self)"""
        if self._denominator == 1:
            return f"Rational({to_digits(self._numerator)})"
        return (f"Rational({to_digits(self._numerator)}, "
                f"{to_digits(self._denominator)})")

    def __str__(self) -> str:
        """str(self)"""
        if self._denominator == 1:
            return to_digits(self._numerator)
        return f"{to_digits(self._numerator)}/{to_digits(self._denominator)}"

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._numerator != 0

    def __int__(self) -> int:
        """int(self), truncated towards zero"""
        if self._numerator < 0:
            return -(-self._numerator // self._denominator)
        return self._numerator // self._denominator

    __trunc__ = __int__

    def __float__(self) -> float:
        """float(self)"""
        return self._numerator / self._denominator

    def __hash__(self) -> int:
        """hash(self), equal to the hash of equivalent int or Fraction"""
        if self._denominator == 1:
            return hash(self._numerator)
        return hash(self.as_fraction())

    def __neg__(self) -> Rational:
        """-self"""
        return Rational._from_ratio(checked(-self._numerator),
                                    self._denominator)

    def __pos__(self) -> Rational:
        """+self"""
        return self

    def __abs__(self) -> Rational:
        """abs(self)"""
        return -self if self._numerator < 0 else self

    def __add__(self, other: Any) -> Rational:
        """self + other"""
        try:
            num, den = _coerce(other)
        except TypeError:
            return NotImplemented
        return Rational._from_ratio(
            checked(checked(self._numerator * den) +
                    checked(num * self._denominator)),
            checked(self._denominator * den))

    __radd__ = __add__

    def __sub__(self, other: Any) -> Rational:
        """self - other"""
        try:
            num, den = _coerce(other)
        except TypeError:
            return NotImplemented
        return self + Rational._from_ratio(checked(-num), den)

    def __rsub__(self, other: Any) -> Rational:
        """other - self"""
        try:
            num, den = _coerce(other)
        except TypeError:
            return NotImplemented
        return -self + Rational._from_ratio(num, den)

    def _compare(self, other: Any,
                 op: Callable[[int, int], bool]) -> bool:
        try:
            num, den = _coerce(other)
        except TypeError:
            return NotImplemented
        return op(self._numerator * den, num * self._denominator)

    def __eq__(self, other: Any) -> bool:
        """self == other"""
        return self._compare(other, operator.eq)

    def __lt__(self, other: Any) -> bool:
        """self < other"""
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        """self <= other"""
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        """self > other"""
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        """self >= other"""
        return self._compare(other, operator.ge)


def _coerce(other: Any) -> Tuple[int, int]:
    # operands of binary operations must be exact
    if isinstance(other, Rational):
        return other._numerator, other._denominator
    if isinstance(other, numbers.Integral):
        return int(operator.index(other)), 1
    if isinstance(other, numbers.Rational):
        return int(other.numerator), int(other.denominator)
    raise TypeError

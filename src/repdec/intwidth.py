# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Integer representations used by the conversion arithmetic."""

from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique
from typing import Optional


__all__ = ['IntWidth', 'get_dflt_int_width', 'set_dflt_int_width']


@unique
class IntWidth(Enum):
    """Enumeration of integer representations."""

    def __new__(cls, value: int, bits: Optional[int], doc: str) -> IntWidth:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = value
        member.bits = bits
        member.__doc__ = doc
        return member

    ARBITRARY = (1, None, 'Unbounded integers; no overflow possible.')
    INT32 = (2, 32, 'Signed 32-bit integers; results outside '
                    '[-2**31, 2**31 - 1] overflow.')
    INT64 = (3, 64, 'Signed 64-bit integers; results outside '
                    '[-2**63, 2**63 - 1] overflow.')

    @property
    def min(self) -> Optional[int]:
        """Smallest representable value (None if unbounded)."""
        if self.bits is None:
            return None
        return -(1 << (self.bits - 1))

    @property
    def max(self) -> Optional[int]:
        """Largest representable value (None if unbounded)."""
        if self.bits is None:
            return None
        return (1 << (self.bits - 1)) - 1

    def check(self, value: int) -> int:
        """Return `value` if it is representable, otherwise fail.

        Raises:
            OverflowError: `value` does not fit into `self`
        """
        if self.bits is not None and not self.min <= value <= self.max:
            raise OverflowError(
                f"{to_digits(value)} does not fit into {self.bits}-bit "
                f"integer")
        return value


_dflt_int_width: ContextVar[IntWidth] = \
    ContextVar("dflt_int_width", default=IntWidth.ARBITRARY)


def get_dflt_int_width() -> IntWidth:
    """Return default integer representation."""
    return _dflt_int_width.get()


def set_dflt_int_width(width: IntWidth) -> Token:
    """Set default integer representation.

    Args:
        width (IntWidth): integer representation to be set as default

    Raises:
        TypeError: given 'width' is not a valid integer representation
    """
    if not isinstance(width, IntWidth):
        raise TypeError(f"Illegal integer width: {width!r}")
    return _dflt_int_width.set(width)


def checked(value: int) -> int:
    """Return `value` checked against the default integer representation."""
    return _dflt_int_width.get().check(value)


def from_digits(digits: str) -> int:
    """Return the int given by decimal `digits`, checked like `checked`.

    Raises:
        OverflowError: `digits` exceed the interpreter's integer string
            conversion limit or the current default integer width
    """
    try:
        value = int(digits)
    except ValueError as exc:
        raise OverflowError(
            f"{len(digits)} digits exceed the integer string conversion "
            f"limit") from exc
    return checked(value)


def to_digits(value: int) -> str:
    """Return the decimal digits of `value`.

    Raises:
        OverflowError: `value` exceeds the interpreter's integer string
            conversion limit
    """
    try:
        return str(value)
    except ValueError as exc:
        raise OverflowError(
            f"about {value.bit_length() * 3 // 10} digits exceed the "
            f"integer string conversion limit") from exc

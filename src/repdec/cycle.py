# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Detection of the repeating block in the decimal expansion of a ratio."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, NamedTuple, Optional

from .intwidth import checked


__all__ = ['Cycle', 'find_cycle', 'long_division']


logger = logging.getLogger(__name__)


class Cycle(NamedTuple):
    """Position of the repeating block within the fractional digits.

    Attributes:
        start (int): 0-based offset of the first repeating digit, i.e. the
            length of the non-repeating prefix
        length (int): number of digits in the repeating block
    """

    start: int
    length: int


def find_cycle(numerator: int, denominator: int) -> Optional[Cycle]:
    """Return the repeating block of `numerator` / `denominator`.

    The long division is simulated on the magnitudes of both arguments, so
    the sign of the ratio does not affect the result.

    Every remainder is remembered until it recurs. As there are fewer than
    |denominator| distinct remainders, time and memory grow linearly with
    the denominator in the worst case: a denominator like 1000000007 with a
    full period of 10**9 - 1 digits is not practical.

    Returns:
        Cycle: position and length of the repeating block, or None if the
            decimal expansion terminates

    Raises:
        ZeroDivisionError: `denominator` is equal to 0
        OverflowError: an intermediate remainder exceeds the current default
            integer width
    """
    if denominator == 0:
        raise ZeroDivisionError(f"{numerator}/0: division by zero")
    numerator, denominator = abs(numerator), abs(denominator)
    # remainder -> index of the fractional digit it produces
    seen: Dict[int, int] = {}
    remainder = numerator % denominator
    while remainder != 0:
        start = seen.get(remainder)
        if start is not None:
            cycle = Cycle(start, len(seen) - start)
            logger.debug("%i/%i repeats: %s", numerator, denominator, cycle)
            return cycle
        seen[remainder] = len(seen)
        remainder = checked(remainder * 10) % denominator
    return None


def long_division(numerator: int, denominator: int) -> Iterator[int]:
    """Return iterator over the fractional digits of |numerator/denominator|.

    The iterator is exhausted after the last digit of a terminating
    expansion; for a repeating expansion it never ends.

    Raises:
        ZeroDivisionError: `denominator` is equal to 0
    """
    if denominator == 0:
        raise ZeroDivisionError(f"{numerator}/0: division by zero")
    return _digits(abs(numerator) % abs(denominator), abs(denominator))


def _digits(remainder: int, denominator: int) -> Iterator[int]:
    while remainder != 0:
        digit, remainder = divmod(checked(remainder * 10), denominator)
        yield digit

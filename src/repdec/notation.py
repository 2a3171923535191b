# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Conversion between fraction and decimal notation."""

from __future__ import annotations

import logging
from typing import Optional

from .config import DisplayOptions
from .formatting import format_decimal, format_fraction
from .parsing import parse_decimal, parse_fraction


__all__ = ['FRACTION_SEPARATOR', 'is_fraction', 'fraction_to_decimal',
           'decimal_to_fraction', 'convert']


logger = logging.getLogger(__name__)

FRACTION_SEPARATOR = '/'


def is_fraction(line: str) -> bool:
    """Return True if `line` is to be read as fraction."""
    return FRACTION_SEPARATOR in line


def fraction_to_decimal(text: str,
                        options: Optional[DisplayOptions] = None) -> str:
    """Convert fraction `text` ('-12/7') into decimal notation.

    Raises:
        FormatError: `text` is not a valid fraction
        ZeroDivisionError: the denominator is 0
    """
    value = parse_fraction(text)
    result = format_decimal(value.numerator, value.denominator, options)
    logger.debug("%s -> %s", text, result)
    return result


def decimal_to_fraction(text: str) -> str:
    """Convert decimal literal `text` ('1.2~3') into fraction notation.

    Raises:
        FormatError: `text` is not a valid decimal literal
    """
    result = format_fraction(parse_decimal(text))
    logger.debug("%s -> %s", text, result)
    return result


def convert(line: str, options: Optional[DisplayOptions] = None) -> str:
    """Convert `line` into the converse notation.

    Surrounding whitespace is ignored. A line containing the fraction
    separator is converted into decimal notation, any other line into
    fraction notation.
    """
    line = line.strip()
    if is_fraction(line):
        return fraction_to_decimal(line, options)
    return decimal_to_fraction(line)

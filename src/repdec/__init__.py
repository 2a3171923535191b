# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Conversion between repeating decimals and exact fractions."""

from .config import (
    DisplayOptions, get_dflt_display_options, set_dflt_display_options)
from .cycle import Cycle, find_cycle, long_division
from .formatting import format_decimal, format_fraction, format_literal
from .intwidth import IntWidth, get_dflt_int_width, set_dflt_int_width
from .notation import (
    convert, decimal_to_fraction, fraction_to_decimal, is_fraction)
from .parsing import (
    DecimalLiteral, FormatError, parse_decimal, parse_decimal_literal,
    parse_fraction, parse_rational)
from .rational import Rational
from .version import version_tuple as __version__  # noqa: F401

# define public namespace
__all__ = [
    'Cycle',
    'DecimalLiteral',
    'DisplayOptions',
    'FormatError',
    'IntWidth',
    'Rational',
    'convert',
    'decimal_to_fraction',
    'find_cycle',
    'format_decimal',
    'format_fraction',
    'format_literal',
    'fraction_to_decimal',
    'get_dflt_display_options',
    'get_dflt_int_width',
    'is_fraction',
    'long_division',
    'parse_decimal',
    'parse_decimal_literal',
    'parse_fraction',
    'parse_rational',
    'set_dflt_display_options',
    'set_dflt_int_width',
]

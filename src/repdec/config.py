# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Display options for repeating decimals."""

from __future__ import annotations

from contextvars import ContextVar, Token
from dataclasses import dataclass


__all__ = ['DisplayOptions', 'get_dflt_display_options',
           'set_dflt_display_options']


@dataclass(frozen=True)
class DisplayOptions:
    """Options controlling how repeating decimals are rendered.

    Attributes:
        repeats (int): number of times the repeating block is written out
            before the ellipsis
        ellipsis (str): marker appended to a repeating expansion
        literal (bool): render repeating decimals in input notation
            (`0.1~23`) instead of writing the block out
    """

    repeats: int = 3
    ellipsis: str = "..."
    literal: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.repeats, int) or isinstance(self.repeats,
                                                           bool):
            raise TypeError(f"'repeats' must be an int: {self.repeats!r}")
        if self.repeats < 1:
            raise ValueError(f"'repeats' must be >= 1: {self.repeats}")
        if not isinstance(self.ellipsis, str):
            raise TypeError(f"'ellipsis' must be a str: {self.ellipsis!r}")
        if not isinstance(self.literal, bool):
            raise TypeError(f"'literal' must be a bool: {self.literal!r}")


_dflt_display_options: ContextVar[DisplayOptions] = \
    ContextVar("dflt_display_options", default=DisplayOptions())


def get_dflt_display_options() -> DisplayOptions:
    """Return default display options."""
    return _dflt_display_options.get()


def set_dflt_display_options(options: DisplayOptions) -> Token:
    """Set default display options.

    Args:
        options (DisplayOptions): options to be set as default

    Raises:
        TypeError: given 'options' is not a DisplayOptions instance
    """
    if not isinstance(options, DisplayOptions):
        raise TypeError(f"Illegal display options: {options!r}")
    return _dflt_display_options.set(options)

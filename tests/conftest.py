# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Shared pytest fixtures.."""

import pytest

from repdec import (
    DisplayOptions, IntWidth, get_dflt_display_options, get_dflt_int_width,
    set_dflt_display_options, set_dflt_int_width)


@pytest.fixture(params=[width.name for width in IntWidth],
                ids=[width.name for width in IntWidth])
def width(request) -> IntWidth:
    prev_width = get_dflt_int_width()
    set_dflt_int_width(IntWidth[request.param])
    yield IntWidth[request.param]
    set_dflt_int_width(prev_width)


def dflt_width(width, name):
    @pytest.fixture(name=name)
    def closure():
        prev_width = get_dflt_int_width()
        set_dflt_int_width(width)
        yield
        set_dflt_int_width(prev_width)
    return closure


with_int32 = dflt_width(IntWidth.INT32, "with_int32")
with_int64 = dflt_width(IntWidth.INT64, "with_int64")


def dflt_display(options, name):
    @pytest.fixture(name=name)
    def closure():
        prev_options = get_dflt_display_options()
        set_dflt_display_options(options)
        yield
        set_dflt_display_options(prev_options)
    return closure


with_single_repeat = dflt_display(DisplayOptions(repeats=1),
                                  "with_single_repeat")
with_literal = dflt_display(DisplayOptions(literal=True), "with_literal")

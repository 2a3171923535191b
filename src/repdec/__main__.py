# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Command line interface: convert decimals to fractions and vice versa."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from .config import DisplayOptions, set_dflt_display_options
from .intwidth import IntWidth, set_dflt_int_width
from .notation import convert


logger = logging.getLogger(__name__)

BANNER = """\
Repeating decimal / fraction converter
Enter a decimal to get a fraction, or a fraction to get a decimal.
  decimal:  integer[.digits[~repeating digits]]   e.g. 12.34~56
  fraction: integer/integer                       e.g. 61111/4950
End input (Ctrl-D, Ctrl-Z on Windows) to quit.

"""
PROMPT = "> "


def convert_line(line: str, out: TextIO) -> bool:
    """Write conversion of `line` to `out`; return False if it failed."""
    try:
        result = convert(line)
    except (ValueError, ZeroDivisionError, OverflowError) as exc:
        logger.debug("conversion of %r failed", line, exc_info=True)
        print(f"error: {exc}", file=out)
        return False
    print(result, file=out)
    return True


def convert_lines(lines: Iterable[str], out: TextIO) -> int:
    """Convert all non-blank `lines`; return number of failures."""
    failures = 0
    for line in lines:
        line = line.strip()
        if line and not convert_line(line, out):
            failures += 1
    return failures


def repl(stdin: TextIO, out: TextIO) -> int:
    """Run interactive loop until end of input; return number of failures."""
    out.write(BANNER)
    failures = 0
    while True:
        out.write(PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            break
        failures += convert_lines((line,), out)
    out.write("\n")
    return failures


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the command line interface."""
    ap = argparse.ArgumentParser(
        prog="repdec",
        description="Convert decimals (with optional repeating part, "
                    "e.g. 0.1~6) into fractions and fractions into "
                    "decimals.",
        epilog="Separate negative values from the options by '--', "
               "e.g. repdec -- -1/3",
    )
    ap.add_argument(
        "lines",
        nargs="*",
        metavar="LINE",
        help="Values to convert. If omitted, lines are read from stdin "
             "(interactively, if stdin is a terminal).",
    )
    ap.add_argument(
        "-r", "--repeats",
        type=int,
        default=DisplayOptions.repeats,
        help="How often the repeating block is written out "
             "(default: %(default)s).",
    )
    ap.add_argument(
        "-l", "--literal",
        action="store_true",
        help="Write repeating decimals in input notation (0.1~6).",
    )
    ap.add_argument(
        "-w", "--int-width",
        choices=[width.name.lower() for width in IntWidth],
        default=IntWidth.ARBITRARY.name.lower(),
        help="Integer representation; bounded widths report overflow "
             "(default: %(default)s).",
    )
    ap.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages.",
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface; return the exit status."""
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")
    try:
        set_dflt_display_options(DisplayOptions(repeats=args.repeats,
                                                literal=args.literal))
    except ValueError as exc:
        ap.error(str(exc))
    set_dflt_int_width(IntWidth[args.int_width.upper()])

    if args.lines:
        failures = convert_lines(args.lines, sys.stdout)
    elif sys.stdin.isatty():
        failures = repl(sys.stdin, sys.stdout)
    else:
        failures = convert_lines(sys.stdin, sys.stdout)
    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())

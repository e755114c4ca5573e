#!/usr/bin/env python3
"""
mathop: 32-bit integer operator demo CLI

Usage:
    python mathop_cli.py [--num1 N] [--num2 N] [--overflow wrapping|checked]
                         [--steps] [--verbose]

With no arguments prints:
    10 + 5 = 15
    10 > 5 = true
    10 > 0 && 5 > 0 = true
    20

Examples:
    python mathop_cli.py
    python mathop_cli.py --num1 0x7FFFFFFF                  # wraps
    python mathop_cli.py --num1 0x7FFFFFFF --overflow checked
    python mathop_cli.py --steps                            # dump step list
    python mathop_cli.py --num1=-0x80000000 --num2 -1

Negative hex values must be attached with '=' (--num1=-0x10); otherwise
argparse reads the leading '-' as the start of an option. Negative
decimal values work either way.
"""

import argparse
import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler

# Allow running from project root without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from mathop import __version__, DEFAULT_NUM1, DEFAULT_NUM2, DEFAULT_PROGRAM, OVERFLOW_MODES
from mathop import MathOpError, OperatorDemo, Variables

logger = logging.getLogger("mathop")


def parse_int_arg(value: str) -> int:
    """Parse an integer argument that may be hex (0x...), $ prefix, or decimal."""
    text = value.strip()
    sign = 1
    if text.startswith("-"):
        sign, text = -1, text[1:]
    try:
        if text.startswith("0x") or text.startswith("0X"):
            return sign * int(text, 16)
        if text.startswith("$"):
            return sign * int(text[1:], 16)
        return sign * int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout carries only demo output."""
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=Console(stderr=True),
        level=level,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    logger.handlers[:] = [handler]
    logger.setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mathop",
        description="Demonstrate arithmetic, comparison, logical and assignment "
                    "operators on 32-bit signed integers",
        epilog="Overflow modes: " + ", ".join(OVERFLOW_MODES.keys()),
    )
    parser.add_argument("--num1", type=parse_int_arg, default=DEFAULT_NUM1,
                        help=f"Starting value of num1: decimal, 0x or $ hex; use "
                             f"--num1=-0x... for negative hex (default: {DEFAULT_NUM1})")
    parser.add_argument("--num2", type=parse_int_arg, default=DEFAULT_NUM2,
                        help=f"Value of num2, same syntax as --num1 (default: {DEFAULT_NUM2})")
    parser.add_argument("--overflow", default="wrapping",
                        choices=list(OVERFLOW_MODES.keys()),
                        help="Signed overflow behavior (default: wrapping)")
    parser.add_argument("--steps", action="store_true",
                        help="Dump the step program and exit (debug)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log step evaluation to stderr")
    parser.add_argument("--version", action="version",
                        version=f"mathop {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if args.steps:
        for step in DEFAULT_PROGRAM:
            print(f"{step.index}. {step.title}: {step.__doc__}")
        return 0

    mode = OVERFLOW_MODES[args.overflow]
    logger.debug("Overflow mode %s: %s", args.overflow, mode["description"])

    try:
        variables = Variables(args.num1, args.num2)
        demo = OperatorDemo(variables, overflow=args.overflow)
        demo.run(emit=print)
    except MathOpError as e:
        sys.stdout.flush()
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Internal error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

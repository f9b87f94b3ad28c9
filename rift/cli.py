#!/usr/bin/env python3
"""
RIFT command line driver
========================

Runs one expression through all four stages and prints the rendered tree.

Usage:
    rift [expression] [options]

Options:
    --format FMT    Primary output format (LISP_STYLE_AST, JSON, DOT_GRAPH)
    --strict        Raise on malformed expressions instead of recording them
    --reject-empty  Treat blank input as an error
    --diagnostics   Print collected warnings and errors to stderr
    -v, --verbose   Log stage progress (repeat for debug output)

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional

from .diagnostics import RiftError
from .governance import GovernanceStore
from .output import PRIMARY_FORMATS
from .pipeline import Pipeline

DEFAULT_EXPRESSION = "x + 2 * y"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rift",
        description="RIFT stage pipeline: tokenize, parse and render an expression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    rift                          # Render the built-in sample expression
    rift "a * b + c"              # Render an expression
    rift "a - b" --format JSON    # Render as JSON
    rift "x +" --strict           # Fail on the missing operand
        """
    )

    parser.add_argument('expression', nargs='?', default=DEFAULT_EXPRESSION,
                        help=f'Expression to compile (default: "{DEFAULT_EXPRESSION}")')
    parser.add_argument('--format', dest='output_format', choices=sorted(PRIMARY_FORMATS),
                        help='Primary output format (default: from governance)')
    parser.add_argument('--strict', action='store_true',
                        help='Raise on malformed expressions')
    parser.add_argument('--reject-empty', action='store_true',
                        help='Treat blank input as an error')
    parser.add_argument('--diagnostics', action='store_true',
                        help='Print warnings and errors to stderr')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Log stage progress (-vv for debug output)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns the process exit code."""
    args = build_arg_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )

    overrides = {}
    if args.output_format:
        output_store = GovernanceStore(3)
        output_store.add("OUTPUT_FORMATS", "primary_format", args.output_format)
        overrides[3] = output_store

    try:
        pipeline = Pipeline(overrides, strict=args.strict, reject_empty=args.reject_empty)
        result = pipeline.run(args.expression)
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 130
    except RiftError as e:
        print(str(e), end="", file=sys.stderr)
        return 1

    output = result.output
    print(output, end="" if output.endswith("\n") else "\n")

    if args.diagnostics:
        for diagnostic in result.diagnostics:
            print(str(diagnostic), end="", file=sys.stderr)

    return 1 if result.has_errors() else 0


if __name__ == "__main__":
    sys.exit(main())

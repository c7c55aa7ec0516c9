"""Command line entry point: print the instructions that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parse import ParseError, check_args, parse_arguments
from pushswap.sort import choose_algorithm, is_sorted
from pushswap.stacks import PushSwap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on ``argv`` (without the program name); return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        check_args(args)
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    if len(values) < 2 or is_sorted(values):
        return 0
    machine = PushSwap(values)
    choose_algorithm(machine)
    for op in machine.ops:
        sys.stdout.write(op + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""The push_swap command: read numbers, print the operations that sort them."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.args import ArgumentError, parse_args
from pushswap.output import put_endl
from pushswap.sort import sort
from pushswap.stack import Machine


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command on ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = parse_args(args)
    except ArgumentError:
        put_endl("Error", sys.stderr)
        return 1
    machine = Machine(numbers)
    sort(machine)
    machine.a.clear()
    machine.b.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Command line: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .algorithms import solve
from .parsing import InputError, parse_numbers


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorter on ``argv`` and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_numbers(args)
        if numbers is None:
            return 0
        if not numbers:
            return 1
        moves = solve(numbers)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    for move in moves:
        sys.stdout.write(move + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
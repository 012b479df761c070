"""Command line: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.printing import printf
from pushswap.sorting import push_swap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read integers from ``argv`` and print one move per line.

    Invalid input prints ``Error`` on standard error. The exit status is
    always 0.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    for operation in push_swap(values):
        printf("%s\n", operation)
    return 0
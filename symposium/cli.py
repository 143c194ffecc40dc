"""Command-line entry points for both kinds of dinner."""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence

from symposium.config import Settings
from symposium.parsing import ArgumentError
from symposium.shared import run_shared
from symposium.table import run_table


def _start(argv: Optional[Sequence[str]], runner: Callable[..., object]) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = Settings.from_arguments(args)
    except ArgumentError as error:
        print(error, file=sys.stderr)
        return 1
    runner(settings, sys.stdout)
    sys.stdout.flush()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a dinner with one fork between each pair of neighbours."""
    return _start(argv, run_table)


def main_shared(argv: Optional[Sequence[str]] = None) -> int:
    """Run a dinner where the forks lie in a shared pile."""
    return _start(argv, run_shared)


if __name__ == "__main__":
    sys.exit(main())
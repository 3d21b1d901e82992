"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from philo.parsing import SettingsError, parse_settings
from philo.simulation import run
from philo.table import Table

USAGE_ERROR = "Error: Bad arguments\n"
INIT_ERROR = "Error: Init failed"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation with the given arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (4, 5):
        sys.stderr.write(USAGE_ERROR)
        return 1
    try:
        settings = parse_settings(args)
    except SettingsError:
        print(INIT_ERROR)
        return 1
    run(Table(settings, sys.stdout))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
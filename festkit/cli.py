"""Command that lists the generic substitutes of a package."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .document import (
    Fest,
    FestError,
    FileNotFound,
    catalog_legemiddelpakning,
    find_legemiddelpakning,
    generic_legemiddelpakning,
)

__all__ = ["main"]


def main(argv: Sequence[str] | None = None) -> int:
    """Print item number and name of every package substitutable for one."""
    parser = argparse.ArgumentParser(
        prog="festkit",
        description="List the packages in the same substitution group as a package.",
    )
    parser.add_argument("file", nargs="?", default="fest251.xml", help="FEST XML file")
    parser.add_argument("varenr", nargs="?", default="116772", help="item number")
    args = parser.parse_args(argv)

    fest = Fest()
    try:
        fest.load_file(args.file)
    except FileNotFound as exc:
        print(f"error:{exc}")
    except FestError as exc:
        print(f"error:{exc}", file=sys.stderr)
        return 1

    container = catalog_legemiddelpakning(fest)
    pakning = find_legemiddelpakning(container, args.varenr)
    for result in generic_legemiddelpakning(container, pakning):
        print(result.varenr, result.varenavn)
    return 0


if __name__ == "__main__":
    sys.exit(main())
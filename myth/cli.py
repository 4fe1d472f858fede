"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

GREETING = "Hello, world!"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting and return the exit status."""
    argparse.ArgumentParser(prog="myth").parse_args(argv)
    print(GREETING)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
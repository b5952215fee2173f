"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

GREETING = "Hello, world!"


def _parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(prog="mllgeom", description="Print a greeting.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line, print a greeting and return the exit status."""
    _parser().parse_args(list(argv) if argv is not None else None)
    sys.stdout.write(GREETING + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
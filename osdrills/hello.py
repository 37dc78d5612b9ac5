"""The customary first program."""

from __future__ import annotations

import argparse
import sys


def greeting() -> str:
    """Return the greeting text."""
    return "Hello, world!"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="hello",
        description="Print a friendly greeting.",
    )


def main(argv: list[str] | None = None) -> int:
    """Print the greeting; any extra arguments are ignored."""
    parser = _build_parser()
    parser.parse_known_args(sys.argv[1:] if argv is None else argv)
    sys.stdout.write(f"{greeting()}\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""CLI entry point for the quality gates.

Usage:
    python -m gate.check [--report PATH] [--profile NAME] [--no-generate]

Exits 0 when the gates pass (with or without warnings), 1 when a critical
gate fails or the check itself errors.
"""

import sys

from cli import main as cli_main


def main(argv: list[str] | None = None) -> int:
    """Run `quality-gates check` with the given check options."""
    args = sys.argv[1:] if argv is None else argv
    return cli_main(["check", *args])


if __name__ == "__main__":
    sys.exit(main())

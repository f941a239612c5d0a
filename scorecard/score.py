"""CLI entry point for analyzing a source tree.

Usage:
    python -m scorecard.score [source_dir]
"""

import sys

from cli import main as cli_main


def main(argv: list[str] | None = None) -> int:
    """Analyze a directory (default: configured source dir) and save the report."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1:
        print("Usage: python -m scorecard.score [source_dir]", file=sys.stderr)
        return 1
    command = ["analyze"]
    if args:
        command.extend(["--source", args[0]])
    return cli_main(command)


if __name__ == "__main__":
    sys.exit(main())

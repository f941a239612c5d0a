"""Unified CLI for quality-gates.

Chains analyzer -> report -> gates in a single pipeline.

Usage:
    python -m cli analyze [--source DIR] [--report PATH]
    python -m cli check [--report PATH] [--profile NAME] [--no-generate]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from gate.evaluator import QualityGateEvaluator
from scorecard.engine import CodeAnalyzer
from shared.config import QualityGatesConfig, load_config
from shared.errors import QualityGateError


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="quality-gates",
        description="Static code analysis report and CI quality gates",
    )
    parser.add_argument("--config", default=None, help="Path to config file")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- analyze ---
    sp_analyze = subparsers.add_parser("analyze", help="Analyze the codebase and save the report")
    sp_analyze.add_argument("--source", default="", help="Source directory to analyze")
    sp_analyze.add_argument("--report", default="", help="Where to write the JSON report")

    # --- check ---
    sp_check = subparsers.add_parser("check", help="Check the analysis report against gates")
    sp_check.add_argument("--report", default="", help="Path to the JSON report")
    sp_check.add_argument("--profile", default="", help="Named gate profile from config")
    sp_check.add_argument(
        "--no-generate",
        action="store_true",
        help="Fail instead of running the analyzer when the report is missing",
    )

    return parser


def _load(args: argparse.Namespace) -> QualityGatesConfig:
    config_path = Path(args.config) if args.config else None
    return load_config(config_path=config_path)


def _make_analyzer(config: QualityGatesConfig, source: str, report_path: str) -> CodeAnalyzer:
    analyzer_config = config.analyzer
    if source:
        analyzer_config = analyzer_config.model_copy(update={"source_dir": source})
    return CodeAnalyzer(config=analyzer_config, report_path=report_path)


def cmd_analyze(args: argparse.Namespace) -> int:
    """Run the analyzer over the source tree and write the report."""
    config = _load(args)
    report_path = args.report or config.report.path
    analyzer = _make_analyzer(config, args.source, report_path)
    analyzer.analyze_codebase()
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Evaluate quality gates. Exit 1 only when a critical gate fails."""
    config = _load(args)
    report_path = args.report or config.report.path

    producer = None
    if not args.no_generate:
        producer = _make_analyzer(config, "", report_path).analyze_codebase

    evaluator = QualityGateEvaluator(
        config.select_gates(args.profile or None),
        report_path=report_path,
        producer=producer,
    )
    gate_report = evaluator.run()
    return gate_report.exit_code


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "analyze": cmd_analyze,
        "check": cmd_check,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except (QualityGateError, OSError, ValueError) as e:
        label = "Quality gate check failed" if args.command == "check" else "Analysis failed"
        print(f"{label}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""Code analyzer: the report producer.

Walks a source tree, runs every enabled dimension scorer on each file,
computes the per-file overall score as the mean of its dimension scores,
prints a summary and persists the JSON analysis report consumed by the
quality gates.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from scorecard.dimensions.architecture import ArchitectureScorer
from scorecard.dimensions.correctness import CorrectnessScorer
from scorecard.dimensions.maintainability import MaintainabilityScorer
from scorecard.dimensions.performance import PerformanceScorer
from scorecard.dimensions.security import SecurityScorer
from scorecard.dimensions.testability import TestabilityScorer
from scorecard.summary import render_summary
from shared.config import DEFAULT_REPORT_PATH, AnalyzerConfig
from shared.models import AnalysisReport, Dimension, DimensionResult, FileAnalysis
from shared.report_io import save_report

Output = Callable[[str], None]


class CodeAnalyzer:
    """Scores source files along the configured quality dimensions.

    Args:
        config: Analyzer configuration (source dir, excludes, extensions,
            enabled dimensions). Defaults are used when omitted.
        report_path: Where analyze_codebase writes the JSON report.
    """

    def __init__(
        self,
        config: AnalyzerConfig | None = None,
        report_path: str | Path = DEFAULT_REPORT_PATH,
    ) -> None:
        self.config = config or AnalyzerConfig()
        self.source_dir = Path(self.config.source_dir)
        self.report_path = Path(report_path)
        self._scorers = self._load_scorers()

    def _load_scorers(self) -> dict[Dimension, Any]:
        """Load enabled dimension scorers, in report order."""
        available = [
            CorrectnessScorer(),
            SecurityScorer(),
            PerformanceScorer(),
            ArchitectureScorer(),
            MaintainabilityScorer(),
            TestabilityScorer(),
        ]
        return {s.dimension: s for s in available if self.config.is_enabled(s.dimension)}

    def _is_excluded(self, name: str) -> bool:
        return any(pattern in name for pattern in self.config.exclude)

    def find_source_files(self, directory: Path | None = None) -> list[Path]:
        """Recursively collect source files, skipping excluded directories.

        Unreadable directories are reported on stderr and skipped.
        """
        directory = directory or self.source_dir
        files: list[Path] = []

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            print(f"Could not read directory {directory}: {e}", file=sys.stderr)
            return files

        for entry in entries:
            full_path = Path(directory) / entry.name
            if entry.is_dir(follow_symlinks=False):
                if not self._is_excluded(entry.name):
                    files.extend(self.find_source_files(full_path))
            elif entry.is_file() and full_path.suffix in self.config.extensions:
                files.append(full_path)

        return files

    def analyze_code(self, code: str, file_path: str = "") -> FileAnalysis:
        """Score source text. Overall score is the mean of dimension scores."""
        results: list[DimensionResult] = [
            scorer.score(code, file_path) for scorer in self._scorers.values()
        ]
        overall = sum(r.score for r in results) / len(results) if results else 0.0
        return FileAnalysis(file_path=file_path, results=results, overall_score=overall)

    def analyze_file(self, file_path: str | Path) -> FileAnalysis:
        """Score a file from disk. Unreadable files get no results and 0."""
        path_str = str(file_path)
        try:
            code = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error analyzing file {path_str}: {e}", file=sys.stderr)
            return FileAnalysis(file_path=path_str, results=[], overall_score=0.0)
        return self.analyze_code(code, path_str)

    def analyze_files(self, file_paths: list[Path], out: Output = print) -> AnalysisReport:
        analyses = []
        for path in file_paths:
            out(f"Analyzing: {path}")
            analyses.append(self.analyze_file(path))
        return AnalysisReport(analyses)

    def analyze_codebase(self, out: Output = print) -> AnalysisReport:
        """Analyze the whole source tree, print the summary and save the report."""
        out("🔍 Starting comprehensive code analysis...\n")

        report = self.analyze_files(self.find_source_files(), out=out)

        out(render_summary(report))
        save_report(report, self.report_path)
        out(f"\n📄 Detailed report saved to: {self.report_path}")
        out("\n" + "=" * 50)
        out("Analysis complete! 🎉")
        return report

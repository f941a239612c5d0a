"""Quality gate evaluation engine.

Reads an analysis report, aggregates overall and per-dimension scores
across all files, and checks each configured gate in order.

Verdict logic:
  BLOCKED if:
    - ANY critical gate failed

  PASSED WITH WARNINGS if:
    - No critical gate failed
    - At least one non-critical gate failed

  PASSED if:
    - Every gate's resolved score is >= its threshold
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from shared.config import DEFAULT_REPORT_PATH
from shared.errors import MalformedReportError, ReportGenerationError, ReportNotFoundError
from shared.models import (
    AnalysisReport,
    GateOutcome,
    GateReport,
    QualityGate,
    Verdict,
)
from shared.report_io import load_report

from gate.render import format_gate_report

ReportProducer = Callable[[], AnalysisReport]
Output = Callable[[str], None]


@dataclass(frozen=True)
class Aggregates:
    """Scores aggregated over every file in a report."""

    overall: float
    dimensions: dict[str, float] = field(default_factory=dict)
    file_count: int = 0


def aggregate(report: AnalysisReport) -> Aggregates:
    """Compute the overall and per-dimension means of a report.

    A dimension is averaged only over the results that report it, so files
    that never scored a dimension do not pull its mean down.
    """
    if len(report) == 0:
        raise MalformedReportError("analysis report contains no file analyses")

    overall = sum(fa.overall_score for fa in report) / len(report)

    totals: dict[str, float] = {}
    counts: dict[str, int] = {}
    for fa in report:
        for result in fa.results:
            totals[result.dimension] = totals.get(result.dimension, 0.0) + result.score
            counts[result.dimension] = counts.get(result.dimension, 0) + 1

    dimensions = {dim: totals[dim] / counts[dim] for dim in totals}
    return Aggregates(overall=overall, dimensions=dimensions, file_count=len(report))


def decide_verdict(outcomes: Sequence[GateOutcome]) -> Verdict:
    """Reduce per-gate outcomes to the tri-state verdict."""
    if any(not o.passed and o.gate.critical for o in outcomes):
        return Verdict.BLOCKED
    if any(not o.passed for o in outcomes):
        return Verdict.PASSED_WITH_WARNINGS
    return Verdict.PASSED


class QualityGateEvaluator:
    """Checks an analysis report against an ordered list of quality gates.

    Args:
        gates: Gates to evaluate, in reporting order. Must not be empty.
        report_path: Location of the JSON analysis report.
        producer: Called once to generate the report when report_path does
            not exist. Without a producer a missing report is an error.
    """

    def __init__(
        self,
        gates: Sequence[QualityGate],
        report_path: str | Path = DEFAULT_REPORT_PATH,
        producer: ReportProducer | None = None,
    ) -> None:
        if not gates:
            raise ValueError("QualityGateEvaluator needs at least one gate")
        self.gates = list(gates)
        self.report_path = Path(report_path)
        self.producer = producer

    def load_report(self, out: Output = print) -> AnalysisReport:
        """Load the report, generating it first if it does not exist yet."""
        if self.report_path.exists():
            return load_report(self.report_path)

        if self.producer is None:
            raise ReportNotFoundError(f"No analysis report found at {self.report_path}")

        out("No analysis report found. Running analysis first...")
        try:
            report = self.producer()
        except Exception as e:
            raise ReportGenerationError(f"Report generation failed: {e}") from e

        if not isinstance(report, AnalysisReport):
            raise ReportGenerationError(
                f"Report producer returned {type(report).__name__}, expected AnalysisReport"
            )
        return report

    def check_gate(self, gate: QualityGate, aggregates: Aggregates) -> GateOutcome:
        """Resolve a gate's score and compare it to the threshold."""
        if gate.dimension:
            score = aggregates.dimensions.get(gate.dimension)
        else:
            score = aggregates.overall
        passed = score is not None and score >= gate.threshold
        return GateOutcome(gate=gate, score=score, passed=passed)

    def evaluate(self, report: AnalysisReport) -> GateReport:
        """Check every gate against the report. Pure: no I/O, no mutation."""
        aggregates = aggregate(report)
        outcomes = [self.check_gate(gate, aggregates) for gate in self.gates]
        return GateReport(
            verdict=decide_verdict(outcomes),
            outcomes=outcomes,
            overall_score=aggregates.overall,
            dimension_scores=dict(aggregates.dimensions),
            files_analyzed=aggregates.file_count,
        )

    def run(self, out: Output = print) -> GateReport:
        """Load the report, evaluate all gates, and print the results."""
        out("🚦 Running Quality Gates...\n")

        report = self.load_report(out=out)
        gate_report = self.evaluate(report)

        out(format_gate_report(gate_report))
        return gate_report

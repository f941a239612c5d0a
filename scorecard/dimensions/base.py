"""Shared finding/report types for dimension scorers.

Every scorer starts a file at 100 and subtracts a fixed penalty per
finding, floored at 0.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shared.models import Confidence, Dimension, DimensionResult

MAX_SCORE = 100.0


@dataclass
class Finding:
    """A single heuristic hit with its remediation and penalty."""

    issue: str
    recommendation: str
    penalty: float


@dataclass
class DimensionReport:
    """Findings collected for one dimension of one file."""

    findings: list[Finding] = field(default_factory=list)

    def add(self, finding: Finding | None) -> None:
        if finding is not None:
            self.findings.append(finding)

    def extend(self, findings: list[Finding]) -> None:
        self.findings.extend(findings)

    @property
    def score(self) -> float:
        total_penalty = sum(f.penalty for f in self.findings)
        return max(MAX_SCORE - total_penalty, 0.0)

    def to_result(self, dimension: Dimension, confidence: Confidence) -> DimensionResult:
        return DimensionResult(
            dimension=dimension.value,
            score=self.score,
            issues=[f.issue for f in self.findings],
            recommendations=[f.recommendation for f in self.findings],
            confidence=confidence,
        )

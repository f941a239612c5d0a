"""Shared data models for quality-gates.

Core Pydantic models used by the scorecard (report producer) and the gate
(quality gate evaluator). Report models serialize with the camelCase keys of
the on-disk JSON report.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, RootModel


# --- Enums ---


class Dimension(str, Enum):
    """Quality dimensions scored by the built-in analyzer."""

    FUNCTIONAL_CORRECTNESS = "Functional Correctness"
    SECURITY = "Security"
    PERFORMANCE = "Performance"
    ARCHITECTURE = "Architecture"
    MAINTAINABILITY = "Maintainability"
    TESTABILITY = "Testability"


class Confidence(str, Enum):
    """How much an analyzer trusts its own findings."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Verdict(str, Enum):
    """Tri-state outcome of evaluating all gates."""

    PASSED = "passed"
    PASSED_WITH_WARNINGS = "passed_with_warnings"
    BLOCKED = "blocked"


# --- Report Models ---


class DimensionResult(BaseModel):
    """Score for a single quality dimension of one file."""

    model_config = ConfigDict(use_enum_values=True)

    dimension: str
    score: float = Field(ge=0.0, le=100.0, strict=True)
    issues: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    confidence: Confidence = Confidence.MEDIUM


class FileAnalysis(BaseModel):
    """Analysis record for one source file."""

    model_config = ConfigDict(populate_by_name=True)

    file_path: str = Field(default="", alias="filePath")
    results: list[DimensionResult]
    overall_score: float = Field(alias="overallScore", ge=0.0, le=100.0, strict=True)


class AnalysisReport(RootModel[list[FileAnalysis]]):
    """Ordered sequence of per-file analysis records."""

    root: list[FileAnalysis] = Field(default_factory=list)

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> FileAnalysis:
        return self.root[index]


# --- Gate Models ---


class QualityGate(BaseModel):
    """A named threshold check against an aggregate score.

    Without a dimension the gate checks the overall aggregate score.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    threshold: float = Field(ge=0.0, le=100.0)
    dimension: str | None = None
    critical: bool = False


class GateOutcome(BaseModel):
    """Result of checking one gate."""

    gate: QualityGate
    score: float | None = None  # None when the dimension was never reported
    passed: bool


class GateReport(BaseModel):
    """Full result of a quality gate run."""

    verdict: Verdict
    outcomes: list[GateOutcome] = Field(default_factory=list)
    overall_score: float = 0.0
    dimension_scores: dict[str, float] = Field(default_factory=dict)
    files_analyzed: int = 0

    @property
    def should_proceed(self) -> bool:
        """Whether CI should continue. False only when blocked."""
        return self.verdict != Verdict.BLOCKED

    @property
    def exit_code(self) -> int:
        return 0 if self.should_proceed else 1

    @property
    def failed(self) -> list[GateOutcome]:
        return [o for o in self.outcomes if not o.passed]

"""Functional correctness dimension scorer.

Text heuristics for common logic slips in JavaScript/TypeScript sources:
loose equality, if-chains without else, unguarded property access and
async code without error handling.
"""

import re

from scorecard.dimensions.base import DimensionReport, Finding
from shared.models import Confidence, Dimension, DimensionResult

_IF_BLOCK = re.compile(r"if\s*\([^)]*\)\s*{[^}]*}")
_UNCOMMENTED_IF = re.compile(r"(?<!//).*if\s*\(")
_PROPERTY_ACCESS = re.compile(r"\w+\.\w+")


def detect_loose_equality(code: str) -> Finding | None:
    if "==" in code and "===" not in code:
        return Finding(
            issue="Uses loose equality (==) instead of strict equality (===)",
            recommendation="Replace == with === for type-safe comparisons",
            penalty=10,
        )
    return None


def detect_missing_else(code: str) -> Finding | None:
    """Flag files with several ifs when at least one if-block lacks an else."""
    blocks = _IF_BLOCK.findall(code)
    if not any("else" not in block for block in blocks):
        return None
    if len(_UNCOMMENTED_IF.findall(code)) > 3:
        return Finding(
            issue="Multiple if statements without else clauses may indicate missing error handling",
            recommendation="Consider adding else clauses or default error handling",
            penalty=5,
        )
    return None


def detect_unguarded_access(code: str) -> Finding | None:
    if "." in code and "?." not in code:
        if len(_PROPERTY_ACCESS.findall(code)) > 2:
            return Finding(
                issue="Property access without null checking detected",
                recommendation="Use optional chaining (?.) for safer property access",
                penalty=15,
            )
    return None


def detect_unhandled_async(code: str) -> Finding | None:
    if "async" in code and "try" not in code:
        return Finding(
            issue="Async functions without error handling",
            recommendation="Wrap async operations in try-catch blocks",
            penalty=20,
        )
    return None


class CorrectnessScorer:
    """Score functional correctness. Confidence is high once anything is found."""

    dimension = Dimension.FUNCTIONAL_CORRECTNESS

    def score(self, code: str, file_path: str = "") -> DimensionResult:
        report = DimensionReport()
        report.add(detect_loose_equality(code))
        report.add(detect_missing_else(code))
        report.add(detect_unguarded_access(code))
        report.add(detect_unhandled_async(code))

        confidence = Confidence.HIGH if report.findings else Confidence.MEDIUM
        return report.to_result(self.dimension, confidence)

"""Maintainability dimension scorer.

Measures whether code will be understandable and modifiable later:
a branch-count complexity estimate, comment density, naming quality
and function length. All text heuristics, no parsing.
"""

import re

from scorecard.dimensions.base import DimensionReport, Finding
from shared.models import Confidence, Dimension, DimensionResult

# --- Defaults ---

DEFAULT_COMPLEXITY_THRESHOLD = 15
DEFAULT_COMMENT_RATIO = 0.1
DEFAULT_MIN_LINES_FOR_COMMENTS = 50
DEFAULT_MAX_POOR_NAMES = 3
DEFAULT_FUNCTION_LENGTH_THRESHOLD = 30

_BRANCH_PATTERNS = [
    re.compile(r"if\s*\("),
    re.compile(r"else\s*if"),
    re.compile(r"while\s*\("),
    re.compile(r"for\s*\("),
    re.compile(r"case\s+"),
    re.compile(r"catch\s*\("),
]
_COMMENT = re.compile(r"/\*[\s\S]*?\*/|//.*$", re.MULTILINE)
_POOR_NAME = re.compile(r"\b[a-z]{1,2}\b|\btemp\b|\bdata\b|\binfo\b")
# A function body with at most one level of nested braces
_FUNCTION_BODY = re.compile(r"function[^{]*{(?:[^{}]*{[^{}]*})*[^{}]*}")


# --- Cyclomatic Complexity ---


def estimate_complexity(code: str) -> int:
    """1 + number of branch keywords in the file."""
    return 1 + sum(len(p.findall(code)) for p in _BRANCH_PATTERNS)


def detect_high_complexity(code: str) -> Finding | None:
    complexity = estimate_complexity(code)
    if complexity > DEFAULT_COMPLEXITY_THRESHOLD:
        return Finding(
            issue=f"High cyclomatic complexity ({complexity})",
            recommendation="Break down complex functions into smaller, focused functions",
            penalty=25,
        )
    return None


# --- Comments ---


def comment_ratio(code: str) -> tuple[float, int]:
    """Return (comment blocks per non-blank line, non-blank line count)."""
    comments = len(_COMMENT.findall(code))
    code_lines = sum(1 for line in code.split("\n") if line.strip())
    if code_lines == 0:
        return 0.0, 0
    return comments / code_lines, code_lines


def detect_low_comment_density(code: str) -> Finding | None:
    ratio, code_lines = comment_ratio(code)
    if ratio < DEFAULT_COMMENT_RATIO and code_lines > DEFAULT_MIN_LINES_FOR_COMMENTS:
        return Finding(
            issue="Low comment density for complex file",
            recommendation="Add comments explaining complex logic and business rules",
            penalty=15,
        )
    return None


# --- Naming ---


def detect_poor_naming(code: str) -> Finding | None:
    if len(_POOR_NAME.findall(code)) > DEFAULT_MAX_POOR_NAMES:
        return Finding(
            issue="Poor variable naming detected",
            recommendation="Use descriptive, meaningful variable names",
            penalty=10,
        )
    return None


# --- Function Length ---


def detect_long_functions(code: str) -> Finding | None:
    bodies = [m.group(0) for m in _FUNCTION_BODY.finditer(code)]
    long_count = sum(
        1 for body in bodies if len(body.split("\n")) > DEFAULT_FUNCTION_LENGTH_THRESHOLD
    )
    if long_count:
        return Finding(
            issue=f"{long_count} functions exceed {DEFAULT_FUNCTION_LENGTH_THRESHOLD} lines",
            recommendation="Break long functions into smaller, focused functions",
            penalty=20,
        )
    return None


class MaintainabilityScorer:
    """Score maintainability.

    Penalties: complexity > 15 -25, sparse comments -15,
    poor names -10, functions longer than 30 lines -20.
    """

    dimension = Dimension.MAINTAINABILITY

    def score(self, code: str, file_path: str = "") -> DimensionResult:
        report = DimensionReport()
        report.add(detect_high_complexity(code))
        report.add(detect_low_comment_density(code))
        report.add(detect_poor_naming(code))
        report.add(detect_long_functions(code))
        return report.to_result(self.dimension, Confidence.HIGH)

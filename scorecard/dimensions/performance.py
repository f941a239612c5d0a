"""Performance dimension scorer.

Flags leaky timers, nested loops, awaits inside loops, chained array
passes and unbounded queries in API modules.
"""

import re

from scorecard.dimensions.base import DimensionReport, Finding
from shared.models import Confidence, Dimension, DimensionResult

_NESTED_LOOP = re.compile(r"for\s*\([^}]*{[^}]*for\s*\(")


def detect_interval_leak(code: str) -> Finding | None:
    if "setInterval" in code and "clearInterval" not in code:
        return Finding(
            issue="setInterval without clearInterval may cause memory leaks",
            recommendation="Ensure intervals are cleared when components unmount",
            penalty=20,
        )
    return None


def detect_nested_loops(code: str) -> Finding | None:
    if _NESTED_LOOP.search(code):
        return Finding(
            issue="Nested loops detected - potential O(n²) complexity",
            recommendation="Consider optimizing with maps, sets, or single-pass algorithms",
            penalty=15,
        )
    return None


def detect_await_in_loop(code: str) -> Finding | None:
    if "await" in code and "for" in code:
        return Finding(
            issue="Potential N+1 query problem with await in loops",
            recommendation="Consider batching database operations or using Promise.all()",
            penalty=25,
        )
    return None


def detect_chained_array_ops(code: str) -> Finding | None:
    if ".map(" in code and ".filter(" in code:
        return Finding(
            issue="Chained array operations may be inefficient for large datasets",
            recommendation="Consider combining operations or using lazy evaluation",
            penalty=10,
        )
    return None


def detect_unpaginated_query(code: str, file_path: str) -> Finding | None:
    if "api" in file_path and "findMany" in code and "limit" not in code:
        return Finding(
            issue="Database query without pagination limits",
            recommendation="Implement pagination to prevent large data transfers",
            penalty=20,
        )
    return None


class PerformanceScorer:
    dimension = Dimension.PERFORMANCE

    def score(self, code: str, file_path: str = "") -> DimensionResult:
        report = DimensionReport()
        report.add(detect_interval_leak(code))
        report.add(detect_nested_loops(code))
        report.add(detect_await_in_loop(code))
        report.add(detect_chained_array_ops(code))
        report.add(detect_unpaginated_query(code, file_path))
        return report.to_result(self.dimension, Confidence.MEDIUM)

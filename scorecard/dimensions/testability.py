"""Testability dimension scorer.

Checks whether a source file has a sibling test file, avoids hard
clock/random dependencies and exports something tests can import.
Test files themselves are not penalized.
"""

import re
from pathlib import Path

from scorecard.dimensions.base import DimensionReport, Finding
from shared.models import Confidence, Dimension, DimensionResult

TEST_MARKERS = (".test.", ".spec.")
_EXPORT = re.compile(r"export\s+(?:function|const)\s+\w+")


def is_test_file(file_path: str) -> bool:
    return any(marker in file_path for marker in TEST_MARKERS)


def candidate_test_paths(file_path: str) -> list[Path]:
    """Sibling test files: foo.ts -> foo.test.ts, foo.spec.ts."""
    path = Path(file_path)
    if not path.suffix:
        return []
    return [path.with_name(f"{path.stem}{marker}{path.suffix[1:]}") for marker in TEST_MARKERS]


def detect_missing_test_file(file_path: str) -> Finding | None:
    candidates = candidate_test_paths(file_path)
    if candidates and not any(p.exists() for p in candidates):
        return Finding(
            issue="No corresponding test file found",
            recommendation="Create unit tests for this module",
            penalty=30,
        )
    return None


def detect_hard_dependencies(code: str) -> Finding | None:
    if "new Date()" in code or "Math.random()" in code:
        return Finding(
            issue="Hard dependencies on Date/Random make testing difficult",
            recommendation="Inject time/random dependencies for better testability",
            penalty=15,
        )
    return None


def detect_no_exports(code: str, file_path: str) -> Finding | None:
    if not _EXPORT.search(code) and "index" not in file_path:
        return Finding(
            issue="No exported functions found - difficult to test",
            recommendation="Export functions for individual testing",
            penalty=20,
        )
    return None


class TestabilityScorer:
    dimension = Dimension.TESTABILITY
    __test__ = False  # not a pytest class

    def score(self, code: str, file_path: str = "") -> DimensionResult:
        report = DimensionReport()
        if not is_test_file(file_path):
            report.add(detect_missing_test_file(file_path))
            report.add(detect_hard_dependencies(code))
            report.add(detect_no_exports(code, file_path))
        return report.to_result(self.dimension, Confidence.MEDIUM)

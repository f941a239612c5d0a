"""Architecture dimension scorer.

Rough structural signals: function sprawl without classes, import fan-in,
untyped TypeScript modules and magic numbers.
"""

import re

from scorecard.dimensions.base import DimensionReport, Finding
from shared.models import Confidence, Dimension, DimensionResult

DEFAULT_MAX_FUNCTIONS = 10
DEFAULT_MAX_IMPORTS = 15
DEFAULT_MAX_UNTYPED_FUNCTIONS = 5
DEFAULT_MAX_MAGIC_NUMBERS = 3

_FUNCTION = re.compile(r"function\s+\w+|const\s+\w+\s*=\s*\(")
_CLASS = re.compile(r"class\s+\w+")
_IMPORT = re.compile(r"import.*from")
_INTERFACE = re.compile(r"interface\s+\w+")
_TYPE_ALIAS = re.compile(r"type\s+\w+")
_MAGIC_NUMBER = re.compile(r"[^a-zA-Z_]\d{2,}")


def count_functions(code: str) -> int:
    return len(_FUNCTION.findall(code))


def detect_function_sprawl(code: str) -> Finding | None:
    if count_functions(code) > DEFAULT_MAX_FUNCTIONS and not _CLASS.search(code):
        return Finding(
            issue="File contains many functions - consider breaking into modules",
            recommendation="Split large files into focused modules following SRP",
            penalty=15,
        )
    return None


def detect_tight_coupling(code: str) -> Finding | None:
    if len(_IMPORT.findall(code)) > DEFAULT_MAX_IMPORTS:
        return Finding(
            issue="High number of imports suggests tight coupling",
            recommendation="Consider dependency injection or facade patterns",
            penalty=10,
        )
    return None


def detect_missing_types(code: str, file_path: str) -> Finding | None:
    """TypeScript modules (not declaration files) with logic but no types."""
    if ".ts" not in file_path or ".d.ts" in file_path:
        return None
    typed = len(_INTERFACE.findall(code)) + len(_TYPE_ALIAS.findall(code))
    if count_functions(code) > DEFAULT_MAX_UNTYPED_FUNCTIONS and typed == 0:
        return Finding(
            issue="Missing type definitions for complex module",
            recommendation="Define interfaces for better type safety and documentation",
            penalty=20,
        )
    return None


def detect_magic_numbers(code: str) -> Finding | None:
    if len(_MAGIC_NUMBER.findall(code)) > DEFAULT_MAX_MAGIC_NUMBERS:
        return Finding(
            issue="Magic numbers detected",
            recommendation="Extract numbers to named constants",
            penalty=10,
        )
    return None


class ArchitectureScorer:
    dimension = Dimension.ARCHITECTURE

    def score(self, code: str, file_path: str = "") -> DimensionResult:
        report = DimensionReport()
        report.add(detect_function_sprawl(code))
        report.add(detect_tight_coupling(code))
        report.add(detect_missing_types(code, file_path))
        report.add(detect_magic_numbers(code))
        return report.to_result(self.dimension, Confidence.MEDIUM)

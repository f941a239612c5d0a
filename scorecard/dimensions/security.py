"""Security dimension scorer.

Detects common web security problems using plain pattern matching,
no parsing, fully deterministic.
"""

import re

from scorecard.dimensions.base import DimensionReport, Finding
from shared.models import Confidence, Dimension, DimensionResult

# Hardcoded secret assignments; each pattern that matches costs a full penalty
_SECRET_PATTERNS = [
    re.compile(r"""password\s*[=:]\s*['"][^'"]+['"]""", re.IGNORECASE),
    re.compile(r"""api[_-]?key\s*[=:]\s*['"][^'"]+['"]""", re.IGNORECASE),
    re.compile(r"""secret\s*[=:]\s*['"][^'"]+['"]""", re.IGNORECASE),
    re.compile(r"""token\s*[=:]\s*['"][^'"]+['"]""", re.IGNORECASE),
]


def detect_sql_concatenation(code: str) -> Finding | None:
    if "SELECT" in code and "+" in code:
        return Finding(
            issue="Potential SQL injection through string concatenation",
            recommendation="Use parameterized queries or prepared statements",
            penalty=30,
        )
    return None


def detect_inner_html(code: str) -> Finding | None:
    if "innerHTML" in code or "dangerouslySetInnerHTML" in code:
        return Finding(
            issue="Potential XSS vulnerability through innerHTML usage",
            recommendation="Use textContent or properly sanitize HTML content",
            penalty=25,
        )
    return None


def detect_hardcoded_secrets(code: str) -> list[Finding]:
    """One finding per secret pattern that matches anywhere in the file."""
    findings: list[Finding] = []
    for pattern in _SECRET_PATTERNS:
        if pattern.search(code):
            findings.append(
                Finding(
                    issue="Hardcoded credentials detected",
                    recommendation="Move sensitive data to environment variables",
                    penalty=40,
                )
            )
    return findings


def detect_insecure_http(code: str) -> Finding | None:
    if "http://" in code and "localhost" not in code:
        return Finding(
            issue="Insecure HTTP protocol usage",
            recommendation="Use HTTPS for external communications",
            penalty=20,
        )
    return None


def detect_missing_validation(code: str, file_path: str) -> Finding | None:
    """Route and API modules should validate or sanitize their input."""
    if "routes" not in file_path and "api" not in file_path:
        return None
    if "validate" not in code and "sanitize" not in code:
        return Finding(
            issue="API endpoint may lack input validation",
            recommendation="Implement input validation and sanitization",
            penalty=25,
        )
    return None


class SecurityScorer:
    """Score code security via rule-based pattern matching.

    Scoring starts at 100; SQL concatenation -30, innerHTML -25, each
    hardcoded secret pattern -40, insecure HTTP -20, unvalidated API -25.
    """

    dimension = Dimension.SECURITY

    def score(self, code: str, file_path: str = "") -> DimensionResult:
        report = DimensionReport()
        report.add(detect_sql_concatenation(code))
        report.add(detect_inner_html(code))
        report.extend(detect_hardcoded_secrets(code))
        report.add(detect_insecure_http(code))
        report.add(detect_missing_validation(code, file_path))
        return report.to_result(self.dimension, Confidence.HIGH)

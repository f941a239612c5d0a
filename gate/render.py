"""Console formatting for quality gate results."""

from __future__ import annotations

from shared.models import GateOutcome, GateReport, Verdict

_BANNERS = {
    Verdict.BLOCKED: (
        "🚨 CRITICAL QUALITY GATES FAILED\n"
        "Build should be blocked until issues are resolved."
    ),
    Verdict.PASSED_WITH_WARNINGS: (
        "⚠️  Some quality gates failed, but no critical issues detected.\n"
        "Consider addressing these issues in the next iteration."
    ),
    Verdict.PASSED: "🎉 All quality gates passed!",
}


def _format_number(value: float) -> str:
    """Render integral thresholds without a trailing '.0'."""
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def format_outcome(outcome: GateOutcome) -> str:
    """One line per gate: '<status> <name>: <score>/<threshold>[ (CRITICAL)]'."""
    status = "✅ PASS" if outcome.passed else "❌ FAIL"
    score = "n/a" if outcome.score is None else f"{outcome.score:.1f}"
    critical = " (CRITICAL)" if outcome.gate.critical else ""
    threshold = _format_number(outcome.gate.threshold)
    return f"{status} {outcome.gate.name}: {score}/{threshold}{critical}"


def format_banner(verdict: Verdict) -> str:
    return _BANNERS[verdict]


def format_gate_report(report: GateReport) -> str:
    """Full text block: gate lines, separator, banner."""
    lines = [format_outcome(o) for o in report.outcomes]
    lines.append("")
    lines.append("=" * 40)
    lines.append(format_banner(report.verdict))
    return "\n".join(lines)

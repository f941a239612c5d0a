"""Human-readable summary of an analysis report.

Pure string views over an AnalysisReport: overall statistics, the most
common issues per dimension, files needing attention and the
recommendations that affect the most files.
"""

from __future__ import annotations

from collections import Counter

from shared.models import AnalysisReport

ATTENTION_THRESHOLD = 70.0
RECOMMENDATION_THRESHOLD = 80.0
TOP_ISSUES = 3
TOP_FILES = 5
TOP_RECOMMENDATIONS = 5


def view_statistics(report: AnalysisReport) -> str:
    lines = ["📈 OVERALL STATISTICS", f"Files analyzed: {len(report)}"]
    if len(report):
        avg = sum(fa.overall_score for fa in report) / len(report)
        lines.append(f"Average quality score: {avg:.1f}/100")
    return "\n".join(lines)


def view_top_issues(report: AnalysisReport) -> str:
    """First three distinct issues per dimension, with how often each occurred."""
    issues_by_dimension: dict[str, list[str]] = {}
    for fa in report:
        for result in fa.results:
            issues_by_dimension.setdefault(result.dimension, []).extend(result.issues)

    lines = ["🚨 TOP ISSUES BY DIMENSION"]
    for dimension, issues in issues_by_dimension.items():
        if not issues:
            continue
        counts = Counter(issues)
        lines.append("")
        lines.append(f"{dimension}:")
        # Counter preserves first-seen order
        for issue in list(counts)[:TOP_ISSUES]:
            lines.append(f"  • {issue} ({counts[issue]} files)")
    return "\n".join(lines)


def view_problem_files(report: AnalysisReport) -> str:
    """Lowest-scoring files under the attention threshold."""
    problem_files = sorted(
        (fa for fa in report if fa.overall_score < ATTENTION_THRESHOLD),
        key=lambda fa: fa.overall_score,
    )[:TOP_FILES]
    if not problem_files:
        return ""

    lines = ["⚠️  FILES NEEDING ATTENTION"]
    for fa in problem_files:
        lines.append("")
        lines.append(f"{fa.file_path} (Score: {fa.overall_score:.1f}/100)")
        for result in fa.results:
            if result.issues:
                lines.append(f"  {result.dimension}: {result.score:g}/100")
                for issue in result.issues[:2]:
                    lines.append(f"    • {issue}")
    return "\n".join(lines)


def view_recommendations(report: AnalysisReport) -> str:
    """Recommendations from weak results, ranked by how many times they appear."""
    counts: Counter[str] = Counter()
    for fa in report:
        for result in fa.results:
            if result.score < RECOMMENDATION_THRESHOLD:
                counts.update(result.recommendations)

    lines = ["💡 HIGH-PRIORITY RECOMMENDATIONS"]
    for recommendation, count in counts.most_common(TOP_RECOMMENDATIONS):
        lines.append(f"  • {recommendation} (affects {count} files)")
    return "\n".join(lines)


def render_summary(report: AnalysisReport) -> str:
    """Full summary block printed after an analysis run."""
    sections = [
        "\n📊 CODE ANALYSIS REPORT\n",
        "=" * 50,
        "",
        view_statistics(report),
        "",
        view_top_issues(report),
    ]
    problems = view_problem_files(report)
    if problems:
        sections.extend(["", problems])
    sections.extend(["", view_recommendations(report)])
    return "\n".join(sections)

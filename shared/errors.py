"""Exception hierarchy for quality-gates.

Every failure the CLI knows how to report derives from QualityGateError.
"""


class QualityGateError(Exception):
    """Base class for quality-gates failures."""


class ReportNotFoundError(QualityGateError):
    """No analysis report on disk and no producer to generate one."""


class MalformedReportError(QualityGateError):
    """The analysis report is not valid JSON or a record is missing fields."""


class ReportGenerationError(QualityGateError):
    """The report producer failed while generating a missing report."""

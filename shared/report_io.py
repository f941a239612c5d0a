"""Reading and writing the JSON analysis report.

The report is a top-level JSON array of per-file records:

    [{"filePath": "...", "overallScore": 82.5,
      "results": [{"dimension": "Security", "score": 90, ...}, ...]}, ...]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from shared.errors import MalformedReportError
from shared.models import AnalysisReport, FileAnalysis


def _describe(error: ValidationError) -> str:
    """Summarize the first validation error as 'field: message'."""
    first = error.errors()[0]
    loc = ".".join(str(part) for part in first["loc"]) or "record"
    return f"{loc}: {first['msg']}"


def parse_report(data: Any, source: str = "report") -> AnalysisReport:
    """Validate decoded JSON into an AnalysisReport.

    Fails on the first bad record, naming its index, so a missing
    overallScore or results never skews an average.
    """
    if not isinstance(data, list):
        raise MalformedReportError(
            f"{source}: expected a JSON array of file analyses, got {type(data).__name__}"
        )

    records: list[FileAnalysis] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise MalformedReportError(
                f"{source}: record {index} is {type(item).__name__}, expected an object"
            )
        try:
            records.append(FileAnalysis.model_validate(item))
        except ValidationError as e:
            raise MalformedReportError(f"{source}: record {index}: {_describe(e)}") from e

    return AnalysisReport(records)


def load_report(path: str | Path) -> AnalysisReport:
    """Load and validate the report at path.

    Raises FileNotFoundError when the file is absent and
    MalformedReportError when its content is not a valid report.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedReportError(f"{path}: not valid UTF-8 ({e.reason} at byte {e.start})") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedReportError(f"{path}: invalid JSON ({e.msg} at line {e.lineno})") from e
    return parse_report(data, source=str(path))


def save_report(report: AnalysisReport, path: str | Path) -> Path:
    """Write the report as indented JSON with camelCase keys."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json", by_alias=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return path

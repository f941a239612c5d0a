"""Tests for reading and writing the analysis report."""

import json

import pytest

from shared.errors import MalformedReportError
from shared.models import AnalysisReport, Confidence, DimensionResult, FileAnalysis
from shared.report_io import load_report, parse_report, save_report


def _sample_report() -> AnalysisReport:
    return AnalysisReport(
        [
            FileAnalysis(
                file_path="server/routes.ts",
                overall_score=72.5,
                results=[
                    DimensionResult(
                        dimension="Security",
                        score=75,
                        issues=["API endpoint may lack input validation"],
                        recommendations=["Implement input validation and sanitization"],
                        confidence=Confidence.HIGH,
                    )
                ],
            )
        ]
    )


class TestSaveReport:
    def test_writes_camel_case_keys(self, tmp_path):
        path = save_report(_sample_report(), tmp_path / "report.json")
        data = json.loads(path.read_text())
        assert data[0]["filePath"] == "server/routes.ts"
        assert data[0]["overallScore"] == 72.5
        assert data[0]["results"][0]["dimension"] == "Security"
        assert data[0]["results"][0]["confidence"] == "high"

    def test_creates_parent_directories(self, tmp_path):
        path = save_report(_sample_report(), tmp_path / "nested" / "dir" / "report.json")
        assert path.is_file()

    def test_load_returns_saved_report(self, tmp_path):
        path = save_report(_sample_report(), tmp_path / "report.json")
        assert load_report(path) == _sample_report()


class TestLoadReport:
    def test_minimal_records_accepted(self, tmp_path):
        path = tmp_path / "report.json"
        path.write_text(
            json.dumps(
                [
                    {"overallScore": 80, "results": [{"dimension": "Security", "score": 90}]},
                    {"overallScore": 70, "results": []},
                ]
            )
        )
        report = load_report(path)
        assert len(report) == 2
        assert report[0].results[0].score == 90.0
        assert report[1].file_path == ""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_report(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "report.json"
        path.write_text("[{not json")
        with pytest.raises(MalformedReportError, match="invalid JSON"):
            load_report(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "report.json"
        path.write_bytes(b"[\xff\xfe]")
        with pytest.raises(MalformedReportError, match="not valid UTF-8") as exc_info:
            load_report(path)
        assert str(path) in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestParseReport:
    def test_not_an_array(self):
        with pytest.raises(MalformedReportError, match="expected a JSON array"):
            parse_report({"overallScore": 80})

    def test_record_not_an_object(self):
        with pytest.raises(MalformedReportError, match="record 0"):
            parse_report([42])

    def test_missing_overall_score(self):
        with pytest.raises(MalformedReportError, match="overallScore"):
            parse_report([{"results": []}])

    def test_missing_results(self):
        with pytest.raises(MalformedReportError, match="results"):
            parse_report([{"overallScore": 80}])

    def test_non_numeric_score(self):
        with pytest.raises(MalformedReportError, match="record 0"):
            parse_report([{"overallScore": "high", "results": []}])

    def test_numeric_string_rejected(self):
        with pytest.raises(MalformedReportError):
            parse_report([{"overallScore": "80", "results": []}])

    def test_non_numeric_dimension_score(self):
        with pytest.raises(MalformedReportError, match="results"):
            parse_report([{"overallScore": 80, "results": [{"dimension": "Security"}]}])

    def test_out_of_range_score(self):
        with pytest.raises(MalformedReportError):
            parse_report([{"overallScore": 180, "results": []}])

    def test_error_chains_cause(self):
        with pytest.raises(MalformedReportError) as exc_info:
            parse_report([{"results": []}])
        assert exc_info.value.__cause__ is not None

    def test_empty_array_parses(self):
        assert len(parse_report([])) == 0

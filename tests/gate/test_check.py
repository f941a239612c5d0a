"""Tests for the `python -m gate.check` entry point."""

import pytest
import yaml

from shared.models import AnalysisReport, DimensionResult, FileAnalysis
from shared.report_io import save_report

from gate.check import main


@pytest.fixture()
def workdir(tmp_path, monkeypatch):
    """Isolated cwd and home so config discovery only sees files written here."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write_config(workdir, data: dict) -> None:
    (workdir / ".quality-gates.yaml").write_text(yaml.dump(data))


def _write_report(path, security: float) -> None:
    report = AnalysisReport(
        [
            FileAnalysis(
                file_path="a.ts",
                overall_score=90,
                results=[DimensionResult(dimension="Security", score=security)],
            )
        ]
    )
    save_report(report, path)


GATES = [{"name": "Security Score", "threshold": 80, "dimension": "Security", "critical": True}]


class TestCheckEntryPoint:
    def test_passing_report(self, workdir, capsys):
        _write_report(workdir / "report.json", security=95)
        _write_config(workdir, {"report": {"path": "report.json"}, "gates": GATES})

        assert main([]) == 0
        assert "All quality gates passed" in capsys.readouterr().out

    def test_blocked_report(self, workdir):
        _write_report(workdir / "report.json", security=40)
        _write_config(workdir, {"report": {"path": "report.json"}, "gates": GATES})

        assert main([]) == 1

    def test_empty_gate_list_exits_1(self, workdir, capsys):
        _write_config(workdir, {"gates": []})

        assert main([]) == 1
        assert "Quality gate check failed" in capsys.readouterr().err

    def test_malformed_yaml_exits_1(self, workdir, capsys):
        (workdir / ".quality-gates.yaml").write_text("gates: [unclosed\n")

        assert main([]) == 1
        assert "invalid YAML" in capsys.readouterr().err

    def test_undecodable_report_exits_1(self, workdir, capsys):
        (workdir / "report.json").write_bytes(b'[{"overallScore": 80, "results": []}\xff]')
        _write_config(workdir, {"report": {"path": "report.json"}})

        assert main(["--no-generate"]) == 1
        assert "report.json: not valid UTF-8" in capsys.readouterr().err

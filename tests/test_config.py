"""Tests for configuration management."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from shared.config import (
    QualityGatesConfig,
    _deep_merge,
    clear_config_cache,
    get_config,
    load_config,
)
from shared.models import Dimension


@pytest.fixture(autouse=True)
def _clear_cache():
    """Clear config cache before each test."""
    clear_config_cache()


def write_config(path: Path, data: dict) -> Path:
    """Helper to write a YAML config file."""
    config_file = path / ".quality-gates.yaml"
    config_file.write_text(yaml.dump(data))
    return config_file


# --- Defaults ---


class TestDefaults:
    def test_load_empty_returns_defaults(self):
        config = load_config(start_dir=Path("/nonexistent"))
        assert isinstance(config, QualityGatesConfig)

    def test_default_report_path(self):
        config = load_config(start_dir=Path("/nonexistent"))
        assert config.report.path == "code-analysis-report.json"

    def test_default_gates(self):
        gates = load_config(start_dir=Path("/nonexistent")).gates
        assert [g.name for g in gates] == [
            "Overall Code Quality",
            "Security Score",
            "Maintainability Score",
            "Performance Score",
            "Architecture Score",
        ]
        assert [g.threshold for g in gates] == [75, 80, 70, 75, 70]
        assert [g.critical for g in gates] == [True, True, False, False, False]
        assert gates[0].dimension is None
        assert gates[1].dimension == "Security"

    def test_default_analyzer(self):
        analyzer = load_config(start_dir=Path("/nonexistent")).analyzer
        assert "node_modules" in analyzer.exclude
        assert analyzer.extensions == [".ts", ".tsx", ".js", ".jsx"]
        assert all(analyzer.is_enabled(d) for d in Dimension)


# --- Loading ---


class TestLoading:
    def test_repo_config_overrides_defaults(self, tmp_path):
        write_config(tmp_path, {"report": {"path": "out/report.json"}})
        config = load_config(start_dir=tmp_path)
        assert config.report.path == "out/report.json"
        assert config.analyzer.source_dir == "."

    def test_custom_gates_replace_defaults(self, tmp_path):
        write_config(
            tmp_path,
            {"gates": [{"name": "Security", "threshold": 90, "dimension": "Security"}]},
        )
        gates = load_config(start_dir=tmp_path).gates
        assert len(gates) == 1
        assert gates[0].threshold == 90
        assert gates[0].critical is False

    def test_explicit_path(self, tmp_path):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text(yaml.dump({"analyzer": {"extensions": [".py"]}}))
        config = load_config(config_path=config_file)
        assert config.analyzer.extensions == [".py"]

    def test_explicit_missing_path_rejected(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="missing.yaml"):
            load_config(config_path=tmp_path / "missing.yaml")

    def test_malformed_yaml_rejected(self, tmp_path):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("gates: [unclosed\n")
        with pytest.raises(ValueError, match="custom.yaml: invalid YAML"):
            load_config(config_path=config_file)

    def test_empty_yaml_gives_defaults(self, tmp_path):
        (tmp_path / ".quality-gates.yaml").write_text("")
        config = load_config(start_dir=tmp_path)
        assert len(config.gates) == 5

    def test_disable_dimension(self, tmp_path):
        write_config(tmp_path, {"analyzer": {"dimensions": {"Testability": False}}})
        analyzer = load_config(start_dir=tmp_path).analyzer
        assert not analyzer.is_enabled(Dimension.TESTABILITY)
        assert analyzer.is_enabled(Dimension.SECURITY)

    def test_empty_gate_list_rejected(self, tmp_path):
        write_config(tmp_path, {"gates": []})
        with pytest.raises(ValidationError):
            load_config(start_dir=tmp_path)

    def test_threshold_out_of_range_rejected(self, tmp_path):
        write_config(tmp_path, {"gates": [{"name": "x", "threshold": 150}]})
        with pytest.raises(ValidationError):
            load_config(start_dir=tmp_path)

    def test_get_config_cached(self):
        assert get_config() is get_config()


# --- Profiles ---


class TestProfiles:
    def test_select_default(self):
        config = QualityGatesConfig()
        assert config.select_gates() == config.gates
        assert config.select_gates(None) == config.gates

    def test_select_named_profile(self, tmp_path):
        write_config(
            tmp_path,
            {
                "profiles": {
                    "staging": [
                        {"name": "Overall", "threshold": 60, "critical": True},
                    ]
                }
            },
        )
        config = load_config(start_dir=tmp_path)
        gates = config.select_gates("staging")
        assert [g.name for g in gates] == ["Overall"]
        assert len(config.gates) == 5

    def test_unknown_profile(self):
        with pytest.raises(ValueError, match="Unknown gate profile"):
            QualityGatesConfig().select_gates("prod")

    def test_empty_profile_rejected(self):
        with pytest.raises(ValidationError):
            QualityGatesConfig.model_validate({"profiles": {"ci": []}})


# --- Deep merge ---


class TestDeepMerge:
    def test_nested_override(self):
        base = {"a": {"b": 1, "c": 2}}
        assert _deep_merge(base, {"a": {"c": 3}}) == {"a": {"b": 1, "c": 3}}

    def test_lists_replaced(self):
        assert _deep_merge({"gates": [1, 2]}, {"gates": [3]}) == {"gates": [3]}

    def test_base_not_mutated(self):
        base = {"a": {"b": 1}}
        _deep_merge(base, {"a": {"b": 2}})
        assert base == {"a": {"b": 1}}

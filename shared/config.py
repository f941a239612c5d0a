"""Configuration management for quality-gates.

Loads YAML config with cascading precedence: repo root → user home → defaults.
"""

import functools
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

from shared.models import Dimension, QualityGate

# --- Config Schema ---

CONFIG_FILENAME = ".quality-gates.yaml"
DEFAULT_REPORT_PATH = "code-analysis-report.json"


class ReportConfig(BaseModel):
    """Where the analysis report lives."""

    path: str = DEFAULT_REPORT_PATH


class AnalyzerConfig(BaseModel):
    """Configuration for the report producer."""

    source_dir: str = "."
    exclude: list[str] = Field(
        default_factory=lambda: [
            "node_modules",
            ".git",
            "dist",
            "build",
            "uploads",
            "attached_assets",
        ]
    )
    extensions: list[str] = Field(default_factory=lambda: [".ts", ".tsx", ".js", ".jsx"])
    dimensions: dict[str, bool] = Field(
        default_factory=lambda: {dim.value: True for dim in Dimension}
    )

    def is_enabled(self, dimension: Dimension) -> bool:
        return self.dimensions.get(dimension.value, True)


def _default_gates() -> list[QualityGate]:
    return [
        QualityGate(name="Overall Code Quality", threshold=75, critical=True),
        QualityGate(
            name="Security Score",
            threshold=80,
            dimension=Dimension.SECURITY.value,
            critical=True,
        ),
        QualityGate(
            name="Maintainability Score",
            threshold=70,
            dimension=Dimension.MAINTAINABILITY.value,
            critical=False,
        ),
        QualityGate(
            name="Performance Score",
            threshold=75,
            dimension=Dimension.PERFORMANCE.value,
            critical=False,
        ),
        QualityGate(
            name="Architecture Score",
            threshold=70,
            dimension=Dimension.ARCHITECTURE.value,
            critical=False,
        ),
    ]


class QualityGatesConfig(BaseModel):
    """Top-level configuration for quality-gates."""

    report: ReportConfig = Field(default_factory=ReportConfig)
    analyzer: AnalyzerConfig = Field(default_factory=AnalyzerConfig)
    gates: list[QualityGate] = Field(default_factory=_default_gates)
    profiles: dict[str, list[QualityGate]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _gates_not_empty(self) -> "QualityGatesConfig":
        if not self.gates:
            raise ValueError("at least one quality gate must be configured")
        for name, gates in self.profiles.items():
            if not gates:
                raise ValueError(f"profile {name!r} has no gates")
        return self

    def select_gates(self, profile: str | None = None) -> list[QualityGate]:
        """Return the gate list for a named profile, or the default gates."""
        if not profile:
            return list(self.gates)
        if profile not in self.profiles:
            available = ", ".join(sorted(self.profiles)) or "(none)"
            raise ValueError(f"Unknown gate profile: {profile!r}. Available: {available}")
        return list(self.profiles[profile])


# --- Config Loading ---


def _find_config_files(start_dir: Path | None = None) -> list[Path]:
    """Find config files in cascading order: defaults (lowest) → user home → repo root (highest).

    Returns paths in precedence order (lowest first, highest last) so that
    later entries override earlier ones when merged.
    """
    candidates: list[Path] = []

    home_config = Path.home() / CONFIG_FILENAME
    if home_config.is_file():
        candidates.append(home_config)

    search_dir = start_dir or Path.cwd()
    repo_config = search_dir / CONFIG_FILENAME
    if repo_config.is_file() and repo_config not in candidates:
        candidates.append(repo_config)

    return candidates


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict."""
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML ({e})") from e
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge override into base. Override values take precedence.

    Lists (such as gate lists) are replaced, never concatenated.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    config_path: Path | None = None,
    start_dir: Path | None = None,
) -> QualityGatesConfig:
    """Load quality-gates configuration with cascading precedence.

    Priority (highest to lowest):
    1. Explicit config_path (if provided; must exist)
    2. Repo root / start_dir .quality-gates.yaml
    3. User home .quality-gates.yaml
    4. Built-in defaults

    Args:
        config_path: Explicit path to a config file (overrides discovery).
        start_dir: Directory to search for config files (defaults to cwd).

    Returns:
        Validated QualityGatesConfig.
    """
    merged: dict[str, Any] = {}

    if config_path is not None:
        if not config_path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        merged = _load_yaml(config_path)
    else:
        for path in _find_config_files(start_dir):
            merged = _deep_merge(merged, _load_yaml(path))

    return QualityGatesConfig.model_validate(merged)


@functools.lru_cache(maxsize=1)
def get_config() -> QualityGatesConfig:
    """Get the cached global configuration. Loaded once per session."""
    return load_config()


def clear_config_cache() -> None:
    """Clear the cached configuration. Useful for testing."""
    get_config.cache_clear()

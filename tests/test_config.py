"""
Tests for opportunity_ranker/config.py.

What we test
------------
- Committed config/default.toml loads and matches model defaults.
- local.toml beside the config file deep-merges over it.
- OPPORTUNITY_RANKER_* env vars override file values.
- Missing file -> FileNotFoundError.
- Invalid values (negative weight, bad level, floor > ceiling) -> ValidationError.
- BoostConfig.increment_for() maps kinds; unknown kinds earn 0.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from opportunity_ranker.config import (
    AppConfig,
    BoostConfig,
    LoggingConfig,
    ScoringConfig,
    TrendConfig,
    load_config,
)

_ENV_VARS = (
    "OPPORTUNITY_RANKER_LOG_LEVEL",
    "OPPORTUNITY_RANKER_SEED",
    "OPPORTUNITY_RANKER_OUTPUT_DIR",
    "OPPORTUNITY_RANKER_DEBUG",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def _write_toml(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# ── load_config ───────────────────────────────────────────────────────────────

class TestLoadConfig:
    def test_default_toml_matches_model_defaults(self):
        config = load_config()
        assert config.scoring == ScoringConfig()
        assert config.boost == BoostConfig()
        assert config.trend.seed is None
        assert config.logging.level == "INFO"

    def test_explicit_file(self, tmp_path):
        path = _write_toml(
            tmp_path / "cfg.toml",
            "[scoring]\nskills_weight = 60.0\n\n[trend]\nseed = 7\n",
        )
        config = load_config(path)
        assert config.scoring.skills_weight == 60.0
        assert config.scoring.department_weight == 20.0
        assert config.trend.seed == 7

    def test_project_debug_flag(self, tmp_path):
        path = _write_toml(tmp_path / "cfg.toml", "[project]\ndebug = true\n")
        assert load_config(path).debug is True

    def test_local_toml_merges(self, tmp_path):
        path = _write_toml(
            tmp_path / "cfg.toml", "[boost]\nview = 2.0\nbookmark = 5.0\n"
        )
        _write_toml(tmp_path / "local.toml", "[boost]\nview = 4.0\n")
        config = load_config(path)
        assert config.boost.view == 4.0
        assert config.boost.bookmark == 5.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path / "absent.toml")

    def test_env_overrides(self, tmp_path, monkeypatch):
        path = _write_toml(
            tmp_path / "cfg.toml", "[logging]\nlevel = \"INFO\"\n"
        )
        monkeypatch.setenv("OPPORTUNITY_RANKER_LOG_LEVEL", "debug")
        monkeypatch.setenv("OPPORTUNITY_RANKER_SEED", "99")
        monkeypatch.setenv("OPPORTUNITY_RANKER_OUTPUT_DIR", str(tmp_path / "out"))
        monkeypatch.setenv("OPPORTUNITY_RANKER_DEBUG", "yes")

        config = load_config(path)
        assert config.logging.level == "DEBUG"
        assert config.trend.seed == 99
        assert config.output.output_dir == str(tmp_path / "out")
        assert config.debug is True

    def test_invalid_value_in_file(self, tmp_path):
        path = _write_toml(tmp_path / "cfg.toml", "[scoring]\nskills_weight = -1.0\n")
        with pytest.raises(ValidationError):
            load_config(path)


# ── Section models ────────────────────────────────────────────────────────────

class TestSectionModels:
    def test_floor_above_ceiling_rejected(self):
        with pytest.raises(ValidationError):
            ScoringConfig(floor=90, ceiling=80)

    def test_bad_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_log_level_upper_cased(self):
        assert LoggingConfig(level="warning").level == "WARNING"

    def test_recency_divisor_positive(self):
        with pytest.raises(ValidationError):
            TrendConfig(recency_divisor=0)

    def test_app_config_frozen(self):
        with pytest.raises(ValidationError):
            AppConfig().debug = True  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kind, expected",
        [("view", 2.0), ("bookmark", 5.0), ("application", 0.0),
         ("similar_view", 1.0), ("share", 0.0)],
    )
    def test_increment_for(self, kind, expected):
        assert BoostConfig().increment_for(kind) == expected

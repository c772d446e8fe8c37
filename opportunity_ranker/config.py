"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local secrets and env overrides (gitignored)
  4. Environment variables        — ``OPPORTUNITY_RANKER_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The ranking functions accept the individual sections (``ScoringConfig``,
``BoostConfig``, ``TrendConfig``) and fall back to their defaults, so library
callers never need a config file. The CLI always goes through ``load_config``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class ScoringConfig(BaseModel):
    """Compatibility criterion weights and score bounds."""

    model_config = ConfigDict(frozen=True)

    skills_weight: float = 50.0
    department_weight: float = 20.0
    experience_weight: float = 15.0
    interest_weight: float = 15.0
    floor: int = 30           # returned for missing inputs; also the hard minimum
    ceiling: int = 100
    neutral_score: int = 50   # no applicable criteria

    @field_validator(
        "skills_weight", "department_weight", "experience_weight", "interest_weight"
    )
    @classmethod
    def validate_weight(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"Criterion weights must be non-negative, got {v}.")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> "ScoringConfig":
        if not 0 <= self.floor <= self.ceiling:
            raise ValueError(
                f"floor ({self.floor}) must be in [0, ceiling ({self.ceiling})]."
            )
        return self


class BoostConfig(BaseModel):
    """Interaction-history boost increments."""

    model_config = ConfigDict(frozen=True)

    view: float = 2.0
    bookmark: float = 5.0
    application: float = 0.0
    similar_view: float = 1.0
    category_interest: float = 3.0
    skill_interest: float = 1.0

    def increment_for(self, kind: str) -> float:
        """Direct boost for one interaction of ``kind``; unknown kinds earn 0."""
        return {
            "view":         self.view,
            "bookmark":     self.bookmark,
            "application":  self.application,
            "similar_view": self.similar_view,
        }.get(kind, 0.0)


class TrendConfig(BaseModel):
    """Simulated population-trend parameters."""

    model_config = ConfigDict(frozen=True)

    noise_scale: float = 5.0
    department_bonus: float = 3.0
    recency_divisor: float = 100.0
    recency_modulus: float = 5.0
    final_cap: float = 100.0
    seed: Optional[int] = None

    @field_validator("recency_divisor", "recency_modulus")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Recency parameters must be positive, got {v}.")
        return v

    @field_validator("noise_scale")
    @classmethod
    def validate_scale(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"noise_scale must be non-negative, got {v}.")
        return v


class OutputConfig(BaseModel):
    """Report output settings."""

    model_config = ConfigDict(frozen=True)

    output_dir: str = "data/outputs"
    default_top_n: int = 10

    @field_validator("default_top_n")
    @classmethod
    def validate_top_n(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"default_top_n must be >= 1, got {v}.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    scoring: ScoringConfig = ScoringConfig()
    boost: BoostConfig = BoostConfig()
    trend: TrendConfig = TrendConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the config file does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply OPPORTUNITY_RANKER_* environment variable overrides
    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply OPPORTUNITY_RANKER_* env vars to the raw config dict.

    Supported overrides:
      OPPORTUNITY_RANKER_LOG_LEVEL   → raw["logging"]["level"]
      OPPORTUNITY_RANKER_SEED        → raw["trend"]["seed"]
      OPPORTUNITY_RANKER_OUTPUT_DIR  → raw["output"]["output_dir"]
      OPPORTUNITY_RANKER_DEBUG       → raw["debug"]
    """
    if log_level := os.environ.get("OPPORTUNITY_RANKER_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if seed := os.environ.get("OPPORTUNITY_RANKER_SEED"):
        raw.setdefault("trend", {})["seed"] = int(seed)

    if output_dir := os.environ.get("OPPORTUNITY_RANKER_OUTPUT_DIR"):
        raw.setdefault("output", {})["output_dir"] = output_dir

    if debug := os.environ.get("OPPORTUNITY_RANKER_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        scoring=ScoringConfig(**raw.get("scoring", {})),
        boost=BoostConfig(**raw.get("boost", {})),
        trend=TrendConfig(**raw.get("trend", {})),
        output=OutputConfig(**raw.get("output", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )

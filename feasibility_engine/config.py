"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``FEASIBILITY_ENGINE_*`` prefix

Supported environment overrides:
  FEASIBILITY_ENGINE_QUESTION_BANK  → data.question_bank_file
  FEASIBILITY_ENGINE_OUTPUT_DIR     → data.output_dir
  FEASIBILITY_ENGINE_REPORT_FORMAT  → report.default_format
  FEASIBILITY_ENGINE_LOG_LEVEL      → logging.level
  FEASIBILITY_ENGINE_DEBUG          → debug

Entry point: ``load_config(config_path=None) -> AppConfig``

Relative paths in config resolve against the project root
(``resolve_path``); relative report paths given to the CLI resolve under
``data.output_dir`` (``resolve_output_path``).

Domain weights, pass thresholds and guidance text are NOT configuration:
they live in ``feasibility_engine.taxonomy`` as module constants.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class DataConfig(BaseModel):
    """Filesystem paths for the question bank and report output."""

    model_config = ConfigDict(frozen=True)

    question_bank_file: str = "config/questions/assessment_questions.json"
    output_dir: str = "data/outputs"


class ReportConfig(BaseModel):
    """CLI report rendering preferences."""

    model_config = ConfigDict(frozen=True)

    default_format: str = "text"
    max_guidance_items: int = 0   # 0 → show every item

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        valid = {"text", "json"}
        if v.lower() not in valid:
            raise ValueError(f"default_format must be one of {sorted(valid)}, got '{v}'.")
        return v.lower()

    @field_validator("max_guidance_items")
    @classmethod
    def validate_max_items(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"max_guidance_items must be >= 0, got {v}.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: Optional[str] = None
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

    Constructed by ``load_config()`` which merges TOML + .env + env vars.
    """

    model_config = ConfigDict(frozen=True)

    data: DataConfig = DataConfig()
    report: ReportConfig = ReportConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

DEFAULT_CONFIG_FILE = Path("config") / "default.toml"
LOCAL_CONFIG_NAME = "local.toml"

# env var → (section, key) in the raw TOML dict
_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "FEASIBILITY_ENGINE_QUESTION_BANK":  ("data", "question_bank_file"),
    "FEASIBILITY_ENGINE_OUTPUT_DIR":     ("data", "output_dir"),
    "FEASIBILITY_ENGINE_REPORT_FORMAT":  ("report", "default_format"),
    "FEASIBILITY_ENGINE_LOG_LEVEL":      ("logging", "level"),
}
_DEBUG_ENV_VAR = "FEASIBILITY_ENGINE_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _find_project_root() -> Path:
    """Nearest ancestor of this package that holds ``config/default.toml``.

    Falls back to the directory above the package (the source checkout).
    """
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / DEFAULT_CONFIG_FILE).is_file():
            return candidate
    return here.parent


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``. A ``local.toml`` beside
            it is merged on top when present.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the config file does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()
    load_dotenv(dotenv_path=root / ".env", override=False)

    config_path = Path(config_path) if config_path else root / DEFAULT_CONFIG_FILE
    if not config_path.is_file():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            f"Create {DEFAULT_CONFIG_FILE} or pass --config explicitly."
        )

    raw = _read_toml(config_path)
    local_path = config_path.with_name(LOCAL_CONFIG_NAME)
    if local_path.is_file() and local_path != config_path:
        raw = _deep_merge(raw, _read_toml(local_path))

    return _build_app_config(_apply_env_overrides(raw))


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` merged in, recursing into sub-tables."""
    merged = dict(base)
    for key, val in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(val, dict):
            merged[key] = _deep_merge(current, val)
        else:
            merged[key] = val
    return merged


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Overlay ``FEASIBILITY_ENGINE_*`` environment variables onto ``raw``.

    Empty variables are ignored. ``FEASIBILITY_ENGINE_DEBUG`` accepts
    1/true/yes/on (any case) as true; any other value means false.
    """
    overrides: dict[str, Any] = {}
    for env_var, (section, key) in _ENV_OVERRIDES.items():
        if value := os.environ.get(env_var):
            overrides.setdefault(section, {})[key] = value

    if debug := os.environ.get(_DEBUG_ENV_VAR):
        overrides["debug"] = debug.strip().lower() in _TRUTHY

    return _deep_merge(raw, overrides)


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map the merged TOML dict onto ``AppConfig``.

    ``[project] debug`` is honoured unless a top-level ``debug`` (from the
    environment) overrides it.
    """
    project = raw.get("project", {})
    return AppConfig(
        data=DataConfig(**raw.get("data", {})),
        report=ReportConfig(**raw.get("report", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )


def resolve_path(path_str: str) -> Path:
    """Resolve a config-relative path against the project root when not absolute."""
    path = Path(path_str)
    if path.is_absolute():
        return path
    return _find_project_root() / path


def resolve_output_path(config: AppConfig, path_str: str) -> Path:
    """Place a relative report path under ``data.output_dir``; absolute paths pass through."""
    path = Path(path_str)
    if path.is_absolute():
        return path
    return resolve_path(config.data.output_dir) / path

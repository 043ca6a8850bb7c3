"""Hydrator configuration loader.

Priority (high → low):
  1. CLI flags           (handled at call site — not in this module)
  2. Environment variables  (HYDRATOR_ROOT, HYDRATOR_LOG_LEVEL)
  3. Per-project hydrator.yaml  (in the working directory)
  4. Hardcoded defaults

All YAML reads use yaml.safe_load() — never yaml.load().
"""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_PROJECT_CONFIG_NAME: str = "hydrator.yaml"

_KNOWN_SECTIONS: frozenset[str] = frozenset(["output", "logging"])

_LOG_LEVELS: frozenset[str] = frozenset(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(ValueError):
    """Raised when a config file contains an invalid value."""


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass
class OutputCfg:
    """Output location (hydrator.yaml: output:)."""

    root: str = "hydrated"


@dataclass
class LoggingCfg:
    """Log verbosity (hydrator.yaml: logging:)."""

    level: str = "WARNING"


@dataclass
class HydratorConfig:
    """Root configuration object, built by load_config()."""

    output: OutputCfg = field(default_factory=OutputCfg)
    logging: LoggingCfg = field(default_factory=LoggingCfg)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def validate_log_level(level: str) -> str:
    """Return *level* upper-cased, or raise ConfigError if it is unknown."""
    normalized = str(level).upper()
    if normalized not in _LOG_LEVELS:
        raise ConfigError(
            f"Unknown log level '{level}'.\n"
            f"  Use one of: {', '.join(sorted(_LOG_LEVELS))}"
        )
    return normalized


def _warn_unknown_keys(data: dict[str, Any], source: Path) -> None:
    """Emit a UserWarning for unrecognised top-level keys."""
    for key in data:
        if key not in _KNOWN_SECTIONS:
            warnings.warn(
                f"Unknown config key '{key}' in '{source}' — ignored.",
                UserWarning,
                stacklevel=4,
            )


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file '{path}' is not valid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file '{path}' must contain a mapping at the top level.")
    return raw


# ---------------------------------------------------------------------------
# Build
# ---------------------------------------------------------------------------


def _cfg_from_dict(data: dict[str, Any]) -> HydratorConfig:
    cfg = HydratorConfig()

    if "output" in data:
        o = data["output"] or {}
        cfg.output = OutputCfg(root=str(o.get("root", cfg.output.root)))

    if "logging" in data:
        lg = data["logging"] or {}
        cfg.logging = LoggingCfg(level=validate_log_level(lg.get("level", cfg.logging.level)))

    return cfg


def _apply_env_overrides(cfg: HydratorConfig) -> HydratorConfig:
    """Apply HYDRATOR_* environment variable overrides (layer 2)."""
    if root := os.environ.get("HYDRATOR_ROOT"):
        cfg.output.root = root
    if level := os.environ.get("HYDRATOR_LOG_LEVEL"):
        cfg.logging.level = validate_log_level(level)
    return cfg


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(project_dir: Path | None = None) -> HydratorConfig:
    """Load and return a merged *HydratorConfig*.

    Args:
        project_dir: Directory to search for *hydrator.yaml*. Defaults to CWD.

    Raises:
        ConfigError: If the config file is malformed or holds an unknown
            log level.
    """
    search_dir = project_dir if project_dir is not None else Path.cwd()

    data: dict[str, Any] = {}
    project_cfg_path = search_dir / _PROJECT_CONFIG_NAME
    if project_cfg_path.exists():
        data = _read_yaml(project_cfg_path)
        _warn_unknown_keys(data, project_cfg_path)

    cfg = _cfg_from_dict(data)
    return _apply_env_overrides(cfg)

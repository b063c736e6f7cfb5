"""Engine configuration: YAML file, environment overrides, validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .domain.readiness import DEFAULT_MIN_EXPORT_SCORE

DEFAULT_CONFIG_PATH = "config/config.yaml"
KNOWN_KEYS = {"min_export_score", "cache_enabled", "cache_ttl_seconds", "cache_max_entries", "verbose"}


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigError:
    """A single configuration issue."""
    field: str
    message: str
    severity: Severity


@dataclass
class EngineConfig:
    min_export_score: int = DEFAULT_MIN_EXPORT_SCORE
    cache_enabled: bool = True
    cache_ttl_seconds: int = 300
    cache_max_entries: int = 1000
    verbose: bool = False


def validate_config(raw_config: Dict[str, Any]) -> List[ConfigError]:
    """Validate raw configuration and return a list of issues.

    Args:
        raw_config: Raw config dict from YAML (after env overrides)

    Returns:
        List of ConfigError (empty = valid)
    """
    errors: List[ConfigError] = []

    # --- Minimum export score ---
    min_score = raw_config.get("min_export_score", DEFAULT_MIN_EXPORT_SCORE)
    if isinstance(min_score, bool) or not isinstance(min_score, int) or not 0 <= min_score <= 100:
        errors.append(ConfigError(
            field="min_export_score",
            message=f"min_export_score must be an integer between 0 and 100, got {min_score!r}",
            severity=Severity.ERROR,
        ))

    # --- Cache ---
    cache_enabled = raw_config.get("cache_enabled", True)
    if not isinstance(cache_enabled, bool):
        errors.append(ConfigError(
            field="cache_enabled",
            message=f"cache_enabled must be true or false, got {cache_enabled!r}",
            severity=Severity.ERROR,
        ))

    ttl = raw_config.get("cache_ttl_seconds", 300)
    if isinstance(ttl, bool) or not isinstance(ttl, int) or ttl <= 0:
        errors.append(ConfigError(
            field="cache_ttl_seconds",
            message=f"cache_ttl_seconds must be a positive integer, got {ttl!r}",
            severity=Severity.ERROR,
        ))

    max_entries = raw_config.get("cache_max_entries", 1000)
    if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries <= 0:
        errors.append(ConfigError(
            field="cache_max_entries",
            message=f"cache_max_entries must be a positive integer, got {max_entries!r}",
            severity=Severity.ERROR,
        ))

    verbose = raw_config.get("verbose", False)
    if not isinstance(verbose, bool):
        errors.append(ConfigError(
            field="verbose",
            message=f"verbose must be true or false, got {verbose!r}",
            severity=Severity.ERROR,
        ))

    for key in sorted(set(raw_config) - KNOWN_KEYS):
        errors.append(ConfigError(
            field=key,
            message=f"Unknown config key '{key}' is ignored",
            severity=Severity.WARNING,
        ))

    return errors


def has_errors(issues: List[ConfigError]) -> bool:
    """Return True if any issue is ERROR-level."""
    return any(e.severity == Severity.ERROR for e in issues)


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> EngineConfig:
    """Load engine configuration from YAML, then apply env overrides.

    A missing file yields defaults.  Raises ValueError when validation
    reports any ERROR-level issue.
    """
    path = Path(config_path)
    data: Dict[str, Any] = {}
    if path.exists():
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")

    data = {**data, **_env_overrides()}

    issues = validate_config(data)
    if has_errors(issues):
        raise ValueError(
            "; ".join(f"{e.field}: {e.message}" for e in issues if e.severity == Severity.ERROR)
        )

    return EngineConfig(
        min_export_score=data.get("min_export_score", DEFAULT_MIN_EXPORT_SCORE),
        cache_enabled=data.get("cache_enabled", True),
        cache_ttl_seconds=data.get("cache_ttl_seconds", 300),
        cache_max_entries=data.get("cache_max_entries", 1000),
        verbose=data.get("verbose", False),
    )


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    min_score = os.getenv("RESUME_ATS_MIN_EXPORT_SCORE")
    if min_score is not None:
        overrides["min_export_score"] = _parse_int(min_score)
    cache_enabled = os.getenv("RESUME_ATS_CACHE_ENABLED")
    if cache_enabled is not None:
        overrides["cache_enabled"] = _parse_bool(cache_enabled)
    ttl = os.getenv("RESUME_ATS_CACHE_TTL_SECONDS")
    if ttl is not None:
        overrides["cache_ttl_seconds"] = _parse_int(ttl)
    max_entries = os.getenv("RESUME_ATS_CACHE_MAX_ENTRIES")
    if max_entries is not None:
        overrides["cache_max_entries"] = _parse_int(max_entries)
    return overrides


def _parse_int(value: str) -> Any:
    try:
        return int(value.strip())
    except ValueError:
        return value


def _parse_bool(value: str) -> Any:
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return value

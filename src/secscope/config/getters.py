"""Configuration getter functions."""

import os
from pathlib import Path
from typing import Any

from secscope.modules.payloads.indicators import DEFAULT_THRESHOLDS

from .env_loader import load_global_config, load_project_config

DEFAULT_AUTHORIZED_BY = "Security Analyst"
TRUTHY = {"1", "true", "yes", "on"}


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Project .env file
    3. Global config file
    4. Default value
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    project_config = load_project_config(project_dir)
    if key in project_config:
        return project_config[key]

    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    return default


def get_authorized_by(project_dir: Path | None = None) -> str:
    """Name recorded as the report author (default: Security Analyst)."""
    return get_config("SECSCOPE_AUTHORIZED_BY", project_dir, default=DEFAULT_AUTHORIZED_BY)


def is_verbose(project_dir: Path | None = None) -> bool:
    value = get_config("SECSCOPE_VERBOSE", project_dir, default="false")
    return str(value).strip().lower() in TRUTHY


def threshold_env_key(payload_type: str) -> str:
    """``sql-injection`` -> ``SECSCOPE_THRESHOLD_SQL_INJECTION``."""
    return "SECSCOPE_THRESHOLD_" + payload_type.upper().replace("-", "_")


def _parse_threshold(payload_type: str, value: Any) -> float:
    try:
        threshold = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Threshold for {payload_type} must be a number, got {value!r}") from exc
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Threshold for {payload_type} must be between 0 and 1, got {threshold}")
    return threshold


def get_classifier_thresholds(project_dir: Path | None = None) -> dict[str, float]:
    """
    Success thresholds per payload type.

    The global config may carry ``classifier: {thresholds: {xss: 0.5}}``;
    ``SECSCOPE_THRESHOLD_<TYPE>`` overrides it.
    """
    thresholds = dict(DEFAULT_THRESHOLDS)

    section = load_global_config().get("classifier") or {}
    for payload_type, value in (section.get("thresholds") or {}).items():
        thresholds[payload_type] = _parse_threshold(payload_type, value)

    for payload_type in DEFAULT_THRESHOLDS:
        key = threshold_env_key(payload_type)
        value = os.environ.get(key) or load_project_config(project_dir).get(key)
        if value:
            thresholds[payload_type] = _parse_threshold(payload_type, value)

    return thresholds

"""Where a SecScope project keeps its database and settings.

A project is marked by ``.secscope`` in its root. Normally the marker is the
storage directory itself. When ``SECSCOPE_DATA_DIR`` is set at init time the
marker becomes a one-line file pointing into that data root instead.
"""

import hashlib
import logging
import os
import re
from pathlib import Path

import yaml

from .env_loader import global_config_dir, is_global_config_dir

logger = logging.getLogger(__name__)

MARKER_NAME = ".secscope"
DB_FILENAME = "secscope.db"
ENV_FILENAME = ".env"

ENV_TEMPLATE = """# SecScope project settings
# Remove the leading '#' to enable a setting.

# Author recorded on generated reports
# SECSCOPE_AUTHORIZED_BY=Security Analyst

# Debug logging (true/false)
# SECSCOPE_VERBOSE=false

# Classifier success thresholds, 0-1; a matched payload succeeds when the draw exceeds it
# SECSCOPE_THRESHOLD_SQL_INJECTION=0.7
# SECSCOPE_THRESHOLD_XSS=0.6
# SECSCOPE_THRESHOLD_COMMAND_INJECTION=0.8
# SECSCOPE_THRESHOLD_PATH_TRAVERSAL=0.7
# SECSCOPE_THRESHOLD_LDAP_INJECTION=0.6
# SECSCOPE_THRESHOLD_GENERIC=0.5
"""


def _data_dir_name(project_dir: Path) -> str:
    """``/work/My App`` -> ``My-App-1a2b3c4d``; the hash keeps same-named projects apart."""
    name = re.sub(r"[^A-Za-z0-9_-]+", "-", project_dir.name).strip("-") or "project"
    suffix = hashlib.sha1(str(project_dir).encode()).hexdigest()[:8]
    return f"{name}-{suffix}"


def _redirect_target(marker: Path) -> Path | None:
    try:
        content = marker.read_text().strip()
    except (OSError, UnicodeDecodeError):
        logger.warning("Unreadable project marker %s", marker, exc_info=True)
        return None
    return Path(content) if content else None


def get_project_storage_dir(project_dir: Path | None) -> Path | None:
    """Return the directory holding the project's database and ``.env``."""
    if project_dir is None:
        return None

    marker = project_dir / MARKER_NAME
    if marker.is_file():
        return _redirect_target(marker)
    if marker.is_dir():
        # ~/.secscope is global config, not a project, unless it holds a database
        if is_global_config_dir(marker) and not (marker / DB_FILENAME).exists():
            return None
        return marker

    data_root = os.environ.get("SECSCOPE_DATA_DIR")
    return Path(data_root) / _data_dir_name(project_dir) if data_root else marker


def ensure_project_storage_dir(project_dir: Path) -> Path:
    """Create the storage directory (and redirect marker, if any) for ``project_dir``."""
    marker = project_dir / MARKER_NAME
    if marker.is_file() and _redirect_target(marker) is None:
        raise ValueError(f"Project marker {marker} does not name a storage directory.")

    storage = get_project_storage_dir(project_dir)
    if storage is None:
        raise ValueError(f"Cannot resolve a storage directory for {project_dir}.")

    storage.mkdir(parents=True, exist_ok=True)
    if storage != marker and not marker.exists():
        marker.write_text(str(storage))
    return storage


def _storage_file(project_dir: Path | None, filename: str) -> Path | None:
    storage = get_project_storage_dir(project_dir)
    return storage / filename if storage is not None else None


def get_project_db_path(project_dir: Path | None) -> Path | None:
    return _storage_file(project_dir, DB_FILENAME)


def get_project_env_path(project_dir: Path | None) -> Path | None:
    return _storage_file(project_dir, ENV_FILENAME)


def create_project_config_template(project_dir: Path) -> Path:
    """Write the commented ``.env`` template unless one already exists."""
    env_path = ensure_project_storage_dir(project_dir) / ENV_FILENAME
    if not env_path.exists():
        env_path.write_text(ENV_TEMPLATE)
    return env_path


def create_global_config() -> Path:
    """Write ``~/.secscope/config.yml`` with default settings unless present."""
    from secscope.modules.payloads.indicators import DEFAULT_THRESHOLDS

    config_path = global_config_dir() / "config.yml"
    if config_path.exists():
        return config_path

    config_path.parent.mkdir(parents=True, exist_ok=True)
    defaults = {
        "SECSCOPE_AUTHORIZED_BY": "Security Analyst",
        "classifier": {"thresholds": dict(DEFAULT_THRESHOLDS)},
    }
    config_path.write_text(yaml.safe_dump(defaults, default_flow_style=False, sort_keys=False))
    return config_path

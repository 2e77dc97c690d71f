"""Reading the global YAML config and project ``.env`` files."""

from pathlib import Path
from typing import Any

import yaml

GLOBAL_CONFIG_DIR_NAME = ".secscope"


def global_config_dir() -> Path:
    return Path.home() / GLOBAL_CONFIG_DIR_NAME


def is_global_config_dir(path: Path) -> bool:
    """True when ``path`` is ``~/.secscope``, which is never a project marker."""
    try:
        return path.resolve() == global_config_dir().resolve()
    except FileNotFoundError:
        return path == global_config_dir()


def load_env_file(env_path: Path) -> dict[str, str]:
    """Parse ``KEY=value`` lines; blank lines and ``#`` comments are skipped."""
    if not env_path.exists():
        return {}

    values: dict[str, str] = {}
    for raw in env_path.read_text().splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if sep:
            values[key.strip()] = value.strip().strip("\"'")
    return values


def load_global_config() -> dict[str, Any]:
    """Return ``~/.secscope/config.yml`` as a dict; a missing file is empty."""
    config_path = global_config_dir() / "config.yml"
    if not config_path.exists():
        return {}

    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must be a YAML mapping")
    return data


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Return the project's ``.env`` settings, locating the project from cwd if needed."""
    from secscope.config.project_setup import get_project_env_path

    if project_dir is None:
        from secscope.cli_commands.shared import get_project_dir

        project_dir = get_project_dir()

    env_path = get_project_env_path(project_dir)
    return load_env_file(env_path) if env_path is not None else {}

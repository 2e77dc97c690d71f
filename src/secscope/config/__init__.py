"""
Configuration management for SecScope.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Project .env file (.secscope/.env)
3. Global config file (~/.secscope/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    is_global_config_dir,
    load_env_file,
    load_global_config,
    load_project_config,
)
from .getters import (
    DEFAULT_AUTHORIZED_BY,
    get_authorized_by,
    get_classifier_thresholds,
    get_config,
    is_verbose,
)
from .project_setup import (
    DB_FILENAME,
    MARKER_NAME,
    create_global_config,
    create_project_config_template,
    ensure_project_storage_dir,
    get_project_db_path,
    get_project_env_path,
    get_project_storage_dir,
)

__all__ = [
    # env_loader
    "is_global_config_dir",
    "load_env_file",
    "load_global_config",
    "load_project_config",
    # getters
    "DEFAULT_AUTHORIZED_BY",
    "get_authorized_by",
    "get_classifier_thresholds",
    "get_config",
    "is_verbose",
    # project_setup
    "DB_FILENAME",
    "MARKER_NAME",
    "create_global_config",
    "create_project_config_template",
    "ensure_project_storage_dir",
    "get_project_db_path",
    "get_project_env_path",
    "get_project_storage_dir",
]

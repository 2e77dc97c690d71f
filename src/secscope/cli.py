"""SecScope CLI - vulnerability report engine and payload test bench."""

from secscope.api.importer import import_scan, load_scan_file
from secscope.config import (
    DB_FILENAME,
    MARKER_NAME,
    create_global_config,
    create_project_config_template,
    ensure_project_storage_dir,
    get_project_db_path,
    get_project_env_path,
    load_global_config,
    load_project_config,
)
from secscope.context import AppContext
from secscope.db.init import init_db

from .cli_commands import (  # noqa: F401
    config_command,
    payload_command,
    project_init,
    report_command,
    scan_command,
)
from .cli_commands.shared import app, console, get_project_dir, require_project

__all__ = [
    "AppContext",
    "DB_FILENAME",
    "MARKER_NAME",
    "app",
    "console",
    "create_global_config",
    "create_project_config_template",
    "ensure_project_storage_dir",
    "get_project_db_path",
    "get_project_dir",
    "get_project_env_path",
    "import_scan",
    "init_db",
    "load_global_config",
    "load_project_config",
    "load_scan_file",
    "main",
    "require_project",
]


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

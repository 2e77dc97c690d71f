"""``secscope init`` and ``secscope version``."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as installed_version
from pathlib import Path

import typer
from rich.panel import Panel

from .deps import cli_module
from .shared import app, console


@app.command()
def version() -> None:
    """Show the installed SecScope version."""
    try:
        number = installed_version("secscope")
    except PackageNotFoundError:
        number = "0.0.0+unknown"
    console.print(f"SecScope {number}")


@app.command()
def init() -> None:
    """Create SecScope storage for the current directory."""
    cli = cli_module()
    project_dir = Path.cwd()

    if (project_dir / cli.MARKER_NAME).exists():
        console.print(f"[yellow]{project_dir} is already a SecScope project.[/yellow]")
        return

    try:
        storage_dir = cli.ensure_project_storage_dir(project_dir)
        (project_dir / "reports").mkdir(exist_ok=True)
    except PermissionError as exc:
        console.print(f"[red]Error: {project_dir} is not writable.[/red]")
        raise typer.Exit(1) from exc
    except (OSError, ValueError) as exc:
        console.print(f"[red]Could not create project storage: {exc}[/red]")
        raise typer.Exit(1) from exc

    db_path = storage_dir / cli.DB_FILENAME
    cli.init_db(db_path)
    env_path = cli.create_project_config_template(project_dir)

    console.print(
        Panel(
            f"[green]SecScope project ready:[/green] {project_dir}\n\n"
            f"  database  {db_path}\n"
            f"  settings  {env_path}\n"
            f"  reports/  rendered report files\n\n"
            "[yellow]Try:[/yellow]\n"
            "  secscope scan-import samples/demo_scan.yml\n"
            "  secscope scans\n"
            "  secscope report <scan-id> --format markdown -o reports/assessment",
            title="secscope init",
            border_style="green",
        )
    )

"""Shared CLI app objects and project helpers."""

import logging
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from secscope.config import DB_FILENAME, MARKER_NAME, is_global_config_dir, is_verbose

app = typer.Typer(
    name="secscope",
    help="Vulnerability report engine and payload test bench",
    no_args_is_help=True,
)
console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Route library logging through Rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=False)],
        force=True,
    )


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Vulnerability report engine and payload test bench."""
    configure_logging(verbose or is_verbose(get_project_dir()))


def get_project_dir() -> Path | None:
    """Find the project directory by looking for a .secscope marker.

    Stops walking at the system temp root (e.g. ``/tmp``) to avoid
    matching stale ``.secscope`` dirs left by test runs or throwaway work.
    """
    current = Path.cwd()
    try:
        temp_root = Path(tempfile.gettempdir()).resolve()
    except OSError:
        temp_root = None
    while current != current.parent:
        if temp_root and current.resolve() == temp_root:
            return None
        marker = current / MARKER_NAME
        if marker.exists():
            if (
                marker.is_dir()
                and is_global_config_dir(marker)
                and not (marker / DB_FILENAME).exists()
            ):
                current = current.parent
                continue
            return current
        current = current.parent
    return None


def require_project() -> Path:
    """Ensure the current directory is inside a SecScope project."""
    project_dir = get_project_dir()
    if project_dir:
        return project_dir

    console.print("[red]Error: Not in a secscope project. Run 'secscope init' first.[/red]")
    raise typer.Exit(1)


@contextmanager
def project_context() -> Iterator:
    """Yield an AppContext for the current project and close it afterwards."""
    from .deps import cli_module

    cli = cli_module()
    project_dir = cli.require_project()
    try:
        ctx = cli.AppContext.for_project(project_dir)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    try:
        yield ctx
    finally:
        ctx.close()


SEVERITY_STYLES = {
    "critical": "bold red",
    "high": "red",
    "medium": "yellow",
    "low": "cyan",
}

STATUS_STYLES = {
    "success": "green",
    "blocked": "yellow",
    "failed": "red",
}

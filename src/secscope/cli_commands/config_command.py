"""``secscope config``: inspect or scaffold settings."""

import typer
import yaml
from rich.markup import escape

from .deps import cli_module
from .shared import app, console


def _show_global() -> None:
    cli = cli_module()
    try:
        settings = cli.load_global_config()
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    if not settings:
        console.print("[dim]No global settings. Create them with 'secscope config init --global'.[/dim]")
        return
    console.print("[bold]~/.secscope/config.yml[/bold]")
    console.print(escape(yaml.safe_dump(settings, default_flow_style=False, sort_keys=False)))


def _show_project() -> None:
    cli = cli_module()
    project_dir = cli.get_project_dir()
    if project_dir is None:
        console.print("[yellow]Not in a project directory. Use --global for global settings.[/yellow]")
        return

    settings = cli.load_project_config(project_dir)
    if not settings:
        console.print("[dim]No project settings enabled; edit the .env file to set some.[/dim]")
        return
    console.print(f"[bold]{cli.get_project_env_path(project_dir)}[/bold]")
    for key, value in settings.items():
        console.print(escape(f"  {key}={value}"))


@app.command()
def config(
    action: str = typer.Argument("show", help="show or init"),
    global_config: bool = typer.Option(
        False, "--global", help="Act on ~/.secscope/config.yml instead of the project"
    ),
) -> None:
    """Show or create SecScope settings."""
    cli = cli_module()

    if action == "show":
        if global_config:
            _show_global()
        else:
            _show_project()
        return

    if action == "init":
        if global_config:
            path = cli.create_global_config()
        else:
            path = cli.create_project_config_template(cli.require_project())
        console.print(f"[green]Settings file:[/green] {path}")
        return

    console.print(f"[red]Unknown action '{escape(action)}'; expected show or init.[/red]")
    raise typer.Exit(1)

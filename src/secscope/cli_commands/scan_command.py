"""Scan import and inspection CLI commands."""

from pathlib import Path

import typer
from rich.table import Table

from secscope.errors import SecScopeError

from .deps import cli_module
from .shared import SEVERITY_STYLES, app, console, project_context


@app.command("scan-import")
def scan_import(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML or JSON scan file"),
) -> None:
    """Import a scan and its vulnerabilities from a file."""
    cli = cli_module()
    with project_context() as ctx:
        try:
            scan = cli.import_scan(ctx.store, cli.load_scan_file(path))
        except SecScopeError as exc:
            console.print(f"[red]Import failed: {exc.message}[/red]")
            raise typer.Exit(1) from exc

        console.print(
            f"[green]Imported scan[/green] {scan.id} "
            f"({scan.total_vulnerabilities} vulnerabilities, status: {scan.status})"
        )


@app.command()
def scans(
    limit: int = typer.Option(20, "--limit", help="Number of scans to show"),
) -> None:
    """List recent scans."""
    with project_context() as ctx:
        rows = ctx.store.list_scans(limit=limit)
        if not rows:
            console.print("[dim]No scans found.[/dim]")
            return

        table = Table(title="Scans")
        table.add_column("ID", style="cyan", overflow="fold")
        table.add_column("Target")
        table.add_column("Type")
        table.add_column("Status")
        table.add_column("Crit", justify="right")
        table.add_column("High", justify="right")
        table.add_column("Med", justify="right")
        table.add_column("Low", justify="right")
        for scan in rows:
            table.add_row(
                scan.id,
                scan.target,
                scan.scan_type or "",
                scan.status or "",
                str(scan.critical_count or 0),
                str(scan.high_count or 0),
                str(scan.medium_count or 0),
                str(scan.low_count or 0),
            )
        console.print(table)


@app.command("scan-show")
def scan_show(scan_id: str = typer.Argument(..., help="Scan identifier")) -> None:
    """Show a scan's vulnerabilities, most severe first."""
    with project_context() as ctx:
        try:
            scan = ctx.store.require_scan(scan_id)
            vulnerabilities = ctx.store.list_vulnerabilities(scan_id)
        except SecScopeError as exc:
            console.print(f"[red]{exc.message}[/red]")
            raise typer.Exit(1) from exc

        console.print(f"[bold]{scan.target}[/bold] [dim]({scan.scan_type}, {scan.status})[/dim]")
        if not vulnerabilities:
            console.print("[dim]No vulnerabilities recorded.[/dim]")
            return

        table = Table(show_lines=True)
        table.add_column("Severity", no_wrap=True)
        table.add_column("CVE", no_wrap=True)
        table.add_column("Title")
        table.add_column("Service")
        table.add_column("ID", style="dim", overflow="fold")
        for vuln in vulnerabilities:
            style = SEVERITY_STYLES.get(vuln.severity, "white")
            table.add_row(
                f"[{style}]{vuln.severity.upper()}[/]",
                vuln.cve,
                vuln.title,
                f"{vuln.service_name}:{vuln.port}",
                vuln.id,
            )
        console.print(table)

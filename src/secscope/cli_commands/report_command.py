"""Report generation and report history CLI commands."""

import json
from pathlib import Path

import typer
from rich.table import Table

from secscope.errors import SecScopeError

from .shared import app, console, project_context

SUFFIXES = {"html": ".html", "markdown": ".md", "json": ".json"}


@app.command()
def report(
    scan_id: str = typer.Argument(..., help="Scan identifier"),
    format: str = typer.Option("json", "--format", "-f", help="Format: json, html, markdown"),
    authorized_by: str | None = typer.Option(
        None, "--authorized-by", help="Override the report author"
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the report to a file"),
) -> None:
    """Generate a vulnerability report for a scan."""
    with project_context() as ctx:
        try:
            generated = ctx.reports.generate(
                scan_id, format=format, authorized_by=authorized_by or ctx.authorized_by
            )
        except SecScopeError as exc:
            console.print(f"[red]Report generation failed: {exc.message}[/red]")
            raise typer.Exit(1) from exc

        if isinstance(generated.report, str):
            content = generated.report
        else:
            content = json.dumps(generated.to_dict(), indent=2)

        if output is None:
            console.print(content, markup=False, highlight=False, emoji=False, soft_wrap=True)
            return

        if not output.suffix:
            output = output.with_suffix(SUFFIXES.get(format, ".json"))
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        console.print(f"[green]Report written:[/green] {output}")
        if generated.report_id:
            console.print(f"[dim]Snapshot ID: {generated.report_id}[/dim]")
        else:
            console.print("[yellow]Report snapshot could not be stored.[/yellow]")


@app.command()
def reports(
    scan_id: str | None = typer.Option(None, "--scan", help="Only show reports for this scan"),
    limit: int = typer.Option(50, "--limit", help="Number of reports to show"),
) -> None:
    """List stored report snapshots, newest first."""
    with project_context() as ctx:
        rows = ctx.store.list_reports(scan_id=scan_id, limit=limit)
        if not rows:
            console.print("[dim]No reports found.[/dim]")
            return

        table = Table(title="Report Snapshots")
        table.add_column("ID", style="cyan", overflow="fold")
        table.add_column("Target")
        table.add_column("Format", no_wrap=True)
        table.add_column("Generated By")
        table.add_column("Generated At")
        table.add_column("Findings", justify="right")
        for row in rows:
            table.add_row(
                row.id,
                row.target,
                row.report_format,
                row.generated_by,
                row.generated_at.strftime("%Y-%m-%d %H:%M:%S") if row.generated_at else "",
                str(row.total_vulnerabilities or 0),
            )
        console.print(table)

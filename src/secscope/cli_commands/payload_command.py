"""Payload test bench and payload library CLI commands."""

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from secscope.errors import SecScopeError

from .shared import STATUS_STYLES, app, console, project_context


@app.command("payload-test")
def payload_test(
    target: str = typer.Option(..., "--target", "-t", help="Target URL (never contacted)"),
    payload: str = typer.Option(..., "--payload", "-p", help="Payload text"),
    payload_type: str = typer.Option(
        ..., "--type", help="Payload type, e.g. sql-injection, xss, path-traversal"
    ),
    vulnerability_id: str | None = typer.Option(
        None, "--vuln-id", help="Link the result to a stored vulnerability"
    ),
) -> None:
    """Classify a payload against a target and record the result."""
    with project_context() as ctx:
        try:
            outcome = ctx.payload_tester.run(
                target, payload, payload_type, vulnerability_id=vulnerability_id
            )
        except SecScopeError as exc:
            console.print(f"[red]{exc.message}[/red]")
            raise typer.Exit(1) from exc

        verdict = outcome.result
        style = STATUS_STYLES.get(verdict.status, "white")
        console.print(
            Panel(
                f"[bold]Status:[/bold] [{style}]{verdict.status.upper()}[/]\n"
                f"[bold]Details:[/bold] {verdict.details}\n"
                f"[bold]Response time:[/bold] {verdict.response_time} ms\n\n"
                f"{escape(verdict.response)}",
                title=escape(f"{payload_type} -> {target}"),
                border_style=style,
            )
        )
        if outcome.test_id is None:
            console.print("[yellow]Result could not be stored.[/yellow]")
        else:
            console.print(f"[dim]Test ID: {outcome.test_id}[/dim]")


def _print_payloads(payloads: list[dict], title: str) -> None:
    if not payloads:
        console.print("[dim]No payloads found.[/dim]")
        return

    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Type", no_wrap=True)
    table.add_column("Category")
    table.add_column("Source")
    table.add_column("Payload", overflow="fold")
    for entry in payloads:
        table.add_row(
            entry["name"],
            entry["type"],
            entry.get("category") or "",
            entry.get("source") or "",
            escape(entry["payload"]),
        )
    console.print(table)


@app.command()
def library(
    action: str = typer.Argument("list", help="Action: list, sync, search"),
    query: str | None = typer.Argument(None, help="Search text (for 'search')"),
    payload_type: str | None = typer.Option(None, "--type", help="Filter by payload type"),
    category: str | None = typer.Option(None, "--category", help="Filter by category"),
) -> None:
    """Browse, sync or search the payload library."""
    with project_context() as ctx:
        payloads = ctx.library
        try:
            if action == "list":
                _print_payloads(payloads.list(type=payload_type, category=category), "Payload Library")
            elif action == "sync":
                result = payloads.sync()
                console.print(f"[green]{result.message}[/green]")
            elif action == "search":
                results = payloads.search(query or "", type=payload_type)
                _print_payloads(results, f"Search: {query}")
            else:
                console.print(f"[red]Invalid action: {action}. Use list, sync or search.[/red]")
                raise typer.Exit(1)
        except SecScopeError as exc:
            console.print(f"[red]{exc.message}[/red]")
            raise typer.Exit(1) from exc


@app.command("payload-tests")
def payload_tests(
    limit: int = typer.Option(20, "--limit", help="Number of results to show"),
) -> None:
    """List recorded payload test results, newest first."""
    with project_context() as ctx:
        rows = ctx.store.recent_payload_tests(limit=limit)
        if not rows:
            console.print("[dim]No payload tests recorded.[/dim]")
            return

        table = Table(title="Payload Tests")
        table.add_column("Status", no_wrap=True)
        table.add_column("Type", no_wrap=True)
        table.add_column("Target")
        table.add_column("Payload", overflow="fold")
        table.add_column("ms", justify="right")
        table.add_column("Vulnerability")
        for test in rows:
            record = test.to_record()
            style = STATUS_STYLES.get(record.status, "white")
            table.add_row(
                f"[{style}]{record.status}[/]",
                record.payload_type,
                escape(record.target_url),
                escape(record.payload),
                str(record.response_time if record.response_time is not None else ""),
                record.vulnerability.cve if record.vulnerability else "",
            )
        console.print(table)

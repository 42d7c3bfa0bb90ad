"""CLI interface for the ZIBA support engine."""

import json
import os

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ....composition import container
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain import ROLES
from ...common.exception_handler import format_exception_json

app = typer.Typer(
    name="zibra",
    help="ZIBA support assistant - response template matching and help search",
    add_completion=False,
)

console = Console(force_terminal=True, legacy_windows=False)

# Determine if we're in debug mode (shows full stack traces)
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true" or settings.debug


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        json_format=settings.log_json,
    )


def handle_cli_error(exc: Exception) -> None:
    """Display an error with its code; full JSON details in debug mode.

    Args:
        exc: The exception to handle.
    """
    error_data = format_exception_json(exc, include_trace=DEBUG_MODE)

    if DEBUG_MODE:
        console.print(
            Panel(
                json.dumps(error_data, indent=2),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
        return

    error_code = error_data["error"].get("code", "UNKNOWN")
    console.print(f"\n[red]Error \\[{error_code}]:[/] {error_data['error']['message']}")
    console.print(f"[dim]Type: {error_data['error']['type']}[/]")
    console.print("[dim]Set DEBUG=true for full details[/]")


@app.command()
def respond(
    query: str = typer.Argument(..., help="The user's support question"),
    role: str = typer.Option("rider", "--role", "-r", help=f"One of: {', '.join(ROLES)}"),
    context: str | None = typer.Option(None, "--context", help="Screen or conversation hint"),
) -> None:
    """Select the support response for a query."""
    if role not in ROLES:
        console.print(f"[red]Unknown role:[/] {role}. Choose from {', '.join(ROLES)}.")
        raise typer.Exit(2)

    try:
        selector = container.get_template_selector()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    match = selector.match_template(query, role, context)
    template = match.document if match else selector.select_template(query, role, context)

    if template is None:
        console.print(Panel(selector.get_template_response(query, role, context), title="Default"))
        return

    subtitle = f"score {match.score:.1f}" if match else "fallback"
    console.print(
        Panel(
            template.content,
            title=f"[bold]{template.id}[/] [dim]({template.category})[/]",
            subtitle=f"[dim]{subtitle}[/]",
            border_style="green" if match else "yellow",
        )
    )


@app.command()
def search(
    query: str = typer.Argument(..., help="Free-text help search"),
    category: str | None = typer.Option(
        None, "--category", "-c", help="Only search articles in this category"
    ),
) -> None:
    """Search help articles."""
    try:
        service = container.get_help_search()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    corpus = service.articles_in_category(category) if category else None
    results = service.search_scored(query, corpus)

    if not results:
        console.print("[yellow]No results.[/]")
        return

    if all(result.score == 0 for result in results):
        console.print("[yellow]No close matches. You might find these helpful:[/]")

    table = Table(title=f'Help results for "{query}"')
    table.add_column("#", justify="right", style="dim")
    table.add_column("Article")
    table.add_column("Title")
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")
    for rank, result in enumerate(results, start=1):
        article = result.document
        table.add_row(str(rank), article.id, article.title, article.category, f"{result.score:g}")
    console.print(table)


@app.command()
def audit() -> None:
    """Run launch-readiness checks over the response templates."""
    try:
        templates = container.get_template_corpus()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    report = container.get_auditor().run(templates)

    for check in report.checks:
        mark = "[green]PASS[/]" if check.passed else "[red]FAIL[/]"
        console.print(f"{mark} {check.name}")
        for detail in check.details:
            console.print(f"    [dim]{detail}[/]")

    if not report.passed:
        console.print(f"\n[red]{len(report.failures)} check(s) failed[/]")
        raise typer.Exit(1)

    console.print(f"\n[green]All {len(report.checks)} checks passed[/]")


@app.command()
def status() -> None:
    """Show the loaded corpus."""
    console.print("[bold]ZIBA Support Corpus[/]\n")
    console.print(f"Corpus directory: {settings.resolved_corpus_dir}")

    try:
        templates = container.get_template_corpus()
        articles = container.get_help_corpus()
        synonyms = container.get_synonyms()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    catch_all = templates.catch_all
    console.print(f"  Response templates: {len(templates)}")
    console.print(f"  Catch-all template: {catch_all.id if catch_all else '[red]none[/]'}")
    console.print(f"  Help articles: {len(articles)}")
    console.print(f"  Help categories: {len(container.get_help_categories())}")
    console.print(f"  Synonym entries: {len(synonyms)}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind"),
    port: int = typer.Option(8000, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    console.print(f"[bold]ZIBA Support API[/] on http://{host}:{port}/docs")
    uvicorn.run(
        "zibra.adapters.inbound.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    app()

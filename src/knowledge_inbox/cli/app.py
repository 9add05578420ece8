# src/knowledge_inbox/cli/app.py
"""Command-line interface for Knowledge Inbox.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Creates progress callbacks (for Rich display)
3. Calls commands module functions
4. Renders results with Rich
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from knowledge_inbox import __version__
from knowledge_inbox.commands import (
    ProgressUpdate,
    SourceResult,
    config_cmd,
    ingest,
    items,
    query,
    status,
)
from knowledge_inbox.config import load_env_file
from knowledge_inbox.log_utils import configure_logging

app = typer.Typer(
    name="inbox",
    help="Knowledge Inbox - save notes and web pages, then ask questions about them.",
    no_args_is_help=True,
)
console = Console()

DATA_DIR_HELP = "Data directory (default: from settings)"
CONFIG_HELP = "Path to config file"


def version_callback(value: bool) -> None:
    if value:
        console.print(f"knowledge-inbox {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging.",
    ),
) -> None:
    """Knowledge Inbox - retrieval-augmented answers over your saved content."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    load_env_file()


def parse_meta(pairs: list[str] | None) -> dict[str, str]:
    """Parse repeated key=value options into a dict."""
    metadata: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--meta")
        metadata[key.strip()] = value.strip()
    return metadata


@app.command(name="add")
def add_cmd(
    text: str = typer.Argument(None, help="Note text to save"),
    url: str = typer.Option(None, "--url", "-u", help="Web page to fetch and save instead"),
    meta: list[str] = typer.Option(
        None,
        "--meta",
        "-m",
        help="Metadata as key=value (repeatable)",
    ),
    data_dir: str = typer.Option(None, "--data-dir", "-d", help=DATA_DIR_HELP),
    config_file: str = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    plain: bool = typer.Option(False, "--plain", help="Plain output (no colors/formatting)"),
) -> None:
    """Save a text note or a web page."""
    if text is None and url is None:
        console.print("[red]Error: provide note text or --url[/red]")
        raise typer.Exit(1)

    def on_progress(update: ProgressUpdate) -> None:
        if not plain and update.message:
            console.print(f"[dim]{update.stage.value}: {update.message}[/dim]")

    result = ingest.add(
        content=text,
        url=url,
        metadata=parse_meta(meta),
        data_dir=data_dir,
        config_path=config_file,
        on_progress=on_progress,
    )

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    summary = f"{result.chunks} chunks, {result.embedded} embedded"
    if plain:
        console.print(f"Saved {result.item_type} item {result.item_id} ({summary})")
    else:
        console.print(
            f"[green]Saved {result.item_type} item[/green] [cyan]{result.item_id}[/cyan] "
            f"[dim]({summary})[/dim]"
        )
    if result.truncated:
        console.print("[yellow]Content was truncated to the configured maximum length.[/yellow]")
    if result.failed:
        console.print(
            f"[yellow]{result.failed} chunks could not be embedded; "
            "they will be retried on the next query.[/yellow]"
        )


@app.command(name="query")
def query_cmd(
    question: str = typer.Argument(..., help="Question to ask"),
    data_dir: str = typer.Option(None, "--data-dir", "-d", help=DATA_DIR_HELP),
    config_file: str = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    k: int = typer.Option(None, "--k", "-k", help="Number of sources to retrieve"),
    raw: bool = typer.Option(
        False,
        "--raw",
        "-r",
        help="Return sources without LLM synthesis",
    ),
    plain: bool = typer.Option(False, "--plain", help="Plain output (no colors/formatting)"),
) -> None:
    """Ask a question about saved content."""
    result = query.query(
        question=question,
        data_dir=data_dir,
        config_path=config_file,
        k=k,
        raw=raw,
    )

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if not result.sources:
        if plain:
            console.print(result.answer or "No results found.")
        else:
            console.print(f"[yellow]{result.answer or 'No results found.'}[/yellow]")
        raise typer.Exit(0)

    if plain:
        if result.answer:
            console.print(f"Answer: {result.answer}")
            console.print()
        console.print(f"Sources ({result.mode} search, confidence {result.confidence:.2f}):")
        for source in result.sources:
            label = _source_label(source)
            console.print(f"  [{source.index}] {label} (score: {source.score:.3f})")
            console.print(f"      {source.content}")
        return

    if result.answer:
        console.print(Panel(Markdown(result.answer), title="Answer", border_style="green"))
        console.print()

    console.print(
        f"[bold]Sources[/bold] [dim]({result.mode} search, "
        f"confidence {result.confidence:.2f})[/dim]"
    )
    for source in result.sources:
        console.print(
            f"  \\[{source.index}] [cyan]{_source_label(source)}[/cyan] "
            f"[dim](score: {source.score:.3f})[/dim]"
        )
        console.print(f"      [dim]{source.content.replace(chr(10), ' ')}[/dim]")


def _source_label(source: SourceResult) -> str:
    return source.title or source.url or f"{source.item_type} {source.item_id}"


@app.command(name="list")
def list_cmd(
    data_dir: str = typer.Option(None, "--data-dir", "-d", help=DATA_DIR_HELP),
    config_file: str = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    plain: bool = typer.Option(False, "--plain", help="Plain output (no colors/formatting)"),
) -> None:
    """List saved items, newest first."""
    result = items.list_items(data_dir=data_dir, config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if not result.items:
        if plain:
            console.print("No items saved.")
        else:
            console.print("[dim]No items saved.[/dim]")
        raise typer.Exit(0)

    if plain:
        console.print(f"Saved items ({len(result.items)}):")
        for item in result.items:
            console.print(f"  {item.id} ({item.type}) {item.title or item.preview[:60]}")
        return

    table = Table(title=f"Saved Items ({len(result.items)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Type")
    table.add_column("Preview")
    table.add_column("Created", style="dim")
    for item in result.items:
        table.add_row(item.id, item.type, item.title or item.preview[:80], item.created_at)
    console.print(table)


@app.command(name="show")
def show_cmd(
    item_id: str = typer.Argument(..., help="ID of the item to show"),
    data_dir: str = typer.Option(None, "--data-dir", "-d", help=DATA_DIR_HELP),
    config_file: str = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Show one saved item in full."""
    result = items.show_item(item_id, data_dir=data_dir, config_path=config_file)

    if not result.success or result.item is None:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    item = result.item
    console.print(
        Panel(
            item.content or "",
            title=f"{item.type} {item.id}",
            subtitle=item.created_at,
            border_style="cyan",
        )
    )
    for key, value in item.metadata.items():
        console.print(f"  [dim]{key}:[/dim] {value}")


@app.command(name="status")
def status_cmd(
    data_dir: str = typer.Option(None, "--data-dir", "-d", help=DATA_DIR_HELP),
    config_file: str = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Show store statistics."""
    result = status.status(data_dir=data_dir, config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    table = Table(title="Inbox Status")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Items", str(result.total_items))
    table.add_row("Chunks", str(result.total_chunks))
    table.add_row("Vectors in memory", str(result.total_vectors))
    table.add_row("Retrieval mode", result.mode)
    table.add_row("Embedding mode", result.embedding_mode)
    console.print(table)


@app.command(name="config")
def config_cmd_handler(
    data_dir: str = typer.Option(None, "--data-dir", "-d", help=DATA_DIR_HELP),
    config_file: str = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(data_dir=data_dir, config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    table = Table(title="Knowledge Inbox Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    table.add_row("llm_model", result.llm_model or "(none - raw mode)", "")
    table.add_row("embedding_model", result.embedding_model or "(none - keyword mode)", "")
    table.add_row("data_dir", result.data_dir, "")
    table.add_row("storage", result.storage, "")
    table.add_row("vector_index", result.vector_index, "")
    table.add_row("", "", "")

    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    console.print(table)

    if result.config_path:
        console.print(f"\n[dim]Config file: {result.config_path}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")

    console.print("\n[dim]Precedence: env var > yaml settings > default[/dim]")


@app.command(name="serve")
def serve_cmd(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(3001, "--port", "-p", help="Port to listen on"),
    data_dir: str = typer.Option(None, "--data-dir", "-d", help=DATA_DIR_HELP),
    config_file: str = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Run the HTTP API server."""
    import uvicorn

    from knowledge_inbox.commands.base import open_inbox
    from knowledge_inbox.config import ConfigError
    from knowledge_inbox.server import create_app

    inbox = open_inbox(data_dir, config_file)
    if isinstance(inbox, ConfigError):
        console.print(f"[red]Error: {inbox.message}[/red]")
        if inbox.suggestion:
            console.print(f"[dim]{inbox.suggestion}[/dim]")
        raise typer.Exit(1)

    configure_logging(logging.INFO)
    console.print(f"[green]Serving on http://{host}:{port}[/green] [dim](mode: {inbox.mode})[/dim]")
    uvicorn.run(create_app(inbox), host=host, port=port, log_config=None)

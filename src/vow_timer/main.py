"""Main entry point for Vow Timer."""

import typer
from rich.console import Console
from rich.table import Table

from vow_timer import __version__
from vow_timer.config import AppConfig, load_config
from vow_timer.errors import ConfigError, StoreConnectionError
from vow_timer.services.seed_service import SeedReport, seed_defaults
from vow_timer.services.store import Store, open_store
from vow_timer.utils.exit_codes import ERROR_GENERAL, SUCCESS
from vow_timer.utils.logger import get_logger, log_file_path
from vow_timer.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="vow",
    cls=SuggestingGroup,
    help="Bēot: a focus timer that holds you to your word",
    invoke_without_command=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]Vow Timer[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit(SUCCESS)


def _connect() -> tuple[AppConfig, Store]:
    """Load configuration and open the store, exiting with a message on failure."""
    logger = get_logger()
    try:
        config = load_config()
        store = open_store(config)
    except (ConfigError, StoreConnectionError) as e:
        logger.error("Startup failed: %s", e)
        console.print(f"[red]Error: {e}[/red]")
        console.print(f"[dim]Details logged to {log_file_path()}[/dim]")
        raise typer.Exit(ERROR_GENERAL) from e
    return config, store


@app.callback()
def run(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Start an interactive focus session."""
    if ctx.invoked_subcommand is not None:
        return

    # Imported here so `vow seed` and `vow --version` don't pay for Textual.
    from vow_timer.ui.app import VowApp
    from vow_timer.ui.screens import ScreenContext

    config, store = _connect()
    try:
        VowApp(ScreenContext.from_store(store, config)).run()
    finally:
        store.close()


@app.command()
def seed() -> None:
    """Add the default subjects, quotes and poems. Existing entries are kept."""
    _, store = _connect()
    try:
        report = seed_defaults(store.subjects, store.quotes, store.poems)
        summary = _seed_summary(store, report)
    except Exception as e:
        get_logger().error("Seeding failed: %s", e)
        console.print(f"[red]Error: Seeding failed: {e}[/red]")
        raise typer.Exit(ERROR_GENERAL) from e
    finally:
        store.close()

    console.print(summary)
    if report.total:
        console.print(f"[green]✓ Added {report.total} new entries[/green]")
    else:
        console.print("[dim]Nothing to add, defaults already present.[/dim]")


def _seed_summary(store: Store, report: SeedReport) -> Table:
    table = Table(title="Seed Summary", show_header=True, header_style="bold cyan")
    table.add_column("Kind", style="bold")
    table.add_column("Added", justify="right", style="green")
    table.add_column("Total", justify="right")
    table.add_row("Subjects", str(report.subjects), str(len(store.subjects.list_all())))
    table.add_row("Quotes", str(report.quotes), str(store.quotes.count()))
    table.add_row("Poems", str(report.poems), str(store.poems.count()))
    return table


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()

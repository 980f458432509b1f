"""Command line interface for bookery."""

import typer
import uvicorn
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bookery.api.utils.app_startup import configure_logging
from bookery.core.exceptions import StoreError
from bookery.core.services import DbSessionService
from bookery.core.services.records import (
    AuthorService,
    BookService,
    CostumerService,
    RentalService,
)
from bookery.runtime.context import get_config
from bookery.runtime.init_db import init_db as create_tables

console = Console()

app = typer.Typer(
    help="📚 Bookery - library record store",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind, defaults to the configured one"),
    port: int | None = typer.Option(None, help="Port to bind, defaults to the configured one"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    🚀 Start the HTTP API server.
    """
    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit("[bold green]Starting bookery API[/bold green]", border_style="green")
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "bookery.api.http.app:build_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


@app.command(name="init-db")
def init_db() -> None:
    """
    🗄️  Create the database tables.
    """
    configure_logging()
    with console.status("[bold cyan]Creating tables..."):
        create_tables()
    console.print("[green]✅ Database tables created[/green]")


@app.command()
def stats() -> None:
    """
    📊 Show how many records each table holds.
    """
    configure_logging()
    config = get_config()
    database = DbSessionService(config.database, config.app.environment)

    table = Table(title="Bookery records")
    table.add_column("Record", style="cyan")
    table.add_column("Count", justify="right", style="green")

    try:
        for label, service_type in (
            ("Authors", AuthorService),
            ("Books", BookService),
            ("Costumers", CostumerService),
            ("Rentals", RentalService),
        ):
            table.add_row(label, str(service_type(database).count()))
    except StoreError as e:
        console.print(f"[red]❌ Could not read the database:[/red] {e}")
        raise typer.Exit(code=1) from e
    finally:
        database.dispose()

    console.print(table)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

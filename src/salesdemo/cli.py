"""CLI interface for the sales service."""

import typer
from rich.console import Console
from rich.table import Table

from salesdemo import __version__
from salesdemo.config import get_config_unvalidated

app = typer.Typer(
    name="salesdemo",
    help="""
    [bold]Sales Service CLI[/bold]

    In-memory CRUD service for sales records.

    [cyan]Examples:[/cyan]
      salesdemo show-config
      python -m salesdemo --mode api
    """,
    no_args_is_help=True,
)

console = Console()


@app.command("show-config")
def show_config() -> None:
    """Show the effective configuration."""
    config = get_config_unvalidated()
    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for name, value in config.model_dump().items():
        table.add_row(name, str(value))
    console.print(table)

    try:
        config.validate_config()
    except ValueError as e:
        console.print(f"\n[bold red]✗ {e}[/bold red]")
        raise typer.Exit(code=1)
    console.print("\n[bold green]✓ Configuration is valid[/bold green]")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"salesdemo version {__version__}")


if __name__ == "__main__":
    app()

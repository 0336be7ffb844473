"""CLI entry point for the sales service."""

import logging

import typer

from salesdemo.cli import app as cli_app
from salesdemo.config import LOG_FORMAT, get_config

app = typer.Typer(
    help="Sales service - CLI or API mode.",
    no_args_is_help=False,
)
app.add_typer(cli_app, name="", help="Sales service CLI commands.")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    mode: str = typer.Option(
        "cli",
        "--mode",
        help="Run mode: cli (default) or api",
    ),
) -> None:
    """Sales service - CLI or API mode."""
    if mode == "api":
        import uvicorn

        config = get_config()
        logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
        uvicorn.run(
            "salesdemo.api:app",
            host=config.api_host,
            port=config.api_port,
            reload=False,
        )
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


if __name__ == "__main__":
    app()

"""Main CLI entry point for SIN record inspection."""

import logging
from typing import Optional

import typer
from rich.console import Console

from src.cli.commands.check import check_command
from src.cli.commands.show import show_command
from src.cli.output import format_error
from src.cli.utils import ConfigManager
from src.cli.utils.config import ConfigError

app = typer.Typer(
    name="sin",
    help="Inspect BitAuth System Identification Number records",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()


@app.callback()
def configure_logging() -> None:
    """Inspect BitAuth System Identification Number records."""
    manager = ConfigManager()
    try:
        config = manager.load()
    except ConfigError as e:
        format_error(console, str(e), hint=f"Fix or remove {manager.config_path}")
        raise typer.Exit(code=1)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@app.command("show")
def show(
    priv: str = typer.Option(..., "-k", "--priv", help="Private key"),
    pub: str = typer.Option(..., "-p", "--pub", help="Public key"),
    sin: str = typer.Option(..., "-s", "--sin", help="System Identification Number"),
    created: int = typer.Option(..., "-c", "--created", help="Creation timestamp"),
    reveal: bool = typer.Option(False, "--reveal", help="Show the private key"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Build a SIN record from its fields and display it."""
    show_command(priv, pub, sin, created, reveal, json_flag)


@app.command("check")
def check(
    priv: str = typer.Option(..., "-k", "--priv", help="Private key"),
    pub: str = typer.Option(..., "-p", "--pub", help="Public key"),
    sin: str = typer.Option(..., "-s", "--sin", help="System Identification Number"),
    created: int = typer.Option(..., "-c", "--created", help="Creation timestamp"),
    other_priv: Optional[str] = typer.Option(None, "--other-priv"),
    other_pub: Optional[str] = typer.Option(None, "--other-pub"),
    other_sin: Optional[str] = typer.Option(None, "--other-sin"),
    other_created: Optional[int] = typer.Option(None, "--other-created"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Check whether two SIN records are equal and hash alike."""
    check_command(
        priv, pub, sin, created,
        other_priv, other_pub, other_sin, other_created, json_flag,
    )


def main() -> None:
    """Entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        raise typer.Exit(130)


if __name__ == "__main__":
    main()

"""Display a SIN record."""

import logging

import typer
from rich.console import Console

from src.cli.output import format_error, format_key_value, json_output, sanitize_dict
from src.cli.utils import ConfigManager, clean_key_material, validate_created
from src.cli.utils.config import ConfigError
from src.identity import InvalidArgumentError, SinRecord

console = Console()
logger = logging.getLogger(__name__)


def build_record(priv: str, pub: str, sin: str, created: int) -> SinRecord:
    """Validate CLI input and construct a record.

    Raises ValueError for rejected CLI input and InvalidArgumentError when
    the record itself refuses the values.
    """
    created = validate_created(created)
    return SinRecord(
        priv=clean_key_material(priv),
        pub=clean_key_material(pub),
        sin=clean_key_material(sin),
        created=created,
    )


def show_command(
    priv: str = typer.Option(..., "--priv", help="Private key"),
    pub: str = typer.Option(..., "--pub", help="Public key"),
    sin: str = typer.Option(..., "--sin", help="System Identification Number"),
    created: int = typer.Option(..., "--created", help="Creation timestamp"),
    reveal: bool = typer.Option(False, "--reveal", help="Show the private key"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Build a SIN record from its fields and display it."""
    try:
        config = ConfigManager().load()
    except ConfigError as e:
        format_error(console, str(e))
        raise typer.Exit(code=1)

    try:
        record = build_record(priv, pub, sin, created)
    except InvalidArgumentError as e:
        format_error(console, str(e), hint=f"Pass a non-empty --{e.field}")
        raise typer.Exit(code=1)
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)

    fields = record.as_dict()
    if config.mask_private and not reveal:
        fields = sanitize_dict(fields)
    logger.info("Displaying SIN record sin=%s created=%d", record.sin, record.created)

    if json_flag:
        json_output(console, {"record": fields})
        return

    console.print("[bold]SIN Record[/bold]")
    console.print()
    format_key_value(console, fields)

"""Compare two SIN records."""

from typing import Optional

import typer
from rich.console import Console

from src.cli.commands.show import build_record
from src.cli.output import format_error, format_success, json_output
from src.identity import InvalidArgumentError

console = Console()


def check_command(
    priv: str = typer.Option(..., "--priv", help="Private key"),
    pub: str = typer.Option(..., "--pub", help="Public key"),
    sin: str = typer.Option(..., "--sin", help="System Identification Number"),
    created: int = typer.Option(..., "--created", help="Creation timestamp"),
    other_priv: Optional[str] = typer.Option(None, "--other-priv"),
    other_pub: Optional[str] = typer.Option(None, "--other-pub"),
    other_sin: Optional[str] = typer.Option(None, "--other-sin"),
    other_created: Optional[int] = typer.Option(None, "--other-created"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Check whether two records are equal and hash alike.

    Each --other-* option defaults to the corresponding field of the first
    record. Exits with code 1 when the records differ.
    """
    try:
        left = build_record(priv, pub, sin, created)
        right = build_record(
            priv if other_priv is None else other_priv,
            pub if other_pub is None else other_pub,
            sin if other_sin is None else other_sin,
            created if other_created is None else other_created,
        )
    except InvalidArgumentError as e:
        format_error(console, str(e), hint=f"Pass a non-empty --{e.field} or --other-{e.field}")
        raise typer.Exit(code=1)
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)

    equal = left == right
    hash_match = hash(left) == hash(right)
    right_fields = right.as_dict()
    differing = [name for name, value in left.as_dict().items() if right_fields[name] != value]

    if json_flag:
        json_output(
            console,
            {"equal": equal, "hash_match": hash_match, "differing_fields": differing},
        )
    elif equal:
        format_success(console, "Records are equal")
        console.print(f"[cyan]Hash match:[/cyan] {'Yes' if hash_match else 'No'}")
    else:
        format_error(console, f"Records differ in: {', '.join(differing)}")
        console.print(f"[cyan]Hash match:[/cyan] {'Yes' if hash_match else 'No'}")

    if not equal:
        raise typer.Exit(code=1)

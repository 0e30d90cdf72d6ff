"""``s2common digest`` — compute the ContentDigest of text or a file."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from s2common.core.digest import ContentDigest
from s2common.exceptions import S2Error

console = Console()


def digest_cmd(
    text: str = typer.Option(None, "--text", "-t", help="UTF-8 text to digest."),
    file: Path = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="File to digest."
    ),
    parse: str = typer.Option(
        None, "--parse", help="Validate and display an existing digest text form."
    ),
) -> None:
    """Print the canonical text, hex and binary length of a digest."""
    chosen = [v for v in (text, file, parse) if v is not None]
    if len(chosen) != 1:
        console.print("[red]Give exactly one of --text, --file or --parse.[/red]")
        raise typer.Exit(code=2)

    try:
        if parse is not None:
            digest = ContentDigest.from_text(parse)
        elif file is not None:
            digest = ContentDigest.of_content(file.read_bytes())
        else:
            digest = ContentDigest.of_content(text.encode("utf-8"))
    except S2Error as e:
        console.print(f"[red]Invalid input:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title="ContentDigest", show_header=False)
    table.add_column("Form", style="cyan")
    table.add_column("Value")
    table.add_row("text", digest.to_text())
    table.add_row("hex", digest.to_hex())
    table.add_row("bytes", str(len(digest.to_bytes())))
    console.print(table)

"""``s2common instant`` and ``s2common language`` — inspect canonical values."""

from __future__ import annotations

from datetime import datetime, timezone

import typer
from rich.console import Console
from rich.table import Table

from s2common.core import temporal
from s2common.core.language import LanguageTag
from s2common.exceptions import S2Error

console = Console()


def instant_cmd(
    value: str = typer.Argument(
        None, help="Instant text SSS.NNNNNNNNN; omit to use the current time."
    ),
) -> None:
    """Show the binary and text forms of an instant."""
    try:
        if value is None:
            instant = temporal.from_datetime(datetime.now(timezone.utc))
        else:
            instant = temporal.decode_text(value)
        binary = temporal.encode_binary(instant.seconds, instant.nanos)
        text = temporal.encode_text(instant.seconds, instant.nanos)
    except S2Error as e:
        console.print(f"[red]Invalid instant:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title="Instant", show_header=False)
    table.add_column("Form", style="cyan")
    table.add_column("Value")
    table.add_row("seconds", str(instant.seconds))
    table.add_row("nanos", str(instant.nanos))
    table.add_row("text", text)
    table.add_row("binary", binary.hex())
    try:
        table.add_row("utc", temporal.to_datetime(*instant).isoformat())
    except OverflowError:
        table.add_row("utc", "[dim]out of datetime range[/dim]")
    console.print(table)


def language_cmd(
    tag: str = typer.Argument(..., help="Language tag, e.g. en-GB."),
) -> None:
    """Parse a language tag and show its parts."""
    try:
        language = LanguageTag.parse(tag)
    except S2Error as e:
        console.print(f"[red]Invalid language tag:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title="Language", show_header=False)
    table.add_column("Part", style="cyan")
    table.add_column("Value")
    table.add_row("language", language.language)
    table.add_row("region", language.region or "[dim]-[/dim]")
    table.add_row("variant", language.variant or "[dim]-[/dim]")
    table.add_row("locale", language.locale)
    table.add_row("canonical", language.canonical_text())
    console.print(table)

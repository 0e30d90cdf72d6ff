"""``s2common legacy-id`` — derive the compact id of a legacy message id."""

from __future__ import annotations

import base64
import binascii

import typer
from rich.console import Console

from s2common.exceptions import BadFormatError, S2Error
from s2common.legacy.legacy_id import LegacyIdFactory

console = Console()


def _decode_message_id(value: str) -> bytes:
    """Accept standard or URL-safe base64, padded or not."""
    normalized = value.replace("-", "+").replace("_", "/")
    normalized += "=" * (-len(normalized) % 4)
    try:
        return base64.b64decode(normalized, validate=True)
    except binascii.Error as exc:
        raise BadFormatError(f"Message id is not valid base64: {exc}") from exc


def legacy_id_cmd(
    tenant: str = typer.Argument(..., help="Tenant name."),
    message_id: str = typer.Argument(..., help="Legacy message id, base64 encoded."),
) -> None:
    """Print the compact identifier for a tenant's legacy message id."""
    try:
        identifier = LegacyIdFactory().message_id(tenant, _decode_message_id(message_id))
    except S2Error as e:
        console.print(f"[red]Invalid input:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(identifier.text, soft_wrap=True)

"""``s2common provider`` — register and report the crypto providers."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel

from s2common.bridge.crypto_bridge import ProviderInitError, ensure_initialized

console = Console()


def provider_cmd() -> None:
    """Register the digest and cipher providers and print what was loaded."""
    try:
        info = ensure_initialized()
    except ProviderInitError as e:
        console.print(f"[red]Provider registration failed:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(
        Panel(
            "\n".join([
                f"[bold]Digest:[/bold]     {info.digest_backend}",
                f"[bold]Cipher:[/bold]     {info.cipher_backend}",
                f"[bold]Algorithms:[/bold] {', '.join(info.algorithms)}",
            ]),
            title="Crypto providers",
            border_style="green",
        )
    )

"""Main Typer application — imports and registers all CLI commands.

Entry point: ``s2common`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer

from s2common.cli.commands.digest import digest_cmd
from s2common.cli.commands.legacy import legacy_id_cmd
from s2common.cli.commands.provider import provider_cmd
from s2common.cli.commands.values import instant_cmd, language_cmd
from s2common.config import config

app = typer.Typer(
    name="s2common",
    help="s2common: canonical encodings and content-derived identifiers.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="digest", help="Compute or validate a ContentDigest.")(digest_cmd)
app.command(name="legacy-id", help="Derive the compact id of a legacy message id.")(legacy_id_cmd)
app.command(name="instant", help="Show the canonical forms of an instant.")(instant_cmd)
app.command(name="language", help="Parse a language tag.")(language_cmd)
app.command(name="provider", help="Register and report the crypto providers.")(provider_cmd)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()

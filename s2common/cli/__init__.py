"""s2common CLI — Typer-based inspection tools.

Provides the ``s2common`` command with subcommands for computing digests,
deriving legacy ids, and checking the canonical forms of instants and
language tags.

All output uses Rich for formatted terminal display.
"""

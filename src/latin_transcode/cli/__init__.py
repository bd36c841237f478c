"""Command line front end (requires the ``cli`` extra: typer and rich)."""

from latin_transcode.cli.main import main

__all__ = ["main"]

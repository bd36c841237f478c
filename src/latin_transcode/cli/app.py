"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated

try:
    import typer
    from rich.console import Console
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from latin_transcode.core.constants import DEFAULT_BUFFER_SIZE, MIN_BUFFER_SIZE

_LOGGER = logging.getLogger(__name__)

CHUNK_SIZE_ENVVAR = "LATIN_TRANSCODE_CHUNK_SIZE"


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install latin-transcode[cli]")

    app = typer.Typer(
        name="latin-transcode",
        help="Convert text between UTF-8 and Latin-1, Latin-9 or Windows-1252.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.callback()
    def main_options(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log conversion details")] = False,
    ) -> None:
        """Convert text between UTF-8 and legacy single-byte encodings."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    @app.command()
    def convert(
        source: Annotated[Path, typer.Argument(help="Input file", exists=True, dir_okay=False)],
        dest: Annotated[Path, typer.Argument(help="Output file")],
        from_encoding: Annotated[str, typer.Option("--from", "-f", help="Input encoding")] = "utf-8",
        to_encoding: Annotated[str, typer.Option("--to", "-t", help="Output encoding")] = "latin-1",
        chunk_size: Annotated[int, typer.Option(
            "--chunk-size", "-c",
            envvar=CHUNK_SIZE_ENVVAR,
            min=MIN_BUFFER_SIZE,
            help="Read and output buffer size in bytes",
        )] = DEFAULT_BUFFER_SIZE,
    ) -> None:
        """Convert a file from one encoding to another."""
        from latin_transcode.core.errors import TranscodeError, UnknownEncodingError
        from latin_transcode.io.stream import transcode_file

        try:
            result = transcode_file(source, dest, from_encoding, to_encoding, chunk_size)
        except UnknownEncodingError as exc:
            err_console.print(f"[red]{exc}[/]")
            raise typer.Exit(2)
        except TranscodeError as exc:
            err_console.print(f"[red]{source}: {exc}[/]")
            raise typer.Exit(1)

        if result.size_changed:
            sizes = f"{result.bytes_read} → {result.bytes_written} bytes"
        else:
            sizes = f"{result.bytes_read} bytes, size unchanged"
        console.print(f"[green]Converted {source} → {dest}[/] ({sizes})")

    @app.command()
    def measure(
        path: Annotated[Path, typer.Argument(help="File to measure", exists=True, dir_okay=False)],
        from_encoding: Annotated[str, typer.Option("--from", "-f", help="Input encoding")] = "utf-8",
        to_encoding: Annotated[str, typer.Option("--to", "-t", help="Output encoding")] = "latin-1",
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Report the exact converted size of a file without converting it."""
        import json
        from latin_transcode.core.errors import UnknownEncodingError
        from latin_transcode.registry import get_conversion

        try:
            conversion = get_conversion(from_encoding, to_encoding)
        except UnknownEncodingError as exc:
            err_console.print(f"[red]{exc}[/]")
            raise typer.Exit(2)

        data = path.read_bytes()
        measured = conversion.measure(data)
        complete = measured.consumed == len(data)

        if json_output:
            print(json.dumps({
                "path": str(path),
                "conversion": conversion.name,
                "status": measured.status.name.lower(),
                "input_bytes": len(data),
                "consumed": measured.consumed,
                "output_bytes": measured.produced,
                "needs_transcoding": measured.needs_transcoding,
                "complete": complete,
            }, indent=2))
        else:
            console.print(f"[bold cyan]{path.name}[/] ({conversion.name})")
            console.print(f"  [bold]Status:[/]  {measured.status.name.lower()}")
            console.print(f"  [bold]Input:[/]   {len(data)} bytes")
            console.print(f"  [bold]Output:[/]  {measured.produced} bytes")
            if not measured.needs_transcoding and measured.ok:
                console.print("  [dim]Already valid output; no conversion needed[/]")
            if measured.ok and not complete:
                console.print(f"  [yellow]Input ends inside a sequence at offset {measured.consumed}[/]")
            if not measured.ok:
                console.print(f"  [red]Stopped at offset {measured.consumed}[/]")

        if not measured.ok or not complete:
            raise typer.Exit(1)

    @app.command()
    def encodings() -> None:
        """List supported conversions."""
        from latin_transcode.registry import CONVERSIONS

        for conversion in CONVERSIONS.values():
            note = " [dim](lossy: unmappable → 0xBF)[/]" if conversion.lossy else ""
            console.print(f"  {conversion.source:8} → {conversion.target}{note}")

    return app

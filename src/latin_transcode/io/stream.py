"""
Chunked conversion of byte streams and files.

Drives a bounded converter over successive input chunks with a fixed-size
output buffer. A UTF-8 sequence split across two chunks is carried over
and completed by the next one.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from latin_transcode.core.constants import DEFAULT_BUFFER_SIZE, MIN_BUFFER_SIZE
from latin_transcode.core.errors import MalformedInputError, error_for
from latin_transcode.core.result import TranscodeResult

_LOGGER = logging.getLogger(__name__)


@dataclass
class StreamResult:
    """Totals for a stream or file conversion."""
    bytes_read: int
    bytes_written: int

    @property
    def size_changed(self) -> bool:
        return self.bytes_read != self.bytes_written


def iter_transcode(
    chunks: Iterable[bytes],
    convert: Callable[..., TranscodeResult],
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> Iterator[bytes]:
    """
    Convert an iterable of input chunks, yielding output pieces.

    Args:
        chunks: Input byte chunks, in order
        convert: Bounded converter, e.g. ``utf8_to_isolat1``
        buffer_size: Output buffer size per call

    Raises:
        MalformedInputError: Invalid input, or input ending mid-sequence
        UndefinedMappingError: A character has no mapping in the target
    """
    if buffer_size < MIN_BUFFER_SIZE:
        raise ValueError(f"buffer_size must be at least {MIN_BUFFER_SIZE}")

    out = bytearray(buffer_size)
    convert(out, None)  # reset
    pending = b""
    offset = 0  # stream offset of pending[0]

    for chunk in chunks:
        data = pending + bytes(chunk) if pending else bytes(chunk)
        view = memoryview(data)
        pos = 0
        while pos < len(data):
            result = convert(out, view[pos:])
            if not result.ok:
                error = error_for(result.status, offset + pos + result.consumed, result.produced)
                _LOGGER.warning("%s", error)
                raise error
            if result.produced:
                yield bytes(out[:result.produced])
            if result.consumed == 0:
                # Only an incomplete trailing sequence stops a call this early
                break
            pos += result.consumed
        pending = data[pos:]
        offset += pos

    if pending:
        error = MalformedInputError(
            f"input ends inside a sequence at offset {offset}", consumed=offset,
        )
        _LOGGER.warning("%s", error)
        raise error


def transcode_file(
    source_path: Union[str, Path],
    dest_path: Union[str, Path],
    source: str,
    target: str,
    chunk_size: int = DEFAULT_BUFFER_SIZE,
) -> StreamResult:
    """
    Convert a file from one encoding to another.

    The destination is written incrementally; on error it is left partially
    written.

    Args:
        source_path: Input file
        dest_path: Output file
        source: Encoding of the input (e.g. ``"utf-8"``)
        target: Encoding to write (e.g. ``"latin-9"``)
        chunk_size: Read size and output buffer size

    Returns:
        StreamResult with byte counts
    """
    from latin_transcode.registry import get_conversion

    conversion = get_conversion(source, target)
    source_path = Path(source_path)
    dest_path = Path(dest_path)
    counts = StreamResult(bytes_read=0, bytes_written=0)

    def read_chunks(f) -> Iterator[bytes]:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            counts.bytes_read += len(chunk)
            yield chunk

    _LOGGER.debug("converting %s (%s) to %s", source_path, conversion.name, dest_path)
    with open(source_path, "rb") as src, open(dest_path, "wb") as dest:
        for piece in iter_transcode(read_chunks(src), conversion.convert, chunk_size):
            dest.write(piece)
            counts.bytes_written += len(piece)

    return counts

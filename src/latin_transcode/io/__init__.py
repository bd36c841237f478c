"""Allocating conversions and chunked stream/file conversion."""

from latin_transcode.io.owned import (
    cp1252_to_utf8,
    latin1_to_utf8,
    latin9_to_utf8,
    utf8_to_cp1252,
    utf8_to_latin1,
    utf8_to_latin9,
)
from latin_transcode.io.stream import StreamResult, iter_transcode, transcode_file

__all__ = [
    "cp1252_to_utf8",
    "latin1_to_utf8",
    "latin9_to_utf8",
    "utf8_to_cp1252",
    "utf8_to_latin1",
    "utf8_to_latin9",
    "StreamResult",
    "iter_transcode",
    "transcode_file",
]

"""Bounded conversion between UTF-8 and Latin-1, Latin-9 and Windows-1252."""

from latin_transcode.codec.latin1 import isolat1_to_utf8, utf8_to_isolat1
from latin_transcode.codec.generic import (
    iso8859_15_to_utf8,
    iso8859x_to_utf8,
    utf8_to_iso8859_15,
    utf8_to_iso8859x,
)
from latin_transcode.codec.cp1252 import cp1252_to_utf8, utf8_to_cp1252
from latin_transcode.codec.table import (
    LATIN9_TRANSCODING_TABLE,
    TranscodingTable,
    build_transcoding_table,
)
from latin_transcode.codec.probe import (
    measure_cp1252_to_utf8,
    measure_iso8859_15_to_utf8,
    measure_isolat1_to_utf8,
    measure_utf8_to_cp1252,
    measure_utf8_to_iso8859_15,
    measure_utf8_to_isolat1,
)

__all__ = [
    "isolat1_to_utf8",
    "utf8_to_isolat1",
    "iso8859_15_to_utf8",
    "iso8859x_to_utf8",
    "utf8_to_iso8859_15",
    "utf8_to_iso8859x",
    "cp1252_to_utf8",
    "utf8_to_cp1252",
    "LATIN9_TRANSCODING_TABLE",
    "TranscodingTable",
    "build_transcoding_table",
    "measure_cp1252_to_utf8",
    "measure_iso8859_15_to_utf8",
    "measure_isolat1_to_utf8",
    "measure_utf8_to_cp1252",
    "measure_utf8_to_iso8859_15",
    "measure_utf8_to_isolat1",
]

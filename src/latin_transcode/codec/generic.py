"""
Table-driven conversion between UTF-8 and ISO-8859-* style encodings.

Legacy to UTF-8 uses a 128-entry Unicode table for bytes 0x80-0xFF.
UTF-8 to legacy uses a two-level ``TranscodingTable``. Unlike the Latin-1
and Windows-1252 converters, characters without a mapping fail the call
with ``UNDEFINED_MAPPING`` instead of being replaced.
"""

from typing import Optional

from latin_transcode.codec import engine
from latin_transcode.codec.table import LATIN9_TRANSCODING_TABLE, TranscodingTable
from latin_transcode.core.constants import LATIN9_TO_UNICODE
from latin_transcode.core.result import TranscodeResult

# ISO-8859-* tables stop at 3-byte UTF-8 (U+FFFF)
MAX_SEQUENCE = 3


def table_decoder(unicode_table: tuple[int, ...]) -> engine.HighByteDecoder:
    """Decoder for bytes 0x80-0xFF backed by a 128-entry Unicode table."""
    if len(unicode_table) != 128:
        raise ValueError(f"unicode table needs 128 entries, got {len(unicode_table)}")

    def decode_high_byte(byte: int) -> int:
        return unicode_table[byte - 0x80]

    return decode_high_byte


def table_encoder(table: TranscodingTable) -> engine.CodePointEncoder:
    """Encoder backed by a transcoding table; unmapped code points give None."""

    def encode_code_point(code_point: int, length: int) -> Optional[int]:
        return table.lookup(code_point, length) or None

    return encode_code_point


def iso8859x_to_utf8(
    out, src, unicode_table: tuple[int, ...],
    outlen: Optional[int] = None, inlen: Optional[int] = None,
) -> TranscodeResult:
    """
    Convert a block of ISO-8859-* bytes to UTF-8.

    Args:
        out: Writable output buffer
        src: Legacy input, or None to reset (nothing is converted)
        unicode_table: Code points of bytes 0x80-0xFF (0 = undefined)
        outlen: Usable output capacity (default: ``len(out)``)
        inlen: Input length to convert (default: ``len(src)``)

    Returns:
        TranscodeResult. An undefined byte stops the call with
        ``UNDEFINED_MAPPING`` and ``consumed`` set to its offset.
    """
    if src is None:
        return engine.RESET
    outlen, inlen = engine.resolve_lengths(out, src, outlen, inlen)
    return engine.to_result(
        engine.legacy_to_utf8(src, inlen, out, outlen, table_decoder(unicode_table))
    )


def utf8_to_iso8859x(
    out, src, table: TranscodingTable,
    outlen: Optional[int] = None, inlen: Optional[int] = None,
) -> TranscodeResult:
    """
    Convert a block of UTF-8 to an ISO-8859-* encoding.

    Returns:
        TranscodeResult. Stray continuation bytes, bad continuation bytes
        and 4-byte sequences give ``MALFORMED_INPUT``; characters missing
        from ``table`` give ``UNDEFINED_MAPPING``. Either way ``consumed``
        stops at the start of the offending sequence.
    """
    if src is None:
        return engine.RESET
    outlen, inlen = engine.resolve_lengths(out, src, outlen, inlen)
    return engine.to_result(
        engine.utf8_to_legacy(src, inlen, out, outlen, table_encoder(table), MAX_SEQUENCE)
    )


def iso8859_15_to_utf8(
    out, src, outlen: Optional[int] = None, inlen: Optional[int] = None,
) -> TranscodeResult:
    """Convert a block of ISO-8859-15 (Latin-9) bytes to UTF-8."""
    return iso8859x_to_utf8(out, src, LATIN9_TO_UNICODE, outlen, inlen)


def utf8_to_iso8859_15(
    out, src, outlen: Optional[int] = None, inlen: Optional[int] = None,
) -> TranscodeResult:
    """Convert a block of UTF-8 to ISO-8859-15 (Latin-9)."""
    return utf8_to_iso8859x(out, src, LATIN9_TRANSCODING_TABLE, outlen, inlen)

"""Windows-1252 conversion."""

from typing import Optional

from latin_transcode.codec import engine
from latin_transcode.core.constants import (
    CP1252_SUBSTITUTIONS,
    CP1252_TO_UNICODE,
    REPLACEMENT_BYTE,
)
from latin_transcode.core.result import TranscodeResult

# Full UTF-8 range is decoded; everything above U+00FF is substituted
MAX_SEQUENCE = 4


def encode_code_point(code_point: int, length: int) -> Optional[int]:
    """
    Windows-1252 byte for a code point.

    U+0000-U+00FF pass through as their low byte (including the C1 range,
    which lands on the 0x80-0x9F punctuation slots). Known punctuation and
    currency above U+00FF use the substitution map; the rest become 0xBF.
    """
    if code_point <= 0xFF:
        return code_point
    return CP1252_SUBSTITUTIONS.get(code_point, REPLACEMENT_BYTE)


def decode_high_byte(byte: int) -> int:
    """Code point of a byte 0x80-0xFF, or 0 for the five unassigned bytes."""
    return CP1252_TO_UNICODE[byte - 0x80]


def utf8_to_cp1252(
    out, src, outlen: Optional[int] = None, inlen: Optional[int] = None,
) -> TranscodeResult:
    """
    Convert a block of UTF-8 to Windows-1252.

    Like the Latin-1 converter this never fails on content: characters
    outside the code page are replaced with 0xBF.
    """
    if src is None:
        return engine.RESET
    outlen, inlen = engine.resolve_lengths(out, src, outlen, inlen)
    return engine.to_result(
        engine.utf8_to_legacy(src, inlen, out, outlen, encode_code_point, MAX_SEQUENCE)
    )


def cp1252_to_utf8(
    out, src, outlen: Optional[int] = None, inlen: Optional[int] = None,
) -> TranscodeResult:
    """
    Convert a block of Windows-1252 bytes to UTF-8.

    The five unassigned bytes (0x81, 0x8D, 0x8F, 0x90, 0x9D) stop the call
    with ``UNDEFINED_MAPPING``.
    """
    if src is None:
        return engine.RESET
    outlen, inlen = engine.resolve_lengths(out, src, outlen, inlen)
    return engine.to_result(
        engine.legacy_to_utf8(src, inlen, out, outlen, decode_high_byte)
    )

"""ISO-8859-1 (Latin-1) conversion without lookup tables."""

from typing import Optional

from latin_transcode.codec import engine
from latin_transcode.core.constants import REPLACEMENT_BYTE
from latin_transcode.core.result import TranscodeResult

# Full UTF-8 range is decoded; everything above U+00FF is substituted
MAX_SEQUENCE = 4


def decode_high_byte(byte: int) -> int:
    """Latin-1 bytes 0x80-0xFF are the code points U+0080-U+00FF."""
    return byte


def encode_code_point(code_point: int, length: int) -> Optional[int]:
    """Low byte for U+0000-U+00FF; anything else becomes an inverted '?'."""
    if code_point <= 0xFF:
        return code_point
    return REPLACEMENT_BYTE


def isolat1_to_utf8(
    out, src, outlen: Optional[int] = None, inlen: Optional[int] = None,
) -> TranscodeResult:
    """
    Convert a block of Latin-1 bytes to UTF-8.

    Never fails on content: every Latin-1 byte has a code point. Stops
    early when ``out`` cannot hold the next character.

    Args:
        out: Writable output buffer
        src: Latin-1 input, or None to reset (nothing is converted)
        outlen: Usable output capacity (default: ``len(out)``)
        inlen: Input length to convert (default: ``len(src)``)
    """
    if src is None:
        return engine.RESET
    outlen, inlen = engine.resolve_lengths(out, src, outlen, inlen)
    return engine.to_result(
        engine.legacy_to_utf8(src, inlen, out, outlen, decode_high_byte)
    )


def utf8_to_isolat1(
    out, src, outlen: Optional[int] = None, inlen: Optional[int] = None,
) -> TranscodeResult:
    """
    Convert a block of UTF-8 to Latin-1.

    Characters above U+00FF are replaced by 0xBF (inverted question mark)
    rather than failing the call; only malformed UTF-8 is an error. A
    sequence cut off by the end of the input is left unconsumed.
    """
    if src is None:
        return engine.RESET
    outlen, inlen = engine.resolve_lengths(out, src, outlen, inlen)
    return engine.to_result(
        engine.utf8_to_legacy(src, inlen, out, outlen, encode_code_point, MAX_SEQUENCE)
    )

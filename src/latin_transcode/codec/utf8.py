"""UTF-8 single-sequence decoding and code point encoding."""

from enum import IntEnum

from latin_transcode.core.constants import (
    CONTINUATION_MASK,
    CONTINUATION_TAG,
    PAYLOAD_MASK,
)


class DecodeStatus(IntEnum):
    """Outcome of decoding one UTF-8 sequence."""
    OK = 0
    INCOMPLETE = 1   # sequence runs past the end of the input
    MALFORMED = 2    # bad leading byte or continuation byte


def sequence_length(lead: int) -> int:
    """
    Length of the UTF-8 sequence announced by a leading byte.

    Returns 0 for bytes that cannot start a sequence (continuation bytes
    and 0xF8-0xFF).
    """
    if lead < 0x80:
        return 1
    if lead < 0xC0:
        return 0
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    if lead < 0xF8:
        return 4
    return 0


# Payload bits carried by the leading byte, indexed by sequence length
_LEAD_PAYLOAD = (0, 0x7F, 0x1F, 0x0F, 0x07)


def decode_sequence(
    src, pos: int, end: int, max_length: int = 4,
) -> tuple[DecodeStatus, int, int]:
    """
    Decode the UTF-8 sequence starting at ``src[pos]``.

    Args:
        src: Bytes-like input
        pos: Offset of the leading byte
        end: Offset one past the last readable byte
        max_length: Longest sequence accepted; longer ones are malformed

    Returns:
        Tuple of (status, code_point, length). ``length`` is the number of
        bytes the sequence occupies; it is 0 unless status is OK.
    """
    lead = src[pos]
    length = sequence_length(lead)
    if length == 0 or length > max_length:
        return DecodeStatus.MALFORMED, 0, 0
    if length == 1:
        return DecodeStatus.OK, lead, 1
    if end - pos < length:
        return DecodeStatus.INCOMPLETE, 0, 0

    code_point = lead & _LEAD_PAYLOAD[length]
    for i in range(pos + 1, pos + length):
        byte = src[i]
        if byte & CONTINUATION_MASK != CONTINUATION_TAG:
            return DecodeStatus.MALFORMED, 0, 0
        code_point = (code_point << 6) | (byte & PAYLOAD_MASK)
    return DecodeStatus.OK, code_point, length


def encoded_length(code_point: int) -> int:
    """Number of UTF-8 bytes needed for a code point up to U+FFFF."""
    if code_point < 0x80:
        return 1
    if code_point < 0x800:
        return 2
    if code_point <= 0xFFFF:
        return 3
    raise ValueError(f"code point U+{code_point:X} is above U+FFFF")


def encode_code_point(code_point: int, out, pos: int) -> int:
    """
    Write the UTF-8 encoding of ``code_point`` into ``out`` at ``pos``.

    Returns the number of bytes written (1-3).
    """
    if code_point < 0x80:
        out[pos] = code_point
        return 1
    if code_point < 0x800:
        out[pos] = 0xC0 | (code_point >> 6)
        out[pos + 1] = CONTINUATION_TAG | (code_point & PAYLOAD_MASK)
        return 2
    if code_point <= 0xFFFF:
        out[pos] = 0xE0 | (code_point >> 12)
        out[pos + 1] = CONTINUATION_TAG | ((code_point >> 6) & PAYLOAD_MASK)
        out[pos + 2] = CONTINUATION_TAG | (code_point & PAYLOAD_MASK)
        return 3
    raise ValueError(f"code point U+{code_point:X} is above U+FFFF")

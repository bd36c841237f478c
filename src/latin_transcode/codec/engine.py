"""
Conversion walkers shared by every transcoder and sizing probe.

Each walker makes all per-character decisions (decode, map, substitute,
fit into the output) in one place. A transcoder runs it with an output
buffer; a probe runs the same walker with ``out=None``, which writes
nothing and never runs out of space. Both therefore report identical
status, consumed, and produced counts for the same input.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from latin_transcode.codec.utf8 import (
    DecodeStatus,
    decode_sequence,
    encode_code_point,
    encoded_length,
)
from latin_transcode.core.result import Measurement, TranscodeResult, TranscodeStatus

# Maps a legacy byte >= 0x80 to its code point (0 = undefined)
HighByteDecoder = Callable[[int], int]

# Maps a decoded code point and its sequence length to a legacy byte
# (None = undefined)
CodePointEncoder = Callable[[int, int], Optional[int]]


@dataclass(frozen=True, slots=True)
class Walk:
    """Raw outcome of one walker run."""
    status: TranscodeStatus
    consumed: int
    produced: int
    needs_transcoding: bool


def resolve_inlen(src, inlen: Optional[int]) -> int:
    if inlen is None:
        return len(src)
    if inlen < 0 or inlen > len(src):
        raise ValueError(f"inlen {inlen} outside input of {len(src)} bytes")
    return inlen


def resolve_lengths(
    out, src, outlen: Optional[int], inlen: Optional[int],
) -> tuple[int, int]:
    """Validate caller-supplied lengths against the actual buffers."""
    if out is None:
        raise TypeError("output buffer must be a writable bytes-like object, not None")
    inlen = resolve_inlen(src, inlen)
    if outlen is None:
        outlen = len(out)
    elif outlen < 0 or outlen > len(out):
        raise ValueError(f"outlen {outlen} outside output of {len(out)} bytes")
    return outlen, inlen


def legacy_to_utf8(src, end: int, out, capacity: int, decode_high: HighByteDecoder) -> Walk:
    """
    Walk legacy bytes, emitting UTF-8.

    ``capacity`` is ignored when ``out`` is None. Stops before the first
    character whose encoding does not fit, so output always ends on a
    character boundary.
    """
    pos = 0
    produced = 0
    needs = False
    while pos < end:
        byte = src[pos]
        if byte < 0x80:
            code_point = byte
            size = 1
        else:
            code_point = decode_high(byte)
            if code_point == 0:
                return Walk(TranscodeStatus.UNDEFINED_MAPPING, pos, produced, needs)
            needs = True
            size = encoded_length(code_point)
        if out is not None:
            if produced + size > capacity:
                break
            encode_code_point(code_point, out, produced)
        produced += size
        pos += 1
    return Walk(TranscodeStatus.OK, pos, produced, needs)


def utf8_to_legacy(
    src, end: int, out, capacity: int,
    encode: CodePointEncoder, max_sequence: int,
) -> Walk:
    """
    Walk UTF-8 sequences, emitting one legacy byte per character.

    A sequence cut off by the end of the input stops the walk without
    consuming it. A malformed sequence or an unmapped character stops it
    with an error status; ``consumed`` then points at the start of the
    offending sequence.
    """
    pos = 0
    produced = 0
    needs = False
    while pos < end:
        status, code_point, length = decode_sequence(src, pos, end, max_sequence)
        if status is DecodeStatus.INCOMPLETE:
            # the cut-off lead byte still rules out a verbatim copy
            needs = True
            break
        if status is DecodeStatus.MALFORMED:
            return Walk(TranscodeStatus.MALFORMED_INPUT, pos, produced, needs)
        if length == 1:
            byte = code_point
        else:
            needs = True
            byte = encode(code_point, length)
            if byte is None:
                return Walk(TranscodeStatus.UNDEFINED_MAPPING, pos, produced, needs)
        if out is not None:
            if produced >= capacity:
                break
            out[produced] = byte
        produced += 1
        pos += length
    return Walk(TranscodeStatus.OK, pos, produced, needs)


RESET = TranscodeResult(TranscodeStatus.OK, 0, 0)


def to_result(walk: Walk) -> TranscodeResult:
    return TranscodeResult(walk.status, walk.consumed, walk.produced)


def to_measurement(walk: Walk) -> Measurement:
    return Measurement(walk.status, walk.consumed, walk.produced, walk.needs_transcoding)

"""
Sizing probes: exact output size of a conversion without writing output.

Every probe runs the same walker as its transcoder with no output buffer,
so for any input the probe's ``produced``, ``consumed`` and ``status`` equal
those of the transcoder given an unbounded output buffer.
``needs_transcoding`` is False only when every consumed byte would be
copied through unchanged, i.e. the input is already valid output.
"""

from typing import Optional

from latin_transcode.codec import cp1252, engine, latin1
from latin_transcode.codec.generic import MAX_SEQUENCE, table_decoder, table_encoder
from latin_transcode.codec.table import LATIN9_TRANSCODING_TABLE
from latin_transcode.core.constants import LATIN9_TO_UNICODE
from latin_transcode.core.result import Measurement, TranscodeStatus

_RESET = Measurement(TranscodeStatus.OK, 0, 0, False)

_LATIN9_DECODER = table_decoder(LATIN9_TO_UNICODE)
_LATIN9_ENCODER = table_encoder(LATIN9_TRANSCODING_TABLE)


def _measure_legacy(src, inlen: Optional[int], decode_high: engine.HighByteDecoder) -> Measurement:
    if src is None:
        return _RESET
    inlen = engine.resolve_inlen(src, inlen)
    return engine.to_measurement(engine.legacy_to_utf8(src, inlen, None, 0, decode_high))


def _measure_utf8(
    src, inlen: Optional[int], encode: engine.CodePointEncoder, max_sequence: int,
) -> Measurement:
    if src is None:
        return _RESET
    inlen = engine.resolve_inlen(src, inlen)
    return engine.to_measurement(
        engine.utf8_to_legacy(src, inlen, None, 0, encode, max_sequence)
    )


def measure_isolat1_to_utf8(src, inlen: Optional[int] = None) -> Measurement:
    """Output size of ``isolat1_to_utf8``."""
    return _measure_legacy(src, inlen, latin1.decode_high_byte)


def measure_utf8_to_isolat1(src, inlen: Optional[int] = None) -> Measurement:
    """Output size of ``utf8_to_isolat1``."""
    return _measure_utf8(src, inlen, latin1.encode_code_point, latin1.MAX_SEQUENCE)


def measure_iso8859_15_to_utf8(src, inlen: Optional[int] = None) -> Measurement:
    """Output size of ``iso8859_15_to_utf8``."""
    return _measure_legacy(src, inlen, _LATIN9_DECODER)


def measure_utf8_to_iso8859_15(src, inlen: Optional[int] = None) -> Measurement:
    """Output size of ``utf8_to_iso8859_15``."""
    return _measure_utf8(src, inlen, _LATIN9_ENCODER, MAX_SEQUENCE)


def measure_utf8_to_cp1252(src, inlen: Optional[int] = None) -> Measurement:
    """Output size of ``utf8_to_cp1252``."""
    return _measure_utf8(src, inlen, cp1252.encode_code_point, cp1252.MAX_SEQUENCE)


def measure_cp1252_to_utf8(src, inlen: Optional[int] = None) -> Measurement:
    """Output size of ``cp1252_to_utf8``."""
    return _measure_legacy(src, inlen, cp1252.decode_high_byte)

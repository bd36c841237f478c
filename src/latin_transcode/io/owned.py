"""
Allocating conversions for NUL-terminated input.

Each wrapper measures the input with a sizing probe, then either hands
back the input itself (``Borrowed``) when nothing needs converting, or
allocates an exactly sized, NUL-terminated buffer and converts into it
(``Owned``).

A ``Borrowed`` result aliases the caller's input: keep the input alive and
unmodified for as long as the result is used.
"""

import logging
from collections.abc import Callable

from latin_transcode.codec import cp1252, generic, latin1, probe
from latin_transcode.core.errors import AllocationError, MalformedInputError, error_for
from latin_transcode.core.result import (
    Borrowed,
    Converted,
    Measurement,
    Owned,
    TranscodeResult,
)

_LOGGER = logging.getLogger(__name__)

Probe = Callable[..., Measurement]
Transcoder = Callable[..., TranscodeResult]


def terminated_length(src) -> int:
    """Length of ``src`` up to (not including) the first NUL byte."""
    data = src if isinstance(src, (bytes, bytearray)) else memoryview(src).tobytes()
    end = data.find(b"\0")
    return len(data) if end == -1 else end


def convert_owned(
    src, measure: Probe, transcode: Transcoder, name: str, drop_incomplete: bool = False,
) -> Converted:
    """
    Convert NUL-terminated ``src`` using a probe/transcoder pair.

    A UTF-8 sequence cut off by the terminator is dropped when
    ``drop_incomplete`` is set; otherwise it is an error.

    Raises:
        MalformedInputError: Invalid input, or input ending mid-sequence
            without ``drop_incomplete``
        UndefinedMappingError: A character has no mapping in the target
        AllocationError: The output buffer could not be allocated
    """
    if src is None:
        raise TypeError(f"{name}: input must be a bytes-like object, not None")
    length = terminated_length(src)

    if length == 0:
        # Empty input always yields a fresh terminator
        return Owned(bytearray(1))

    measured = measure(src, length)
    if not measured.ok:
        _LOGGER.warning(
            "%s: %s at input offset %d", name, measured.status.name, measured.consumed
        )
        raise error_for(measured.status, measured.consumed, measured.produced)
    if measured.consumed != length and not drop_incomplete:
        _LOGGER.warning("%s: input ends inside a UTF-8 sequence at offset %d", name, measured.consumed)
        raise MalformedInputError(
            f"input ends inside a sequence at offset {measured.consumed}",
            consumed=measured.consumed,
            produced=measured.produced,
        )

    if not measured.needs_transcoding:
        _LOGGER.debug("%s: %d bytes already valid, borrowing input", name, length)
        return Borrowed(memoryview(src)[:length])

    try:
        buffer = bytearray(measured.produced + 1)
    except MemoryError as exc:
        _LOGGER.warning("%s: could not allocate %d bytes", name, measured.produced + 1)
        raise AllocationError(f"could not allocate {measured.produced + 1} bytes") from exc

    result = transcode(buffer, src, measured.produced, length)
    if not result.ok:
        raise error_for(result.status, result.consumed, result.produced)
    _LOGGER.debug("%s: converted %d bytes into %d", name, result.consumed, result.produced)
    return Owned(buffer)


def utf8_to_latin1(src) -> Converted:
    """
    UTF-8 to Latin-1; characters above U+00FF become 0xBF.

    A truncated trailing sequence is dropped from the output.
    """
    return convert_owned(
        src, probe.measure_utf8_to_isolat1, latin1.utf8_to_isolat1, "utf8_to_latin1",
        drop_incomplete=True,
    )


def latin1_to_utf8(src) -> Converted:
    """Latin-1 to UTF-8."""
    return convert_owned(
        src, probe.measure_isolat1_to_utf8, latin1.isolat1_to_utf8, "latin1_to_utf8"
    )


def utf8_to_latin9(src) -> Converted:
    """UTF-8 to Latin-9; unmapped characters raise ``UndefinedMappingError``."""
    return convert_owned(
        src, probe.measure_utf8_to_iso8859_15, generic.utf8_to_iso8859_15, "utf8_to_latin9"
    )


def latin9_to_utf8(src) -> Converted:
    """Latin-9 to UTF-8."""
    return convert_owned(
        src, probe.measure_iso8859_15_to_utf8, generic.iso8859_15_to_utf8, "latin9_to_utf8"
    )


def utf8_to_cp1252(src) -> Converted:
    """
    UTF-8 to Windows-1252; characters outside the code page become 0xBF.

    A truncated trailing sequence is dropped from the output.
    """
    return convert_owned(
        src, probe.measure_utf8_to_cp1252, cp1252.utf8_to_cp1252, "utf8_to_cp1252",
        drop_incomplete=True,
    )


def cp1252_to_utf8(src) -> Converted:
    """Windows-1252 to UTF-8; unassigned bytes raise ``UndefinedMappingError``."""
    return convert_owned(
        src, probe.measure_cp1252_to_utf8, cp1252.cp1252_to_utf8, "cp1252_to_utf8"
    )

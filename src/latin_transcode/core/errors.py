"""Exceptions raised by the allocating and streaming layers."""

from latin_transcode.core.result import TranscodeStatus


class TranscodeError(Exception):
    """Base class for conversion failures."""

    status = TranscodeStatus.MALFORMED_INPUT

    def __init__(self, message: str, consumed: int = 0, produced: int = 0) -> None:
        super().__init__(message)
        self.consumed = consumed
        self.produced = produced


class MalformedInputError(TranscodeError):
    """Input is not valid UTF-8 (or ends inside a sequence)."""
    status = TranscodeStatus.MALFORMED_INPUT


class UndefinedMappingError(TranscodeError):
    """A character has no counterpart in the target encoding."""
    status = TranscodeStatus.UNDEFINED_MAPPING


class AllocationError(TranscodeError):
    """The output buffer could not be allocated."""
    status = TranscodeStatus.ALLOCATION_FAILED


class UnknownEncodingError(LookupError):
    """No conversion is registered for the requested encoding pair."""


_BY_STATUS: dict[TranscodeStatus, type[TranscodeError]] = {
    TranscodeStatus.MALFORMED_INPUT: MalformedInputError,
    TranscodeStatus.UNDEFINED_MAPPING: UndefinedMappingError,
    TranscodeStatus.ALLOCATION_FAILED: AllocationError,
}


def error_for(status: TranscodeStatus, consumed: int, produced: int) -> TranscodeError:
    """Build the exception matching a failed status."""
    if status is TranscodeStatus.OK:
        raise ValueError("OK is not a failure status")
    cls = _BY_STATUS[status]
    if status is TranscodeStatus.UNDEFINED_MAPPING:
        message = f"no mapping for character at input offset {consumed}"
    elif status is TranscodeStatus.ALLOCATION_FAILED:
        message = "could not allocate output buffer"
    else:
        message = f"malformed input at offset {consumed}"
    return cls(message, consumed=consumed, produced=produced)

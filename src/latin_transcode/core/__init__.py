"""Core types: status and result records, errors, code tables."""

from latin_transcode.core.result import (
    Borrowed,
    Converted,
    Measurement,
    Owned,
    TranscodeResult,
    TranscodeStatus,
)
from latin_transcode.core.errors import (
    AllocationError,
    MalformedInputError,
    TranscodeError,
    UndefinedMappingError,
    UnknownEncodingError,
)

__all__ = [
    "Borrowed",
    "Converted",
    "Measurement",
    "Owned",
    "TranscodeResult",
    "TranscodeStatus",
    "AllocationError",
    "MalformedInputError",
    "TranscodeError",
    "UndefinedMappingError",
    "UnknownEncodingError",
]

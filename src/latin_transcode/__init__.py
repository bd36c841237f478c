"""
latin-transcode: UTF-8 <-> legacy single-byte text conversion

Convert raw byte buffers between UTF-8 and ISO-8859-1 (Latin-1),
ISO-8859-15 (Latin-9) and Windows-1252.

Quick Start:
    >>> import latin_transcode as lt
    >>> lt.utf8_to_latin9("Preis: 5 €".encode()).data
    b'Preis: 5 \\xa4'
    >>> out = bytearray(16)
    >>> lt.utf8_to_isolat1(out, "naïve".encode())
    TranscodeResult(status=<TranscodeStatus.OK: 0>, consumed=6, produced=5)

Features:
    - Bounded conversions into caller-sized buffers, with exact
      consumed/produced counts and resumable partial output
    - Sizing probes that predict the exact output length
    - Allocating wrappers that return the input itself when it is
      already valid output
    - Lossy Latin-1/Windows-1252 encoding (0xBF fallback), strict Latin-9
    - Chunked file conversion and a command line front end
"""

__version__ = "0.1.0"

# Result types and errors
from latin_transcode.core.result import (
    Borrowed,
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

# Bounded conversions and probes
from latin_transcode.codec import (
    cp1252_to_utf8 as cp1252_block_to_utf8,
    iso8859_15_to_utf8,
    isolat1_to_utf8,
    utf8_to_cp1252 as utf8_block_to_cp1252,
    utf8_to_iso8859_15,
    utf8_to_isolat1,
    measure_cp1252_to_utf8,
    measure_iso8859_15_to_utf8,
    measure_isolat1_to_utf8,
    measure_utf8_to_cp1252,
    measure_utf8_to_iso8859_15,
    measure_utf8_to_isolat1,
)

# Allocating conversions
from latin_transcode.io.owned import (
    cp1252_to_utf8,
    latin1_to_utf8,
    latin9_to_utf8,
    utf8_to_cp1252,
    utf8_to_latin1,
    utf8_to_latin9,
)

# Streams and lookup
from latin_transcode.io.stream import iter_transcode, transcode_file
from latin_transcode.registry import get_conversion

__all__ = [
    # Version
    "__version__",
    # Results
    "Borrowed",
    "Measurement",
    "Owned",
    "TranscodeResult",
    "TranscodeStatus",
    # Errors
    "AllocationError",
    "MalformedInputError",
    "TranscodeError",
    "UndefinedMappingError",
    "UnknownEncodingError",
    # Bounded
    "cp1252_block_to_utf8",
    "iso8859_15_to_utf8",
    "isolat1_to_utf8",
    "utf8_block_to_cp1252",
    "utf8_to_iso8859_15",
    "utf8_to_isolat1",
    # Probes
    "measure_cp1252_to_utf8",
    "measure_iso8859_15_to_utf8",
    "measure_isolat1_to_utf8",
    "measure_utf8_to_cp1252",
    "measure_utf8_to_iso8859_15",
    "measure_utf8_to_isolat1",
    # Allocating
    "cp1252_to_utf8",
    "latin1_to_utf8",
    "latin9_to_utf8",
    "utf8_to_cp1252",
    "utf8_to_latin1",
    "utf8_to_latin9",
    # Streams
    "iter_transcode",
    "transcode_file",
    "get_conversion",
]

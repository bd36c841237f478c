"""Result types returned by the transcoders, probes and wrappers."""

from dataclasses import dataclass
from enum import IntEnum


class TranscodeStatus(IntEnum):
    """Outcome of a conversion call."""
    OK = 0
    MALFORMED_INPUT = 1
    UNDEFINED_MAPPING = 2
    ALLOCATION_FAILED = 3


@dataclass(frozen=True, slots=True)
class TranscodeResult:
    """
    Outcome of one bounded conversion call.

    ``consumed`` counts input bytes of completely converted characters and
    ``produced`` counts bytes written to the output buffer. A call that ran
    out of output space (or input, mid-sequence) is ``OK`` with
    ``consumed`` smaller than the input length.
    """
    status: TranscodeStatus
    consumed: int
    produced: int

    @property
    def ok(self) -> bool:
        return self.status is TranscodeStatus.OK


@dataclass(frozen=True, slots=True)
class Measurement:
    """Outcome of a sizing probe."""
    status: TranscodeStatus
    consumed: int
    produced: int
    needs_transcoding: bool

    @property
    def ok(self) -> bool:
        return self.status is TranscodeStatus.OK


@dataclass(frozen=True, slots=True)
class Borrowed:
    """
    Output that is the caller's own input, unchanged.

    Returned when the input is already valid in the target encoding (for
    example pure ASCII). ``view`` aliases the input buffer: do not mutate
    or release the input while this result is in use.
    """
    view: memoryview

    is_owned = False

    @property
    def data(self) -> bytes:
        return self.view.tobytes()

    def __len__(self) -> int:
        return len(self.view)


@dataclass(frozen=True, slots=True)
class Owned:
    """
    Freshly allocated output, terminated by a single NUL byte.

    The buffer belongs to the caller and shares no memory with the input.
    """
    buffer: bytearray

    is_owned = True

    @property
    def data(self) -> bytes:
        return bytes(self.buffer[:-1])

    def __len__(self) -> int:
        return len(self.buffer) - 1


Converted = Borrowed | Owned

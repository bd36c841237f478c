"""Tests for the sizing probes, checked against their transcoders."""

import pytest

from latin_transcode.codec.probe import (
    measure_iso8859_15_to_utf8,
    measure_isolat1_to_utf8,
    measure_utf8_to_cp1252,
    measure_utf8_to_iso8859_15,
    measure_utf8_to_isolat1,
)
from latin_transcode.core.result import Measurement, TranscodeStatus
from latin_transcode.registry import CONVERSIONS

OK = TranscodeStatus.OK

CONVERSION_IDS = [c.name for c in CONVERSIONS.values()]


@pytest.fixture(params=list(CONVERSIONS.values()), ids=CONVERSION_IDS)
def conversion(request):
    return request.param


class TestProbeParity:
    """A probe reports exactly what its transcoder does with unlimited room."""

    def test_matches_unbounded_transcoder(self, conversion, sample: bytes) -> None:
        measured = conversion.measure(sample)
        out = bytearray(len(sample) * 3 + 1)
        result = conversion.convert(out, sample)
        assert measured.status is result.status
        assert measured.consumed == result.consumed
        assert measured.produced == result.produced

    def test_bounded_output_is_a_prefix(self, conversion, sample: bytes) -> None:
        """Any capacity yields a whole-character prefix of the full output."""
        full = bytearray(len(sample) * 3 + 1)
        whole = conversion.convert(full, sample)
        for capacity in range(whole.produced):
            out = bytearray(capacity)
            result = conversion.convert(out, sample)
            assert result.ok
            assert result.produced <= capacity
            assert result.consumed <= whole.consumed
            assert out[:result.produced] == full[:result.produced]
            assert conversion.measure(sample, result.consumed).produced == result.produced

    def test_explicit_length_limits_input(self, conversion, sample: bytes) -> None:
        cut = len(sample) // 2
        assert conversion.measure(sample, cut) == conversion.measure(sample[:cut])


class TestNeedsTranscoding:
    """Tests for the needs_transcoding flag."""

    def test_ascii_needs_nothing(self, conversion) -> None:
        measured = conversion.measure(b"plain ascii")
        assert measured == Measurement(OK, 11, 11, False)

    def test_high_latin1_byte(self) -> None:
        assert measure_isolat1_to_utf8(b"caf\xe9") == Measurement(OK, 4, 5, True)

    def test_utf8_character(self) -> None:
        assert measure_utf8_to_isolat1("café".encode()) == Measurement(OK, 5, 4, True)

    def test_replacement_counts_as_transcoding(self) -> None:
        assert measure_utf8_to_cp1252("→".encode()) == Measurement(OK, 3, 1, True)

    def test_set_before_failure(self) -> None:
        measured = measure_utf8_to_iso8859_15("é→".encode())
        assert measured == Measurement(TranscodeStatus.UNDEFINED_MAPPING, 2, 1, True)

    def test_ascii_prefix_before_failure(self) -> None:
        measured = measure_utf8_to_iso8859_15(b"ab\xff")
        assert measured == Measurement(TranscodeStatus.MALFORMED_INPUT, 2, 2, False)


class TestProbeEdges:
    """Tests for reset and truncated input."""

    def test_reset_signal(self, conversion) -> None:
        assert conversion.measure(None) == Measurement(OK, 0, 0, False)

    def test_truncated_input(self) -> None:
        """A cut-off sequence is left unconsumed but still needs conversion."""
        assert measure_utf8_to_isolat1(b"A\xe2\x82") == Measurement(OK, 1, 1, True)
        assert measure_utf8_to_cp1252(b"A\xc2") == Measurement(OK, 1, 1, True)
        assert measure_utf8_to_iso8859_15(b"\xe2") == Measurement(OK, 0, 0, True)

    def test_converter_requires_output(self, conversion) -> None:
        """Only the probes run without an output buffer."""
        with pytest.raises(TypeError):
            conversion.convert(None, b"abc")

    def test_latin9_sizes(self) -> None:
        measured = measure_iso8859_15_to_utf8(b"\xa4\xe9a")
        assert measured == Measurement(OK, 3, 6, True)

    def test_rejects_bad_length(self) -> None:
        with pytest.raises(ValueError):
            measure_utf8_to_isolat1(b"ab", 5)

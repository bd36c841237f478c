"""Tests for bounded Latin-1 conversion."""

import random

import pytest

from latin_transcode.codec.latin1 import isolat1_to_utf8, utf8_to_isolat1
from latin_transcode.core.result import TranscodeResult, TranscodeStatus

OK = TranscodeStatus.OK
MALFORMED = TranscodeStatus.MALFORMED_INPUT


def convert(func, data: bytes, capacity: int = 64) -> tuple[TranscodeResult, bytes]:
    out = bytearray(capacity)
    result = func(out, data)
    return result, bytes(out[:result.produced])


class TestIsolat1ToUtf8:
    """Tests for Latin-1 to UTF-8."""

    def test_ascii_unchanged(self) -> None:
        result, out = convert(isolat1_to_utf8, b"Hello, world")
        assert result == TranscodeResult(OK, 12, 12)
        assert out == b"Hello, world"

    def test_every_byte_matches_builtin_codec(self) -> None:
        data = bytes(range(1, 256))
        result, out = convert(isolat1_to_utf8, data, capacity=512)
        assert result.ok
        assert result.consumed == len(data)
        assert out == data.decode("latin-1").encode("utf-8")

    def test_never_undefined(self) -> None:
        for byte in range(0x80, 0x100):
            result, _ = convert(isolat1_to_utf8, bytes([byte]))
            assert result.status is OK

    def test_output_exhausted_mid_character(self) -> None:
        """A 2-byte character that does not fit is not started."""
        result, out = convert(isolat1_to_utf8, b"a\xe9\xe9", capacity=2)
        assert result == TranscodeResult(OK, 1, 1)
        assert out == b"a"

    def test_output_exactly_full(self) -> None:
        result, out = convert(isolat1_to_utf8, b"a\xe9\xe9", capacity=3)
        assert result == TranscodeResult(OK, 2, 3)
        assert out == b"a\xc3\xa9"

    def test_zero_capacity(self) -> None:
        result, _ = convert(isolat1_to_utf8, b"abc", capacity=0)
        assert result == TranscodeResult(OK, 0, 0)

    def test_explicit_lengths(self) -> None:
        out = bytearray(10)
        result = isolat1_to_utf8(out, b"\xe9abc", outlen=3, inlen=2)
        assert result == TranscodeResult(OK, 2, 3)
        assert out[:3] == b"\xc3\xa9a"
        assert out[3:] == bytes(7)

    def test_reset_signal(self) -> None:
        assert isolat1_to_utf8(bytearray(4), None) == TranscodeResult(OK, 0, 0)

    def test_writes_into_memoryview(self) -> None:
        backing = bytearray(8)
        result = isolat1_to_utf8(memoryview(backing)[2:], b"\xfc")
        assert result.produced == 2
        assert backing[2:4] == b"\xc3\xbc"

    def test_rejects_missing_output(self) -> None:
        with pytest.raises(TypeError):
            isolat1_to_utf8(None, b"abc")

    def test_rejects_bad_lengths(self) -> None:
        with pytest.raises(ValueError):
            isolat1_to_utf8(bytearray(4), b"ab", inlen=3)
        with pytest.raises(ValueError):
            isolat1_to_utf8(bytearray(4), b"ab", outlen=5)
        with pytest.raises(ValueError):
            isolat1_to_utf8(bytearray(4), b"ab", inlen=-1)


class TestUtf8ToIsolat1:
    """Tests for UTF-8 to Latin-1."""

    def test_latin1_text(self) -> None:
        text = "Größe: 5 × 3 ¿sí?"
        result, out = convert(utf8_to_isolat1, text.encode())
        assert result.ok
        assert result.consumed == len(text.encode())
        assert out == text.encode("latin-1")

    def test_euro_is_replaced_not_failed(self) -> None:
        result, out = convert(utf8_to_isolat1, "€".encode())
        assert result == TranscodeResult(OK, 3, 1)
        assert out == b"\xbf"

    def test_astral_is_replaced(self) -> None:
        result, out = convert(utf8_to_isolat1, "a😀b".encode())
        assert result == TranscodeResult(OK, 6, 3)
        assert out == b"a\xbfb"

    def test_lone_invalid_byte(self) -> None:
        result, out = convert(utf8_to_isolat1, b"\xff")
        assert result == TranscodeResult(MALFORMED, 0, 0)
        assert out == b""

    def test_stray_continuation_after_text(self) -> None:
        result, out = convert(utf8_to_isolat1, b"ab\x80c")
        assert result == TranscodeResult(MALFORMED, 2, 2)
        assert out == b"ab"

    def test_bad_continuation_stops_at_sequence_start(self) -> None:
        result, out = convert(utf8_to_isolat1, b"\xc3\xa9\xc3(")
        assert result == TranscodeResult(MALFORMED, 2, 1)
        assert out == b"\xe9"

    def test_truncated_sequence_needs_more_input(self) -> None:
        result, _ = convert(utf8_to_isolat1, b"\xc2")
        assert result == TranscodeResult(OK, 0, 0)

    def test_truncated_after_text(self) -> None:
        result, out = convert(utf8_to_isolat1, b"ok\xe2\x82")
        assert result == TranscodeResult(OK, 2, 2)
        assert out == b"ok"

    def test_resume_with_more_input(self) -> None:
        data = "né".encode()
        out = bytearray(8)
        first = utf8_to_isolat1(out, data, inlen=2)
        assert first == TranscodeResult(OK, 1, 1)
        second = utf8_to_isolat1(memoryview(out)[1:], data[first.consumed:])
        assert second == TranscodeResult(OK, 2, 1)
        assert out[:2] == b"n\xe9"

    def test_output_exhausted(self) -> None:
        result, out = convert(utf8_to_isolat1, "aéb".encode(), capacity=2)
        assert result == TranscodeResult(OK, 3, 2)
        assert out == b"a\xe9"

    def test_reset_signal(self) -> None:
        assert utf8_to_isolat1(bytearray(4), None) == TranscodeResult(OK, 0, 0)


def round_trip(data: bytes) -> bytes:
    """UTF-8 to Latin-1 and back again."""
    latin1 = bytearray(len(data))
    there = utf8_to_isolat1(latin1, data)
    assert there == TranscodeResult(OK, len(data), there.produced)
    utf8 = bytearray(len(data))
    back = isolat1_to_utf8(utf8, latin1, inlen=there.produced)
    assert back.consumed == there.produced
    return bytes(utf8[:back.produced])


class TestRoundTrip:
    """UTF-8 text within U+0001-U+00FF survives a trip through Latin-1."""

    def test_every_code_point(self) -> None:
        data = "".join(chr(cp) for cp in range(1, 0x100)).encode()
        assert round_trip(data) == data

    def test_random_text(self, rng: random.Random) -> None:
        for _ in range(20):
            text = "".join(chr(rng.randrange(1, 0x100)) for _ in range(rng.randrange(1, 40)))
            data = text.encode()
            assert round_trip(data) == data

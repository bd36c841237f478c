"""Pytest configuration: seeded input corpora for property-style tests."""

import os
import random

import pytest

# Characters spanning every mapping class: ASCII, Latin-1, Latin-9 only,
# Windows-1252 only, unmapped BMP, and astral (4-byte UTF-8)
TEXT_POOL = (
    "abcXYZ019 .,;\t\n"
    "éüßÀÿ¡¿×÷"
    "¤¦¨´¸¼½¾"
    "€ŠšŽžŒœŸ"
    "‚ƒ„…†‡ˆ‰‹‘’“”•–—˜™›"
    "→中Ω"
    "😀𝄞"
)

# Bytes that exercise every branch of the UTF-8 decoder
BYTE_POOL = bytes(
    [0x41, 0x7F, 0x80, 0x9F, 0xA4, 0xBF, 0xC0, 0xC2, 0xC3, 0xC5,
     0xDF, 0xE0, 0xE2, 0xEF, 0xF0, 0xF4, 0xF7, 0xF8, 0xFF, 0x82, 0xAC]
)

CORPUS_SIZE = 40
MAX_LENGTH = 24


def get_seed() -> int:
    """
    Seed for the random corpora.

    Set LATIN_TRANSCODE_TEST_SEED to reproduce or vary a run.
    """
    if env_seed := os.environ.get("LATIN_TRANSCODE_TEST_SEED"):
        return int(env_seed)
    return 1252


def random_text(rng: random.Random, length: int) -> str:
    return "".join(rng.choice(TEXT_POOL) for _ in range(length))


def random_bytes(rng: random.Random, length: int) -> bytes:
    return bytes(rng.choice(BYTE_POOL) for _ in range(length))


def build_corpus(seed: int) -> list[bytes]:
    """
    Mixed inputs: valid UTF-8, truncated UTF-8, and raw byte soup.

    No sample contains a NUL byte, so every sample is also a valid
    NUL-terminated string.
    """
    rng = random.Random(seed)
    corpus: list[bytes] = [b"", b"plain ascii", b"\xff", b"\xc2", b"A\xe2\x82"]
    while len(corpus) < CORPUS_SIZE:
        kind = rng.randrange(3)
        length = rng.randrange(1, MAX_LENGTH)
        if kind == 0:
            corpus.append(random_text(rng, length).encode("utf-8"))
        elif kind == 1:
            data = random_text(rng, length).encode("utf-8")
            corpus.append(data[:rng.randrange(len(data) + 1)])
        else:
            corpus.append(random_bytes(rng, length))
    return corpus


@pytest.fixture(scope="session")
def rng() -> random.Random:
    return random.Random(get_seed())


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize ``sample`` over the seeded corpus."""
    if "sample" in metafunc.fixturenames:
        corpus = build_corpus(get_seed())
        metafunc.parametrize("sample", corpus, ids=[f"s{i}" for i in range(len(corpus))])


@pytest.fixture(autouse=True)
def wide_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep rich from wrapping CLI output at long temporary paths."""
    monkeypatch.setenv("COLUMNS", "1000")

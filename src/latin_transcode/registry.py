"""Look up conversions by encoding name."""

from collections.abc import Callable
from dataclasses import dataclass

from latin_transcode.codec import cp1252, generic, latin1, probe
from latin_transcode.core.errors import UnknownEncodingError
from latin_transcode.core.result import Converted, Measurement, TranscodeResult
from latin_transcode.io import owned

UTF8 = "utf-8"
LATIN1 = "latin-1"
LATIN9 = "latin-9"
CP1252 = "cp1252"

_ALIASES = {
    "utf8": UTF8,
    "latin1": LATIN1,
    "l1": LATIN1,
    "iso88591": LATIN1,
    "latin9": LATIN9,
    "l9": LATIN9,
    "iso885915": LATIN9,
    "cp1252": CP1252,
    "windows1252": CP1252,
}


@dataclass(frozen=True)
class Conversion:
    """Streaming, measuring and allocating entry points for one direction."""
    source: str
    target: str
    convert: Callable[..., TranscodeResult]
    measure: Callable[..., Measurement]
    convert_owned: Callable[..., Converted]
    lossy: bool = False  # unmappable characters are replaced, not reported

    @property
    def name(self) -> str:
        return f"{self.source} -> {self.target}"


CONVERSIONS: dict[tuple[str, str], Conversion] = {
    (c.source, c.target): c
    for c in (
        Conversion(UTF8, LATIN1, latin1.utf8_to_isolat1,
                   probe.measure_utf8_to_isolat1, owned.utf8_to_latin1, lossy=True),
        Conversion(LATIN1, UTF8, latin1.isolat1_to_utf8,
                   probe.measure_isolat1_to_utf8, owned.latin1_to_utf8),
        Conversion(UTF8, LATIN9, generic.utf8_to_iso8859_15,
                   probe.measure_utf8_to_iso8859_15, owned.utf8_to_latin9),
        Conversion(LATIN9, UTF8, generic.iso8859_15_to_utf8,
                   probe.measure_iso8859_15_to_utf8, owned.latin9_to_utf8),
        Conversion(UTF8, CP1252, cp1252.utf8_to_cp1252,
                   probe.measure_utf8_to_cp1252, owned.utf8_to_cp1252, lossy=True),
        Conversion(CP1252, UTF8, cp1252.cp1252_to_utf8,
                   probe.measure_cp1252_to_utf8, owned.cp1252_to_utf8),
    )
}


def normalize_encoding(name: str) -> str:
    """Canonical name for an encoding alias (``UTF8``, ``iso-8859-15``, ...)."""
    key = name.strip().lower().replace("-", "").replace("_", "").replace(" ", "")
    try:
        return _ALIASES[key]
    except KeyError:
        raise UnknownEncodingError(f"unknown encoding: {name!r}") from None


def get_conversion(source: str, target: str) -> Conversion:
    """Conversion from ``source`` to ``target`` encoding."""
    pair = (normalize_encoding(source), normalize_encoding(target))
    try:
        return CONVERSIONS[pair]
    except KeyError:
        raise UnknownEncodingError(
            f"no conversion from {pair[0]} to {pair[1]}"
        ) from None

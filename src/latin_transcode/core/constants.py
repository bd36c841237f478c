"""Shared constants and code tables for legacy 8-bit transcoding."""

# UTF-8 continuation byte layout (10xxxxxx)
CONTINUATION_MASK = 0xC0
CONTINUATION_TAG = 0x80
PAYLOAD_MASK = 0x3F

# Inverted question mark, used when a code point has no legacy byte
REPLACEMENT_BYTE = 0xBF

# Chunked transcoding buffer sizes (bytes)
DEFAULT_BUFFER_SIZE = 64 * 1024
MIN_BUFFER_SIZE = 4

# ISO-8859-15 (Latin-9) to Unicode mapping for bytes 0x80-0xFF
# Source: https://en.wikipedia.org/wiki/ISO/IEC_8859-15
LATIN9_TO_UNICODE: tuple[int, ...] = (
    # 0x80-0x9F: C1 controls
    0x0080, 0x0081, 0x0082, 0x0083, 0x0084, 0x0085, 0x0086, 0x0087,
    0x0088, 0x0089, 0x008A, 0x008B, 0x008C, 0x008D, 0x008E, 0x008F,
    0x0090, 0x0091, 0x0092, 0x0093, 0x0094, 0x0095, 0x0096, 0x0097,
    0x0098, 0x0099, 0x009A, 0x009B, 0x009C, 0x009D, 0x009E, 0x009F,
    # 0xA0-0xBF: Latin-1 punctuation with eight Latin-9 replacements
    0x00A0, 0x00A1, 0x00A2, 0x00A3, 0x20AC, 0x00A5, 0x0160, 0x00A7,
    0x0161, 0x00A9, 0x00AA, 0x00AB, 0x00AC, 0x00AD, 0x00AE, 0x00AF,
    0x00B0, 0x00B1, 0x00B2, 0x00B3, 0x017D, 0x00B5, 0x00B6, 0x00B7,
    0x017E, 0x00B9, 0x00BA, 0x00BB, 0x0152, 0x0153, 0x0178, 0x00BF,
    # 0xC0-0xFF: same as Latin-1
    0x00C0, 0x00C1, 0x00C2, 0x00C3, 0x00C4, 0x00C5, 0x00C6, 0x00C7,
    0x00C8, 0x00C9, 0x00CA, 0x00CB, 0x00CC, 0x00CD, 0x00CE, 0x00CF,
    0x00D0, 0x00D1, 0x00D2, 0x00D3, 0x00D4, 0x00D5, 0x00D6, 0x00D7,
    0x00D8, 0x00D9, 0x00DA, 0x00DB, 0x00DC, 0x00DD, 0x00DE, 0x00DF,
    0x00E0, 0x00E1, 0x00E2, 0x00E3, 0x00E4, 0x00E5, 0x00E6, 0x00E7,
    0x00E8, 0x00E9, 0x00EA, 0x00EB, 0x00EC, 0x00ED, 0x00EE, 0x00EF,
    0x00F0, 0x00F1, 0x00F2, 0x00F3, 0x00F4, 0x00F5, 0x00F6, 0x00F7,
    0x00F8, 0x00F9, 0x00FA, 0x00FB, 0x00FC, 0x00FD, 0x00FE, 0x00FF,
)

# Windows-1252 code points outside Latin-1, placed in the 0x80-0x9F range
# Source: https://en.wikipedia.org/wiki/Windows-1252
CP1252_SUBSTITUTIONS: dict[int, int] = {
    0x0152: 0x8C,  # OE ligature
    0x0153: 0x9C,  # oe ligature
    0x0160: 0x8A,  # S caron
    0x0161: 0x9A,  # s caron
    0x0178: 0x9F,  # Y diaeresis
    0x017D: 0x8E,  # Z caron
    0x017E: 0x9E,  # z caron
    0x0192: 0x83,  # f hook
    0x02C6: 0x88,  # modifier circumflex
    0x02DC: 0x98,  # small tilde
    0x2013: 0x96,  # en dash
    0x2014: 0x97,  # em dash
    0x2018: 0x91,
    0x2019: 0x92,
    0x201A: 0x82,
    0x201C: 0x93,
    0x201D: 0x94,
    0x201E: 0x84,
    0x2020: 0x86,  # dagger
    0x2021: 0x87,  # double dagger
    0x2022: 0x95,  # bullet
    0x2026: 0x85,  # ellipsis
    0x2030: 0x89,  # per mille
    0x2039: 0x8B,
    0x203A: 0x9B,
    0x20AC: 0x80,  # euro sign
    0x2122: 0x99,  # trade mark
}

# Build the Windows-1252 decoding table from the substitutions.
# 0x81, 0x8D, 0x8F, 0x90 and 0x9D stay 0 (undefined).
_CP1252_LOW: dict[int, int] = {byte: cp for cp, byte in CP1252_SUBSTITUTIONS.items()}

CP1252_TO_UNICODE: tuple[int, ...] = (
    tuple(_CP1252_LOW.get(byte, 0) for byte in range(0x80, 0xA0))
    + tuple(range(0xA0, 0x100))
)

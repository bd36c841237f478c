"""
Two-level transcoding table for UTF-8 to legacy 8-bit conversion.

A table is a small trie keyed by the bits of a UTF-8 sequence:

- ``two_byte_leads`` maps the 5 payload bits of a 2-byte leading byte to a
  page selector.
- ``three_byte_leads`` maps the 4 payload bits of a 3-byte leading byte to a
  page selector.
- ``pages`` holds 64-entry pages indexed by the 6 payload bits of a
  continuation byte. An entry is either a legacy byte (last continuation
  byte) or the selector of the next page (middle continuation byte of a
  3-byte sequence).

Page 0 is all zeros, so selector 0 and entry 0 both mean "unmapped".

The flat form (``to_flat``/``from_flat``) is the classic single-array
layout: 32 two-byte lead selectors, 16 three-byte lead selectors, then the
pages back to back.
"""

from dataclasses import dataclass

from latin_transcode.core.constants import PAYLOAD_MASK

PAGE_SIZE = 64
TWO_BYTE_LEADS = 32
THREE_BYTE_LEADS = 16
LEAD_SEGMENT = TWO_BYTE_LEADS + THREE_BYTE_LEADS

_EMPTY_PAGE: tuple[int, ...] = (0,) * PAGE_SIZE


@dataclass(frozen=True)
class TranscodingTable:
    """Immutable UTF-8 to legacy lookup trie."""
    name: str
    two_byte_leads: tuple[int, ...]
    three_byte_leads: tuple[int, ...]
    pages: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if len(self.two_byte_leads) != TWO_BYTE_LEADS:
            raise ValueError(f"{self.name}: need {TWO_BYTE_LEADS} two-byte lead selectors")
        if len(self.three_byte_leads) != THREE_BYTE_LEADS:
            raise ValueError(f"{self.name}: need {THREE_BYTE_LEADS} three-byte lead selectors")
        if not self.pages or any(self.pages[0]):
            raise ValueError(f"{self.name}: page 0 must exist and be all zeros")
        for number, page in enumerate(self.pages):
            if len(page) != PAGE_SIZE:
                raise ValueError(f"{self.name}: page {number} has {len(page)} entries")
        for selector in self.two_byte_leads + self.three_byte_leads:
            if selector >= len(self.pages):
                raise ValueError(f"{self.name}: selector {selector} has no page")

    def lookup(self, code_point: int, length: int) -> int:
        """
        Legacy byte for a code point decoded from a ``length``-byte sequence.

        Returns 0 when the code point is unmapped. ``length`` must be 2 or 3;
        the lookup walks the same bits the encoded sequence carried.
        """
        if length == 2:
            page = self.two_byte_leads[code_point >> 6]
            return self.pages[page][code_point & PAYLOAD_MASK]
        page = self.three_byte_leads[code_point >> 12]
        page = self.pages[page][(code_point >> 6) & PAYLOAD_MASK]
        if page >= len(self.pages):
            return 0
        return self.pages[page][code_point & PAYLOAD_MASK]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def to_flat(self) -> bytes:
        """Serialize to the single-array layout (48 + pages * 64 bytes)."""
        data = bytearray(self.two_byte_leads)
        data.extend(self.three_byte_leads)
        for page in self.pages:
            data.extend(page)
        return bytes(data)

    @classmethod
    def from_flat(cls, name: str, data: bytes) -> "TranscodingTable":
        """Parse a table from the single-array layout."""
        body = len(data) - LEAD_SEGMENT
        if body <= 0 or body % PAGE_SIZE:
            raise ValueError(f"{name}: flat table size {len(data)} is not 48 + n*64")
        pages = tuple(
            tuple(data[start:start + PAGE_SIZE])
            for start in range(LEAD_SEGMENT, len(data), PAGE_SIZE)
        )
        return cls(
            name=name,
            two_byte_leads=tuple(data[:TWO_BYTE_LEADS]),
            three_byte_leads=tuple(data[TWO_BYTE_LEADS:LEAD_SEGMENT]),
            pages=pages,
        )


def build_transcoding_table(name: str, unicode_table: tuple[int, ...]) -> TranscodingTable:
    """
    Build a trie that inverts a 128-entry legacy-to-Unicode table.

    Pages are numbered in order of first use, so the result is equivalent to,
    but not necessarily byte-identical with, a hand-built table.
    """
    if len(unicode_table) != 128:
        raise ValueError(f"{name}: unicode table needs 128 entries, got {len(unicode_table)}")

    two_byte = [0] * TWO_BYTE_LEADS
    three_byte = [0] * THREE_BYTE_LEADS
    pages: list[list[int]] = [list(_EMPTY_PAGE)]

    def new_page() -> int:
        pages.append([0] * PAGE_SIZE)
        return len(pages) - 1

    for offset, code_point in enumerate(unicode_table):
        if code_point == 0:
            continue
        legacy = 0x80 + offset
        if code_point < 0x80:
            raise ValueError(f"{name}: byte 0x{legacy:02X} maps into ASCII")
        if code_point < 0x800:
            lead = code_point >> 6
            if two_byte[lead] == 0:
                two_byte[lead] = new_page()
            pages[two_byte[lead]][code_point & PAYLOAD_MASK] = legacy
        elif code_point <= 0xFFFF:
            lead = code_point >> 12
            if three_byte[lead] == 0:
                three_byte[lead] = new_page()
            middle = pages[three_byte[lead]]
            index = (code_point >> 6) & PAYLOAD_MASK
            if middle[index] == 0:
                middle[index] = new_page()
            pages[middle[index]][code_point & PAYLOAD_MASK] = legacy
        else:
            raise ValueError(f"{name}: U+{code_point:X} needs a 4-byte sequence")

    if len(pages) > 0xFF:
        raise ValueError(f"{name}: {len(pages)} pages do not fit byte selectors")

    return TranscodingTable(
        name=name,
        two_byte_leads=tuple(two_byte),
        three_byte_leads=tuple(three_byte),
        pages=tuple(tuple(page) for page in pages),
    )


def _page(entries: dict[int, int]) -> tuple[int, ...]:
    return tuple(entries.get(index, 0) for index in range(PAGE_SIZE))


# Latin-9 trie, selector numbering fixed by the reference layout:
#   1: C2 xx (U+0080-U+00BF)   2: E2 xx (middle byte)   3: E2 82 xx
#   4: C5 xx (U+0140-U+017F)   5: C3 xx (U+00C0-U+00FF)
_LATIN9_REMOVED = frozenset((0x24, 0x26, 0x28, 0x34, 0x38, 0x3C, 0x3D, 0x3E))

LATIN9_PAGES: tuple[tuple[int, ...], ...] = (
    _EMPTY_PAGE,
    _page({c: 0x80 | c for c in range(PAGE_SIZE) if c not in _LATIN9_REMOVED}),
    _page({0x02: 3}),
    _page({0x2C: 0xA4}),                       # U+20AC euro sign
    _page({
        0x12: 0xBC, 0x13: 0xBD,                # U+0152, U+0153
        0x20: 0xA6, 0x21: 0xA8,                # U+0160, U+0161
        0x38: 0xBE,                            # U+0178
        0x3D: 0xB4, 0x3E: 0xB8,                # U+017D, U+017E
    }),
    _page({c: 0xC0 | c for c in range(PAGE_SIZE)}),
)

LATIN9_TRANSCODING_TABLE = TranscodingTable(
    name="iso-8859-15",
    two_byte_leads=_page({0x02: 1, 0x03: 5, 0x05: 4})[:TWO_BYTE_LEADS],
    three_byte_leads=_page({0x02: 2})[:THREE_BYTE_LEADS],
    pages=LATIN9_PAGES,
)

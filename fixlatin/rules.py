"""
Deterministic repair rules.

Byte ranges for the UTF-8 shape test and the fixed exception tables for the
legacy encodings that disagree with ISO-8859-1.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

TARGET_ENCODING = "utf-8"

ASCII_LIMIT = 0x80
CONTINUATION_RANGE = (0x80, 0xBF)
C1_CONTROL_RANGE = (0x80, 0x9F)

# (sequence length, lowest lead byte, highest lead byte), tried in this order.
# Lead bytes up to 0xFB (5-byte sequences) follow the pre-RFC 3629 scheme.
UTF8_LEAD_RANGES: Tuple[Tuple[int, int, int], ...] = (
    (2, 0xC0, 0xDF),
    (3, 0xE0, 0xEF),
    (4, 0xF0, 0xF7),
    (5, 0xF8, 0xFB),
)

# CP1252 leaves 0x81, 0x8D, 0x8F, 0x90 and 0x9D undefined.
CP1252_EXCEPTIONS: Mapping[int, bytes] = MappingProxyType({
    0x80: b"\xe2\x82\xac",  # EURO SIGN
    0x82: b"\xe2\x80\x9a",  # SINGLE LOW-9 QUOTATION MARK
    0x83: b"\xc6\x92",      # LATIN SMALL LETTER F WITH HOOK
    0x84: b"\xe2\x80\x9e",  # DOUBLE LOW-9 QUOTATION MARK
    0x85: b"\xe2\x80\xa6",  # HORIZONTAL ELLIPSIS
    0x86: b"\xe2\x80\xa0",  # DAGGER
    0x87: b"\xe2\x80\xa1",  # DOUBLE DAGGER
    0x88: b"\xcb\x86",      # MODIFIER LETTER CIRCUMFLEX ACCENT
    0x89: b"\xe2\x80\xb0",  # PER MILLE SIGN
    0x8A: b"\xc5\xa0",      # LATIN CAPITAL LETTER S WITH CARON
    0x8B: b"\xe2\x80\xb9",  # SINGLE LEFT-POINTING ANGLE QUOTATION MARK
    0x8C: b"\xc5\x92",      # LATIN CAPITAL LIGATURE OE
    0x8E: b"\xc5\xbd",      # LATIN CAPITAL LETTER Z WITH CARON
    0x91: b"\xe2\x80\x98",  # LEFT SINGLE QUOTATION MARK
    0x92: b"\xe2\x80\x99",  # RIGHT SINGLE QUOTATION MARK
    0x93: b"\xe2\x80\x9c",  # LEFT DOUBLE QUOTATION MARK
    0x94: b"\xe2\x80\x9d",  # RIGHT DOUBLE QUOTATION MARK
    0x95: b"\xe2\x80\xa2",  # BULLET
    0x96: b"\xe2\x80\x93",  # EN DASH
    0x97: b"\xe2\x80\x94",  # EM DASH
    0x98: b"\xcb\x9c",      # SMALL TILDE
    0x99: b"\xe2\x84\xa2",  # TRADE MARK SIGN
    0x9A: b"\xc5\xa1",      # LATIN SMALL LETTER S WITH CARON
    0x9B: b"\xe2\x80\xba",  # SINGLE RIGHT-POINTING ANGLE QUOTATION MARK
    0x9C: b"\xc5\x93",      # LATIN SMALL LIGATURE OE
    0x9E: b"\xc5\xbe",      # LATIN SMALL LETTER Z WITH CARON
    0x9F: b"\xc5\xb8",      # LATIN CAPITAL LETTER Y WITH DIAERESIS
})

ISO_8859_15_EXCEPTIONS: Mapping[int, bytes] = MappingProxyType({
    0xA4: b"\xe2\x82\xac",  # EURO SIGN
    0xA6: b"\xc5\xa0",      # LATIN CAPITAL LETTER S WITH CARON
    0xA8: b"\xc5\xa1",      # LATIN SMALL LETTER S WITH CARON
    0xB4: b"\xc5\xbd",      # LATIN CAPITAL LETTER Z WITH CARON
    0xB8: b"\xc5\xbe",      # LATIN SMALL LETTER Z WITH CARON
    0xBC: b"\xc5\x92",      # LATIN CAPITAL LIGATURE OE
    0xBD: b"\xc5\x93",      # LATIN SMALL LIGATURE OE
    0xBE: b"\xc5\xb8",      # LATIN CAPITAL LETTER Y WITH DIAERESIS
})

NO_EXCEPTIONS: Mapping[int, bytes] = MappingProxyType({})

"""
Core repair logic.

Responsibilities:
- keep ASCII and anything shaped like a UTF-8 sequence as-is
- reinterpret every other high byte as a single legacy byte
- CP1252 / ISO-8859-15 exception tables when an encoding is assumed
- reject C1 control bytes unless they are allowed

The whole input is buffered and the whole output is built before anything
is returned, so a failure never leaks partial output.
"""

from __future__ import annotations

import base64
import hashlib
from typing import Any, BinaryIO, Dict, Optional, Tuple

from .errors import ControlCharacterError
from .models import FixOptions
from .rules import (
    ASCII_LIMIT,
    C1_CONTROL_RANGE,
    CONTINUATION_RANGE,
    TARGET_ENCODING,
    UTF8_LEAD_RANGES,
)

_DEFAULT_OPTIONS = FixOptions()


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def _utf8_sequence_length(data: bytes, pos: int) -> int:
    """
    Length of the UTF-8 shaped sequence starting at `pos`, or 0.

    Only the lead/continuation bit pattern is checked; overlong forms and
    out-of-range code points are accepted. A sequence cut short by the end
    of the buffer is not a match.
    """
    lead = data[pos]
    remaining = len(data) - pos
    lo, hi = CONTINUATION_RANGE

    for length, lead_lo, lead_hi in UTF8_LEAD_RANGES:
        if not lead_lo <= lead <= lead_hi or remaining < length:
            continue
        if all(lo <= b <= hi for b in data[pos + 1:pos + length]):
            return length
    return 0


def _latin1_to_utf8(byte: int) -> bytes:
    return bytes((0xC0 | (byte >> 6), 0x80 | (byte & 0x3F)))


def fix_latin(raw: bytes, options: Optional[FixOptions] = None) -> Tuple[bytes, Dict[str, Any]]:
    """
    Repair mixed UTF-8 / legacy 8-bit input into well-formed UTF-8.

    Returns the repaired bytes and a report of what was done to them.

    Raises:
        ControlCharacterError: a C1 control byte was found, not covered by the
            assumed encoding, while `options.allow_control` is false.
    """
    if options is None:
        options = _DEFAULT_OPTIONS
    table = options.exception_table
    data = bytes(raw)
    output = bytearray()

    counts = {
        "ascii": 0,
        "utf8_sequences": 0,
        "legacy_bytes": 0,
        "exceptions_mapped": 0,
        "control_bytes": 0,
    }

    pos = 0
    end = len(data)
    while pos < end:
        byte = data[pos]

        if byte < ASCII_LIMIT:
            output.append(byte)
            counts["ascii"] += 1
            pos += 1
            continue

        length = _utf8_sequence_length(data, pos)
        if length:
            output += data[pos:pos + length]
            counts["utf8_sequences"] += 1
            pos += length
            continue

        counts["legacy_bytes"] += 1

        mapped = table.get(byte)
        if mapped is not None:
            output += mapped
            counts["exceptions_mapped"] += 1
            pos += 1
            continue

        if C1_CONTROL_RANGE[0] <= byte <= C1_CONTROL_RANGE[1]:
            if not options.allow_control:
                raise ControlCharacterError(pos, byte)
            counts["control_bytes"] += 1

        output += _latin1_to_utf8(byte)
        pos += 1

    fixed = bytes(output)
    report = {
        "input_bytes": end,
        "output_bytes": len(fixed),
        **counts,
        "changed": fixed != data,
        "assumed_encoding": options.assume,
        "allow_control": options.allow_control,
    }
    return fixed, report


def transcode(raw: bytes, options: Optional[FixOptions] = None) -> bytes:
    """Repair `raw` and return only the UTF-8 bytes."""
    fixed, _ = fix_latin(raw, options)
    return fixed


def fix_stream(reader: BinaryIO, writer: BinaryIO, options: Optional[FixOptions] = None) -> int:
    """
    Read all of `reader`, repair it, then write the result to `writer` in one go.

    Nothing is written if the repair fails. Returns the number of bytes written.
    """
    fixed = transcode(reader.read(), options)
    writer.write(fixed)
    writer.flush()
    return len(fixed)


def fix_latin_bytes(raw: bytes, options: Optional[FixOptions] = None) -> Dict[str, Any]:
    """
    Repair `raw` and wrap the result in the API's response envelope.
    """
    fixed, report = fix_latin(raw, options)

    b64 = base64.b64encode(fixed).decode("ascii")
    return {
        "fixed": {
            "sha256": _sha256_hex(fixed),
            "encoding": TARGET_ENCODING,
            "content_b64": b64,
        },
        "report": report,
    }

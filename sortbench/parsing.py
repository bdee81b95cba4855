"""Strict parsing of positive numbers from configuration text."""

from __future__ import annotations

import math
import re
import struct

INT32_MAX = 2**31 - 1

_SPACE = "[ \t\n\v\f\r]*"
_INT_RE = re.compile(_SPACE + r"[+-]?[0-9]+")
_DEC_RE = re.compile(
    _SPACE + r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_HEX_RE = re.compile(
    _SPACE
    + r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_SPECIAL_RE = re.compile(_SPACE + r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)


def parse_positive_int(text: str) -> int:
    """Parse a decimal integer in the range 1..2**31-1.

    Leading whitespace and a sign are allowed; anything after the digits is
    an error. Raises ``ValueError`` when the text is not such a number.
    """
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if value <= 0 or value > INT32_MAX:
        raise ValueError(f"integer out of range 1..{INT32_MAX}: {text!r}")
    return value


def _to_float32(value: float, text: str) -> float:
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        raise ValueError(f"float out of range: {text!r}") from None


def parse_positive_float(text: str) -> float:
    """Parse a single-precision float greater than zero.

    Accepts decimal and hexadecimal notation as well as ``inf`` and ``nan``.
    Raises ``ValueError`` for malformed, out-of-range or non-positive text.
    """
    if _DEC_RE.fullmatch(text) or _SPECIAL_RE.fullmatch(text):
        value = float(text)
    elif _HEX_RE.fullmatch(text):
        value = float.fromhex(text.strip(" \t\n\v\f\r"))
    else:
        raise ValueError(f"not a float: {text!r}")
    value = _to_float32(value, text)
    if value <= 0.0:
        raise ValueError(f"float must be positive: {text!r}")
    return value
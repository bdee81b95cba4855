"""Generation of benchmark input arrays and reading arrays from files."""

from __future__ import annotations

import math
import random
import re
import struct
from collections.abc import Callable
from enum import IntEnum
from os import PathLike
from typing import TypeVar, Union

Number = Union[int, float]
T = TypeVar("T")


class GenType(IntEnum):
    """How the values of a generated array are arranged."""

    RANDOM = 0
    RANDOM_33 = 1
    RANDOM_66 = 2
    SORTED = 3
    SORTED_DESC = 4


_PARTIAL_FRACTIONS = {GenType.RANDOM_33: 0.33, GenType.RANDOM_66: 0.66}

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|infinity|inf|nan))",
    re.IGNORECASE,
)
_SIZE_RE = re.compile(r"[0-9]+")


def generate_random(n: int, low: Number, high: Number, rng: random.Random) -> list:
    """Return ``n`` random values between ``low`` and ``high``.

    Integer bounds give integers in the closed range ``[low, high]``; float
    bounds give floats in the half-open range ``[low, high)``.
    """
    if rng is None:
        raise ValueError("a random number generator is required")
    if isinstance(low, int) and isinstance(high, int):
        return [rng.randint(low, high) for _ in range(n)]
    span = high - low
    return [low + span * rng.random() for _ in range(n)]


def generate_partially_sorted(
    n: int, low: Number, high: Number, fraction: float, rng: random.Random
) -> list:
    """Return random values whose first ``floor(n * fraction)`` items are sorted.

    Nothing is sorted when that prefix is empty or covers the whole array.
    """
    values = generate_random(n, low, high, rng)
    part = int(n * fraction)
    if 0 < part < n:
        values[:part] = sorted(values[:part])
    return values


def generate_sorted(n: int, low: Number, high: Number, rng: random.Random) -> list:
    """Return random values sorted in ascending order."""
    return sorted(generate_random(n, low, high, rng))


def generate_sorted_desc(n: int, low: Number, high: Number, rng: random.Random) -> list:
    """Return random values sorted in descending order."""
    return sorted(generate_random(n, low, high, rng), reverse=True)


def generate(n: int, low: Number, high: Number, rng: random.Random, gen_type: GenType) -> list:
    """Return an array of ``n`` values arranged according to ``gen_type``."""
    try:
        gen_type = GenType(gen_type)
    except ValueError:
        raise ValueError(f"unknown generation type: {gen_type!r}") from None
    match gen_type:
        case GenType.RANDOM:
            return generate_random(n, low, high, rng)
        case GenType.RANDOM_33 | GenType.RANDOM_66:
            return generate_partially_sorted(
                n, low, high, _PARTIAL_FRACTIONS[gen_type], rng
            )
        case GenType.SORTED:
            return generate_sorted(n, low, high, rng)
        case GenType.SORTED_DESC:
            return generate_sorted_desc(n, low, high, rng)
    raise ValueError(f"unknown generation type: {gen_type!r}")


def parse_int(text: str) -> int:
    """Read the leading decimal integer of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _to_float32(value: float) -> float:
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_float(text: str) -> float:
    """Read the leading single-precision float of ``text``; 0.0 when there is none.

    Values too large for single precision become infinite.
    """
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0
    token = match.group(1)
    if "x" in token.lower():
        value = float.fromhex(token)
    else:
        value = float(token)
    return _to_float32(value)


def read_array_file(path: Union[str, PathLike], parse: Callable[[str], T]) -> list[T]:
    """Read an array from a whitespace-separated text file.

    The first token is the number of elements; that many tokens follow and
    each is converted with ``parse``. Tokens beyond the count are ignored.
    Raises ``ValueError`` when the count or an element is missing.
    """
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    if not tokens or not _SIZE_RE.fullmatch(tokens[0]):
        raise ValueError(f"cannot read array size from {path!s}")
    size = int(tokens[0])
    elements = tokens[1 : 1 + size]
    if len(elements) < size:
        raise ValueError(
            f"cannot read element {len(elements)} of {size} from {path!s}"
        )
    return [parse(token) for token in elements]
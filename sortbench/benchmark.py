"""Timing and correctness runs of the sorting algorithms."""

from __future__ import annotations

import contextlib
import random
import sys
import time
from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, Optional, TextIO

from .config import ArrType, Config, SortType, VarType, sort_function
from .generate import generate, generate_random, parse_float, parse_int, read_array_file

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
FLOAT_LOW = -10000.0
FLOAT_HIGH = 10000.0
REPEATS = 100
DEMO_PREFIX = 10
FILE_PREFIX = 20

_RULE = "#############################################################"
_NOT_SORTED = "Array is NOT sorted correctly."

SortFunc = Callable[[MutableSequence[Any]], None]


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def time_sort(values: MutableSequence[Any], sort_func: SortFunc) -> float:
    """Sort ``values`` in place with ``sort_func`` and return the time taken in ms."""
    start = time.perf_counter()
    sort_func(values)
    return (time.perf_counter() - start) * 1000.0


def check_sorted(values: Sequence[Any]) -> bool:
    """Return whether ``values`` equals its ascending sorted order."""
    return list(values) == sorted(values)


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def format_prefix(values: Sequence[Any], limit: int) -> str:
    """Render at most ``limit`` leading values, each followed by a space."""
    return "".join(f"{_format_value(v)} " for v in values[:limit])


def _report_check(values: Sequence[Any], out: TextIO) -> bool:
    ok = check_sorted(values)
    if not ok:
        out.write(_NOT_SORTED + "\n")
    return ok


def demo_sort(
    n: int,
    sort_func: SortFunc,
    low: Any,
    high: Any,
    rng: random.Random,
    out: Optional[TextIO] = None,
) -> list:
    """Sort a random array, showing its first elements before and after.

    Returns the sorted array.
    """
    stream = _stream(out)
    stream.write(_RULE + "\n")
    values = generate_random(n, low, high, rng)
    stream.write(f"before sorting, first {DEMO_PREFIX} elements\n\t")
    stream.write(format_prefix(values, DEMO_PREFIX) + "\n")
    sort_func(values)
    stream.write(f"after sorting, first {DEMO_PREFIX} elements\n\t")
    stream.write(format_prefix(values, DEMO_PREFIX) + "\n")
    _report_check(values, stream)
    stream.write(_RULE + "\n")
    return values


def _settings(config: Config, var_type: VarType):
    if var_type == VarType.INT:
        return (
            config.sort_types_int,
            config.array_sizes_int,
            config.array_types_int,
            INT32_MIN,
            INT32_MAX,
            "-" * 14,
        )
    if var_type == VarType.FLOAT:
        return (
            config.sort_types_float,
            config.array_sizes_float,
            config.array_types_float,
            FLOAT_LOW,
            FLOAT_HIGH,
            "-" * 19,
        )
    raise ValueError(f"unknown variable type: {var_type!r}")


def full_test(
    config: Config,
    var_type: VarType,
    seed: Optional[int] = None,
    out: Optional[TextIO] = None,
) -> list[tuple[SortType, ArrType, int, float]]:
    """Benchmark every configured sort, size and arrangement for ``var_type``.

    Each combination is sorted ``REPEATS`` times; the generator is reseeded
    with ``seed`` for every sort type so all sorts see the same inputs.
    Results go to ``out`` when console output is on and are appended to the
    configured output file. Returns ``(sort, arrangement, size, mean_ms)``
    tuples in run order.
    """
    stream = _stream(out)
    var_type = VarType(var_type)
    sorts, sizes, arrangements, low, high, rule = _settings(config, var_type)
    if seed is None:
        seed = random.SystemRandom().getrandbits(32)
    rng = random.Random(seed)
    results: list[tuple[SortType, ArrType, int, float]] = []

    handle_cm = (
        open(config.file_out, "a", encoding="utf-8")
        if config.file_out is not None
        else contextlib.nullcontext()
    )
    with handle_cm as handle:
        for sort_type in sorts:
            sort_type = SortType(sort_type)
            func = sort_function(sort_type)
            rng.seed(seed)
            for size in sizes:
                for arr_type in arrangements:
                    arr_type = ArrType(arr_type)
                    total = 0.0
                    for _ in range(REPEATS):
                        values = generate(size, low, high, rng, arr_type.gen_type)
                        total += time_sort(values, func)
                        _report_check(values, stream)
                    mean = total / REPEATS
                    if config.console_out:
                        stream.write(
                            f"{rule}\n{sort_type.label}\n{arr_type.label}\n"
                            f"size: {size}\ntype: {var_type.name}\n"
                            f"mean time: {mean:.6f}\n\n"
                        )
                    if handle is not None:
                        handle.write(
                            f"{sort_type.label},{arr_type.label},{size},"
                            f"{mean:e},{var_type.name}\n"
                        )
                    results.append((sort_type, arr_type, size, mean))
    return results


def full_test_file(
    config: Config, out: Optional[TextIO] = None
) -> list[tuple[SortType, list]]:
    """Sort the array from the configured input file with every file sort type.

    Raises ``ValueError`` when no file type is configured or the file is
    malformed, and ``OSError`` when it cannot be read. Returns
    ``(sort, sorted_array)`` pairs in run order.
    """
    stream = _stream(out)
    if config.file_in is None:
        raise ValueError("no input file configured")
    if config.file_type is None:
        raise ValueError("no input file type configured")
    file_type = VarType(config.file_type)
    parse = parse_int if file_type == VarType.INT else parse_float
    original = read_array_file(config.file_in, parse)

    results: list[tuple[SortType, list]] = []
    for sort_type in config.sort_types_file:
        sort_type = SortType(sort_type)
        data = list(original)
        sort_function(sort_type)(data)
        _report_check(data, stream)
        if config.console_out:
            stream.write(
                "--------------\nBEFORE SORTING:\n"
                f"{format_prefix(original, FILE_PREFIX)}\n"
                f"{sort_type.label}\nsize: {len(original)}\n"
                f"type: {file_type.name}\narray after sorting:\n"
                f"{format_prefix(data, FILE_PREFIX)}\n"
            )
        results.append((sort_type, data))
    return results
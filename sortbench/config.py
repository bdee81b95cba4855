"""Benchmark configuration: the sections file format and the settings it holds."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from os import PathLike
from typing import Any, Optional, TypeVar, Union

from .generate import GenType
from .parsing import parse_positive_int
from .sorts import (
    heap_sort,
    insert_sort,
    quick_sort_left,
    quick_sort_middle,
    quick_sort_random,
    quick_sort_right,
    shell_sort_knuth,
    shell_sort_shell,
)

E = TypeVar("E", bound=Enum)


class VarType(IntEnum):
    """Element type of a benchmarked array."""

    INT = 0
    FLOAT = 1


class ArrType(IntEnum):
    """Arrangement of a generated array, as named in the configuration."""

    ARR_RAND = 0
    ARR_RAND_33 = 1
    ARR_RAND_66 = 2
    ARR_SORT = 3
    ARR_SORT_DESC = 4

    @property
    def label(self) -> str:
        """Human-readable name used in reports."""
        return _ARR_LABELS[self]

    @property
    def gen_type(self) -> GenType:
        """The generator arrangement this array type stands for."""
        return GenType(self.value)


class SortType(IntEnum):
    """Sorting algorithm, as named in the configuration."""

    INSERT_SORT = 0
    HEAP_SORT = 1
    QUICK_SORT_LEFT = 2
    QUICK_SORT_MIDDLE = 3
    QUICK_SORT_RIGHT = 4
    QUICK_SORT_RANDOM = 5
    SHELL_SORT_SHELL = 6
    SHELL_SORT_KNUTH = 7

    @property
    def label(self) -> str:
        """Human-readable name used in reports."""
        return _SORT_LABELS[self]


_ARR_LABELS = {
    ArrType.ARR_RAND: "gen Random",
    ArrType.ARR_RAND_33: "gen Random 33",
    ArrType.ARR_RAND_66: "gen Random 66",
    ArrType.ARR_SORT: "gen Sorted",
    ArrType.ARR_SORT_DESC: "gen sorted desc",
}

_SORT_LABELS = {
    SortType.INSERT_SORT: "Insert Sort",
    SortType.HEAP_SORT: "Heap Sort",
    SortType.QUICK_SORT_LEFT: "Quick Sort (left)",
    SortType.QUICK_SORT_MIDDLE: "Quick Sort (middle)",
    SortType.QUICK_SORT_RIGHT: "Quick Sort (right)",
    SortType.QUICK_SORT_RANDOM: "Quick Sort (random)",
    SortType.SHELL_SORT_SHELL: "Shell Sort (Shell)",
    SortType.SHELL_SORT_KNUTH: "Shell Sort (Knuth)",
}

_SORT_FUNCTIONS: dict[SortType, Callable[[MutableSequence[Any]], None]] = {
    SortType.INSERT_SORT: insert_sort,
    SortType.HEAP_SORT: heap_sort,
    SortType.QUICK_SORT_LEFT: quick_sort_left,
    SortType.QUICK_SORT_MIDDLE: quick_sort_middle,
    SortType.QUICK_SORT_RIGHT: quick_sort_right,
    SortType.QUICK_SORT_RANDOM: quick_sort_random,
    SortType.SHELL_SORT_SHELL: shell_sort_shell,
    SortType.SHELL_SORT_KNUTH: shell_sort_knuth,
}


class Section(Enum):
    """A section of the configuration file, valued by its header line."""

    ARR_INT = ".ARR_INT"
    ARR_SIZE_INT = ".ARR_SIZE_INT"
    SORT_INT = ".SORT_INT"
    ARR_FLOAT = ".ARR_FLOAT"
    ARR_SIZE_FLOAT = ".ARR_SIZE_FLOAT"
    SORT_FLOAT = ".SORT_FLOAT"
    FILE_IN = ".FILE_IN"
    FILE_TYPE = ".FILE_TYPE"
    SORT_FILE = ".SORT_FILE"
    FILE_OUT = ".FILE_OUT"
    CONSOLE_OUT = ".CONSOLE_OUT"


def map_name(text: str, enum_cls: type[E]) -> Optional[E]:
    """Return the member of ``enum_cls`` named by ``text`` (up to a newline), or None."""
    name = text.split("\n", 1)[0]
    return enum_cls.__members__.get(name)


def section_for(line: str) -> Optional[Section]:
    """Return the section that ``line`` opens, or None if it opens none."""
    try:
        return Section(line)
    except ValueError:
        return None


def sort_function(sort_type: SortType) -> Callable[[MutableSequence[Any]], None]:
    """Return the in-place sorting function for ``sort_type``."""
    return _SORT_FUNCTIONS[SortType(sort_type)]


def _append(target: list, value: Any) -> bool:
    if value is None:
        return False
    target.append(value)
    return True


@dataclass
class Config:
    """Settings read from a configuration file."""

    array_types_int: list[ArrType] = field(default_factory=list)
    array_types_float: list[ArrType] = field(default_factory=list)
    array_sizes_int: list[int] = field(default_factory=list)
    array_sizes_float: list[int] = field(default_factory=list)
    sort_types_int: list[SortType] = field(default_factory=list)
    sort_types_float: list[SortType] = field(default_factory=list)
    sort_types_file: list[SortType] = field(default_factory=list)
    file_in: Optional[str] = None
    file_type: Optional[VarType] = None
    file_out: Optional[str] = None
    console_out: bool = True

    def parse_line(self, section: Section, line: str) -> bool:
        """Apply one value line of ``section``; return whether it was accepted."""
        match section:
            case Section.ARR_INT:
                return _append(self.array_types_int, map_name(line, ArrType))
            case Section.ARR_FLOAT:
                return _append(self.array_types_float, map_name(line, ArrType))
            case Section.ARR_SIZE_INT | Section.ARR_SIZE_FLOAT:
                try:
                    size = parse_positive_int(line)
                except ValueError:
                    return False
                target = (
                    self.array_sizes_int
                    if section is Section.ARR_SIZE_INT
                    else self.array_sizes_float
                )
                target.append(size)
                return True
            case Section.SORT_INT:
                return _append(self.sort_types_int, map_name(line, SortType))
            case Section.SORT_FLOAT:
                return _append(self.sort_types_float, map_name(line, SortType))
            case Section.SORT_FILE:
                return _append(self.sort_types_file, map_name(line, SortType))
            case Section.FILE_TYPE:
                file_type = map_name(line, VarType)
                if file_type is None:
                    return False
                self.file_type = file_type
                return True
            case Section.FILE_IN:
                self.file_in = line
                return True
            case Section.FILE_OUT:
                self.file_out = line
                return True
            case Section.CONSOLE_OUT:
                if line == "FALSE":
                    self.console_out = False
                return True
        raise ValueError(f"unknown section: {section!r}")


def parse_config(lines: Iterable[str]) -> Config:
    """Build a Config from configuration lines.

    A line starting with ``.`` or ``#`` switches the current section; one that
    names no section (comments included) leaves no section active, so the
    value lines after it are ignored until the next known header.
    """
    config = Config()
    section: Optional[Section] = None
    for raw in lines:
        line = raw.split("\n", 1)[0]
        if not line:
            continue
        if line[0] in ".#":
            section = section_for(line)
        elif section is not None:
            config.parse_line(section, line)
    return config


def read_config(path: Union[str, PathLike]) -> Config:
    """Read and parse the configuration file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_config(handle)


def _format_list(label: str, values: Iterable[int]) -> str:
    items = list(values)
    return f"{label} ({len(items)}): " + "".join(f"{int(v)} " for v in items)


def format_config(config: Config) -> str:
    """Render the configuration as the report printed before a run."""
    file_type = {VarType.INT: "int", VarType.FLOAT: "float"}.get(config.file_type, "none")
    lines = [
        "=== CONFIG ===",
        _format_list("ArrayTypeInt", config.array_types_int),
        _format_list("ArrayTypeFloat", config.array_types_float),
        _format_list("ArraySizeInt", config.array_sizes_int),
        _format_list("ArraySizeFloat", config.array_sizes_float),
        _format_list("SortTypeInt", config.sort_types_int),
        _format_list("SortTypeFloat", config.sort_types_float),
        _format_list("SortTypeFile", config.sort_types_file),
        f"FileNameIn: {config.file_in if config.file_in is not None else '(null)'}",
        f"FileType: {file_type}",
        f"FileNameOut: {config.file_out if config.file_out is not None else '(null)'}",
        f"ConsoleOut: {'true' if config.console_out else 'false'}",
    ]
    return "\n".join(lines) + "\n"
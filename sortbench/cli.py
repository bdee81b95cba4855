"""Command-line entry point: read the configuration and run its benchmarks."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, TextIO

from .benchmark import full_test, full_test_file
from .config import Config, VarType, format_config, read_config

DEFAULT_CONFIG = "./config.txt"


def run_config(config: Config, out: Optional[TextIO] = None) -> None:
    """Run every benchmark that ``config`` fully describes."""
    stream = sys.stdout if out is None else out
    stream.write("\n=== RUN CONFIG ===\n")
    if config.array_sizes_int and config.array_types_int and config.sort_types_int:
        full_test(config, VarType.INT, out=stream)
    if config.array_sizes_float and config.array_types_float and config.sort_types_float:
        full_test(config, VarType.FLOAT, out=stream)
    if config.file_in and config.file_type is not None:
        try:
            full_test_file(config, stream)
        except (OSError, ValueError) as exc:
            stream.write(f"cannot read input file: {exc}\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Read the configuration file, print it and run it."""
    parser = argparse.ArgumentParser(
        prog="sortbench", description="Benchmark sorting algorithms."
    )
    parser.add_argument(
        "config", nargs="?", default=DEFAULT_CONFIG, help="configuration file"
    )
    args = parser.parse_args(argv)
    try:
        config = read_config(args.config)
    except OSError:
        print("Cannot open config file", file=sys.stderr)
        return 1
    sys.stdout.write(format_config(config))
    run_config(config, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Benchmark of classic sorting algorithms on generated or file-loaded arrays."""

__version__ = "0.1.0"
__all__ = ["benchmark", "cli", "config", "generate", "parsing", "sorts"]
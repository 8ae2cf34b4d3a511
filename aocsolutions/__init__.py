"""Advent of Code puzzle solvers for 2023 and 2024, with shared text-parsing helpers."""

__version__ = "0.1.0"
"""Helpers that turn decimal strings and integer lists into field values."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

_DECIMAL = re.compile(r"[+-]?[0-9]+")


def str_array_to_int_list(values: Iterable[str]) -> list[int]:
    """Parse base-10 strings into integers."""
    result = []
    for text in values:
        if not _DECIMAL.fullmatch(text):
            raise ValueError(f"not a decimal integer: {text!r}")
        result.append(int(text))
    return result


def ints_to_extension(values: Sequence[int]) -> tuple[int, int]:
    """Build a quadratic extension element from the first two integers."""
    if len(values) < 2:
        raise ValueError("an extension element needs two coefficients")
    return (values[0], values[1])


def ints_to_extension_list(values: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Build a list of quadratic extension elements from integer pairs."""
    return [ints_to_extension(pair) for pair in values]
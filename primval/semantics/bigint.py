"""Unbounded integers.

Scalar values store their payload as Python ints, which are arbitrary
precision: a `u128` constant or an out-of-range `u8` is held exactly, and the
declared width lives in a separate `IntegerType` tag. This module gives that
representation its JSON codec, its canonical rendering and a three-way
comparison.
"""
from __future__ import annotations
import re
import sys
from contextlib import contextmanager
from typing import Any, Iterator, TypeAlias

from primval.internals.errors import DecodeError

BigInt: TypeAlias = int

# Optionally signed run of decimal digits; no whitespace, underscores or exponents.
INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


@contextmanager
def unlimited_int_digits() -> Iterator[None]:
    """Lift the interpreter's int <-> str digit limit for the enclosed block."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def parse_big_int(text: str) -> BigInt:
    """`int(text)` for decimal literals of any length."""
    with unlimited_int_digits():
        return int(text)


def big_int_of_json(json: Any, path: str = "$") -> BigInt:
    """Decode a native JSON integer or a string-tagged integer literal.

    Raises:
        DecodeError: CE4001 for any other JSON shape (floats, booleans,
        null, arrays, objects, non-numeric strings).
    """
    # bool is a subclass of int
    if isinstance(json, int) and not isinstance(json, bool):
        return int(json)
    if isinstance(json, str) and INTEGER_LITERAL.fullmatch(json):
        return parse_big_int(json)
    raise DecodeError("CE4001", path)


def big_int_to_json(i: BigInt) -> str:
    """Encode as a string-tagged literal, whatever the magnitude."""
    return show_big_int(i)


def show_big_int(i: BigInt) -> str:
    with unlimited_int_digits():
        return str(i)


def compare_big_int(i0: BigInt, i1: BigInt) -> int:
    return (i0 > i1) - (i0 < i1)

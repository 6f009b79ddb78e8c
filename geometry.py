from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Union

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

decimal_pattern = re.compile(r'^[-+]?[0-9]+$')
hex_pattern = re.compile(r'^[-+]?(?:0[xX])?[0-9a-fA-F]+$')


@dataclass(frozen=True)
class Rectangle:
    id: int
    color: int
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class Circle:
    id: int
    color: int
    x: int
    y: int
    radius: int


@dataclass(frozen=True)
class Triangle:
    id: int
    color: int
    ax: int
    ay: int
    bx: int
    by: int
    cx: int
    cy: int

    def vertices(self) -> list[tuple[int, int]]:
        return [(self.ax, self.ay), (self.bx, self.by), (self.cx, self.cy)]


Command = Union[Rectangle, Circle, Triangle]

SHAPE_TYPES = (Rectangle, Circle, Triangle)


def parse_integer_literal(value: str, base: int = 10) -> int | None:
    """Parse the text between the quotes of a property value.

    Returns None unless the whole string is an integer in ``base`` that fits
    a signed 64-bit value.
    """
    if not value or not isinstance(value, str):
        return None

    pattern = hex_pattern if base == 16 else decimal_pattern
    if not pattern.match(value):
        return None

    number = int(value, base)
    if number < INT64_MIN or number > INT64_MAX:
        return None
    return number


def clamp(x, minx, maxx):
    return max(min(x, maxx), minx)

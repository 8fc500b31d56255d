"""RGBA colour with component-wise arithmetic."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from numbers import Real
from typing import Callable


@dataclass(frozen=True)
class Color:
    """An RGBA colour; arithmetic works per component with colours or scalars."""

    r: float
    g: float
    b: float
    a: float

    def _combine(self, other: object, op: Callable[[float, float], float]):
        if isinstance(other, Color):
            return Color(op(self.r, other.r), op(self.g, other.g), op(self.b, other.b), op(self.a, other.a))
        if isinstance(other, Real) and not isinstance(other, bool):
            value = float(other)
            return Color(op(self.r, value), op(self.g, value), op(self.b, value), op(self.a, value))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)


RED = Color(1.0, 0.0, 0.0, 1.0)
GREEN = Color(0.0, 1.0, 0.0, 1.0)
BLUE = Color(0.0, 0.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
YELLOW = Color(1.0, 1.0, 0.0, 1.0)
MAGENTA = Color(1.0, 0.0, 1.0, 1.0)
CYAN = Color(0.0, 1.0, 1.0, 1.0)
ORANGE = Color(1.0, 0.6, 0.0, 1.0)
PURPLE = Color(0.5, 0.0, 0.5, 1.0)
PINK = Color(1.0, 0.8, 0.8, 1.0)
BROWN = Color(0.6, 0.2, 0.2, 1.0)
TEAL = Color(0.0, 0.5, 0.5, 1.0)
GRAY = Color(0.5, 0.5, 0.5, 1.0)
# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

from dataclasses import dataclass
from math import floor

from raycaster.misc import are_close, EPSILON


def _clamp(x: float, lower: float = 0.0, upper: float = 1.0) -> float:
    return max(lower, min(upper, x))


@dataclass(eq=False)
class Color:
    """
    A RGB color

    The class has three floating-point members: `r` (red), `g` (green), and `b` (blue). Values are not
    clamped: lighting can produce channels greater than 1, and encoders are responsible for clipping them.
    """
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other):
        """Sum two colors"""
        return Color(
            self.r + other.r,
            self.g + other.g,
            self.b + other.b,
        )

    def __sub__(self, other):
        """Subtract two colors"""
        return Color(
            self.r - other.r,
            self.g - other.g,
            self.b - other.b,
        )

    def __mul__(self, other):
        """Multiply two colors (Hadamard product), or one color with one number"""
        if isinstance(other, Color):
            return Color(
                self.r * other.r,
                self.g * other.g,
                self.b * other.b,
            )

        return Color(
            self.r * other,
            self.g * other,
            self.b * other,
        )

    def __rmul__(self, scalar):
        return self * scalar

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.is_close(other)

    def is_close(self, other, epsilon=EPSILON):
        """Return True if the three RGB components of two colors are close by less than `epsilon`"""
        return (are_close(self.r, other.r, epsilon=epsilon) and
                are_close(self.g, other.g, epsilon=epsilon) and
                are_close(self.b, other.b, epsilon=epsilon))

    def clamp(self, lower: float = 0.0, upper: float = 1.0):
        """Return a new color whose components lie in the range [lower, upper]"""
        return Color(
            _clamp(self.r, lower, upper),
            _clamp(self.g, lower, upper),
            _clamp(self.b, lower, upper),
        )

    def to_bytes(self):
        """Convert the color into a (r, g, b) tuple of integers in the range [0, 255]

        Each component is clamped to [0, 1] before being scaled and rounded to the nearest integer."""
        clamped = self.clamp()
        return (
            floor(clamped.r * 255 + 0.5),
            floor(clamped.g * 255 + 0.5),
            floor(clamped.b * 255 + 0.5),
        )


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)

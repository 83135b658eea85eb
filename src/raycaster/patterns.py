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

from math import floor, sqrt

from raycaster.colors import Color, BLACK, WHITE
from raycaster.geometry import Tuple
from raycaster.matrices import Matrix, identity


class Pattern:
    """A procedural pattern

    This abstract class represents a function that associates a color with each point of the pattern
    space. Each pattern has two colors, `color_a` and `color_b`, and a `transformation` placing the pattern
    space within the object space of the shape it is painted on. Concrete classes must redefine
    :meth:`.Pattern.color_at`.

    The inverse of the transformation is computed immediately, so a singular matrix raises
    :class:`.SingularMatrixError` when the pattern is created."""

    def __init__(self, color_a: Color = WHITE, color_b: Color = BLACK, transformation: Matrix = None):
        self.color_a = color_a
        self.color_b = color_b
        self.transformation = transformation if transformation is not None else identity(4)
        self.inverse_transformation = self.transformation.inverse()

    def __eq__(self, other):
        return (type(self) is type(other) and
                self.color_a.is_close(other.color_a) and
                self.color_b.is_close(other.color_b) and
                self.transformation.is_close(other.transformation))

    def __repr__(self):
        return f"{type(self).__name__}(color_a={self.color_a}, color_b={self.color_b})"

    def color_at(self, pattern_point: Tuple) -> Color:
        """Return the color of the pattern at a point expressed in pattern space"""
        raise NotImplementedError("Method Pattern.color_at is abstract and cannot be called")

    def color_at_object(self, object_point: Tuple) -> Color:
        """Return the color of the pattern at a point expressed in the object space of a shape"""
        return self.color_at(self.inverse_transformation * object_point)

    def color_at_shape(self, shape, world_point: Tuple) -> Color:
        """Return the color of the pattern painted on `shape` at a point in world space"""
        return self.color_at_object(shape.world_to_object(world_point))


class StripePattern(Pattern):
    """Stripes alternating along the X axis, each one unit wide"""

    def color_at(self, pattern_point: Tuple) -> Color:
        return self.color_a if floor(pattern_point.x) % 2 == 0 else self.color_b


class GradientPattern(Pattern):
    """A linear blend from `color_a` to `color_b`, repeating every unit along the X axis"""

    def color_at(self, pattern_point: Tuple) -> Color:
        fraction = pattern_point.x - floor(pattern_point.x)
        return self.color_a + (self.color_b - self.color_a) * fraction


class RingPattern(Pattern):
    """Concentric rings around the Y axis, each one unit thick"""

    def color_at(self, pattern_point: Tuple) -> Color:
        distance = sqrt(pattern_point.x ** 2 + pattern_point.z ** 2)
        return self.color_a if floor(distance) % 2 == 0 else self.color_b


class CheckerPattern3D(Pattern):
    """Alternating unit cubes filling the 3D space"""

    def color_at(self, pattern_point: Tuple) -> Color:
        parity = floor(pattern_point.x) + floor(pattern_point.y) + floor(pattern_point.z)
        return self.color_a if parity % 2 == 0 else self.color_b

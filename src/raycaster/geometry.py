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

import math
from dataclasses import dataclass

from raycaster.misc import are_close, EPSILON


@dataclass(eq=False)
class Tuple:
    """A homogeneous 4-tuple

    This class has four floating-point fields: `x`, `y`, `z`, and `w`. If `w` is 1 the tuple represents a point,
    if it is 0 it represents a vector. Use the functions :func:`point` and :func:`vector` to build them.

    Arithmetic does not check the kind of its operands: it is up to the caller to avoid meaningless operations
    like the sum of two points."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def is_point(self):
        """Return True if the tuple represents a point in space"""
        return are_close(self.w, 1.0)

    def is_vector(self):
        """Return True if the tuple represents a direction"""
        return are_close(self.w, 0.0)

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.is_close(other)

    def is_close(self, other, epsilon=EPSILON):
        """Return True if the four components of the tuples differ by less than `epsilon`"""
        assert isinstance(other, Tuple)
        return (are_close(self.x, other.x, epsilon=epsilon) and
                are_close(self.y, other.y, epsilon=epsilon) and
                are_close(self.z, other.z, epsilon=epsilon) and
                are_close(self.w, other.w, epsilon=epsilon))

    def __add__(self, other):
        """Sum two tuples: point + vector is a point, vector + vector is a vector"""
        if isinstance(other, Tuple):
            return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)
        else:
            raise TypeError(f"Unable to run Tuple.__add__ on a {type(self)} and a {type(other)}.")

    def __sub__(self, other):
        """Subtract two tuples: point - point is a vector, point - vector is a point"""
        if isinstance(other, Tuple):
            return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)
        else:
            raise TypeError(f"Unable to run Tuple.__sub__ on a {type(self)} and a {type(other)}.")

    def __neg__(self):
        """Return the reversed tuple"""
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar):
        """Compute the product between a tuple and a scalar"""
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar):
        return self * scalar

    def __truediv__(self, scalar):
        """Divide each component of the tuple by a scalar"""
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __getitem__(self, item):
        """Return the i-th component of a tuple, starting from 0"""
        assert (item >= 0) and (item < 4), f"wrong tuple index {item}"
        return (self.x, self.y, self.z, self.w)[item]

    def dot(self, other):
        """Compute the dot product between two tuples, including the `w` component"""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other):
        """Compute the cross (outer) product between two vectors

        Only the `x`, `y`, `z` components are used; the result is always a vector."""
        return vector(x=self.y * other.z - self.z * other.y,
                      y=self.z * other.x - self.x * other.z,
                      z=self.x * other.y - self.y * other.x)

    def magnitude(self):
        """Return the Euclidean length of the `x`, `y`, `z` part of a tuple; `w` is not used"""
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)

    def normalize(self):
        """Return a tuple with the same direction and unit length

        Raise ``ZeroDivisionError`` if the tuple has zero length."""
        return self / self.magnitude()

    def reflect(self, normal):
        """Reflect this vector around `normal`, which must be normalized"""
        return self - normal * 2 * self.dot(normal)


def point(x=0.0, y=0.0, z=0.0):
    """Return a :class:`Tuple` representing a point"""
    return Tuple(x, y, z, 1.0)


def vector(x=0.0, y=0.0, z=0.0):
    """Return a :class:`Tuple` representing a vector"""
    return Tuple(x, y, z, 0.0)


ORIGIN = point(0.0, 0.0, 0.0)

VEC_X = vector(1.0, 0.0, 0.0)
VEC_Y = vector(0.0, 1.0, 0.0)
VEC_Z = vector(0.0, 0.0, 1.0)

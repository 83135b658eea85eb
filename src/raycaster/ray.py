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

from __future__ import annotations

from dataclasses import dataclass

from raycaster.geometry import Tuple
from raycaster.matrices import Matrix
from raycaster.misc import EPSILON


class InvalidRayError(Exception):
    """Raised when a ray is built from an origin which is not a point or a direction which is not a vector"""

    def __init__(self, error_message):
        super().__init__(error_message)


@dataclass
class Ray:
    """A ray of light propagating in space

    The class contains the following members:

    -   `origin` (``Tuple``): the point where the ray originated
    -   `dir` (``Tuple``): the vector along which this ray propagates. It is not required to be normalized.

    Creating a ray whose origin is not a point or whose direction is not a vector raises
    :class:`.InvalidRayError`."""

    origin: Tuple
    dir: Tuple

    def __post_init__(self):
        if not self.origin.is_point():
            raise InvalidRayError(f"the origin of a ray must be a point, got {self.origin}")

        if not self.dir.is_vector():
            raise InvalidRayError(f"the direction of a ray must be a vector, got {self.dir}")

    def is_close(self, other: Ray, epsilon=EPSILON):
        """Check if two rays are similar enough to be considered equal"""
        return (self.origin.is_close(other.origin, epsilon=epsilon) and
                self.dir.is_close(other.dir, epsilon=epsilon))

    def at(self, t):
        """Compute the point along the ray's path at some distance from the origin

        Return a point whose distance from the ray's origin is equal to `t`, measured in units of the
        length of `Ray.dir`."""
        return self.origin + self.dir * t

    def transform(self, transformation: Matrix):
        """Transform a ray

        This method returns a new ray whose origin and direction are the transformation of the original ray"""
        return Ray(origin=transformation * self.origin,
                   dir=transformation * self.dir)

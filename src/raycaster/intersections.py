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
from typing import TYPE_CHECKING, List, Optional, Union

from raycaster.geometry import Tuple
from raycaster.misc import EPSILON
from raycaster.ray import Ray

if TYPE_CHECKING:
    from raycaster.shapes import Shape


@dataclass
class Intersection:
    """A ray-shape intersection

    -   `t`: the value of the ray parameter where the hit happened. It can be negative, if the shape is
        behind the origin of the ray
    -   `shape`: the shape that was hit"""

    t: float
    shape: Shape

    def is_close(self, other: Union[Intersection, None], epsilon=EPSILON) -> bool:
        """Check whether two `Intersection` represent the same hit event or not"""
        if not other:
            return False

        return (abs(self.t - other.t) < epsilon) and (self.shape is other.shape)

    def prepare_computations(self, ray: Ray) -> ComputedIntersection:
        """Compute the quantities needed to shade this intersection, given the ray that produced it"""
        world_point = ray.at(self.t)
        eye = -ray.dir
        normal = self.shape.normal_at(world_point)

        inside = normal.dot(eye) < 0.0
        if inside:
            normal = -normal

        return ComputedIntersection(
            t=self.t,
            shape=self.shape,
            point=world_point,
            eye=eye,
            normal=normal,
            inside=inside,
            over_point=world_point + normal * EPSILON,
        )


class Intersections:
    """A collection of :class:`.Intersection` objects, always sorted by increasing `t`

    The class behaves like a read-only list. Use :meth:`.Intersections.hit` to find the intersection that is
    visible from the origin of the ray."""

    intersections: List[Intersection]

    def __init__(self, *intersections: Intersection):
        self.intersections = sorted(intersections, key=lambda x: x.t)

    @staticmethod
    def merge(*groups: Intersections) -> Intersections:
        """Return a new collection holding all the intersections in `groups`"""
        return Intersections(*[x for group in groups for x in group])

    def __len__(self):
        return len(self.intersections)

    def __getitem__(self, item):
        return self.intersections[item]

    def __iter__(self):
        return iter(self.intersections)

    def __bool__(self):
        return bool(self.intersections)

    def __repr__(self):
        return f"Intersections({', '.join(str(x.t) for x in self.intersections)})"

    def t_values(self) -> List[float]:
        return [x.t for x in self.intersections]

    def hit(self) -> Optional[Intersection]:
        """Return the intersection with the smallest positive `t`, or ``None`` if there is none"""
        for intersection in self.intersections:
            if intersection.t > 0.0:
                return intersection

        return None


@dataclass
class ComputedIntersection:
    """
    Information about an intersection, ready to be used for shading

    -   `t`, `shape`: the same as in :class:`.Intersection`
    -   `point`: the point in world space where the hit happened
    -   `eye`: the vector pointing back towards the origin of the ray
    -   `normal`: the normalized surface normal, flipped so that it faces the eye
    -   `inside`: True if the origin of the ray is inside the shape (i.e., the normal was flipped)
    -   `over_point`: `point` moved a little along the normal, used to cast shadow rays without hitting
        the surface itself
    """
    t: float
    shape: Shape
    point: Tuple
    eye: Tuple
    normal: Tuple
    inside: bool
    over_point: Tuple

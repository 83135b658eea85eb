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

from math import sqrt
from typing import List, Union

from raycaster.geometry import Tuple, ORIGIN, vector
from raycaster.intersections import Intersection, Intersections
from raycaster.materials import Material
from raycaster.matrices import Matrix, identity
from raycaster.misc import EPSILON
from raycaster.ray import Ray


class Shape:
    """A generic 3D shape

    This is an abstract class, and you should only use it to derive concrete classes: the set of concrete
    shapes is closed, and it is listed in :data:`.AnyShape`. Derived classes must redefine the methods
    :meth:`.Shape.local_intersect` and :meth:`.Shape.local_normal_at`, which work in object space; this class
    takes care of converting rays, points, and normals from and to world space.

    The inverse of the transformation is computed when the shape is created, so a singular matrix
    raises :class:`.SingularMatrixError` immediately.
    """

    def __init__(self, transformation: Matrix = None, material: Material = None):
        """Create a shape, potentially associating a transformation and a material to it"""
        self.transformation = transformation if transformation is not None else identity(4)
        self.material = material if material is not None else Material()

        self.inverse_transformation = self.transformation.inverse()
        self.normal_transformation = self.inverse_transformation.transpose()

    def __repr__(self):
        return f"{type(self).__name__}(transformation={self.transformation!r}, material={self.material!r})"

    def world_to_object(self, world_point: Tuple) -> Tuple:
        """Convert a point from world space into the object space of this shape"""
        return self.inverse_transformation * world_point

    def intersect(self, ray: Ray) -> Intersections:
        """Compute all the intersections between a ray and this shape

        Intersections behind the origin of the ray (negative `t`) are included as well."""
        local_ray = ray.transform(self.inverse_transformation)
        return Intersections(*[Intersection(t, self) for t in self.local_intersect(local_ray)])

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Return the normalized surface normal at a point (in world space) lying on the shape"""
        local_normal = self.local_normal_at(self.world_to_object(world_point))

        world_normal = self.normal_transformation * local_normal
        world_normal.w = 0.0
        return world_normal.normalize()

    def local_intersect(self, ray: Ray) -> List[float]:
        """Return the values of `t` where a ray (in object space) intersects the shape"""
        raise NotImplementedError(
            "Shape.local_intersect is an abstract method and cannot be called directly"
        )

    def local_normal_at(self, object_point: Tuple) -> Tuple:
        """Return the normal at a point (in object space) on the surface of the shape"""
        raise NotImplementedError(
            "Shape.local_normal_at is an abstract method and cannot be called directly"
        )


class Sphere(Shape):
    """A 3D unit sphere centered on the origin of the axes"""

    def __init__(self, transformation: Matrix = None, material: Material = None):
        """Create a unit sphere, potentially associating a transformation to it"""
        super().__init__(transformation, material)

    def local_intersect(self, ray: Ray) -> List[float]:
        """Solve the quadratic equation for the intersection of a ray with the unit sphere

        Both roots are returned, even when they coincide (a tangent ray) or are negative."""
        origin_vec = ray.origin - ORIGIN
        a = ray.dir.dot(ray.dir)
        b = 2.0 * origin_vec.dot(ray.dir)
        c = origin_vec.dot(origin_vec) - 1.0

        delta = b * b - 4.0 * a * c
        if delta < 0.0:
            return []

        sqrt_delta = sqrt(delta)
        return [(-b - sqrt_delta) / (2.0 * a), (-b + sqrt_delta) / (2.0 * a)]

    def local_normal_at(self, object_point: Tuple) -> Tuple:
        return object_point - ORIGIN


class Plane(Shape):
    """A 3D infinite plane parallel to the x and z axis and passing through the origin"""

    def __init__(self, transformation: Matrix = None, material: Material = None):
        """Create a xz plane, potentially associating a transformation to it"""
        super().__init__(transformation, material)

    def local_intersect(self, ray: Ray) -> List[float]:
        """Return the single intersection of a ray with the plane y = 0

        A ray parallel to the plane (including a ray lying on it) never hits it."""
        if abs(ray.dir.y) < EPSILON:
            return []

        return [-ray.origin.y / ray.dir.y]

    def local_normal_at(self, object_point: Tuple) -> Tuple:
        return vector(0.0, 1.0, 0.0)


AnyShape = Union[Sphere, Plane]

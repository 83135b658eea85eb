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

from typing import List

from raycaster.colors import Color
from raycaster.geometry import Tuple
from raycaster.intersections import ComputedIntersection, Intersections
from raycaster.lights import PointLight
from raycaster.materials import Material
from raycaster.misc import EPSILON
from raycaster.ray import Ray
from raycaster.shapes import AnyShape, Sphere
from raycaster.transformations import scaling


class World:
    """A class holding a list of shapes and one point light, which make a «world»

    You can add shapes to a world using :meth:`.World.add_shape`. Typically, you call
    :meth:`.World.color_at` to compute the color seen along a ray. A world must not be modified while
    a camera is rendering it.
    """

    shapes: List[AnyShape]
    light: PointLight

    def __init__(self, shapes: List[AnyShape] = None, light: PointLight = None):
        self.shapes = list(shapes) if shapes is not None else []
        self.light = light if light is not None else PointLight()

    def add_shape(self, shape: AnyShape):
        """Append a new shape to this world"""
        self.shapes.append(shape)

    def intersect(self, ray: Ray) -> Intersections:
        """Return all the intersections between a ray and the shapes in this world, sorted by `t`"""
        return Intersections.merge(*[shape.intersect(ray) for shape in self.shapes])

    def shade_hit(self, comps: ComputedIntersection) -> Color:
        """Compute the color of an intersection, taking shadows into account"""
        in_shadow = self.is_shadowed(comps.over_point)
        return comps.shape.material.lighting(
            point=comps.point,
            light=self.light,
            eye=comps.eye,
            normal=comps.normal,
            in_shadow=in_shadow,
            shape=comps.shape,
        )

    def color_at(self, ray: Ray) -> Color:
        """Return the color seen along a ray, or black if the ray does not hit anything"""
        hit = self.intersect(ray).hit()
        if not hit:
            return Color(0.0, 0.0, 0.0)

        return self.shade_hit(hit.prepare_computations(ray))

    def is_shadowed(self, point: Tuple) -> bool:
        """Return True if some shape lies between `point` and the light"""
        direction = self.light.position - point
        distance = direction.magnitude()
        if distance < EPSILON:
            return False

        hit = self.intersect(Ray(origin=point, dir=direction.normalize())).hit()
        return (hit is not None) and (hit.t < distance)


def default_world() -> World:
    """Return a world with two concentric spheres lit by a white light

    This is the reference world used to check the lighting pipeline. The light is at (-10, 10, -10); the outer
    sphere has radius 1 and a green-yellow color, and the inner one has radius 0.5 and the default material."""
    outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transformation=scaling(0.5, 0.5, 0.5))
    return World(shapes=[outer, inner], light=PointLight())

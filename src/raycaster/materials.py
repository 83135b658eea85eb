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
from dataclasses import dataclass, field
from typing import Optional

from raycaster.colors import Color, BLACK, WHITE
from raycaster.geometry import Tuple
from raycaster.lights import PointLight
from raycaster.misc import are_close, EPSILON
from raycaster.patterns import Pattern


class InvalidMaterialError(Exception):
    """Raised when a material is created with meaningless parameters"""

    def __init__(self, error_message):
        super().__init__(error_message)


@dataclass
class Material:
    """A material following the Phong reflection model

    The class has the following fields:

    -   `color`: the base color of the surface
    -   `ambient`: the fraction of the light that is reflected regardless of the geometry
    -   `diffuse`: the weight of the Lambertian term
    -   `specular`: the weight of the highlight
    -   `shininess`: the exponent controlling how small the highlight is; it must be positive
    -   `pattern`: an optional :class:`.Pattern`. If present, it replaces `color`

    The three coefficients are usually in the range [0, 1], but this is not enforced."""

    color: Color = field(default_factory=lambda: Color(WHITE.r, WHITE.g, WHITE.b))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    pattern: Optional[Pattern] = None

    def __post_init__(self):
        for name in ("ambient", "diffuse", "specular", "shininess"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidMaterialError(f"the {name} coefficient must be a finite number")

        if self.shininess <= 0.0:
            raise InvalidMaterialError(f"shininess must be positive, got {self.shininess}")

    def is_close(self, other):
        return (self.color.is_close(other.color) and
                are_close(self.ambient, other.ambient) and
                are_close(self.diffuse, other.diffuse) and
                are_close(self.specular, other.specular) and
                are_close(self.shininess, other.shininess) and
                self.pattern == other.pattern)

    def color_at(self, world_point: Tuple, shape=None) -> Color:
        """Return the color of the surface at `world_point`

        If the material has a pattern and `shape` is not ``None``, the point is converted into the object space
        of the shape before evaluating the pattern; without a shape, the point is used as it is."""
        if self.pattern is None:
            return self.color

        if shape is None:
            return self.pattern.color_at_object(world_point)

        return self.pattern.color_at_shape(shape, world_point)

    def lighting(self, point: Tuple, light: PointLight, eye: Tuple, normal: Tuple,
                 in_shadow: bool = False, shape=None) -> Color:
        """Compute the color of a point on a surface made of this material

        The point at `point` is lit by `light` and watched from the direction `eye`; `normal` is the
        normalized surface normal at the point. When `in_shadow` is True, only the ambient term is returned."""
        effective_color = self.color_at(point, shape) * light.intensity
        ambient = effective_color * self.ambient

        if in_shadow:
            return ambient

        to_light = light.position - point
        if to_light.magnitude() < EPSILON:
            # The light sits on the surface
            return ambient

        lightv = to_light.normalize()
        light_dot_normal = lightv.dot(normal)

        if light_dot_normal < 0.0:
            # The light is on the other side of the surface
            return ambient

        diffuse = effective_color * self.diffuse * light_dot_normal

        reflectv = (-lightv).reflect(normal)
        reflect_dot_eye = reflectv.dot(eye)

        if reflect_dot_eye <= 0.0:
            specular = BLACK
        else:
            specular = light.intensity * (self.specular * math.pow(reflect_dot_eye, self.shininess))

        return ambient + diffuse + specular

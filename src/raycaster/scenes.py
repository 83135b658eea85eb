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
from math import pi

from raycaster.camera import Camera
from raycaster.colors import Color
from raycaster.geometry import point, vector
from raycaster.lights import PointLight
from raycaster.materials import Material
from raycaster.patterns import CheckerPattern3D, RingPattern, StripePattern
from raycaster.shapes import Plane, Sphere
from raycaster.transformations import rotation_x, rotation_z, scaling, translation, view_transform
from raycaster.world import World, default_world


@dataclass
class Scene:
    """A world together with the camera that looks at it"""
    world: World
    camera: Camera


def demo_scene(width: int = 320, height: int = 240, field_of_view: float = pi / 3) -> Scene:
    """Build a scene with three spheres resting on a checkered floor, in front of a ringed wall"""
    floor = Plane(material=Material(
        specular=0.0,
        pattern=CheckerPattern3D(
            color_a=Color(1.0, 0.9, 0.9),
            color_b=Color(0.3, 0.25, 0.25),
        ),
    ))

    wall = Plane(
        transformation=translation(0.0, 0.0, 5.0) * rotation_x(pi / 2),
        material=Material(
            specular=0.0,
            pattern=RingPattern(
                color_a=Color(0.9, 0.9, 1.0),
                color_b=Color(0.6, 0.6, 0.8),
                transformation=scaling(0.5, 0.5, 0.5),
            ),
        ),
    )

    middle = Sphere(
        transformation=translation(-0.5, 1.0, 0.5),
        material=Material(
            diffuse=0.7,
            specular=0.3,
            pattern=StripePattern(
                color_a=Color(0.5, 1.0, 0.1),
                color_b=Color(0.1, 0.5, 0.1),
                transformation=rotation_z(pi / 4) * scaling(0.2, 0.2, 0.2),
            ),
        ),
    )

    right = Sphere(
        transformation=translation(1.5, 0.5, -0.5) * scaling(0.5, 0.5, 0.5),
        material=Material(color=Color(0.5, 1.0, 0.1), diffuse=0.7, specular=0.3),
    )

    left = Sphere(
        transformation=translation(-1.5, 0.33, -0.75) * scaling(0.33, 0.33, 0.33),
        material=Material(color=Color(1.0, 0.8, 0.1), diffuse=0.7, specular=0.3),
    )

    world = World(
        shapes=[floor, wall, left, middle, right],
        light=PointLight(position=point(-10.0, 10.0, -10.0), intensity=Color(1.0, 1.0, 1.0)),
    )

    camera = Camera(width, height, field_of_view, transformation=view_transform(
        point(0.0, 1.5, -5.0),
        point(0.0, 1.0, 0.0),
        vector(0.0, 1.0, 0.0),
    ))

    return Scene(world=world, camera=camera)


def reference_scene(width: int = 11, height: int = 11, field_of_view: float = pi / 2) -> Scene:
    """Build a scene showing :func:`.default_world` from five units in front of it"""
    camera = Camera(width, height, field_of_view, transformation=view_transform(
        point(0.0, 0.0, -5.0),
        point(0.0, 0.0, 0.0),
        vector(0.0, 1.0, 0.0),
    ))

    return Scene(world=default_world(), camera=camera)


SCENES = {
    "demo": demo_scene,
    "default": reference_scene,
}

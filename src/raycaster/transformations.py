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

from math import sin, cos

from raycaster.geometry import Tuple
from raycaster.matrices import Matrix


def translation(x: float, y: float, z: float):
    """Return a 4×4 :class:`.Matrix` encoding a rigid translation

    The parameters specify the amount of shift to be applied along the three axes."""
    return Matrix([[1.0, 0.0, 0.0, x],
                   [0.0, 1.0, 0.0, y],
                   [0.0, 0.0, 1.0, z],
                   [0.0, 0.0, 0.0, 1.0]])


def scaling(x: float, y: float, z: float):
    """Return a 4×4 :class:`.Matrix` encoding a scaling

    The parameters specify the amount of scaling along the three directions X, Y, Z. A negative value
    produces a reflection."""
    return Matrix([[x, 0.0, 0.0, 0.0],
                   [0.0, y, 0.0, 0.0],
                   [0.0, 0.0, z, 0.0],
                   [0.0, 0.0, 0.0, 1.0]])


def rotation_x(angle_rad: float):
    """Return a 4×4 :class:`.Matrix` encoding a rotation around the X axis

    The parameter `angle_rad` specifies the rotation angle (in radians). The positive sign is
    given by the right-hand rule."""
    sinang, cosang = sin(angle_rad), cos(angle_rad)
    return Matrix([[1.0, 0.0, 0.0, 0.0],
                   [0.0, cosang, -sinang, 0.0],
                   [0.0, sinang, cosang, 0.0],
                   [0.0, 0.0, 0.0, 1.0]])


def rotation_y(angle_rad: float):
    """Return a 4×4 :class:`.Matrix` encoding a rotation around the Y axis

    The parameter `angle_rad` specifies the rotation angle (in radians). The positive sign is
    given by the right-hand rule."""
    sinang, cosang = sin(angle_rad), cos(angle_rad)
    return Matrix([[cosang, 0.0, sinang, 0.0],
                   [0.0, 1.0, 0.0, 0.0],
                   [-sinang, 0.0, cosang, 0.0],
                   [0.0, 0.0, 0.0, 1.0]])


def rotation_z(angle_rad: float):
    """Return a 4×4 :class:`.Matrix` encoding a rotation around the Z axis

    The parameter `angle_rad` specifies the rotation angle (in radians). The positive sign is
    given by the right-hand rule."""
    sinang, cosang = sin(angle_rad), cos(angle_rad)
    return Matrix([[cosang, -sinang, 0.0, 0.0],
                   [sinang, cosang, 0.0, 0.0],
                   [0.0, 0.0, 1.0, 0.0],
                   [0.0, 0.0, 0.0, 1.0]])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float):
    """Return a 4×4 :class:`.Matrix` encoding a shear

    Each parameter moves one coordinate in proportion to another one: e.g., `xy` moves `x` in
    proportion to `y`."""
    return Matrix([[1.0, xy, xz, 0.0],
                   [yx, 1.0, yz, 0.0],
                   [zx, zy, 1.0, 0.0],
                   [0.0, 0.0, 0.0, 1.0]])


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple):
    """Return the transformation that orients the world as seen by an eye

    The eye sits at `from_point` and looks towards `to_point`; `up` is a vector telling roughly where
    «up» is, and it does not need to be exactly perpendicular to the viewing direction."""
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)

    orientation = Matrix([[left.x, left.y, left.z, 0.0],
                          [true_up.x, true_up.y, true_up.z, 0.0],
                          [-forward.x, -forward.y, -forward.z, 0.0],
                          [0.0, 0.0, 0.0, 1.0]])

    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)

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

from dataclasses import dataclass, field

from raycaster.colors import Color, WHITE
from raycaster.geometry import Tuple, point


@dataclass
class PointLight:
    """A point light

    This class holds information about a point light (a Dirac's delta in the rendering equation). The class has
    the following fields:

    -   `position`: a point holding the position of the light in 3D space
    -   `intensity`: the color of the light (an instance of :class:`.Color`). The intensity does not decrease
        with the distance from the light."""

    position: Tuple = field(default_factory=lambda: point(-10.0, 10.0, -10.0))
    intensity: Color = field(default_factory=lambda: Color(WHITE.r, WHITE.g, WHITE.b))

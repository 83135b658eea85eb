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

import logging
import math
import multiprocessing
from time import perf_counter
from typing import List, Tuple as PyTuple

from raycaster.canvas import Canvas
from raycaster.colors import Color
from raycaster.geometry import point
from raycaster.matrices import Matrix, identity
from raycaster.ray import Ray
from raycaster.world import World

logger = logging.getLogger(__name__)


class Camera:
    """A pinhole camera implementing a perspective 3D → 2D projection

    The camera sits at the origin of its own reference frame and looks towards the negative Z axis; the
    image is projected on a canvas placed at z = -1. The `transformation` (usually built with
    :func:`.view_transform`) moves the world in front of the camera.
    """

    def __init__(self, hsize: int, vsize: int, field_of_view: float, transformation: Matrix = None):
        """Create a new camera

        The parameters `hsize` and `vsize` are the size of the image in pixels, and `field_of_view` is the
        angle (in radians) covered by the widest side of the image.

        The `transformation` parameter is a 4×4 :class:`.Matrix`; its inverse is computed immediately, so a
        singular matrix raises :class:`.SingularMatrixError`."""
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"invalid image size {hsize}×{vsize}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view

        half_view = math.tan(field_of_view / 2)
        aspect_ratio = hsize / vsize
        if aspect_ratio >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect_ratio
        else:
            self.half_width = half_view * aspect_ratio
            self.half_height = half_view

        self.pixel_size = (self.half_width * 2) / hsize
        self.transformation = transformation if transformation is not None else identity(4)

    @property
    def transformation(self) -> Matrix:
        return self._transformation

    @transformation.setter
    def transformation(self, value: Matrix):
        self._inverse_transformation = value.inverse()
        self._transformation = value

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """Shoot a ray through the center of pixel (x, y)

        The pixel (0, 0) is the top-left corner of the image."""
        xoffset = (x + 0.5) * self.pixel_size
        yoffset = (y + 0.5) * self.pixel_size

        # The camera looks towards -z, so +x is on the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        wall_point = self._inverse_transformation * point(world_x, world_y, -1.0)
        origin = self._inverse_transformation * point(0.0, 0.0, 0.0)
        return Ray(origin=origin, dir=(wall_point - origin).normalize())

    def render_rows(self, world: World, y_start: int, y_end: int) -> List[List[Color]]:
        """Compute the colors of the rows in the range [y_start, y_end)"""
        return [
            [world.color_at(self.ray_for_pixel(x, y)) for x in range(self.hsize)]
            for y in range(y_start, y_end)
        ]

    def render(self, world: World, workers: int = 1, callback=None) -> Canvas:
        """Render a world into a new :class:`.Canvas`

        The image is split into bands of rows. If `workers` is 1, the bands are computed in this process;
        otherwise they are distributed over a pool of `workers` processes (``None`` means one per CPU). Since
        each band is computed independently, the result does not depend on the number of workers.

        If `callback` is not ``None``, it is called as ``callback(rows_done, total_rows)`` every time a band
        has been completed."""
        if workers is None:
            workers = multiprocessing.cpu_count()
        if workers < 1:
            raise ValueError(f"the number of workers must be positive, got {workers}")

        canvas = Canvas(self.hsize, self.vsize)
        bands = _split_rows(self.vsize, workers)

        logger.info("rendering a %d×%d image with %d worker(s) and %d shape(s)",
                    self.hsize, self.vsize, workers, len(world.shapes))
        start_time = perf_counter()

        if workers == 1:
            results = (_render_band((self, world, y_start, y_end)) for (y_start, y_end) in bands)
            rows_done = self._collect(canvas, results, callback)
        else:
            with multiprocessing.Pool(workers) as pool:
                results = pool.imap_unordered(
                    _render_band,
                    [(self, world, y_start, y_end) for (y_start, y_end) in bands],
                )
                rows_done = self._collect(canvas, results, callback)

        logger.info("rendered %d rows in %.2f s", rows_done, perf_counter() - start_time)
        return canvas

    def _collect(self, canvas: Canvas, results, callback) -> int:
        rows_done = 0
        for y_start, rows in results:
            for offset, row in enumerate(rows):
                canvas.set_row(y_start + offset, row)

            rows_done += len(rows)
            logger.debug("band starting at row %d completed (%d/%d rows)", y_start, rows_done, self.vsize)
            if callback:
                callback(rows_done, self.vsize)

        return rows_done


def _split_rows(num_of_rows: int, workers: int) -> List[PyTuple[int, int]]:
    # About four bands per worker
    rows_per_band = max(1, num_of_rows // (workers * 4))
    return [(y_start, min(y_start + rows_per_band, num_of_rows))
            for y_start in range(0, num_of_rows, rows_per_band)]


def _render_band(args):
    camera, world, y_start, y_end = args
    return y_start, camera.render_rows(world, y_start, y_end)

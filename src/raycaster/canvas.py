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

# Lines in a PPM file should not be longer than this
PPM_MAX_LINE_LENGTH = 70


class Canvas:
    """A 2D grid of colors

    This class has the following members:

    -   `width` (int): number of columns in the 2D matrix of colors
    -   `height` (int): number of rows in the 2D matrix of colors
    -   `pixels` (array of `Color`): the 2D matrix, represented as a 1D array in row-major order

    The pixel (0, 0) is the top-left corner of the image. Colors are not clamped: this is done by the
    methods that write the canvas to a file.
    """

    def __init__(self, width=0, height=0):
        """Create a black canvas with the specified resolution"""
        (self.width, self.height) = (width, height)
        self.pixels = [Color() for i in range(self.width * self.height)]

    def valid_coordinates(self, x, y):
        """Return True if ``(x, y)`` are coordinates within the 2D matrix"""
        return ((x >= 0) and (x < self.width) and
                (y >= 0) and (y < self.height))

    def pixel_offset(self, x, y):
        """Return the position in the 1D array of the specified pixel"""
        return y * self.width + x

    def _check_coordinates(self, x, y):
        if not self.valid_coordinates(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}×{self.height} canvas")

    def get_pixel(self, x, y) -> Color:
        """Return the `Color` value for a pixel in the canvas

        The pixel at the top-left corner has coordinates (0, 0)."""
        self._check_coordinates(x, y)
        return self.pixels[self.pixel_offset(x, y)]

    def set_pixel(self, x, y, new_color: Color):
        """Set the new color for a pixel in the canvas

        The pixel at the top-left corner has coordinates (0, 0)."""
        self._check_coordinates(x, y)
        self.pixels[self.pixel_offset(x, y)] = new_color

    def set_row(self, y, colors: List[Color]):
        """Set the colors of a whole row of pixels"""
        if len(colors) != self.width:
            raise ValueError(f"a row of a {self.width}×{self.height} canvas needs {self.width} colors, "
                             f"got {len(colors)}")
        self._check_coordinates(0, y)
        offset = self.pixel_offset(0, y)
        self.pixels[offset:offset + self.width] = colors

    def ppm_header(self) -> str:
        return f"P3\n{self.width} {self.height}\n255\n"

    def to_ppm(self) -> str:
        """Return the content of a plain PPM file (magic number «P3») representing the canvas

        Each row of the canvas starts a new line, and lines are wrapped so that they are never longer than
        70 characters."""
        lines = []
        for y in range(self.height):
            cur_line = ""
            for x in range(self.width):
                for value in self.get_pixel(x, y).to_bytes():
                    token = str(value)
                    if not cur_line:
                        cur_line = token
                    elif len(cur_line) + 1 + len(token) > PPM_MAX_LINE_LENGTH:
                        lines.append(cur_line)
                        cur_line = token
                    else:
                        cur_line += " " + token

            lines.append(cur_line)

        return self.ppm_header() + "".join(line + "\n" for line in lines)

    def write_ppm(self, stream):
        """Write the canvas in a plain PPM file

        The `stream` parameter must be a binary I/O stream."""
        stream.write(self.to_ppm().encode("ascii"))

    def write_ldr_image(self, stream, format):
        """Save the canvas in a LDR format supported by Pillow (e.g., "PNG")

        Colors are clamped to the range [0, 1] and converted to 8-bit RGBA pixels with full opacity."""
        from PIL import Image
        img = Image.new("RGBA", (self.width, self.height))

        for y in range(self.height):
            for x in range(self.width):
                img.putpixel(xy=(x, y), value=self.get_pixel(x, y).to_bytes() + (255,))

        img.save(stream, format=format)

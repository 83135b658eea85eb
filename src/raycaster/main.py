#!/usr/bin/env python3

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
import os
import sys
from dataclasses import dataclass
from math import radians
from time import perf_counter

import click

from raycaster.materials import InvalidMaterialError
from raycaster.matrices import SingularMatrixError
from raycaster.ray import InvalidRayError
from raycaster.scenes import SCENES


@dataclass
class Parameters:
    scene_name: str = "demo"
    width: int = 320
    height: int = 240
    fov_deg: float = 60.0
    output_file_name: str = "output.png"
    workers: int = 1

    def output_format(self) -> str:
        """Return "PPM" or the Pillow format matching the extension of the output file"""
        extension = os.path.splitext(self.output_file_name)[1].lower().lstrip(".")
        if extension == "ppm":
            return "PPM"
        elif extension in ("jpg", "jpeg"):
            return "JPEG"
        elif extension:
            return extension.upper()

        return "PNG"


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Print debugging messages")
def cli(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command("render")
@click.option("--width", type=int, default=320, help="Width of the image to render")
@click.option("--height", type=int, default=240, help="Height of the image to render")
@click.option("--fov", type=float, default=60.0, help="Field of view along the widest side, in degrees")
@click.option("--scene", type=click.Choice(sorted(SCENES.keys())), default="demo", help="Scene to render")
@click.option(
    "--workers",
    type=int,
    default=1,
    help="Number of processes used for rendering (0 means one per CPU)",
)
@click.option(
    "--output",
    type=str,
    default="output.png",
    help="Name of the image to create; a «.ppm» extension produces a plain PPM file",
)
def render(width, height, fov, scene, workers, output):
    params = Parameters(
        scene_name=scene,
        width=width,
        height=height,
        fov_deg=fov,
        output_file_name=output,
        workers=workers,
    )

    try:
        cur_scene = SCENES[params.scene_name](params.width, params.height, radians(params.fov_deg))
    except (ValueError, SingularMatrixError, InvalidMaterialError) as e:
        print(f"Error, unable to build scene «{params.scene_name}»: {e}")
        sys.exit(1)

    print(f"Generating a {params.width}×{params.height} image")

    def print_progress(rows_done, total_rows):
        print(f"Rendering row {rows_done}/{total_rows}\r", end="")

    start_time = perf_counter()
    try:
        canvas = cur_scene.camera.render(
            cur_scene.world,
            workers=params.workers if params.workers > 0 else None,
            callback=print_progress,
        )
    except (InvalidRayError, SingularMatrixError) as e:
        print(f"Error while rendering: {e}")
        sys.exit(1)
    elapsed_time = perf_counter() - start_time

    print(f"\nRendering completed in {elapsed_time:.1f} s")

    output_format = params.output_format()
    try:
        with open(params.output_file_name, "wb") as outf:
            if output_format == "PPM":
                canvas.write_ppm(outf)
            else:
                canvas.write_ldr_image(outf, output_format)
    except (KeyError, ValueError, OSError) as e:
        print(f"Error, unable to write «{params.output_file_name}» as {output_format}: {e}")
        sys.exit(1)

    print(f"Image written to {params.output_file_name}")


cli.add_command(render)

if __name__ == "__main__":
    cli()

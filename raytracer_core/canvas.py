#
# PROJECT: raytracer-core
# MODULE: raytracer_core/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .color import Color
from .config import PpmConfig

logger = logging.getLogger(__name__)


class Canvas:
    """Grid of Color values stored row-major in a flat list.

    Pixel (x, y) lives at index y * width + x. Coordinates are not
    validated: an x past the row end lands on the next row, and an index
    past the end of the grid raises IndexError.
    """
    __slots__ = ['width', 'height', 'pixels']

    def __init__(self, width: int, height: int):
        self.width, self.height = width, height
        self.pixels = [Color.black() for _ in range(width * height)]

    def write_pixel(self, x: int, y: int, color: Color):
        self.pixels[y * self.width + x] = color

    def read_pixel(self, x: int, y: int) -> Color:
        return self.pixels[y * self.width + x]

    def to_ppm_str(self, config: PpmConfig = None) -> str:
        """
        Serialize to plain PPM ("P3").

        Every channel value is written followed by the separator. Before
        writing a value, if the current line plus the value and its
        separator would exceed max_line_width, the last separator becomes
        a newline and the line count restarts at the cost of the value
        about to be written. After the last pixel of each image row the
        trailing separator becomes a newline and the count restarts at 0.
        """
        if config is None:
            config = PpmConfig()
        sep = config.separator
        max_width = config.max_line_width

        out = ["P3\n", f"{self.width} {self.height}\n", f"{config.max_color_value}\n"]
        chars_written = 0
        for idx, color in enumerate(self.pixels):
            for value in color.to_bytes(config.max_color_value):
                token = str(value)
                cost = len(token) + 1
                if chars_written + cost > max_width:
                    out[-1] = '\n'
                    chars_written = cost
                else:
                    chars_written += cost
                out.append(token)
                out.append(sep)
            if (idx + 1) % self.width == 0:
                out[-1] = '\n'
                chars_written = 0
        return ''.join(out)

    def to_ppm(self, path, config: PpmConfig = None):
        """Write the canvas to path as PPM. OSError propagates to the caller."""
        data = self.to_ppm_str(config)
        with open(path, 'w', encoding='ascii', newline='\n') as f:
            f.write(data)
        logger.info("Wrote %dx%d PPM image to %s", self.width, self.height, path)

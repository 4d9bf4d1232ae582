"""
Pixel buffer and image output
"""
import logging
from pathlib import Path

import cv2
import matplotlib.pyplot as plt
import numpy as np

from raytracer.config import OUTPUT_SETTINGS

from .tuples import Colour

logger = logging.getLogger(__name__)


class Canvas:
    """Unclamped float RGB image stored as a (height, width, 3) array"""

    def __init__(self, width: int, height: int, fill: Colour = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas needs a positive size, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)
        if fill is not None:
            self.pixels[:, :] = fill.to_array()

    def write_pixel(self, x: int, y: int, colour: Colour):
        self.pixels[y, x] = colour.to_array()

    def pixel_at(self, x: int, y: int) -> Colour:
        return Colour(*self.pixels[y, x])

    def to_bytes(self) -> np.ndarray:
        """Pixels clamped and scaled to 0..255 integers"""
        max_value = OUTPUT_SETTINGS['max_colour_value']
        return np.clip(np.rint(self.pixels * max_value), 0, max_value).astype(np.uint8)

    def to_ppm(self) -> str:
        max_value = OUTPUT_SETTINGS['max_colour_value']
        line_width = OUTPUT_SETTINGS['ppm_line_width']
        lines = ["P3", f"{self.width} {self.height}", str(max_value)]

        values = self.to_bytes()
        for row in values:
            line = ""
            for value in row.reshape(-1):
                token = str(int(value))
                if line and len(line) + 1 + len(token) > line_width:
                    lines.append(line)
                    line = token
                else:
                    line = f"{line} {token}" if line else token
            lines.append(line)

        return "\n".join(lines) + "\n"

    def save(self, path) -> Path:
        """Write a PPM as text, anything else through OpenCV"""
        path = Path(path)
        if path.suffix.lower() == ".ppm":
            path.write_text(self.to_ppm())
        else:
            bgr = cv2.cvtColor(self.to_bytes(), cv2.COLOR_RGB2BGR)
            if not cv2.imwrite(str(path), bgr):
                raise IOError(f"Could not write image to {path}")
        logger.info(f"Saved {self.width}x{self.height} image to {path}")
        return path

    def show(self, title: str = "Render"):
        """Preview the image in a matplotlib window"""
        plt.figure(title)
        plt.imshow(self.to_bytes())
        plt.axis('off')
        plt.show()

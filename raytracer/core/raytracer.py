"""
Render driver: casts one camera ray per pixel into a world
"""
import logging
import time
from dataclasses import dataclass
from typing import Optional

from raytracer.config import RENDER_SETTINGS

from .camera import Camera
from .canvas import Canvas
from .world import World

logger = logging.getLogger(__name__)


@dataclass
class RenderStats:
    """Counters for a single render, owned by the caller"""
    pixels: int = 0
    lit_pixels: int = 0  # pixels that came out non-black
    elapsed: float = 0.0

    @property
    def pixels_per_second(self) -> float:
        return self.pixels / self.elapsed if self.elapsed > 0 else 0.0


class RayTracer:
    """Single-threaded Whitted ray tracer"""

    def __init__(self, world: Optional[World] = None, camera: Optional[Camera] = None,
                 max_depth: int = RENDER_SETTINGS['max_depth']):
        self.world = world
        self.camera = camera
        self.max_depth = max_depth
        self.stats = RenderStats()

    def set_scene(self, world: World):
        """Set the world to render"""
        self.world = world
        logger.info(f"Scene set: {len(world.objects)} objects, {len(world.lights)} lights")

    def set_camera(self, camera: Camera):
        """Set the camera"""
        self.camera = camera

    def render(self, stats: Optional[RenderStats] = None) -> Canvas:
        """Render the whole image, row by row"""
        if self.world is None:
            raise ValueError("No scene set for rendering")
        if self.camera is None:
            raise ValueError("No camera set for rendering")

        stats = stats if stats is not None else RenderStats()
        camera = self.camera
        image = Canvas(camera.hsize, camera.vsize)
        logger.info(f"Rendering {camera.hsize}x{camera.vsize}, max depth {self.max_depth}")

        start_time = time.time()
        for y in range(camera.vsize):
            for x in range(camera.hsize):
                ray = camera.ray_for_pixel(x, y)
                colour = self.world.colour_at(ray, self.max_depth)
                image.write_pixel(x, y, colour)
                stats.pixels += 1
                if any(colour):
                    stats.lit_pixels += 1
            logger.debug(f"Row {y + 1}/{camera.vsize} done")

        stats.elapsed = time.time() - start_time
        self.stats = stats
        logger.info(f"Rendered {stats.pixels} pixels in {stats.elapsed:.3f}s "
                    f"({stats.pixels_per_second:.1f} px/s)")
        return image

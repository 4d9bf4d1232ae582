#!/usr/bin/env python3
"""
Command-line renderer
"""
import argparse
import logging
import math
import sys

from raytracer.config import OUTPUT_SETTINGS, RENDER_SETTINGS
from raytracer.core.raytracer import RayTracer, RenderStats
from raytracer.obj_parser import ObjParser
from raytracer.scene import SCENES, build_scene, model_scene

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render a scene with a Whitted ray tracer")
    parser.add_argument('--scene', choices=sorted(SCENES), default='default',
                        help="built-in scene to render")
    parser.add_argument('--obj', help="render a Wavefront OBJ model instead of a built-in scene")
    parser.add_argument('--width', type=int, default=RENDER_SETTINGS['width'])
    parser.add_argument('--height', type=int, default=RENDER_SETTINGS['height'])
    parser.add_argument('--fov', type=float, default=math.degrees(RENDER_SETTINGS['fov']),
                        help="horizontal field of view in degrees")
    parser.add_argument('--depth', type=int, default=RENDER_SETTINGS['max_depth'],
                        help="maximum reflection/refraction depth")
    parser.add_argument('--output', '-o', default=OUTPUT_SETTINGS['output'],
                        help="output image; .ppm is written as text, other formats via OpenCV")
    parser.add_argument('--show', action='store_true', help="preview the result with matplotlib")
    parser.add_argument('--verbose', '-v', action='store_true')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    if args.width <= 0 or args.height <= 0:
        logger.error(f"Image size must be positive, got {args.width}x{args.height}")
        return 2
    if args.depth < 0:
        logger.error(f"Depth must not be negative, got {args.depth}")
        return 2

    fov = math.radians(args.fov)
    if args.obj:
        try:
            model = ObjParser.from_file(args.obj).to_group()
        except (OSError, IndexError) as e:
            logger.error(f"Could not load {args.obj}: {e}")
            return 1
        world, camera = model_scene(model, args.width, args.height, fov)
    else:
        world, camera = build_scene(args.scene, args.width, args.height, fov)

    tracer = RayTracer(world, camera, max_depth=args.depth)
    stats = RenderStats()
    image = tracer.render(stats)

    try:
        image.save(args.output)
    except OSError as e:
        logger.error(f"Could not save {args.output}: {e}")
        return 1

    if args.show:
        image.show(title=args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

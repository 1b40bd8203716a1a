# main.py
import argparse
import logging
import multiprocessing as mp
import random
import sys
from camera.camera import Camera
from renderer.image import check_image_path, save_image
from renderer.raytracer import Renderer
from scenes import SCENES, build_scene
from settings import QUALITY_LEVELS, RenderSettings, SettingsError, load_settings, setup_logging

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="raytrace",
                                     description="Render a sphere scene with a Monte Carlo ray tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), help="scene to render (default: showcase)")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="preview",
                        help="samples/bounces preset (default: preview)")
    parser.add_argument("--config", help="INI file with a [render] section")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--samples", type=int, help="samples per pixel, rounded down to a square")
    parser.add_argument("--depth", type=int, help="maximum bounces per ray")
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument("--workers", type=int, help="worker processes, 0 for one per CPU")
    parser.add_argument("--jitter", action="store_true", default=None,
                        help="jitter samples inside each stratum")
    parser.add_argument("--preview", action="store_true", help="show the result in a window")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("-o", "--output", help="output file, .ppm or .png (default: image.ppm)")
    return parser

def resolve_settings(args: argparse.Namespace) -> RenderSettings:
    """Preset first, then the config file, then explicit flags."""
    settings = RenderSettings.from_quality(args.quality)
    if args.config:
        settings = load_settings(args.config, settings)
    overrides = {
        "scene": args.scene,
        "width": args.width,
        "samples_per_pixel": args.samples,
        "max_depth": args.depth,
        "seed": args.seed,
        "workers": args.workers,
        "jitter": args.jitter,
        "output": args.output,
        "log_level": args.log_level,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(settings, key, value)
    if args.workers == 0:
        # Same rule as the settings file: 0 means one worker per CPU
        settings.workers = mp.cpu_count()
    if args.preview:
        settings.preview = True
    try:
        check_image_path(settings.output)
    except ValueError as e:
        raise SettingsError(str(e)) from None
    return settings

def run(settings: RenderSettings):
    """Renders the configured scene and saves it. Returns the encoded pixels."""
    check_image_path(settings.output)
    world, camera_kwargs = build_scene(settings.scene, random.Random(settings.seed))
    camera = Camera(aspect_ratio=settings.aspect_ratio,
                    image_width=settings.width,
                    samples_per_pixel=settings.samples_per_pixel,
                    max_depth=settings.max_depth,
                    jitter=settings.jitter,
                    **camera_kwargs)
    renderer = Renderer(camera, seed=settings.seed, workers=settings.workers)
    image = renderer.render(world)
    pixels = save_image(settings.output, image)

    if settings.preview:
        from renderer.preview import show_image
        show_image(pixels, title=f"{settings.scene} - {settings.output}")
    return pixels

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = resolve_settings(args)
    except SettingsError as e:
        parser.error(str(e))

    setup_logging(settings.log_level)
    logger.debug("Settings: %r", settings)
    try:
        run(settings)
    except (KeyError, ValueError) as e:
        parser.error(e.args[0] if e.args else str(e))
    return 0

if __name__ == "__main__":
    sys.exit(main())

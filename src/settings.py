# settings.py
"""
Render settings: quality presets, optional INI overrides and logging setup.
"""
import configparser
import logging
import multiprocessing as mp
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Quality presets, cheapest first
QUALITY_LEVELS = {
    "preview": {"samples": 1, "bounces": 4},
    "draft": {"samples": 16, "bounces": 10},
    "final": {"samples": 100, "bounces": 50},
}

class SettingsError(ValueError):
    """Raised for unknown presets or malformed settings files."""

class RenderSettings:
    """
    Everything a render run needs apart from the scene itself.
    """
    def __init__(self, width: int = 400, aspect_ratio: float = 16.0 / 9.0,
                 samples_per_pixel: int = 1, max_depth: int = 4, seed: int = 42,
                 workers: int = 1, jitter: bool = False, scene: str = "showcase",
                 output: str = "image.ppm", preview: bool = False, log_level: str = "INFO"):
        self.width = width
        self.aspect_ratio = aspect_ratio
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.seed = seed
        self.workers = workers
        self.jitter = jitter
        self.scene = scene
        self.output = output
        self.preview = preview
        self.log_level = log_level

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        try:
            quality = QUALITY_LEVELS[name]
        except KeyError:
            raise SettingsError(f"unknown quality '{name}', choose from {', '.join(QUALITY_LEVELS)}") from None
        return cls(samples_per_pixel=quality["samples"], max_depth=quality["bounces"], **overrides)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"RenderSettings({fields})"

def _parse_aspect(value: str) -> float:
    # Accepts "1.5" or "16:9"
    if ":" in value:
        w, h = value.split(":", 1)
        return float(w) / float(h)
    return float(value)

def load_settings(path: Union[str, Path], base: Optional[RenderSettings] = None) -> RenderSettings:
    """
    Overlays the [render] section of an INI file onto base. Keys left out of
    the file keep their base values; a "quality" key applies that preset
    before the other keys.
    """
    cfg = configparser.RawConfigParser()
    if not cfg.read(path):
        raise SettingsError(f"cannot read settings file {path}")
    if not cfg.has_section("render"):
        raise SettingsError(f"{path}: missing [render] section")
    section = cfg["render"]

    settings = base if base is not None else RenderSettings()
    try:
        if "quality" in section:
            quality = RenderSettings.from_quality(section["quality"])
            settings.samples_per_pixel = quality.samples_per_pixel
            settings.max_depth = quality.max_depth
        if "width" in section:
            settings.width = section.getint("width")
        if "aspect_ratio" in section:
            settings.aspect_ratio = _parse_aspect(section["aspect_ratio"])
        if "samples" in section:
            settings.samples_per_pixel = section.getint("samples")
        if "depth" in section:
            settings.max_depth = section.getint("depth")
        if "seed" in section:
            settings.seed = section.getint("seed")
        if "workers" in section:
            # 0 means one worker per CPU
            settings.workers = section.getint("workers") or mp.cpu_count()
        if "jitter" in section:
            settings.jitter = section.getboolean("jitter")
        if "scene" in section:
            settings.scene = section["scene"]
        if "output" in section:
            settings.output = section["output"]
        if "log_level" in section:
            settings.log_level = section["log_level"]
    except (ValueError, ZeroDivisionError) as e:
        raise SettingsError(f"{path}: {e}") from e
    return settings

def setup_logging(level: str = "INFO", name: Optional[str] = None) -> logging.Logger:
    """
    Installs a console handler on the given logger (the root logger by
    default). Calling it again replaces the previous handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in list(logger.handlers):
        if getattr(handler, "_raytracer", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._raytracer = True
    logger.addHandler(console_handler)
    return logger

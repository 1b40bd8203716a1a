# renderer/raytracer.py
import logging
import multiprocessing as mp
import random
import time
from typing import Iterator, List, Optional
import numpy as np
from core.vector import Vector3

logger = logging.getLogger(__name__)

# Per-process scene, set by _init_worker
_worker_camera = None
_worker_world = None

def _init_worker(camera, world):
    global _worker_camera, _worker_world
    _worker_camera = camera
    _worker_world = world

def _render_row_in_worker(args) -> List[float]:
    row, seed = args
    return render_row(_worker_camera, _worker_world, row, seed)

def row_rng(seed: int, row: int) -> random.Random:
    """
    Independent generator for one scanline. String seeds are hashed
    deterministically, so a row renders identically in any process.
    """
    return random.Random(f"{seed}:{row}")

def render_row(camera, world, row: int, seed: int) -> List[float]:
    """
    Renders scanline row and returns it as a flat [r, g, b, r, g, b, ...] list.
    """
    rng = row_rng(seed, row)
    out = []
    for i in range(camera.image_width):
        color = camera.pixel_color(i, row, world, rng)
        out.extend((color.x, color.y, color.z))
    return out

class Renderer:
    """
    Drives a Camera over every pixel of the image.

    Scanlines are independent, so with workers > 1 they are farmed out to a
    process pool. Results only depend on the seed, never on the worker count.
    """
    def __init__(self, camera, seed: int = 42, workers: int = 1, progress_every: int = 16):
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.camera = camera
        self.seed = seed
        self.workers = workers
        self.progress_every = max(1, progress_every)
        self.last_render_seconds: Optional[float] = None

    @property
    def width(self) -> int:
        return self.camera.image_width

    @property
    def height(self) -> int:
        return self.camera.image_height

    def _rows(self, world) -> Iterator[List[float]]:
        tasks = [(row, self.seed) for row in range(self.height)]
        if self.workers == 1:
            for row, seed in tasks:
                yield render_row(self.camera, world, row, seed)
            return

        with mp.Pool(self.workers, initializer=_init_worker,
                     initargs=(self.camera, world)) as pool:
            # imap keeps scanlines in order while workers run ahead
            yield from pool.imap(_render_row_in_worker, tasks)

    def render(self, world) -> np.ndarray:
        """
        Renders world and returns linear RGB as a (height, width, 3) float64
        array, row 0 being the top of the image.
        """
        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d worker(s), %d object(s)",
                    self.width, self.height, self.camera.samples_per_pixel,
                    self.camera.max_depth, self.workers, len(world))
        start = time.perf_counter()

        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        for row, values in enumerate(self._rows(world)):
            image[row] = np.asarray(values, dtype=np.float64).reshape(self.width, 3)
            if (row + 1) % self.progress_every == 0 or row + 1 == self.height:
                logger.debug("Scanlines done: %d/%d", row + 1, self.height)

        self.last_render_seconds = time.perf_counter() - start
        logger.info("Render finished in %.2fs", self.last_render_seconds)
        return image

    def iter_pixels(self, world) -> Iterator[Vector3]:
        """
        Row-major stream of linear colors, top-left first.
        """
        for values in self._rows(world):
            for k in range(0, len(values), 3):
                yield Vector3(values[k], values[k + 1], values[k + 2])

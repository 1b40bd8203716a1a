# scenes.py
"""
Built-in scenes. Each builder returns the world together with the camera
parameters it was composed for.
"""
import logging
import random
from typing import Callable, Dict, Tuple
from core.vector import Vector3
from core.utils import random_in, random_vector
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.presets import ColorPresets, DielectricPresets, MetalPresets

logger = logging.getLogger(__name__)

def two_spheres(rng: random.Random = None) -> Tuple[HittableList, dict]:
    """A gray diffuse sphere resting on a large ground sphere."""
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.5, 0.5, 0.5))))
    world.add(Sphere(Vector3(0, -100.5, -1), 100, Lambertian(Vector3(0.5, 0.5, 0.5))))
    camera = dict(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -1), vfov=90.0, focus_dist=1.0)
    return world, camera

def material_showcase(rng: random.Random = None) -> Tuple[HittableList, dict]:
    """Diffuse, hollow glass and fuzzed metal spheres side by side."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.GROUND)))
    world.add(Sphere(Vector3(0, 0, -1.2), 0.5, ColorPresets.matte(ColorPresets.BLUE)))

    # Hollow glass: the inner sphere's negative radius flips its normals
    world.add(Sphere(Vector3(-1, 0, -1), 0.5, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-1, 0, -1), -0.4, DielectricPresets.glass()))

    world.add(Sphere(Vector3(1, 0, -1), 0.5, MetalPresets.brushed_metal()))
    camera = dict(look_from=Vector3(-2, 2, 1), look_at=Vector3(0, 0, -1), vfov=20.0,
                  defocus_angle=10.0, focus_dist=3.4)
    return world, camera

def random_spheres(rng: random.Random = None) -> Tuple[HittableList, dict]:
    """
    Ground plane covered with a grid of small random spheres and three
    large feature spheres.
    """
    if rng is None:
        rng = random.Random(0)
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY)))

    clearing = Vector3(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearing).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                material = Metal(random_vector(rng, 0.5, 1.0), random_in(rng, 0.0, 0.5))
            else:
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

    camera = dict(look_from=Vector3(13, 2, 3), look_at=Vector3(0, 0, 0), vfov=20.0,
                  defocus_angle=0.6, focus_dist=10.0)
    return world, camera

SCENES: Dict[str, Callable[[random.Random], Tuple[HittableList, dict]]] = {
    "two_spheres": two_spheres,
    "showcase": material_showcase,
    "random": random_spheres,
}

def build_scene(name: str, rng: random.Random = None) -> Tuple[HittableList, dict]:
    """Raises KeyError for unknown scene names."""
    if name not in SCENES:
        raise KeyError(f"unknown scene '{name}', choose from {', '.join(SCENES)}")
    world, camera = SCENES[name](rng)
    logger.debug("Built scene '%s' with %d objects", name, len(world))
    return world, camera

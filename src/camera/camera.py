# camera/camera.py
import math
import random
from core.vector import Vector3
from core.ray import Ray
from core.interval import Interval
from core.utils import random_in_unit_disk

# Minimum hit distance; keeps scattered rays from re-hitting their own origin.
SHADOW_ACNE_EPSILON = 1e-4

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

class Camera:
    """
    A positionable thin-lens camera.

    All geometry is derived once in the constructor; a Camera is never
    mutated while rendering, so it can be shared by worker processes.

    Antialiasing uses a stratified grid: samples_per_pixel is rounded down to
    the nearest perfect square and each pixel is split into sqrt x sqrt cells.
    Without jitter every cell is sampled at its center.
    """
    def __init__(self,
                 look_from: Vector3 = Vector3(0, 0, 0),
                 look_at: Vector3 = Vector3(0, 0, -1),
                 vup: Vector3 = Vector3(0, 1, 0),
                 vfov: float = 90.0,
                 aspect_ratio: float = 16.0 / 9.0,
                 image_width: int = 400,
                 defocus_angle: float = 0.0,
                 focus_dist: float = 10.0,
                 samples_per_pixel: int = 1,
                 max_depth: int = 10,
                 jitter: bool = False,
                 background_top: Vector3 = SKY_BLUE,
                 background_bottom: Vector3 = WHITE):
        if image_width < 1:
            raise ValueError(f"image_width must be at least 1, got {image_width}")
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if not 0 < vfov < 180:
            raise ValueError(f"vfov must be in (0, 180) degrees, got {vfov}")
        if focus_dist <= 0:
            raise ValueError(f"focus_dist must be positive, got {focus_dist}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        if max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth}")
        if (look_from - look_at).near_zero():
            raise ValueError("look_from and look_at must differ")
        if vup.cross(look_from - look_at).near_zero():
            raise ValueError("vup must not be parallel to the view direction")

        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.image_width = image_width
        self.defocus_angle = defocus_angle
        self.focus_dist = focus_dist
        self.max_depth = max_depth
        self.jitter = jitter
        self.background_top = background_top
        self.background_bottom = background_bottom

        # Truncated, not rounded
        self.image_height = max(1, int(image_width / aspect_ratio))

        self.sqrt_spp = math.isqrt(samples_per_pixel)
        self.samples_per_pixel = self.sqrt_spp * self.sqrt_spp
        self.recip_sqrt_spp = 1.0 / self.sqrt_spp

        self.center = look_from
        self.update_camera()

    def update_camera(self):
        """Computes the camera basis, viewport and defocus disk."""
        theta = math.radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Orthonormal basis; w points away from the view direction
        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Viewport edges: u runs right, v runs down the image
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height
        self.sample_delta_u = self.pixel_delta_u * self.recip_sqrt_spp
        self.sample_delta_v = self.pixel_delta_v * self.recip_sqrt_spp

        self.viewport_upper_left = (self.center
                                    - self.w * self.focus_dist
                                    - viewport_u / 2
                                    - viewport_v / 2)
        self.pixel00_loc = self.viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(math.radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def get_ray(self, i: int, j: int, s_i: int, s_j: int, rng: random.Random) -> Ray:
        """
        Ray through stratum (s_i, s_j) of pixel (i, j), where i is the column
        and j the row counted from the top-left.
        """
        if self.jitter:
            off_u = s_i + rng.random()
            off_v = s_j + rng.random()
        else:
            off_u = s_i + 0.5
            off_v = s_j + 0.5

        # Top-left corner of the pixel, then into the stratum
        pixel_corner = (self.pixel00_loc
                        + self.pixel_delta_u * (i - 0.5)
                        + self.pixel_delta_v * (j - 0.5))
        pixel_sample = (pixel_corner
                        + self.sample_delta_u * off_u
                        + self.sample_delta_v * off_v)

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        return Ray(ray_origin, pixel_sample - ray_origin)

    def defocus_disk_sample(self, rng: random.Random) -> Vector3:
        """Random point on the lens."""
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def background(self, ray: Ray) -> Vector3:
        unit_direction = ray.direction.normalize()
        a = 0.5 * (unit_direction.y + 1.0)
        return self.background_bottom * (1.0 - a) + self.background_top * a

    def ray_color(self, ray: Ray, depth: int, world, rng: random.Random) -> Vector3:
        """
        Radiance carried back along ray, following at most depth bounces.
        """
        if depth <= 0:
            return BLACK

        rec = world.hit(ray, Interval(SHADOW_ACNE_EPSILON, math.inf))
        if rec is None:
            return self.background(ray)

        scattered, attenuation = rec.material.scatter(ray, rec, rng)
        if attenuation.near_zero():
            # Fully absorbed
            return BLACK
        return attenuation * self.ray_color(scattered, depth - 1, world, rng)

    def pixel_color(self, i: int, j: int, world, rng: random.Random) -> Vector3:
        """Average of all stratified samples for pixel (i, j)."""
        r = g = b = 0.0
        for s_j in range(self.sqrt_spp):
            for s_i in range(self.sqrt_spp):
                ray = self.get_ray(i, j, s_i, s_j, rng)
                color = self.ray_color(ray, self.max_depth, world, rng)
                r += color.x
                g += color.y
                b += color.z
        n = self.samples_per_pixel
        return Vector3(r / n, g / n, b / n)

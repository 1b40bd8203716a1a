"""Tests for camera geometry, ray generation and radiance recursion."""

import math
import random

import pytest

from camera.camera import BLACK, SKY_BLUE, WHITE, Camera
from core.ray import Ray
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal


def vec_approx(actual, expected, abs_tol=1e-9):
    return all(a == pytest.approx(e, abs=abs_tol) for a, e in zip(actual, expected))


class TestCameraGeometry:
    def test_image_height_truncates(self):
        assert Camera(image_width=400, aspect_ratio=16 / 9).image_height == 225
        # 100 / 1.5 = 66.67 -> 66, not 67
        assert Camera(image_width=100, aspect_ratio=1.5).image_height == 66

    def test_image_height_at_least_one(self):
        assert Camera(image_width=1, aspect_ratio=10.0).image_height == 1

    def test_basis_is_orthonormal(self):
        cam = Camera(look_from=Vector3(-2, 2, 1), look_at=Vector3(0, 0, -1), vup=Vector3(0, 1, 0))
        for axis in (cam.u, cam.v, cam.w):
            assert axis.length() == pytest.approx(1.0)
        assert cam.u.dot(cam.v) == pytest.approx(0.0, abs=1e-12)
        assert cam.u.dot(cam.w) == pytest.approx(0.0, abs=1e-12)
        assert cam.v.dot(cam.w) == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("spp,expected", [(1, 1), (4, 4), (5, 4), (10, 9), (100, 100)])
    def test_samples_round_down_to_square(self, spp, expected):
        assert Camera(samples_per_pixel=spp).samples_per_pixel == expected

    @pytest.mark.parametrize("kwargs", [
        dict(image_width=0),
        dict(aspect_ratio=0),
        dict(vfov=0),
        dict(vfov=180),
        dict(focus_dist=0),
        dict(samples_per_pixel=0),
        dict(max_depth=-1),
        dict(look_from=Vector3(1, 1, 1), look_at=Vector3(1, 1, 1)),
        dict(vup=Vector3(0, 0, 1)),
    ])
    def test_invalid_configuration(self, kwargs):
        with pytest.raises(ValueError):
            Camera(**kwargs)


class TestGetRay:
    def test_center_pixel_looks_forward(self, rng):
        cam = Camera(image_width=3, aspect_ratio=1.0, vfov=90)
        ray = cam.get_ray(1, 1, 0, 0, rng)
        assert ray.origin == Vector3(0, 0, 0)
        d = ray.direction.normalize()
        assert vec_approx(d, Vector3(0, 0, -1))

    def test_top_left_pixel_points_up_and_left(self, rng):
        cam = Camera(image_width=4, aspect_ratio=1.0)
        d = cam.get_ray(0, 0, 0, 0, rng).direction
        assert d.x < 0
        assert d.y > 0
        assert d.z < 0

    def test_strata_stay_inside_pixel(self, rng):
        cam = Camera(image_width=10, aspect_ratio=1.0, samples_per_pixel=4, focus_dist=1.0)
        center = cam.pixel00_loc + cam.pixel_delta_u * 3 + cam.pixel_delta_v * 5
        half = cam.pixel_delta_u.length() / 2
        points = []
        for s_j in range(2):
            for s_i in range(2):
                ray = cam.get_ray(3, 5, s_i, s_j, rng)
                p = ray.origin + ray.direction
                points.append(p)
                assert abs(p.x - center.x) < half
                assert abs(p.y - center.y) < half
        # Four distinct cells, each a quarter pixel from the center
        assert len({(round(p.x, 12), round(p.y, 12)) for p in points}) == 4
        for p in points:
            assert abs(p.x - center.x) == pytest.approx(half / 2)

    def test_stratified_without_jitter_is_deterministic(self):
        cam = Camera(samples_per_pixel=4)
        a = cam.get_ray(7, 3, 1, 0, random.Random(1))
        b = cam.get_ray(7, 3, 1, 0, random.Random(2))
        assert a.direction == b.direction

    def test_jitter_varies_samples(self):
        cam = Camera(samples_per_pixel=4, jitter=True)
        a = cam.get_ray(7, 3, 1, 0, random.Random(1))
        b = cam.get_ray(7, 3, 1, 0, random.Random(2))
        assert a.direction != b.direction

    def test_defocus_moves_origin_on_lens(self, rng):
        cam = Camera(defocus_angle=10.0, focus_dist=3.0)
        radius = 3.0 * math.tan(math.radians(5.0))
        for _ in range(50):
            ray = cam.get_ray(10, 10, 0, 0, rng)
            offset = ray.origin - cam.center
            assert offset.length() < radius
            assert offset.dot(cam.w) == pytest.approx(0.0, abs=1e-12)

    def test_no_defocus_origin_is_center(self, rng):
        cam = Camera(defocus_angle=0.0, look_from=Vector3(1, 2, 3))
        assert cam.get_ray(5, 5, 0, 0, rng).origin == Vector3(1, 2, 3)


class TestRayColor:
    """Terminal states of the radiance recursion."""

    def test_depth_zero_is_black(self, two_sphere_world, rng):
        cam = Camera()
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
        assert cam.ray_color(ray, 0, two_sphere_world, rng) == BLACK
        assert cam.ray_color(ray, 0, HittableList(), rng) == BLACK

    def test_background_straight_up_is_sky(self, rng):
        color = Camera().ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0)), 5, HittableList(), rng)
        assert vec_approx(color, SKY_BLUE)

    def test_background_straight_down_is_white(self, rng):
        color = Camera().ray_color(Ray(Vector3(0, 0, 0), Vector3(0, -1, 0)), 5, HittableList(), rng)
        assert vec_approx(color, WHITE)

    def test_background_horizon_is_midway(self, rng):
        color = Camera().ray_color(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)), 5, HittableList(), rng)
        assert vec_approx(color, (WHITE + SKY_BLUE) * 0.5)

    def test_black_absorber_is_black(self, rng):
        world = HittableList([Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0, 0, 0)))])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        for depth in (1, 5, 50):
            assert Camera().ray_color(ray, depth, world, rng) == BLACK

    def test_single_bounce_budget_is_black_on_hit(self, two_sphere_world, rng):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert Camera().ray_color(ray, 1, two_sphere_world, rng) == BLACK

    def test_mirror_attenuates_background(self, rng):
        # A mirror floor facing up reflects a downward ray into the sky
        albedo = Vector3(0.8, 0.6, 0.4)
        world = HittableList([Sphere(Vector3(0, -100, 0), 99, Metal(albedo, 0.0))])
        color = Camera().ray_color(Ray(Vector3(0, 0, 0), Vector3(0, -1, 0)), 5, world, rng)
        assert vec_approx(color, albedo * SKY_BLUE)

    def test_colors_stay_in_unit_range(self, two_sphere_world, rng):
        cam = Camera(image_width=20, samples_per_pixel=4, max_depth=8)
        for j in range(0, cam.image_height, 3):
            for i in range(0, cam.image_width, 3):
                color = cam.pixel_color(i, j, two_sphere_world, rng)
                assert all(0.0 <= c <= 1.0 for c in color)

"""Tests for gamma correction, quantization and image files."""

import numpy as np
import pytest
from PIL import Image

from renderer.image import encode_pixels, linear_to_gamma, save_image, write_ppm


class TestEncoding:
    def test_linear_to_gamma(self):
        assert linear_to_gamma(0.25) == pytest.approx(0.5)
        assert linear_to_gamma(0.0) == 0.0
        assert linear_to_gamma(-1.0) == 0.0

    def test_quantization(self):
        linear = np.array([[[0.0, 0.25, 1.0], [4.0, -0.5, 0.0625]]])
        pixels = encode_pixels(linear)
        assert pixels.dtype == np.uint8
        # 0.25 -> 0.5 -> 128; 1.0 clamps to 0.999 -> 255; 0.0625 -> 0.25 -> 64
        assert pixels.tolist() == [[[0, 128, 255], [255, 0, 64]]]

    def test_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            encode_pixels(np.zeros((4, 4)))


class TestFiles:
    def test_write_ppm(self, tmp_path):
        pixels = np.array([[[1, 2, 3], [4, 5, 6]]], dtype=np.uint8)
        path = tmp_path / "out.ppm"
        write_ppm(path, pixels)
        assert path.read_text().splitlines() == ["P3", "2 1", "255", "1 2 3", "4 5 6"]

    def test_save_png(self, tmp_path):
        linear = np.full((3, 5, 3), 0.25)
        path = tmp_path / "out.png"
        pixels = save_image(path, linear)
        with Image.open(path) as img:
            assert img.size == (5, 3)
            assert img.mode == "RGB"
            assert img.getpixel((0, 0)) == (128, 128, 128)
        assert pixels.shape == (3, 5, 3)

    def test_save_ppm_by_suffix(self, tmp_path):
        path = tmp_path / "out.PPM"
        save_image(path, np.zeros((2, 2, 3)))
        assert path.read_text().startswith("P3\n2 2\n255\n")

    def test_unknown_suffix(self, tmp_path):
        with pytest.raises(ValueError):
            save_image(tmp_path / "out.jpg", np.zeros((2, 2, 3)))


class TestPreview:
    def test_window_closes_on_quit(self, monkeypatch):
        monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
        import pygame
        from renderer import preview

        monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])
        preview.show_image(np.zeros((4, 6, 3), dtype=np.uint8), title="test")
        assert not pygame.display.get_init()

"""Tests for the canvas and image output."""

import pytest

from raytracer.core.canvas import Canvas
from raytracer.core.tuples import BLACK, Colour


class TestCanvas:
    """Test suite for Canvas."""

    def test_new_canvas_is_black(self):
        c = Canvas(10, 20)
        assert (c.width, c.height) == (10, 20)
        assert c.pixels.shape == (20, 10, 3)
        assert all(c.pixel_at(x, y) == BLACK for x in range(10) for y in range(20))

    def test_write_and_read_pixel(self):
        c = Canvas(10, 20)
        red = Colour(1, 0, 0)
        c.write_pixel(2, 3, red)
        assert c.pixel_at(2, 3) == red

    def test_values_are_not_clamped_in_memory(self):
        c = Canvas(2, 2)
        c.write_pixel(0, 0, Colour(1.5, -0.5, 0))
        assert c.pixel_at(0, 0) == Colour(1.5, -0.5, 0)

    @pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 5)])
    def test_rejects_bad_size(self, width, height):
        with pytest.raises(ValueError):
            Canvas(width, height)

    def test_ppm_header(self):
        lines = Canvas(5, 3).to_ppm().splitlines()
        assert lines[:3] == ["P3", "5 3", "255"]

    def test_ppm_pixel_data(self):
        c = Canvas(5, 3)
        c.write_pixel(0, 0, Colour(1.5, 0, 0))
        c.write_pixel(2, 1, Colour(0, 0.5, 0))
        c.write_pixel(4, 2, Colour(-0.5, 0, 1))
        lines = c.to_ppm().splitlines()
        assert lines[3:6] == [
            "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
        ]

    def test_ppm_splits_long_lines(self):
        c = Canvas(10, 2, fill=Colour(1, 0.8, 0.6))
        lines = c.to_ppm().splitlines()
        assert lines[3:7] == [
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
        ]
        assert all(len(line) <= 70 for line in lines)

    def test_ppm_ends_with_newline(self):
        assert Canvas(5, 3).to_ppm().endswith("\n")

    def test_save_ppm(self, tmp_path):
        c = Canvas(4, 2, fill=Colour(0.2, 0.4, 0.6))
        path = c.save(tmp_path / "image.ppm")
        assert path.read_text() == c.to_ppm()

    def test_save_png(self, tmp_path):
        import cv2

        c = Canvas(4, 2)
        c.write_pixel(0, 0, Colour(1, 0, 0))
        path = c.save(tmp_path / "image.png")
        image = cv2.imread(str(path))
        assert image.shape == (2, 4, 3)
        # OpenCV stores channels as BGR
        assert list(image[0, 0]) == [0, 0, 255]

    def test_to_bytes_clamps(self):
        c = Canvas(2, 1)
        c.write_pixel(0, 0, Colour(2, -1, 0.5))
        assert list(c.to_bytes()[0, 0]) == [255, 0, 128]

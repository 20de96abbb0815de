"""Tests for the pixel grid."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
import pytest
from PIL import Image
from seamcarver.grid import PixelGrid
from seamcarver.errors import ContractViolationError

from conftest import make_random_pixels


def rgba(r, g, b, a=255):
    return (r, g, b, a)


def grid_from_rows(rows):
    return PixelGrid(torch.tensor(rows, dtype=torch.uint8).permute(2, 0, 1))


class TestConstruction:
    def test_dimensions(self):
        grid = PixelGrid(make_random_pixels(4, 7))
        assert grid.width == 7
        assert grid.height == 4
        assert grid.channels == 3

    def test_rgba_is_kept(self):
        grid = PixelGrid(make_random_pixels(2, 2, channels=4))
        assert grid.channels == 4

    def test_zero_width_rejected(self):
        with pytest.raises(ContractViolationError):
            PixelGrid(torch.zeros(3, 5, 0, dtype=torch.uint8))

    def test_zero_height_rejected(self):
        with pytest.raises(ContractViolationError):
            PixelGrid(torch.zeros(3, 0, 5, dtype=torch.uint8))

    def test_wrong_channel_count_rejected(self):
        with pytest.raises(ContractViolationError):
            PixelGrid(torch.zeros(2, 5, 5, dtype=torch.uint8))

    def test_out_of_range_values_rejected(self):
        with pytest.raises(ContractViolationError):
            PixelGrid(torch.full((3, 2, 2), 300, dtype=torch.int32))

    def test_does_not_alias_input(self):
        pixels = torch.zeros(3, 2, 2, dtype=torch.uint8)
        grid = PixelGrid(pixels)
        pixels[:, 0, 0] = 9
        assert grid.color_at(0, 0) == (0, 0, 0)

    @pytest.mark.parametrize("shape", [(3, 5, 3), (4, 4, 3), (3, 4, 4)])
    def test_numpy_array_is_height_width_channels(self, shape):
        array = np.arange(np.prod(shape), dtype=np.uint8).reshape(shape)
        grid = PixelGrid(array)
        assert (grid.height, grid.width, grid.channels) == shape
        for y in range(shape[0]):
            for x in range(shape[1]):
                assert grid.color_at(x, y) == tuple(array[y, x].tolist())


class TestColorAt:
    def test_reads_column_then_row(self):
        grid = grid_from_rows([
            [(1, 2, 3), (4, 5, 6)],
            [(7, 8, 9), (10, 11, 12)],
            [(13, 14, 15), (16, 17, 18)],
        ])
        assert grid.color_at(1, 0) == (4, 5, 6)
        assert grid.color_at(0, 2) == (13, 14, 15)

    def test_includes_alpha(self):
        grid = grid_from_rows([[rgba(1, 2, 3, 4)]])
        assert grid.color_at(0, 0) == (1, 2, 3, 4)

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (2, 0), (0, 3)])
    def test_out_of_bounds(self, x, y):
        grid = PixelGrid(make_random_pixels(3, 2))
        with pytest.raises(ContractViolationError):
            grid.color_at(x, y)


class TestTranspose:
    def test_three_by_two(self):
        red, green, blue = rgba(255, 0, 0), rgba(0, 255, 0), rgba(0, 0, 255)
        yellow, cyan, magenta = rgba(255, 255, 0), rgba(0, 255, 255), rgba(255, 0, 255)
        grid = grid_from_rows([
            [red, green, blue],
            [yellow, cyan, magenta],
        ])
        expected = grid_from_rows([
            [red, yellow],
            [green, cyan],
            [blue, magenta],
        ])
        transposed = grid.transpose()
        assert transposed.width == 2 and transposed.height == 3
        assert transposed == expected

    def test_single_pixel(self):
        grid = grid_from_rows([[rgba(123, 123, 123)]])
        assert grid.transpose() == grid

    def test_twice_is_identity(self):
        grid = PixelGrid(make_random_pixels(5, 8, channels=4))
        assert grid.transpose().transpose() == grid

    def test_element_mapping(self):
        grid = PixelGrid(make_random_pixels(4, 6))
        transposed = grid.transpose()
        for y in range(grid.height):
            for x in range(grid.width):
                assert transposed.color_at(y, x) == grid.color_at(x, y)


class TestCopy:
    def test_copy_is_equal_but_independent(self):
        grid = PixelGrid(make_random_pixels(3, 4))
        clone = grid.copy()
        assert clone == grid
        assert clone.pixels.data_ptr() != grid.pixels.data_ptr()


class TestPillowConversion:
    def test_rgb_round_trip(self):
        grid = PixelGrid(make_random_pixels(6, 5))
        image = grid.to_image()
        assert image.mode == 'RGB'
        assert image.size == (5, 6)
        assert PixelGrid.from_image(image) == grid

    def test_rgba_round_trip(self):
        grid = PixelGrid(make_random_pixels(3, 4, channels=4))
        image = grid.to_image()
        assert image.mode == 'RGBA'
        assert PixelGrid.from_image(image) == grid

    def test_pixel_access_matches_pillow(self):
        image = Image.new('RGB', (3, 2), (10, 20, 30))
        image.putpixel((2, 1), (40, 50, 60))
        grid = PixelGrid.from_image(image)
        assert grid.color_at(2, 1) == (40, 50, 60)
        assert grid.color_at(0, 0) == (10, 20, 30)

    def test_grayscale_expands_to_rgb(self):
        image = Image.new('L', (2, 2), 77)
        grid = PixelGrid.from_image(image)
        assert grid.channels == 3
        assert grid.color_at(1, 1) == (77, 77, 77)

    def test_grayscale_alpha_expands_to_rgba(self):
        image = Image.new('LA', (2, 2), (77, 128))
        grid = PixelGrid.from_image(image)
        assert grid.channels == 4
        assert grid.color_at(0, 1) == (77, 77, 77, 128)

    def test_sixteen_bit_is_scaled_to_eight_bit(self):
        samples = np.array([[0, 257 * 100], [65535, 257 * 7]], dtype=np.uint16)
        image = Image.fromarray(samples)
        grid = PixelGrid.from_image(image)
        assert grid.color_at(0, 0) == (0, 0, 0)
        assert grid.color_at(1, 0) == (100, 100, 100)
        assert grid.color_at(0, 1) == (255, 255, 255)
        assert grid.color_at(1, 1) == (7, 7, 7)

    def test_empty_image_rejected(self):
        with pytest.raises(ContractViolationError):
            PixelGrid.from_image(Image.new('RGB', (0, 4)))

    def test_array_round_trip(self):
        array = np.arange(2 * 3 * 3, dtype=np.uint8).reshape(2, 3, 3)
        grid = PixelGrid.from_array(array)
        assert grid.width == 3 and grid.height == 2
        np.testing.assert_array_equal(grid.to_array(), array)

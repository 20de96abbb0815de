"""Shared test fixtures for the seamcarver test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarver.grid import PixelGrid


def make_random_pixels(H, W, channels=3, seed=42):
    """Random uint8 image tensor (C, H, W)."""
    torch.manual_seed(seed)
    return torch.randint(0, 256, (channels, H, W), dtype=torch.uint8)


def make_column_ramp(H, W):
    """Pixel value equals its column index times 10 in every channel."""
    ramp = (torch.arange(W, dtype=torch.uint8) * 10).view(1, 1, W)
    return ramp.expand(3, H, W).clone()


@pytest.fixture
def princeton_grid():
    """3-wide, 4-high grid with known dual-gradient energies."""
    rows = [
        [(255, 101, 51), (255, 101, 153), (255, 101, 255)],
        [(255, 153, 51), (255, 153, 153), (255, 153, 255)],
        [(255, 203, 51), (255, 204, 153), (255, 205, 255)],
        [(255, 255, 51), (255, 255, 153), (255, 255, 255)],
    ]
    pixels = torch.tensor(rows, dtype=torch.uint8).permute(2, 0, 1)
    return PixelGrid(pixels)


@pytest.fixture
def random_grid():
    """Deterministic 12x9 RGB grid."""
    return PixelGrid(make_random_pixels(9, 12))


def make_flat_band(H=6, W=12, band=6, seed=42):
    """
    RGBA image whose first `band` columns are flat gray (zero interior
    energy) and whose remaining columns are random. Alpha tags each
    original column x with 20 * x, so a blended pixel inserted after
    column x has alpha 20 * x + 10.
    """
    pixels = make_random_pixels(H, W, channels=4, seed=seed)
    pixels[:3, :, :band] = 100
    pixels[3] = (torch.arange(W, dtype=torch.uint8) * 20).view(1, W)
    return pixels

"""
Pixel grid: the mutable substrate of seam carving.

A PixelGrid wraps a uint8 tensor of shape (C, H, W) with C = 3 (RGB) or
C = 4 (RGBA). Every structural edit produces a new grid; a grid is never
resized in place.
"""

import numpy as np
import torch
from PIL import Image
from typing import Tuple

from .errors import ContractViolationError

# Pillow modes holding integer samples wider than 8 bits
WIDE_MODES = ('I;16', 'I;16B', 'I;16L', 'I;16N', 'I')

# 65535 / 255: scales a 16-bit sample down to 8 bits
WIDE_SCALE = 257


def _array_to_tensor(array: np.ndarray) -> torch.Tensor:
    """(H, W, C) or (H, W) array to a (C, H, W) tensor."""
    if array.ndim == 2:
        array = np.stack([array] * 3, axis=-1)
    if array.ndim != 3:
        raise ContractViolationError(
            f"Expected an (H, W, C) array, got shape {array.shape}")
    return torch.from_numpy(np.ascontiguousarray(array)).permute(2, 0, 1)


class PixelGrid:
    """
    Rectangular grid of colors.

    Coordinates follow image convention: x is the column, y is the row.

    Args:
        pixels: Tensor (C, H, W) with C in (3, 4) and values in 0..255.
            A numpy array is read as an image, i.e. (H, W, C) or (H, W).
    """

    def __init__(self, pixels: torch.Tensor):
        if isinstance(pixels, np.ndarray):
            pixels = _array_to_tensor(pixels)
        elif not isinstance(pixels, torch.Tensor):
            pixels = torch.as_tensor(pixels)
        if pixels.dim() != 3:
            raise ContractViolationError(
                f"Expected a (C, H, W) tensor, got shape {tuple(pixels.shape)}")
        C, H, W = pixels.shape
        if C not in (3, 4):
            raise ContractViolationError(f"Expected 3 or 4 channels, got {C}")
        if H == 0 or W == 0:
            raise ContractViolationError(f"Image must not be empty, got {W}x{H}")
        if pixels.dtype != torch.uint8:
            if pixels.min() < 0 or pixels.max() > 255:
                raise ContractViolationError("Channel values must be in 0..255")
        self._pixels = pixels.detach().to(torch.uint8, copy=True).contiguous()

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'PixelGrid':
        """Build a grid from an (H, W, C) or (H, W) uint8 array."""
        return cls(_array_to_tensor(np.asarray(array)))

    @classmethod
    def from_image(cls, image: Image.Image) -> 'PixelGrid':
        """
        Build a grid from a Pillow image.

        16-bit samples are scaled down by 257 so that every grid holds
        8-bit channels. Palette and grayscale images are expanded to RGB,
        or RGBA when they carry transparency.
        """
        if image.width == 0 or image.height == 0:
            raise ContractViolationError(
                f"Image must not be empty, got {image.width}x{image.height}")

        if image.mode in WIDE_MODES:
            wide = np.asarray(image, dtype=np.int64) // WIDE_SCALE
            return cls.from_array(np.clip(wide, 0, 255).astype(np.uint8))

        if image.mode not in ('RGB', 'RGBA'):
            has_alpha = image.mode in ('LA', 'PA', 'La') or 'transparency' in image.info
            image = image.convert('RGBA' if has_alpha else 'RGB')

        return cls.from_array(np.array(image, dtype=np.uint8))

    @property
    def pixels(self) -> torch.Tensor:
        """Underlying (C, H, W) tensor. Treat as read-only."""
        return self._pixels

    @property
    def channels(self) -> int:
        return self._pixels.shape[0]

    @property
    def height(self) -> int:
        return self._pixels.shape[1]

    @property
    def width(self) -> int:
        return self._pixels.shape[2]

    def color_at(self, x: int, y: int) -> Tuple[int, ...]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ContractViolationError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} grid")
        return tuple(self._pixels[:, y, x].tolist())

    def transpose(self) -> 'PixelGrid':
        """Swap rows and columns: result[j][i] = self[i][j]."""
        return PixelGrid(self._pixels.transpose(1, 2))

    def copy(self) -> 'PixelGrid':
        return PixelGrid(self._pixels)

    def to_array(self) -> np.ndarray:
        """Export as an (H, W, C) uint8 array."""
        return self._pixels.permute(1, 2, 0).contiguous().numpy().copy()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_array())

    def __eq__(self, other):
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return (self._pixels.shape == other._pixels.shape
                and torch.equal(self._pixels, other._pixels))

    def __repr__(self):
        return f"PixelGrid(width={self.width}, height={self.height}, channels={self.channels})"

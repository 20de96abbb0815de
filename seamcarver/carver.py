"""
SeamCarver: keeps a pixel grid and its energy map in sync.

Horizontal operations transpose the grid (or energy map), run the vertical
code path from seam.py, and transpose the result back.
"""

import numpy as np
import torch
from PIL import Image

from .energy import gradient_energy
from .errors import ContractViolationError, DegenerateGeometryError
from .grid import PixelGrid
from .seam import dp_seam, enlarge, remove_seam, validate_seam


class SeamCarver:
    """
    Content-aware resizer for a single image.

    Args:
        image: Pillow image, PixelGrid, numpy array (H, W, C), or tensor
            (C, H, W) in 0..255
    """

    def __init__(self, image):
        if isinstance(image, Image.Image):
            grid = PixelGrid.from_image(image)
        elif isinstance(image, PixelGrid):
            grid = image.copy()
        elif isinstance(image, np.ndarray):
            grid = PixelGrid.from_array(image)
        else:
            grid = PixelGrid(image)

        self._grid = None
        self._energy = None
        self._set_grid(grid)

    def _set_grid(self, grid: PixelGrid):
        # Energy is computed before anything is assigned, so an exception
        # leaves the previous state in place.
        energy = gradient_energy(grid)
        self._grid, self._energy = grid, energy

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def grid(self) -> PixelGrid:
        """Copy of the current pixel grid."""
        return self._grid.copy()

    @property
    def energy_map(self) -> torch.Tensor:
        """Copy of the current energy map (H, W)."""
        return self._energy.clone()

    def _check_pixel(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ContractViolationError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")

    def energy(self, x: int, y: int) -> float:
        """Energy of the pixel at column x, row y."""
        self._check_pixel(x, y)
        return self._energy[y, x].item()

    def color(self, x: int, y: int):
        """Color tuple of the pixel at column x, row y."""
        return self._grid.color_at(x, y)

    def picture(self) -> Image.Image:
        """Current image as a Pillow image."""
        return self._grid.to_image()

    def find_vertical_seam(self) -> torch.Tensor:
        """Column index per row of the minimum-energy vertical seam."""
        return dp_seam(self._energy)

    def find_horizontal_seam(self) -> torch.Tensor:
        """Row index per column of the minimum-energy horizontal seam."""
        return dp_seam(self._energy.T)

    def remove_vertical_seam(self, seam):
        if self.width <= 1:
            raise DegenerateGeometryError("Cannot remove a vertical seam: width is 1")
        seam = validate_seam(seam, self.height, self.width)
        self._set_grid(PixelGrid(remove_seam(self._grid.pixels, seam)))

    def remove_horizontal_seam(self, seam):
        if self.height <= 1:
            raise DegenerateGeometryError("Cannot remove a horizontal seam: height is 1")
        seam = validate_seam(seam, self.width, self.height)
        transposed = self._grid.transpose()
        carved = PixelGrid(remove_seam(transposed.pixels, seam))
        self._set_grid(carved.transpose())

    def insert_vertical_seams(self, n_seams: int):
        """Widen the image by n_seams columns."""
        self._set_grid(PixelGrid(enlarge(self._grid.pixels, n_seams)))

    def insert_horizontal_seams(self, n_seams: int):
        """Heighten the image by n_seams rows."""
        transposed = self._grid.transpose()
        enlarged = PixelGrid(enlarge(transposed.pixels, n_seams))
        self._set_grid(enlarged.transpose())

    def resize(self, width: int, height: int):
        """
        Carve the image to width x height.

        Columns are handled first, then rows. Shrinking removes seams one at
        a time; growing inserts all seams of an axis in a single call.
        """
        if width < 1 or height < 1:
            raise DegenerateGeometryError(f"Target size {width}x{height} is empty")
        if width >= 2 * self.width or height >= 2 * self.height:
            raise DegenerateGeometryError(
                f"Cannot grow {self.width}x{self.height} to {width}x{height}: "
                f"at most {2 * self.width - 1}x{2 * self.height - 1} in one step")

        while self.width > width:
            self.remove_vertical_seam(self.find_vertical_seam())
        if width > self.width:
            self.insert_vertical_seams(width - self.width)

        while self.height > height:
            self.remove_horizontal_seam(self.find_horizontal_seam())
        if height > self.height:
            self.insert_horizontal_seams(height - self.height)

    def __repr__(self):
        return f"SeamCarver(width={self.width}, height={self.height})"

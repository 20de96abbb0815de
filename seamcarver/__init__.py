"""
Content-aware image resizing by seam carving.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007.
"""

__version__ = "0.1.0"

from .errors import SeamCarvingError, ContractViolationError, DegenerateGeometryError
from .grid import PixelGrid
from .energy import BORDER_ENERGY, gradient_energy, normalize_energy
from .seam import (cumulative_cost, dp_seam, validate_seam, remove_seam,
                   insert_seam, plan_seams, restore_seam_columns, enlarge)
from .carver import SeamCarver

__all__ = [
    'SeamCarvingError',
    'ContractViolationError',
    'DegenerateGeometryError',
    'PixelGrid',
    'BORDER_ENERGY',
    'gradient_energy',
    'normalize_energy',
    'cumulative_cost',
    'dp_seam',
    'validate_seam',
    'remove_seam',
    'insert_seam',
    'plan_seams',
    'restore_seam_columns',
    'enlarge',
    'SeamCarver',
]

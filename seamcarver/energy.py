"""
Energy function for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the dual-gradient energy: the magnitude of the color gradient
measured between each pixel's horizontal and vertical neighbours. Border
pixels have no neighbour on one side and get a fixed, large energy instead.
"""

import torch

# Energy of every pixel on the first/last row and first/last column.
# Larger than any interior value, which is at most sqrt(6 * 255^2) ~ 625.
BORDER_ENERGY = 1000.0


def gradient_energy(image) -> torch.Tensor:
    """
    Compute dual-gradient energy for an image.

    For an interior pixel (x, y):
        dx = sum over RGB of (I(x+1, y) - I(x-1, y))^2
        dy = sum over RGB of (I(x, y+1) - I(x, y-1))^2
        E(x, y) = sqrt(dx + dy)

    The alpha channel, if any, does not contribute.

    Args:
        image: PixelGrid, or tensor (C, H, W) with channels in 0..255

    Returns:
        Energy map (H, W), float64
    """
    pixels = getattr(image, 'pixels', image)
    rgb = pixels[:3].to(torch.float64)
    _, H, W = rgb.shape

    energy = torch.full((H, W), BORDER_ENERGY, dtype=torch.float64)
    if H < 3 or W < 3:
        return energy

    # Central differences, interior only
    dx = rgb[:, 1:-1, 2:] - rgb[:, 1:-1, :-2]
    dy = rgb[:, 2:, 1:-1] - rgb[:, :-2, 1:-1]
    energy[1:-1, 1:-1] = torch.sqrt((dx ** 2).sum(dim=0) + (dy ** 2).sum(dim=0))

    return energy


def normalize_energy(energy: torch.Tensor, eps: float = 1e-8) -> torch.Tensor:
    """Remap energy to [0, 1] range for display.

    This is a monotonic transform so seam positions are unchanged.

    Args:
        energy: Energy map (H, W)
        eps: Small value to avoid division by zero

    Returns:
        Normalized energy map in [0, 1]
    """
    e_min = energy.min()
    e_max = energy.max()
    return (energy - e_min) / (e_max - e_min + eps)

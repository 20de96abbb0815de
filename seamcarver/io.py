"""
Image file I/O for the command-line tools.

Decoding and encoding are delegated to Pillow; the carver only ever sees
Pillow images or PixelGrids.
"""

from pathlib import Path

import matplotlib.pyplot as plt
import torch
from PIL import Image

from .energy import normalize_energy

JPEG_EXTENSIONS = ('.jpg', '.jpeg')


def load_image(path) -> Image.Image:
    """Open and fully decode an image file (PNG, JPEG, GIF, ...)."""
    with Image.open(path) as img:
        img.load()
        return img.copy()


def save_image(image: Image.Image, path, quality: int = 80):
    """
    Save a Pillow image, picking the format from the file extension.

    JPEG has no alpha channel, so RGBA images are flattened to RGB first.
    """
    path = Path(path)
    if path.suffix.lower() in JPEG_EXTENSIONS:
        if image.mode != 'RGB':
            image = image.convert('RGB')
        image.save(path, quality=quality)
    else:
        image.save(path)


def render_energy(energy: torch.Tensor, path, cmap: str = 'gray', title=None):
    """Save a heatmap of an energy map (H, W), scaled to [0, 1]."""
    H, W = energy.shape
    fig, ax = plt.subplots(figsize=(max(W / 50, 2), max(H / 50, 2)))
    ax.imshow(normalize_energy(energy).cpu().numpy(), cmap=cmap, vmin=0.0, vmax=1.0)
    if title:
        ax.set_title(title, fontsize=11)
    ax.axis('off')
    fig.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)

"""
Seam computation and seam editing.

Only vertical seams (one column index per row) are handled here. Horizontal
seams are obtained by running the same code on transposed inputs, see
carver.SeamCarver.
"""

import torch
from typing import List

from .energy import gradient_energy
from .errors import ContractViolationError, DegenerateGeometryError


def cumulative_cost(energy: torch.Tensor) -> torch.Tensor:
    """
    Minimum cumulative energy of any seam ending at each pixel.

    M[0, j] = E[0, j]
    M[i, j] = E[i, j] + min(M[i-1, j-1], M[i-1, j], M[i-1, j+1])

    Predecessors outside the grid are ignored.

    Args:
        energy: Energy map (H, W)

    Returns:
        Cost table (H, W), float64
    """
    energy = energy.to(torch.float64)
    H, W = energy.shape

    M = energy.clone()
    for i in range(1, H):
        M_prev = M[i - 1]
        M_left = torch.full((W,), float('inf'), dtype=torch.float64)
        M_left[1:] = M_prev[:-1]
        M_right = torch.full((W,), float('inf'), dtype=torch.float64)
        M_right[:-1] = M_prev[1:]

        M[i] = energy[i] + torch.minimum(torch.minimum(M_left, M_prev), M_right)

    return M


def dp_seam(energy: torch.Tensor) -> torch.Tensor:
    """
    Find the minimum-energy vertical seam by dynamic programming.

    The seam ends at the leftmost column of minimal cumulative cost in the
    last row. Backtracking then walks upwards; among the (up to) three
    candidate columns the unchanged column wins ties, then the left one,
    then the right one.

    Args:
        energy: Energy map (H, W)

    Returns:
        Seam indices (H,) with column index per row
    """
    if energy.dim() != 2 or energy.numel() == 0:
        raise ContractViolationError(
            f"Expected a non-empty (H, W) energy map, got shape {tuple(energy.shape)}")

    H, W = energy.shape
    M = cumulative_cost(energy)

    seam = torch.zeros(H, dtype=torch.long)
    seam[-1] = torch.argmin(M[-1])

    for i in range(H - 2, -1, -1):
        row = M[i]
        col = seam[i + 1].item()
        best_col, best_cost = col, row[col].item()
        for candidate in (col - 1, col + 1):
            if 0 <= candidate < W and row[candidate].item() < best_cost:
                best_col, best_cost = candidate, row[candidate].item()
        seam[i] = best_col

    return seam


def validate_seam(seam, height: int, width: int, connected: bool = True) -> torch.Tensor:
    """
    Check that seam is a valid vertical seam for a (height, width) grid.

    Args:
        seam: Sequence of integer column indices
        height, width: Grid dimensions
        connected: Also require adjacent indices to differ by at most 1

    Returns:
        Seam as a long tensor (H,)
    """
    raw = torch.as_tensor(seam)
    if raw.numel() > 0 and (raw.is_floating_point() or raw.is_complex()
                            or raw.dtype == torch.bool):
        raise ContractViolationError(f"Seam indices must be integers, got {raw.dtype}")
    seam = raw.to(torch.long)
    if seam.dim() != 1 or seam.shape[0] != height:
        raise ContractViolationError(
            f"Seam length {seam.numel()} does not match grid height {height}")
    if seam.min() < 0 or seam.max() >= width:
        raise ContractViolationError(
            f"Seam index out of range [0, {width}): min={seam.min().item()}, "
            f"max={seam.max().item()}")
    if connected and height > 1 and (seam[1:] - seam[:-1]).abs().max() > 1:
        raise ContractViolationError("Adjacent seam indices differ by more than 1")
    return seam


def remove_seam(image: torch.Tensor, seam) -> torch.Tensor:
    """
    Remove a vertical seam from an image.

    Args:
        image: Image tensor (C, H, W)
        seam: Column index per row (H,)

    Returns:
        Carved image (C, H, W - 1)
    """
    C, H, W = image.shape
    if W <= 1:
        raise DegenerateGeometryError("Cannot remove a seam from a single-column image")
    seam = validate_seam(seam, H, W)

    carved = torch.empty(C, H, W - 1, dtype=image.dtype)
    for i in range(H):
        col = seam[i].item()
        carved[:, i, :col] = image[:, i, :col]
        carved[:, i, col:] = image[:, i, col + 1:]

    return carved


def insert_seam(image: torch.Tensor, seam) -> torch.Tensor:
    """
    Insert a blended vertical seam into an image.

    In each row a new pixel is placed right after column seam[i]. Its value
    is the channel-wise average (alpha included, truncated towards zero) of
    the seam pixel and its right neighbour, i.e. of the two pixels that
    surround it after insertion. At the right edge the seam pixel is
    duplicated.

    Indices only need to be in range; planned seams mapped back onto a wider
    image may step more than one column between rows.

    Args:
        image: Image tensor (C, H, W)
        seam: Column index per row (H,)

    Returns:
        Enlarged image (C, H, W + 1)
    """
    C, H, W = image.shape
    seam = validate_seam(seam, H, W, connected=False)

    enlarged = torch.empty(C, H, W + 1, dtype=image.dtype)
    for i in range(H):
        col = seam[i].item()
        right = min(col + 1, W - 1)
        blend = (image[:, i, col].int() + image[:, i, right].int()) // 2

        enlarged[:, i, :col + 1] = image[:, i, :col + 1]
        enlarged[:, i, col + 1] = blend.to(image.dtype)
        enlarged[:, i, col + 2:] = image[:, i, col + 1:]

    return enlarged


def plan_seams(image: torch.Tensor, n_seams: int) -> List[torch.Tensor]:
    """
    Record the first n_seams vertical seams that repeated removal would take.

    Seams are found on a progressively narrowed working copy; the input is
    left untouched.

    Args:
        image: Image tensor (C, H, W)
        n_seams: Number of seams to record

    Returns:
        List of seams, in removal order
    """
    _, _, W = image.shape
    if n_seams < 0:
        raise ContractViolationError(f"Seam count must be non-negative, got {n_seams}")
    if n_seams >= W:
        raise DegenerateGeometryError(
            f"Cannot plan {n_seams} seams on an image {W} pixels wide")

    seams = []
    working = image.clone()
    for _ in range(n_seams):
        seam = dp_seam(gradient_energy(working))
        seams.append(seam)
        working = remove_seam(working, seam)

    return seams


def restore_seam_columns(seams: List[torch.Tensor]) -> List[torch.Tensor]:
    """
    Map seams planned by plan_seams back to columns of the unnarrowed image.

    Seam k was found after seams 0..k-1 had been removed, so each of its
    indices at or right of an earlier seam's index (in that row) moves one
    column to the right per such seam, latest removal first.

    Args:
        seams: Seams in removal order

    Returns:
        Seams in the same order, as columns of the first image
    """
    restored = []
    for k, seam in enumerate(seams):
        cols = seam.clone()
        for earlier in reversed(seams[:k]):
            cols = cols + (cols >= earlier).long()
        restored.append(cols)

    return restored


def enlarge(image: torch.Tensor, n_seams: int) -> torch.Tensor:
    """
    Widen an image by n_seams columns.

    Inserting the current best seam n times would pick the same seam over
    and over. Instead the n seams are planned by removal on a copy, mapped
    back to columns of the original image, and inserted in the same order.
    Every insertion moves the pending seams that lie to its right one
    column further right, so each new pixel follows a distinct original
    column.

    Args:
        image: Image tensor (C, H, W)
        n_seams: Number of columns to add

    Returns:
        Enlarged image (C, H, W + n_seams)
    """
    pending = restore_seam_columns(plan_seams(image, n_seams))

    enlarged = image
    while pending:
        seam = pending.pop(0)
        enlarged = insert_seam(enlarged, seam)
        pending = [cols + (cols > seam).long() for cols in pending]

    return enlarged

"""Depth map value type.

A depth map is a ``(height, width)`` ``float32`` array whose values lie in
``[0, 1]``. Maps handed out by this package are read-only; producing a
different map always allocates a new array.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

DepthMap = npt.NDArray[np.float32]

DEPTH_DTYPE = np.float32


def freeze(depth_map: DepthMap) -> DepthMap:
    depth_map.setflags(write=False)
    return depth_map


def zeros_depth_map(width: int, height: int) -> DepthMap:
    return freeze(np.zeros((height, width), dtype=DEPTH_DTYPE))


def depth_map_size(depth_map: DepthMap) -> tuple[int, int]:
    """Return ``(width, height)`` of ``depth_map``."""

    height, width = depth_map.shape
    return width, height


def as_depth_map(rows: DepthMap | Sequence[Sequence[float]]) -> DepthMap:
    """Convert nested rows into a validated, read-only depth map."""

    if isinstance(rows, np.ndarray):
        candidate = rows
    else:
        if len(rows) == 0:
            raise ValueError("Depth map must contain at least one row")
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError(
                f"Depth map rows must share one width, found {sorted(widths)}"
            )
        candidate = np.asarray(rows)

    if candidate.ndim != 2 or 0 in candidate.shape:
        raise ValueError(
            f"Depth map must be a non-empty 2-D grid, got shape {candidate.shape}"
        )
    depth_map = np.array(candidate, dtype=DEPTH_DTYPE, copy=True)
    if np.isnan(depth_map).any() or depth_map.min() < 0.0 or depth_map.max() > 1.0:
        raise ValueError("Depth map values must lie within [0, 1]")
    return freeze(depth_map)

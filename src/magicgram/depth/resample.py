from __future__ import annotations

import numpy as np

from magicgram.depth.map import DepthMap, depth_map_size, freeze


def _nearest_indices(source_length: int, target_length: int) -> np.ndarray:
    # floor(i * source / target) in exact integer arithmetic
    return (np.arange(target_length, dtype=np.int64) * source_length) // target_length


def resize(source: DepthMap, target_width: int, target_height: int) -> DepthMap:
    """Nearest-neighbour resize of ``source`` to ``target_width`` x ``target_height``.

    Returns ``source`` itself when it already has the requested size. Every
    value in the result is copied from ``source``; nothing is interpolated.
    ``source`` must be a non-empty rectangular map.
    """

    if target_width < 1 or target_height < 1:
        raise ValueError(
            f"Resize target must be at least 1x1, got {target_width}x{target_height}"
        )

    source_width, source_height = depth_map_size(source)
    if (source_width, source_height) == (target_width, target_height):
        return source

    rows = _nearest_indices(source_height, target_height)
    columns = _nearest_indices(source_width, target_width)
    return freeze(source[np.ix_(rows, columns)])

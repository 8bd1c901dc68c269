"""Depth map generation contract.

``DepthMapGenerator`` drives any ``DepthMapSource``: it asks the source for a
raw map and, unless ``auto_resize`` is switched off, resamples that map to the
requested size. Sources are free to return maps at their native resolution.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from magicgram.depth.map import DepthMap, as_depth_map, zeros_depth_map
from magicgram.depth.resample import resize
from magicgram.utilities.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class DepthMapSource(Protocol):
    def make(self, width: int, height: int) -> DepthMap:
        ...


class PlaceholderDepthMapSource:
    """Stand-in source that produces a single zero cell."""

    def make(self, width: int, height: int) -> DepthMap:
        logger.warning(
            "No depth map source configured; returning a 1x1 placeholder for %sx%s",
            width,
            height,
        )
        return zeros_depth_map(1, 1)


class StaticDepthMapSource:
    """Serve a precomputed depth map regardless of the requested size."""

    def __init__(self, depth_map: DepthMap) -> None:
        self._depth_map = as_depth_map(depth_map)

    def make(self, width: int, height: int) -> DepthMap:
        return self._depth_map


class DepthMapGenerator:
    def __init__(
        self,
        source: DepthMapSource | None = None,
        *,
        auto_resize: bool = True,
    ) -> None:
        self.source: DepthMapSource = source or PlaceholderDepthMapSource()
        self.auto_resize = auto_resize

    def make(self, width: int, height: int) -> DepthMap:
        return self.source.make(width, height)

    def generate(self, width: int, height: int) -> DepthMap:
        if width < 1 or height < 1:
            raise ValueError(
                f"Depth map size must be at least 1x1, got {width}x{height}"
            )
        depth_map = self.make(width, height)
        if not isinstance(depth_map, np.ndarray):
            depth_map = as_depth_map(depth_map)
        if not self.auto_resize:
            return depth_map
        return resize(depth_map, width, height)

from __future__ import annotations

from os import PathLike

import numpy as np
from PIL import Image

from magicgram.depth.map import DEPTH_DTYPE, DepthMap, freeze
from magicgram.utilities.logging import get_logger

logger = get_logger(__name__)

LUMINANCE_MODE = "L"


class ImageDepthMapSource:
    """Use the luminance of a fixed-resolution image as a depth map.

    The map keeps the image's own size, so a ``DepthMapGenerator`` with
    ``auto_resize`` enabled will resample it to whatever size is requested.
    """

    def __init__(self, image: Image.Image | str | PathLike[str]) -> None:
        if isinstance(image, Image.Image):
            loaded = image
        else:
            with Image.open(image) as opened:
                opened.load()
                loaded = opened.copy()
            logger.debug("Loaded depth image %s (%sx%s)", image, *loaded.size)
        self._depth_map = self._to_depth_map(loaded)

    @staticmethod
    def _to_depth_map(image: Image.Image) -> DepthMap:
        luminance = np.asarray(image.convert(LUMINANCE_MODE), dtype=DEPTH_DTYPE)
        return freeze(luminance / DEPTH_DTYPE(255))

    def make(self, width: int, height: int) -> DepthMap:
        return self._depth_map

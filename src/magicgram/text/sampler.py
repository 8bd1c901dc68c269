"""Rasterize text and read it back as a depth map."""

from __future__ import annotations

import math
from collections.abc import Callable
from concurrent.futures import Future
from pathlib import Path

import numpy as np

from magicgram.depth.generator import DepthMapGenerator
from magicgram.depth.map import DEPTH_DTYPE, DepthMap, freeze
from magicgram.text.backend import DrawingSurface, PygameSurface
from magicgram.text.color import Color
from magicgram.text.config import LayoutConfig, LineBreak, TextAlign, VerticalAlign
from magicgram.text.export import PngExporter
from magicgram.text.layout import TextLayoutEngine
from magicgram.utilities.env import Configuration, PixelReadbackStrategy
from magicgram.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FONT = "bold 56px Helvetica, Arial, sans-serif"
TEXT_PNG_FILENAME = "text.png"
RGBA_CHANNELS = 4

SurfaceFactory = Callable[[int, int], DrawingSurface]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def read_depth_map(
    surface: DrawingSurface,
    strategy: PixelReadbackStrategy = PixelReadbackStrategy.BUFFER,
) -> DepthMap:
    """Convert a grayscale surface into depth values using its red channel."""

    width, height = surface.width, surface.height
    if strategy == PixelReadbackStrategy.ARRAY:
        red = surface.red_channel()
    else:
        pixels = np.frombuffer(
            surface.get_pixel_data(0, 0, width, height), dtype=np.uint8
        )
        red = pixels.reshape(height, width, RGBA_CHANNELS)[:, :, 0]
    return freeze(red.astype(DEPTH_DTYPE) / DEPTH_DTYPE(255))


class TextRasterSampler:
    """Depth map source that renders white text on a black surface."""

    def __init__(
        self,
        text: str,
        output: str | None = None,
        font: str | None = None,
        padding_x: float | None = None,
        padding_y: float | None = None,
        size_to_fill: bool = True,
        vertical_align: VerticalAlign | str = VerticalAlign.MIDDLE,
        text_align: TextAlign | str = TextAlign.CENTER,
        line_break: LineBreak | str = LineBreak.AUTO,
        *,
        surface_factory: SurfaceFactory = PygameSurface,
        exporter: PngExporter | None = None,
    ) -> None:
        self.config = LayoutConfig(
            text=text,
            font=self._default_font() if font is None else font,
            padding_x=padding_x,
            padding_y=padding_y,
            text_align=text_align,
            vertical_align=vertical_align,
            line_break=line_break,
            size_to_fill=size_to_fill,
        )
        self.output = output
        self._surface_factory = surface_factory
        self._exporter = exporter or PngExporter()
        self.last_export: Future[Path] | None = None

    @staticmethod
    def _default_font() -> str:
        return Configuration.default_font() or DEFAULT_FONT

    @classmethod
    def generator(cls, text: str, **kwargs) -> DepthMapGenerator:
        return DepthMapGenerator(cls(text, **kwargs))

    def resolve_config(self, width: int, height: int) -> LayoutConfig:
        fraction = Configuration.default_padding_fraction()
        return self.config.with_default_padding(
            padding_x=_round_half_up(width * fraction),
            padding_y=_round_half_up(height * fraction),
        )

    def make(self, width: int, height: int) -> DepthMap:
        surface = self._surface_factory(width, height)

        context = surface.get_draw_context()
        context.fill_style = Color.black()
        context.fill_rect(0, 0, width, height)
        context.fill_style = Color.white()

        engine = TextLayoutEngine(surface, self.resolve_config(width, height))
        engine.draw_text()

        depth_map = read_depth_map(surface, Configuration.pixel_readback_strategy())

        if self.output and Configuration.png_export_enabled():
            self._queue_export(surface)
        return depth_map

    def _queue_export(self, surface: DrawingSurface) -> None:
        destination = f"{self.output}{TEXT_PNG_FILENAME}"
        try:
            self.last_export = self._exporter.export(surface.to_image(), destination)
        except Exception:
            logger.exception("Failed to queue text PNG export to %s", destination)
            return
        logger.debug("Queued text PNG export to %s", destination)

"""Drawing capability consumed by the text layout engine.

``DrawingSurface`` and ``DrawContext`` describe the small canvas-like API the
layout and sampling code relies on: measure a string, fill rectangles, draw a
string at a position and read pixels back. ``PygameSurface`` provides it on top
of ``pygame.Surface`` and ``pygame.font``.
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum

import numpy as np
import pygame
from PIL import Image

from magicgram.text.color import Color
from magicgram.text.font import FontSpec

RGBA_IMAGE_FORMAT = "RGBA"
PNG_FORMAT = "PNG"


class TextBaseline(StrEnum):
    TOP = "top"
    MIDDLE = "middle"
    ALPHABETIC = "alphabetic"
    BOTTOM = "bottom"


@dataclass(frozen=True, slots=True)
class TextMetrics:
    width: float


class DrawContext(ABC):
    font: str
    fill_style: Color
    text_baseline: TextBaseline

    @abstractmethod
    def measure_text(self, text: str) -> TextMetrics:
        ...

    @abstractmethod
    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        ...

    @abstractmethod
    def fill_text(self, text: str, x: float, y: float) -> None:
        ...


class DrawingSurface(ABC):
    @property
    @abstractmethod
    def width(self) -> int:
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        ...

    @abstractmethod
    def get_draw_context(self) -> DrawContext:
        ...

    @abstractmethod
    def get_pixel_data(self, x: int, y: int, width: int, height: int) -> bytes:
        """Return RGBA bytes for the given rectangle in row-major order."""

    @abstractmethod
    def red_channel(self) -> np.ndarray:
        """Return the red channel as a ``(height, width)`` ``uint8`` array."""

    @abstractmethod
    def to_image(self) -> Image.Image:
        """Return an independent Pillow snapshot of the surface."""

    def encode_png(self) -> bytes:
        buffer = io.BytesIO()
        self.to_image().save(buffer, format=PNG_FORMAT)
        return buffer.getvalue()


class PygameDrawContext(DrawContext):
    def __init__(self, surface: pygame.Surface) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self._surface = surface
        self._font_cache: dict[tuple[tuple[str, ...], int, bool, bool], pygame.font.Font] = {}
        self._font_spec = FontSpec.parse("10px sans-serif")
        self.fill_style = Color.black()
        self.text_baseline = TextBaseline.ALPHABETIC

    @property
    def font(self) -> str:
        return str(self._font_spec)

    @font.setter
    def font(self, value: str) -> None:
        self._font_spec = FontSpec.parse(value)

    def _get_font(self) -> pygame.font.Font:
        spec = self._font_spec
        key = (spec.families, spec.size, spec.bold, spec.italic)
        if key not in self._font_cache:
            self._font_cache[key] = pygame.font.SysFont(
                list(spec.families) or None,
                max(1, spec.size),
                bold=spec.bold,
                italic=spec.italic,
            )
        return self._font_cache[key]

    def measure_text(self, text: str) -> TextMetrics:
        width, _ = self._get_font().size(text)
        return TextMetrics(width=width)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        self._surface.fill(self.fill_style.tuple(), rect)

    def _top_for_baseline(self, font: pygame.font.Font, y: float) -> float:
        if self.text_baseline == TextBaseline.TOP:
            return y
        if self.text_baseline == TextBaseline.MIDDLE:
            return y - font.get_height() / 2
        if self.text_baseline == TextBaseline.ALPHABETIC:
            return y - font.get_ascent()
        return y - font.get_height()

    def fill_text(self, text: str, x: float, y: float) -> None:
        if not text:
            return
        font = self._get_font()
        rendered = font.render(text, True, self.fill_style.tuple())
        top = self._top_for_baseline(font, y)
        self._surface.blit(rendered, (round(x), round(top)))


class PygameSurface(DrawingSurface):
    def __init__(self, width: int, height: int) -> None:
        self._surface = pygame.Surface((width, height))
        self._context: PygameDrawContext | None = None

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def get_draw_context(self) -> PygameDrawContext:
        if self._context is None:
            self._context = PygameDrawContext(self._surface)
        return self._context

    def get_pixel_data(self, x: int, y: int, width: int, height: int) -> bytes:
        region = self._surface.subsurface(pygame.Rect(x, y, width, height))
        return pygame.image.tobytes(region, RGBA_IMAGE_FORMAT)

    def red_channel(self) -> np.ndarray:
        return pygame.surfarray.array_red(self._surface).swapaxes(0, 1)

    def to_image(self) -> Image.Image:
        return Image.frombytes(
            RGBA_IMAGE_FORMAT,
            self._surface.get_size(),
            pygame.image.tobytes(self._surface, RGBA_IMAGE_FORMAT),
        )

"""Word wrapping, font fitting and alignment for text drawn on a surface.

The engine works purely through a ``DrawContext``: every width it reasons
about comes from ``measure_text`` at the context's current font, so the same
code lays out text for pygame fonts and for the fixed-width fakes used in
tests.

Layout of one ``draw_text`` call:

1. Optionally grow the font one pixel at a time until the wrapped block no
   longer fits the available height, or until a word has to be broken.
2. Split any word wider than the usable width into fitting pieces.
3. Break the words into lines (greedy ``auto`` mode or one ``word`` per line).
4. Place the block vertically, then each line horizontally, and draw it.
"""

from __future__ import annotations

from dataclasses import dataclass

from magicgram.errors import ConfigurationError
from magicgram.text.backend import DrawContext, DrawingSurface, TextBaseline
from magicgram.text.config import (ContainerSize, LayoutConfig, LineBreak,
                                   TextAlign, VerticalAlign)
from magicgram.text.font import FontSpec
from magicgram.utilities.logging import get_logger

logger = get_logger(__name__)

MIN_FONT_SIZE = 1


@dataclass(frozen=True, slots=True)
class Line:
    text: str
    width: float


@dataclass(slots=True)
class TextPosition:
    x: float = 0
    y: float = 0


class TextLayoutEngine:
    def __init__(
        self,
        surface: DrawingSurface,
        config: LayoutConfig,
        container: ContainerSize | None = None,
    ) -> None:
        if not isinstance(surface, DrawingSurface):
            raise ConfigurationError(
                f"Expected a DrawingSurface to draw on, got {type(surface).__name__}"
            )
        if config.fit_parent and container is None:
            raise ConfigurationError(
                "'fitParent' is set but no container size was provided"
            )
        self.surface = surface
        self.config = config
        self.container = container
        self.padding_x, self.padding_y = config.resolved_padding()

        self._font_spec: FontSpec = config.font_spec
        self.line_height = self._font_spec.size

        self.context: DrawContext = surface.get_draw_context()
        self.context.font = config.font
        self.context.text_baseline = TextBaseline.BOTTOM

    # ------------------------------------------------------------------
    # Container geometry
    # ------------------------------------------------------------------
    def container_size(self) -> ContainerSize:
        # The constructor rejects fit_parent without a container.
        if self.config.fit_parent and self.container is not None:
            return self.container
        return ContainerSize(self.surface.width, self.surface.height)

    def max_text_length(self, container_width: float) -> float:
        return container_width - self.padding_x * 2

    # ------------------------------------------------------------------
    # Measuring and wrapping
    # ------------------------------------------------------------------
    def measure(self, text: str) -> float:
        return self.context.measure_text(text).width

    def set_font_size(self, size: int) -> None:
        self._font_spec = self._font_spec.with_size(size)
        self.context.font = str(self._font_spec)
        self.line_height = size

    def check_words_length(
        self, tokens: list[str], max_text_length: float
    ) -> list[str]:
        """Return ``tokens`` with every over-wide token split into fitting pieces."""

        checked: list[str] = []
        pending = list(reversed(tokens))
        while pending:
            token = pending.pop()
            if self.measure(token) <= max_text_length or len(token) <= 1:
                checked.append(token)
                continue

            cut = 0
            while cut < len(token) and (
                self.measure(token[: cut + 1]) <= max_text_length
            ):
                cut += 1
            # A container narrower than one glyph still has to consume a character.
            cut = max(cut, 1)

            checked.append(token[:cut])
            pending.append(token[cut:])
        return checked

    def break_text_into_lines(
        self, tokens: list[str], max_text_length: float
    ) -> list[Line]:
        lines: list[Line] = []
        index = 0
        while index < len(tokens):
            if self.config.line_break == LineBreak.WORD:
                text = tokens[index]
                index += 1
            else:
                text = tokens[index] + " "
                index += 1
                while index < len(tokens) and (
                    self.measure(text + tokens[index]) <= max_text_length
                ):
                    text += tokens[index] + " "
                    index += 1
                text = text.strip()
            lines.append(Line(text=text, width=self.measure(text)))
        return lines

    def wrapped_lines(self, container_width: float) -> list[Line]:
        max_text_length = self.max_text_length(container_width)
        tokens = self.check_words_length(self.config.tokens, max_text_length)
        return self.break_text_into_lines(tokens, max_text_length)

    # ------------------------------------------------------------------
    # Font fitting
    # ------------------------------------------------------------------
    def available_height(self, container_height: float) -> float:
        # Horizontal padding on purpose; see DESIGN.md "available height".
        return container_height - self.padding_x * 2

    def fit_font_size(self, container_width: float, container_height: float) -> int:
        """Grow the font until the block overflows or a word must be broken.

        Returns the last size at which neither happened and leaves the context
        set to it. The result never drops below ``MIN_FONT_SIZE``.
        """

        available_height = self.available_height(container_height)
        word_count = len(self.config.tokens)

        size = 0
        while True:
            size += 1
            self.set_font_size(size)
            lines = self.wrapped_lines(container_width)
            block_height = len(lines) * self.line_height
            wrapped_word_count = len(" ".join(line.text for line in lines).split())
            if not (
                block_height < available_height
                and wrapped_word_count == word_count
            ):
                break

        fitted = max(MIN_FONT_SIZE, size - 1)
        self.set_font_size(fitted)
        logger.debug(
            "Fitted font size %spx for %s words in %sx%s",
            fitted,
            word_count,
            container_width,
            container_height,
        )
        return fitted

    # ------------------------------------------------------------------
    # Alignment
    # ------------------------------------------------------------------
    def vertical_start(self, block_height: float, container_height: float) -> float:
        if self.config.vertical_align == VerticalAlign.MIDDLE:
            return (container_height - block_height) / 2
        if self.config.vertical_align == VerticalAlign.BOTTOM:
            return container_height - block_height - self.padding_y
        return self.padding_y

    def horizontal_start(self, line_width: float, container_width: float) -> float:
        if self.config.text_align == TextAlign.CENTER:
            return (container_width - line_width) / 2
        if self.config.text_align == TextAlign.RIGHT:
            return container_width - line_width - self.padding_x
        return self.padding_x

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def draw_text(self) -> list[Line]:
        """Lay out the configured text and draw it; returns the drawn lines."""

        container_width, container_height = self.container_size()

        if self.config.size_to_fill:
            self.fit_font_size(container_width, container_height)

        lines = self.wrapped_lines(container_width)
        block_height = len(lines) * self.line_height

        position = TextPosition()
        position.y = self.vertical_start(block_height, container_height)
        for line in lines:
            position.x = self.horizontal_start(line.width, container_width)
            position.y = int(position.y) + int(self.line_height)
            self.context.fill_text(line.text, position.x, position.y)

        logger.debug(
            "Drew %s line(s) at %spx on a %sx%s container",
            len(lines),
            self.line_height,
            container_width,
            container_height,
        )
        return lines

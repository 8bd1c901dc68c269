from __future__ import annotations

import re
from dataclasses import dataclass

from magicgram.errors import ConfigurationError

_SIZE_PATTERN = re.compile(r"\b(\d+)px\b", re.IGNORECASE)
_BOLD_KEYWORDS = {"bold", "bolder"}
_ITALIC_KEYWORDS = {"italic", "oblique"}


@dataclass(frozen=True, slots=True)
class FontSpec:
    """A CSS-like font shorthand such as ``"bold 56px Helvetica, Arial"``."""

    prefix: str
    size: int
    suffix: str

    @classmethod
    def parse(cls, font: str) -> "FontSpec":
        match = _SIZE_PATTERN.search(font)
        if match is None:
            raise ConfigurationError(
                f"Cannot parse font size as an integer from {font!r}; "
                "expected a size such as '18px'"
            )
        return cls(
            prefix=font[: match.start()],
            size=int(match.group(1)),
            suffix=font[match.end() :],
        )

    def with_size(self, size: int) -> "FontSpec":
        return FontSpec(prefix=self.prefix, size=size, suffix=self.suffix)

    @property
    def families(self) -> tuple[str, ...]:
        names = (name.strip().strip("'\"") for name in self.suffix.split(","))
        return tuple(name for name in names if name)

    @property
    def bold(self) -> bool:
        return bool(_BOLD_KEYWORDS & self._prefix_keywords())

    @property
    def italic(self) -> bool:
        return bool(_ITALIC_KEYWORDS & self._prefix_keywords())

    def _prefix_keywords(self) -> set[str]:
        return {word.lower() for word in self.prefix.split()}

    def __str__(self) -> str:
        return f"{self.prefix}{self.size}px{self.suffix}"

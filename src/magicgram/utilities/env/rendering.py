import os

from magicgram.utilities.env.enums import PixelReadbackStrategy
from magicgram.utilities.env.parsing import _env_float, _env_optional_str

DEFAULT_PADDING_FRACTION = 0.1


class RenderingConfiguration:
    @classmethod
    def pixel_readback_strategy(cls) -> PixelReadbackStrategy:
        strategy = os.environ.get(
            "MAGICGRAM_PIXEL_READBACK_STRATEGY", "buffer"
        ).strip().lower()
        try:
            return PixelReadbackStrategy(strategy)
        except ValueError as exc:
            raise ValueError(
                "MAGICGRAM_PIXEL_READBACK_STRATEGY must be 'buffer' or 'array'"
            ) from exc

    @classmethod
    def default_padding_fraction(cls) -> float:
        return _env_float(
            "MAGICGRAM_DEFAULT_PADDING_FRACTION",
            default=DEFAULT_PADDING_FRACTION,
            minimum=0.0,
            maximum=0.5,
        )

    @classmethod
    def default_font(cls) -> str | None:
        return _env_optional_str("MAGICGRAM_DEFAULT_FONT")

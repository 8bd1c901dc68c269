"""Environment configuration helpers."""

from magicgram.utilities.env.config import Configuration as Configuration
from magicgram.utilities.env.enums import \
    PixelReadbackStrategy as PixelReadbackStrategy

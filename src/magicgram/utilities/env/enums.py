from enum import StrEnum


class PixelReadbackStrategy(StrEnum):
    BUFFER = "buffer"
    ARRAY = "array"

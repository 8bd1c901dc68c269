from magicgram.text.config import LayoutConfig as LayoutConfig
from magicgram.text.layout import TextLayoutEngine as TextLayoutEngine
from magicgram.text.sampler import TextRasterSampler as TextRasterSampler

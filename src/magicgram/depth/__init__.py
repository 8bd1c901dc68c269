from magicgram.depth.generator import DepthMapGenerator as DepthMapGenerator
from magicgram.depth.generator import DepthMapSource as DepthMapSource
from magicgram.depth.generator import \
    PlaceholderDepthMapSource as PlaceholderDepthMapSource
from magicgram.depth.generator import \
    StaticDepthMapSource as StaticDepthMapSource
from magicgram.depth.map import DepthMap as DepthMap
from magicgram.depth.resample import resize as resize

from magicgram.depth.generator import DepthMapGenerator as DepthMapGenerator
from magicgram.depth.map import DepthMap as DepthMap
from magicgram.errors import ConfigurationError as ConfigurationError

from magicgram.utilities.env.export import ExportConfiguration
from magicgram.utilities.env.rendering import RenderingConfiguration


class Configuration(
    RenderingConfiguration,
    ExportConfiguration,
):
    """Aggregate environment configuration helpers."""

from pathlib import Path
from typing import Annotated

import numpy as np
import typer
from PIL import Image

from magicgram.depth.generator import DepthMapGenerator
from magicgram.errors import ConfigurationError
from magicgram.text.config import LineBreak, TextAlign, VerticalAlign
from magicgram.text.sampler import TextRasterSampler
from magicgram.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480


def text_depth_command(
    text: Annotated[str, typer.Argument(help="Text to turn into a depth map")],
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Where to save the depth map PNG")
    ] = Path("depth.png"),
    width: Annotated[int, typer.Option("--width", min=1)] = DEFAULT_WIDTH,
    height: Annotated[int, typer.Option("--height", min=1)] = DEFAULT_HEIGHT,
    font: Annotated[str | None, typer.Option("--font")] = None,
    padding_x: Annotated[float | None, typer.Option("--padding-x", min=0)] = None,
    padding_y: Annotated[float | None, typer.Option("--padding-y", min=0)] = None,
    text_align: Annotated[TextAlign, typer.Option("--text-align")] = TextAlign.CENTER,
    vertical_align: Annotated[
        VerticalAlign, typer.Option("--vertical-align")
    ] = VerticalAlign.MIDDLE,
    line_break: Annotated[LineBreak, typer.Option("--line-break")] = LineBreak.AUTO,
    size_to_fill: bool = typer.Option(
        True,
        "--size-to-fill/--no-size-to-fill",
        help="Grow the font to fill the available height",
    ),
    auto_resize: bool = typer.Option(
        True,
        "--auto-resize/--no-auto-resize",
        help="Resample the raw map to the requested size",
    ),
) -> None:
    try:
        sampler = TextRasterSampler(
            text,
            font=font,
            padding_x=padding_x,
            padding_y=padding_y,
            size_to_fill=size_to_fill,
            vertical_align=vertical_align,
            text_align=text_align,
            line_break=line_break,
        )
    except ConfigurationError as exc:
        logger.error("Invalid text depth configuration: %s", exc)
        raise typer.Exit(code=1) from exc

    generator = DepthMapGenerator(sampler, auto_resize=auto_resize)
    depth_map = generator.generate(width, height)

    grayscale = np.rint(depth_map * 255).astype(np.uint8)
    output.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(grayscale).save(output)
    typer.echo(f"Saved {depth_map.shape[1]}x{depth_map.shape[0]} depth map to {output}")

import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from magicgram.cli.commands.text_depth import text_depth_command

app = typer.Typer(no_args_is_help=True)

app.command(name="text-depth")(text_depth_command)


@app.callback()
def _root() -> None:
    """Generate depth maps for stereogram rendering."""


def main() -> None:
    app()


if __name__ == "__main__":
    main()

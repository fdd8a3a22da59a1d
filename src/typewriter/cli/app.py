import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from typewriter.cli.generate import generate, languages

app = typer.Typer(
    name="typewriter",
    help="Typewriter CLI — generate Flow and TypeScript declarations from Go types.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("generate")(generate)
app.command("languages")(languages)

_LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


@app.callback()
def configure(
    verbose: Annotated[int, typer.Option("--verbose", "-v", count=True, help="Increase log verbosity.")] = 0,
) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger("typewriter")
    logger.handlers = [handler]
    logger.setLevel(_LOG_LEVELS.get(verbose, logging.DEBUG))


def main() -> None:
    app()

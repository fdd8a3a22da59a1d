from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from typewriter.config import get_default_language
from typewriter.core.fragments import FragmentResolver
from typewriter.core.generate import generate_file, generate_source
from typewriter.errors import TypewriterError

console = Console()
err_console = Console(stderr=True)


def generate(
    source: Annotated[Path, typer.Argument(help="Go file or directory to read types from.")],
    lang: Annotated[str | None, typer.Option("--lang", "-l", help="Output language (e.g. flow, ts).")] = None,
    out: Annotated[Path | None, typer.Option("--out", "-o", help="File to write. Prints to stdout if omitted.")] = None,
    recursive: Annotated[bool, typer.Option("--recursive", "-r", help="Read sub-directories too.")] = False,
    templates: Annotated[Path | None, typer.Option(help="Directory holding the fragment sets.")] = None,
) -> None:
    """Generate type declarations from Go source."""
    fragments = FragmentResolver(templates)
    language = lang or get_default_language()
    try:
        if out is None:
            typer.echo(generate_source(source, language, recursive=recursive, fragments=fragments), nl=False)
            return
        written = generate_file(source, language, out, recursive=recursive, fragments=fragments)
    except (TypewriterError, OSError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    err_console.print(f"[green]Wrote[/green] {escape(str(written))}")


def languages(
    templates: Annotated[Path | None, typer.Option(help="Directory holding the fragment sets.")] = None,
) -> None:
    """List the languages that have fragment sets."""
    for name in FragmentResolver(templates).languages():
        console.print(name)

"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from epub_builder.commands.init import TemplateLang

app = typer.Typer(
    name="epub-builder",
    help="Build EPUB books from a YAML/JSON spine of Markdown and HTML files.",
    add_completion=False,
)

console = Console()


def setup_logging(verbose: bool) -> None:
    """Route log records through rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def build(
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Config path, default is epub-builder.{yaml,json}",
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output file path, default {title}.epub",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress progress output",
        ),
    ] = False,
) -> None:
    """Build an EPUB book."""
    setup_logging(verbose)

    try:
        from epub_builder.commands.build import execute_build

        execute_build(
            config_path=config,
            output_path=output,
            console=console,
            quiet=quiet,
        )
    except Exception as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def init(
    lang: Annotated[
        TemplateLang,
        typer.Option(
            "--lang",
            "-l",
            help="Language of the starter config",
        ),
    ] = TemplateLang.EN,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing epub-builder.yaml",
        ),
    ] = False,
) -> None:
    """Create a starter config file."""
    try:
        from epub_builder.commands.init import execute_init

        execute_init(lang=lang, force=force, console=console)
    except Exception as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()

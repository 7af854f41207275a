"""Build command implementation."""

import logging
import re
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from epub_builder.core.builder import BookBuilder
from epub_builder.core.config_loader import load_config
from epub_builder.errors import ConfigError
from epub_builder.models.config import BookConfig

log = logging.getLogger(__name__)

DEFAULT_CONFIGS = ("epub-builder.yaml", "epub-builder.json")


def resolve_config_path(config_path: Path | None, cwd: Path) -> Path:
    """Pick the explicit config, else the first default found in ``cwd``."""
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config({config_path}) file not found")
        return config_path

    for name in DEFAULT_CONFIGS:
        candidate = cwd / name
        if candidate.exists():
            return candidate
    raise ConfigError("Config file not resolved")


def default_output_path(config: BookConfig, cwd: Path) -> Path:
    """``{title}.epub`` in the working directory."""
    safe_title = re.sub(r"[\\/]", "_", config.title)
    return cwd / f"{safe_title}.epub"


def execute_build(
    config_path: Path | None,
    output_path: Path | None,
    console: Console,
    cwd: Path | None = None,
    quiet: bool = False,
) -> Path:
    """Execute the build command.

    The archive is only written once every stage succeeded.
    """
    cwd = cwd or Path.cwd()
    resolved = resolve_config_path(config_path, cwd)
    config = load_config(resolved)

    builder = BookBuilder(config, source_root=resolved.parent)
    if quiet:
        data = builder.build()
    else:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(f"Building {config.title}...", total=None)
            data = builder.build()

    final_output = output_path or default_output_path(config, cwd)
    final_output.parent.mkdir(parents=True, exist_ok=True)
    final_output.write_bytes(data)
    log.info("Wrote %s (%d bytes)", final_output, len(data))

    if not quiet:
        summary_lines = [
            f"[bold]{config.title}[/]",
            f"[dim]Author:[/] {config.author}",
            f"[dim]Language:[/] {config.lang}",
            f"[dim]Resources:[/] {len(builder.registry)}",
            f"[dim]Spine items:[/] {len(builder.spine)}",
            "",
            f"[dim]Config:[/] {resolved}",
            f"[dim]Output:[/] {final_output}",
        ]
        console.print(
            Panel(
                "\n".join(summary_lines),
                title="Complete",
                border_style="green",
            )
        )

    return final_output

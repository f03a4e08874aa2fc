"""Command-line interface for rainbow delimiters."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from . import context
from .adjust import adjust_color
from .colorizer import RainbowDelimiters, render
from .colors import hsl_to_hex
from .config import RainbowConfig, load_config
from .document import colorize_html, colorize_markdown
from .exceptions import RainbowError
from .logger import get_logger, setup_logger
from .palette import generate_base_colors
from .theme import ThemeMode, resolve_dark_theme

logger = get_logger()

app = typer.Typer(
    name="rainbow",
    help="Color bracket delimiters by nesting depth",
    add_completion=False,
)

InputFile = Annotated[Path, typer.Argument(help="Input file ('-' reads stdin)")]
OutputOption = Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")]
ThemeOption = Annotated[
    ThemeMode | None,
    typer.Option("--theme", help="Display theme (default: from config, else auto)"),
]
PaletteSizeOption = Annotated[
    int | None,
    typer.Option(
        "--palette-size", help="Number of base colors (default: from config, else 32)", min=1
    ),
]
BackgroundOption = Annotated[
    str | None,
    typer.Option(
        "--background",
        help="Background color used by --theme auto, e.g. 'rgb(30, 30, 30)' or '#1e1e1e'",
    ),
]


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show blocks, 2=show fallbacks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: rainbow_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for rainbow commands."""
    setup_logger(verbose)
    context.set_config_path(config)


@app.command()
def text(
    file: InputFile,
    *,
    output: OutputOption = None,
    theme: ThemeOption = None,
    palette_size: PaletteSizeOption = None,
    background: BackgroundOption = None,
) -> None:
    """Colorize the delimiters of a plain text file."""
    settings = _load_settings(file)
    content = _read_input(file)
    is_dark = resolve_dark_theme(theme or settings.theme, background=background)

    colorizer = RainbowDelimiters(palette_size or settings.palette_size)
    scan = colorizer.scan(content, is_dark)
    if scan.final_depth:
        logger.checks(f"{scan.final_depth} delimiter(s) left open at end of input")

    _write_output(render(scan), output)


@app.command("html")
def html_command(
    file: InputFile,
    *,
    output: OutputOption = None,
    theme: ThemeOption = None,
    palette_size: PaletteSizeOption = None,
    background: BackgroundOption = None,
) -> None:
    """Colorize the <pre> blocks of an HTML page."""
    settings = _load_settings(file)
    content = _read_input(file)
    is_dark = resolve_dark_theme(theme or settings.theme, document=content, background=background)

    colorizer = RainbowDelimiters(palette_size or settings.palette_size)
    result = colorize_html(content, is_dark, colorizer, settings.processed_attribute)
    logger.changes(f"{result.processed} block(s) colorized, {result.skipped} already processed")

    _write_output(result.html, output)


@app.command()
def markdown(
    file: InputFile,
    *,
    output: OutputOption = None,
    theme: ThemeOption = None,
    palette_size: PaletteSizeOption = None,
    background: BackgroundOption = None,
) -> None:
    """Render Markdown to HTML with colorized code blocks."""
    settings = _load_settings(file)
    content = _read_input(file)
    is_dark = resolve_dark_theme(theme or settings.theme, background=background)

    colorizer = RainbowDelimiters(palette_size or settings.palette_size)
    _write_output(
        colorize_markdown(content, is_dark, colorizer, settings.processed_attribute), output
    )


@app.command()
def palette(
    *,
    theme: Annotated[
        ThemeMode, typer.Option("--theme", help="Theme for the adjusted column")
    ] = ThemeMode.LIGHT,
    palette_size: PaletteSizeOption = None,
    depth: Annotated[
        int, typer.Option("--depth", help="Nesting depth for the adjusted column", min=0)
    ] = 0,
) -> None:
    """List the base palette with base and adjusted hex colors."""
    settings = _load_settings(None)
    is_dark = resolve_dark_theme(theme)

    for index, base in enumerate(generate_base_colors(palette_size or settings.palette_size)):
        adjusted = adjust_color(base, depth, is_dark)
        typer.echo(
            f"{index:3d}  hue={base.h:7.2f}  base={hsl_to_hex(base.h, base.s, base.l)}"
            f"  adjusted={hsl_to_hex(adjusted.h, adjusted.s, adjusted.l)}"
        )


def _load_settings(file: Path | None) -> RainbowConfig:
    """Load the applicable config file, or defaults if there is none."""
    config_path = context.resolve_config_path(file)
    if config_path is None:
        return RainbowConfig()
    try:
        return load_config(config_path)
    except (FileNotFoundError, RainbowError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


def _read_input(file: Path) -> str:
    if str(file) == "-":
        return sys.stdin.read()
    if not file.exists():
        typer.echo(f"Error: File not found: {file}", err=True)
        raise typer.Exit(1)
    try:
        return file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        typer.echo(f"Error: {file} is not valid UTF-8: {e}", err=True)
        raise typer.Exit(1) from e


def _write_output(content: str, output: Path | None) -> None:
    if output:
        output.write_text(content, encoding="utf-8")
        typer.echo(f"Output written to {output}")
    else:
        typer.echo(content, nl=False)


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()

"""CLI application entry point for barcoder.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from barcoder import __version__
from barcoder.cli.output import (
    console,
    print_barcode_info,
    print_error,
    print_header,
    print_modules,
    print_step,
    print_success,
)
from barcoder.config import BarcoderSettings, LoggingConfig, RenderConfig
from barcoder.core import BarcodeRenderer, LinearBarcode, Symbology, create_barcode
from barcoder.domain import Drawable, Module
from barcoder.exceptions import BarcoderError
from barcoder.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="barcoder",
    help="Encode data as linear barcodes and render them to SVG or image files.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Barcoder[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def encode(
    symbology: Annotated[
        Symbology,
        typer.Argument(
            help="Symbology to encode with",
            case_sensitive=False,
            show_default=False,
        ),
    ],
    data: Annotated[
        str,
        typer.Argument(
            help="Data to encode",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file; the suffix selects SVG or an image format",
        ),
    ] = None,
    ai: Annotated[
        str | None,
        typer.Option(
            "--ai",
            help="Application identifier for ucc128 (default: 00, SSCC-18)",
        ),
    ] = None,
    checksum: Annotated[
        bool,
        typer.Option(
            "--checksum",
            help="Add the optional check digit (std2of5, int2of5)",
        ),
    ] = False,
    no_checksum: Annotated[
        bool,
        typer.Option(
            "--no-checksum",
            help="Leave out optional check characters (ucc128, code39)",
        ),
    ] = False,
    bar_width: Annotated[
        int,
        typer.Option(
            "--bar-width",
            help="Width of the narrowest bar",
            min=1,
            max=50,
        ),
    ] = 2,
    bar_height: Annotated[
        int,
        typer.Option(
            "--bar-height",
            help="Height of the bars",
            min=1,
            max=2000,
        ),
    ] = 30,
    no_text: Annotated[
        bool,
        typer.Option(
            "--no-text",
            help="Do not draw the human readable label",
        ),
    ] = False,
    no_quiet_zone: Annotated[
        bool,
        typer.Option(
            "--no-quiet-zone",
            help="Do not draw margins around the symbol",
        ),
    ] = False,
    font_size: Annotated[
        int,
        typer.Option(
            "--font-size",
            help="Label font size in pixels",
            min=4,
            max=200,
        ),
    ] = 12,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Encode DATA as a SYMBOLOGY barcode.

    Without --output the module sequence and label are printed.

    Example:
        barcoder upca 03600029145 -o upc.png
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)
    if checksum and no_checksum:
        print_error("Cannot use --checksum and --no-checksum together")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        settings = BarcoderSettings(
            render=RenderConfig(
                bar_width=bar_width,
                bar_height=bar_height,
                draw_text=not no_text,
                quiet_zone=not no_quiet_zone,
                font_size=font_size,
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level,
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )

        if not quiet:
            print_step("Encoding")
        barcode = create_barcode(
            symbology,
            data,
            application_identifier=ai,
            include_checksum=False if no_checksum else (True if checksum else None),
            quiet_zone=settings.render.quiet_zone,
        )
        parts = _module_parts(barcode)
        if not quiet:
            print_barcode_info(
                symbology=symbology.value,
                label=barcode.label,
                symbols=len(barcode.encode_data()),
                width_in_bars=sum(module.width_in_bars() for _, module in parts),
            )

        if output is None:
            print_modules(parts)
            return

        if verbose:
            print_modules(parts)

        if not quiet:
            print_step("Rendering")
        start = time.time()
        renderer = BarcodeRenderer(settings, logger)
        size = renderer.render(barcode, output)

        if not quiet:
            print_success(
                output_path=str(output),
                file_size=_format_file_size(output),
                size=size,
                total_time_s=time.time() - start,
            )

    except BarcoderError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not open log file: {e}")
        raise typer.Exit(code=1)


def _module_parts(barcode: LinearBarcode) -> list[tuple[str, Drawable]]:
    """List the modules of a barcode in drawing order with their role."""
    parts: list[tuple[str, Drawable]] = []
    pre_amble = barcode.get_pre_amble()
    if pre_amble is not None:
        parts.append(("preamble", pre_amble))
    parts.extend(("data", module) for module in barcode.encode_data())
    checksum = barcode.calculate_checksum()
    if isinstance(checksum, Module):
        parts.append(("checksum", checksum))
    post_amble = barcode.get_post_amble()
    if post_amble is not None:
        parts.append(("postamble", post_amble))
    return parts


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "4 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    return f"{size_bytes / 1024:.0f} KB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

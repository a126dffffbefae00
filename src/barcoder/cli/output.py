"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from barcoder.domain import Drawable

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Barcoder[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_barcode_info(symbology: str, label: str, symbols: int, width_in_bars: int) -> None:
    """Print a summary of an encoded barcode.

    Args:
        symbology: Symbology name
        label: Human readable label
        symbols: Number of encoded data modules
        width_in_bars: Total symbol width in module units
    """
    line = Text("  ")
    line.append(label, style="bold")
    line.append(f" ({symbology})")
    console.print(line)
    console.print(f"  {symbols} symbols {SYM_DOT} {width_in_bars} modules wide")


def _printable_symbol(symbol: str) -> str:
    return "".join(char if char.isprintable() else f"\\x{ord(char):02x}" for char in symbol)


def print_modules(modules: list[tuple[str, Drawable]]) -> None:
    """Print the module sequence of a barcode as a table.

    Args:
        modules: Pairs of (part name, module) in drawing order
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("  Part")
    table.add_column("Symbol")
    table.add_column("Widths")
    for part, module in modules:
        widths = ", ".join(str(width) for width, _ in module.iter_bars())
        table.add_row(f"  {part}", Text(_printable_symbol(module.symbol)), widths)
    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    size: tuple[int, int],
    total_time_s: float,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        size: Drawn (width, height)
        total_time_s: Total rendering time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)
    console.print(f"  {size[0]} {SYM_DOT} {size[1]} (width {SYM_DOT} height)")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")

"""Command-line interface for barcoder.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Encode any supported symbology from the command line
- SVG and raster image output chosen by file suffix
- Module sequence listing when no output file is given
- Verbose/quiet output modes
"""

from barcoder.cli.app import cli, main

__all__ = ["cli", "main"]

"""Render orchestration.

Ties a barcode, the render settings and a drawing backend together and
records what was rendered.

Key components:
- create_output: Picks the drawing backend for a file
- BarcodeRenderer: Renders barcodes to files and tracks statistics
"""

import time
from collections.abc import Iterable
from pathlib import Path

import structlog

from barcoder.config import BarcoderSettings, OutputFormat
from barcoder.core.barcode import LinearBarcode
from barcoder.exceptions import BarcoderError, OutputError
from barcoder.io import ImageOutput, Output, SVGOutput
from barcoder.utils import RenderLogger, RenderStats


def create_output(path: Path, settings: BarcoderSettings) -> Output:
    """Create the drawing backend writing to a path.

    Args:
        path: Output file
        settings: Settings giving colours, font size and the format

    Returns:
        SVGOutput for SVG, ImageOutput for raster formats

    Raises:
        OutputError: If the format cannot be inferred from the suffix
    """
    fmt = settings.output.format
    if fmt is None:
        try:
            fmt = OutputFormat.from_path(path)
        except ValueError as e:
            raise OutputError(f"cannot infer output format from '{path.name}'") from e

    render = settings.render
    if fmt is OutputFormat.SVG:
        return SVGOutput(
            path,
            font_size=render.font_size,
            foreground=render.foreground,
            background=render.background,
            scalar=settings.output.svg_scalar,
            units=settings.output.svg_units,
        )
    return ImageOutput(
        path,
        font_size=render.font_size,
        foreground=render.foreground,
        background=render.background,
    )


class BarcodeRenderer:
    """Renders barcodes to files using the configured settings.

    Example:
        renderer = BarcodeRenderer(get_default_settings())
        renderer.render(UPCABarcode("03600029145"), Path("upc.png"))
        print(renderer.stats.rendered_count)
    """

    def __init__(
        self,
        config: BarcoderSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            config: Settings for drawing and output
            logger: Logger to report to; defaults to the "barcoder" logger
        """
        self.config = config
        self.logger = logger if logger is not None else structlog.get_logger("barcoder")
        self.render_logger = RenderLogger(self.logger)

    @property
    def stats(self) -> RenderStats:
        return self.render_logger.stats

    def draw(self, barcode: LinearBarcode, output: Output) -> tuple[int, int]:
        """Draw a barcode onto an output with the configured dimensions.

        Returns:
            Tuple of (width, height) drawn
        """
        render = self.config.render
        return barcode.draw(
            output,
            bar_width=render.bar_width,
            bar_height=render.bar_height,
            draw_text=render.draw_text,
        )

    def render(self, barcode: LinearBarcode, path: Path) -> tuple[int, int]:
        """Render a barcode to a file.

        Args:
            barcode: Barcode to render
            path: Output file, its suffix selects the format

        Returns:
            Tuple of (width, height) drawn

        Raises:
            OutputError: If the file cannot be written
        """
        symbology = type(barcode).__name__
        self.render_logger.log_render_start(symbology, barcode.data)
        start = time.time()
        try:
            size = self.draw(barcode, create_output(path, self.config))
        except BarcoderError as e:
            self.render_logger.log_render_error(symbology, barcode.data, e)
            raise
        self.render_logger.log_render_complete(
            symbology,
            modules=len(barcode.encode_data()),
            size=size,
            duration_ms=(time.time() - start) * 1000,
        )
        return size

    def render_batch(self, jobs: Iterable[tuple[LinearBarcode, Path]]) -> RenderStats:
        """Render several barcodes, continuing past failures.

        Args:
            jobs: Pairs of (barcode, output path)

        Returns:
            Statistics for the batch, failures listed in errors
        """
        self.stats.start_time = time.time()
        for barcode, path in jobs:
            try:
                self.render(barcode, path)
            except BarcoderError:
                # Already recorded by render()
                continue
        self.stats.end_time = time.time()

        self.logger.info(
            "Batch complete",
            rendered=self.stats.rendered_count,
            failed=self.stats.failed_count,
            duration_s=round(self.stats.duration_seconds, 2),
        )
        return self.stats

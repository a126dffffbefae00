"""Raster image drawing backend using Pillow.

The image size is only known when the draw session ends, so bars and text
are recorded during the session and painted onto a new image at the end.
"""

from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw

from barcoder.domain.layout import CenteredLabelLayout
from barcoder.exceptions import OutputWriteError
from barcoder.io.fonts import DEFAULT_FONT_SIZE, load_font, measure_text
from barcoder.io.output import Output


@dataclass(frozen=True, slots=True)
class _BarOp:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class _TextOp:
    text: str
    x: float
    y: float


class ImageOutput(Output):
    """Renders a barcode into a Pillow image.

    Example:
        output = ImageOutput(Path("barcode.png"))
        barcode.draw(output)
        output.image.show()
    """

    def __init__(
        self,
        path: Path | None = None,
        font_size: int = DEFAULT_FONT_SIZE,
        foreground: str = "#000000",
        background: str = "#FFFFFF",
        mode: str = "RGB",
    ) -> None:
        """Initialize the image output.

        Args:
            path: Where to save the image; None keeps it in memory only
            font_size: Label font size in pixels
            foreground: Bar and text colour
            background: Background colour
            mode: Pillow image mode
        """
        super().__init__()
        self._path = path
        self._font_size = font_size
        self._foreground = foreground
        self._background = background
        self._mode = mode
        self._bars: list[_BarOp] = []
        self._texts: list[_TextOp] = []
        self.image: Image.Image | None = None

    def begin_draw(self) -> None:
        super().begin_draw()
        self._bars = []
        self._texts = []

    def end_draw(self, width: int, height: int) -> None:
        super().end_draw(width, height)
        image = Image.new(self._mode, (max(width, 1), max(height, 1)), self._background)
        draw = ImageDraw.Draw(image)
        for bar in self._bars:
            draw.rectangle(
                ((bar.x, bar.y), (bar.x + bar.width - 1, bar.y + bar.height - 1)),
                fill=self._foreground,
            )
        font = load_font(self._font_size)
        for text in self._texts:
            draw.text((text.x, text.y), text.text, fill=self._foreground, font=font)
        self.image = image

        if self._path is not None:
            try:
                image.save(self._path)
            except (OSError, ValueError) as e:
                raise OutputWriteError(str(self._path), str(e)) from e

    def abort_draw(self, error: BaseException) -> None:
        super().abort_draw(error)
        self._bars = []
        self._texts = []

    def draw_bar(self, x: int, y: int, width: int, height: int, painted: bool) -> int:
        if painted and width > 0 and height > 0:
            self._bars.append(_BarOp(x, y, width, height))
        return width

    def draw_text(self, text: str, layout: CenteredLabelLayout) -> int:
        text_width, text_height = measure_text(text, self._font_size)
        placement = layout.place(text_width, text_height)
        # Pillow anchors text at its top left corner, the placement gives a baseline
        self._texts.append(_TextOp(text, placement.text_x, placement.text_y - text_height))
        return placement.background_height

"""Output that measures a barcode without drawing it."""

from barcoder.domain.layout import CenteredLabelLayout
from barcoder.io.fonts import DEFAULT_FONT_SIZE, measure_text
from barcoder.io.output import Output


class SizingOutput(Output):
    """Measures the extent of a barcode.

    Bars report their width and labels report the height they would take,
    so drawing a barcode onto a SizingOutput yields its full size.

    Example:
        output = SizingOutput()
        width, height = barcode.draw(output)
    """

    def __init__(self, font_size: int = DEFAULT_FONT_SIZE) -> None:
        super().__init__()
        self._font_size = font_size
        self.bar_count = 0

    def begin_draw(self) -> None:
        super().begin_draw()
        self.bar_count = 0

    def draw_bar(
        self, x: int, y: int, width: int, height: int, painted: bool  # noqa: ARG002
    ) -> int:
        if painted:
            self.bar_count += 1
        return width

    def draw_text(self, text: str, layout: CenteredLabelLayout) -> int:
        text_width, text_height = measure_text(text, self._font_size)
        return layout.place(text_width, text_height).background_height

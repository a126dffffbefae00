"""SVG drawing backend.

Bars become rect elements and the label a text element. The document is
serialized when the draw session ends.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import TextIO

from barcoder.domain.layout import CenteredLabelLayout
from barcoder.exceptions import OutputWriteError
from barcoder.io.fonts import DEFAULT_FONT_SIZE, measure_text
from barcoder.io.output import Output

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
DEFAULT_FONT_FAMILY = "Arial"


class SVGOutput(Output):
    """Writes a barcode as an SVG document.

    Example:
        output = SVGOutput(Path("barcode.svg"))
        barcode.draw(output)
    """

    def __init__(
        self,
        target: Path | TextIO,
        font_size: int = DEFAULT_FONT_SIZE,
        foreground: str = "#000000",
        background: str = "#FFFFFF",
        scalar: float = 1.0,
        units: str = "px",
        font_family: str = DEFAULT_FONT_FAMILY,
    ) -> None:
        """Initialize the SVG output.

        Args:
            target: File path or open text stream to write the document to
            font_size: Label font size in pixels
            foreground: Bar and text colour
            background: Background colour
            scalar: Factor applied to every coordinate
            units: Unit suffix for coordinates (e.g. "px", "mm")
            font_family: Label font family
        """
        super().__init__()
        self._target = target
        self._font_size = font_size
        self._foreground = foreground
        self._background = background
        self._scalar = scalar
        self._units = units
        self._font_family = font_family
        self._root: ET.Element | None = None

    @property
    def document(self) -> ET.Element | None:
        """Root element of the last document drawn."""
        return self._root

    def begin_draw(self) -> None:
        super().begin_draw()
        self._root = ET.Element("svg", {"xmlns": SVG_NAMESPACE, "version": "1.1"})

    def end_draw(self, width: int, height: int) -> None:
        super().end_draw(width, height)
        root = self._require_root()
        root.set("width", self._scaled(width))
        root.set("height", self._scaled(height))
        root.insert(
            0,
            ET.Element(
                "rect",
                {
                    "x": self._scaled(0),
                    "y": self._scaled(0),
                    "width": self._scaled(width),
                    "height": self._scaled(height),
                    "style": f"fill:{self._background};",
                },
            ),
        )
        self._write(root)

    def abort_draw(self, error: BaseException) -> None:
        super().abort_draw(error)
        self._root = None

    def draw_bar(self, x: int, y: int, width: int, height: int, painted: bool) -> int:
        if painted:
            ET.SubElement(
                self._require_root(),
                "rect",
                {
                    "x": self._scaled(x),
                    "y": self._scaled(y),
                    "width": self._scaled(width),
                    "height": self._scaled(height),
                    "style": f"fill:{self._foreground};",
                },
            )
        return width

    def draw_text(self, text: str, layout: CenteredLabelLayout) -> int:
        text_width, text_height = measure_text(text, self._font_size)
        placement = layout.place(text_width, text_height)
        element = ET.SubElement(
            self._require_root(),
            "text",
            {
                "x": self._scaled(placement.text_x),
                "y": self._scaled(placement.text_y),
                "style": (
                    f"font-family: {self._font_family}; "
                    f"font-size: {self._font_size}px; "
                    f"fill:{self._foreground};"
                ),
            },
        )
        element.text = text
        return placement.background_height

    def _require_root(self) -> ET.Element:
        if self._root is None:
            raise RuntimeError("No draw session. Call begin_draw() first.")
        return self._root

    def _scaled(self, value: float) -> str:
        return f"{value * self._scalar:g}{self._units}"

    def _write(self, root: ET.Element) -> None:
        tree = ET.ElementTree(root)
        if isinstance(self._target, Path):
            try:
                tree.write(self._target, encoding="utf-8", xml_declaration=True)
            except OSError as e:
                raise OutputWriteError(str(self._target), str(e)) from e
        else:
            tree.write(self._target, encoding="unicode", xml_declaration=True)

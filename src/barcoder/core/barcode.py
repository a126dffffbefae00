"""Barcode base classes and the linear composition algorithm.

Every symbology subclasses LinearBarcode and supplies four pieces: a
preamble, the encoded data modules, a checksum and a postamble. The
composition algorithm in LinearBarcode.draw turns those pieces into Output
calls in a fixed order.

Key classes:
- Barcode: Abstract symbology with validated data and a derived label
- LinearBarcode: Draws a barcode as a single row of modules
"""

from abc import ABC, abstractmethod

from barcoder.domain.layout import CenteredLabelLayout
from barcoder.domain.module import ChecksumResult, Drawable, Module, NoChecksum
from barcoder.exceptions import InvalidDataError, MissingArgumentError
from barcoder.io.fonts import DEFAULT_FONT_SIZE
from barcoder.io.output import Output
from barcoder.io.sizing import SizingOutput

DEFAULT_BAR_WIDTH = 2
DEFAULT_BAR_HEIGHT = 30


def printable_label(text: str, exclude: str = "") -> str:
    """Strip characters that cannot appear in a human readable label.

    Args:
        text: Raw barcode data
        exclude: Extra characters to drop (symbology control characters)

    Returns:
        Text with non-printable and excluded characters removed
    """
    return "".join(char for char in text if char.isprintable() and char not in exclude)


class Barcode(ABC):
    """Abstract barcode symbology.

    Subclasses validate their input in __init__ so an invalid barcode is never
    constructed. After construction a barcode is read-only.

    Attributes:
        data: The data string the barcode encodes
        quiet_zone: Whether margins are drawn around the symbol
        label: Human readable text drawn under the bars
    """

    def __init__(
        self,
        data: str | None,
        *,
        quiet_zone: bool = True,
        label: str | None = None,
    ) -> None:
        """Initialize the barcode.

        Args:
            data: Data to encode
            quiet_zone: Draw margins around the symbol
            label: Label override; None derives the label from the data

        Raises:
            MissingArgumentError: If data is None
            InvalidDataError: If data is empty
        """
        if data is None:
            raise MissingArgumentError("data")
        if not data:
            raise InvalidDataError(data, "data to encode cannot be empty")
        self._data = data
        self._quiet_zone = quiet_zone
        self._label = label

    @property
    def data(self) -> str:
        return self._data

    @property
    def quiet_zone(self) -> bool:
        return self._quiet_zone

    @property
    def label(self) -> str:
        """Label text, the override if one was given."""
        if self._label is not None:
            return self._label
        return self.default_label()

    def default_label(self) -> str:
        """Label derived from the data when no override is given."""
        return printable_label(self._data)

    @abstractmethod
    def get_pre_amble(self) -> Drawable | None:
        """Module drawn before the data, or None when the symbology has none."""

    @abstractmethod
    def get_post_amble(self) -> Drawable | None:
        """Module drawn after the checksum, or None when the symbology has none."""

    @abstractmethod
    def encode_data(self) -> list[Module]:
        """Encode the data into modules, one per symbol."""

    @abstractmethod
    def calculate_checksum(self) -> ChecksumResult:
        """Checksum module, or NO_CHECKSUM when no check character is drawn."""

    @abstractmethod
    def draw(
        self,
        output: Output,
        x: int = 0,
        y: int = 0,
        bar_width: int = DEFAULT_BAR_WIDTH,
        bar_height: int = DEFAULT_BAR_HEIGHT,
        draw_text: bool = True,
    ) -> tuple[int, int]:
        """Draw the barcode onto an output and return the drawn (width, height)."""

    def size(
        self,
        bar_width: int = DEFAULT_BAR_WIDTH,
        bar_height: int = DEFAULT_BAR_HEIGHT,
        draw_text: bool = True,
        font_size: int = DEFAULT_FONT_SIZE,
    ) -> tuple[int, int]:
        """Compute the drawn size without rendering anything.

        Args:
            bar_width: Output units per module unit
            bar_height: Height of the bars
            draw_text: Whether the label is included
            font_size: Label font size

        Returns:
            Tuple of (width, height)
        """
        return self.draw(
            SizingOutput(font_size),
            bar_width=bar_width,
            bar_height=bar_height,
            draw_text=draw_text,
        )

    def __str__(self) -> str:
        return self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


class LinearBarcode(Barcode):
    """A barcode drawn as one row of bars with an optional label below."""

    def draw(
        self,
        output: Output,
        x: int = 0,
        y: int = 0,
        bar_width: int = DEFAULT_BAR_WIDTH,
        bar_height: int = DEFAULT_BAR_HEIGHT,
        draw_text: bool = True,
    ) -> tuple[int, int]:
        """Draw the barcode onto an output.

        Draw order is preamble, data modules, checksum, postamble, then the
        label centered under everything drawn. Absent pieces produce no
        output calls. If any output call fails the session is aborted and
        the error propagates.

        Args:
            output: Drawing backend
            x: Left edge
            y: Top edge
            bar_width: Output units per module unit
            bar_height: Height of the bars
            draw_text: Whether to draw the label

        Returns:
            Tuple of (width, height) drawn
        """
        pre_amble = self.get_pre_amble()
        modules = self.encode_data()
        checksum = self.calculate_checksum()
        post_amble = self.get_post_amble()

        with output.session() as session:
            cursor = x
            if pre_amble is not None:
                cursor += output.draw_module(pre_amble, cursor, y, bar_width, bar_height)

            for module in modules:
                cursor += output.draw_module(module, cursor, y, bar_width, bar_height)

            match checksum:
                case NoChecksum():
                    pass
                case Module():
                    cursor += output.draw_module(checksum, cursor, y, bar_width, bar_height)

            if post_amble is not None:
                cursor += output.draw_module(post_amble, cursor, y, bar_width, bar_height)

            bottom = y + bar_height
            if draw_text:
                layout = CenteredLabelLayout(x, bottom, cursor - x)
                bottom += output.draw_text(self.label, layout)

            session.width = cursor - x
            session.height = bottom - y

        return session.width, session.height

"""Output contract consumed by the barcode composition algorithm.

An Output is a drawing backend. The composition algorithm opens a session,
draws modules and an optional label, and closes the session with the final
size. Backends only implement the bar and text primitives.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from barcoder.domain.layout import CenteredLabelLayout
from barcoder.domain.module import Drawable
from barcoder.exceptions import OutputError


@dataclass
class DrawSession:
    """Size accumulated during one draw session.

    Attributes:
        width: Total drawn width, set before the session closes
        height: Total drawn height, set before the session closes
    """

    width: int = 0
    height: int = 0


class Output(ABC):
    """Abstract drawing backend.

    Subclasses implement draw_bar and draw_text, and extend begin_draw,
    end_draw and abort_draw (calling super) when they hold per-session state.
    A session is not reentrant.
    """

    def __init__(self) -> None:
        self._in_session = False

    @property
    def in_session(self) -> bool:
        """Whether a draw session is open."""
        return self._in_session

    def begin_draw(self) -> None:
        """Open a draw session.

        Raises:
            OutputError: If a session is already open
        """
        if self._in_session:
            raise OutputError("draw session already open")
        self._in_session = True

    def end_draw(self, width: int, height: int) -> None:  # noqa: ARG002
        """Close the draw session with the final drawn size."""
        self._in_session = False

    def abort_draw(self, error: BaseException) -> None:  # noqa: ARG002
        """Close the draw session after a failure, discarding partial work."""
        self._in_session = False

    @contextmanager
    def session(self) -> Iterator[DrawSession]:
        """Scope a draw session.

        The session is closed with end_draw on normal exit and with
        abort_draw when the body raises. The error propagates unchanged.

        Yields:
            DrawSession whose width and height are passed to end_draw
        """
        self.begin_draw()
        state = DrawSession()
        try:
            yield state
        except BaseException as e:
            self.abort_draw(e)
            raise
        self.end_draw(state.width, state.height)

    def draw_module(
        self,
        module: Drawable,
        x: int,
        y: int,
        bar_width: int,
        bar_height: int,
    ) -> int:
        """Draw every bar and space of a module.

        Zero width entries are skipped.

        Args:
            module: Module or CompositeModule to draw
            x: Left edge
            y: Top edge
            bar_width: Pixels (or output units) per module unit
            bar_height: Height of the bars

        Returns:
            Horizontal extent consumed
        """
        drawn = 0
        for units, painted in module.iter_bars():
            if units == 0:
                continue
            drawn += self.draw_bar(x + drawn, y, units * bar_width, bar_height, painted)
        return drawn

    @abstractmethod
    def draw_bar(self, x: int, y: int, width: int, height: int, painted: bool) -> int:
        """Draw one bar or space.

        Args:
            x: Left edge
            y: Top edge
            width: Bar width
            height: Bar height
            painted: True for a bar (foreground), False for a space

        Returns:
            Horizontal extent consumed
        """

    @abstractmethod
    def draw_text(self, text: str, layout: CenteredLabelLayout) -> int:
        """Draw a label.

        Args:
            text: Label text
            layout: Where the label goes

        Returns:
            Vertical extent consumed
        """

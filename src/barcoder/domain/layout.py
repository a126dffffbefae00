"""Label layout descriptors.

A layout tells an Output where a human readable label goes. The drawing
backend measures the text and asks the layout to place it.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LabelPlacement:
    """Resolved position of a label.

    Attributes:
        text_x: Left edge of the text
        text_y: Baseline of the text
        background_x: Left edge of the label background
        background_y: Top edge of the label background
        background_width: Width of the label background
        background_height: Height of the label background (the height consumed)
    """

    text_x: float
    text_y: float
    background_x: int
    background_y: int
    background_width: int
    background_height: int


@dataclass(frozen=True, slots=True)
class CenteredLabelLayout:
    """Label centered horizontally under a drawn area.

    Attributes:
        x: Left edge of the area the label is centered under
        y: Top edge of the label (the bottom of the bars)
        width: Width of the area the label is centered under
    """

    x: int
    y: int
    width: int

    def place(self, text_width: float, text_height: float) -> LabelPlacement:
        """Place measured text inside this layout.

        The vertical gap between bars and text grows with the square root of
        the text height.

        Args:
            text_width: Measured text width
            text_height: Measured text height

        Returns:
            Resolved label placement
        """
        vgap = int(math.sqrt(text_height))
        return LabelPlacement(
            text_x=self.x + (self.width - text_width) / 2,
            text_y=self.y + text_height + vgap,
            background_x=self.x,
            background_y=self.y,
            background_width=self.width,
            background_height=int(text_height + vgap + 1),
        )

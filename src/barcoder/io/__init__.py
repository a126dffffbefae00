"""Drawing backends for barcoder.

This module holds the Output contract the composition algorithm drives and
the backends implementing it.

Key responsibilities:
- Define the draw session (begin, bars, label, end or abort)
- Measure barcodes without drawing them
- Write SVG documents
- Render raster images with Pillow

Key classes:
- Output: Abstract drawing backend
- SizingOutput: Measures drawn extent only
- SVGOutput: Writes an SVG document
- ImageOutput: Renders a Pillow image
"""

from barcoder.io.fonts import measure_text
from barcoder.io.image import ImageOutput
from barcoder.io.output import DrawSession, Output
from barcoder.io.sizing import SizingOutput
from barcoder.io.svg import SVGOutput

__all__ = [
    "DrawSession",
    "ImageOutput",
    "Output",
    "SVGOutput",
    "SizingOutput",
    "measure_text",
]

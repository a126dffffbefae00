"""Label font loading and text measurement using Pillow."""

from functools import lru_cache

from PIL import ImageFont

DEFAULT_FONT_SIZE = 12


@lru_cache(maxsize=16)
def load_font(font_size: int = DEFAULT_FONT_SIZE) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    """Load Pillow's default font at a size.

    Args:
        font_size: Font size in pixels

    Returns:
        Pillow font object
    """
    return ImageFont.load_default(size=font_size)


def measure_text(text: str, font_size: int = DEFAULT_FONT_SIZE) -> tuple[int, int]:
    """Measure rendered text.

    Args:
        text: Text to measure
        font_size: Font size in pixels

    Returns:
        Tuple of (width, height); (0, 0) for empty text
    """
    if not text:
        return (0, 0)
    left, top, right, bottom = load_font(font_size).getbbox(text)
    return (int(right - left), int(bottom - top))

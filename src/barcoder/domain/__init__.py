"""Domain models for barcoder.

This module contains the immutable building blocks every symbology is
assembled from. All models are:

- Immutable (frozen dataclasses), so table entries are shared by reference
- Compared structurally on their widths only
- Independent of any drawing backend

Key classes:
- Module: A fixed bar/space width pattern with an optional symbol
- CompositeModule: An ordered aggregate of modules
- NoChecksum: Explicit outcome of a barcode built without a check character
- CenteredLabelLayout: Where a human readable label is drawn
"""

from barcoder.domain.layout import CenteredLabelLayout, LabelPlacement
from barcoder.domain.module import (
    NO_CHECKSUM,
    ChecksumResult,
    CompositeModule,
    Drawable,
    Module,
    NoChecksum,
)

__all__: list[str] = [
    "NO_CHECKSUM",
    # Type aliases
    "ChecksumResult",
    "Drawable",
    # Core types
    "Module",
    "CompositeModule",
    "NoChecksum",
    "CenteredLabelLayout",
    "LabelPlacement",
]

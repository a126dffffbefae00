"""Bar/space module types.

This module defines the atomic drawing units every symbology is built from:
- Module: a fixed sequence of bar/space widths
- CompositeModule: an ordered aggregate of modules
- NoChecksum: the explicit outcome of a barcode built without a check character
"""

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Any, Union

from barcoder.exceptions import ModuleError


@dataclass(frozen=True, slots=True)
class Module:
    """A fixed bar/space width pattern.

    Widths alternate bar and space, starting with a bar at index 0. A leading
    zero width is how a pattern that begins with a space is written.

    Equality and hashing only consider the widths, so a module carrying a
    symbol compares equal to the bare table entry it came from.

    Attributes:
        bars: Widths in modules (X-dimension units)
        symbol: Character(s) this module encodes, empty for guards and margins
        blank: If True every width is painted as background (quiet zones)
    """

    bars: tuple[int, ...]
    symbol: str = field(default="", compare=False)
    blank: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.bars, tuple):
            object.__setattr__(self, "bars", tuple(self.bars))
        if not self.bars:
            raise ModuleError("Module must have at least one width")
        if any(width < 0 for width in self.bars):
            raise ModuleError(f"Module widths must be non-negative, got {self.bars}")

    @classmethod
    def blank_of(cls, width: int) -> "Module":
        """Create a blank (background only) module.

        Args:
            width: Width in modules

        Returns:
            Blank module of the given width
        """
        return cls((width,), blank=True)

    def with_symbol(self, symbol: str) -> "Module":
        """Return a copy of this module labelled with a symbol."""
        return replace(self, symbol=symbol)

    def width_in_bars(self) -> int:
        """Total width in modules."""
        return sum(self.bars)

    def iter_bars(self) -> Iterator[tuple[int, bool]]:
        """Yield (width, painted) pairs in drawing order."""
        for i, width in enumerate(self.bars):
            yield width, (not self.blank and i % 2 == 0)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with bars, symbol and blank fields
        """
        return {
            "bars": list(self.bars),
            "symbol": self.symbol,
            "blank": self.blank,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Module":
        """Deserialize from dictionary."""
        return cls(
            bars=tuple(data["bars"]),
            symbol=data.get("symbol", ""),
            blank=data.get("blank", False),
        )

    def __str__(self) -> str:
        return ", ".join(str(width) for width in self.bars)


@dataclass(frozen=True, slots=True)
class CompositeModule:
    """An ordered aggregate of modules drawn as one unit.

    Used where a single symbology element is itself multi-part, such as a
    quiet zone followed by a start pattern.

    Attributes:
        modules: Child modules in drawing order
    """

    modules: tuple[Union[Module, "CompositeModule"], ...]

    def __post_init__(self) -> None:
        if not isinstance(self.modules, tuple):
            object.__setattr__(self, "modules", tuple(self.modules))
        if not self.modules:
            raise ModuleError("CompositeModule must have at least one child")

    @property
    def size(self) -> int:
        """Number of direct children."""
        return len(self.modules)

    @property
    def symbol(self) -> str:
        """Concatenated symbols of all children."""
        return "".join(module.symbol for module in self.modules)

    def get_module(self, index: int) -> Union[Module, "CompositeModule"]:
        """Get the child at an index."""
        return self.modules[index]

    def width_in_bars(self) -> int:
        """Total width of all children in modules."""
        return sum(module.width_in_bars() for module in self.modules)

    def iter_bars(self) -> Iterator[tuple[int, bool]]:
        """Yield (width, painted) pairs of every child in order."""
        for module in self.modules:
            yield from module.iter_bars()

    def __len__(self) -> int:
        return len(self.modules)

    def __getitem__(self, index: int) -> Union[Module, "CompositeModule"]:
        return self.modules[index]

    def __iter__(self) -> Iterator[Union[Module, "CompositeModule"]]:
        return iter(self.modules)


Drawable = Module | CompositeModule


@dataclass(frozen=True, slots=True)
class NoChecksum:
    """Checksum outcome of a barcode constructed without a check character."""

    reason: str = "checksum disabled"


NO_CHECKSUM = NoChecksum()

ChecksumResult = Module | NoChecksum

"""Tests for domain models to verify they work correctly."""

import pytest

from barcoder.domain import (
    NO_CHECKSUM,
    CenteredLabelLayout,
    CompositeModule,
    Module,
    NoChecksum,
)
from barcoder.exceptions import ModuleError


class TestModule:
    """Tests for Module class."""

    def test_module_creation(self) -> None:
        """Test basic module creation."""
        m = Module((2, 1, 1, 4, 1, 2), symbol="A")
        assert m.bars == (2, 1, 1, 4, 1, 2)
        assert m.symbol == "A"
        assert not m.blank

    def test_bars_coerced_to_tuple(self) -> None:
        """Test that a list of widths is stored as a tuple."""
        m = Module([1, 2, 3])  # type: ignore[arg-type]
        assert m.bars == (1, 2, 3)

    def test_width_in_bars(self) -> None:
        """Test width is the sum of all widths."""
        assert Module((1, 2, 3)).width_in_bars() == 6
        assert Module((0, 3, 2, 1, 1)).width_in_bars() == 7

    def test_equality_ignores_symbol(self) -> None:
        """Test modules with equal widths are equal whatever their symbols."""
        assert Module((1, 2, 3), symbol="X") == Module((1, 2, 3), symbol="Y")
        assert hash(Module((1, 2, 3), symbol="X")) == hash(Module((1, 2, 3)))

    def test_equality_uses_widths(self) -> None:
        """Test modules with different widths are not equal."""
        assert Module((1, 2, 3)) != Module((3, 2, 1))
        assert Module((1, 2)) != Module((1, 2, 0))

    def test_blank_equal_to_plain(self) -> None:
        """Test a blank module equals a plain module of the same width."""
        assert Module.blank_of(10) == Module((10,))

    def test_empty_widths_rejected(self) -> None:
        """Test that a module needs at least one width."""
        with pytest.raises(ModuleError, match="at least one width"):
            Module(())

    def test_negative_width_rejected(self) -> None:
        """Test that negative widths are rejected."""
        with pytest.raises(ModuleError, match="non-negative"):
            Module((1, -1, 1))

    def test_module_error_is_value_error(self) -> None:
        """Test ModuleError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Module(())

    def test_with_symbol(self) -> None:
        """Test with_symbol returns a labelled copy and leaves the original alone."""
        original = Module((1, 1, 1))
        labelled = original.with_symbol("7")
        assert labelled.symbol == "7"
        assert original.symbol == ""
        assert labelled == original

    def test_iter_bars_alternates(self) -> None:
        """Test bars are painted at even indices only."""
        assert list(Module((3, 2, 1)).iter_bars()) == [(3, True), (2, False), (1, True)]

    def test_iter_bars_blank(self) -> None:
        """Test blank modules paint nothing."""
        assert list(Module.blank_of(5).iter_bars()) == [(5, False)]

    def test_module_serialization(self) -> None:
        """Test module serialization and deserialization."""
        m1 = Module((2, 1, 2), symbol="Z", blank=False)
        m2 = Module.from_dict(m1.to_dict())
        assert m2 == m1
        assert m2.symbol == "Z"

    def test_module_str(self) -> None:
        """Test string form lists the widths."""
        assert str(Module((1, 2, 3))) == "1, 2, 3"

    def test_module_immutable(self) -> None:
        """Test that module is immutable."""
        m = Module((1, 1, 1))
        with pytest.raises(AttributeError):
            m.symbol = "X"  # type: ignore


class TestCompositeModule:
    """Tests for CompositeModule class."""

    def test_composite_creation(self) -> None:
        """Test basic composite creation."""
        quiet = Module.blank_of(10)
        start = Module((2, 1, 1, 2, 3, 2))
        composite = CompositeModule((quiet, start))
        assert composite.size == 2
        assert len(composite) == 2
        assert composite.get_module(1) == start
        assert composite[0] == quiet

    def test_width_in_bars_sums_children(self) -> None:
        """Test width is the sum of the children's widths."""
        composite = CompositeModule((Module((1, 1, 1)), Module.blank_of(11)))
        assert composite.width_in_bars() == 14

    def test_symbol_concatenates_children(self) -> None:
        """Test symbol joins the children's symbols in order."""
        composite = CompositeModule((Module((1,), symbol="A"), Module((2,), symbol="B")))
        assert composite.symbol == "AB"

    def test_nested_composites(self) -> None:
        """Test composites can hold other composites."""
        inner = CompositeModule((Module((1, 1)),))
        outer = CompositeModule((inner, Module((2, 2))))
        assert outer.width_in_bars() == 6
        assert list(outer.iter_bars()) == [(1, True), (1, False), (2, True), (2, False)]

    def test_iter_bars_keeps_child_parity(self) -> None:
        """Test each child restarts bar/space parity at its own index 0."""
        composite = CompositeModule((Module.blank_of(10), Module((2, 1))))
        assert list(composite.iter_bars()) == [(10, False), (2, True), (1, False)]

    def test_empty_composite_rejected(self) -> None:
        """Test that a composite needs at least one child."""
        with pytest.raises(ModuleError):
            CompositeModule(())

    def test_composite_never_equals_module(self) -> None:
        """Test a composite is not equal to a module with the same widths."""
        module = Module((1, 1, 1))
        assert CompositeModule((module,)) != module


class TestNoChecksum:
    """Tests for the explicit no-checksum outcome."""

    def test_singleton_equality(self) -> None:
        """Test NO_CHECKSUM equals any default NoChecksum."""
        assert NoChecksum() == NO_CHECKSUM

    def test_not_a_module(self) -> None:
        """Test the no-checksum outcome is distinct from a module."""
        assert not isinstance(NO_CHECKSUM, Module)
        assert NO_CHECKSUM is not None


class TestCenteredLabelLayout:
    """Tests for CenteredLabelLayout."""

    def test_place_centres_text(self) -> None:
        """Test text is centred horizontally within the layout width."""
        placement = CenteredLabelLayout(x=10, y=30, width=100).place(40, 9)
        assert placement.text_x == 10 + (100 - 40) / 2

    def test_place_vertical_gap(self) -> None:
        """Test the gap below the bars is the square root of the text height."""
        placement = CenteredLabelLayout(x=0, y=30, width=100).place(40, 16)
        assert placement.text_y == 30 + 16 + 4
        assert placement.background_height == 16 + 4 + 1

    def test_place_background_covers_layout(self) -> None:
        """Test the label background spans the layout area."""
        placement = CenteredLabelLayout(x=5, y=20, width=80).place(10, 4)
        assert placement.background_x == 5
        assert placement.background_y == 20
        assert placement.background_width == 80

"""Unit tests for the Code 39 symbology."""

import pytest

from barcoder.core.code39 import (
    GAP,
    QUIET_SECTION,
    START_STOP,
    SYMBOLS,
    Code39Barcode,
    mod43_check_value,
)
from barcoder.domain import NO_CHECKSUM, CompositeModule, Module
from barcoder.exceptions import IllegalCharacterError


class TestCode39:
    """Tests for Code39Barcode."""

    def test_table_size(self) -> None:
        """Test there are 43 data characters, each 12 modules wide."""
        assert len(SYMBOLS) == 43
        assert all(module.width_in_bars() == 12 for module in SYMBOLS.values())

    def test_lower_case_rejected(self) -> None:
        """Test characters outside the basic set are rejected."""
        with pytest.raises(IllegalCharacterError) as exc_info:
            Code39Barcode("ABc")
        assert exc_info.value.position == 2

    def test_encode_data_separates_characters(self) -> None:
        """Test every character is surrounded by one unit gaps."""
        modules = Code39Barcode("AB").encode_data()
        assert modules == [GAP, SYMBOLS["A"], GAP, SYMBOLS["B"], GAP]
        assert modules[1].symbol == "A"

    def test_no_checksum_by_default(self) -> None:
        """Test the check character is optional and off by default."""
        assert Code39Barcode("AB").calculate_checksum() is NO_CHECKSUM

    def test_mod43_check_value(self) -> None:
        """Test the check value is the sum of character values modulo 43."""
        assert mod43_check_value("CODE39") == 32

    def test_checksum_module(self) -> None:
        """Test the check character is followed by a one unit gap."""
        checksum = Code39Barcode("CODE39", requires_checksum=True).calculate_checksum()
        assert isinstance(checksum, Module)
        assert checksum.symbol == "W"
        assert checksum.bars == (*SYMBOLS["W"].bars, 1)

    def test_ambles(self) -> None:
        """Test start and stop characters frame the quiet zones."""
        barcode = Code39Barcode("AB")
        assert barcode.get_pre_amble() == CompositeModule((QUIET_SECTION, START_STOP))
        assert barcode.get_post_amble() == CompositeModule((START_STOP, QUIET_SECTION))

    def test_ambles_without_quiet_zone(self) -> None:
        """Test only the start/stop characters are drawn without a quiet zone."""
        barcode = Code39Barcode("AB", quiet_zone=False)
        assert barcode.get_pre_amble() == START_STOP
        assert barcode.get_post_amble() == START_STOP

    def test_label_is_data(self) -> None:
        """Test the label is the data."""
        assert Code39Barcode("CODE-39").label == "CODE-39"

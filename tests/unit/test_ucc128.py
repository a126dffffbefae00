"""Unit tests for the UCC/EAN-128 symbology."""

import pytest

from barcoder.core.checksum import ucc128_check_digit
from barcoder.core.code128 import FNC1, START_C, CharacterSet
from barcoder.core.ucc128 import UCCEAN128Barcode, element_length
from barcoder.exceptions import IllegalCharacterError, InvalidDataError, MissingArgumentError


class TestUCCEAN128Construction:
    """Tests for UCC/EAN-128 construction and validation."""

    @pytest.mark.parametrize("ai", [None, ""])
    def test_missing_application_identifier(self, ai: str | None) -> None:
        """Test a None or empty AI raises MissingArgumentError."""
        with pytest.raises(MissingArgumentError, match="application_identifier"):
            UCCEAN128Barcode(ai, "35436")

    def test_missing_application_identifier_is_value_error(self) -> None:
        """Test the missing AI error is an argument error."""
        with pytest.raises(ValueError):
            UCCEAN128Barcode(None, "35436")

    def test_missing_data(self) -> None:
        """Test None data raises MissingArgumentError."""
        with pytest.raises(MissingArgumentError, match="data"):
            UCCEAN128Barcode("00", None)

    def test_non_digit_data(self) -> None:
        """Test letters in the data are rejected."""
        with pytest.raises(IllegalCharacterError):
            UCCEAN128Barcode("00", "12A45")

    def test_non_digit_application_identifier(self) -> None:
        """Test letters in the AI are rejected."""
        with pytest.raises(IllegalCharacterError):
            UCCEAN128Barcode("0A", "12345")

    def test_well_known_identifiers(self) -> None:
        """Test the well-known AI constants."""
        assert UCCEAN128Barcode.SSCC_18_AI == "00"
        assert UCCEAN128Barcode.SCC_14_AI == "01"
        assert UCCEAN128Barcode.SHIPMENT_ID_AI == "402"
        assert UCCEAN128Barcode.USPS_AI == "420"


class TestUCCEAN128Encoding:
    """Tests for UCC/EAN-128 encoding."""

    @pytest.fixture
    def barcode(self) -> UCCEAN128Barcode:
        """Create the SSCC barcode for 12345."""
        return UCCEAN128Barcode(UCCEAN128Barcode.SSCC_18_AI, "12345")

    def test_data_layout(self, barcode: UCCEAN128Barcode) -> None:
        """Test data is FNC1, AI, data and check digit."""
        assert barcode.data == FNC1 + "00" + "12345" + "5"
        assert barcode.check_digit == "5"

    def test_encode_data_symbols(self, barcode: UCCEAN128Barcode) -> None:
        """Test FNC1 followed by one module per digit pair."""
        symbols = [m.symbol for m in barcode.encode_data()]
        assert symbols == [FNC1, "00", "12", "34", "5" + str(ucc128_check_digit("12345"))]

    def test_checksum_symbol(self, barcode: UCCEAN128Barcode) -> None:
        """Test the mod 103 symbol check character."""
        assert barcode.calculate_checksum().symbol == "36"

    def test_check_digit_of_sscc(self) -> None:
        """Test the appended check digit of an SSCC payload."""
        barcode = UCCEAN128Barcode("00", "00030017000043516")
        assert barcode.data[-1] == "8"

    def test_no_check_digit(self) -> None:
        """Test no check digit is appended in no-checksum mode."""
        barcode = UCCEAN128Barcode("00", "00030017000043516", False)
        assert barcode.data == FNC1 + "0000030017000043516"
        assert barcode.check_digit == ""
        assert not barcode.include_check_digit

    def test_odd_payload_is_zero_padded(self) -> None:
        """Test an odd digit payload is left-padded for set C."""
        barcode = UCCEAN128Barcode("00", "123", False)
        assert [m.symbol for m in barcode.encode_data()] == [FNC1, "00", "01", "23"]

    @pytest.mark.parametrize(
        ("ai", "data", "include_check_digit", "symbols"),
        [
            ("01", "123", False, ["01", "01", "23"]),
            ("21", "1", False, ["21", "01"]),
            ("01", "12", True, ["01", "01", "27"]),
            ("010", "99999", True, ["01", "00", "99", "99", f"9{ucc128_check_digit('99999')}"]),
        ],
    )
    def test_odd_payload_keeps_application_identifier(
        self, ai: str, data: str, include_check_digit: bool, symbols: list[str]
    ) -> None:
        """Test the padding zero goes after the AI so the AI is scanned unchanged."""
        barcode = UCCEAN128Barcode(ai, data, include_check_digit)
        scanned = [m.symbol for m in barcode.encode_data()]
        assert scanned == [FNC1, *symbols]
        assert "".join(scanned[1:]).startswith(ai)

    def test_odd_payload_label_matches_scanned_data(self) -> None:
        """Test the label shows the padded element."""
        barcode = UCCEAN128Barcode("01", "12")
        assert barcode.label == "(01) 0127"
        assert barcode.check_digit == "7"
        assert barcode.data == FNC1 + "010127"

    def test_pre_amble_is_quiet_zone_and_start_c(self) -> None:
        """Test the preamble holds the quiet zone and START C."""
        pre_amble = UCCEAN128Barcode("00", "00").get_pre_amble()
        assert pre_amble.size == 2
        assert pre_amble.get_module(1) == START_C

    def test_label(self) -> None:
        """Test the label is the bracketed AI, a space, the data and check digit."""
        barcode = UCCEAN128Barcode("00", "99999")
        assert barcode.label == "(00) 99999" + str(ucc128_check_digit("99999"))

    def test_label_without_check_digit(self) -> None:
        """Test the label has no check digit in no-checksum mode."""
        assert UCCEAN128Barcode("00", "1234", False).label == "(00) 1234"


class TestUCCEAN128Parse:
    """Tests for building symbols from bracketed elements."""

    def test_gtin_gets_check_digit(self) -> None:
        """Test (01) elements get their GTIN check digit appended."""
        barcode = UCCEAN128Barcode.parse("(01)0061414100001(10)LOT42")
        assert barcode.data == FNC1 + "01" + "00614141000012" + "10LOT42"
        assert barcode.label == "(01)00614141000012(10)LOT42"
        assert barcode.application_identifier == "01"

    def test_starts_in_set_c(self) -> None:
        """Test the leading numeric element is encoded in set C."""
        barcode = UCCEAN128Barcode.parse("(01)0061414100001(10)LOT42")
        assert barcode.encoding.start_set is CharacterSet.C
        assert barcode.encode_data()[0].symbol == FNC1

    def test_fnc1_after_variable_length_element(self) -> None:
        """Test FNC1 separates a variable length element from the next."""
        barcode = UCCEAN128Barcode.parse("(10)ABC(17)250101")
        assert barcode.data == FNC1 + "10ABC" + FNC1 + "17250101"

    def test_wrong_fixed_length(self) -> None:
        """Test a fixed length element of the wrong length is rejected."""
        with pytest.raises(InvalidDataError, match="must be 14 characters"):
            UCCEAN128Barcode.parse("(01)123")

    def test_empty_element(self) -> None:
        """Test an element without data is rejected."""
        with pytest.raises(InvalidDataError, match="has no data"):
            UCCEAN128Barcode.parse("(10)")

    @pytest.mark.parametrize("text", ["", "01)123", "(10)ABC)"])
    def test_malformed(self, text: str) -> None:
        """Test text that is not a sequence of elements is rejected."""
        with pytest.raises(InvalidDataError):
            UCCEAN128Barcode.parse(text)

    def test_element_length(self) -> None:
        """Test the fixed length lookup."""
        assert element_length("00") == 20
        assert element_length("3102") == 10
        assert element_length("10") is None
        assert element_length("402") is None

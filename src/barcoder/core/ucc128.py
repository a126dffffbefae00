"""UCC/EAN-128 (GS1-128) symbology.

A UCC/EAN-128 symbol is a Code 128 symbol whose data starts with FNC1 and
is made of application identifier (AI) prefixed elements. The simple form
encodes one numeric element in code set C with a modulo 10 check digit
appended; parse() builds a symbol from several bracketed elements.
"""

import re
from dataclasses import dataclass

from barcoder.core.checksum import gtin_check_digit, ucc128_check_digit
from barcoder.core.code128 import FNC1, CharacterSet, Code128Barcode
from barcoder.exceptions import IllegalCharacterError, InvalidDataError, MissingArgumentError

# Total element length (AI included) of the fixed length AIs, keyed by AI prefix
_FIXED_LENGTHS: dict[str, int] = {
    "00": 20,
    "01": 16,
    "02": 16,
    "03": 16,
    "04": 18,
    **{str(ai): 8 for ai in range(11, 20)},
    "20": 4,
    **{str(ai): 10 for ai in range(31, 37)},
    "41": 16,
}

_ELEMENT = re.compile(r"\((\d{2,4})\)([^()]*)")


def element_length(ai: str) -> int | None:
    """Fixed length of an element including its AI, None if variable."""
    return _FIXED_LENGTHS.get(ai[:2])


def _check_digits(data: str) -> None:
    for i, char in enumerate(data):
        if char not in "0123456789":
            raise IllegalCharacterError(data, char, i)


@dataclass(frozen=True, slots=True)
class _Elements:
    """Bracketed element text resolved into encodable form."""

    encoded: str
    label: str


def _parse_elements(text: str, gtin_ai: str) -> tuple[str, _Elements]:
    """Resolve bracketed element text.

    Returns:
        Tuple of (first AI, resolved elements)
    """
    encoded: list[str] = [FNC1]
    human: list[str] = []
    position = 0
    previous_variable = False
    first_ai = ""
    for match in _ELEMENT.finditer(text):
        if match.start() != position:
            raise InvalidDataError(text, f"unexpected text at position {position}")
        position = match.end()
        ai, value = match.group(1), match.group(2)
        first_ai = first_ai or ai
        if not value:
            raise InvalidDataError(text, f"element ({ai}) has no data")
        if ai == gtin_ai:
            _check_digits(value)
            value += str(gtin_check_digit(value))

        length = element_length(ai)
        if length is not None and len(ai) + len(value) != length:
            expected = length - len(ai)
            raise InvalidDataError(text, f"element ({ai}) must be {expected} characters long")
        if previous_variable:
            encoded.append(FNC1)
        previous_variable = length is None
        encoded.append(ai + value)
        human.append(f"({ai}){value}")

    if position == 0 or position != len(text):
        raise InvalidDataError(text, "expected bracketed application identifier elements")
    return first_ai, _Elements("".join(encoded), "".join(human))


class UCCEAN128Barcode(Code128Barcode):
    """UCC/EAN-128 barcode.

    Example:
        barcode = UCCEAN128Barcode(UCCEAN128Barcode.SSCC_18_AI, "12345")
        barcode.label  # "(00) 123455"
    """

    SSCC_18_AI = "00"
    SCC_14_AI = "01"
    GTIN_AI = SCC_14_AI
    SHIPMENT_ID_AI = "402"
    USPS_AI = "420"

    def __init__(
        self,
        application_identifier: str | None,
        data: str | None,
        include_check_digit: bool = True,
        *,
        quiet_zone: bool = True,
        label: str | None = None,
        _elements: _Elements | None = None,
    ) -> None:
        """Initialize a UCC/EAN-128 barcode.

        Set C encodes digit pairs, so when the AI, data and check digit add
        up to an odd number of digits a "0" is put in front of the data. The
        AI stays first and the check digit is computed on the data as given.

        Args:
            application_identifier: AI prefix, e.g. SSCC_18_AI
            data: Numeric element data
            include_check_digit: Append the modulo 10 check digit to the data
            quiet_zone: Draw 10 unit margins around the symbol
            label: Label override

        Raises:
            MissingArgumentError: If the AI is None or empty, or data is None
            InvalidDataError: If data is empty
            IllegalCharacterError: If the AI or data holds a non-digit
        """
        if not application_identifier:
            raise MissingArgumentError("application_identifier")
        if data is None:
            raise MissingArgumentError("data")
        if not data:
            raise InvalidDataError(data, "data to encode cannot be empty")
        _check_digits(application_identifier)

        if _elements is not None:
            check = ""
            element_data = data
            payload = _elements.encoded
            character_set = CharacterSet.AUTO
        else:
            _check_digits(data)
            check = str(ucc128_check_digit(data)) if include_check_digit else ""
            element_data = data
            if (len(application_identifier) + len(data) + len(check)) % 2 == 1:
                element_data = "0" + data
            payload = FNC1 + application_identifier + element_data + check
            character_set = CharacterSet.C

        super().__init__(payload, character_set, quiet_zone=quiet_zone, label=label)
        self._application_identifier = application_identifier
        self._element_data = element_data
        self._include_check_digit = include_check_digit and _elements is None
        self._check_digit = check
        self._parsed_label = _elements.label if _elements is not None else None

    @classmethod
    def parse(
        cls,
        text: str,
        *,
        quiet_zone: bool = True,
        label: str | None = None,
    ) -> "UCCEAN128Barcode":
        """Build a symbol from bracketed AI elements.

        FNC1 separates an element from the next when its AI has a variable
        length. Elements with AI (01) get their GTIN check digit appended.
        The data is encoded in AUTO mode so alphanumeric elements work.

        Args:
            text: Elements such as "(01)0061414100001(10)LOT42"
            quiet_zone: Draw 10 unit margins around the symbol
            label: Label override

        Returns:
            The barcode, labelled with the bracketed elements

        Raises:
            MissingArgumentError: If text is None
            InvalidDataError: If the text is not a sequence of elements or a
                fixed length element has the wrong length
        """
        if text is None:
            raise MissingArgumentError("text")
        first_ai, elements = _parse_elements(text, cls.GTIN_AI)
        return cls(first_ai, text, False, quiet_zone=quiet_zone, label=label, _elements=elements)

    @property
    def application_identifier(self) -> str:
        """AI of the (first) element."""
        return self._application_identifier

    @property
    def include_check_digit(self) -> bool:
        return self._include_check_digit

    @property
    def check_digit(self) -> str:
        """Appended modulo 10 check digit, empty when none was added."""
        return self._check_digit

    def default_label(self) -> str:
        if self._parsed_label is not None:
            return self._parsed_label
        return f"({self._application_identifier}) {self._element_data}{self._check_digit}"

"""EAN-13 and Bookland symbologies.

EAN-13 extends UPC-A with a thirteenth digit. The first digit is not drawn
as bars: it selects which of the next six digits use odd (L) or even (G)
parity patterns. The right half and the guards are the UPC-A ones. A UPC-A
number is the EAN-13 number with a leading zero.

Bookland encodes an ISBN-10 as EAN-13 in the 978 number system.
"""

from barcoder.core.barcode import LinearBarcode
from barcoder.core.checksum import gtin_check_digit
from barcoder.core.upc import CENTRE_GUARD, LEFT_GUARD, LEFT_HAND, RIGHT_GUARD, RIGHT_HAND
from barcoder.domain.module import CompositeModule, Module
from barcoder.exceptions import IllegalCharacterError, InvalidDataError, MissingArgumentError

DATA_LENGTH = 12
LEFT_MARGIN_WIDTH = 11
RIGHT_MARGIN_WIDTH = 7

# Even parity patterns are the right-hand patterns read backwards
EVEN_LEFT_HAND: dict[str, Module] = {
    digit: Module((0, *reversed(module.bars)), symbol=digit) for digit, module in RIGHT_HAND.items()
}

# Parity of digits 2-7, keyed by the first digit
PARITY_PATTERNS = {
    "0": "LLLLLL",
    "1": "LLGLGG",
    "2": "LLGGLG",
    "3": "LLGGGL",
    "4": "LGLLGG",
    "5": "LGGLLG",
    "6": "LGGGLL",
    "7": "LGLGLG",
    "8": "LGLGGL",
    "9": "LGGLGL",
}

LEFT_MARGIN = Module.blank_of(LEFT_MARGIN_WIDTH)
RIGHT_MARGIN = Module.blank_of(RIGHT_MARGIN_WIDTH)

ISBN_NUMBER_SYSTEM = "978"
ISBN_LENGTH = 10


class EAN13Barcode(LinearBarcode):
    """EAN-13 barcode.

    Example:
        barcode = EAN13Barcode("400638133393")
        barcode.label  # "4006381333931"
    """

    def __init__(
        self,
        data: str | None,
        *,
        quiet_zone: bool = True,
        label: str | None = None,
    ) -> None:
        """Initialize an EAN-13 barcode.

        Args:
            data: 12 digits, or 13 digits ending in their check digit
            quiet_zone: Draw the 11 and 7 unit margins around the symbol
            label: Label override

        Raises:
            MissingArgumentError: If data is None
            IllegalCharacterError: If data holds a non-digit
            InvalidDataError: If the length is wrong or a supplied check digit
                does not match
        """
        super().__init__(data, quiet_zone=quiet_zone, label=label)
        raw = self._data
        for i, char in enumerate(raw):
            if char not in RIGHT_HAND:
                raise IllegalCharacterError(raw, char, i)
        if len(raw) not in (DATA_LENGTH, DATA_LENGTH + 1):
            raise InvalidDataError(
                raw, f"length should be {DATA_LENGTH} or {DATA_LENGTH + 1} but is {len(raw)}"
            )

        digits = raw[:DATA_LENGTH]
        check = gtin_check_digit(digits)
        if len(raw) > DATA_LENGTH and int(raw[DATA_LENGTH]) != check:
            raise InvalidDataError(raw, f"check digit should be {check} but is {raw[DATA_LENGTH]}")

        self._data = digits
        self._check_digit = check

    @property
    def check_digit(self) -> int:
        return self._check_digit

    def default_label(self) -> str:
        return f"{self._data}{self._check_digit}"

    def get_pre_amble(self) -> Module | CompositeModule:
        if self._quiet_zone:
            return CompositeModule((LEFT_MARGIN, LEFT_GUARD))
        return LEFT_GUARD

    def get_post_amble(self) -> Module | CompositeModule:
        if self._quiet_zone:
            return CompositeModule((RIGHT_GUARD, RIGHT_MARGIN))
        return RIGHT_GUARD

    def encode_data(self) -> list[Module]:
        parity = PARITY_PATTERNS[self._data[0]]
        modules = [
            (LEFT_HAND if side == "L" else EVEN_LEFT_HAND)[digit]
            for side, digit in zip(parity, self._data[1:7], strict=True)
        ]
        modules.append(CENTRE_GUARD)
        modules.extend(RIGHT_HAND[digit] for digit in self._data[7:])
        return modules

    def calculate_checksum(self) -> Module:
        return RIGHT_HAND[str(self._check_digit)]


def isbn_to_ean(isbn: str) -> str:
    """Turn an ISBN-10 into the 12 EAN-13 data digits.

    Hyphens are ignored. The ISBN check character is dropped; EAN-13
    computes its own.

    Raises:
        InvalidDataError: If the ISBN is not 10 characters long
    """
    compact = isbn.replace("-", "")
    if len(compact) != ISBN_LENGTH:
        raise InvalidDataError(
            isbn, f"ISBN should be {ISBN_LENGTH} characters but is {len(compact)}"
        )
    return ISBN_NUMBER_SYSTEM + compact[:-1]


class BooklandBarcode(EAN13Barcode):
    """EAN-13 barcode of an ISBN-10.

    Example:
        barcode = BooklandBarcode("0-306-40615-2")
        barcode.label  # "9780306406157"
    """

    def __init__(
        self,
        isbn: str | None,
        *,
        quiet_zone: bool = True,
        label: str | None = None,
    ) -> None:
        if isbn is None:
            raise MissingArgumentError("isbn")
        super().__init__(isbn_to_ean(isbn), quiet_zone=quiet_zone, label=label)
        self._isbn = isbn

    @property
    def isbn(self) -> str:
        return self._isbn

"""UPC-A symbology.

A UPC-A symbol holds 11 data digits and a check digit. The first six digits
use left-hand (odd parity) patterns, the rest right-hand patterns, with a
centre guard between the halves. Left-hand patterns are the right-hand
widths starting with a space, written here with a leading zero bar width.
"""

from barcoder.core.barcode import LinearBarcode
from barcoder.core.checksum import random_weight_price_check_digit, upc_check_digit
from barcoder.domain.module import CompositeModule, Module
from barcoder.exceptions import IllegalCharacterError, InvalidDataError

DATA_LENGTH = 11
LEFT_WIDTH = 6
# Index of the digit replaced by the price check digit in random weight numbers
RANDOM_WEIGHT_CHECK_INDEX = 6
MARGIN_WIDTH = 11

_RIGHT_WIDTHS = {
    "0": (3, 2, 1, 1),
    "1": (2, 2, 2, 1),
    "2": (2, 1, 2, 2),
    "3": (1, 4, 1, 1),
    "4": (1, 1, 3, 2),
    "5": (1, 2, 3, 1),
    "6": (1, 1, 1, 4),
    "7": (1, 3, 1, 2),
    "8": (1, 2, 1, 3),
    "9": (3, 1, 1, 2),
}

RIGHT_HAND: dict[str, Module] = {
    digit: Module(widths, symbol=digit) for digit, widths in _RIGHT_WIDTHS.items()
}
LEFT_HAND: dict[str, Module] = {
    digit: Module((0, *widths), symbol=digit) for digit, widths in _RIGHT_WIDTHS.items()
}

LEFT_GUARD = Module((1, 1, 1))
RIGHT_GUARD = Module((1, 1, 1))
CENTRE_GUARD = Module((0, 1, 1, 1, 1, 1))
LEFT_MARGIN = Module.blank_of(MARGIN_WIDTH)
RIGHT_MARGIN = Module.blank_of(MARGIN_WIDTH)


def apply_random_weight(data: str) -> str:
    """Replace the seventh digit of an 11 digit number with its price check digit."""
    check = random_weight_price_check_digit(data)
    index = RANDOM_WEIGHT_CHECK_INDEX
    return data[:index] + str(check) + data[index + 1 :]


class UPCABarcode(LinearBarcode):
    """UPC-A barcode.

    Example:
        barcode = UPCABarcode("03600029145")
        barcode.label  # "036000291452"
    """

    def __init__(
        self,
        data: str | None,
        random_weight: bool = False,
        *,
        quiet_zone: bool = True,
        label: str | None = None,
    ) -> None:
        """Initialize a UPC-A barcode.

        Args:
            data: 11 digits, or 12 digits ending in their check digit
            random_weight: Replace the seventh digit with the price check digit
            quiet_zone: Draw 11 unit margins around the symbol
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
        if random_weight:
            digits = apply_random_weight(digits)
        check = upc_check_digit(digits)
        if len(raw) > DATA_LENGTH and int(raw[DATA_LENGTH]) != check:
            raise InvalidDataError(raw, f"check digit should be {check} but is {raw[DATA_LENGTH]}")

        self._data = digits
        self._random_weight = random_weight
        self._check_digit = check

    @property
    def random_weight(self) -> bool:
        return self._random_weight

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
        modules = [LEFT_HAND[digit] for digit in self._data[:LEFT_WIDTH]]
        modules.append(CENTRE_GUARD)
        modules.extend(RIGHT_HAND[digit] for digit in self._data[LEFT_WIDTH:])
        return modules

    def calculate_checksum(self) -> Module:
        return RIGHT_HAND[str(self._check_digit)]

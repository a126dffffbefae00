"""Standard and Interleaved 2 of 5 symbologies.

Both encode digits only, each digit as five elements of which two are wide.
Standard 2 of 5 puts the pattern in the bars and separates them with narrow
spaces. Interleaved 2 of 5 encodes digits in pairs: the first digit of a
pair in the bars and the second in the spaces between them, so it needs an
even number of digits.

The optional check digit is appended to the data before encoding, so it is
part of the encoded modules rather than a separate check character.
"""

from barcoder.core.barcode import LinearBarcode
from barcoder.core.checksum import gtin_check_digit
from barcoder.domain.module import NO_CHECKSUM, CompositeModule, Module, NoChecksum
from barcoder.exceptions import IllegalCharacterError, InvalidDataError

NARROW = 1
QUIET_ZONE_WIDTH = 10

# Element widths of each digit, narrow 1 and wide 3
PATTERNS: dict[str, tuple[int, ...]] = {
    "0": (1, 1, 3, 3, 1),
    "1": (3, 1, 1, 1, 3),
    "2": (1, 3, 1, 1, 3),
    "3": (3, 3, 1, 1, 1),
    "4": (1, 1, 3, 1, 3),
    "5": (3, 1, 3, 1, 1),
    "6": (1, 3, 3, 1, 1),
    "7": (1, 1, 1, 3, 3),
    "8": (3, 1, 1, 3, 1),
    "9": (1, 3, 1, 3, 1),
}

STANDARD_START = Module((3, 1, 3, 1, 1, 1))
STANDARD_STOP = Module((3, 1, 1, 1, 3, 1))
INTERLEAVED_START = Module((1, 1, 1, 1))
INTERLEAVED_STOP = Module((3, 1, 1))
QUIET_SECTION = Module.blank_of(QUIET_ZONE_WIDTH)


def standard_module(digit: str) -> Module:
    """Standard 2 of 5 module of a digit: the pattern in bars, narrow spaces."""
    widths: list[int] = []
    for bar in PATTERNS[digit]:
        widths.extend((bar, NARROW))
    return Module(tuple(widths), symbol=digit)


def interleaved_module(pair: str) -> Module:
    """Interleaved 2 of 5 module of a digit pair: first digit in bars, second in spaces."""
    widths: list[int] = []
    for bar, space in zip(PATTERNS[pair[0]], PATTERNS[pair[1]], strict=True):
        widths.extend((bar, space))
    return Module(tuple(widths), symbol=pair)


class Standard2of5Barcode(LinearBarcode):
    """Standard (industrial) 2 of 5 barcode.

    Example:
        barcode = Standard2of5Barcode("12345", check_digit=True)
        barcode.data  # "123457"
    """

    def __init__(
        self,
        data: str | None,
        check_digit: bool = False,
        *,
        quiet_zone: bool = True,
        label: str | None = None,
    ) -> None:
        """Initialize a 2 of 5 barcode.

        Whitespace in the data is ignored.

        Args:
            data: Digits to encode
            check_digit: Append a modulo 10 check digit (weights 3,1 from the right)
            quiet_zone: Draw 10 unit margins around the symbol
            label: Label override; defaults to the digits and check digit

        Raises:
            MissingArgumentError: If data is None
            InvalidDataError: If data is empty
            IllegalCharacterError: If data holds a non-digit
        """
        super().__init__(data, quiet_zone=quiet_zone, label=label)
        raw = self._data
        digits = "".join(char for char in raw if not char.isspace())
        if not digits:
            raise InvalidDataError(raw, "data to encode cannot be empty")
        for i, char in enumerate(digits):
            if char not in PATTERNS:
                raise IllegalCharacterError(digits, char, i)

        self._check_digit = str(gtin_check_digit(digits)) if check_digit else ""
        self._data = digits + self._check_digit

    @property
    def check_digit(self) -> str:
        """Appended check digit, empty when none was added."""
        return self._check_digit

    def _start(self) -> Module:
        return STANDARD_START

    def _stop(self) -> Module:
        return STANDARD_STOP

    def get_pre_amble(self) -> Module | CompositeModule:
        if self._quiet_zone:
            return CompositeModule((QUIET_SECTION, self._start()))
        return self._start()

    def get_post_amble(self) -> Module | CompositeModule:
        if self._quiet_zone:
            return CompositeModule((self._stop(), QUIET_SECTION))
        return self._stop()

    def encode_data(self) -> list[Module]:
        return [standard_module(digit) for digit in self._data]

    def calculate_checksum(self) -> NoChecksum:
        return NO_CHECKSUM


class Interleaved2of5Barcode(Standard2of5Barcode):
    """Interleaved 2 of 5 (ITF) barcode.

    Example:
        barcode = Interleaved2of5Barcode("1234")
        [m.symbol for m in barcode.encode_data()]  # ["12", "34"]
    """

    def __init__(
        self,
        data: str | None,
        check_digit: bool = False,
        *,
        quiet_zone: bool = True,
        label: str | None = None,
    ) -> None:
        """Initialize an Interleaved 2 of 5 barcode.

        Raises:
            InvalidDataError: If the digits, check digit included, are not
                an even number
        """
        super().__init__(data, check_digit, quiet_zone=quiet_zone, label=label)
        if len(self._data) % 2 != 0:
            raise InvalidDataError(
                self._data,
                f"interleaved 2 of 5 needs an even number of digits, got {len(self._data)}",
            )

    def _start(self) -> Module:
        return INTERLEAVED_START

    def _stop(self) -> Module:
        return INTERLEAVED_STOP

    def encode_data(self) -> list[Module]:
        return [interleaved_module(self._data[i : i + 2]) for i in range(0, len(self._data), 2)]

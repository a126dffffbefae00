"""Code 39 (3 of 9) symbology.

Code 39 encodes digits, upper case letters and seven punctuation characters.
Each character is nine elements wide, separated from its neighbours by a one
unit gap, and the symbol is framed by "*" start/stop characters. The
modulo 43 check character is optional.
"""

from barcoder.core.barcode import LinearBarcode
from barcoder.domain.module import NO_CHECKSUM, ChecksumResult, CompositeModule, Module
from barcoder.exceptions import IllegalCharacterError

CHECK_MODULUS = 43
QUIET_ZONE_WIDTH = 10

# Characters in value order; a character's index is its check value
CHARACTERS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"

_WIDTHS = (
    (1, 1, 1, 2, 2, 1, 2, 1, 1), (2, 1, 1, 2, 1, 1, 1, 1, 2), (1, 1, 2, 2, 1, 1, 1, 1, 2),
    (2, 1, 2, 2, 1, 1, 1, 1, 1), (1, 1, 1, 2, 2, 1, 1, 1, 2), (2, 1, 1, 2, 2, 1, 1, 1, 1),
    (1, 1, 2, 2, 2, 1, 1, 1, 1), (1, 1, 1, 2, 1, 1, 2, 1, 2), (2, 1, 1, 2, 1, 1, 2, 1, 1),
    (1, 1, 2, 2, 1, 1, 2, 1, 1), (2, 1, 1, 1, 1, 2, 1, 1, 2), (1, 1, 2, 1, 1, 2, 1, 1, 2),
    (2, 1, 2, 1, 1, 2, 1, 1, 1), (1, 1, 1, 1, 2, 2, 1, 1, 2), (2, 1, 1, 1, 2, 2, 1, 1, 1),
    (1, 1, 2, 1, 2, 2, 1, 1, 1), (1, 1, 1, 1, 1, 2, 2, 1, 2), (2, 1, 1, 1, 1, 2, 2, 1, 1),
    (1, 1, 2, 1, 1, 2, 2, 1, 1), (1, 1, 1, 1, 2, 2, 2, 1, 1), (2, 1, 1, 1, 1, 1, 1, 2, 2),
    (1, 1, 2, 1, 1, 1, 1, 2, 2), (2, 1, 2, 1, 1, 1, 1, 2, 1), (1, 1, 1, 1, 2, 1, 1, 2, 2),
    (2, 1, 1, 1, 2, 1, 1, 2, 1), (1, 1, 2, 1, 2, 1, 1, 2, 1), (1, 1, 1, 1, 1, 1, 2, 2, 2),
    (2, 1, 1, 1, 1, 1, 2, 2, 1), (1, 1, 2, 1, 1, 1, 2, 2, 1), (1, 1, 1, 1, 2, 1, 2, 2, 1),
    (2, 2, 1, 1, 1, 1, 1, 1, 2), (1, 2, 2, 1, 1, 1, 1, 1, 2), (2, 2, 2, 1, 1, 1, 1, 1, 1),
    (1, 2, 1, 1, 2, 1, 1, 1, 2), (2, 2, 1, 1, 2, 1, 1, 1, 1), (1, 2, 2, 1, 2, 1, 1, 1, 1),
    (1, 2, 1, 1, 1, 1, 2, 1, 2), (2, 2, 1, 1, 1, 1, 2, 1, 1), (1, 2, 2, 1, 1, 1, 2, 1, 1),
    (1, 2, 1, 2, 1, 2, 1, 1, 1), (1, 2, 1, 2, 1, 1, 1, 2, 1), (1, 2, 1, 1, 1, 2, 1, 2, 1),
    (1, 1, 1, 2, 1, 2, 1, 2, 1),
)  # fmt: skip

SYMBOLS: dict[str, Module] = {
    char: Module(widths, symbol=char) for char, widths in zip(CHARACTERS, _WIDTHS, strict=True)
}

START_STOP = Module((1, 2, 1, 1, 2, 1, 2, 1, 1), symbol="*")
GAP = Module.blank_of(1)
QUIET_SECTION = Module.blank_of(QUIET_ZONE_WIDTH)


def mod43_check_value(data: str) -> int:
    """Sum of the character values modulo 43."""
    return sum(CHARACTERS.index(char) for char in data) % CHECK_MODULUS


class Code39Barcode(LinearBarcode):
    """Code 39 barcode with an optional modulo 43 check character.

    Example:
        barcode = Code39Barcode("CODE-39", requires_checksum=True)
    """

    def __init__(
        self,
        data: str | None,
        requires_checksum: bool = False,
        *,
        quiet_zone: bool = True,
        label: str | None = None,
    ) -> None:
        super().__init__(data, quiet_zone=quiet_zone, label=label)
        for i, char in enumerate(self._data):
            if char not in SYMBOLS:
                raise IllegalCharacterError(self._data, char, i)
        self._requires_checksum = requires_checksum

    @property
    def requires_checksum(self) -> bool:
        return self._requires_checksum

    def get_pre_amble(self) -> Module | CompositeModule:
        if self._quiet_zone:
            return CompositeModule((QUIET_SECTION, START_STOP))
        return START_STOP

    def get_post_amble(self) -> Module | CompositeModule:
        if self._quiet_zone:
            return CompositeModule((START_STOP, QUIET_SECTION))
        return START_STOP

    def encode_data(self) -> list[Module]:
        modules = []
        for char in self._data:
            modules.append(GAP)
            modules.append(SYMBOLS[char])
        modules.append(GAP)
        return modules

    def calculate_checksum(self) -> ChecksumResult:
        if not self._requires_checksum:
            return NO_CHECKSUM
        check = SYMBOLS[CHARACTERS[mod43_check_value(self._data)]]
        # Trailing gap keeps the stop character separated
        return Module((*check.bars, 1), symbol=check.symbol)

"""Codabar symbology.

Codabar encodes digits and six punctuation characters between start and
stop characters A, B, C or D. Characters are separated by a one unit gap.
The traditional start/stop names (t, n, * and e) and lower case letters are
accepted and converted. Data without start/stop characters is framed with
A and C.
"""

from barcoder.core.barcode import LinearBarcode
from barcoder.domain.module import NO_CHECKSUM, Module, NoChecksum
from barcoder.exceptions import IllegalCharacterError, InvalidDataError

DEFAULT_START = "A"
DEFAULT_STOP = "C"
QUIET_ZONE_WIDTH = 10

START_STOP_CHARACTERS = "ABCD"

_ALIASES = str.maketrans(
    {"a": "A", "t": "A", "b": "B", "n": "B", "c": "C", "*": "C", "d": "D", "e": "D"}
)

_WIDTHS = {
    "0": (1, 1, 1, 1, 1, 2, 2),
    "1": (1, 1, 1, 1, 2, 2, 1),
    "2": (1, 1, 1, 2, 1, 1, 2),
    "3": (2, 2, 1, 1, 1, 1, 1),
    "4": (1, 1, 2, 1, 1, 2, 1),
    "5": (2, 1, 1, 1, 1, 2, 1),
    "6": (1, 2, 1, 1, 1, 1, 2),
    "7": (1, 2, 1, 1, 2, 1, 1),
    "8": (1, 2, 2, 1, 1, 1, 1),
    "9": (2, 1, 1, 2, 1, 1, 1),
    "-": (1, 1, 1, 2, 2, 1, 1),
    "$": (1, 1, 2, 2, 1, 1, 1),
    ":": (2, 1, 1, 1, 2, 1, 2),
    "/": (2, 1, 2, 1, 1, 1, 2),
    ".": (2, 1, 2, 1, 2, 1, 1),
    "+": (1, 1, 2, 2, 2, 2, 2),
    "A": (1, 1, 2, 2, 1, 2, 1),
    "B": (1, 1, 1, 2, 1, 2, 2),
    "C": (1, 2, 1, 2, 1, 1, 2),
    "D": (1, 1, 1, 2, 2, 2, 1),
}

SYMBOLS: dict[str, Module] = {char: Module(widths, symbol=char) for char, widths in _WIDTHS.items()}

GAP = Module.blank_of(1)
QUIET_SECTION = Module.blank_of(QUIET_ZONE_WIDTH)


def normalize(data: str) -> str:
    """Resolve start/stop aliases, drop whitespace and add missing start/stop.

    Raises:
        InvalidDataError: If nothing is left or a start/stop character
            appears inside the data
        IllegalCharacterError: If a character cannot be encoded
    """
    compact = "".join(char for char in data.translate(_ALIASES) if not char.isspace())
    if not compact:
        raise InvalidDataError(data, "data to encode cannot be empty")
    if not compact[0].isalpha():
        compact = DEFAULT_START + compact
    if not compact[-1].isalpha():
        compact += DEFAULT_STOP

    for i, char in enumerate(compact):
        if char not in SYMBOLS:
            raise IllegalCharacterError(compact, char, i)
        if char in START_STOP_CHARACTERS and 0 < i < len(compact) - 1:
            raise InvalidDataError(
                compact, f"{char} is only allowed as the first or last character"
            )
    return compact


class CodabarBarcode(LinearBarcode):
    """Codabar barcode.

    Codabar has no check character and no start/stop amble beyond the
    quiet zone: the start and stop characters are part of the data.

    Example:
        barcode = CodabarBarcode("12345")
        barcode.data  # "A12345C"
    """

    def __init__(
        self,
        data: str | None,
        *,
        quiet_zone: bool = True,
        label: str | None = None,
    ) -> None:
        super().__init__(data, quiet_zone=quiet_zone, label=label)
        self._raw = self._data
        self._data = normalize(self._data)

    def default_label(self) -> str:
        return self._raw

    def get_pre_amble(self) -> Module | None:
        return QUIET_SECTION if self._quiet_zone else None

    def get_post_amble(self) -> Module | None:
        return QUIET_SECTION if self._quiet_zone else None

    def encode_data(self) -> list[Module]:
        modules: list[Module] = []
        for i, char in enumerate(self._data):
            if i > 0:
                modules.append(GAP)
            modules.append(SYMBOLS[char])
        return modules

    def calculate_checksum(self) -> NoChecksum:
        return NO_CHECKSUM

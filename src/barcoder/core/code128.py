"""Code 128 symbology.

Code 128 encodes the full ASCII range through three character sets:

- A: upper case, digits, punctuation and control characters
- B: upper case, lower case, digits and punctuation
- C: pairs of digits 00-99

Every symbol has a value 0-102 shared by all sets. Special characters in
the data select functions instead of text: FNC1-FNC4, SHIFT (next character
from the other of A/B) and the code change characters.

Key components:
- CharacterSet: Set selection, including AUTO optimisation
- encode: Turns data into symbol values and modules
- Code128Barcode: The linear barcode built on top
"""

from dataclasses import dataclass
from enum import Enum

from barcoder.core.barcode import LinearBarcode, printable_label
from barcoder.core.checksum import code128_checksum
from barcoder.domain.module import CompositeModule, Module
from barcoder.exceptions import IllegalCharacterError, InvalidDataError

FNC1 = "\xca"
FNC2 = "\xc5"
FNC3 = "\xc4"
SHIFT = "\xc6"
CODE_C = "\xc7"
# In set B, CODE_B is FNC4; in set A, CODE_A is FNC4
CODE_B = "\xc8"
CODE_A = "\xc9"

SPECIAL_CHARACTERS = FNC1 + FNC2 + FNC3 + SHIFT + CODE_C + CODE_B + CODE_A

_PATTERNS = (
    "212222", "222122", "222221", "121223", "121322", "131222", "122213", "122312",
    "132212", "221213", "221312", "231212", "112232", "122132", "122231", "113222",
    "123122", "123221", "223211", "221132", "221231", "213212", "223112", "312131",
    "311222", "321122", "321221", "312212", "322112", "322211", "212123", "212321",
    "232121", "111323", "131123", "131321", "112313", "132113", "132311", "211313",
    "231113", "231311", "112133", "112331", "132131", "113123", "113321", "133121",
    "313121", "211331", "231131", "213113", "213311", "213131", "311123", "311321",
    "331121", "312113", "312311", "332111", "314111", "221411", "431111", "111224",
    "111422", "121124", "121421", "141122", "141221", "112214", "112412", "122114",
    "122411", "142112", "142211", "241211", "221114", "413111", "241112", "134111",
    "111242", "121142", "121241", "114212", "124112", "124211", "411212", "421112",
    "421211", "212141", "214121", "412121", "111143", "111341", "131141", "114113",
    "114311", "411113", "411311", "113141", "114131", "311141", "411131",
)  # fmt: skip

# Symbol modules indexed by value 0-102
SYMBOLS: tuple[Module, ...] = tuple(
    Module(tuple(int(width) for width in pattern)) for pattern in _PATTERNS
)

START_A = Module((2, 1, 1, 4, 1, 2))
START_B = Module((2, 1, 1, 2, 1, 4))
START_C = Module((2, 1, 1, 2, 3, 2))
STOP = Module((2, 3, 3, 1, 1, 1, 2))

QUIET_ZONE_WIDTH = 10
QUIET_SECTION = Module.blank_of(QUIET_ZONE_WIDTH)

AUTO_C_MIN_END_RUN = 4
AUTO_C_MIN_MIDDLE_RUN = 6


class CharacterSet(Enum):
    """Code 128 character set selection."""

    A = "A"
    B = "B"
    C = "C"
    AUTO = "AUTO"


START_VALUES = {CharacterSet.A: 103, CharacterSet.B: 104, CharacterSet.C: 105}
START_MODULES = {CharacterSet.A: START_A, CharacterSet.B: START_B, CharacterSet.C: START_C}

_SPECIAL_VALUES: dict[CharacterSet, dict[str, int]] = {
    CharacterSet.A: {
        FNC3: 96, FNC2: 97, SHIFT: 98, CODE_C: 99, CODE_B: 100, CODE_A: 101, FNC1: 102,
    },
    CharacterSet.B: {
        FNC3: 96, FNC2: 97, SHIFT: 98, CODE_C: 99, CODE_B: 100, CODE_A: 101, FNC1: 102,
    },
    CharacterSet.C: {CODE_B: 100, CODE_A: 101, FNC1: 102},
}  # fmt: skip

_CODE_CHANGES = {CharacterSet.A: CODE_A, CharacterSet.B: CODE_B, CharacterSet.C: CODE_C}


@dataclass(frozen=True, slots=True)
class EncodedSymbol:
    """One encoded Code 128 symbol.

    Attributes:
        value: Symbol value 0-102
        module: Pattern for the value, labelled with the text it encodes
    """

    value: int
    module: Module


@dataclass(frozen=True, slots=True)
class Code128Encoding:
    """Result of encoding data as Code 128.

    Attributes:
        start_set: Character set selected by the start character
        final_set: Character set in force after the last symbol
        symbols: Encoded data symbols (no start, check or stop)
    """

    start_set: CharacterSet
    final_set: CharacterSet
    symbols: tuple[EncodedSymbol, ...]

    @property
    def values(self) -> tuple[int, ...]:
        return tuple(symbol.value for symbol in self.symbols)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def value_of(char: str, charset: CharacterSet) -> int | None:
    """Look up the value of a single character in set A or B.

    Args:
        char: Character to look up
        charset: CharacterSet.A or CharacterSet.B

    Returns:
        Symbol value, or None if the set cannot encode the character
    """
    special = _SPECIAL_VALUES[charset].get(char)
    if special is not None:
        return special
    code = ord(char)
    if charset is CharacterSet.A:
        if 32 <= code < 96:
            return code - 32
        if 0 <= code < 32:
            return code + 64
    elif charset is CharacterSet.B:
        if 32 <= code < 128:
            return code - 32
    return None


def symbol_text(value: int, charset: CharacterSet) -> str:
    """Text a symbol value stands for in a character set."""
    for char, special in _SPECIAL_VALUES[charset].items():
        if special == value:
            return char
    if charset is CharacterSet.C:
        return f"{value:02d}"
    if charset is CharacterSet.A and value >= 64:
        return chr(value - 64)
    return chr(value + 32)


def pad_for_set_c(data: str) -> str:
    """Make a digit string encodable in set C.

    When the data holds no shift or code change characters and an odd number
    of digits, a "0" is inserted before the first digit.
    """
    if any(char in data for char in (SHIFT, CODE_A, CODE_B, CODE_C)):
        return data
    digits = sum(1 for char in data if _is_digit(char))
    if digits % 2 == 0:
        return data
    for i, char in enumerate(data):
        if _is_digit(char):
            return data[:i] + "0" + data[i:]
    return data


class _Encoder:
    """Accumulates symbols while walking the data."""

    def __init__(self, data: str, start_set: CharacterSet) -> None:
        self.data = data
        self.start_set = start_set
        self.current = start_set
        self.symbols: list[EncodedSymbol] = []

    def emit(self, value: int, text: str) -> None:
        self.symbols.append(EncodedSymbol(value, SYMBOLS[value].with_symbol(text)))

    def emit_char(self, char: str, position: int, charset: CharacterSet | None = None) -> None:
        value = value_of(char, charset or self.current)
        if value is None:
            raise IllegalCharacterError(self.data, char, position)
        self.emit(value, char)

    def change_to(self, charset: CharacterSet) -> None:
        code = _CODE_CHANGES[charset]
        self.emit(_SPECIAL_VALUES[self.current][code], code)
        self.current = charset

    def result(self) -> Code128Encoding:
        return Code128Encoding(self.start_set, self.current, tuple(self.symbols))


def _encode_fixed(data: str, start_set: CharacterSet) -> Code128Encoding:
    encoder = _Encoder(data, start_set)
    i = 0
    while i < len(data):
        char = data[i]
        if encoder.current is CharacterSet.C:
            if char in _SPECIAL_VALUES[CharacterSet.C]:
                encoder.emit(_SPECIAL_VALUES[CharacterSet.C][char], char)
                if char == CODE_A:
                    encoder.current = CharacterSet.A
                elif char == CODE_B:
                    encoder.current = CharacterSet.B
                i += 1
                continue
            if not _is_digit(char):
                raise IllegalCharacterError(data, char, i)
            pair = data[i : i + 2]
            if len(pair) < 2 or not _is_digit(pair[1]):
                raise InvalidDataError(data, f"unpaired digit at position {i} in code set C")
            encoder.emit(int(pair), pair)
            i += 2
            continue

        other = CharacterSet.B if encoder.current is CharacterSet.A else CharacterSet.A
        if char == SHIFT:
            encoder.emit_char(char, i)
            if i + 1 >= len(data):
                raise InvalidDataError(data, "SHIFT must be followed by a character")
            encoder.emit_char(data[i + 1], i + 1, other)
            i += 2
            continue
        if char == CODE_C:
            encoder.change_to(CharacterSet.C)
        elif char == _CODE_CHANGES[other]:
            encoder.change_to(other)
        else:
            encoder.emit_char(char, i)
        i += 1
    return encoder.result()


def _digit_run(data: str, start: int) -> int:
    end = start
    while end < len(data) and _is_digit(data[end]):
        end += 1
    return end - start


def _preferred_set(data: str, start: int) -> CharacterSet:
    """Pick A when a control character comes before any lower case character."""
    for char in data[start:]:
        code = ord(char)
        if code < 32:
            return CharacterSet.A
        if 96 <= code < 128:
            return CharacterSet.B
    return CharacterSet.B


def _auto_start_set(data: str) -> CharacterSet:
    start = 0
    while start < len(data) and data[start] == FNC1:
        start += 1
    run = _digit_run(data, start)
    if run >= AUTO_C_MIN_END_RUN or (run == 2 and start + run == len(data)):
        return CharacterSet.C
    return _preferred_set(data, start)


def _encode_auto(data: str) -> Code128Encoding:
    encoder = _Encoder(data, _auto_start_set(data))
    i = 0
    while i < len(data):
        char = data[i]
        # Set changes are chosen here, so explicit ones cannot appear in the data
        if char in (SHIFT, CODE_A, CODE_B, CODE_C):
            raise IllegalCharacterError(data, char, i)
        if encoder.current is CharacterSet.C:
            if char == FNC1:
                encoder.emit(_SPECIAL_VALUES[CharacterSet.C][FNC1], FNC1)
                i += 1
            elif _is_digit(char) and i + 1 < len(data) and _is_digit(data[i + 1]):
                encoder.emit(int(data[i : i + 2]), data[i : i + 2])
                i += 2
            else:
                encoder.change_to(_preferred_set(data, i))
            continue

        run = _digit_run(data, i)
        if run >= AUTO_C_MIN_MIDDLE_RUN or (run >= AUTO_C_MIN_END_RUN and i + run == len(data)):
            if run % 2 == 1:
                encoder.emit_char(char, i)
                i += 1
            encoder.change_to(CharacterSet.C)
            continue

        if value_of(char, encoder.current) is not None:
            encoder.emit_char(char, i)
            i += 1
            continue

        other = CharacterSet.B if encoder.current is CharacterSet.A else CharacterSet.A
        if value_of(char, other) is None:
            raise IllegalCharacterError(data, char, i)
        following = data[i + 1] if i + 1 < len(data) else None
        if following is not None and value_of(following, encoder.current) is None:
            encoder.change_to(other)
        else:
            encoder.emit(_SPECIAL_VALUES[encoder.current][SHIFT], SHIFT)
            encoder.emit_char(char, i, other)
            i += 1
    return encoder.result()


def encode(data: str, charset: CharacterSet = CharacterSet.AUTO) -> Code128Encoding:
    """Encode data as Code 128 symbols.

    Args:
        data: Data to encode, possibly holding special characters
        charset: Character set to start in, or AUTO to optimise

    Returns:
        Encoding with the start set, final set and data symbols

    Raises:
        IllegalCharacterError: If a character cannot be encoded
        InvalidDataError: If a SHIFT has nothing after it
    """
    if charset is CharacterSet.AUTO:
        return _encode_auto(data)
    if charset is CharacterSet.C:
        data = pad_for_set_c(data)
    return _encode_fixed(data, charset)


class Code128Barcode(LinearBarcode):
    """Code 128 barcode.

    Example:
        barcode = Code128Barcode("Hello 123456")
        barcode.draw(SVGOutput(Path("hello.svg")))
    """

    def __init__(
        self,
        data: str | None,
        character_set: CharacterSet = CharacterSet.AUTO,
        *,
        quiet_zone: bool = True,
        label: str | None = None,
    ) -> None:
        """Initialize a Code 128 barcode.

        Args:
            data: Data to encode
            character_set: Character set to encode in, AUTO picks the shortest
            quiet_zone: Draw 10 unit margins around the symbol
            label: Label override

        Raises:
            MissingArgumentError: If data is None
            InvalidDataError: If data is empty or cannot be encoded
        """
        super().__init__(data, quiet_zone=quiet_zone, label=label)
        self._character_set = character_set
        self._encoding = encode(self._data, character_set)

    @property
    def character_set(self) -> CharacterSet:
        """Character set requested at construction."""
        return self._character_set

    @property
    def encoding(self) -> Code128Encoding:
        return self._encoding

    def default_label(self) -> str:
        return printable_label(self._data, exclude=SPECIAL_CHARACTERS)

    def get_pre_amble(self) -> CompositeModule:
        start = START_MODULES[self._encoding.start_set]
        if self._quiet_zone:
            return CompositeModule((QUIET_SECTION, start))
        return CompositeModule((start,))

    def get_post_amble(self) -> CompositeModule:
        if self._quiet_zone:
            return CompositeModule((STOP, QUIET_SECTION))
        return CompositeModule((STOP,))

    def encode_data(self) -> list[Module]:
        return [symbol.module for symbol in self._encoding.symbols]

    def calculate_checksum(self) -> Module:
        value = code128_checksum(
            self._encoding.values, START_VALUES[self._encoding.start_set]
        )
        return SYMBOLS[value].with_symbol(symbol_text(value, self._encoding.final_set))

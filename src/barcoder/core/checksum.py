"""Check digit algorithms.

Pure functions computing check characters for the supported symbologies:
- mod10_check_digit: Generic weighted modulo 10
- upc_check_digit: UPC-A modulo 10 (weights 3,1 from the left)
- gtin_check_digit: GS1 GTIN modulo 10 (weights 3,1 from the right)
- random_weight_price_check_digit: UPC-A random weight price check digit
- ucc128_check_digit: UCC/EAN-128 label check digit
- code128_checksum: Code 128 modulo 103 symbol check character
"""

from collections.abc import Iterable

from barcoder.exceptions import IllegalCharacterError, InvalidDataError

UPC_WEIGHT_ODD = 3
UPC_WEIGHT_EVEN = 1
UPC_DATA_LENGTH = 11

CODE128_MODULUS = 103
UCC128_START_VALUE = 105

# Lookup rows for the price check digit of random weight UPC-A symbols
_RANDOM_WEIGHT_TABLES: tuple[tuple[int, ...], ...] = (
    (0, 2, 4, 6, 8, 9, 1, 3, 5, 7),
    (0, 3, 6, 9, 2, 5, 8, 1, 4, 7),
    (0, 5, 9, 4, 8, 3, 7, 2, 6, 1),
)


def _digits(data: str) -> list[int]:
    """Convert a digit string to integers, rejecting anything else."""
    if not data:
        raise InvalidDataError(data, "no digits to check")
    for i, char in enumerate(data):
        if char not in "0123456789":
            raise IllegalCharacterError(data, char, i)
    return [int(char) for char in data]


def mod10_check_digit(
    data: str,
    weight_even: int,
    weight_odd: int,
    begins_even: bool = True,
) -> int:
    """Calculate a weighted modulo 10 check digit.

    Positions are counted from the left starting at index 0. Index 0 gets
    weight_even when begins_even is True, weight_odd otherwise, and the
    weights alternate from there.

    Args:
        data: Digit string
        weight_even: Weight of the even positions
        weight_odd: Weight of the odd positions
        begins_even: Whether index 0 counts as an even position

    Returns:
        Check digit 0-9

    Raises:
        InvalidDataError: If data is empty
        IllegalCharacterError: If data holds a non-digit
    """
    compare = 0 if begins_even else 1
    total = 0
    for i, value in enumerate(_digits(data)):
        total += value * (weight_even if i % 2 == compare else weight_odd)
    return (10 - total % 10) % 10


def upc_check_digit(data: str) -> int:
    """Calculate the UPC-A modulo 10 check digit.

    The first, third, fifth... digits (1-based) are weighted 3 and the others 1.

    Raises:
        InvalidDataError: If data is not 11 digits long
        IllegalCharacterError: If data holds a non-digit

    Example:
        >>> upc_check_digit("07567816412")
        5
    """
    check = mod10_check_digit(data, UPC_WEIGHT_ODD, UPC_WEIGHT_EVEN)
    if len(data) != UPC_DATA_LENGTH:
        raise InvalidDataError(data, f"UPC-A check needs {UPC_DATA_LENGTH} digits, got {len(data)}")
    return check


def gtin_check_digit(data: str) -> int:
    """Calculate the GS1 check digit of a GTIN style element.

    Weights alternate 3,1 starting from the rightmost digit.
    """
    total = 0
    for i, value in enumerate(reversed(_digits(data))):
        total += value * (3 if i % 2 == 0 else 1)
    return (10 - total % 10) % 10


def random_weight_price_check_digit(data: str) -> int:
    """Calculate the price check digit of a random weight UPC-A number.

    Only the four price digits (positions 8-11, 1-based) contribute.

    Raises:
        InvalidDataError: If fewer than 11 digits are given
    """
    digits = _digits(data)
    if len(digits) < 11:
        raise InvalidDataError(data, "random weight numbers need 11 digits")
    first, second, third = _RANDOM_WEIGHT_TABLES
    total = first[digits[7]] + first[digits[8]] + second[digits[9]] + third[digits[10]]
    return (10 - total % 10) % 10


def ucc128_check_digit(data: str) -> int:
    """Calculate the check digit appended to UCC/EAN-128 data.

    The data is read as code set C pairs, each pair weighted by its 1-based
    position and added to the START C value. A trailing unpaired digit does
    not contribute.
    """
    _digits(data)
    total = UCC128_START_VALUE
    for position, i in enumerate(range(0, len(data) - 1, 2), start=1):
        total += int(data[i : i + 2]) * position
    return total % 10


def code128_checksum(values: Iterable[int], start_value: int) -> int:
    """Calculate the Code 128 modulo 103 check value.

    Args:
        values: Encoded symbol values in order (start character excluded)
        start_value: Value of the start character (103, 104 or 105)

    Returns:
        Check value 0-102
    """
    total = start_value
    for position, value in enumerate(values, start=1):
        total += value * position
    return total % CODE128_MODULUS

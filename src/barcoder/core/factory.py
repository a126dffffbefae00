"""Symbology selection.

Maps symbology names to barcode constructors so callers (the CLI and the
renderer) can build any supported barcode from plain strings.
"""

from enum import Enum

from barcoder.core.barcode import LinearBarcode
from barcoder.core.codabar import CodabarBarcode
from barcoder.core.code39 import Code39Barcode
from barcoder.core.code128 import CharacterSet, Code128Barcode
from barcoder.core.ean import BooklandBarcode, EAN13Barcode
from barcoder.core.twoofive import Interleaved2of5Barcode, Standard2of5Barcode
from barcoder.core.ucc128 import UCCEAN128Barcode
from barcoder.core.upc import UPCABarcode
from barcoder.exceptions import UnknownSymbologyError


class Symbology(str, Enum):
    """Supported symbologies, by command line name."""

    UPCA = "upca"
    UPCA_RANDOM_WEIGHT = "upca-random-weight"
    CODE128 = "code128"
    CODE128A = "code128a"
    CODE128B = "code128b"
    CODE128C = "code128c"
    UCC128 = "ucc128"
    GS1_128 = "gs1-128"
    CODE39 = "code39"
    EAN13 = "ean13"
    BOOKLAND = "bookland"
    STD2OF5 = "std2of5"
    INT2OF5 = "int2of5"
    CODABAR = "codabar"


_CODE128_SETS = {
    Symbology.CODE128: CharacterSet.AUTO,
    Symbology.CODE128A: CharacterSet.A,
    Symbology.CODE128B: CharacterSet.B,
    Symbology.CODE128C: CharacterSet.C,
}


def parse_symbology(name: str | Symbology) -> Symbology:
    """Resolve a symbology name, ignoring case.

    Raises:
        UnknownSymbologyError: If the name is not supported
    """
    if isinstance(name, Symbology):
        return name
    try:
        return Symbology(name.strip().lower())
    except ValueError as e:
        raise UnknownSymbologyError(name) from e


def create_barcode(
    symbology: str | Symbology,
    data: str | None,
    *,
    application_identifier: str | None = None,
    include_checksum: bool | None = None,
    quiet_zone: bool = True,
    label: str | None = None,
) -> LinearBarcode:
    """Create a barcode of a given symbology.

    Args:
        symbology: Symbology or its name
        data: Data to encode
        application_identifier: AI for UCC/EAN-128, defaults to SSCC-18
        include_checksum: Whether optional check characters are added
            (UCC/EAN-128 check digit, Code 39 check character, 2 of 5
            check digit); None uses the symbology default, which is on
            for UCC/EAN-128 and Code 39 and off for 2 of 5
        quiet_zone: Draw margins around the symbol
        label: Label override

    Returns:
        Constructed barcode

    Raises:
        UnknownSymbologyError: If the symbology is not supported
        BarcodeError: If the data is invalid for the symbology
    """
    kind = parse_symbology(symbology)
    checksum_on = include_checksum is not False
    match kind:
        case Symbology.UPCA | Symbology.UPCA_RANDOM_WEIGHT:
            return UPCABarcode(
                data,
                random_weight=kind is Symbology.UPCA_RANDOM_WEIGHT,
                quiet_zone=quiet_zone,
                label=label,
            )
        case Symbology.CODE128 | Symbology.CODE128A | Symbology.CODE128B | Symbology.CODE128C:
            return Code128Barcode(
                data, _CODE128_SETS[kind], quiet_zone=quiet_zone, label=label
            )
        case Symbology.UCC128:
            ai = (
                UCCEAN128Barcode.SSCC_18_AI
                if application_identifier is None
                else application_identifier
            )
            return UCCEAN128Barcode(
                ai, data, checksum_on, quiet_zone=quiet_zone, label=label
            )
        case Symbology.GS1_128:
            return UCCEAN128Barcode.parse(data, quiet_zone=quiet_zone, label=label)
        case Symbology.CODE39:
            return Code39Barcode(
                data, requires_checksum=checksum_on, quiet_zone=quiet_zone, label=label
            )
        case Symbology.EAN13:
            return EAN13Barcode(data, quiet_zone=quiet_zone, label=label)
        case Symbology.BOOKLAND:
            return BooklandBarcode(data, quiet_zone=quiet_zone, label=label)
        case Symbology.STD2OF5:
            return Standard2of5Barcode(
                data, bool(include_checksum), quiet_zone=quiet_zone, label=label
            )
        case Symbology.INT2OF5:
            return Interleaved2of5Barcode(
                data, bool(include_checksum), quiet_zone=quiet_zone, label=label
            )
        case Symbology.CODABAR:
            return CodabarBarcode(data, quiet_zone=quiet_zone, label=label)
    raise UnknownSymbologyError(str(symbology))

"""Core encoding algorithms for barcoder.

This module contains the core algorithms for:

- Check digit calculation (modulo 10, modulo 103, GTIN, random weight)
- Symbology encoding (data to bar/space modules)
- Linear composition (modules to output calls)
- Render orchestration (barcodes to files)

All encoders are:
- Validated at construction (invalid data never yields a barcode)
- Read-only after construction
- Independent of the drawing backend

Key classes:
- LinearBarcode: Base of every symbology, owns the draw order
- UPCABarcode: UPC-A with optional random weight price check
- Code128Barcode: Code 128 in sets A, B, C or optimised AUTO
- UCCEAN128Barcode: UCC/EAN-128 (GS1-128) built on Code 128
- Code39Barcode: Code 39 with optional modulo 43 check
- EAN13Barcode, BooklandBarcode: EAN-13 and ISBN-10 as EAN-13
- Standard2of5Barcode, Interleaved2of5Barcode: 2 of 5 with optional check digit
- CodabarBarcode: Codabar with A-D start/stop characters
- BarcodeRenderer: Renders barcodes to files
"""

from barcoder.core.barcode import Barcode, LinearBarcode
from barcoder.core.checksum import (
    code128_checksum,
    gtin_check_digit,
    mod10_check_digit,
    random_weight_price_check_digit,
    ucc128_check_digit,
    upc_check_digit,
)
from barcoder.core.codabar import CodabarBarcode
from barcoder.core.code39 import Code39Barcode
from barcoder.core.code128 import CharacterSet, Code128Barcode
from barcoder.core.ean import BooklandBarcode, EAN13Barcode, isbn_to_ean
from barcoder.core.factory import Symbology, create_barcode, parse_symbology
from barcoder.core.renderer import BarcodeRenderer, create_output
from barcoder.core.twoofive import Interleaved2of5Barcode, Standard2of5Barcode
from barcoder.core.ucc128 import UCCEAN128Barcode
from barcoder.core.upc import UPCABarcode

__all__ = [
    # Base classes
    "Barcode",
    # Renderer
    "BarcodeRenderer",
    "BooklandBarcode",
    "CharacterSet",
    "CodabarBarcode",
    "Code39Barcode",
    # Symbologies
    "Code128Barcode",
    "EAN13Barcode",
    "Interleaved2of5Barcode",
    "LinearBarcode",
    "Standard2of5Barcode",
    "Symbology",
    "UCCEAN128Barcode",
    "UPCABarcode",
    # Checksum functions
    "code128_checksum",
    "create_barcode",
    "create_output",
    "gtin_check_digit",
    "isbn_to_ean",
    "mod10_check_digit",
    "parse_symbology",
    "random_weight_price_check_digit",
    "ucc128_check_digit",
    "upc_check_digit",
]

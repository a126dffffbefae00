"""Barcoder - Encode data as linear barcodes.

Barcoder turns text and numbers into the bar/space module sequences of linear
barcode symbologies (UPC-A, Code 128, UCC/EAN-128, Code 39) and draws them
through pluggable outputs such as SVG documents and Pillow images.

Example:
    $ barcoder upca 03600029145 -o upc.png

This will create upc.png holding the UPC-A symbol 036000291452.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

"""Encoders for Codabar, Code 128, Code 39, Code 93, EAN, Data Matrix and Aztec barcodes."""

__version__ = "0.1.0"

__all__ = [
    "aztec",
    "aztec_highlevel",
    "aztec_state",
    "aztec_token",
    "codabar",
    "code128",
    "code39",
    "code93",
    "core",
    "datamatrix",
    "datamatrix_layout",
    "datamatrix_size",
    "ean",
    "reedsolomon",
]
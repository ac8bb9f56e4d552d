# barcodegen

Pure-Python barcode encoders with no third-party dependencies.

Each encoder returns a barcode object. You can read its modules one by one
with `is_black(x, y)`. The object also has these members:

- `width` and `height`;
- `content`, the encoded content;
- `metadata`, a `core.Metadata` holding the kind name in `code_kind` and `1` or `2` in `dimensions`.

## Supported symbologies

| Module                  | Symbology                                        |
|-------------------------|--------------------------------------------------|
| `barcodegen.codabar`    | Codabar                                          |
| `barcodegen.code128`    | Code 128, with or without the check symbol       |
| `barcodegen.code39`     | Code 39, optional check character and full ASCII |
| `barcodegen.code93`     | Code 93, with full ASCII                         |
| `barcodegen.ean`        | EAN-8 and EAN-13                                 |
| `barcodegen.datamatrix` | Data Matrix (square sizes, ASCII encodation)     |
| `barcodegen.aztec`      | Aztec Code (compact and full-range)              |

Supporting modules:

- `barcodegen.core`: `BarcodeKind`, `Metadata`, `BitList` and the 1D barcode class `Barcode1D`.
- `barcodegen.reedsolomon`: `GaloisField` and `ReedSolomonEncoder`.
- `datamatrix_size`, `datamatrix_layout`: Data Matrix symbol sizes and module placement.
- `aztec_token`, `aztec_state`, `aztec_highlevel`: the Aztec high-level encoder.

## Installation

```
pip install .
```

## Usage

### One-dimensional barcodes

```python
from barcodegen import code128, code39, code93, codabar, ean

bar = code128.encode("HI345678H")
row = "".join("1" if bar.is_black(x, 0) else "0" for x in range(bar.width))
print(bar.checksum)                   # the modulo 103 check value

code128.encode_without_checksum("HI345678H")
codabar.encode("A40156B")             # must start and end with A, B, C or D
code39.encode("CODE39", include_checksum=True, full_ascii_mode=False)
code93.encode("TEST93")

ean13 = ean.encode("590123412345")    # the check digit is appended
print(ean13.content)                  # "5901234123457"
print(ean.check_digit("590123412345"))  # "7"
```

`str()` of a 1D barcode gives its bars as a string of `1` and `0`.

Code 128 offers the function characters `code128.FNC1` to `code128.FNC4`.
Code 93 offers `code93.FNC1` to `code93.FNC4`.

Code 93 always writes its two check characters. Its `include_checksum`
argument is accepted but has no effect.

### Two-dimensional barcodes

```python
from barcodegen import aztec, datamatrix

dm = datamatrix.encode('{"po":12}')
print(dm)                             # rows of '#' and '.'

code = aztec.encode(b"Hello, world", 33, 0)
print(code.to_text())                 # 'X ' for dark, two spaces for light
```

For `aztec.encode`, the second argument is the minimum error-correction
percentage, 33 by default. The third argument chooses the layers:

- `0` (the default) picks the smallest symbol that fits.
- A negative number requests a compact symbol with that many layers, up to 4.
- A positive number requests a full-range symbol with that many layers, up to 32.

A `str` passed to `aztec.encode` is encoded as UTF-8 first.

### Errors

Content that a symbology cannot represent raises `ValueError`. This covers:

- characters outside the symbology's character set;
- a wrong EAN check digit;
- an empty or over-long Code 128 content (1 to 80 characters are allowed);
- data too large for the symbol or for the requested Aztec layers.

## What the package does not do

- It does not produce image files. Converting the modules into pixels or any image format is left to the caller.
- It has no command-line tool.
- `BarcodeKind` names PDF417, QR Code and 2 of 5, but the package has no encoders for them.
- Data Matrix is limited to square symbols and ASCII encodation.

## Running the tests

```
pip install -e ".[test]"
pytest
```
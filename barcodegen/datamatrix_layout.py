"""Placement of Data Matrix codewords into the symbol."""

from __future__ import annotations

from typing import Iterator, Sequence

from .core import BarcodeKind, BitList, Metadata
from .datamatrix_size import CodeSize

# (row offset, column offset) of the eight bits of a regular codeword
_SIMPLE_OFFSETS = (
    (-2, -2), (-2, -1), (-1, -2), (-1, -1), (-1, 0), (0, -2), (0, -1), (0, 0),
)


class DataMatrixCode:
    """A rendered Data Matrix symbol."""

    def __init__(self, size: CodeSize, content: str = "") -> None:
        self.size = size
        self.content = content
        self._bits = BitList(size.rows * size.columns)

    @property
    def width(self) -> int:
        return self.size.columns

    @property
    def height(self) -> int:
        return self.size.rows

    @property
    def metadata(self) -> Metadata:
        return Metadata(BarcodeKind.DATAMATRIX.value, 2)

    def get(self, x: int, y: int) -> bool:
        return self._bits.get_bit(x * self.size.rows + y)

    def set(self, x: int, y: int, value: bool) -> None:
        self._bits.set_bit(x * self.size.rows + y, value)

    def is_black(self, x: int, y: int) -> bool:
        """Whether the module at column ``x`` and row ``y`` is dark."""
        return self.get(x, y)

    def __str__(self) -> str:
        return "\n".join(
            "".join("#" if self.get(x, y) else "." for x in range(self.width))
            for y in range(self.height)
        )


class CodeLayout:
    """The data area of a symbol, filled codeword by codeword."""

    def __init__(self, size: CodeSize) -> None:
        self.size = size
        count = size.matrix_columns * size.matrix_rows
        self._matrix = BitList(count)
        self._occupy = BitList(count)

    def _index(self, row: int, col: int) -> int:
        return col + row * self.size.matrix_columns

    def occupied(self, row: int, col: int) -> bool:
        return self._occupy.get_bit(self._index(row, col))

    def _set(self, row: int, col: int, value: int, bit_num: int) -> None:
        rows = self.size.matrix_rows
        cols = self.size.matrix_columns
        bit = (value >> (7 - bit_num)) & 1 == 1
        if row < 0:
            row += rows
            col += 4 - ((rows + 4) % 8)
        if col < 0:
            col += cols
            row += 4 - ((cols + 4) % 8)
        if self.occupied(row, col):
            raise RuntimeError(f"Field already occupied row: {row} col: {col}")
        index = self._index(row, col)
        self._occupy.set_bit(index, True)
        self._matrix.set_bit(index, bit)

    def _place(self, positions: Sequence[tuple[int, int]], value: int) -> None:
        for bit_num, (row, col) in enumerate(positions):
            self._set(row, col, value, bit_num)

    def _set_simple(self, row: int, col: int, value: int) -> None:
        self._place([(row + dr, col + dc) for dr, dc in _SIMPLE_OFFSETS], value)

    def _corner1(self, value: int) -> None:
        rows, cols = self.size.matrix_rows, self.size.matrix_columns
        self._place(
            [(rows - 1, 0), (rows - 1, 1), (rows - 1, 2), (0, cols - 2),
             (0, cols - 1), (1, cols - 1), (2, cols - 1), (3, cols - 1)],
            value,
        )

    def _corner2(self, value: int) -> None:
        rows, cols = self.size.matrix_rows, self.size.matrix_columns
        self._place(
            [(rows - 3, 0), (rows - 2, 0), (rows - 1, 0), (0, cols - 4),
             (0, cols - 3), (0, cols - 2), (0, cols - 1), (1, cols - 1)],
            value,
        )

    def _corner3(self, value: int) -> None:
        rows, cols = self.size.matrix_rows, self.size.matrix_columns
        self._place(
            [(rows - 3, 0), (rows - 2, 0), (rows - 1, 0), (0, cols - 2),
             (0, cols - 1), (1, cols - 1), (2, cols - 1), (3, cols - 1)],
            value,
        )

    def _corner4(self, value: int) -> None:
        rows, cols = self.size.matrix_rows, self.size.matrix_columns
        self._place(
            [(rows - 1, 0), (rows - 1, cols - 1), (0, cols - 3), (0, cols - 2),
             (0, cols - 1), (1, cols - 3), (1, cols - 2), (1, cols - 1)],
            value,
        )

    def set_values(self, data: Sequence[int]) -> None:
        """Place the codewords along the diagonal zig-zag path."""
        rows, cols = self.size.matrix_rows, self.size.matrix_columns
        codewords: Iterator[int] = iter(data)

        def take() -> int:
            try:
                return next(codewords)
            except StopIteration:
                raise ValueError("not enough codewords to fill the symbol") from None

        row, col = 4, 0
        while row < rows or col < cols:
            if row == rows and col == 0:
                self._corner1(take())
            if row == rows - 2 and col == 0 and cols % 4 != 0:
                self._corner2(take())
            if row == rows - 2 and col == 0 and cols % 8 == 4:
                self._corner3(take())
            if row == rows + 4 and col == 2 and cols % 8 == 0:
                self._corner4(take())

            while True:
                if row < rows and col >= 0 and not self.occupied(row, col):
                    self._set_simple(row, col, take())
                row -= 2
                col += 2
                if row < 0 or col >= cols:
                    break
            row += 1
            col += 3

            while True:
                if row >= 0 and col < cols and not self.occupied(row, col):
                    self._set_simple(row, col, take())
                row += 2
                col -= 2
                if row >= rows or col < 0:
                    break
            row += 3
            col += 1

        if not self.occupied(rows - 1, cols - 1):
            self._set(rows - 1, cols - 1, 255, 0)
            self._set(rows - 2, cols - 2, 255, 0)

    def merge(self) -> DataMatrixCode:
        """Build the full symbol: finder patterns around each data region."""
        size = self.size
        result = DataMatrixCode(size)
        region_rows = size.region_rows
        region_cols = size.region_columns

        # dotted horizontal lines
        for r in range(0, size.rows, region_rows + 2):
            for c in range(0, size.columns, 2):
                result.set(c, r, True)
        # solid horizontal lines
        for r in range(region_rows + 1, size.rows, region_rows + 2):
            for c in range(size.columns):
                result.set(c, r, True)
        # dotted vertical lines
        for c in range(region_cols + 1, size.columns, region_cols + 2):
            for r in range(1, size.rows, 2):
                result.set(c, r, True)
        # solid vertical lines
        for c in range(0, size.columns, region_cols + 2):
            for r in range(size.rows):
                result.set(c, r, True)

        for h_region in range(size.region_count_horizontal):
            for v_region in range(size.region_count_vertical):
                for x in range(region_cols):
                    col_matrix = region_cols * h_region + x
                    col_result = (2 + region_cols) * h_region + x + 1
                    for y in range(region_rows):
                        row_matrix = region_rows * v_region + y
                        row_result = (2 + region_rows) * v_region + y + 1
                        value = self._matrix.get_bit(self._index(row_matrix, col_matrix))
                        result.set(col_result, row_result, value)
        return result
"""The symbol sizes of square Data Matrix codes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodeSize:
    """Dimensions and error correction parameters of one symbol size."""

    rows: int
    columns: int
    region_count_horizontal: int
    region_count_vertical: int
    ecc_count: int
    block_count: int

    @property
    def region_rows(self) -> int:
        return (self.rows - self.region_count_vertical * 2) // self.region_count_vertical

    @property
    def region_columns(self) -> int:
        return (self.columns - self.region_count_horizontal * 2) // self.region_count_horizontal

    @property
    def matrix_rows(self) -> int:
        return self.region_rows * self.region_count_vertical

    @property
    def matrix_columns(self) -> int:
        return self.region_columns * self.region_count_horizontal

    @property
    def data_codewords(self) -> int:
        return (self.matrix_columns * self.matrix_rows) // 8 - self.ecc_count

    @property
    def ecc_per_block(self) -> int:
        return self.ecc_count // self.block_count

    def data_codewords_for_block(self, index: int) -> int:
        """The number of data codewords in the interleaved block ``index``."""
        if self.rows == 144 and self.columns == 144:
            return 156 if index < 8 else 155
        return self.data_codewords // self.block_count


CODE_SIZES: tuple[CodeSize, ...] = (
    CodeSize(10, 10, 1, 1, 5, 1),
    CodeSize(12, 12, 1, 1, 7, 1),
    CodeSize(14, 14, 1, 1, 10, 1),
    CodeSize(16, 16, 1, 1, 12, 1),
    CodeSize(18, 18, 1, 1, 14, 1),
    CodeSize(20, 20, 1, 1, 18, 1),
    CodeSize(22, 22, 1, 1, 20, 1),
    CodeSize(24, 24, 1, 1, 24, 1),
    CodeSize(26, 26, 1, 1, 28, 1),
    CodeSize(32, 32, 2, 2, 36, 1),
    CodeSize(36, 36, 2, 2, 42, 1),
    CodeSize(40, 40, 2, 2, 48, 1),
    CodeSize(44, 44, 2, 2, 56, 1),
    CodeSize(48, 48, 2, 2, 68, 1),
    CodeSize(52, 52, 2, 2, 84, 2),
    CodeSize(64, 64, 4, 4, 112, 2),
    CodeSize(72, 72, 4, 4, 144, 4),
    CodeSize(80, 80, 4, 4, 192, 4),
    CodeSize(88, 88, 4, 4, 224, 4),
    CodeSize(96, 96, 4, 4, 272, 4),
    CodeSize(104, 104, 4, 4, 336, 6),
    CodeSize(120, 120, 6, 6, 408, 6),
    CodeSize(132, 132, 6, 6, 496, 8),
    CodeSize(144, 144, 6, 6, 620, 10),
)


def smallest_size_for(count: int) -> CodeSize:
    """The smallest symbol size that holds ``count`` data codewords."""
    for size in CODE_SIZES:
        if size.data_codewords >= count:
            return size
    raise ValueError("to much data to encode")
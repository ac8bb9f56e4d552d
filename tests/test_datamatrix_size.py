import pytest

from barcodegen.datamatrix_size import CODE_SIZES, CodeSize, smallest_size_for


def test_smallest_size_for_three_codewords():
    size = smallest_size_for(3)
    assert (size.rows, size.columns) == (10, 10)
    assert size.data_codewords == 3


def test_smallest_size_for_36_codewords():
    size = smallest_size_for(36)
    assert (size.rows, size.columns) == (24, 24)


def test_largest_size_is_returned_at_its_limit():
    largest = CODE_SIZES[-1]
    assert smallest_size_for(largest.data_codewords) == largest


def test_too_much_data_raises():
    with pytest.raises(ValueError):
        smallest_size_for(CODE_SIZES[-1].data_codewords + 1)


def test_smallest_size_is_minimal():
    for count in range(1, CODE_SIZES[-1].data_codewords + 1, 37):
        size = smallest_size_for(count)
        assert size.data_codewords >= count
        position = CODE_SIZES.index(size)
        assert all(s.data_codewords < count for s in CODE_SIZES[:position])


def test_special_block_sizes_of_largest_symbol():
    largest = smallest_size_for(1500)
    assert (largest.rows, largest.columns) == (144, 144)
    assert [largest.data_codewords_for_block(i) for i in range(largest.block_count)] == (
        [156] * 8 + [155] * 2
    )


@pytest.mark.parametrize("size", CODE_SIZES)
def test_blocks_hold_all_data(size):
    chosen = smallest_size_for(size.data_codewords)
    assert chosen == size
    total = sum(chosen.data_codewords_for_block(i) for i in range(chosen.block_count))
    assert total == chosen.data_codewords
    assert chosen.ecc_per_block * chosen.block_count == chosen.ecc_count


@pytest.mark.parametrize("size", CODE_SIZES)
def test_matrix_excludes_finder_patterns(size):
    chosen = smallest_size_for(size.data_codewords)
    assert chosen.matrix_rows == chosen.rows - 2 * chosen.region_count_vertical
    assert chosen.matrix_columns == chosen.columns - 2 * chosen.region_count_horizontal


def test_sizes_grow_monotonically():
    chosen = [smallest_size_for(s.data_codewords) for s in CODE_SIZES]
    assert chosen == list(CODE_SIZES)
    capacities = [s.data_codewords for s in chosen]
    assert capacities == sorted(capacities)
    assert len(set(capacities)) == len(capacities)


def test_region_dimensions_of_single_region_symbol():
    size = CodeSize(10, 10, 1, 1, 5, 1)
    assert (size.region_rows, size.region_columns) == (8, 8)
import pytest

from barcodegen.core import Barcode1D, BarcodeKind, BitList, Metadata


def test_new_bitlist_is_all_false():
    bits = BitList(10)
    assert len(bits) == 10
    assert not any(bits)


def test_add_bit_appends_in_order():
    bits = BitList()
    bits.add_bit(True, False, True, True)
    assert list(bits) == [True, False, True, True]


def test_add_bits_most_significant_first():
    bits = BitList()
    bits.add_bits(5, 3)
    assert list(bits) == [True, False, True]


def test_add_bits_truncates_to_count():
    bits = BitList()
    bits.add_bits(0xFF, 4)
    assert list(bits) == [True] * 4


def test_add_bits_zero_count_adds_nothing():
    bits = BitList()
    bits.add_bits(7, 0)
    assert len(bits) == 0


def test_add_byte_to_bytes_round_trip():
    bits = BitList()
    for value in (0, 0xA5, 0xFF, 0x42):
        bits.add_byte(value)
    assert bits.to_bytes() == bytes([0, 0xA5, 0xFF, 0x42])


def test_to_bytes_pads_partial_byte():
    bits = BitList()
    bits.add_bit(True)
    assert bits.to_bytes() == b"\x80"


def test_set_and_get_bit():
    bits = BitList(8)
    bits.set_bit(3, True)
    assert bits.get_bit(3) is True
    assert [bits.get_bit(i) for i in range(8)].count(True) == 1
    bits.set_bit(3, False)
    assert bits.get_bit(3) is False


def test_get_bit_out_of_range():
    bits = BitList(2)
    with pytest.raises(IndexError):
        bits.get_bit(2)


def test_set_bit_out_of_range():
    bits = BitList(2)
    with pytest.raises(IndexError):
        bits.set_bit(-1, True)


@pytest.mark.parametrize(
    "kind, name",
    [(BarcodeKind.CODE128, "Code 128"), (BarcodeKind.EAN13, "EAN 13")],
)
def test_barcode_kind_names_reach_metadata(kind, name):
    code = Barcode1D(kind, "x", BitList(1))
    assert code.metadata == Metadata(name, 1)


def test_barcode1d_reports_metadata_and_bits():
    bits = BitList()
    bits.add_bit(True, False, True)
    code = Barcode1D(BarcodeKind.CODABAR, "A1B", bits, 7)
    assert code.metadata == Metadata("Codabar", 1)
    assert code.content == "A1B"
    assert code.checksum == 7
    assert code.width == 3
    assert code.height == 1
    assert [code.is_black(x, 0) for x in range(code.width)] == [True, False, True]
    assert str(code) == "101"


def test_barcode1d_checksum_defaults_to_none():
    code = Barcode1D(BarcodeKind.CODE93, "X", BitList(1))
    assert code.checksum is None
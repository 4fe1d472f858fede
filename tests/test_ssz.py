import pytest

from myth.ssz import BitList, BitVector, FixedVector, LimitedList


def test_empty_bitlist_is_only_the_delimiter():
    assert BitList(8).to_bytes() == b"\x01"


def test_bitlist_encoding_places_delimiter_after_bits():
    assert BitList(8, [True, False, True]).to_bytes() == b"\x0d"


@pytest.mark.parametrize("count", [0, 1, 7, 8, 9, 15, 16, 17])
def test_bitlist_round_trip(count):
    bits = BitList(32, [i % 3 == 0 for i in range(count)])
    encoded = bits.to_bytes()
    assert len(encoded) == count // 8 + 1
    decoded = BitList.from_bytes(32, encoded)
    assert decoded == bits
    assert len(decoded) == count


def test_bitlist_append_until_full():
    bits = BitList(2)
    bits.append(True)
    bits.append(False)
    assert list(bits) == [True, False]
    with pytest.raises(ValueError):
        bits.append(True)


def test_bitlist_from_bytes_rejects_empty_and_missing_delimiter():
    with pytest.raises(ValueError):
        BitList.from_bytes(8, b"")
    with pytest.raises(ValueError):
        BitList.from_bytes(8, b"\x01\x00")


def test_bitlist_from_bytes_rejects_over_limit():
    encoded = BitList(16, [True] * 10).to_bytes()
    with pytest.raises(ValueError):
        BitList.from_bytes(9, encoded)


def test_bitlist_setitem_and_slice():
    bits = BitList(4, [False, False, False])
    bits[1] = True
    assert bits[1] is True
    assert bits[0:2] == [False, True]


def test_bitvector_encoding():
    assert BitVector(4, [True, False, False, True]).to_bytes() == b"\x09"


def test_bitvector_default_all_clear():
    vector = BitVector(12)
    assert len(vector) == 12
    assert not any(vector)
    assert vector.to_bytes() == bytes(2)


@pytest.mark.parametrize("length", [1, 4, 8, 11, 16])
def test_bitvector_round_trip(length):
    vector = BitVector(length, [i % 2 == 1 for i in range(length)])
    assert BitVector.from_bytes(length, vector.to_bytes()) == vector


def test_bitvector_rejects_wrong_sizes():
    with pytest.raises(ValueError):
        BitVector(4, [True] * 5)
    with pytest.raises(ValueError):
        BitVector.from_bytes(4, b"\x00\x00")


def test_bitvector_rejects_bits_past_length():
    with pytest.raises(ValueError):
        BitVector.from_bytes(4, b"\x10")


def test_fixed_vector_length_enforced():
    with pytest.raises(ValueError):
        FixedVector(3, [1, 2])
    vector = FixedVector(3, [1, 2, 3])
    vector[0] = 9
    assert list(vector) == [9, 2, 3]
    assert len(vector) == 3


def test_fixed_vector_equality():
    assert FixedVector(2, ["a", "b"]) == FixedVector(2, ["a", "b"])
    assert not FixedVector(2, ["a", "b"]) == FixedVector(2, ["b", "a"])


def test_limited_list_append_and_limit():
    items = LimitedList(2, ["x"])
    items.append("y")
    assert list(items) == ["x", "y"]
    with pytest.raises(ValueError):
        items.append("z")
    assert len(items) == 2


def test_limited_list_rejects_too_many_initial_items():
    with pytest.raises(ValueError):
        LimitedList(1, [1, 2])


def test_negative_bounds_rejected():
    with pytest.raises(ValueError):
        BitList(-1)
    with pytest.raises(ValueError):
        LimitedList(-1)
import pytest

from gf2bits.array import BitArray


def test_new_is_all_zeros():
    v = BitArray(10, 8)
    assert len(v) == 10
    assert str(v) == "0000000000"


def test_default_equals_zeros():
    assert BitArray(10, 8) == BitArray.zeros(10, 8)
    assert BitArray(10, 8).words() == 2


def test_words_count():
    assert BitArray.zeros(6, 8).words() == 1
    assert BitArray.zeros(10, 8).words() == 2
    assert BitArray.zeros(0, 8).words() == 0


def test_word_zero():
    assert BitArray.zeros(10, 8).word(0) == 0


def test_set_word_masks_last_word():
    v = BitArray.zeros(12, 8)
    v.set_word(0, 0b1111_1111)
    v.set_word(1, 0b1111_1111)
    assert str(v) == "111111111111"
    assert v.count_ones() == 12


def test_set_word_out_of_range():
    v = BitArray.zeros(12, 8)
    with pytest.raises(IndexError):
        v.set_word(2, 1)
    with pytest.raises(IndexError):
        v.word(2)


def test_from_word():
    assert str(BitArray.from_word(10, 0b01010101, 8)) == "1010101010"


def test_ones_and_constant():
    assert str(BitArray.ones(10, 8)) == "1111111111"
    assert str(BitArray.constant(10, True)) == "1111111111"
    assert str(BitArray.constant(10, False)) == "0000000000"


def test_ones_keeps_unused_bits_clean():
    v = BitArray.ones(10, 8)
    assert v.word(1) == 0b11


def test_unit():
    assert str(BitArray.unit(10, 5)) == "0000010000"


def test_unit_out_of_range():
    with pytest.raises(IndexError):
        BitArray.unit(10, 10)


def test_alternating_and_from_fn():
    assert str(BitArray.alternating(10)) == "1010101010"
    assert str(BitArray.from_fn(10, lambda i: i % 2 == 0)) == "1010101010"
    assert BitArray.alternating(37, 8) == BitArray.from_fn(37, lambda i: i % 2 == 0, 8)


def test_random_seeded_reproducible():
    v1 = BitArray.random_seeded(1000, 42, 8)
    v2 = BitArray.random_seeded(1000, 42, 8)
    assert v1 == v2
    assert hash(v1) == hash(v2)


def test_random_length():
    assert len(BitArray.random(10)) == 10
    assert len(BitArray.random_biased(10, 0.578)) == 10


def test_random_biased_seeded_out_of_range_probabilities():
    assert BitArray.random_biased_seeded(10, 1.2, 42).count_ones() == 10
    assert BitArray.random_biased_seeded(10, -0.3, 42).count_ones() == 0


def test_random_biased_seeded_reproducible():
    u = BitArray.random_biased_seeded(100, 0.85, 42)
    v = BitArray.random_biased_seeded(100, 0.85, 42)
    assert u == v


def test_getitem_setitem_and_iter():
    v = BitArray.zeros(20, 8)
    v[3] = True
    v[-1] = True
    assert v[3] and v[19]
    assert list(v).count(True) == 2
    v[3] = False
    assert v.count_ones() == 1


def test_index_errors():
    v = BitArray.zeros(5)
    v[-5] = True
    assert v[0]
    assert str(v) == "10000"
    with pytest.raises(IndexError):
        v[5]
    with pytest.raises(IndexError):
        v[-6] = True
    assert str(v) == "10000"


def test_equality_depends_on_word_size():
    assert BitArray.ones(10, 8) != BitArray.ones(10, 16)
    assert BitArray.ones(10, 8) != BitArray.ones(11, 8)


def test_invalid_word_bits():
    with pytest.raises(ValueError):
        BitArray(10, 7)


def test_word_round_trip():
    v = BitArray.random_seeded(77, 7, 16)
    w = BitArray.zeros(77, 16)
    for i in range(v.words()):
        w.set_word(i, v.word(i))
    assert w == v
    assert w.count_ones() == sum(v)
import pytest

from gencoll.hashing import (
    compare_float,
    compare_int,
    compare_str,
    hash_float,
    hash_int,
    hash_str,
    hgen,
)


def test_hgen_empty_is_zero():
    assert hgen(b"") == 0


def test_hgen_str_and_bytes_agree():
    assert hgen("hello") == hgen(b"hello")


@pytest.mark.parametrize("data", [b"a", b"abc", b"x" * 1000, bytes(range(256))])
def test_hgen_in_32_bit_range(data):
    value = hgen(data)
    assert 0 <= value <= 0xFFFFFFFF
    assert hgen(data) == value


def test_hash_str_empty_is_seed():
    assert hash_str("") == 5381


def test_hash_str_bytes_and_str_agree():
    assert hash_str("Nguyen Van A") == hash_str(b"Nguyen Van A")


def test_hash_str_distinguishes_and_stays_in_range():
    values = {hash_str(s) for s in ["aa", "bb", "cc", "dd", "ee"]}
    assert len(values) == 5
    assert all(0 <= v <= 0xFFFFFFFF for v in values)


def test_hash_str_non_ascii_in_range():
    assert 0 <= hash_str("Đỏ") <= 0xFFFFFFFF


def test_hash_float_truncates():
    assert hash_float(3.7) == hash_int(3)
    assert hash_float(100000.0) == 100000


def test_hash_int_wraps():
    assert hash_int(2**32 + 5) == hash_int(5)
    assert hash_int(-1) == 0xFFFFFFFF


def test_compare_int():
    assert compare_int(3, 5) < 0
    assert compare_int(5, 3) > 0
    assert compare_int(4, 4) == 0


def test_compare_float():
    assert compare_float(1.0, 2.0) == -1
    assert compare_float(2.0, 1.0) == 1
    assert compare_float(1.5, 1.5) == 0


def test_compare_str():
    assert compare_str("AAA", "BBB") < 0
    assert compare_str("CCC", "BBB") > 0
    assert compare_str("abc", "abc") == 0
    assert compare_str("ab", "abc") < 0
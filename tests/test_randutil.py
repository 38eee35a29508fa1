import re

import pytest

from cmmcore import randutil
from cmmcore.mathutil import round_to_float


def test_rand_int_range():
    for _ in range(200):
        assert 3 <= randutil.rand_int(3, 9) < 9
        assert 3 <= randutil.rand_int(9, 3) < 9
    assert randutil.rand_int(4, 4) == 4


def test_rand_float_range_and_precision():
    for _ in range(200):
        v = randutil.rand_float(1.0, 2.0, 2)
        assert 1.0 <= v <= 2.0
        assert round_to_float(v, 2) == v
    assert randutil.rand_float(1.5, 1.5, 2) == 1.5


def test_rand_bytes():
    assert len(randutil.rand_bytes(16)) == 16
    assert randutil.rand_bytes(0) == b""
    assert randutil.rand_bytes(-3) == b""


@pytest.mark.parametrize(
    "func, charset",
    [
        (randutil.rand_string, randutil.LETTERS),
        (randutil.rand_upper, randutil.UPPER_LETTERS),
        (randutil.rand_lower, randutil.LOWER_LETTERS),
        (randutil.rand_numeral, randutil.NUMERAL),
        (randutil.rand_numeral_or_letter, randutil.NUMERAL + randutil.LETTERS),
        (randutil.rand_symbol_char, randutil.SYMBOL_CHARS),
    ],
)
def test_random_strings_use_charset(func, charset):
    s = func(40)
    assert len(s) == 40
    assert set(s) <= set(charset)
    assert func(0) == ""


def test_random_string_negative_length():
    with pytest.raises(ValueError):
        randutil.rand_string(-1)


def test_uuid_v4_format():
    pattern = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")
    values = {randutil.uuid_v4() for _ in range(50)}
    assert len(values) == 50
    assert all(pattern.match(v) for v in values)


def test_rand_unique_int_slice():
    values = randutil.rand_unique_int_slice(5, 10, 100)
    assert len(values) == len(set(values)) == 5
    assert all(10 <= v < 100 for v in values)


def test_rand_unique_int_slice_clamps_and_empty():
    assert sorted(randutil.rand_unique_int_slice(10, 0, 5)) == list(range(0, 5))
    assert randutil.rand_unique_int_slice(3, 9, 2) == []


def test_rand_floats_unique():
    values = randutil.rand_floats(10, 0.0, 1.0, 3)
    assert len(values) == len(set(values)) == 10
    assert all(0.0 <= v <= 1.0 for v in values)
import pytest

from bigcalc.arithmetic import add, compare, divide, multiply, subtract, subtract_signed


def to_digits(number):
    return [int(char) for char in str(number)]


def value(digits):
    return int("".join(str(d) for d in digits))


PAIRS = [
    (0, 0),
    (9, 1),
    (999, 1),
    (123456789, 987654321),
    (10**30 + 7, 5),
    (2**100, 3**50),
]


def test_compare_examples():
    assert compare(to_digits(250), to_digits(100)) == 1
    assert compare(to_digits(100), to_digits(250)) == -1
    assert compare(to_digits(100), to_digits(100)) == 0


def test_compare_length_decides():
    assert compare([0, 0, 7], [1, 0]) == 1


@pytest.mark.parametrize("a,b", PAIRS)
def test_compare_is_antisymmetric(a, b):
    assert compare(to_digits(a), to_digits(b)) == -compare(to_digits(b), to_digits(a))


@pytest.mark.parametrize("a,b", PAIRS)
def test_add_matches_integers(a, b):
    assert value(add(to_digits(a), to_digits(b))) == a + b


@pytest.mark.parametrize("a,b", PAIRS)
def test_add_is_commutative(a, b):
    assert add(to_digits(a), to_digits(b)) == add(to_digits(b), to_digits(a))


def test_add_keeps_leading_zeros():
    assert add([0, 0, 7], [1]) == [0, 0, 8]


@pytest.mark.parametrize("a,b", PAIRS)
def test_subtract_matches_integers(a, b):
    big, small = max(a, b), min(a, b)
    assert subtract(to_digits(big), to_digits(small)) == to_digits(big - small)


def test_subtract_strips_leading_zeros():
    assert subtract(to_digits(100), to_digits(99)) == [1]


def test_subtract_equal_gives_single_zero():
    assert subtract(to_digits(4321), to_digits(4321)) == [0]


def test_subtract_then_add_round_trip():
    a, b = 10**20, 12345
    diff = subtract(to_digits(a), to_digits(b))
    assert value(add(diff, to_digits(b))) == a


def test_subtract_signed_negative():
    assert subtract_signed(to_digits(100), to_digits(250)) == (to_digits(250 - 100), True)


def test_subtract_signed_positive():
    assert subtract_signed(to_digits(250), to_digits(100)) == (to_digits(250 - 100), False)


def test_subtract_signed_equal():
    assert subtract_signed(to_digits(77), to_digits(77)) == ([0], False)


@pytest.mark.parametrize("a,b", [p for p in PAIRS if p[0] and p[1]])
def test_multiply_matches_integers(a, b):
    assert value(multiply(to_digits(a), to_digits(b))) == a * b


@pytest.mark.parametrize("a,b", [(12, 34), (10, 10), (99999, 99999)])
def test_multiply_is_commutative(a, b):
    assert value(multiply(to_digits(a), to_digits(b))) == value(multiply(to_digits(b), to_digits(a)))


@pytest.mark.parametrize("a,b", [(1000, 7), (100, 10), (99, 99), (123456, 1234), (10**12, 10**10)])
def test_divide_matches_integers(a, b):
    assert divide(to_digits(a), to_digits(b)) == to_digits(a // b)


def test_divide_smaller_dividend():
    assert divide(to_digits(3), to_digits(12)) == [0]


@pytest.mark.parametrize("divisor", [[0], [0, 0], []])
def test_divide_by_zero(divisor):
    with pytest.raises(ZeroDivisionError):
        divide(to_digits(5), divisor)
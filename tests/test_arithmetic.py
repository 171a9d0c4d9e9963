import random

import pytest

from bigmul.arithmetic import (
    add_strings,
    karatsuba_multiply,
    naive_multiply,
    remove_leading_zeros,
    subtract_strings,
)


def _random_digits(rng, length):
    return "".join(rng.choice("0123456789") for _ in range(length))


@pytest.mark.parametrize(
    "text, expected",
    [("000123", "123"), ("123", "123"), ("000", "0"), ("", "0"), ("0", "0")],
)
def test_remove_leading_zeros(text, expected):
    assert remove_leading_zeros(text) == expected


@pytest.mark.parametrize("seed", range(10))
def test_add_strings_matches_int(seed):
    rng = random.Random(seed)
    a = _random_digits(rng, rng.randint(1, 60))
    b = _random_digits(rng, rng.randint(1, 60))
    assert add_strings(a, b) == str(int(a) + int(b))


def test_add_strings_carry_and_zeros():
    assert add_strings("999", "1") == str(999 + 1)
    assert add_strings("0", "0") == "0"
    assert add_strings("0007", "003") == str(7 + 3)


@pytest.mark.parametrize("seed", range(10))
def test_subtract_strings_matches_int(seed):
    rng = random.Random(seed)
    a = _random_digits(rng, rng.randint(1, 60))
    b = _random_digits(rng, rng.randint(1, 60))
    big, small = (a, b) if int(a) >= int(b) else (b, a)
    assert subtract_strings(big, small) == str(int(big) - int(small))


def test_subtract_equal_gives_zero():
    assert subtract_strings("12345", "12345") == "0"
    assert subtract_strings("0100", "100") == "0"


def test_subtract_negative_raises():
    with pytest.raises(ValueError):
        subtract_strings("5", "12")


def test_naive_zero_and_empty():
    assert naive_multiply("0", "123456") == "0"
    assert naive_multiply("", "12") == "0"
    assert naive_multiply("000", "12") == "0"


@pytest.mark.parametrize("multiply", [naive_multiply, karatsuba_multiply])
def test_demonstration_numbers(multiply):
    num1 = "12345678901234567890"
    num2 = "98765432109876543210"
    assert multiply(num1, num2) == str(int(num1) * int(num2))


@pytest.mark.parametrize("seed", range(15))
def test_karatsuba_agrees_with_naive(seed):
    rng = random.Random(seed)
    x = _random_digits(rng, rng.randint(1, 120))
    y = _random_digits(rng, rng.randint(1, 120))
    result = karatsuba_multiply(x, y)
    assert result == naive_multiply(x, y)
    assert result == str(int(x) * int(y))


def test_karatsuba_uneven_lengths_and_leading_zeros():
    x = "0000123456789"
    y = "98"
    assert karatsuba_multiply(x, y) == str(int(x) * int(y))


def test_results_have_no_leading_zeros():
    result = karatsuba_multiply("00100000", "00000300")
    assert not result.startswith("0")
    assert result == str(100000 * 300)


@pytest.mark.parametrize(
    "func", [add_strings, subtract_strings, naive_multiply, karatsuba_multiply]
)
def test_non_digit_input_raises(func):
    with pytest.raises(ValueError):
        func("12a", "3")
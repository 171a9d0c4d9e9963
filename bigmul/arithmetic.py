"""Arithmetic on non-negative integers written as decimal digit strings."""

from itertools import zip_longest

_DIGITS = "0123456789"
_KARATSUBA_CUTOFF = 4


def _require_digits(*values: str) -> None:
    for value in values:
        if value.strip(_DIGITS):
            raise ValueError(f"not a decimal digit string: {value!r}")


def remove_leading_zeros(text: str) -> str:
    """Strip leading zeros, leaving "0" for an all-zero or empty string."""
    return text.lstrip("0") or "0"


def _is_less(a: str, b: str) -> bool:
    a, b = remove_leading_zeros(a), remove_leading_zeros(b)
    return (len(a), a) < (len(b), b)


def add_strings(a: str, b: str) -> str:
    """Return the sum of two digit strings."""
    _require_digits(a, b)
    digits = []
    carry = 0
    for da, db in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, digit = divmod(int(da) + int(db) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return remove_leading_zeros("".join(reversed(digits)))


def subtract_strings(a: str, b: str) -> str:
    """Return ``a - b`` for digit strings with ``a >= b``.

    Raises ValueError if ``b`` is greater than ``a``.
    """
    _require_digits(a, b)
    if a == b:
        return "0"
    if _is_less(a, b):
        raise ValueError("subtrahend is greater than minuend")
    digits = []
    borrow = 0
    for da, db in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        value = int(da) - borrow - int(db)
        borrow = 1 if value < 0 else 0
        digits.append(str(value + 10 * borrow))
    return remove_leading_zeros("".join(reversed(digits)))


def naive_multiply(num1: str, num2: str) -> str:
    """Multiply two digit strings with the schoolbook O(n²) method."""
    _require_digits(num1, num2)
    if not num1 or not num2:
        return "0"
    right = [int(d) for d in reversed(num2)]
    acc = [0] * (len(num1) + len(num2))
    for i, left_digit in enumerate(int(d) for d in reversed(num1)):
        if left_digit == 0:
            continue
        for j, right_digit in enumerate(right):
            acc[i + j] += left_digit * right_digit
    digits = []
    carry = 0
    for value in acc:
        carry, digit = divmod(value + carry, 10)
        digits.append(str(digit))
    return remove_leading_zeros("".join(reversed(digits)))


def karatsuba_multiply(x: str, y: str) -> str:
    """Multiply two digit strings with Karatsuba's O(n^log2(3)) method."""
    _require_digits(x, y)
    n = max(len(x), len(y))
    if n <= _KARATSUBA_CUTOFF:
        return naive_multiply(x, y)

    a, b = x.zfill(n), y.zfill(n)
    mid = n // 2
    remain = n - mid

    a1, a0 = remove_leading_zeros(a[:mid]), remove_leading_zeros(a[mid:])
    b1, b0 = remove_leading_zeros(b[:mid]), remove_leading_zeros(b[mid:])

    z2 = karatsuba_multiply(a1, b1)
    z0 = karatsuba_multiply(a0, b0)
    z1 = karatsuba_multiply(add_strings(a1, a0), add_strings(b1, b0))
    z1 = subtract_strings(subtract_strings(z1, z2), z0)

    result = add_strings(z2 + "0" * (2 * remain), z1 + "0" * remain)
    return add_strings(result, z0)
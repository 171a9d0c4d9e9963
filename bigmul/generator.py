"""Random test-number generation and on-disk test case sets."""

import random
from pathlib import Path

TEST_CASE_SIZES = {
    "small": (10, 20, 50, 100),
    "medium": (200, 500, 1000),
    "large": (2000, 5000, 10000),
}

_CATEGORY_SIZES = {0: 100, 1: 1000, 2: 10000}
_DEFAULT_CATEGORY_SIZE = 100


def generate_random_number(digits, rng=None):
    """Return a random number with exactly ``digits`` digits and no leading zero.

    A non-positive ``digits`` gives "0".
    """
    if digits <= 0:
        return "0"
    rng = random.Random() if rng is None else rng
    first = rng.choice("123456789")
    rest = "".join(rng.choice("0123456789") for _ in range(digits - 1))
    return first + rest


def generate_test_cases(root=None, rng=None):
    """Write pairs of random numbers under ``root/data/test_cases``.

    Returns the paths of the written files.
    """
    rng = random.Random() if rng is None else rng
    base = Path("." if root is None else root) / "data" / "test_cases"
    written = []
    for category, sizes in TEST_CASE_SIZES.items():
        directory = base / category
        directory.mkdir(parents=True, exist_ok=True)
        for size in sizes:
            path = directory / f"test_{size}.txt"
            num1 = generate_random_number(size, rng)
            num2 = generate_random_number(size, rng)
            path.write_text(f"{num1}\n{num2}", encoding="utf-8")
            written.append(path)
    return written


def get_test_pair(size_category, rng=None):
    """Return two random numbers for category 0 (small), 1 (medium) or 2 (large).

    Unknown categories fall back to the small size.
    """
    rng = random.Random() if rng is None else rng
    size = _CATEGORY_SIZES.get(size_category, _DEFAULT_CATEGORY_SIZE)
    return generate_random_number(size, rng), generate_random_number(size, rng)
import random

import pytest

from bigmul.generator import (
    TEST_CASE_SIZES,
    generate_random_number,
    generate_test_cases,
    get_test_pair,
)


@pytest.mark.parametrize("digits", [1, 2, 10, 100, 1000])
def test_random_number_length_and_form(digits):
    number = generate_random_number(digits, random.Random(digits))
    assert len(number) == digits
    assert number.isdigit()
    assert number[0] != "0"


@pytest.mark.parametrize("digits", [0, -1, -50])
def test_non_positive_digits_give_zero(digits):
    assert generate_random_number(digits) == "0"


def test_seeded_generation_is_reproducible():
    first = generate_random_number(50, random.Random(7))
    second = generate_random_number(50, random.Random(7))
    other = generate_random_number(50, random.Random(8))
    assert len(first) == 50
    assert first.isdigit()
    assert first == second
    assert first != other


def test_default_rng_works():
    assert len(generate_random_number(30)) == 30


@pytest.mark.parametrize(
    "category, size", [(0, 100), (1, 1000), (2, 10000), (5, 100), (-1, 100)]
)
def test_get_test_pair_sizes(category, size):
    num1, num2 = get_test_pair(category, random.Random(category))
    assert len(num1) == size
    assert len(num2) == size
    assert num1[0] != "0" and num2[0] != "0"


def test_generate_test_cases_writes_files(tmp_path):
    paths = generate_test_cases(tmp_path, random.Random(1))
    expected_count = sum(len(sizes) for sizes in TEST_CASE_SIZES.values())
    assert len(paths) == expected_count
    for category, sizes in TEST_CASE_SIZES.items():
        for size in sizes:
            path = tmp_path / "data" / "test_cases" / category / f"test_{size}.txt"
            assert path in paths
            lines = path.read_text(encoding="utf-8").split("\n")
            assert len(lines) == 2
            assert all(len(line) == size and line.isdigit() for line in lines)
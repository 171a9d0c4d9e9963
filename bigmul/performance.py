"""Timed comparison of the multiplication algorithms and the benchmark report."""

import csv
import random
import time
from pathlib import Path

from bigmul.arithmetic import karatsuba_multiply, naive_multiply, remove_leading_zeros
from bigmul.generator import generate_random_number
from bigmul.report import TestResult, generate_report

NAIVE_NAME = "Naive O(n²)"
KARATSUBA_NAME = "Karatsuba O(n^log₂3)"
REPORT_SIZES = (10, 50, 100, 200, 500, 1000, 2000)
CSV_HEADER = ("Algorithm", "InputSize", "ExecutionTime", "Correct")

_PREFIX_LENGTH = 20
_MISMATCH_PREVIEW = 50


def validate_result(result1, result2):
    """Return True if both digit strings denote the same number.

    A mismatch is reported on standard output.
    """
    r1 = remove_leading_zeros(result1)
    r2 = remove_leading_zeros(result2)
    if r1 == r2:
        return True
    print("ОШИБКА: Результаты алгоритмов не совпадают!")
    print(f"Наивный:    {r1[:_MISMATCH_PREVIEW]}...")
    print(f"Карацубы: {r2[:_MISMATCH_PREVIEW]}...")
    return False


def _timed(function, num1, num2):
    start = time.perf_counter_ns()
    product = function(num1, num2)
    elapsed_us = (time.perf_counter_ns() - start) // 1000
    return product, elapsed_us / 1000.0


def run_comparative_test(num1, num2):
    """Multiply with both algorithms and return one TestResult for each."""
    print("Запуск наивного алгоритма...")
    naive_result, naive_time = _timed(naive_multiply, num1, num2)

    print("Запуск алгоритма Карацубы...")
    karatsuba_result, karatsuba_time = _timed(karatsuba_multiply, num1, num2)

    is_correct = validate_result(naive_result, karatsuba_result)
    return [
        TestResult(
            algorithm=NAIVE_NAME,
            input_size=len(num1),
            execution_time=naive_time,
            result=naive_result[:_PREFIX_LENGTH] + "...",
            correct=True,
        ),
        TestResult(
            algorithm=KARATSUBA_NAME,
            input_size=len(num1),
            execution_time=karatsuba_time,
            result=karatsuba_result[:_PREFIX_LENGTH] + "...",
            correct=is_correct,
        ),
    ]


def generate_performance_report(max_digits, root=None, rng=None):
    """Benchmark every report size up to ``max_digits`` digits.

    Writes ``data/results/performance_data.csv`` and ``docs/report.html``
    under ``root`` and returns all results.
    """
    rng = random.Random() if rng is None else rng
    base = Path("." if root is None else root)
    csv_path = base / "data" / "results" / "performance_data.csv"
    csv_path.parent.mkdir(parents=True, exist_ok=True)

    all_results = []
    with csv_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for size in REPORT_SIZES:
            if size > max_digits:
                break
            print(f"Тестирование на числах длиной {size} цифр...")
            num1 = generate_random_number(size, rng)
            num2 = generate_random_number(size, rng)
            for result in run_comparative_test(num1, num2):
                all_results.append(result)
                writer.writerow(
                    (
                        result.algorithm,
                        result.input_size,
                        f"{result.execution_time:g}",
                        "true" if result.correct else "false",
                    )
                )

    generate_report(all_results, base)
    print("HTML отчет сгенерирован: docs/report.html")
    return all_results
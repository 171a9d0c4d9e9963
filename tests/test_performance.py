import csv
import random

from bigmul.performance import (
    CSV_HEADER,
    KARATSUBA_NAME,
    NAIVE_NAME,
    generate_performance_report,
    run_comparative_test,
    validate_result,
)


def test_validate_result_ignores_leading_zeros():
    assert validate_result("000123", "123") is True


def test_validate_result_all_zero_strings_match():
    assert validate_result("0000", "0") is True


def test_validate_result_mismatch_reports(capsys):
    assert validate_result("123", "124") is False
    out = capsys.readouterr().out
    assert "ОШИБКА" in out
    assert "123..." in out


def test_run_comparative_test_results():
    num1 = "12345678901234567890"
    num2 = "98765432109876543210"
    results = run_comparative_test(num1, num2)
    assert [r.algorithm for r in results] == [NAIVE_NAME, KARATSUBA_NAME]
    expected = str(int(num1) * int(num2))[:20] + "..."
    for result in results:
        assert result.input_size == len(num1)
        assert result.result == expected
        assert result.correct is True
        assert result.execution_time >= 0


def test_run_comparative_test_short_product():
    results = run_comparative_test("2", "3")
    assert [r.result for r in results] == ["6...", "6..."]


def test_run_comparative_test_announces_runs(capsys):
    run_comparative_test("12", "34")
    out = capsys.readouterr().out
    assert "Запуск наивного алгоритма..." in out
    assert "Запуск алгоритма Карацубы..." in out


def test_generate_performance_report_writes_files(tmp_path):
    results = generate_performance_report(100, tmp_path, random.Random(1))
    assert len(results) == 6
    assert [r.input_size for r in results] == [10, 10, 50, 50, 100, 100]
    assert all(r.correct for r in results)

    csv_path = tmp_path / "data" / "results" / "performance_data.csv"
    with csv_path.open(encoding="utf-8", newline="") as handle:
        rows = list(csv.reader(handle))
    assert tuple(rows[0]) == CSV_HEADER
    assert len(rows) == 7
    assert {row[3] for row in rows[1:]} == {"true"}
    assert [row[0] for row in rows[1:3]] == [NAIVE_NAME, KARATSUBA_NAME]

    html = (tmp_path / "docs" / "report.html").read_text(encoding="utf-8")
    assert NAIVE_NAME in html


def test_generate_performance_report_below_smallest_size(tmp_path):
    results = generate_performance_report(5, tmp_path, random.Random(2))
    assert results == []
    csv_path = tmp_path / "data" / "results" / "performance_data.csv"
    assert csv_path.read_text(encoding="utf-8") == ",".join(CSV_HEADER) + "\n"
    assert (tmp_path / "docs" / "report.html").exists()
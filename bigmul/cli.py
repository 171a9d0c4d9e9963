"""Interactive menu for comparing big-number multiplication algorithms."""

import argparse
import random
import sys
from pathlib import Path

from bigmul.arithmetic import karatsuba_multiply, naive_multiply, remove_leading_zeros
from bigmul.generator import generate_random_number, generate_test_cases
from bigmul.performance import generate_performance_report, run_comparative_test

DEMO_NUMBERS = ("12345678901234567890", "98765432109876543210")
SIZE_CHOICES = {1: 100, 2: 1000, 3: 10000}
REPORT_MAX_DIGITS = 5000

_RULE = "========================================="
_PREVIEW = 50

_MENU = f"""{_RULE}
     УМНОЖЕНИЕ БОЛЬШИХ ЧИСЕЛ
{_RULE}
1. 🧪 Сравнительное тестирование алгоритмов
2. 📊 Полный отчет производительности
3. 🔧 Генерация тестовых данных
4. 🎯 Демонстрация работы алгоритмов
5. 📈 Показать теоретический анализ
0. ❌ Выход
{_RULE}"""

_ANALYSIS = f"""
📊 ТЕОРЕТИЧЕСКИЙ АНАЛИЗ
{_RULE}
Сложность алгоритмов:

┌─────────────────┬───────────────────────┬────────────────────────────┐
│   Алгоритм      │   Сложность (Big O)   │      Описание              │
├─────────────────┼───────────────────────┼────────────────────────────┤
│ Наивный         │ O(n²)                 │ Квадратичная сложность     │
│ Карацубы        │ O(n^log₂3) ≈ O(n¹.⁵⁸) │ Субквадратичная сложность  │
└─────────────────┴───────────────────────┴────────────────────────────┘

Практические ожидания:
• Малые числа (< 100 цифр): Наивный алгоритм может быть быстрее
• Средние числа (100-1000 цифр): Карацубы начинает выигрывать
• Большие числа (> 1000 цифр): Карацубы значительно быстрее"""

_DIRECTORIES = (
    "data/test_cases/small",
    "data/test_cases/medium",
    "data/test_cases/large",
    "data/results",
    "docs",
)


def demonstrate_algorithms():
    """Return a demonstration of both algorithms on a fixed pair of numbers."""
    num1, num2 = DEMO_NUMBERS
    naive_result = naive_multiply(num1, num2)
    karatsuba_result = karatsuba_multiply(num1, num2)
    match = remove_leading_zeros(naive_result) == remove_leading_zeros(karatsuba_result)
    return "\n".join(
        [
            "",
            "🎯 ДЕМОНСТРАЦИЯ РАБОТЫ АЛГОРИТМОВ",
            _RULE,
            f"Число 1: {num1}",
            f"Число 2: {num2}",
            "",
            "Наивный алгоритм O(n²):",
            f"Результат: {naive_result[:_PREVIEW]}...",
            "",
            "Алгоритм Карацубы O(n^log₂3):",
            f"Результат: {karatsuba_result[:_PREVIEW]}...",
            "",
            f"✓ Результаты совпадают: {'ДА' if match else 'НЕТ'}",
        ]
    )


def theoretical_analysis():
    """Return the table of theoretical complexities."""
    return _ANALYSIS


def comparative_test(size, rng=None):
    """Benchmark both algorithms on random ``size``-digit numbers.

    Returns the results formatted as a table.
    """
    rng = random.Random() if rng is None else rng
    num1 = generate_random_number(size, rng)
    num2 = generate_random_number(size, rng)
    print(f"\nТестирование на числах длиной {len(num1)} цифр...")
    results = run_comparative_test(num1, num2)

    lines = [
        "",
        "┌─────────────────┬────────────┬──────────────┬──────────────────────┐",
        "│   Алгоритм      │   Время    │  Сложность   │     Корректность     │",
        "├─────────────────┼────────────┼──────────────┼──────────────────────┤",
    ]
    for result in results:
        complexity = "O(n²)" if "Naive" in result.algorithm else "O(n^log₂3)"
        status = "✓ Корректно" if result.correct else "✗ Ошибка"
        lines.append(
            f"│ {result.algorithm:<15} │ {result.execution_time:<10.2f} мс │ "
            f"{complexity:<12} │ {status:<20} │"
        )
    lines.append("└─────────────────┴────────────┴──────────────┴──────────────────────┘")
    return "\n".join(lines)


def _read(prompt):
    try:
        return input(prompt).strip()
    except EOFError:
        return None


def _parse_choice(text):
    try:
        return int(text)
    except ValueError:
        return None


def _run_comparative_menu(rng):
    print("\n🧪 СРАВНИТЕЛЬНОЕ ТЕСТИРОВАНИЕ")
    print(_RULE)
    print("Выберите размер тестовых данных:")
    print("1. Малые (100 цифр)")
    print("2. Средние (1000 цифр)")
    print("3. Большие (10000 цифр)")
    text = _read("Ваш выбор: ")
    size = SIZE_CHOICES.get(_parse_choice(text or ""))
    if size is None:
        print("Неверный выбор!")
        return
    print(comparative_test(size, rng))


def main(argv=None):
    """Run the interactive menu until the user chooses to exit."""
    parser = argparse.ArgumentParser(
        prog="bigmul", description="Compare big-number multiplication algorithms."
    )
    parser.add_argument(
        "--root", default=".", help="directory that holds data/ and docs/"
    )
    args = parser.parse_args(argv)
    root = Path(args.root)
    for directory in _DIRECTORIES:
        (root / directory).mkdir(parents=True, exist_ok=True)

    rng = random.Random()
    while True:
        print(_MENU)
        text = _read("Выберите опцию: ")
        if text is None:
            return 0
        choice = _parse_choice(text)

        if choice == 0:
            print("\nДо свидания!")
            return 0
        if choice == 1:
            _run_comparative_menu(rng)
        elif choice == 2:
            print("\nГенерация полного отчета производительности...")
            generate_performance_report(REPORT_MAX_DIGITS, root, rng)
            print("✓ Отчет сгенерирован в docs/report.html")
        elif choice == 3:
            print("\nГенерация тестовых данных...")
            generate_test_cases(root, rng)
            print("Тестовые данные сгенерированы в папке data/test_cases/")
        elif choice == 4:
            print(demonstrate_algorithms())
        elif choice == 5:
            print(theoretical_analysis())
        else:
            print("\nНеверный выбор. Попробуйте снова.")

        if _read("\nНажмите Enter для продолжения...") is None:
            return 0


if __name__ == "__main__":
    sys.exit(main())
"""HTML report of multiplication benchmark results."""

import json
from collections import defaultdict
from dataclasses import dataclass
from html import escape
from pathlib import Path

CHART_SCRIPT_SRC = "chart.js"

_NAIVE_COLOR = "#ff6384"
_OTHER_COLOR = "#36a2eb"


@dataclass
class TestResult:
    """One timed run of a multiplication algorithm."""

    __test__ = False

    algorithm: str
    input_size: int
    execution_time: float
    result: str
    correct: bool


_STYLES = {
    "body": {
        "font-family": "Arial, sans-serif",
        "margin": "0",
        "padding": "20px",
        "background-color": "#f5f5f5",
    },
    ".container": {
        "max-width": "1200px",
        "margin": "0 auto",
        "background": "white",
        "padding": "20px",
        "border-radius": "10px",
        "box-shadow": "0 2px 10px rgba(0,0,0,0.1)",
    },
    "h1, h2, h3": {
        "color": "#333",
        "border-bottom": "2px solid #eee",
        "padding-bottom": "10px",
    },
    ".summary": {
        "background": "#e8f4fd",
        "padding": "15px",
        "border-radius": "5px",
        "margin": "20px 0",
    },
    "table": {"width": "100%", "border-collapse": "collapse", "margin": "20px 0"},
    "th, td": {"border": "1px solid #ddd", "padding": "12px", "text-align": "left"},
    "th": {"background-color": "#4CAF50", "color": "white"},
    "tr:nth-child(even)": {"background-color": "#f2f2f2"},
    ".correct": {"color": "green", "font-weight": "bold"},
    ".incorrect": {"color": "red", "font-weight": "bold"},
    ".chart-container": {"margin": "30px 0", "height": "400px"},
    ".conclusion": {
        "background": "#fff3cd",
        "padding": "15px",
        "border-radius": "5px",
        "margin": "20px 0",
    },
}

_COLUMNS = (
    "Алгоритм",
    "Размер входных данных",
    "Время выполнения (мс)",
    "Результат (первые 20 цифр)",
    "Корректность",
)

_GOAL = (
    "Сравнение производительности алгоритмов умножения больших чисел: "
    "наивного O(n²) и алгоритма Карацубы O(n^log₂3)"
)

# Each conclusion block: heading, then (bold prefix or None, text) items.
_CONCLUSIONS = (
    (
        "Теоретическая сложность:",
        (
            ("Наивный алгоритм:", "O(n²) - квадратичная сложность"),
            ("Алгоритм Карацубы:", "O(n^log₂3) ≈ O(n¹.⁵⁸) - субквадратичная сложность"),
        ),
    ),
    (
        "Практические наблюдения:",
        (
            (None, "Для малых чисел (до 100 цифр) наивный алгоритм может быть "
                   "быстрее из-за накладных расходов рекурсии"),
            (None, "Для средних и больших чисел алгоритм Карацубы демонстрирует "
                   "значительное превосходство"),
            (None, "При размерах 5000+ цифр разница в производительности "
                   "становится особенно заметной"),
        ),
    ),
    (
        "Рекомендации по выбору алгоритма:",
        (
            ("Малые числа (< 100 цифр):", "Наивный алгоритм"),
            ("Средние числа (100-1000 цифр):", "Алгоритм Карацубы"),
            ("Большие числа (> 1000 цифр):",
             "Алгоритм Карацубы или более продвинутые методы"),
        ),
    ),
)

_METHODOLOGY_INTRO = (
    "Тестирование проводилось на числах различной длины, "
    "генерируемых случайным образом. Для каждого теста:"
)
_METHODOLOGY = (
    "Измерялось время выполнения в миллисекундах",
    "Проверялась корректность результатов",
    "Сравнивалась производительность алгоритмов",
)

_CHART_CONFIG = {
    "type": "line",
    "data": {"datasets": []},
    "options": {
        "responsive": True,
        "maintainAspectRatio": False,
        "scales": {
            "x": {
                "type": "linear",
                "position": "bottom",
                "title": {
                    "display": True,
                    "text": "Размер входных данных (количество цифр)",
                },
            },
            "y": {
                "type": "logarithmic",
                "title": {"display": True, "text": "Время выполнения (мс)"},
            },
        },
        "plugins": {
            "title": {
                "display": True,
                "text": "Сравнение производительности алгоритмов умножения",
            },
            "tooltip": {},
        },
    },
}


def _number(value) -> str:
    return f"{value:g}"


def _stylesheet() -> str:
    rules = (
        f"        {selector} {{ "
        + " ".join(f"{name}: {value};" for name, value in props.items())
        + " }"
        for selector, props in _STYLES.items()
    )
    return "\n".join(rules)


def _list(items) -> str:
    return "<ul>\n" + "".join(f"<li>{item}</li>\n" for item in items) + "</ul>\n"


def _conclusion() -> str:
    parts = ['<div class="conclusion">\n', "<h2>💡 Выводы и анализ</h2>\n"]
    for heading, items in _CONCLUSIONS:
        parts.append(f"<h3>{escape(heading)}</h3>\n")
        parts.append(
            _list(
                escape(text) if prefix is None
                else f"<strong>{escape(prefix)}</strong> {escape(text)}"
                for prefix, text in items
            )
        )
    parts.append("</div>\n")
    return "".join(parts)


def _head() -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="ru">\n'
        "<head>\n"
        '<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        "<title>Отчет: Умножение больших чисел</title>\n"
        f'<script src="{CHART_SCRIPT_SRC}"></script>\n'
        f"<style>\n{_stylesheet()}\n</style>\n"
        "</head>\n"
    )


def _body_start() -> str:
    header_cells = "".join(f"<th>{escape(name)}</th>\n" for name in _COLUMNS)
    return (
        "<body>\n"
        '<div class="container">\n'
        "<h1>📊 Отчет по умножению больших чисел</h1>\n"
        '<div class="summary">\n'
        "<h2>🎯 Цель исследования</h2>\n"
        f"<p>{escape(_GOAL)}</p>\n"
        "</div>\n"
        "<h2>📈 Результаты тестирования</h2>\n"
        "<table>\n"
        f"<thead>\n<tr>\n{header_cells}</tr>\n</thead>\n"
        "<tbody>\n"
    )


def _body_middle() -> str:
    return (
        "</tbody>\n"
        "</table>\n"
        '<div class="chart-container">\n'
        '<canvas id="performanceChart"></canvas>\n'
        "</div>\n"
        + _conclusion()
        + "<h2>🔧 Методология тестирования</h2>\n"
        + f"<p>{escape(_METHODOLOGY_INTRO)}</p>\n"
        + _list(escape(item) for item in _METHODOLOGY)
        + "</div>\n"
        + "<script>\n"
        + "const results = "
    )


def _script_end() -> str:
    config = json.dumps(_CHART_CONFIG, ensure_ascii=False, indent=2)
    return (
        f"const chartConfig = {config};\n"
        "chartConfig.data.datasets = results;\n"
        "chartConfig.options.plugins.tooltip.callbacks = {\n"
        "  label: (item) => item.dataset.label + ': ' + item.parsed.y.toFixed(2) + ' мс'\n"
        "};\n"
        "new Chart(document.getElementById('performanceChart').getContext('2d'), chartConfig);\n"
        "</script>\n"
        "</body>\n"
        "</html>"
    )


def _table_row(result: TestResult) -> str:
    status = "correct" if result.correct else "incorrect"
    label = "✓ Корректно" if result.correct else "✗ Ошибка"
    return (
        "<tr>\n"
        f"<td>{escape(result.algorithm)}</td>\n"
        f"<td>{result.input_size} цифр</td>\n"
        f"<td>{_number(result.execution_time)} мс</td>\n"
        f"<td>{escape(result.result)}</td>\n"
        f"<td class='{status}'>{label}</td>\n"
        "</tr>\n"
    )


def _dataset(algorithm, points) -> str:
    color = _NAIVE_COLOR if "Naive" in algorithm else _OTHER_COLOR
    data = ",".join(f"{{x: {size}, y: {_number(time)}}}" for size, time in points)
    return (
        "{\n"
        f"  label: {json.dumps(algorithm, ensure_ascii=False)},\n"
        f"  data: [{data}],\n"
        f"  borderColor: '{color}',\n"
        f"  backgroundColor: '{color}20',\n"
        "  fill: false\n"
        "}"
    )


def render_report(results) -> str:
    """Return the HTML report for ``results`` as a string."""
    results = list(results)
    by_algorithm = defaultdict(list)
    for result in results:
        by_algorithm[result.algorithm].append((result.input_size, result.execution_time))
    datasets = ",".join(
        _dataset(algorithm, by_algorithm[algorithm]) for algorithm in sorted(by_algorithm)
    )
    return "".join(
        [
            _head(),
            _body_start(),
            *(_table_row(result) for result in results),
            _body_middle(),
            f"[{datasets}];\n",
            _script_end(),
        ]
    )


def generate_report(results, root=None) -> Path:
    """Write the report to ``root/docs/report.html`` and return its path."""
    path = Path("." if root is None else root) / "docs" / "report.html"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_report(results), encoding="utf-8")
    return path
# bigmul

Multiply large non-negative integers given as strings of decimal digits, and
compare two ways of doing it:

- the schoolbook method, O(n²) (`naive_multiply`);
- Karatsuba's method, O(n^log₂3) ≈ O(n^1.58) (`karatsuba_multiply`). Inputs of
  four digits or fewer go to the schoolbook method.

The package can also generate random test numbers and time both algorithms
against each other. It writes the timings to a CSV file and to an HTML report
with a chart. The menu and the report are in Russian.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
bigmul [--root DIR]
```

On start, this creates `data/test_cases/{small,medium,large}`, `data/results`
and `docs` under `DIR`. The default for `DIR` is the current directory. It then
shows an interactive menu:

1. Comparative test. You choose random numbers of 100, 1000 or 10000 digits.
   Both algorithms run on them and the timings are printed as a table.
2. Full performance report. This benchmarks sizes 10, 50, 100, 200, 500, 1000
   and 2000 digits. It writes `data/results/performance_data.csv` and
   `docs/report.html`.
3. Test data. This writes pairs of random numbers, one per line, to
   `data/test_cases/<category>/test_<size>.txt`:
   - small: 10, 20, 50 and 100 digits;
   - medium: 200, 500 and 1000 digits;
   - large: 2000, 5000 and 10000 digits.
4. A demonstration of both algorithms on a fixed pair of 20-digit numbers.
5. The theoretical complexity table.
0. Exit.

The menu also exits at end of input.

## Library use

### Arithmetic (`bigmul.arithmetic`)

```python
from bigmul.arithmetic import (
    add_strings, subtract_strings, naive_multiply, karatsuba_multiply, remove_leading_zeros,
)

naive_multiply("12345678901234567890", "98765432109876543210")
karatsuba_multiply("12345678901234567890", "98765432109876543210")
add_strings("999", "1")          # "1000"
subtract_strings("1000", "1")    # "999"
remove_leading_zeros("000120")   # "120"; "" and "000" give "0"
```

All results have no leading zeros. If an argument contains anything other than
the digits 0–9, these functions raise `ValueError`. `subtract_strings(a, b)`
also raises `ValueError` when `b` is greater than `a`.

### Random inputs (`bigmul.generator`)

```python
import random
from bigmul.generator import generate_random_number, get_test_pair, generate_test_cases

rng = random.Random(42)
generate_random_number(500, rng)   # 500 digits, first digit non-zero
get_test_pair(1, rng)              # category 0: 100 digits, 1: 1000, 2: 10000
generate_test_cases("out", rng)    # writes the files above; returns their paths
```

A non-positive digit count gives `"0"`. An unknown category gives 100 digits.
`rng` may be omitted in every function, and a fresh `random.Random` is then used.

### Benchmarks (`bigmul.performance`)

```python
from bigmul.performance import run_comparative_test, validate_result, generate_performance_report

for result in run_comparative_test("123456789", "987654321"):
    print(result.algorithm, result.execution_time, result.correct)

validate_result("00042", "42")     # True; a mismatch is also printed

results = generate_performance_report(1000, "out", rng)
```

- `run_comparative_test` returns two `TestResult` records, one for each
  algorithm. Each record holds the time in milliseconds and the first 20 digits
  of the product followed by `...`. The Karatsuba record is marked correct only
  if its product equals the schoolbook one.
- `generate_performance_report` runs the sizes listed above and stops at the
  first size larger than `max_digits`. Under the given root it writes
  `data/results/performance_data.csv` and `docs/report.html`, and it returns
  all results.

### Reports (`bigmul.report`)

`TestResult` is a dataclass with the fields `algorithm`, `input_size`,
`execution_time`, `result` and `correct`.

- `render_report(results)` returns the HTML page as a string.
- `generate_report(results, root)` writes it to `root/docs/report.html` and
  returns the path.

## Limitations

The chart in the HTML report is drawn by Chart.js. The page loads it from a
file named `chart.js` in the same directory as the report. The package does not
ship that file, so copy it next to `report.html` to see the chart. Without it,
the results table is still shown.

The package contains no faster multiplication methods beyond Karatsuba's.
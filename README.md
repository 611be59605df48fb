# sstest

`sstest` holds the building blocks of a small unit-testing library. You can use each piece on its own or combine them into your own assertion helpers.

- **Comparison predicates** (`sstest.predicates`):
  - Binary comparisons: `equal`, `not_equal`, `less`, `greater`, `less_equal`, `greater_equal`, `equal_asymmetric`, `not_equal_asymmetric` and `approx_equal`.
  - Predicates over several arguments: `all_true`, `any_true`, `all_equal_first`, `all_equal_each`, `ascending`, `descending`, `strictly_ascending` and `strictly_descending`.
  - Helpers: `identity`, `negate`, `always_true` and `always_false`.
- **Expression decomposition** (`sstest.decompose`):
  - `CompareHelper` stores the result of a predicate together with its arguments.
  - The `make_*_compare` functions, such as `make_equal_compare`, `make_approx_equal_compare` and `make_float_equal_compare`, build a `CompareHelper`.
  - `Decomposer` and `Collector` record every operand of a chain of binary operators, together with the result.
- **Floating-point comparison** (`sstest.floats`):
  - `float_equal` compares two values within a few units of epsilon, scaled to the binary exponent of the values.
  - `rel_exp_eps` and `rel_eps` compute relative epsilons.
  - `float_to_string` formats a value in fixed notation.
- **String views** (`sstest.strview`):
  - `StringView` is an immutable view over characters.
  - `cmemcmp` and `compare` do three-way comparison.
- **Timing** (`sstest.timer`). `Stopwatch` provides `start`, `lap`, `split`, `time`, `stop` and `reset`. It reports float seconds.
- **Result tallies** (`sstest.summary`):
  - `TestTotals` and `TestSummary` count test functions, test suites and assertions.
  - `VERSION` and `VERSION_STRING` give the library version.
- **Errors** (`sstest.errors`). `SSTestError` and `InvalidArgumentError`.
- **Traits** (`sstest.traits`):
  - `is_iterable`, `is_container` and `is_comparable` check an object.
  - `Range` is a closed interval.
  - `IterableRange` yields the values from `lower` up to, but not including, `upper`.

## Install

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Predicates:

```python
from sstest.predicates import ascending, all_equal_first, approx_equal

ascending(0, 1, 2, 3)             # True
all_equal_first(3, 3, 4)          # False
approx_equal(0.5, 0.50001, 1e-4)  # True
```

Comparisons that keep their arguments:

```python
from sstest.decompose import make_equal_compare

check = make_equal_compare(0, -1)
bool(check)     # False
check.args      # (0, -1)
```

Recording the operands of an expression:

```python
from sstest.decompose import Decomposer

d = Decomposer()
collected = d << 0x0F ^ 0x07 | 0x10
collected.result   # 24
collected.args     # (15, 7, 16)
bool(collected)    # True
```

Python evaluates `<<` before the bitwise and comparison operators, so `d << value` takes the first operand. The chain then records each operator that follows, in order.

`and`, `or` and `not` cannot be overloaded. Python also evaluates a comparison chain such as `a == b == c` as `a == b and b == c`. Put such sub-expressions in parentheses, or use one comparison per expression.

Floating-point values:

```python
from sstest.floats import float_equal, float_to_string

float_equal(1.0 / 3.0, 0.3333333333333333)  # True
float_to_string(0.25, 4)                    # '0.2500'
```

Tallying results:

```python
from sstest.summary import TestSummary

summary = TestSummary()
summary.add_assertion_result(True)
summary.add_assertion_result(False)
totals = summary.totals()
totals.assertions_passed         # 1
totals.all_assertions_passed()   # False
```

Timing a run:

```python
from sstest.timer import Stopwatch

watch = Stopwatch()
watch.start()
...
elapsed = watch.stop()    # seconds, as a float
```

## What it does not do

This package provides the parts and not a complete test framework. It has no:

- way to define or register tests;
- test runner or fixtures;
- console or report output;
- command-line program.

`TestSummary` counts only what you give it through `add_assertion_result`. It does not collect results by itself.
"""Comparison predicates usable as first-class functions.

Binary predicates return whatever the underlying operator returns, so user
types with custom comparison operators keep their own result types.
Variadic predicates always return ``bool`` and short-circuit.
"""

from collections.abc import Callable, Iterable
from itertools import combinations, pairwise
from typing import Any

BinaryPredicate = Callable[[Any, Any], Any]


def _pick(result: Any, *ignored: Any) -> Any:
    """Return ``result``, discarding any further arguments."""
    del ignored
    return result


def always_true(*args: Any) -> bool:
    """Ignore the arguments and return True."""
    return _pick(True, *args)


def always_false(*args: Any) -> bool:
    """Ignore the arguments and return False."""
    return _pick(False, *args)


def identity(value: Any) -> Any:
    """Return ``value`` itself."""
    return _pick(value)


def negate(value: Any) -> bool:
    """Return the logical negation of ``value``."""
    return not value


def equal(lhs: Any, rhs: Any) -> Any:
    """Result of ``lhs == rhs``."""
    return lhs == rhs


def equal_asymmetric(lhs: Any, rhs: Any) -> bool:
    """True if both ``lhs == rhs`` and ``rhs == lhs`` hold."""
    return bool(lhs == rhs) and bool(rhs == lhs)


def not_equal(lhs: Any, rhs: Any) -> Any:
    """Result of ``lhs != rhs``."""
    return lhs != rhs


def not_equal_asymmetric(lhs: Any, rhs: Any) -> bool:
    """True if both ``lhs != rhs`` and ``rhs != lhs`` hold."""
    return bool(lhs != rhs) and bool(rhs != lhs)


def less(lhs: Any, rhs: Any) -> Any:
    """Result of ``lhs < rhs``."""
    return lhs < rhs


def greater(lhs: Any, rhs: Any) -> Any:
    """Result of ``lhs > rhs``."""
    return lhs > rhs


def less_equal(lhs: Any, rhs: Any) -> Any:
    """Result of ``lhs <= rhs``."""
    return lhs <= rhs


def greater_equal(lhs: Any, rhs: Any) -> Any:
    """Result of ``lhs >= rhs``."""
    return lhs >= rhs


def _require_arguments(name: str, args: tuple[Any, ...]) -> None:
    if not args:
        raise TypeError(f"{name}() requires at least one argument")


def all_true(*args: Any) -> bool:
    """True if every argument is truthy; stops at the first falsy one."""
    _require_arguments("all_true", args)
    return all(bool(arg) for arg in args)


def any_true(*args: Any) -> bool:
    """True if at least one argument is truthy; stops at the first truthy one."""
    _require_arguments("any_true", args)
    return any(bool(arg) for arg in args)


def approx_equal(lhs: Any, rhs: Any, delta: Any) -> bool:
    """True if ``lhs`` and ``rhs`` differ by no more than ``delta``."""
    return bool(abs(rhs - lhs) <= delta)


def _compare_first(predicate: BinaryPredicate, values: tuple[Any, ...]) -> bool:
    first, *rest = values
    return all(bool(predicate(first, value)) for value in rest)


def _compare_adjacent(predicate: BinaryPredicate, values: Iterable[Any]) -> bool:
    return all(bool(predicate(a, b)) for a, b in pairwise(values))


def _compare_each(predicate: BinaryPredicate, values: tuple[Any, ...]) -> bool:
    return all(bool(predicate(a, b)) for a, b in combinations(values, 2))


def all_equal_first(first: Any, second: Any, *args: Any) -> bool:
    """True if every later argument compares equal to ``first``."""
    return _compare_first(equal, (first, second, *args))


def all_equal_each(first: Any, second: Any, *args: Any) -> bool:
    """True if every argument compares equal to every argument after it."""
    return _compare_each(equal, (first, second, *args))


def ascending(first: Any, second: Any, *args: Any) -> bool:
    """True if ``first <= second <= ...``."""
    return _compare_adjacent(less_equal, (first, second, *args))


def descending(first: Any, second: Any, *args: Any) -> bool:
    """True if ``first >= second >= ...``."""
    return _compare_adjacent(greater_equal, (first, second, *args))


def strictly_ascending(first: Any, second: Any, *args: Any) -> bool:
    """True if ``first < second < ...``."""
    return _compare_adjacent(less, (first, second, *args))


def strictly_descending(first: Any, second: Any, *args: Any) -> bool:
    """True if ``first > second > ...``."""
    return _compare_adjacent(greater, (first, second, *args))
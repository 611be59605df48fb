"""Comparison results that remember the arguments they were computed from.

A ``CompareHelper`` holds the outcome of a predicate together with the
values that were given to it, so that an assertion can report both.
``Decomposer`` starts an operator chain: ``Decomposer() << a == b`` gives a
``Collector`` whose ``result`` is ``a == b`` and whose ``args`` are
``(a, b)``.

Python's ``and``/``or``/``not`` cannot be overloaded, and chained
comparisons such as ``a == b == c`` expand to ``a == b and b == c``; wrap
such sub-expressions in parentheses before passing them to the chain.
"""

import operator
from collections.abc import Callable
from typing import Any

from sstest.floats import float_equal
from sstest.predicates import (
    all_equal_each,
    all_equal_first,
    all_true,
    any_true,
    approx_equal,
    ascending,
    descending,
    equal,
    greater,
    greater_equal,
    identity,
    less,
    less_equal,
    negate,
    not_equal,
)


class CompareHelper:
    """The result of a predicate together with the arguments it was given."""

    __slots__ = ("result", "args")

    def __init__(self, result: Any, args: tuple[Any, ...] = ()) -> None:
        self.result = result
        self.args = tuple(args)

    def __bool__(self) -> bool:
        return bool(self.result)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(result={self.result!r}, args={self.args!r})"


def make_compare(predicate: Callable[..., Any], *args: Any) -> CompareHelper:
    """Apply ``predicate`` to ``args`` and keep both result and arguments."""
    return CompareHelper(predicate(*args), args)


def make_truth_compare(value: Any) -> CompareHelper:
    """Record ``value`` itself as the result, judged by its truth."""
    return make_compare(identity, value)


def make_negation_compare(value: Any) -> CompareHelper:
    """Record the logical negation of ``value``."""
    return make_compare(negate, value)


def make_equal_compare(lhs: Any, rhs: Any) -> CompareHelper:
    """Record ``lhs == rhs``."""
    return make_compare(equal, lhs, rhs)


def make_not_equal_compare(lhs: Any, rhs: Any) -> CompareHelper:
    """Record ``lhs != rhs``."""
    return make_compare(not_equal, lhs, rhs)


def make_less_compare(lhs: Any, rhs: Any) -> CompareHelper:
    """Record ``lhs < rhs``."""
    return make_compare(less, lhs, rhs)


def make_greater_compare(lhs: Any, rhs: Any) -> CompareHelper:
    """Record ``lhs > rhs``."""
    return make_compare(greater, lhs, rhs)


def make_less_equal_compare(lhs: Any, rhs: Any) -> CompareHelper:
    """Record ``lhs <= rhs``."""
    return make_compare(less_equal, lhs, rhs)


def make_greater_equal_compare(lhs: Any, rhs: Any) -> CompareHelper:
    """Record ``lhs >= rhs``."""
    return make_compare(greater_equal, lhs, rhs)


def make_approx_equal_compare(lhs: Any, rhs: Any, delta: Any) -> CompareHelper:
    """Record whether ``lhs`` and ``rhs`` differ by at most ``delta``."""
    return make_compare(approx_equal, lhs, rhs, delta)


def make_all_compare(*args: Any) -> CompareHelper:
    """Record whether every argument is truthy."""
    return make_compare(all_true, *args)


def make_any_compare(*args: Any) -> CompareHelper:
    """Record whether any argument is truthy."""
    return make_compare(any_true, *args)


def make_all_equal_first_compare(*args: Any) -> CompareHelper:
    """Record whether every argument equals the first one."""
    return make_compare(all_equal_first, *args)


def make_all_equal_each_compare(*args: Any) -> CompareHelper:
    """Record whether every argument equals every other one."""
    return make_compare(all_equal_each, *args)


def make_ascending_compare(*args: Any) -> CompareHelper:
    """Record whether the arguments are in non-decreasing order."""
    return make_compare(ascending, *args)


def make_descending_compare(*args: Any) -> CompareHelper:
    """Record whether the arguments are in non-increasing order."""
    return make_compare(descending, *args)


def make_float_equal_compare(lhs: float, rhs: float) -> CompareHelper:
    """Record whether two floats are equal within a few relative epsilons."""
    return make_compare(float_equal, lhs, rhs)


def _chain(op: Callable[[Any, Any], Any]) -> Callable[["Collector", Any], "Collector"]:
    def method(self: "Collector", other: Any) -> "Collector":
        return Collector(op(self.result, other), (*self.args, other))

    method.__name__ = f"__{op.__name__.strip('_')}__"
    return method


class Collector(CompareHelper):
    """A running binary-operator chain that records every operand.

    Each operator applies to the intermediate ``result`` and the new
    operand, and returns a new ``Collector`` with that operand appended.
    """

    __slots__ = ()

    __eq__ = _chain(operator.eq)  # type: ignore[assignment]
    __ne__ = _chain(operator.ne)  # type: ignore[assignment]
    __lt__ = _chain(operator.lt)
    __gt__ = _chain(operator.gt)
    __le__ = _chain(operator.le)
    __ge__ = _chain(operator.ge)
    __lshift__ = _chain(operator.lshift)
    __rshift__ = _chain(operator.rshift)
    __or__ = _chain(operator.or_)
    __and__ = _chain(operator.and_)
    __xor__ = _chain(operator.xor)
    __hash__ = None  # type: ignore[assignment]


class Decomposer:
    """Starts a ``Collector`` chain from its first operand."""

    def __lshift__(self, value: Any) -> Collector:
        return Collector(value, (value,))
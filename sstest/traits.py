"""Runtime checks on values and simple numeric ranges."""

from collections.abc import Collection, Iterator
from dataclasses import dataclass
from typing import Any


def is_iterable(obj: Any) -> bool:
    """True if ``obj`` can be iterated over."""
    try:
        iter(obj)
    except TypeError:
        return False
    return True


def is_container(obj: Any) -> bool:
    """True if ``obj`` is a sized, iterable collection of elements."""
    return isinstance(obj, Collection)


def is_comparable(obj: Any) -> bool:
    """True if ``obj`` supports ``<``, ``>`` and ``==`` with itself."""
    try:
        obj < obj
        obj > obj
        obj == obj
    except TypeError:
        return False
    return True


@dataclass(frozen=True)
class Range:
    """A closed interval ``[lower, upper]``."""

    lower: Any
    upper: Any

    def in_range(self, value: Any) -> bool:
        """True if ``lower <= value <= upper``."""
        return self.lower <= value <= self.upper


@dataclass(frozen=True)
class IterableRange(Range):
    """A range that yields ``lower, lower + 1, ...`` up to but excluding ``upper``.

    When ``upper`` lies outside the range the iteration is empty.
    """

    def __iter__(self) -> Iterator[Any]:
        end = self.upper if self.in_range(self.upper) else self.lower
        current = self.lower
        while current < end:
            yield current
            current += 1
"""A read-only view over a run of characters, with byte-style comparison."""

from __future__ import annotations

import functools
from collections.abc import Iterator, Sequence
from itertools import islice
from typing import Any

from sstest.errors import InvalidArgumentError


def cmemcmp(lhs: Sequence[Any], rhs: Sequence[Any], n: int) -> int:
    """Compare at most ``n`` leading elements of two sequences.

    Returns 0 if they are equal, -1 if ``lhs`` orders first and 1 otherwise.
    If one sequence is exhausted before ``n`` elements while the common
    prefix is equal, the shorter sequence orders first.
    """
    if n < 0:
        raise InvalidArgumentError(f"cannot compare a negative count: {n}")
    for a, b in zip(islice(lhs, n), islice(rhs, n)):
        if a < b:
            return -1
        if a > b:
            return 1
    left = min(n, len(lhs))
    right = min(n, len(rhs))
    return (left > right) - (left < right)


def _as_view(value: Any) -> StringView | None:
    if isinstance(value, StringView):
        return value
    if isinstance(value, str):
        return StringView(value)
    return None


def compare(first: StringView | str, second: StringView | str, n: int | None = None) -> int:
    """Three-way compare two strings, optionally only their first ``n`` characters."""
    lhs = _as_view(first)
    rhs = _as_view(second)
    if lhs is None or rhs is None:
        raise TypeError("compare() expects StringView or str arguments")
    if n is not None:
        lhs = lhs.substr(0, n)
        rhs = rhs.substr(0, n)
    if lhs == rhs:
        return 0
    return -1 if lhs < rhs else 1


@functools.total_ordering
class StringView:
    """An immutable view over characters; it may contain NUL characters."""

    __slots__ = ("_data",)

    def __init__(self, text: str = "", size: int | None = None) -> None:
        if text is None:
            raise TypeError("a StringView cannot be built from None")
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        if size is None:
            self._data = text
            return
        if size < 0 or size > len(text):
            raise InvalidArgumentError(
                f"size {size} is outside the string of length {len(text)}"
            )
        self._data = text[:size]

    @property
    def data(self) -> str:
        """The characters in the view."""
        return self._data

    def at(self, index: int) -> str:
        """The character at 0-based ``index``."""
        if index < 0 or index >= len(self._data):
            raise IndexError(f"index {index} out of range for length {len(self._data)}")
        return self._data[index]

    def __getitem__(self, index: int) -> str:
        return self.at(index)

    def empty(self) -> bool:
        """True if the view holds no characters."""
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return not self.empty()

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __reversed__(self) -> Iterator[str]:
        return reversed(self._data)

    def substr(self, pos: int = 0, count: int | None = None) -> StringView:
        """View of at most ``count`` characters from ``pos``; empty if ``pos`` is past the end."""
        if pos < 0:
            raise InvalidArgumentError(f"negative position: {pos}")
        if count is not None and count < 0:
            raise InvalidArgumentError(f"negative count: {count}")
        if pos >= len(self._data):
            return StringView()
        remaining = len(self._data) - pos
        length = remaining if count is None else min(remaining, count)
        return StringView(self._data[pos:pos + length])

    def __str__(self) -> str:
        return self._data

    def __repr__(self) -> str:
        return f"StringView({self._data!r})"

    def __hash__(self) -> int:
        return hash(self._data)

    def __eq__(self, other: object) -> bool:
        view = _as_view(other)
        if view is None:
            return NotImplemented
        return len(self) == len(view) and cmemcmp(self._data, view._data, len(self)) == 0

    def __lt__(self, other: object) -> bool:
        view = _as_view(other)
        if view is None:
            return NotImplemented
        shared = min(len(self), len(view))
        order = cmemcmp(self._data, view._data, shared)
        return order < 0 or (order == 0 and len(self) < len(view))
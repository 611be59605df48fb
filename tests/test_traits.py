import pytest

from sstest.traits import IterableRange, Range, is_comparable, is_container, is_iterable


@pytest.mark.parametrize("obj", [[1, 2], (), "abc", {1: 2}, set(), range(3)])
def test_builtin_collections_are_iterable_and_containers(obj):
    assert is_iterable(obj)
    assert is_container(obj)


@pytest.mark.parametrize("obj", [5, 3.5, None, object()])
def test_scalars_are_not_iterable(obj):
    assert not is_iterable(obj)
    assert not is_container(obj)


def test_generator_is_iterable_but_not_container():
    gen = (x for x in range(3))
    assert is_iterable(gen)
    assert not is_container(gen)


@pytest.mark.parametrize("obj", [1, 2.5, "text", (1, 2), [3]])
def test_ordered_values_are_comparable(obj):
    assert is_comparable(obj)


@pytest.mark.parametrize("obj", [object(), 1j, None, {1: 2}])
def test_unordered_values_are_not_comparable(obj):
    assert not is_comparable(obj)


def test_range_in_range_is_inclusive():
    r = Range(1, 5)
    assert r.in_range(1)
    assert r.in_range(5)
    assert r.in_range(3)
    assert not r.in_range(0)
    assert not r.in_range(6)


def test_range_equality():
    assert Range(0, 10) == Range(0, 10)
    assert Range(0, 10) != Range(0, 11)
    assert Range(1, 10) != Range(0, 10)


def test_iterable_range_excludes_upper():
    assert list(IterableRange(0, 5)) == [0, 1, 2, 3, 4]


def test_iterable_range_length_and_bounds():
    values = list(IterableRange(-3, 7))
    assert len(values) == 10
    assert values[0] == -3
    assert 7 not in values
    assert all(IterableRange(-3, 7).in_range(v) for v in values)


def test_iterable_range_empty_when_bounds_equal():
    assert list(IterableRange(4, 4)) == []


def test_iterable_range_empty_when_reversed():
    assert list(IterableRange(5, 1)) == []


def test_iterable_range_is_reusable():
    r = IterableRange(2, 6)
    assert list(r) == list(r)
    assert sum(r) == sum(list(r))
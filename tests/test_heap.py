import operator
import random

import pytest

from logicsim.heap import Heap


def drain(heap):
    out = []
    while not heap.empty():
        out.append(heap.top())
        heap.pop()
    return out


def test_push_three_top_then_pop():
    heap = Heap()
    for v in (1, 2, 3):
        heap.push(v)
    assert heap.top() == 1
    heap.pop()
    assert heap.top() == 2
    assert len(heap) == 2


def test_empty_heap_top_raises():
    with pytest.raises(IndexError, match="Empty Heap"):
        Heap().top()


def test_empty_heap_pop_raises():
    with pytest.raises(IndexError, match="Empty Heap"):
        Heap().pop()


def test_empty_and_len():
    heap = Heap()
    assert heap.empty()
    assert len(heap) == 0
    heap.push(5)
    assert not heap.empty()
    assert len(heap) == 1
    heap.pop()
    assert heap.empty()


@pytest.mark.parametrize("m", [1, 2, 3, 4, 7])
def test_min_heap_drains_sorted(m):
    rng = random.Random(m)
    values = [rng.randint(-50, 50) for _ in range(60)]
    heap = Heap(m)
    for v in values:
        heap.push(v)
    assert len(heap) == len(values)
    assert drain(heap) == sorted(values)


@pytest.mark.parametrize("m", [2, 3, 5])
def test_max_heap_with_custom_predicate(m):
    values = [4, 9, 1, 9, 0, 3, 7, 2]
    heap = Heap(m, operator.gt)
    for v in values:
        heap.push(v)
    assert drain(heap) == sorted(values, reverse=True)


def test_key_predicate():
    heap = Heap(2, lambda a, b: a[0] < b[0])
    for item in [(3, "c"), (1, "a"), (2, "b")]:
        heap.push(item)
    assert heap.top() == (1, "a")


def test_invalid_arity():
    with pytest.raises(ValueError):
        Heap(0)
# tests/test_priority_queue.py
from __future__ import annotations

import random

import pytest

from eventnest.models import EmptyPriorityQueueError, PriorityQueue


def _drain(pq):
    out = []
    while not pq.is_empty():
        out.append(pq.remove())
    return out


def _assert_heap_property(pq):
    heap, compare = pq._heap, pq._compare
    for k in range(1, pq.size()):
        assert compare(heap[k], heap[(k - 1) // 2]) >= 0


def test_natural_order_removes_smallest_first():
    pq = PriorityQueue()
    for item in (5, 1, 3):
        pq.add(item)
    assert pq.remove() == 1
    assert pq.remove() == 3
    assert pq.remove() == 5
    assert pq.is_empty()


def test_comparator_takes_precedence():
    pq = PriorityQueue(lambda a, b: b - a)
    for item in (5, 1, 3, 9):
        pq.add(item)
    assert _drain(pq) == [9, 5, 3, 1]


def test_key_function():
    pq = PriorityQueue(key=len)
    for word in ('ccc', 'a', 'bb'):
        pq.add(word)
    assert _drain(pq) == ['a', 'bb', 'ccc']


def test_comparator_and_key_together_rejected():
    with pytest.raises(ValueError):
        PriorityQueue(lambda a, b: 0, key=len)


def test_invalid_initial_capacity():
    with pytest.raises(ValueError):
        PriorityQueue(initial_capacity=0)


def test_empty_queue_signals():
    pq = PriorityQueue()
    with pytest.raises(EmptyPriorityQueueError):
        pq.remove()
    with pytest.raises(IndexError):
        pq.peek()


def test_none_item_rejected():
    pq = PriorityQueue()
    with pytest.raises(ValueError):
        pq.add(None)
    assert pq.size() == 0


def test_heap_property_under_random_operations():
    rng = random.Random(6205)
    pq = PriorityQueue()
    mirror = []
    for _ in range(400):
        if mirror and rng.random() < 0.35:
            expected = min(mirror)
            mirror.remove(expected)
            assert pq.remove() == expected
        else:
            value = rng.randint(-50, 50)
            pq.add(value)
            mirror.append(value)
        _assert_heap_property(pq)
    assert _drain(pq) == sorted(mirror)


def test_peek_does_not_remove():
    pq = PriorityQueue()
    pq.add(4)
    pq.add(2)
    assert pq.peek() == 2
    assert pq.size() == 2


def test_to_list_is_sorted_and_non_destructive():
    pq = PriorityQueue()
    for item in (7, 3, 9, 1, 5, 3):
        pq.add(item)
    heap_before = list(pq._heap)

    first = pq.to_list()
    second = pq.to_list()
    assert first == [1, 3, 3, 5, 7, 9]
    assert first == second
    assert pq.size() == 6
    assert pq.peek() == 1
    assert pq._heap == heap_before
    assert list(pq) == first


def test_remove_if_rebuilds_heap():
    pq = PriorityQueue()
    for item in range(20, 0, -1):
        pq.add(item)
    assert pq.remove_if(lambda x: x % 2 == 0) is True
    assert pq.size() == 10
    _assert_heap_property(pq)
    assert pq.to_list() == list(range(1, 20, 2))


def test_remove_if_without_match_changes_nothing():
    pq = PriorityQueue()
    for item in (3, 1, 2):
        pq.add(item)
    heap_before = list(pq._heap)
    assert pq.remove_if(lambda x: x > 100) is False
    assert pq._heap == heap_before


def test_remove_if_everything():
    pq = PriorityQueue()
    for item in (3, 1, 2):
        pq.add(item)
    assert pq.remove_if(lambda x: True) is True
    assert pq.is_empty()
    with pytest.raises(EmptyPriorityQueueError):
        pq.peek()


def test_remove_if_requires_predicate():
    with pytest.raises(ValueError):
        PriorityQueue().remove_if(None)


def test_growth_below_and_above_64():
    pq = PriorityQueue()
    assert pq.capacity == 11
    for i in range(11):
        pq.add(i)
    assert pq.capacity == 11
    pq.add(11)
    assert pq.capacity == 24

    big = PriorityQueue(initial_capacity=64)
    for i in range(65):
        big.add(i)
    assert big.capacity == 96


def test_remove_clears_vacated_slot():
    pq = PriorityQueue()
    for item in (1, 2, 3):
        pq.add(item)
    pq.remove()
    assert pq._heap[2] is None


def test_clear():
    pq = PriorityQueue()
    for item in (1, 2, 3):
        pq.add(item)
    pq.clear()
    assert pq.is_empty()
    assert len(pq) == 0
    assert all(slot is None for slot in pq._heap)
    pq.add(8)
    assert pq.peek() == 8

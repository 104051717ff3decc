import os
import sys
import random
from dataclasses import dataclass, field

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from min_binary_heap import MinBinaryHeap

ROUND_TRIP_VALUES = [16, 14, 10, 8, 7, 9, 3, 2, 4, 1]


@dataclass(order=True)
class Job:
    time_left: int
    id: int = field(compare=False)


def make_queue():
    queue = MinBinaryHeap()
    for v in ROUND_TRIP_VALUES:
        queue.insert(v)
    return queue


def assert_heap_order(queue):
    data = list(queue)
    for i in range(1, len(data)):
        assert data[queue._parent_index(i)] <= data[i]


# ----------------------------
# Index arithmetic
# ----------------------------

def test_layout_after_round_trip_inserts():
    assert list(make_queue()) == [1, 2, 7, 4, 3, 14, 9, 16, 8, 10]


def test_parent_index():
    queue = make_queue()
    expected = {9: 4, 8: 3, 7: 3, 6: 2, 5: 2, 4: 1, 3: 1, 2: 0, 1: 0}
    for i, parent in expected.items():
        assert queue._parent_index(i) == parent


@pytest.mark.parametrize("bad_index", [0, -1, 10, 11])
def test_parent_index_out_of_bounds_raises(bad_index):
    queue = make_queue()
    with pytest.raises(IndexError, match="out of bounds"):
        queue._parent_index(bad_index)


def test_child_index_min():
    queue = make_queue()
    for i in range(5, 10):
        assert queue._child_index_min(i) is None
    assert queue._child_index_min(4) == 9
    assert queue._child_index_min(3) == 8
    assert queue._child_index_min(2) == 6
    assert queue._child_index_min(1) == 4
    assert queue._child_index_min(0) == 1


def test_child_index_min_tie_prefers_right():
    queue = MinBinaryHeap([0, 5, 5])
    assert queue._child_index_min(0) == 2


def test_child_index_min_on_empty_heap():
    assert MinBinaryHeap()._child_index_min(0) is None


# ----------------------------
# Scenarios
# ----------------------------

def test_round_trip():
    queue = make_queue()
    assert queue.size() == 10
    out = [queue.extract_min() for _ in range(10)]
    assert out == [1, 2, 3, 4, 7, 8, 9, 10, 14, 16]
    assert queue.extract_min() is None
    assert queue.size() == 0


def test_single_element():
    queue = MinBinaryHeap()
    queue.insert(5)
    assert queue.size() == 1
    assert queue.extract_min() == 5
    assert queue.extract_min() is None
    assert queue.size() == 0


def test_two_elements():
    queue = MinBinaryHeap()
    queue.insert(10)
    queue.insert(1)
    assert queue.extract_min() == 1
    assert queue.extract_min() == 10


def test_empty_heap():
    queue = MinBinaryHeap()
    assert queue.size() == 0
    assert len(queue) == 0
    assert not queue
    assert queue.is_empty()
    assert queue.peek() is None
    assert queue.extract_min() is None
    assert queue.size() == 0


def test_jobs_ordered_by_time_left():
    queue = MinBinaryHeap()
    queue.insert(Job(time_left=5, id=1))
    queue.insert(Job(time_left=6, id=2))
    queue.insert(Job(time_left=4, id=3))

    assert queue.extract_min().id == 3
    assert queue.extract_min().id == 1
    assert queue.extract_min().id == 2


def test_insert_does_not_swap_with_equal_parent():
    queue = MinBinaryHeap()
    for time_left, job_id in [(1, 1), (2, 2), (3, 3), (2, 4), (2, 5)]:
        queue.insert(Job(time_left=time_left, id=job_id))
    # Jobs 4 and 5 land under job 2, which has the same time_left.
    assert [job.id for job in queue] == [1, 2, 3, 4, 5]


def test_extract_does_not_swap_with_equal_child():
    queue = MinBinaryHeap([Job(time_left=1, id=1), Job(time_left=2, id=2), Job(time_left=2, id=3)])
    assert queue.extract_min().id == 1
    # Job 3 moved to the root and stays ahead of its equal child.
    assert [job.id for job in queue] == [3, 2]


def test_strings_and_tuples():
    assert list(MinBinaryHeap(["pear", "apple", "fig"]).drain()) == ["apple", "fig", "pear"]
    assert list(MinBinaryHeap([(2, "b"), (1, "z"), (1, "a")]).drain()) == [(1, "a"), (1, "z"), (2, "b")]


# ----------------------------
# Properties
# ----------------------------

def test_size_accounting():
    queue = MinBinaryHeap()
    for n, v in enumerate([3, 1, 2], start=1):
        queue.insert(v)
        assert queue.size() == n
        assert queue.size() == n
    for n in (2, 1, 0):
        queue.extract_min()
        assert queue.size() == n


@pytest.mark.parametrize("seed", range(5))
def test_sorted_output_with_duplicates(seed):
    rng = random.Random(seed)
    data = [rng.randint(0, 20) for _ in range(200)]
    queue = MinBinaryHeap()
    for v in data:
        queue.insert(v)
    assert [queue.extract_min() for _ in range(len(data))] == sorted(data)
    assert queue.extract_min() is None


def test_invariant_under_interleaved_operations():
    rng = random.Random(42)
    queue = MinBinaryHeap()
    shadow = []
    for _ in range(1000):
        if shadow and rng.random() < 0.4:
            got = queue.extract_min()
            assert got == min(shadow)
            shadow.remove(got)
        else:
            v = rng.randint(-50, 50)
            queue.insert(v)
            shadow.append(v)
        assert queue.size() == len(shadow)
        assert_heap_order(queue)


def test_peek_does_not_remove():
    queue = make_queue()
    assert queue.peek() == 1
    assert queue.size() == 10
    assert queue.extract_min() == 1
    assert queue.peek() == 2


def test_drain_empties_queue():
    queue = make_queue()
    assert list(queue.drain()) == sorted(ROUND_TRIP_VALUES)
    assert queue.size() == 0


def test_repr_uses_array_order():
    assert repr(MinBinaryHeap([2, 1])) == "MinBinaryHeap([1, 2])"

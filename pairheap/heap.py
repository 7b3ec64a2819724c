import logging
from typing import NamedTuple

import numpy as np

from pairheap.errors import InvalidArgument, EmptyHeapError, CapacityExceededError

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10
DTYPE = np.int64

INT64_MIN = int(np.iinfo(DTYPE).min)
INT64_MAX = int(np.iinfo(DTYPE).max)


class Pair(NamedTuple):
    element: int
    priority: int


def _as_value(value, what):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgument(f"{what} must be an integer, got {value!r}")
    value = int(value)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidArgument(f"{what} {value} is outside the int64 range")
    return value

def _as_count(value, what):
    value = _as_value(value, what)
    if value < 0:
        raise InvalidArgument(f"{what} must be non-negative, got {value}")
    return value

def _check_sources(priorities, elements, count):
    try:
        num_priorities = len(priorities)
        num_elements = len(elements)
    except TypeError as e:
        raise InvalidArgument(f"source arrays must be sized sequences: {e}") from e
    if num_priorities < count or num_elements < count:
        raise InvalidArgument(
            f"count is {count} but got {num_priorities} priorities "
            f"and {num_elements} elements")


class Heap:
    """Fixed capacity binary min-heap of (element, priority) int pairs.

    The pairs live in two parallel int64 buffers. Slot i holds
    (elements[i], priorities[i]) for i < size, and the children
    of slot i are slots 2i+1 and 2i+2. Slots at or past size are
    garbage and never read.

    insert() raises CapacityExceededError instead of growing.
    """

    def __init__(self, capacity=DEFAULT_CAPACITY):
        capacity = _as_count(capacity, "capacity")
        self._capacity = capacity
        self._size = 0
        try:
            self._elements = np.zeros(capacity, dtype=DTYPE)
            self._priorities = np.zeros(capacity, dtype=DTYPE)
        except (ValueError, MemoryError) as e:
            raise InvalidArgument(f"capacity {capacity} cannot be allocated") from e

    @classmethod
    def from_arrays(cls, priorities, elements, count, spare_capacity):
        """New heap holding (elements[i], priorities[i]) for i < count,
        with capacity count + spare_capacity. Pairs are inserted one
        at a time in index order.
        """
        count = _as_count(count, "count")
        spare_capacity = _as_count(spare_capacity, "spare_capacity")
        _check_sources(priorities, elements, count)

        heap = cls(count + spare_capacity)
        for i in range(count):
            heap.insert(elements[i], priorities[i])
        logger.debug("built %r from %d array pairs", heap, count)
        return heap

    @classmethod
    def merged(cls, heap_a, heap_b, spare_capacity):
        """New heap with the pairs of both heaps, copied. Capacity is the
        combined size plus spare_capacity. The sources are not modified.
        """
        for source in (heap_a, heap_b):
            if not isinstance(source, Heap):
                raise InvalidArgument(f"cannot merge {type(source).__name__}, expected Heap")
        spare_capacity = _as_count(spare_capacity, "spare_capacity")

        heap = cls(heap_a._size + heap_b._size + spare_capacity)
        for source in (heap_a, heap_b):
            for i in range(source._size):
                heap.insert(source._elements[i], source._priorities[i])
        logger.debug("merged %r and %r into %r", heap_a, heap_b, heap)
        return heap

    @classmethod
    def from_unordered(cls, priorities, elements, count, spare_capacity):
        """Like from_arrays, but copies the pairs in unordered and
        heapifies in O(count) instead of inserting one by one.
        """
        count = _as_count(count, "count")
        spare_capacity = _as_count(spare_capacity, "spare_capacity")
        _check_sources(priorities, elements, count)

        heap = cls(count + spare_capacity)
        for i in range(count):
            heap._elements[i] = _as_value(elements[i], "element")
            heap._priorities[i] = _as_value(priorities[i], "priority")
        heap._size = count
        heap.heapify()
        logger.debug("heapified %r from %d array pairs", heap, count)
        return heap

    def empty(self):
        return self._size == 0

    def size(self):
        return self._size

    def capacity(self):
        return self._capacity

    def _require_nonempty(self, op):
        if self._size == 0:
            raise EmptyHeapError(f"{op} on an empty heap")

    def peek_min(self):
        self._require_nonempty("peek_min")
        return int(self._elements[0])

    def peek_min_priority(self):
        self._require_nonempty("peek_min_priority")
        return int(self._priorities[0])

    def peek_min_pair(self):
        self._require_nonempty("peek_min_pair")
        return Pair(int(self._elements[0]), int(self._priorities[0]))

    def insert(self, element, priority):
        element = _as_value(element, "element")
        priority = _as_value(priority, "priority")
        if self._size == self._capacity:
            logger.debug("rejected insert of (%d, %d), heap is full at %d",
                         element, priority, self._capacity)
            raise CapacityExceededError(
                f"cannot insert ({element}, {priority}), heap is at capacity {self._capacity}")

        idx = self._size
        self._elements[idx] = element
        self._priorities[idx] = priority
        self._trickle_up(idx)
        self._size += 1

    def extract_min_pair(self):
        self._require_nonempty("extract_min")
        result = Pair(int(self._elements[0]), int(self._priorities[0]))

        last = self._size - 1
        self._elements[0] = self._elements[last]
        self._priorities[0] = self._priorities[last]
        self._size = last
        self._trickle_down(0)
        return result

    def extract_min(self):
        return self.extract_min_pair().element

    def heapify(self):
        for idx in range(self._size // 2 - 1, -1, -1):
            self._trickle_down(idx)

    def _swap(self, i, j):
        elements = self._elements
        priorities = self._priorities
        elements[i], elements[j] = elements[j], elements[i]
        priorities[i], priorities[j] = priorities[j], priorities[i]

    # expects the new leaf at idx, with size not yet bumped
    def _trickle_up(self, idx):
        priorities = self._priorities
        while idx > 0:
            parent_idx = (idx - 1) // 2
            if not priorities[idx] < priorities[parent_idx]:
                return
            self._swap(idx, parent_idx)
            idx = parent_idx

    def _trickle_down(self, idx):
        priorities = self._priorities
        size = self._size
        while True:
            left_idx = 2 * idx + 1
            right_idx = left_idx + 1
            if left_idx >= size:
                return

            if right_idx >= size:
                # a lone left child is the last slot, so it has no children
                if priorities[left_idx] < priorities[idx]:
                    self._swap(idx, left_idx)
                return

            # ties go left
            min_child_idx = left_idx
            if priorities[right_idx] < priorities[left_idx]:
                min_child_idx = right_idx

            if not priorities[min_child_idx] < priorities[idx]:
                return
            self._swap(idx, min_child_idx)
            idx = min_child_idx

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0

    def __repr__(self):
        if self._size == 0:
            return f"Heap(size=0, capacity={self._capacity})"
        return (f"Heap(size={self._size}, capacity={self._capacity}, "
                f"min=({self._elements[0]}, {self._priorities[0]}))")

    # camelCase aliases
    peekMin = peek_min
    peekMinPriority = peek_min_priority
    extractMin = extract_min


def check_heap(heap):
    if not 0 <= heap._size <= heap._capacity:
        raise RuntimeError("Bad heap size", heap._size, heap._capacity)

    children = np.arange(1, heap._size)
    parents = (children - 1) // 2
    priorities = heap._priorities
    bad = np.flatnonzero(priorities[parents] > priorities[children])
    if len(bad):
        child = int(children[bad[0]])
        parent = int(parents[bad[0]])
        raise RuntimeError("Bad heap, parent priority exceeds child",
                           (parent, int(priorities[parent])),
                           (child, int(priorities[child])))


if __name__ == "__main__":
    ps = [95, 43, 66, 29, 21, 14, 56, 33, 88]
    n = 8

    h = Heap(len(ps))
    for i in range(n):
        h.insert(i, ps[i])
    h.insert(8, 1)
    check_heap(h)

    while h:
        print(h.extract_min_pair())

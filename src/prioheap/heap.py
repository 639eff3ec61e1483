from typing import Generic, Iterable, Iterator, List, TypeVar

from prioheap.errors import EmptyHeapError
from prioheap.ordering import Comparator, natural_order

T = TypeVar("T")


class Heap(Generic[T]):
    """
    An array-backed binary heap ordered by a caller-supplied comparator. The
    root is always an element that no other element precedes; a max-heap is
    obtained by passing `reverse_order(...)` as the comparator.

    Only ancestor/descendant pairs are ordered. Iterating over the heap yields
    elements in storage order, which says nothing about their rank. Use
    `drain()` (destructive) to observe elements in comparator order.

    This class is not thread-safe; callers must serialize access.
    """

    @classmethod
    def build_from(
        cls, values: Iterable[T], comparator: Comparator[T] = natural_order
    ) -> "Heap[T]":
        """
        Bulk-loads `values` in O(n) by sifting down every internal node,
        starting from the last one. This is asymptotically cheaper than
        calling `insert()` once per value.
        """
        heap = cls(comparator)
        heap._data = list(values)
        heap._capacity_hint = len(heap._data)
        for idx in reversed(range(len(heap._data) // 2)):
            heap._sift_down(idx)
        return heap

    def __init__(
        self, comparator: Comparator[T] = natural_order, capacity_hint: int = 0
    ) -> None:
        self._cmp = comparator
        self._capacity_hint = max(capacity_hint, 0)
        self._data: List[T] = []

    def insert(self, value: T) -> None:
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def peek(self) -> T:
        if len(self._data) == 0:
            raise EmptyHeapError("peek")
        return self._data[0]

    def extract_root(self) -> T:
        if len(self._data) == 0:
            raise EmptyHeapError("extract_root")
        last = self._data.pop()
        if len(self._data) == 0:
            return last
        root = self._data[0]
        self._data[0] = last
        self._sift_down(0)
        return root

    def replace_root(self, value: T) -> T:
        """
        Removes and returns the root, then inserts `value`, using a single
        sift. Note that the returned element may rank after `value`.
        """
        if len(self._data) == 0:
            raise EmptyHeapError("replace_root")
        root = self._data[0]
        self._data[0] = value
        self._sift_down(0)
        return root

    def push_pop(self, value: T) -> T:
        """
        Inserts `value` and then extracts the root. If `value` would become the
        new root, it is returned right away and the heap is left untouched.
        """
        if len(self._data) > 0 and self._precedes(self._data[0], value):
            value, self._data[0] = self._data[0], value
            self._sift_down(0)
        return value

    def drain(self) -> Iterator[T]:
        # Destructive: each yielded element is removed from the heap.
        while len(self._data) > 0:
            yield self.extract_root()

    def clear(self) -> None:
        self._data.clear()

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def capacity_hint(self) -> int:
        return self._capacity_hint

    def comparator(self) -> Comparator[T]:
        return self._cmp

    def is_valid(self) -> bool:
        """
        Checks the heap-order invariant: no element precedes its parent.
        """
        for idx in range(1, len(self._data)):
            if self._precedes(self._data[idx], self._data[(idx - 1) // 2]):
                return False
        return True

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._data))

    def __repr__(self) -> str:
        return "Heap(size={})".format(len(self._data))

    def _precedes(self, a: T, b: T) -> bool:
        return self._cmp(a, b) < 0

    def _sift_up(self, idx: int) -> None:
        data = self._data
        value = data[idx]
        while idx > 0:
            parent = (idx - 1) // 2
            if not self._precedes(value, data[parent]):
                break
            data[idx] = data[parent]
            idx = parent
        data[idx] = value

    def _sift_down(self, idx: int) -> None:
        data = self._data
        size = len(data)
        value = data[idx]
        while True:
            child = 2 * idx + 1
            if child >= size:
                break
            right = child + 1
            if right < size and self._precedes(data[right], data[child]):
                child = right
            if not self._precedes(data[child], value):
                break
            data[idx] = data[child]
            idx = child
        data[idx] = value

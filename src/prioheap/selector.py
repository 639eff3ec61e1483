import numbers
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

from prioheap.errors import InvalidCapacityError
from prioheap.heap import Heap
from prioheap.ordering import Comparator, by_key, natural_order, reverse_order

T = TypeVar("T")


def check_capacity(k: Any) -> int:
    if isinstance(k, bool) or not isinstance(k, numbers.Integral) or k <= 0:
        raise InvalidCapacityError(k)
    return int(k)


class BoundedSelector(Generic[T]):
    """
    Keeps the `k` best elements seen so far in a stream, without retaining the
    rest of the stream.

    `comparator` describes the desired ranking: `comparator(a, b) < 0` means
    `a` ranks better than `b`. The underlying heap uses the reversed
    comparator, so its root is always the worst element currently kept and can
    be evicted in O(log k).

    When an offered value ties with the current worst kept element, the
    earlier element is kept. Refine the comparator (see `then_comparing`) to
    choose a different tie-break.
    """

    @classmethod
    def largest(
        cls, k: int, key: Optional[Callable[[T], Any]] = None
    ) -> "BoundedSelector[T]":
        base = natural_order if key is None else by_key(key)
        return cls(k, reverse_order(base))

    @classmethod
    def smallest(
        cls, k: int, key: Optional[Callable[[T], Any]] = None
    ) -> "BoundedSelector[T]":
        base = natural_order if key is None else by_key(key)
        return cls(k, base)

    def __init__(self, k: int, comparator: Comparator[T] = natural_order) -> None:
        self._k = check_capacity(k)
        self._cmp = comparator
        self._heap: Heap[T] = Heap(
            reverse_order(comparator), capacity_hint=self._k
        )

    def offer(self, value: T) -> bool:
        """
        Returns `True` iff `value` is now among the kept elements.
        """
        if len(self._heap) < self._k:
            self._heap.insert(value)
            return True

        if self._cmp(value, self._heap.peek()) < 0:
            self._heap.replace_root(value)
            return True

        return False

    def offer_all(self, values: Iterable[T]) -> int:
        num_kept = 0
        for value in values:
            if self.offer(value):
                num_kept += 1
        return num_kept

    def snapshot(self) -> List[T]:
        """
        The kept elements in heap order (not rank order).
        """
        return list(self._heap)

    def drain(self) -> List[T]:
        """
        Empties the selector and returns the kept elements, best first.
        """
        worst_first = list(self._heap.drain())
        worst_first.reverse()
        return worst_first

    def worst(self) -> T:
        """
        The worst kept element. Once the selector is full, this is the k-th
        best element seen so far.
        """
        return self._heap.peek()

    def capacity(self) -> int:
        return self._k

    def size(self) -> int:
        return len(self._heap)

    def is_full(self) -> bool:
        return len(self._heap) == self._k

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return "BoundedSelector(k={}, size={})".format(self._k, len(self._heap))

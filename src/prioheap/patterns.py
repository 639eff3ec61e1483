from typing import Iterable, Iterator, List, Tuple, TypeVar

from prioheap.errors import EmptyHeapError
from prioheap.heap import Heap
from prioheap.ordering import Comparator, by_key, natural_order, then_comparing
from prioheap.selector import BoundedSelector

T = TypeVar("T")


def top_k(
    values: Iterable[T], k: int, comparator: Comparator[T] = natural_order
) -> List[T]:
    """
    Returns the `k` best values (best first) in a single pass, using O(k)
    memory. "Best" means "comes first under `comparator`".
    """
    selector = BoundedSelector[T](k, comparator)
    selector.offer_all(values)
    return selector.drain()


def kth_best(
    values: Iterable[T], k: int, comparator: Comparator[T] = natural_order
) -> T:
    selector = BoundedSelector[T](k, comparator)
    selector.offer_all(values)
    if not selector.is_full():
        raise EmptyHeapError(
            "kth_best",
            "Cannot select the {}-th best of {} value(s).".format(k, len(selector)),
        )
    return selector.worst()


def heap_sort(
    values: Iterable[T], comparator: Comparator[T] = natural_order
) -> List[T]:
    heap = Heap.build_from(values, comparator)
    return list(heap.drain())


def merge_sorted(
    iterables: Iterable[Iterable[T]], comparator: Comparator[T] = natural_order
) -> Iterator[T]:
    """
    Lazily merges inputs that are each already sorted under `comparator`.
    Among equal values, those from earlier inputs are emitted first.
    """
    # Entries are (head value, input index, rest of input).
    entry_cmp = then_comparing(
        by_key(lambda entry: entry[0], comparator),
        by_key(lambda entry: entry[1]),
    )
    heads: List[Tuple[T, int, Iterator[T]]] = []
    for idx, iterable in enumerate(iterables):
        it = iter(iterable)
        for first in it:
            heads.append((first, idx, it))
            break

    heap = Heap.build_from(heads, entry_cmp)
    while not heap.is_empty():
        value, idx, it = heap.peek()
        yield value
        for following in it:
            heap.replace_root((following, idx, it))
            break
        else:
            heap.extract_root()


import enum
from typing import Any, Callable, Optional, TypeVar

from prioheap.errors import IncomparableError

T = TypeVar("T")
K = TypeVar("K")


class Ordering(enum.IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        if self is Ordering.LESS:
            return Ordering.GREATER
        elif self is Ordering.GREATER:
            return Ordering.LESS
        else:
            return Ordering.EQUAL


# A `Comparator` returns `Ordering.LESS` iff its first argument should come
# before its second argument. Only the sign of the verdict is inspected.
Comparator = Callable[[T, T], Ordering]


def compare(a: Any, b: Any) -> Ordering:
    """
    Three-way comparison built only from `<` and `>`.

    Never use `a - b` as an ordering function: with fixed-width types (e.g.,
    `numpy.int64`) the difference wraps around near the representable
    extremes and silently flips the verdict.
    """
    if a < b:
        return Ordering.LESS
    elif a > b:
        return Ordering.GREATER
    elif a == b:
        return Ordering.EQUAL
    else:
        # Unordered values, e.g., NaN.
        raise IncomparableError.from_values(a, b)


def natural_order(a: Any, b: Any) -> Ordering:
    return compare(a, b)


def reverse_order(cmp: Comparator[T] = natural_order) -> Comparator[T]:
    def reversed_cmp(a: T, b: T) -> Ordering:
        return cmp(b, a)

    return reversed_cmp


def by_key(
    key: Callable[[T], K], cmp: Optional[Comparator[K]] = None
) -> Comparator[T]:
    key_cmp: Comparator[K] = cmp if cmp is not None else natural_order

    def keyed_cmp(a: T, b: T) -> Ordering:
        return key_cmp(key(a), key(b))

    return keyed_cmp


def then_comparing(*cmps: Comparator[T]) -> Comparator[T]:
    """
    Lexicographic composition: the first comparator that does not report a tie
    decides. Useful for refining an ordering so that ties break predictably.
    """
    if len(cmps) == 0:
        raise ValueError("then_comparing() needs at least one comparator.")

    def chained_cmp(a: T, b: T) -> Ordering:
        for cmp in cmps:
            verdict = cmp(a, b)
            if verdict != 0:
                return Ordering.LESS if verdict < 0 else Ordering.GREATER
        return Ordering.EQUAL

    return chained_cmp

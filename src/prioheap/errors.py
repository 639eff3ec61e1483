from typing import Any, Optional


class EmptyHeapError(IndexError):
    """
    Raised when the root of an empty heap is requested (e.g., via `peek()` or
    `extract_root()`). Callers decide whether this means "end of sequence" or
    a programming error.
    """

    def __init__(self, operation: str, message: Optional[str] = None) -> None:
        super().__init__(
            message
            if message is not None
            else "Cannot {} on an empty heap.".format(operation)
        )
        self._operation = operation

    def operation(self) -> str:
        return self._operation


class InvalidCapacityError(ValueError):
    def __init__(self, capacity: Any) -> None:
        super().__init__(
            "Capacity must be a positive integer (got {!r}).".format(capacity)
        )
        self._capacity = capacity

    def capacity(self) -> Any:
        return self._capacity


class IncomparableError(TypeError):
    @classmethod
    def from_values(cls, a: Any, b: Any) -> "IncomparableError":
        return cls("Values {!r} and {!r} have no defined ordering.".format(a, b))


class ConfigError(ValueError):
    pass

"""Array adapter over any in-memory sequence."""

from typing import Generic, Sequence, TypeVar

from paginator.adapters.validation import validate_slice

T = TypeVar("T")


class ArrayAdapter(Generic[T]):
    """
    Adapter for lists, tuples, ranges and other sequences.

    Example:
        ```python
        adapter = ArrayAdapter(list(range(1, 102)))
        adapter.count()  # 101
        adapter.get_items(100, 10)  # [101]
        ```
    """

    def __init__(self, items: Sequence[T] | None = None):
        self.items: Sequence[T] = items if items is not None else []

    def count(self) -> int:
        return len(self.items)

    def get_items(self, offset: int, length: int) -> Sequence[T]:
        validate_slice(offset, length)
        return self.items[offset : offset + length]

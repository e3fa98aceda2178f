"""Callback adapter delegating both operations to user functions."""

from typing import Callable, Generic, Sequence, TypeVar

from paginator.adapters.validation import validate_slice

T = TypeVar("T")


class CallbackAdapter(Generic[T]):
    """
    Adapter backed by two callables.

    Example:
        ```python
        adapter = CallbackAdapter(
            items_callback=lambda offset, length: api.list(offset, length),
            count_callback=api.total,
        )
        ```
    """

    def __init__(
        self,
        items_callback: Callable[[int, int], Sequence[T]],
        count_callback: Callable[[], int],
    ):
        """
        Initialize callback adapter.

        Args:
            items_callback: Called as ``items_callback(offset, length)``.
            count_callback: Called with no arguments, returns item count.
        """
        self.items_callback = items_callback
        self.count_callback = count_callback

    def count(self) -> int:
        return self.count_callback()

    def get_items(self, offset: int, length: int) -> Sequence[T]:
        validate_slice(offset, length)
        return self.items_callback(offset, length)

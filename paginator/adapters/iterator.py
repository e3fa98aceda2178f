"""
Iterator adapter for re-iterable sources that only support iteration.

Useful for sets, dict views, generators wrapped in a reusable iterable, or
any custom iterable whose length is known up front.
"""

from itertools import islice
from typing import Generic, Iterable, TypeVar

from paginator.adapters.validation import validate_slice
from paginator.exceptions import InvalidArgumentError

T = TypeVar("T")


class IteratorAdapter(Generic[T]):
    """
    Adapter that slices an iterable with ``itertools.islice``.

    The iterable is iterated again for every ``get_items()`` call, so it
    must be re-iterable. Passing a one-shot iterator works only for the
    first page requested.
    """

    def __init__(self, iterable: Iterable[T], count: int | None = None):
        """
        Initialize iterator adapter.

        Args:
            iterable: Source of items.
            count: Total number of items. Required when the iterable does
                not support ``len()``.

        Raises:
            InvalidArgumentError: If count is missing for an unsized
                iterable, or negative.
        """
        if count is None:
            try:
                count = len(iterable)  # type: ignore[arg-type]
            except TypeError as ex:
                raise InvalidArgumentError(
                    f"{type(iterable).__name__} has no len(), "
                    "pass count explicitly"
                ) from ex
        if count < 0:
            raise InvalidArgumentError(f"Count must be >= 0, got {count}")

        self.iterable = iterable
        self._count = count

    def count(self) -> int:
        return self._count

    def get_items(self, offset: int, length: int) -> list[T]:
        validate_slice(offset, length)
        stop = min(offset + length, self._count)
        if stop <= offset:
            return []
        return list(islice(self.iterable, offset, stop))

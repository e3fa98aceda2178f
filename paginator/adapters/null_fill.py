"""Null-fill adapter: a count with no real items behind it."""

from paginator.adapters.validation import validate_slice
from paginator.exceptions import InvalidArgumentError


class NullFillAdapter:
    """
    Adapter returning ``None`` placeholders.

    Handy when only the page arithmetic matters, e.g. rendering a pager
    for a result set whose items are fetched elsewhere.
    """

    def __init__(self, count: int = 0):
        if count < 0:
            raise InvalidArgumentError(f"Count must be >= 0, got {count}")
        self._count = count

    def count(self) -> int:
        return self._count

    def get_items(self, offset: int, length: int) -> list[None]:
        validate_slice(offset, length)
        if offset >= self._count:
            return []
        return [None] * min(length, self._count - offset)

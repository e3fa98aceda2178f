"""
Protocol classes for structural subtyping (duck typing with type safety).

Protocols define interfaces without requiring explicit inheritance. Any class
that implements the required methods is considered compatible, so custom
adapters and scrolling styles need not subclass anything from this package.

Example:
    ```python
    from paginator import Paginator


    class RangeAdapter:
        def __init__(self, stop: int):
            self.stop = stop

        def count(self) -> int:
            return self.stop

        def get_items(self, offset: int, length: int) -> list[int]:
            return list(range(offset, min(offset + length, self.stop)))


    paginator = Paginator(RangeAdapter(95))
    ```
"""

from typing import TYPE_CHECKING, Protocol, Sequence, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from paginator.schemas import PageWindow

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Adapter(Protocol[T_co]):
    """
    Protocol for paginator data sources.

    An adapter is a read-only view over a collection. It must report a
    stable total count and return slices of the collection on demand.

    Type Parameters:
        T_co: The item type produced by the adapter.
    """

    def count(self) -> int:
        """
        Return the total number of items.

        Returns:
            Non-negative item count, stable for the adapter's lifetime.
        """
        ...

    def get_items(self, offset: int, length: int) -> Sequence[T_co]:
        """
        Return up to ``length`` items starting at ``offset``.

        Args:
            offset: 0-based index of the first item.
            length: Maximum number of items to return.

        Returns:
            Items in the requested slice, fewer when the slice runs past
            the end of the collection.

        Raises:
            OutOfRangeError: If offset is negative.
        """
        ...


@runtime_checkable
class ScrollingStyle(Protocol):
    """
    Protocol for scrolling styles.

    A scrolling style decides which page numbers a pager control shows. It
    is a pure computation over three integers.
    """

    def get_pages(
        self, current_page: int, page_count: int, page_range: int
    ) -> "PageWindow":
        """
        Compute the window of page numbers to display.

        Args:
            current_page: Current page number, already clamped to
                [1, page_count].
            page_count: Total number of pages (may be 0).
            page_range: Desired window width.

        Returns:
            PageWindow with the ``{page: page}`` mapping and the
            previous/next pointers.
        """
        ...

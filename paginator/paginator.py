"""
The Paginator: page arithmetic over an adapter.

The paginator never loads the whole collection. It asks the adapter for the
total count and for the single slice that makes up a page, and delegates
the pager window to a scrolling style.
"""

import math
from collections.abc import Sized
from typing import Any, Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from pydantic import TypeAdapter, ValidationError

from paginator.adapters.factory import AdapterRegistry, create_adapter
from paginator.constants import FIRST_ITEM_NUMBER, FIRST_PAGE_NUMBER
from paginator.exceptions import InvalidArgumentError
from paginator.logging import logger
from paginator.protocols import Adapter, ScrollingStyle
from paginator.schemas import Pages
from paginator.scrolling_styles.factory import (
    ScrollingStyleRegistry,
    select_scrolling_style,
)
from paginator.settings import app_settings

T = TypeVar("T")

ItemFilter = Callable[[Sequence[Any]], Sequence[Any]]

_int_adapter = TypeAdapter(int)
_items_adapter = TypeAdapter(list[Any])


def _validate_int(value: Any, name: str) -> int:
    """Coerce ``value`` to int or raise InvalidArgumentError."""
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    try:
        return _int_adapter.validate_python(value)
    except ValidationError as ex:
        raise InvalidArgumentError(
            f"{name} must be an integer, got {value!r}"
        ) from ex


class Paginator(Generic[T]):
    """
    Paginate any collection exposed through an adapter.

    Page numbers are 1-indexed. The requested current page is stored as
    given and clamped into ``[1, page_count]`` whenever it is read, so an
    out-of-range page number never fails.

    Example:
        ```python
        from paginator import ArrayAdapter, Paginator

        paginator = Paginator(ArrayAdapter(list(range(1, 102))))
        paginator.set_item_count_per_page(10).set_current_page_number(11)

        paginator.get_current_items()  # [101]
        pages = paginator.get_pages("Jumping")
        pages.pages_in_range  # {11: 11}
        pages.previous  # 10
        ```
    """

    def __init__(
        self,
        adapter: Adapter[T],
        *,
        item_count_per_page: int | None = None,
        current_page_number: int = FIRST_PAGE_NUMBER,
        page_range: int | None = None,
        scrolling_style: str | ScrollingStyle | None = None,
        scrolling_styles: ScrollingStyleRegistry | None = None,
        item_filter: ItemFilter | None = None,
    ):
        """
        Initialize the paginator.

        Args:
            adapter: Data source implementing count() and get_items().
            item_count_per_page: Items per page. Defaults to
                PAGINATOR_DEFAULT_ITEM_COUNT_PER_PAGE. Negative means all
                items on a single page.
            current_page_number: Requested page, clamped on read.
            page_range: Width of the pager window. Defaults to
                PAGINATOR_DEFAULT_PAGE_RANGE.
            scrolling_style: Style name or strategy. Defaults to
                PAGINATOR_DEFAULT_SCROLLING_STYLE.
            scrolling_styles: Registry used to resolve style names.
                Defaults to the shared registry.
            item_filter: Callable applied to the items of every page.

        Raises:
            InvalidArgumentError: If a numeric option is invalid.
            ScrollingStyleNotFoundError: If the scrolling style is unknown.
        """
        self._adapter = adapter
        self.item_filter = item_filter
        self._scrolling_styles = scrolling_styles
        self._page_count: int | None = None

        self.set_item_count_per_page(
            app_settings.DEFAULT_ITEM_COUNT_PER_PAGE
            if item_count_per_page is None
            else item_count_per_page
        )
        self.set_current_page_number(current_page_number)
        self.set_page_range(
            app_settings.DEFAULT_PAGE_RANGE if page_range is None else page_range
        )
        self.set_scrolling_style(
            app_settings.DEFAULT_SCROLLING_STYLE
            if scrolling_style is None
            else scrolling_style
        )

    @classmethod
    def factory(
        cls,
        data: Any,
        adapter: str | None = None,
        *,
        adapter_registry: AdapterRegistry | None = None,
        **options: Any,
    ) -> "Paginator[Any]":
        """
        Build a paginator straight from raw data.

        Args:
            data: Collection to paginate.
            adapter: Adapter name ("array", "iterator", "callback", "null",
                "select"). Guessed from the data type when omitted.
            adapter_registry: Registry to resolve adapter names in.
            **options: Keyword options for the adapter.

        Returns:
            Paginator with default settings over the new adapter.
        """
        return cls(
            create_adapter(data, adapter, registry=adapter_registry, **options)
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_item_count_per_page(self, item_count_per_page: Any) -> "Paginator[T]":
        """
        Set the number of items per page.

        Args:
            item_count_per_page: Non-zero integer. Negative values put all
                items on one page.

        Raises:
            InvalidArgumentError: If the value is zero or not an integer.
        """
        value = _validate_int(item_count_per_page, "Item count per page")
        if value == 0:
            raise InvalidArgumentError("Item count per page must not be 0")
        if value < 0:
            logger.debug(
                f"Item count per page is {value}, showing all items on one page"
            )

        self._item_count_per_page = value
        self._page_count = None
        return self

    def set_current_page_number(self, page_number: Any) -> "Paginator[T]":
        """
        Set the requested page number.

        Raises:
            InvalidArgumentError: If the value is not an integer.
        """
        self._current_page_number = _validate_int(page_number, "Page number")
        return self

    def set_page_range(self, page_range: Any) -> "Paginator[T]":
        """
        Set the width of the pager window used by scrolling styles.

        Raises:
            InvalidArgumentError: If the value is below 1 or not an integer.
        """
        value = _validate_int(page_range, "Page range")
        if value < 1:
            raise InvalidArgumentError(f"Page range must be >= 1, got {value}")

        self._page_range = value
        return self

    def set_scrolling_style(
        self, scrolling_style: str | ScrollingStyle
    ) -> "Paginator[T]":
        """
        Select the scrolling style used by get_pages().

        Raises:
            ScrollingStyleNotFoundError: If the style cannot be resolved.
        """
        self._scrolling_style = select_scrolling_style(
            scrolling_style, self._scrolling_styles
        )
        return self

    def set_filter(self, item_filter: ItemFilter | None) -> "Paginator[T]":
        self.item_filter = item_filter
        return self

    @property
    def adapter(self) -> Adapter[T]:
        return self._adapter

    @adapter.setter
    def adapter(self, adapter: Adapter[T]) -> None:
        """Swap the data source; the page count is recomputed on next read."""
        self._adapter = adapter
        self._page_count = None

    # ------------------------------------------------------------------
    # Counts
    # ------------------------------------------------------------------

    @property
    def total_item_count(self) -> int:
        return self.adapter.count()

    @property
    def item_count_per_page(self) -> int:
        """Effective items per page; the total when set to a negative value."""
        if self._item_count_per_page < 0:
            return self.total_item_count
        return self._item_count_per_page

    @property
    def page_count(self) -> int:
        if self._page_count is None:
            item_count_per_page = self.item_count_per_page
            if item_count_per_page > 0:
                self._page_count = math.ceil(
                    self.total_item_count / item_count_per_page
                )
            else:
                self._page_count = 0

        return self._page_count

    @property
    def current_page_number(self) -> int:
        page_number = self.normalize_page_number(self._current_page_number)
        if page_number != self._current_page_number:
            logger.debug(
                f"Page {self._current_page_number} clamped to {page_number}"
            )
        return page_number

    @property
    def page_range(self) -> int:
        return self._page_range

    @property
    def scrolling_style(self) -> ScrollingStyle:
        return self._scrolling_style

    def normalize_page_number(self, page_number: int) -> int:
        """
        Clamp a page number into ``[1, page_count]``.

        With no pages at all the result is always 1.
        """
        page_count = self.page_count
        if page_count == 0 or page_number < FIRST_PAGE_NUMBER:
            return FIRST_PAGE_NUMBER
        return min(page_number, page_count)

    def normalize_item_number(self, item_number: int) -> int:
        """Clamp an item number into ``[1, item_count_per_page]``."""
        item_number = max(item_number, FIRST_ITEM_NUMBER)
        item_count_per_page = self.item_count_per_page
        if item_count_per_page > 0:
            item_number = min(item_number, item_count_per_page)
        return item_number

    @staticmethod
    def get_item_count(items: Iterable[Any]) -> int:
        """Count a page of items, consuming it if it has no len()."""
        if isinstance(items, Sized):
            return len(items)
        return sum(1 for _ in items)

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def get_items_by_page(self, page_number: int) -> Sequence[T]:
        """
        Return the items of a page.

        Args:
            page_number: Page to fetch, clamped into ``[1, page_count]``.

        Returns:
            Items from the adapter, passed through the item filter if one
            is set.
        """
        page_number = self.normalize_page_number(page_number)
        item_count_per_page = self.item_count_per_page
        offset = (page_number - 1) * item_count_per_page

        items = self.adapter.get_items(offset, item_count_per_page)
        if self.item_filter is not None:
            items = self.item_filter(items)

        return items

    def get_current_items(self) -> Sequence[T]:
        return self.get_items_by_page(self.current_page_number)

    def get_current_item_count(self) -> int:
        return self.get_item_count(self.get_current_items())

    def get_item(self, item_number: int, page_number: int | None = None) -> T:
        """
        Return a single item of a page.

        Args:
            item_number: 1-indexed position in the page. Negative numbers
                count from the end of the page (-1 is the last item).
            page_number: Page to look in. Defaults to the current page.

        Raises:
            InvalidArgumentError: If the page is empty or does not hold
                that many items.
        """
        if page_number is None:
            page_number = self.current_page_number

        # Filters may return any iterable
        items = list(self.get_items_by_page(page_number))
        item_count = len(items)
        if item_count == 0:
            raise InvalidArgumentError(f"Page {page_number} does not exist")

        if item_number < 0:
            item_number = item_count + 1 + item_number

        item_number = self.normalize_item_number(item_number)
        if item_number > item_count:
            raise InvalidArgumentError(
                f"Page {page_number} does not contain item number {item_number}"
            )

        return items[item_number - 1]

    def get_absolute_item_number(
        self, relative_item_number: int, page_number: int | None = None
    ) -> int:
        """
        Convert a position within a page to a position in the collection.

        Both numbers are 1-indexed and clamped first.
        """
        relative_item_number = self.normalize_item_number(relative_item_number)
        if page_number is None:
            page_number = self.current_page_number
        page_number = self.normalize_page_number(page_number)

        return (page_number - 1) * self.item_count_per_page + relative_item_number

    # ------------------------------------------------------------------
    # Pager
    # ------------------------------------------------------------------

    def get_pages(self, scrolling_style: str | ScrollingStyle | None = None) -> Pages:
        """
        Compute everything needed to render a pager.

        Args:
            scrolling_style: Style name or strategy for this call only.
                Defaults to the paginator's scrolling style.

        Returns:
            Pages with the window from the scrolling style plus first/last
            pages and item numbers of the current page.

        Raises:
            ScrollingStyleNotFoundError: If the style name is unknown.
        """
        if scrolling_style is None:
            style = self._scrolling_style
        else:
            style = select_scrolling_style(scrolling_style, self._scrolling_styles)

        page_count = self.page_count
        current_page_number = self.current_page_number
        window = style.get_pages(current_page_number, page_count, self.page_range)

        pages: dict[str, Any] = {
            "page_count": page_count,
            "item_count_per_page": self.item_count_per_page,
            "total_item_count": self.total_item_count,
            "current": current_page_number,
            "first": FIRST_PAGE_NUMBER if page_count >= FIRST_PAGE_NUMBER else None,
            "last": page_count,
            "previous": window.previous,
            "next": window.next,
            "pages_in_range": window.pages_in_range,
        }

        if window.pages_in_range:
            pages["first_page_in_range"] = min(window.pages_in_range)
            pages["last_page_in_range"] = max(window.pages_in_range)

        if pages["total_item_count"] > 0:
            current_item_count = self.get_current_item_count()
            first_item_number = (
                current_page_number - 1
            ) * self.item_count_per_page + 1
            pages["current_item_count"] = current_item_count
            pages["first_item_number"] = first_item_number
            pages["last_item_number"] = first_item_number + current_item_count - 1

        return Pages(**pages)

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.page_count

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_current_items())

    def to_json(self) -> str:
        """Serialize the current items to a JSON array."""
        return _items_adapter.dump_json(list(self.get_current_items())).decode()

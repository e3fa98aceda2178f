"""
Pagination over arbitrary data sources.

Wrap a collection in an adapter, hand it to a Paginator, and ask for the
current page's items and the pager window of a scrolling style.

Example:
    ```python
    from paginator import Paginator

    paginator = Paginator.factory(list(range(1, 102)))
    paginator.set_item_count_per_page(10).set_current_page_number(3)

    paginator.get_current_items()  # [21, 22, ..., 30]
    paginator.get_pages("Jumping").pages_in_range  # {1: 1, ..., 10: 10}
    ```
"""

from paginator.adapters import (
    AdapterRegistry,
    ArrayAdapter,
    CallbackAdapter,
    IteratorAdapter,
    NullFillAdapter,
    SelectAdapter,
    create_adapter,
)
from paginator.exceptions import (
    AdapterNotFoundError,
    InvalidArgumentError,
    NotFoundError,
    OutOfRangeError,
    PaginatorError,
    ScrollingStyleNotFoundError,
)
from paginator.paginator import Paginator
from paginator.protocols import Adapter, ScrollingStyle
from paginator.schemas import Pages, PageWindow
from paginator.scrolling_styles import (
    AllScrollingStyle,
    ElasticScrollingStyle,
    JumpingScrollingStyle,
    ScrollingStyleRegistry,
    SlidingScrollingStyle,
    select_scrolling_style,
)

__all__ = [
    "Adapter",
    "AdapterNotFoundError",
    "AdapterRegistry",
    "AllScrollingStyle",
    "ArrayAdapter",
    "CallbackAdapter",
    "ElasticScrollingStyle",
    "InvalidArgumentError",
    "IteratorAdapter",
    "JumpingScrollingStyle",
    "NotFoundError",
    "NullFillAdapter",
    "OutOfRangeError",
    "PageWindow",
    "Pages",
    "Paginator",
    "PaginatorError",
    "ScrollingStyle",
    "ScrollingStyleNotFoundError",
    "ScrollingStyleRegistry",
    "SelectAdapter",
    "SlidingScrollingStyle",
    "create_adapter",
    "select_scrolling_style",
]

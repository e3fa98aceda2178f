"""
Scrolling styles for pager controls.

A scrolling style turns (current page, page count, page range) into the
window of page numbers a pager displays. Each style is an independent
strategy class; the registry resolves them by name.

Example:
    ```python
    from paginator.scrolling_styles import select_scrolling_style

    style = select_scrolling_style("Jumping")
    window = style.get_pages(current_page=2, page_count=11, page_range=10)
    # window.pages_in_range == {1: 1, 2: 2, ..., 10: 10}
    ```
"""

from paginator.scrolling_styles.all import AllScrollingStyle
from paginator.scrolling_styles.elastic import ElasticScrollingStyle
from paginator.scrolling_styles.factory import (
    ScrollingStyleRegistry,
    scrolling_styles,
    select_scrolling_style,
)
from paginator.scrolling_styles.jumping import JumpingScrollingStyle
from paginator.scrolling_styles.sliding import SlidingScrollingStyle

__all__ = [
    "AllScrollingStyle",
    "ElasticScrollingStyle",
    "JumpingScrollingStyle",
    "SlidingScrollingStyle",
    "ScrollingStyleRegistry",
    "scrolling_styles",
    "select_scrolling_style",
]

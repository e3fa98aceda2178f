"""
Sliding scrolling style (window centred on the current page).

Like search engine pagers: the window keeps the current page near its middle
and only stops moving when it hits the first or last page.
"""

import math

from paginator.schemas import PageWindow
from paginator.scrolling_styles.validation import validate_page_range


class SlidingScrollingStyle:
    """
    Keep the current page in the middle of a window of ``page_range`` pages.

    The window is at most ``page_count`` wide and is pinned to the start or
    the end of the page space near the edges.
    """

    def get_pages(
        self, current_page: int, page_count: int, page_range: int
    ) -> PageWindow:
        """
        Compute the sliding window for the current page.

        Args:
            current_page: Current page number (1-indexed).
            page_count: Total number of pages.
            page_range: Width of the window.

        Returns:
            PageWindow with at most ``min(page_range, page_count)`` pages.

        Raises:
            InvalidArgumentError: If page_range is below 1.
        """
        validate_page_range(page_range)
        page_range = min(page_range, page_count)
        if page_range < 1:
            # No pages to show
            return PageWindow.from_bounds(1, 0, current_page, page_count)

        delta = math.ceil(page_range / 2)

        if current_page - delta > page_count - page_range:
            # Pinned to the last page
            lower_bound = page_count - page_range + 1
            upper_bound = page_count
        else:
            if current_page - delta < 0:
                delta = current_page

            offset = current_page - delta
            lower_bound = offset + 1
            upper_bound = offset + page_range

        return PageWindow.from_bounds(
            lower_bound, upper_bound, current_page, page_count
        )

"""
Elastic scrolling style (Google-like growing window).

A sliding window whose width grows as the user moves away from the first
page and shrinks again towards the last page.
"""

from paginator.schemas import PageWindow
from paginator.scrolling_styles.sliding import SlidingScrollingStyle
from paginator.scrolling_styles.validation import validate_page_range


class ElasticScrollingStyle:
    """
    Sliding window between ``page_range`` and ``2 * page_range - 1`` wide.

    On page 1 the window is ``page_range`` pages wide. Each page forward
    adds one page to the window until it reaches ``2 * page_range - 1``;
    near the end it contracts symmetrically.
    """

    def __init__(self, sliding: SlidingScrollingStyle | None = None):
        self.sliding = sliding or SlidingScrollingStyle()

    def get_pages(
        self, current_page: int, page_count: int, page_range: int
    ) -> PageWindow:
        validate_page_range(page_range)
        original_page_range = page_range
        page_range = page_range * 2 - 1

        if original_page_range + current_page - 1 < page_range:
            page_range = original_page_range + current_page - 1
        elif original_page_range + current_page - 1 > page_count:
            page_range = original_page_range + page_count - current_page

        # An empty page space can shrink the window to nothing
        page_range = max(page_range, 1)

        return self.sliding.get_pages(current_page, page_count, page_range)

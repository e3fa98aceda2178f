"""
Jumping scrolling style (fixed, non-overlapping windows).

The page space is cut into consecutive windows of ``page_range`` pages and
the whole window containing the current page is shown. Moving past the edge
of a window jumps to the next one instead of sliding by a single page.
"""

from paginator.schemas import PageWindow
from paginator.scrolling_styles.validation import validate_page_range


class JumpingScrollingStyle:
    """
    Show the fixed window that contains the current page.

    With 11 pages and a range of 10, pages 1 to 10 all display
    ``1 2 ... 10`` and page 11 displays just ``11``.

    Example:
        ```python
        style = JumpingScrollingStyle()
        window = style.get_pages(current_page=11, page_count=11, page_range=10)
        assert window.pages_in_range == {11: 11}
        assert window.previous == 10
        assert window.next is None
        ```
    """

    def get_pages(
        self, current_page: int, page_count: int, page_range: int
    ) -> PageWindow:
        """
        Compute the jumping window for the current page.

        Args:
            current_page: Current page number (1-indexed).
            page_count: Total number of pages.
            page_range: Width of each window.

        Returns:
            PageWindow covering ``[lower_bound, upper_bound]``.

        Raises:
            InvalidArgumentError: If page_range is below 1.
        """
        validate_page_range(page_range)
        window_index = (current_page - 1) // page_range
        lower_bound = window_index * page_range + 1
        upper_bound = min(lower_bound + page_range - 1, page_count)

        return PageWindow.from_bounds(
            lower_bound, upper_bound, current_page, page_count
        )

"""All scrolling style: every page is in the window."""

from paginator.schemas import PageWindow
from paginator.scrolling_styles.validation import validate_page_range


class AllScrollingStyle:
    """Show every page regardless of the page range."""

    def get_pages(
        self, current_page: int, page_count: int, page_range: int
    ) -> PageWindow:
        validate_page_range(page_range)
        return PageWindow.from_bounds(1, page_count, current_page, page_count)

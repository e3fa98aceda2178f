"""Argument checks shared by the built-in scrolling styles."""

from paginator.exceptions import InvalidArgumentError


def validate_page_range(page_range: int) -> None:
    """
    Validate the ``page_range`` argument of ``ScrollingStyle.get_pages()``.

    Raises:
        InvalidArgumentError: If page_range is below 1.
    """
    if page_range < 1:
        raise InvalidArgumentError(f"Page range must be >= 1, got {page_range}")

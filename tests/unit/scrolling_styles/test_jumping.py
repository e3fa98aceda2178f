"""
Tests for the jumping scrolling style.

Covers the reference windows for 101 items at 10 per page (11 pages) and
the window invariants over a grid of page counts and ranges.
"""

import pytest

from paginator.scrolling_styles.jumping import JumpingScrollingStyle

EXPECTED_FIRST_WINDOW = {page: page for page in range(1, 11)}


class TestJumpingWindows:
    """Tests for JumpingScrollingStyle.get_pages() on 11 pages, range 10."""

    def setup_method(self):
        self.style = JumpingScrollingStyle()

    def test_first_page(self):
        """Test first page shows the first window and no previous page."""
        window = self.style.get_pages(1, 11, 10)

        assert window.pages_in_range == EXPECTED_FIRST_WINDOW
        assert window.previous is None
        assert window.next == 2

    def test_second_page(self):
        """Test second page stays in the first window."""
        window = self.style.get_pages(2, 11, 10)

        assert window.pages_in_range == EXPECTED_FIRST_WINDOW
        assert window.previous == 1
        assert window.next == 3

    def test_middle_page(self):
        window = self.style.get_pages(6, 11, 10)

        assert window.pages_in_range == EXPECTED_FIRST_WINDOW
        assert window.previous == 5
        assert window.next == 7

    def test_second_last_page(self):
        """Test last page of the first window does not jump early."""
        window = self.style.get_pages(10, 11, 10)

        assert window.pages_in_range == EXPECTED_FIRST_WINDOW
        assert window.previous == 9
        assert window.next == 11

    def test_last_page(self):
        """Test last page jumps to a short trailing window."""
        window = self.style.get_pages(11, 11, 10)

        assert window.pages_in_range == {11: 11}
        assert window.previous == 10
        assert window.next is None

    def test_window_keys_are_page_numbers(self):
        window = self.style.get_pages(11, 11, 10)

        assert list(window.pages_in_range.keys()) == [11]
        assert list(window.pages_in_range.values()) == [11]

    def test_fewer_pages_than_range(self):
        """Test a single window [1, N] when N <= page range."""
        for current_page in range(1, 5):
            window = self.style.get_pages(current_page, 4, 10)
            assert window.pages_in_range == {1: 1, 2: 2, 3: 3, 4: 4}

    def test_no_pages(self):
        """Test empty page space gives an empty window."""
        window = self.style.get_pages(1, 0, 10)

        assert window.pages_in_range == {}
        assert window.previous is None
        assert window.next is None

    def test_page_count_multiple_of_range(self):
        window = self.style.get_pages(20, 20, 5)

        assert window.pages_in_range == {16: 16, 17: 17, 18: 18, 19: 19, 20: 20}

    def test_repeated_calls_are_identical(self):
        assert self.style.get_pages(7, 30, 4) == self.style.get_pages(7, 30, 4)


class TestJumpingInvariants:
    """Window invariants for every current page of many page spaces."""

    @pytest.mark.parametrize("page_range", [1, 2, 3, 5, 7, 10])
    @pytest.mark.parametrize("page_count", [1, 2, 9, 10, 11, 24, 25])
    def test_window_invariants(self, page_count, page_range):
        """
        Test window contains the current page and stays aligned.

        The lower bound is always 1 mod page_range, the upper bound never
        passes the last page and the window is never wider than the range.
        """
        style = JumpingScrollingStyle()

        for current_page in range(1, page_count + 1):
            window = style.get_pages(current_page, page_count, page_range)
            pages = list(window.pages_in_range)

            assert current_page in window.pages_in_range
            assert len(pages) <= page_range
            assert pages[0] % page_range == 1 % page_range
            assert pages[-1] <= page_count
            assert pages == list(range(pages[0], pages[-1] + 1))

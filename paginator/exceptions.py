"""
Custom exception classes for the paginator.

This module defines the exceptions raised by adapters, scrolling styles and
the paginator itself. Each one also inherits from the closest builtin so
callers can catch either.
"""


class PaginatorError(Exception):
    """
    Base class for every paginator error.
    """

    pass


class InvalidArgumentError(PaginatorError, ValueError):
    """
    Invalid configuration value.

    Raised for zero or non-numeric item counts per page, page ranges below
    one, and item or page numbers that do not exist.
    """

    pass


class OutOfRangeError(PaginatorError, IndexError):
    """
    Adapter offset out of range.

    Raised when an adapter is asked for items at a negative offset.
    """

    pass


class NotFoundError(PaginatorError, LookupError):
    """
    Named plugin lookup failed.
    """

    pass


class ScrollingStyleNotFoundError(NotFoundError):
    """
    Scrolling style name is not registered.
    """

    pass


class AdapterNotFoundError(NotFoundError):
    """
    Adapter name is not registered.
    """

    pass

"""Argument checks shared by the built-in adapters."""

from paginator.exceptions import InvalidArgumentError, OutOfRangeError


def validate_slice(offset: int, length: int) -> None:
    """
    Validate the arguments of ``Adapter.get_items()``.

    Raises:
        OutOfRangeError: If offset is negative.
        InvalidArgumentError: If length is negative.
    """
    if offset < 0:
        raise OutOfRangeError(f"Offset must be >= 0, got {offset}")
    if length < 0:
        raise InvalidArgumentError(f"Length must be >= 0, got {length}")

"""
Adapter registry and factory.

Maps adapter names to adapter classes and builds adapters from raw data,
either by name or by inspecting the data's type.
"""

from collections.abc import Iterable, Sequence
from typing import Any, Callable

from paginator.adapters.array import ArrayAdapter
from paginator.adapters.callback import CallbackAdapter
from paginator.adapters.iterator import IteratorAdapter
from paginator.adapters.null_fill import NullFillAdapter
from paginator.adapters.select import SelectAdapter
from paginator.constants import (
    ADAPTER_ARRAY,
    ADAPTER_CALLBACK,
    ADAPTER_ITERATOR,
    ADAPTER_NULL,
    ADAPTER_SELECT,
)
from paginator.exceptions import AdapterNotFoundError, InvalidArgumentError
from paginator.logging import logger
from paginator.protocols import Adapter


class AdapterRegistry:
    """
    Registry of named adapter factories.

    A factory is any callable that builds an adapter from the data plus
    keyword options, usually the adapter class itself.
    """

    def __init__(
        self, factories: dict[str, Callable[..., Adapter]] | None = None
    ):
        self._factories: dict[str, Callable[..., Adapter]] = {}

        if factories is None:
            factories = {
                ADAPTER_ARRAY: ArrayAdapter,
                ADAPTER_CALLBACK: CallbackAdapter,
                ADAPTER_ITERATOR: IteratorAdapter,
                ADAPTER_NULL: NullFillAdapter,
                ADAPTER_SELECT: SelectAdapter,
            }
        for name, factory in factories.items():
            self.register(name, factory)

    @staticmethod
    def normalize(name: str) -> str:
        return name.strip().lower()

    def register(self, name: str, factory: Callable[..., Adapter]) -> None:
        self._factories[self.normalize(name)] = factory

    def has(self, name: str) -> bool:
        return self.normalize(name) in self._factories

    def names(self) -> list[str]:
        return sorted(self._factories)

    def get(self, name: str) -> Callable[..., Adapter]:
        """
        Resolve an adapter factory by name.

        Raises:
            AdapterNotFoundError: If no adapter is registered under the name.
        """
        key = self.normalize(name)
        if key not in self._factories:
            raise AdapterNotFoundError(
                f"Adapter '{name}' not found, "
                f"available: {', '.join(self.names())}"
            )
        return self._factories[key]

    def build(self, name: str, *args: Any, **options: Any) -> Adapter:
        """Build the adapter registered under ``name``."""
        logger.debug(f"Building '{self.normalize(name)}' adapter")
        return self.get(name)(*args, **options)


# Shared registry used by Paginator.factory unless another one is injected
adapters = AdapterRegistry()


def guess_adapter_name(data: Any) -> str:
    """
    Pick an adapter name from the type of ``data``.

    Decision logic:
    - Sequence (list, tuple, range, ...) → "array"
    - Integer → "null" (count only)
    - Any other iterable → "iterator"

    Raises:
        InvalidArgumentError: If no adapter fits the data.
    """
    # bool is an int subclass but never a meaningful count
    if isinstance(data, bool):
        raise InvalidArgumentError("Cannot paginate a bool")
    if isinstance(data, (str, bytes)):
        raise InvalidArgumentError(
            f"Cannot paginate {type(data).__name__} data, "
            "wrap it in a list first"
        )
    if isinstance(data, Sequence):
        return ADAPTER_ARRAY
    if isinstance(data, int):
        return ADAPTER_NULL
    if isinstance(data, Iterable):
        return ADAPTER_ITERATOR

    raise InvalidArgumentError(
        f"No adapter available for {type(data).__name__}"
    )


def create_adapter(
    data: Any,
    adapter: str | None = None,
    registry: AdapterRegistry | None = None,
    **options: Any,
) -> Adapter:
    """
    Build an adapter for ``data``.

    Args:
        data: The collection to paginate. Passed as the first positional
            argument to the adapter factory.
        adapter: Adapter name. Guessed from the data when omitted.
        registry: Registry to resolve names in. Defaults to the shared one.
        **options: Extra keyword arguments for the adapter factory, such
            as ``count`` for the iterator adapter.

    Returns:
        The adapter instance.

    Raises:
        AdapterNotFoundError: If the adapter name is unknown.
        InvalidArgumentError: If no adapter name was given and none fits.

    Example:
        ```python
        create_adapter([1, 2, 3])  # ArrayAdapter
        create_adapter(500)  # NullFillAdapter
        create_adapter({"a", "b"})  # IteratorAdapter
        create_adapter(query, "select", session=session)  # SelectAdapter
        ```
    """
    if adapter is None:
        adapter = guess_adapter_name(data)

    registry = registry or adapters
    if registry.normalize(adapter) == ADAPTER_SELECT:
        # SelectAdapter takes the session first
        session = options.pop("session", None)
        if session is None:
            raise InvalidArgumentError(
                "The select adapter requires a 'session' option"
            )
        return registry.build(adapter, session, data, **options)

    return registry.build(adapter, data, **options)

"""
Data source adapters for the paginator.

Every adapter implements the ``paginator.protocols.Adapter`` protocol:
``count()`` and ``get_items(offset, length)``. None of them share a base
class; the registry resolves them by name.
"""

from paginator.adapters.array import ArrayAdapter
from paginator.adapters.callback import CallbackAdapter
from paginator.adapters.factory import (
    AdapterRegistry,
    adapters,
    create_adapter,
    guess_adapter_name,
)
from paginator.adapters.iterator import IteratorAdapter
from paginator.adapters.null_fill import NullFillAdapter
from paginator.adapters.select import SelectAdapter

__all__ = [
    "ArrayAdapter",
    "CallbackAdapter",
    "IteratorAdapter",
    "NullFillAdapter",
    "SelectAdapter",
    "AdapterRegistry",
    "adapters",
    "create_adapter",
    "guess_adapter_name",
]

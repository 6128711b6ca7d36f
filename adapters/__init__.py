"""
Lotman Adapters.

Implementations of protocols for inventory and lot stores.
"""

from lotman.adapters.loader import (
    get_inventory_provider,
    get_lot_provider,
    reset_providers,
)
from lotman.adapters.memory import InMemoryInventoryProvider, InMemoryLotProvider

__all__ = [
    "InMemoryInventoryProvider",
    "InMemoryLotProvider",
    "get_inventory_provider",
    "get_lot_provider",
    "reset_providers",
]

"""
Lotman Protocols.

Defines interfaces for the external stores the selector reads from.
"""

from lotman.protocols.inventory import InventoryProvider, InventoryRecord
from lotman.protocols.lots import LotInfo, LotProvider

__all__ = [
    "InventoryProvider",
    "InventoryRecord",
    "LotInfo",
    "LotProvider",
]

"""
Lotman Models.

Core models for lot-level inventory:
- Warehouse: Where stock exists
- Lot: Traceable batch of a product (creation + expiry dates)
- InventoryRecord: Quantity of a lot at a warehouse
"""

from lotman.models.enums import LotStrategy, QualityStatus
from lotman.models.inventory import InventoryRecord
from lotman.models.lot import Lot
from lotman.models.warehouse import Warehouse

__all__ = [
    'LotStrategy',
    'QualityStatus',
    'Warehouse',
    'Lot',
    'InventoryRecord',
]

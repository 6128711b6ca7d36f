"""
Inventory Snapshot Protocol — Interface for reading lot-level stock.

Lotman defines this protocol; the inventory store (the ORM adapter, an
in-memory snapshot, or another system) implements it. Implementations only
read: reserving or deducting stock is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class InventoryRecord:
    """
    Point-in-time stock of one lot of a product at a warehouse.

    ``lot_created_at`` and ``expiry_date`` come from the referenced lot and
    drive FIFO and FEFO ordering respectively.
    """

    warehouse_id: Any
    product_id: Any
    lot_id: Any
    lot_no: str
    available_quantity: Decimal
    lot_created_at: datetime
    expiry_date: date | None = None
    reserved_quantity: Decimal = Decimal('0')


@runtime_checkable
class InventoryProvider(Protocol):
    """
    Protocol for inventory snapshots.

    Implementations should provide methods to:
    - List every record of a product at a warehouse with stock available
    - Find the record of one specific lot
    """

    def list_available(self, warehouse_id, product_id) -> list[InventoryRecord]:
        """
        Records for (warehouse, product) with available_quantity > 0.

        Args:
            warehouse_id: Warehouse identifier
            product_id: Product identifier

        Returns:
            List of InventoryRecord, in no particular order
        """
        ...

    def find_one(self, warehouse_id, product_id, lot_id) -> InventoryRecord | None:
        """
        Record for (warehouse, product, lot).

        Args:
            warehouse_id: Warehouse identifier
            product_id: Product identifier
            lot_id: Lot identifier

        Returns:
            InventoryRecord or None if the lot has no record there
        """
        ...

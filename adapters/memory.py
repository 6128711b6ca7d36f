"""
In-memory Providers — snapshot adapters for development and testing.

These adapters implement the InventoryProvider and LotProvider protocols
over plain Python values. Useful for:

- Unit tests of the selection engine without a database
- Callers that already loaded a snapshot from another system
- Local development without inventory data

Usage:
    inventory = InMemoryInventoryProvider([record1, record2])
    selector = LotSelector(inventory=inventory, lots=InMemoryLotProvider())
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from lotman.protocols.inventory import InventoryRecord
from lotman.protocols.lots import LotInfo


class InMemoryInventoryProvider:
    """InventoryProvider over a list of InventoryRecord snapshots."""

    def __init__(self, records: Iterable[InventoryRecord] = ()):
        self.records = list(records)

    def add(self, record: InventoryRecord) -> None:
        self.records.append(record)

    def list_available(self, warehouse_id, product_id) -> list[InventoryRecord]:
        return [
            r for r in self.records
            if r.warehouse_id == warehouse_id
            and r.product_id == product_id
            and r.available_quantity > 0
        ]

    def find_one(self, warehouse_id, product_id, lot_id) -> InventoryRecord | None:
        for r in self.records:
            if (r.warehouse_id, r.product_id, r.lot_id) == (warehouse_id, product_id, lot_id):
                return r
        return None


class InMemoryLotProvider:
    """LotProvider over a list of LotInfo values."""

    def __init__(self, lots: Iterable[LotInfo] = ()):
        self.lots = list(lots)

    def add(self, lot: LotInfo) -> None:
        self.lots.append(lot)

    def find_active_expiring_before(self, tenant_id: str, before: date) -> list[LotInfo]:
        return [
            lot for lot in self.lots
            if lot.tenant_id == tenant_id
            and lot.is_active
            and lot.expiry_date is not None
            and lot.expiry_date < before
        ]

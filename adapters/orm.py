"""
ORM Adapters — providers backed by Lotman's own models.

Default backends (see conf.LotmanSettings). Each query returns flat
snapshots; model instances never reach the selection engine.

Usage in settings.py:
    LOTMAN = {
        "INVENTORY_PROVIDER": "lotman.adapters.orm.OrmInventoryProvider",
        "LOT_PROVIDER": "lotman.adapters.orm.OrmLotProvider",
    }
"""

from __future__ import annotations

from datetime import date

from lotman.models.inventory import InventoryRecord
from lotman.models.lot import Lot
from lotman.protocols.inventory import InventoryRecord as InventorySnapshot
from lotman.protocols.lots import LotInfo


class OrmInventoryProvider:
    """InventoryProvider reading lotman.InventoryRecord rows."""

    def list_available(self, warehouse_id, product_id) -> list[InventorySnapshot]:
        records = (
            InventoryRecord.objects
            .at(warehouse_id, product_id)
            .available()
            .select_related('lot')
        )
        return [record.snapshot() for record in records]

    def find_one(self, warehouse_id, product_id, lot_id) -> InventorySnapshot | None:
        record = (
            InventoryRecord.objects
            .at(warehouse_id, product_id)
            .filter(lot_id=lot_id)
            .select_related('lot')
            .first()
        )
        return record.snapshot() if record else None


class OrmLotProvider:
    """LotProvider reading lotman.Lot rows."""

    def find_active_expiring_before(self, tenant_id: str, before: date) -> list[LotInfo]:
        lots = (
            Lot.objects
            .for_tenant(tenant_id)
            .active()
            .expiring_before(before)
            .order_by('expiry_date', 'pk')
        )
        return [lot.info() for lot in lots]

"""
Lot ordering — isolated, testable, reusable.

Decides the order in which lots are consumed. Every key ends with lot_id,
so two calls over the same snapshot always produce the same plan.

Examples:
    - FIFO: lot received 10 days ago before lot received yesterday
    - FEFO: lot expiring in March before lot expiring in June
    - FEFO: lot with no expiry date after every dated lot
"""

from datetime import date

from lotman.protocols.inventory import InventoryRecord


def fifo_key(record: InventoryRecord):
    """Oldest lot first (creation timestamp, then lot id)."""
    return (record.lot_created_at, record.lot_id)


def fefo_key(record: InventoryRecord):
    """
    Soonest-to-expire lot first.

    Lots without an expiry date never expire: they sort after every dated
    lot, whatever their creation date, and among themselves by lot id.
    """
    if record.expiry_date is None:
        return (1, date.max, record.lot_id)
    return (0, record.expiry_date, record.lot_id)


def order_fifo(records) -> list[InventoryRecord]:
    return sorted(records, key=fifo_key)


def order_fefo(records) -> list[InventoryRecord]:
    return sorted(records, key=fefo_key)

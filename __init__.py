"""
Django Lotman — Lot selection engine (FIFO / FEFO / pinned lot).

Decides which lots satisfy a requested quantity and how much to take from
each. Deducting or reserving the stock stays with the caller.

Uso:
    from lotman import selector, InsufficientStock

    plan = selector.select_lots_by_fifo('TEST001', warehouse_id, product_id, 200)
    plan.lot_ids  # [1, 2]
    selector.find_expiring_lots('TEST001', 30)
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'selector':
        from lotman.service import LotSelector
        return LotSelector()
    elif name == 'LotSelector':
        from lotman.service import LotSelector
        return LotSelector
    elif name == 'LotNotFound':
        from lotman.exceptions import LotNotFound
        return LotNotFound
    elif name == 'InsufficientStock':
        from lotman.exceptions import InsufficientStock
        return InsufficientStock
    elif name == 'InvalidQuantity':
        from lotman.exceptions import InvalidQuantity
        return InvalidQuantity
    elif name == 'AllocationPlan':
        from lotman.services.allocation import AllocationPlan
        return AllocationPlan
    elif name == 'LotAllocation':
        from lotman.services.allocation import LotAllocation
        return LotAllocation
    elif name == 'LotStrategy':
        from lotman.models.enums import LotStrategy
        return LotStrategy
    elif name == 'Warehouse':
        from lotman.models.warehouse import Warehouse
        return Warehouse
    elif name == 'Lot':
        from lotman.models.lot import Lot
        return Lot
    elif name == 'InventoryRecord':
        from lotman.models.inventory import InventoryRecord
        return InventoryRecord
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'selector',
    'LotSelector',
    'LotNotFound',
    'InsufficientStock',
    'InvalidQuantity',
    'AllocationPlan',
    'LotAllocation',
    'LotStrategy',
    'Warehouse',
    'Lot',
    'InventoryRecord',
]

__version__ = '0.1.0'

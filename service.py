"""
Lot Selector — The single public interface for lot selection.

Usage:
    from lotman import selector, InsufficientStock

    plan = selector.select_lots_by_fefo('TEST001', warehouse_id, product_id, Decimal('300'))
    for allocation in plan:
        print(allocation.lot_no, allocation.allocated_quantity)

    selector.select_specific_lot('TEST001', warehouse_id, product_id, lot_id, Decimal('50'))
    selector.find_expiring_lots('TEST001', 30)
"""

import logging
from collections.abc import Iterator
from datetime import date

from lotman.adapters.loader import get_inventory_provider, get_lot_provider
from lotman.exceptions import InsufficientStock, LotNotFound
from lotman.models.enums import LotStrategy
from lotman.ordering import order_fefo, order_fifo
from lotman.protocols.inventory import InventoryProvider
from lotman.protocols.lots import LotInfo, LotProvider
from lotman.quantities import to_positive_quantity, to_quantity
from lotman.services.allocation import AllocationPlan, LotAllocation, allocate
from lotman.services.expiry import find_expiring_lots

logger = logging.getLogger('lotman')


class LotSelector:
    """
    Single interface for lot selection.

    Parameter convention: (tenant_id, warehouse_id, product_id, ..., quantity)

    Every method is a pure read over a snapshot taken from the providers:
    no writes, no locks. Two callers may get overlapping plans for the same
    lots; the caller must commit the plan under its own locking (e.g.
    select_for_update on the inventory rows) or re-validate at commit time.

    Providers default to the ones configured in settings.LOTMAN and are
    resolved on first use.
    """

    def __init__(self, inventory: InventoryProvider | None = None,
                 lots: LotProvider | None = None):
        self._inventory = inventory
        self._lots = lots

    @property
    def inventory(self) -> InventoryProvider:
        return self._inventory if self._inventory is not None else get_inventory_provider()

    @property
    def lots(self) -> LotProvider:
        return self._lots if self._lots is not None else get_lot_provider()

    # ══════════════════════════════════════════════════════════════
    # CORE: STRATEGIES
    # ══════════════════════════════════════════════════════════════

    def select_lots_by_fifo(self, tenant_id: str, warehouse_id, product_id,
                            required_quantity) -> AllocationPlan:
        """
        Select lots oldest first.

        Args:
            tenant_id: Tenant identifier (for logging/auditing)
            warehouse_id: Warehouse to pick from
            product_id: Product to pick
            required_quantity: Positive quantity (Decimal, int or str)

        Returns:
            AllocationPlan ordered by lot creation (ties: lot id)

        Raises:
            InvalidQuantity: If required_quantity is not positive
            InsufficientStock: If all lots together hold less than required
        """
        return self._select(LotStrategy.FIFO, tenant_id, warehouse_id,
                            product_id, required_quantity)

    def select_lots_by_fefo(self, tenant_id: str, warehouse_id, product_id,
                            required_quantity) -> AllocationPlan:
        """
        Select lots soonest-to-expire first.

        Lots without expiry date go after every dated lot.

        Returns:
            AllocationPlan ordered by expiry date (ties: lot id)

        Raises:
            InvalidQuantity: If required_quantity is not positive
            InsufficientStock: If all lots together hold less than required
        """
        return self._select(LotStrategy.FEFO, tenant_id, warehouse_id,
                            product_id, required_quantity)

    def select_lots(self, strategy, tenant_id: str, warehouse_id, product_id,
                    required_quantity) -> AllocationPlan:
        """
        Select lots with the given strategy ('fifo' or 'fefo').

        Raises:
            ValueError: If strategy is unknown
        """
        return self._select(LotStrategy(strategy), tenant_id, warehouse_id,
                            product_id, required_quantity)

    # ══════════════════════════════════════════════════════════════
    # CORE: PINNED LOT
    # ══════════════════════════════════════════════════════════════

    def select_specific_lot(self, tenant_id: str, warehouse_id, product_id,
                            lot_id, required_quantity) -> LotAllocation:
        """
        Allocate the whole quantity from one lot chosen by the user.

        No other lot is consulted, even if together they would suffice.

        Returns:
            LotAllocation with allocated_quantity == required_quantity

        Raises:
            InvalidQuantity: If required_quantity is not positive
            LotNotFound: If the lot has no inventory record at the warehouse
            InsufficientStock: If the lot holds less than required
        """
        required = to_positive_quantity(required_quantity)

        logger.info(
            "lots.specific",
            extra={
                "tenant_id": tenant_id,
                "warehouse_id": warehouse_id,
                "product_id": product_id,
                "lot_id": lot_id,
                "requested": str(required),
            },
        )

        record = self.inventory.find_one(warehouse_id, product_id, lot_id)

        if record is None:
            raise LotNotFound(warehouse_id, product_id, lot_id)

        available = to_quantity(record.available_quantity)
        if available < required:
            logger.warning(
                "lots.insufficient",
                extra={
                    "strategy": "specific",
                    "warehouse_id": warehouse_id,
                    "product_id": product_id,
                    "lot_id": lot_id,
                    "requested": str(required),
                    "available": str(available),
                },
            )
            raise InsufficientStock(
                warehouse_id=warehouse_id,
                product_id=product_id,
                lot_id=lot_id,
                requested=required,
                available=available,
            )

        return LotAllocation(
            lot_id=record.lot_id,
            lot_no=record.lot_no,
            allocated_quantity=required,
            available_quantity=available,
            expiry_date=record.expiry_date,
        )

    # ══════════════════════════════════════════════════════════════
    # REPORTS
    # ══════════════════════════════════════════════════════════════

    def find_expiring_lots(self, tenant_id: str, days_until_expiry: int | None = None,
                           today: date | None = None) -> Iterator[LotInfo]:
        """
        Active lots expiring strictly before today + days_until_expiry.

        Does not affect allocation; meant for planning FEFO consumption.
        """
        return find_expiring_lots(self.lots, tenant_id, days_until_expiry, today)

    # ══════════════════════════════════════════════════════════════
    # INTERNAL
    # ══════════════════════════════════════════════════════════════

    def _select(self, strategy: LotStrategy, tenant_id, warehouse_id,
                product_id, required_quantity) -> AllocationPlan:
        required = to_positive_quantity(required_quantity)

        logger.info(
            "lots.select",
            extra={
                "strategy": strategy.value,
                "tenant_id": tenant_id,
                "warehouse_id": warehouse_id,
                "product_id": product_id,
                "requested": str(required),
            },
        )

        records = self.inventory.list_available(warehouse_id, product_id)
        ordered = order_fefo(records) if strategy == LotStrategy.FEFO else order_fifo(records)

        plan = allocate(ordered, required, strategy.value,
                        warehouse_id=warehouse_id, product_id=product_id)

        logger.info(
            "lots.allocated",
            extra={
                "strategy": strategy.value,
                "tenant_id": tenant_id,
                "lots": len(plan),
                "total": str(plan.total),
            },
        )
        return plan

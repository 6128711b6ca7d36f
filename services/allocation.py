"""
Lot allocation — greedy consumption over an ordered snapshot.

Pure functions: no database, no locking, no writes. Callers turn the
returned plan into reservations/deductions inside their own transaction.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from lotman.exceptions import InsufficientStock
from lotman.protocols.inventory import InventoryRecord
from lotman.quantities import ZERO, to_quantity

logger = logging.getLogger('lotman')


@dataclass(frozen=True)
class LotAllocation:
    """Quantity taken from one lot."""

    lot_id: Any
    lot_no: str
    allocated_quantity: Decimal
    available_quantity: Decimal  # Lot's total available at snapshot time
    expiry_date: date | None = None

    @property
    def is_full(self) -> bool:
        """Does this allocation consume the lot entirely?"""
        return self.allocated_quantity == self.available_quantity

    def as_dict(self) -> dict[str, Any]:
        return {
            'lot_id': self.lot_id,
            'lot_no': self.lot_no,
            'allocated_quantity': str(self.allocated_quantity),
            'available_quantity': str(self.available_quantity),
            'expiry_date': self.expiry_date.isoformat() if self.expiry_date else None,
        }


@dataclass(frozen=True)
class AllocationPlan:
    """
    Ordered allocations that together satisfy a requested quantity.

    Invariant: sum(allocated_quantity) == required_quantity. A plan is
    only ever built complete; shortfalls raise InsufficientStock instead.
    """

    strategy: str
    required_quantity: Decimal
    allocations: tuple[LotAllocation, ...] = ()

    @property
    def total(self) -> Decimal:
        return sum((a.allocated_quantity for a in self.allocations), ZERO)

    @property
    def lot_ids(self) -> list:
        return [a.lot_id for a in self.allocations]

    def __iter__(self):
        return iter(self.allocations)

    def __len__(self) -> int:
        return len(self.allocations)

    def __getitem__(self, index) -> LotAllocation:
        return self.allocations[index]

    def as_dict(self) -> dict[str, Any]:
        return {
            'strategy': self.strategy,
            'required_quantity': str(self.required_quantity),
            'allocations': [a.as_dict() for a in self.allocations],
        }


def allocate(records: list[InventoryRecord], required: Decimal, strategy: str,
             warehouse_id=None, product_id=None) -> AllocationPlan:
    """
    Consume ``records`` in the given order until ``required`` is met.

    Every lot except possibly the last contributes its whole available
    quantity. Records without stock are skipped.

    Args:
        records: Inventory snapshot, already ordered by the strategy
        required: Positive quantity to allocate
        strategy: Strategy name (recorded on the plan and in logs)
        warehouse_id, product_id: Context for InsufficientStock

    Returns:
        AllocationPlan whose total equals ``required``

    Raises:
        InsufficientStock: If the records together hold less than required
    """
    # Snapshot quantities at the same scale as the request
    stock = [(r, to_quantity(r.available_quantity)) for r in records]
    usable = [(r, available) for r, available in stock if available > ZERO]
    total_available = to_quantity(sum((available for _, available in usable), ZERO))

    if total_available < required:
        logger.warning(
            "lots.insufficient",
            extra={
                "strategy": strategy,
                "warehouse_id": warehouse_id,
                "product_id": product_id,
                "requested": str(required),
                "available": str(total_available),
                "shortage": str(required - total_available),
            },
        )
        raise InsufficientStock(
            warehouse_id=warehouse_id,
            product_id=product_id,
            requested=required,
            available=total_available,
        )

    allocations = []
    remaining = required

    for record, available in usable:
        if remaining <= ZERO:
            break

        taken = min(remaining, available)
        allocations.append(LotAllocation(
            lot_id=record.lot_id,
            lot_no=record.lot_no,
            allocated_quantity=taken,
            available_quantity=available,
            expiry_date=record.expiry_date,
        ))
        remaining -= taken

        logger.debug(
            "lots.allocate.step",
            extra={
                "strategy": strategy,
                "lot_no": record.lot_no,
                "allocated": str(taken),
                "remaining": str(remaining),
            },
        )

    return AllocationPlan(
        strategy=strategy,
        required_quantity=required,
        allocations=tuple(allocations),
    )

"""
Lot Metadata Protocol — Interface for lot master data queries.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class LotInfo:
    """Lot metadata as reported to callers (expiry reports, picking lists)."""

    lot_id: Any
    tenant_id: str
    lot_no: str
    product_id: Any
    created_at: datetime
    expiry_date: date | None = None
    product_code: str = ''
    product_name: str = ''
    current_quantity: Decimal = Decimal('0')
    quality_status: str = ''
    is_active: bool = True

    def days_left(self, today: date) -> int | None:
        """Days from ``today`` until expiry (negative once expired)."""
        if self.expiry_date is None:
            return None
        return (self.expiry_date - today).days

    def as_dict(self) -> dict[str, Any]:
        return {
            'lot_id': self.lot_id,
            'lot_no': self.lot_no,
            'product_id': self.product_id,
            'product_code': self.product_code,
            'product_name': self.product_name,
            'expiry_date': self.expiry_date.isoformat() if self.expiry_date else None,
            'current_quantity': str(self.current_quantity),
            'quality_status': self.quality_status,
        }


@runtime_checkable
class LotProvider(Protocol):
    """Protocol for lot metadata lookups."""

    def find_active_expiring_before(self, tenant_id: str, before: date) -> list[LotInfo]:
        """
        Active lots of the tenant whose expiry date is strictly before ``before``.

        Lots without an expiry date never match.

        Args:
            tenant_id: Tenant identifier
            before: Exclusive upper bound for expiry_date

        Returns:
            List of LotInfo
        """
        ...

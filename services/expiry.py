"""
Expiring lots — read-only reporting over lot metadata.

Usage:
    from lotman.services.expiry import find_expiring_lots

    # Run from a dashboard or a daily job
    for lot in find_expiring_lots(provider, 'TEST001', 30):
        print(lot.lot_no, lot.expiry_date)
"""

import logging
from collections.abc import Iterator
from datetime import date, timedelta

from django.utils import timezone

from lotman.conf import lotman_settings
from lotman.protocols.lots import LotInfo, LotProvider

logger = logging.getLogger('lotman')


def expiry_threshold(days_until_expiry: int, today: date | None = None) -> date:
    """First date NOT covered by the report: today + days."""
    return (today or timezone.localdate()) + timedelta(days=days_until_expiry)


def find_expiring_lots(provider: LotProvider, tenant_id: str,
                       days_until_expiry: int | None = None,
                       today: date | None = None) -> Iterator[LotInfo]:
    """
    Active lots of the tenant expiring strictly before today + days.

    Args:
        provider: Lot metadata source
        tenant_id: Tenant identifier
        days_until_expiry: Window in days (None = EXPIRY_WINDOW_DAYS)
        today: Reference date (None = today in the current timezone)

    Returns:
        Iterator of LotInfo ordered by expiry date, then lot id
    """
    if days_until_expiry is None:
        days_until_expiry = lotman_settings.EXPIRY_WINDOW_DAYS

    threshold = expiry_threshold(days_until_expiry, today)
    lots = provider.find_active_expiring_before(tenant_id, threshold)
    lots = sorted(lots, key=lambda lot: (lot.expiry_date, lot.lot_id))

    logger.info(
        "lots.expiring",
        extra={
            "tenant_id": tenant_id,
            "days": days_until_expiry,
            "threshold": threshold.isoformat(),
            "count": len(lots),
        },
    )
    return iter(lots)

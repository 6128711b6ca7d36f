"""
Lotman configuration.

Usage in settings.py:
    LOTMAN = {
        "INVENTORY_PROVIDER": "lotman.adapters.orm.OrmInventoryProvider",
        "LOT_PROVIDER": "lotman.adapters.orm.OrmLotProvider",
        "EXPIRY_WINDOW_DAYS": 30,
        "QUANTITY_DECIMAL_PLACES": 3,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class LotmanSettings:
    """Lotman configuration settings."""

    # Inventory snapshot backend (dotted path)
    INVENTORY_PROVIDER: str = "lotman.adapters.orm.OrmInventoryProvider"

    # Lot metadata backend (dotted path)
    LOT_PROVIDER: str = "lotman.adapters.orm.OrmLotProvider"

    # Default window for the expiring-lot report
    EXPIRY_WINDOW_DAYS: int = 30

    # Scale of every quantity (matches the DecimalField decimal_places)
    QUANTITY_DECIMAL_PLACES: int = 3


def get_lotman_settings() -> LotmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "LOTMAN", {})
    return LotmanSettings(**{
        k: v for k, v in user_settings.items()
        if k in LotmanSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_lotman_settings(), name)


lotman_settings = _LazySettings()

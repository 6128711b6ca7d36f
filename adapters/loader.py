"""
Provider loader — resolves the configured backends from settings.

Usage:
    from lotman.adapters import get_inventory_provider, get_lot_provider

    inventory = get_inventory_provider()
    records = inventory.list_available(warehouse_id, product_id)

Settings:
    LOTMAN = {
        "INVENTORY_PROVIDER": "lotman.adapters.orm.OrmInventoryProvider",
        "LOT_PROVIDER": "lotman.adapters.orm.OrmLotProvider",
    }

A path that cannot be imported, or whose instance does not implement the
protocol, raises ImproperlyConfigured.
"""

from __future__ import annotations

import logging
import threading

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from lotman.conf import lotman_settings
from lotman.protocols.inventory import InventoryProvider
from lotman.protocols.lots import LotProvider

logger = logging.getLogger(__name__)


# Cached provider instances
_lock = threading.Lock()
_inventory_provider: InventoryProvider | None = None
_lot_provider: LotProvider | None = None


def _load(setting: str, protocol):
    path = getattr(lotman_settings, setting)

    if not path:
        raise ImproperlyConfigured(
            f"LOTMAN['{setting}'] must be configured. "
            "Example: 'lotman.adapters.orm.OrmInventoryProvider'"
        )

    try:
        provider_class = import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(
            f"Failed to import {setting} '{path}': {e}"
        ) from e

    provider = provider_class()
    if not isinstance(provider, protocol):
        raise ImproperlyConfigured(
            f"{setting} '{path}' does not implement {protocol.__name__}"
        )

    logger.debug("Loaded %s: %s", setting, path)
    return provider


def get_inventory_provider() -> InventoryProvider:
    """
    Return the configured inventory snapshot provider.

    Raises:
        ImproperlyConfigured: If INVENTORY_PROVIDER is empty or import fails
    """
    global _inventory_provider

    if _inventory_provider is None:
        with _lock:
            if _inventory_provider is None:  # double-checked
                _inventory_provider = _load('INVENTORY_PROVIDER', InventoryProvider)

    return _inventory_provider


def get_lot_provider() -> LotProvider:
    """
    Return the configured lot metadata provider.

    Raises:
        ImproperlyConfigured: If LOT_PROVIDER is empty or import fails
    """
    global _lot_provider

    if _lot_provider is None:
        with _lock:
            if _lot_provider is None:  # double-checked
                _lot_provider = _load('LOT_PROVIDER', LotProvider)

    return _lot_provider


def reset_providers() -> None:
    """Reset the cached providers. Useful for testing."""
    global _inventory_provider, _lot_provider
    _inventory_provider = None
    _lot_provider = None

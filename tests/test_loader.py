"""
Tests for provider resolution from settings.
"""

import pytest
from django.core.exceptions import ImproperlyConfigured

from lotman.adapters import (
    InMemoryInventoryProvider,
    InMemoryLotProvider,
    get_inventory_provider,
    get_lot_provider,
    reset_providers,
)


class NotAProvider:
    """Has none of the protocol methods."""


def test_configured_paths(settings):
    settings.LOTMAN = {
        'INVENTORY_PROVIDER': 'lotman.adapters.memory.InMemoryInventoryProvider',
        'LOT_PROVIDER': 'lotman.adapters.memory.InMemoryLotProvider',
    }

    assert isinstance(get_inventory_provider(), InMemoryInventoryProvider)
    assert isinstance(get_lot_provider(), InMemoryLotProvider)


def test_cached_until_reset(settings):
    settings.LOTMAN = {'INVENTORY_PROVIDER': 'lotman.adapters.memory.InMemoryInventoryProvider'}

    first = get_inventory_provider()
    assert get_inventory_provider() is first

    reset_providers()
    assert get_inventory_provider() is not first


def test_bad_import_path(settings):
    settings.LOTMAN = {'INVENTORY_PROVIDER': 'lotman.adapters.nowhere.Provider'}

    with pytest.raises(ImproperlyConfigured, match='Failed to import'):
        get_inventory_provider()


def test_empty_path(settings):
    settings.LOTMAN = {'LOT_PROVIDER': ''}

    with pytest.raises(ImproperlyConfigured, match='must be configured'):
        get_lot_provider()


def test_not_implementing_protocol(settings):
    settings.LOTMAN = {'LOT_PROVIDER': f'{__name__}.NotAProvider'}

    with pytest.raises(ImproperlyConfigured, match='does not implement LotProvider'):
        get_lot_provider()

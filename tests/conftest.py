"""
Pytest fixtures for Lotman tests.
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.conf import settings
from django.utils import timezone


def pytest_configure():
    """Standalone settings: in-memory SQLite, lotman + contrib apps."""
    if settings.configured:
        return
    settings.configure(
        DEBUG=False,
        SECRET_KEY='lotman-tests',
        USE_TZ=True,
        TIME_ZONE='UTC',
        DATABASES={
            'default': {
                'ENGINE': 'django.db.backends.sqlite3',
                'NAME': ':memory:',
            }
        },
        INSTALLED_APPS=[
            'django.contrib.admin',
            'django.contrib.auth',
            'django.contrib.contenttypes',
            'django.contrib.sessions',
            'django.contrib.messages',
            'lotman',
        ],
        DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
        LOTMAN={},
    )


TENANT = 'TEST001'
WAREHOUSE_ID = 1
PRODUCT_ID = 1


@pytest.fixture(autouse=True)
def _reset_providers():
    """Providers are cached per process; every test starts clean."""
    from lotman.adapters import reset_providers
    reset_providers()
    yield
    reset_providers()


@pytest.fixture
def now():
    return timezone.now()


@pytest.fixture
def today():
    """Return today's date."""
    return timezone.localdate()


@pytest.fixture
def make_record(now, today):
    """Factory for InventoryRecord snapshots (days relative to now)."""
    from lotman.protocols.inventory import InventoryRecord

    def _make(lot_id, quantity, created_days_ago, expires_in_days=None,
              warehouse_id=WAREHOUSE_ID, product_id=PRODUCT_ID, lot_no=None):
        return InventoryRecord(
            warehouse_id=warehouse_id,
            product_id=product_id,
            lot_id=lot_id,
            lot_no=lot_no or f'LOT-2026-{lot_id:03d}',
            available_quantity=Decimal(quantity),
            lot_created_at=now - timedelta(days=created_days_ago),
            expiry_date=today + timedelta(days=expires_in_days) if expires_in_days is not None else None,
        )
    return _make


@pytest.fixture
def three_lots(make_record):
    """
    LOT-2026-001: 100, created 10 days ago, expires in ~3 months
    LOT-2026-002: 150, created 5 days ago, expires in ~6 months
    LOT-2026-003: 200, created 1 day ago, expires in ~9 months
    """
    return [
        make_record(1, '100', 10, 90),
        make_record(2, '150', 5, 180),
        make_record(3, '200', 1, 270),
    ]


@pytest.fixture
def selector(three_lots):
    """LotSelector over an in-memory snapshot of three lots."""
    from lotman.adapters.memory import InMemoryInventoryProvider, InMemoryLotProvider
    from lotman.service import LotSelector

    return LotSelector(
        inventory=InMemoryInventoryProvider(three_lots),
        lots=InMemoryLotProvider(),
    )


# ══════════════════════════════════════════════════════════════
# DATABASE FIXTURES
# ══════════════════════════════════════════════════════════════


@pytest.fixture
def warehouse(db):
    """Get or create finished goods warehouse."""
    from lotman.models import Warehouse

    wh, _ = Warehouse.objects.get_or_create(
        code='wh-fg',
        defaults={'tenant_id': TENANT, 'name': 'Produto Acabado'},
    )
    return wh


@pytest.fixture
def make_lot(db, now, today):
    """Factory for Lot rows (days relative to now)."""
    from lotman.models import Lot, QualityStatus

    def _make(lot_no, created_days_ago=0, expires_in_days=None, tenant_id=TENANT,
              product_id=PRODUCT_ID, is_active=True, quantity='0'):
        return Lot.objects.create(
            tenant_id=tenant_id,
            lot_no=lot_no,
            product_id=product_id,
            product_code='P-LCD-001',
            product_name='Painel LCD',
            created_at=now - timedelta(days=created_days_ago),
            expiry_date=today + timedelta(days=expires_in_days) if expires_in_days is not None else None,
            current_quantity=Decimal(quantity),
            quality_status=QualityStatus.PASSED,
            is_active=is_active,
        )
    return _make


@pytest.fixture
def stocked_lots(warehouse, make_lot):
    """Three lots with inventory at wh-fg, mirroring three_lots."""
    from lotman.models import InventoryRecord

    lots = [
        make_lot('LOT-2026-001', 10, 90, quantity='100'),
        make_lot('LOT-2026-002', 5, 180, quantity='150'),
        make_lot('LOT-2026-003', 1, 270, quantity='200'),
    ]
    for lot in lots:
        InventoryRecord.objects.create(
            warehouse=warehouse,
            lot=lot,
            product_id=PRODUCT_ID,
            available_quantity=lot.current_quantity,
        )
    return lots

"""
Lotman Admin — read-only views for production debugging.

- Warehouse: list + edit
- Lot: read-only (dates, quality status, expired flag)
- InventoryRecord: read-only (warehouse, lot, available, reserved)
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from lotman.models import InventoryRecord, Lot, Warehouse


class ReadOnlyAdminMixin:
    """Lotman never writes stock; neither does its admin."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


# =========================================================================
# WAREHOUSE ADMIN
# =========================================================================

@admin.register(Warehouse)
class WarehouseAdmin(admin.ModelAdmin):
    """Warehouse admin — editable."""

    list_display = ['code', 'name', 'tenant_id', 'is_active']
    list_filter = ['tenant_id', 'is_active']
    search_fields = ['code', 'name']
    readonly_fields = ['created_at', 'updated_at']


# =========================================================================
# LOT ADMIN (read-only)
# =========================================================================

@admin.register(Lot)
class LotAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """Lot admin — read-only. Lots are created by receipt workflows."""

    list_display = ['lot_no', 'product_code', 'tenant_id', 'created_at',
                    'expiry_date', 'quality_status', 'is_active', 'is_expired_display']
    list_filter = ['tenant_id', 'quality_status', 'is_active', 'expiry_date']
    search_fields = ['lot_no', 'product_code', 'product_name']
    date_hierarchy = 'created_at'

    @admin.display(description=_('Expirado?'), boolean=True)
    def is_expired_display(self, obj):
        return obj.is_expired


# =========================================================================
# INVENTORY ADMIN (read-only)
# =========================================================================

@admin.register(InventoryRecord)
class InventoryRecordAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """Inventory admin — read-only snapshot of lot stock per warehouse."""

    list_display = ['__str__', 'warehouse', 'product_id', 'available_quantity',
                    'reserved_quantity', 'expiry_display']
    list_filter = ['warehouse']
    search_fields = ['lot__lot_no']
    list_select_related = ['warehouse', 'lot']

    @admin.display(description=_('Validade'))
    def expiry_display(self, obj):
        return obj.lot.expiry_date

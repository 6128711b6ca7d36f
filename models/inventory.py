"""
InventoryRecord model — stock of one lot of a product at a warehouse.
"""

from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _

from lotman.protocols.inventory import InventoryRecord as InventorySnapshot


class InventoryRecordQuerySet(models.QuerySet):
    """QuerySet with helper methods for inventory lookups."""

    def at(self, warehouse_id, product_id):
        """Records of a product at a warehouse."""
        return self.filter(warehouse_id=warehouse_id, product_id=product_id)

    def available(self):
        """Only records with stock available."""
        return self.filter(available_quantity__gt=0)


class InventoryRecord(models.Model):
    """
    Quantity of a lot at a warehouse.

    Coordinates: (warehouse, product, lot) — unique.

    Quantities here are written by the inventory workflows (receipts,
    issues, reservations); Lotman only reads them through snapshot().
    """

    warehouse = models.ForeignKey(
        'lotman.Warehouse',
        on_delete=models.PROTECT,
        related_name='inventory',
        verbose_name=_('Armazém'),
    )
    lot = models.ForeignKey(
        'lotman.Lot',
        on_delete=models.PROTECT,
        related_name='inventory',
        verbose_name=_('Lote'),
    )
    product_id = models.PositiveBigIntegerField(verbose_name=_('ID do Produto'))

    available_quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        default=Decimal('0'),
        verbose_name=_('Disponível'),
    )
    reserved_quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        default=Decimal('0'),
        verbose_name=_('Reservado'),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = InventoryRecordQuerySet.as_manager()

    class Meta:
        verbose_name = _('Estoque por Lote')
        verbose_name_plural = _('Estoques por Lote')
        constraints = [
            models.UniqueConstraint(
                fields=['warehouse', 'product_id', 'lot'],
                name='unique_inventory_coordinate',
            ),
        ]
        indexes = [
            models.Index(fields=['warehouse', 'product_id'], name='lotman_inv_wh_product_idx'),
        ]

    def snapshot(self) -> InventorySnapshot:
        """Flat, read-only copy for the selection engine."""
        return InventorySnapshot(
            warehouse_id=self.warehouse_id,
            product_id=self.product_id,
            lot_id=self.lot_id,
            lot_no=self.lot.lot_no,
            available_quantity=self.available_quantity,
            reserved_quantity=self.reserved_quantity,
            lot_created_at=self.lot.created_at,
            expiry_date=self.lot.expiry_date,
        )

    def __str__(self) -> str:
        return f"{self.lot.lot_no} @ {self.warehouse.code}: {self.available_quantity}"

"""
Lot model — traceable batch of a product with its own expiry.

Lot-level tracking is what FIFO/FEFO selection reads:
- created_at orders lots for FIFO
- expiry_date orders lots for FEFO (null = never expires)
- is_active + expiry_date drive the expiring-lot report

Usage:
    lot = Lot.objects.create(
        tenant_id='TEST001',
        lot_no='LOT-2026-001',
        product_id=1, product_code='P-LCD-001', product_name='Painel LCD',
        expiry_date=date.today() + timedelta(days=90),
    )
"""

from datetime import date
from decimal import Decimal

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from lotman.models.enums import QualityStatus
from lotman.protocols.lots import LotInfo


class LotQuerySet(models.QuerySet):
    """Custom QuerySet for Lot with convenience filters."""

    def active(self):
        """Lots not retired."""
        return self.filter(is_active=True)

    def for_tenant(self, tenant_id):
        return self.filter(tenant_id=tenant_id)

    def expiring_before(self, before: date):
        """Lots expiring strictly before the given date."""
        return self.filter(expiry_date__lt=before, expiry_date__isnull=False)

    def expired(self):
        """Lots past their expiry date."""
        return self.expiring_before(timezone.localdate())


class Lot(models.Model):
    """
    Lot of a product, owned by a tenant.

    Products are external to Lotman: the lot keeps the product id plus the
    code and name needed for reports.
    """

    tenant_id = models.CharField(
        max_length=50,
        db_index=True,
        verbose_name=_('Tenant'),
    )
    lot_no = models.CharField(
        max_length=50,
        verbose_name=_('Número do Lote'),
    )

    # Product reference (external catalog)
    product_id = models.PositiveBigIntegerField(verbose_name=_('ID do Produto'))
    product_code = models.CharField(
        max_length=50,
        blank=True,
        default='',
        verbose_name=_('Código do Produto'),
    )
    product_name = models.CharField(
        max_length=200,
        blank=True,
        default='',
        verbose_name=_('Nome do Produto'),
    )

    # Dates
    production_date = models.DateField(
        null=True,
        blank=True,
        verbose_name=_('Data de Produção'),
    )
    expiry_date = models.DateField(
        null=True,
        blank=True,
        db_index=True,
        verbose_name=_('Data de Validade'),
        help_text=_('Último dia em que o lote pode ser utilizado. Vazio = não vence.'),
    )

    current_quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        default=Decimal('0'),
        verbose_name=_('Quantidade Atual'),
    )
    quality_status = models.CharField(
        max_length=20,
        choices=QualityStatus.choices,
        default=QualityStatus.PENDING,
        verbose_name=_('Status de Qualidade'),
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name=_('Ativo'),
    )

    # Receipt timestamp, drives FIFO order
    created_at = models.DateTimeField(default=timezone.now, verbose_name=_('Criado em'))

    objects = LotQuerySet.as_manager()

    class Meta:
        verbose_name = _('Lote')
        verbose_name_plural = _('Lotes')
        ordering = ['expiry_date', 'created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['tenant_id', 'lot_no'],
                name='unique_lot_no_per_tenant',
            )
        ]
        indexes = [
            models.Index(fields=['tenant_id', 'expiry_date'], name='lotman_lot_tenant_expiry_idx'),
            models.Index(fields=['product_id'], name='lotman_lot_product_idx'),
        ]

    @property
    def is_expired(self) -> bool:
        """Is this lot past its expiry date?"""
        if self.expiry_date is None:
            return False
        return timezone.localdate() > self.expiry_date

    def info(self) -> LotInfo:
        """Flat, read-only copy for reports."""
        return LotInfo(
            lot_id=self.pk,
            tenant_id=self.tenant_id,
            lot_no=self.lot_no,
            product_id=self.product_id,
            product_code=self.product_code,
            product_name=self.product_name,
            created_at=self.created_at,
            expiry_date=self.expiry_date,
            current_quantity=self.current_quantity,
            quality_status=self.quality_status,
            is_active=self.is_active,
        )

    def __str__(self) -> str:
        expiry = f" (val:{self.expiry_date})" if self.expiry_date else ""
        return f"Lote {self.lot_no}{expiry}"

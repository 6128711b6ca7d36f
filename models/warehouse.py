"""
Warehouse model — Where inventory records live.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Warehouse(models.Model):
    """
    Storage location for lots — raw material, WIP or finished goods.

    Warehouses are stable entities, created during tenant setup.

    Examples:
        Warehouse.objects.create(tenant_id='TEST001', code='wh-fg', name='Produto Acabado')
        Warehouse.objects.create(tenant_id='TEST001', code='wh-rm', name='Matéria-prima')
    """

    tenant_id = models.CharField(
        max_length=50,
        db_index=True,
        verbose_name=_('Tenant'),
    )
    code = models.SlugField(
        unique=True,
        max_length=50,
        verbose_name=_('Código'),
        help_text=_('Identificador único (ex: wh-fg, wh-rm)'),
    )
    name = models.CharField(
        max_length=100,
        verbose_name=_('Nome'),
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name=_('Ativo'),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Armazém')
        verbose_name_plural = _('Armazéns')
        ordering = ['code']

    def __str__(self) -> str:
        return self.name

"""
Initial migration for Lotman models.
"""

from decimal import Decimal
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Lotman models: Warehouse, Lot, InventoryRecord."""

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Warehouse',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tenant_id', models.CharField(db_index=True, max_length=50, verbose_name='Tenant')),
                ('code', models.SlugField(help_text='Identificador único (ex: wh-fg, wh-rm)', unique=True, verbose_name='Código')),
                ('name', models.CharField(max_length=100, verbose_name='Nome')),
                ('is_active', models.BooleanField(default=True, verbose_name='Ativo')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Armazém',
                'verbose_name_plural': 'Armazéns',
                'ordering': ['code'],
            },
        ),
        migrations.CreateModel(
            name='Lot',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tenant_id', models.CharField(db_index=True, max_length=50, verbose_name='Tenant')),
                ('lot_no', models.CharField(max_length=50, verbose_name='Número do Lote')),
                ('product_id', models.PositiveBigIntegerField(verbose_name='ID do Produto')),
                ('product_code', models.CharField(blank=True, default='', max_length=50, verbose_name='Código do Produto')),
                ('product_name', models.CharField(blank=True, default='', max_length=200, verbose_name='Nome do Produto')),
                ('production_date', models.DateField(blank=True, null=True, verbose_name='Data de Produção')),
                ('expiry_date', models.DateField(blank=True, db_index=True, help_text='Último dia em que o lote pode ser utilizado. Vazio = não vence.', null=True, verbose_name='Data de Validade')),
                ('current_quantity', models.DecimalField(decimal_places=3, default=Decimal('0'), max_digits=12, verbose_name='Quantidade Atual')),
                ('quality_status', models.CharField(choices=[('PENDING', 'Pendente'), ('PASSED', 'Aprovado'), ('FAILED', 'Reprovado'), ('HOLD', 'Retido')], default='PENDING', max_length=20, verbose_name='Status de Qualidade')),
                ('is_active', models.BooleanField(default=True, verbose_name='Ativo')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Criado em')),
            ],
            options={
                'verbose_name': 'Lote',
                'verbose_name_plural': 'Lotes',
                'ordering': ['expiry_date', 'created_at'],
                'indexes': [
                    models.Index(fields=['tenant_id', 'expiry_date'], name='lotman_lot_tenant_expiry_idx'),
                    models.Index(fields=['product_id'], name='lotman_lot_product_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('tenant_id', 'lot_no'), name='unique_lot_no_per_tenant'),
                ],
            },
        ),
        migrations.CreateModel(
            name='InventoryRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_id', models.PositiveBigIntegerField(verbose_name='ID do Produto')),
                ('available_quantity', models.DecimalField(decimal_places=3, default=Decimal('0'), max_digits=12, verbose_name='Disponível')),
                ('reserved_quantity', models.DecimalField(decimal_places=3, default=Decimal('0'), max_digits=12, verbose_name='Reservado')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('lot', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='inventory', to='lotman.lot', verbose_name='Lote')),
                ('warehouse', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='inventory', to='lotman.warehouse', verbose_name='Armazém')),
            ],
            options={
                'verbose_name': 'Estoque por Lote',
                'verbose_name_plural': 'Estoques por Lote',
                'indexes': [
                    models.Index(fields=['warehouse', 'product_id'], name='lotman_inv_wh_product_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('warehouse', 'product_id', 'lot'), name='unique_inventory_coordinate'),
                ],
            },
        ),
    ]

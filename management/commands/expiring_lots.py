"""
Management command to list lots nearing expiry.

Usage:
    python manage.py expiring_lots --tenant TEST001
    python manage.py expiring_lots --tenant TEST001 --days 7
    python manage.py expiring_lots --tenant TEST001 --json
"""

import json

from django.core.management.base import BaseCommand
from django.utils import timezone

from lotman.conf import lotman_settings
from lotman.service import LotSelector


class Command(BaseCommand):
    """Expiring lots report command."""

    help = 'Lista lotes que vencem nos próximos N dias'

    def add_arguments(self, parser):
        parser.add_argument(
            '--tenant',
            required=True,
            help='Tenant dos lotes'
        )
        parser.add_argument(
            '--days',
            type=int,
            default=None,
            help='Janela em dias (padrão: LOTMAN EXPIRY_WINDOW_DAYS)'
        )
        parser.add_argument(
            '--json',
            action='store_true',
            help='Saída em JSON'
        )

    def handle(self, *args, **options):
        days = options['days']
        if days is None:
            days = lotman_settings.EXPIRY_WINDOW_DAYS

        today = timezone.localdate()
        lots = list(LotSelector().find_expiring_lots(options['tenant'], days, today=today))

        if options['json']:
            self.stdout.write(json.dumps([lot.as_dict() for lot in lots], ensure_ascii=False))
            return

        for lot in lots:
            self.stdout.write(
                f"{lot.lot_no}\t{lot.product_code}\t{lot.expiry_date}\t"
                f"{lot.days_left(today)}d\t{lot.current_quantity}"
            )

        self.stdout.write(
            self.style.WARNING(f'{len(lots)} lote(s) vencendo em {days} dia(s)')
        )

"""
Enums for Lotman models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class LotStrategy(models.TextChoices):
    """
    Order in which lots are consumed.

    FIFO: First-In-First-Out — oldest received lot first.
          Examples: packaging, hardware, anything without shelf life
    FEFO: First-Expired-First-Out — soonest-to-expire lot first.
          Examples: resins, adhesives, food, pharmaceuticals
    """
    FIFO = 'fifo', _('FIFO (mais antigo primeiro)')
    FEFO = 'fefo', _('FEFO (vence primeiro)')


class QualityStatus(models.TextChoices):
    """Lot quality inspection status."""
    PENDING = 'PENDING', _('Pendente')    # Awaiting inspection
    PASSED = 'PASSED', _('Aprovado')      # Released for use
    FAILED = 'FAILED', _('Reprovado')     # Rejected
    HOLD = 'HOLD', _('Retido')            # Quarantined pending decision

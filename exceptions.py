"""
Exceptions for Lotman.

Lot selection fails in exactly two ways, each with its own type:

- LotNotFound: a pinned lot has no inventory record at the warehouse
- InsufficientStock: the requested quantity exceeds what is available

Both carry a stable ``code`` and structured context for callers that render
messages or API responses. InvalidQuantity is a precondition error (bad
input), not a selection outcome.

Usage:
    try:
        plan = selector.select_lots_by_fefo(tenant, warehouse_id, product_id, qty)
    except InsufficientStock as e:
        print(f"Só tem {e.available} disponível (faltam {e.shortage})")
"""

from datetime import date
from decimal import Decimal
from typing import Any


def _render(value):
    if isinstance(value, (Decimal, date)):
        return str(value)
    return value


class _StructuredError:
    """Serialization shared by the lot selection errors."""

    code: str = ''
    default_message: str = ''

    def context(self) -> dict[str, Any]:
        return {}

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': {k: _render(v) for k, v in self.context().items()},
        }


class LotNotFound(_StructuredError, LookupError):
    """No inventory record exists for the pinned (warehouse, product, lot)."""

    code = 'LOT_NOT_FOUND'
    default_message = 'Lote não encontrado no estoque'

    def __init__(self, warehouse_id, product_id, lot_id, message: str | None = None):
        self.warehouse_id = warehouse_id
        self.product_id = product_id
        self.lot_id = lot_id
        self.message = message or self.default_message
        super().__init__(self.message)

    def context(self) -> dict[str, Any]:
        return {
            'warehouse_id': self.warehouse_id,
            'product_id': self.product_id,
            'lot_id': self.lot_id,
        }

    def __repr__(self) -> str:
        return (f"LotNotFound(warehouse_id={self.warehouse_id!r}, "
                f"product_id={self.product_id!r}, lot_id={self.lot_id!r})")


class InsufficientStock(_StructuredError, Exception):
    """
    Requested quantity exceeds available stock.

    For FIFO/FEFO ``available`` is the aggregate over every lot of the
    product at the warehouse and ``lot_id`` is None. For a pinned lot it is
    that lot's available quantity.
    """

    code = 'INSUFFICIENT_STOCK'
    default_message = 'Estoque insuficiente'

    def __init__(self, warehouse_id, product_id, requested: Decimal,
                 available: Decimal, lot_id=None, message: str | None = None):
        self.warehouse_id = warehouse_id
        self.product_id = product_id
        self.lot_id = lot_id
        self.requested = requested
        self.available = available
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def shortage(self) -> Decimal:
        """How much is missing to fulfil the request."""
        return self.requested - self.available

    def context(self) -> dict[str, Any]:
        return {
            'warehouse_id': self.warehouse_id,
            'product_id': self.product_id,
            'lot_id': self.lot_id,
            'requested': self.requested,
            'available': self.available,
            'shortage': self.shortage,
        }

    def __str__(self) -> str:
        lot = f" lot={self.lot_id}" if self.lot_id is not None else ""
        return (f"{self.message}: warehouse={self.warehouse_id} "
                f"product={self.product_id}{lot} "
                f"requested={self.requested} available={self.available}")


class InvalidQuantity(ValueError):
    """Quantity is not a positive Decimal at the configured scale."""

    code = 'INVALID_QUANTITY'

    def __init__(self, value, reason: str = 'Quantidade inválida (deve ser positiva)'):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


# Everything a selection call can raise once its input is valid
ALLOCATION_ERRORS = (LotNotFound, InsufficientStock)

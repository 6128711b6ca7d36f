"""
Quantity normalization — isolated, testable, reusable.

Every quantity handled by Lotman is a Decimal at a fixed scale
(QUANTITY_DECIMAL_PLACES, default 3, matching the model fields), so a plan's
partial allocations always sum back to the requested quantity exactly.

Examples:
    to_quantity(5)          -> Decimal('5.000')
    to_quantity('12.5')     -> Decimal('12.500')
    to_quantity('0.0001')   -> InvalidQuantity (finer than the scale)
    to_quantity(1.5)        -> InvalidQuantity (floats are never accepted)
"""

from decimal import Decimal, InvalidOperation

from lotman.conf import lotman_settings
from lotman.exceptions import InvalidQuantity

ZERO = Decimal('0')


def quantum(places: int | None = None) -> Decimal:
    """Smallest representable quantity step, e.g. Decimal('0.001')."""
    if places is None:
        places = lotman_settings.QUANTITY_DECIMAL_PLACES
    return Decimal(1).scaleb(-places)


def to_quantity(value, places: int | None = None) -> Decimal:
    """
    Coerce ``value`` to a Decimal at the configured scale.

    Accepts Decimal, int and str. Rejects floats, bools, non-finite values
    and anything that would lose digits when quantized.
    """
    if isinstance(value, (float, bool)) or value is None:
        raise InvalidQuantity(value, 'Quantidade deve ser Decimal, int ou str')

    try:
        number = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidQuantity(value, 'Quantidade não numérica') from e

    if not number.is_finite():
        raise InvalidQuantity(value, 'Quantidade deve ser finita')

    step = quantum(places)
    try:
        quantized = number.quantize(step)
    except InvalidOperation as e:
        raise InvalidQuantity(value, 'Quantidade fora do intervalo suportado') from e
    if quantized != number:
        raise InvalidQuantity(value, f'Quantidade excede a precisão de {step}')
    return quantized


def to_positive_quantity(value, places: int | None = None) -> Decimal:
    """to_quantity() that also requires value > 0."""
    quantity = to_quantity(value, places)
    if quantity <= ZERO:
        raise InvalidQuantity(value)
    return quantity

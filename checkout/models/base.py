"""
Base model for checkout receipts.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union
from sqlalchemy import Numeric
from sqlalchemy.orm import DeclarativeBase, registry

_PriceNew = Union[Decimal, int, float, str]

class Price(Decimal):
    """
    Price type with scale of 2 (number of decimal places), rounding half-up.
    """

    _quantize = Decimal('1.00')

    def __new__(cls, value: _PriceNew) -> "Price":
        try:
            # Floats are taken by their shortest representation, not their
            # exact binary expansion, so that 1.005 stays a halfway point.
            number = Decimal(str(value)) if isinstance(value, float) else \
                Decimal(value)
            if not number.is_finite():
                raise InvalidOperation
            rounded = number.quantize(cls._quantize, rounding=ROUND_HALF_UP)
        except (InvalidOperation, TypeError) as error:
            raise ValueError(f'Could not construct a price from {value!r}') \
                from error
        return super().__new__(cls, rounded)

class Base(DeclarativeBase): # pylint: disable=too-few-public-methods
    """
    Base ORM model class for checkout models.
    """

    registry = registry(type_annotation_map={
        Price: Numeric(None, 2)
    })

"""
Product catalog file handling.
"""

from typing import Iterator, IO
from .base import CSVReader, Record
from ..models.base import Price
from ..models.product import Product

def parse_bool(value: str) -> bool:
    """
    Convert a boolean literal, `true` or `false` in any letter case.
    """

    literal = value.lower()
    if literal not in ('true', 'false'):
        raise ValueError(f'Invalid boolean literal: {value!r}')
    return literal == 'true'

class ProductsReader(CSVReader[Product]):
    """
    File reader for catalog products.
    """

    def parse(self, file: IO) -> Iterator[Product]:
        for record in self.load(file):
            yield self._product(record)

    @staticmethod
    def _product(record: Record) -> Product:
        return Product(id=int(record['id']),
                       description=record['description'],
                       price=Price(record['price']),
                       quantity_in_stock=int(record['quantity_in_stock']),
                       wholesale=parse_bool(record['wholesale_product']))

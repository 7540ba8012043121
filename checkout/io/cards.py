"""
Discount card file handling.
"""

from typing import Iterator, IO
from .base import CSVReader
from ..models.base import Price
from ..models.card import DiscountCard

class DiscountCardsReader(CSVReader[DiscountCard]):
    """
    File reader for discount cards.
    """

    def parse(self, file: IO) -> Iterator[DiscountCard]:
        for record in self.load(file):
            yield DiscountCard(number=int(record['number']),
                               rate=Price(record['amount']))

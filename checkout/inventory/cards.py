"""
Discount cards directory.
"""

from collections.abc import Iterable
import logging
from pathlib import Path
from ..errors import DiscountDirectoryLoadError
from ..io.cards import DiscountCardsReader
from ..models.base import Price
from ..models.card import DiscountCard
from .base import Inventory

DEFAULT_RATE = Price('2.00')

LOGGER = logging.getLogger(__name__)

class DiscountCards(Inventory[DiscountCard]):
    """
    Directory of discount cards keyed by their number, with a default rate for
    card numbers that are not on file.
    """

    error = DiscountDirectoryLoadError
    kind = 'discount cards'

    def __init__(self, models: Iterable[DiscountCard] = (),
                 default_rate: Price = DEFAULT_RATE) -> None:
        super().__init__(models)
        self.default_rate = default_rate

    @staticmethod
    def get_key(model: DiscountCard) -> int:
        return model.number

    @classmethod
    def get_reader(cls, path: Path, encoding: str = 'utf-8',
                   delimiter: str = ';') -> DiscountCardsReader:
        return DiscountCardsReader(path, encoding=encoding,
                                   delimiter=delimiter)

    def find(self, number: int) -> DiscountCard:
        """
        Retrieve the discount card with the given number. If it is not on file,
        then a card with that number and the default rate is provided.
        """

        if number in self:
            return self[number]

        LOGGER.info('Discount card %d not found, using default rate %s%%',
                    number, self.default_rate)
        return DiscountCard(number=number, rate=self.default_rate)

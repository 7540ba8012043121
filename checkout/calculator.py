"""
Receipt computation with wholesale and discount card discounts.
"""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
import logging
from typing import Optional, Union
from .basket import LineItem
from .errors import InvalidQuantity
from .models.base import Price
from .models.card import DiscountCard
from .models.receipt import Receipt, ReceiptLine

WHOLESALE_QUANTITY = 5
WHOLESALE_RATE = Decimal('10')

_Balance = Union[Decimal, int, float, str]

LOGGER = logging.getLogger(__name__)

class ReceiptCalculator:
    """
    Calculator of discounts and totals of receipts.

    Every monetary value is rounded half-up to two decimals as soon as it is
    computed, so totals are sums of already rounded line values. A wholesale
    product requested in a quantity of at least `wholesale_quantity` receives
    the wholesale discount; any other line receives the discount of the card,
    if one is provided. The two discounts never apply to the same line.
    """

    def __init__(self, wholesale_quantity: int = WHOLESALE_QUANTITY,
                 wholesale_rate: Decimal = WHOLESALE_RATE) -> None:
        self.wholesale_quantity = wholesale_quantity
        self.wholesale_rate = wholesale_rate

    @property
    def wholesale_label(self) -> str:
        """
        Discount information for lines with a wholesale discount.
        """

        return f'{self.wholesale_rate.normalize():f}% wholesale'

    def compute(self, lines: Sequence[LineItem],
                card: Optional[DiscountCard] = None,
                balance: Optional[_Balance] = None,
                timestamp: Optional[datetime] = None) -> Receipt:
        """
        Compute a receipt for the basket line items, possibly with a discount
        card and a debit card balance from which the purchase is paid.
        """

        receipt = Receipt(timestamp=datetime.now() if timestamp is None
                          else timestamp,
                          discount_card=card,
                          card_number=None if card is None else card.number)
        receipt.lines = [
            self.compute_line(position, item, card)
            for position, item in enumerate(lines)
        ]

        try:
            receipt.gross_total = Price(sum(line.gross_total
                                            for line in receipt.lines))
            receipt.net_total = Price(sum(line.net_total
                                          for line in receipt.lines))
        except ValueError as error:
            raise InvalidQuantity('Quantities are too large to compute the '
                                  'receipt totals.') from error
        receipt.discount_total = Price(receipt.gross_total - receipt.net_total)

        if balance is None:
            receipt.balance = None
            receipt.balance_after = None
        else:
            receipt.balance = Price(balance)
            receipt.balance_after = Price(receipt.balance - receipt.net_total)

        LOGGER.debug('Computed %r', receipt)
        return receipt

    def compute_line(self, position: int, item: LineItem,
                     card: Optional[DiscountCard] = None) -> ReceiptLine:
        """
        Compute the totals and discount of a single basket line item.
        """

        try:
            gross_total = Price(item.product.price * item.quantity)
        except ValueError as error:
            raise InvalidQuantity(f'Quantity {item.quantity} for product with '
                                  f'ID {item.product.id} is too large.') \
                from error
        discount = Price(0)
        label = ''

        if item.product.wholesale and item.quantity >= self.wholesale_quantity:
            discount = Price(gross_total * self.wholesale_rate / 100)
            label = self.wholesale_label
        elif card is not None and card.rate > 0:
            discount = Price(gross_total * card.rate / 100)
            label = f'{Price(card.rate)}% card discount'

        return ReceiptLine(product=item.product, product_id=item.product.id,
                           position=position, quantity=item.quantity,
                           gross_total=gross_total, discount=discount,
                           discount_label=label,
                           net_total=Price(gross_total - discount))

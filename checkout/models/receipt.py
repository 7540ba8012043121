"""
Models for computed receipts.
"""

import datetime
from typing import Optional
from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import Base, Price
from .card import DiscountCard
from .product import Product

class Receipt(Base): # pylint: disable=too-few-public-methods
    """
    Receipt model for a single checkout of a basket of products, possibly with
    a discount card and a debit card balance.
    """

    __tablename__ = "receipt"

    # Mapped classes require a primary key.
    id: Mapped[int] = mapped_column(primary_key=True)
    timestamp: Mapped[datetime.datetime]
    lines: Mapped[list["ReceiptLine"]] = \
        relationship(back_populates="receipt", order_by="ReceiptLine.position")
    card_number: Mapped[Optional[int]] = \
        mapped_column(ForeignKey('discount_card.number'))
    discount_card: Mapped[Optional[DiscountCard]] = relationship()

    gross_total: Mapped[Price]
    discount_total: Mapped[Price]
    net_total: Mapped[Price]
    balance: Mapped[Optional[Price]]
    balance_after: Mapped[Optional[Price]]

    def __repr__(self) -> str:
        return (f"Receipt(timestamp={self.timestamp.isoformat()!r}, "
                f"gross_total={self.gross_total!s}, "
                f"discount_total={self.discount_total!s}, "
                f"net_total={self.net_total!s})")

class ReceiptLine(Base): # pylint: disable=too-few-public-methods
    """
    Line model for the quantity of a product on a receipt with its discount.
    """

    __tablename__ = "receipt_line"

    receipt_id: Mapped[int] = mapped_column(ForeignKey('receipt.id'),
                                            primary_key=True)
    receipt: Mapped[Receipt] = relationship(back_populates="lines")
    product_id: Mapped[int] = mapped_column(ForeignKey('product.id'))
    product: Mapped[Product] = relationship()
    position: Mapped[int] = mapped_column(primary_key=True)

    quantity: Mapped[int]
    gross_total: Mapped[Price]
    discount: Mapped[Price]
    discount_label: Mapped[str] = mapped_column(String(64), default='')
    net_total: Mapped[Price]

    def __repr__(self) -> str:
        return (f"ReceiptLine(product={self.product.id!r}, "
                f"quantity={self.quantity!r}, "
                f"gross_total={self.gross_total!s}, "
                f"discount={self.discount!s}, "
                f"discount_label={self.discount_label!r}, "
                f"net_total={self.net_total!s})")

"""
Models for discount cards.
"""

from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, Price

class DiscountCard(Base): # pylint: disable=too-few-public-methods
    """
    Discount card model with a percentage rate applied to receipt lines.
    """

    __tablename__ = "discount_card"

    number: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    rate: Mapped[Price]

    def __repr__(self) -> str:
        return f"DiscountCard(number={self.number!r}, rate={self.rate!s})"

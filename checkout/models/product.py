"""
Models for catalog products.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, Price

class Product(Base): # pylint: disable=too-few-public-methods
    """
    Product model for an item offered in the catalog.
    """

    __tablename__ = "product"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    description: Mapped[str] = mapped_column(String(255))
    price: Mapped[Price]
    quantity_in_stock: Mapped[int]
    wholesale: Mapped[bool] = mapped_column(default=False)

    def __repr__(self) -> str:
        return (f"Product(id={self.id!r}, "
                f"description={self.description!r}, price={self.price!s}, "
                f"quantity_in_stock={self.quantity_in_stock!r}, "
                f"wholesale={self.wholesale!r})")

"""
Models for checkout catalog, discount cards and receipts.
"""

from .base import Base, Price
from .card import DiscountCard
from .product import Product
from .receipt import Receipt, ReceiptLine

__all__ = ["Base", "Price", "DiscountCard", "Product", "Receipt", "ReceiptLine"]

"""
Read-only inventories of catalog products and discount cards.
"""

from .cards import DiscountCards
from .products import Catalog

__all__ = ["Catalog", "DiscountCards"]

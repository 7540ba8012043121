"""
Tests for product models.
"""

import unittest
from checkout.models.base import Price
from checkout.models.product import Product

class ProductTest(unittest.TestCase):
    """
    Tests for product model.
    """

    def test_repr(self) -> None:
        """
        Test the string representation of the model.
        """

        product = Product(id=1, description='Milk', price=Price('1.07'),
                          quantity_in_stock=10, wholesale=True)
        self.assertEqual(repr(product),
                         "Product(id=1, description='Milk', price=1.07, "
                         "quantity_in_stock=10, wholesale=True)")

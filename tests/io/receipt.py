"""
Tests for receipt report file handling.
"""

from datetime import datetime
from pathlib import Path
import tempfile
import unittest
from unittest.mock import MagicMock
from typing_extensions import override
from checkout.basket import LineItem
from checkout.calculator import ReceiptCalculator
from checkout.errors import ProductNotFound
from checkout.formatter import ReceiptFormatter
from checkout.io.receipt import ErrorWriter, ReceiptWriter
from checkout.models.base import Price
from checkout.models.product import Product

class ReceiptWriterTest(unittest.TestCase):
    """
    Tests for receipt report file writer.
    """

    @override
    def setUp(self) -> None:
        self.directory = tempfile.TemporaryDirectory()
        self.addCleanup(self.directory.cleanup)
        self.path = Path(self.directory.name) / 'result.csv'
        product = Product(id=1, description='Bulk', price=Price('10.00'),
                          quantity_in_stock=100, wholesale=True)
        self.receipt = ReceiptCalculator().compute(
            [LineItem(product, 5)], timestamp=datetime(2024, 3, 7, 9, 5, 1)
        )

    def test_write(self) -> None:
        """
        Test writing the receipt report.
        """

        ReceiptWriter(self.path, self.receipt, ReceiptFormatter()).write()
        with self.path.open('r', encoding='utf-8') as file:
            self.assertEqual(file.read(), 'Date;07.03.2024\n'
                                          'Time;09:05:01\n'
                                          'QTY;DESCRIPTION;PRICE;DISCOUNT;'
                                          'TOTAL\n'
                                          '5;Bulk;10.00$;5.00$;45.00$\n'
                                          'DISCOUNT CARD;DISCOUNT PERCENTAGE\n'
                                          '\n'
                                          'TOTAL PRICE;TOTAL DISCOUNT;'
                                          'TOTAL WITH DISCOUNT\n'
                                          '50.00$;5.00$;45.00$\n')

    def test_write_failed_render(self) -> None:
        """
        Test that no report file is created if rendering fails.
        """

        formatter = MagicMock(spec=ReceiptFormatter)
        formatter.render_records.side_effect = ValueError('render')
        with self.assertRaisesRegex(ValueError, 'render'):
            ReceiptWriter(self.path, self.receipt, formatter).write()
        self.assertFalse(self.path.exists())

class ErrorWriterTest(unittest.TestCase):
    """
    Tests for writer of error records.
    """

    def test_write(self) -> None:
        """
        Test writing an error record.
        """

        with tempfile.TemporaryDirectory() as directory:
            path = Path(directory) / 'result.csv'
            ErrorWriter(path, ProductNotFound(42)).write()
            with path.open('r', encoding='utf-8') as file:
                self.assertEqual(file.read(),
                                 'Error: Product with ID 42 not found.')

            ErrorWriter(path, OSError('disk full')).write()
            with path.open('r', encoding='utf-8') as file:
                self.assertEqual(file.read(), 'Error: disk full')

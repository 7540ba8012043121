"""
Tests for products catalog.
"""

from pathlib import Path
import tempfile
import unittest
from checkout.errors import CatalogLoadError, ProductNotFound
from checkout.inventory.products import Catalog
from checkout.models.base import Price
from checkout.models.product import Product

class CatalogTest(unittest.TestCase):
    """
    Tests for catalog of products.
    """

    def test_load(self) -> None:
        """
        Test loading the catalog from a products file.
        """

        catalog = Catalog.load(Path('samples/products.csv'))
        self.assertEqual(len(catalog), 10)
        self.assertEqual(list(catalog), list(range(1, 11)))
        self.assertIn(4, catalog)
        self.assertNotIn(11, catalog)
        self.assertEqual(catalog[2].description, 'Cream 400g')

    def test_load_missing(self) -> None:
        """
        Test loading the catalog from a file that does not exist.
        """

        with self.assertRaisesRegex(CatalogLoadError,
                                    'Could not load products from'):
            Catalog.load(Path('samples/missing.csv'))

    def test_load_malformed(self) -> None:
        """
        Test loading the catalog from files with malformed records.
        """

        header = 'id;description;price;quantity_in_stock;wholesale_product\n'
        contents = {
            'number': f'{header}1;Milk;1.07;ten;true\n',
            'field': 'id;description;price\n1;Milk;1.07\n',
            'duplicate': f'{header}1;Milk;1.07;10;true\n1;Tea;1.00;1;false\n'
        }
        with tempfile.TemporaryDirectory() as directory:
            for name, content in contents.items():
                with self.subTest(name=name):
                    path = Path(directory) / f'{name}.csv'
                    with path.open('w', encoding='utf-8') as file:
                        _ = file.write(content)
                    with self.assertRaises(CatalogLoadError) as context:
                        Catalog.load(path)
                    if name == 'field':
                        self.assertIn("missing field 'quantity_in_stock'",
                                      context.exception.msg)
                    elif name == 'duplicate':
                        self.assertEqual(context.exception.msg,
                                         'Duplicate products entry 1')

    def test_find(self) -> None:
        """
        Test retrieving a product by its ID.
        """

        milk = Product(id=1, description='Milk', price=Price('1.07'),
                       quantity_in_stock=10, wholesale=True)
        catalog = Catalog([milk])
        self.assertIs(catalog.find(1), milk)
        with self.assertRaises(ProductNotFound) as context:
            catalog.find(42)
        self.assertEqual(context.exception.product_id, 42)
        self.assertEqual(str(context.exception),
                         'Product with ID 42 not found.')

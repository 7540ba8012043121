"""
Products catalog.
"""

from pathlib import Path
from ..errors import CatalogLoadError, ProductNotFound
from ..io.products import ProductsReader
from ..models.product import Product
from .base import Inventory

class Catalog(Inventory[Product]):
    """
    Catalog of products keyed by their ID.
    """

    error = CatalogLoadError
    kind = 'products'

    @staticmethod
    def get_key(model: Product) -> int:
        return model.id

    @classmethod
    def get_reader(cls, path: Path, encoding: str = 'utf-8',
                   delimiter: str = ';') -> ProductsReader:
        return ProductsReader(path, encoding=encoding, delimiter=delimiter)

    def find(self, product_id: int) -> Product:
        """
        Retrieve the product with the given ID.
        """

        try:
            return self[product_id]
        except KeyError as error:
            raise ProductNotFound(product_id) from error

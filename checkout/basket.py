"""
Resolution of requested product quantities into basket line items.
"""

from collections.abc import Iterable, Mapping
from typing import NamedTuple, Union
from .errors import InvalidQuantity
from .inventory.products import Catalog
from .models.product import Product

Request = Union[Mapping[int, int], Iterable[tuple[int, int]]]

class LineItem(NamedTuple):
    """
    A product in the basket with its total requested quantity.
    """

    product: Product
    quantity: int

def resolve(requested: Request, catalog: Catalog) -> list[LineItem]:
    """
    Expand requested quantities, either a mapping of product IDs to quantities
    or pairs of product IDs and quantities in which IDs may repeat, into line
    items. Quantities for the same product ID are summed into one line item and
    line items are ordered by the first request of their product.

    The resolution is aborted with `InvalidQuantity` for a zero or negative
    quantity and with `ProductNotFound` for a product ID which is not in the
    catalog.
    """

    pairs = requested.items() if isinstance(requested, Mapping) else requested
    products: dict[int, Product] = {}
    quantities: dict[int, int] = {}
    for product_id, quantity in pairs:
        if quantity <= 0:
            raise InvalidQuantity(f'Quantity for product with ID {product_id} '
                                  f'must be positive, not {quantity}.')
        products[product_id] = catalog.find(product_id)
        quantities[product_id] = quantities.get(product_id, 0) + quantity

    return [
        LineItem(products[product_id], quantity)
        for product_id, quantity in quantities.items()
    ]

"""
Errors that abort a checkout.
"""

class CheckoutError(RuntimeError):
    """
    Fatal error during the processing of a checkout invocation.
    """

    def __init__(self, msg: str = '') -> None:
        super().__init__(msg)
        self.msg = msg

class CatalogLoadError(CheckoutError):
    """
    The product source could not be read or contains malformed records.
    """

class DiscountDirectoryLoadError(CheckoutError):
    """
    The discount card source could not be read or contains malformed records.
    """

class ProductNotFound(CheckoutError):
    """
    A requested product ID is not present in the catalog.
    """

    def __init__(self, product_id: int) -> None:
        super().__init__(f'Product with ID {product_id} not found.')
        self.product_id = product_id

class InvalidQuantity(CheckoutError):
    """
    A requested product quantity is zero or negative.
    """

class InvalidArgument(CheckoutError):
    """
    Invocation parameters are missing or malformed.
    """

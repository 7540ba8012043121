"""
Subcommand to compute a receipt for a basket of products.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import ClassVar, Optional
from .base import Base, SubparserArguments, SubparserKeywords
from ..basket import resolve
from ..calculator import ReceiptCalculator
from ..errors import CheckoutError, InvalidArgument
from ..formatter import ReceiptFormatter
from ..inventory import Catalog, DiscountCards
from ..io.receipt import ErrorWriter, ReceiptWriter
from ..models.base import Price
from ..models.receipt import Receipt

LOGGER = logging.getLogger(__name__)

@dataclass
class Invocation:
    """
    Parameters of a checkout provided by command line tokens.
    """

    products_path: Path
    save_path: Path
    quantities: list[tuple[int, int]] = field(default_factory=list)
    card_number: Optional[int] = None
    balance: Optional[Price] = None

_OPTIONS = ('discountCard', 'balanceDebitCard', 'pathToFile', 'saveToFile')

def _split_option(token: str) -> tuple[str, str]:
    key, _, value = token.partition('=')
    return key, value.strip()

def get_save_path(tokens: Sequence[str]) -> Optional[Path]:
    """
    Find the path to write the receipt or error record to from the tokens,
    regardless of whether other tokens are valid.
    """

    save_path: Optional[Path] = None
    for token in tokens:
        key, value = _split_option(token)
        if key == 'saveToFile' and value != '':
            save_path = Path(value)
    return save_path

def parse_tokens(tokens: Sequence[str]) -> Invocation:
    """
    Parse command line tokens: `<id>-<quantity>` for products in the basket
    (which may be repeated), and `discountCard=<number>`,
    `balanceDebitCard=<amount>`, `pathToFile=<path>` and `saveToFile=<path>`
    options, where options with an empty value are ignored.
    """

    quantities: list[tuple[int, int]] = []
    options: dict[str, str] = {}
    for token in tokens:
        if '=' in token:
            key, value = _split_option(token)
            if key not in _OPTIONS:
                raise InvalidArgument(f'Unknown argument: {token}')
            if value != '':
                options[key] = value
        else:
            quantities.append(_parse_quantity(token))

    if 'pathToFile' not in options or 'saveToFile' not in options:
        raise InvalidArgument('Path to file and save to file must be '
                              'specified.')

    invocation = Invocation(products_path=Path(options['pathToFile']),
                            save_path=Path(options['saveToFile']),
                            quantities=quantities)
    if 'discountCard' in options:
        try:
            invocation.card_number = int(options['discountCard'])
        except ValueError as error:
            raise InvalidArgument('Invalid discount card number: '
                                  f"{options['discountCard']}") from error
    if 'balanceDebitCard' in options:
        try:
            invocation.balance = Price(options['balanceDebitCard'])
        except ValueError as error:
            raise InvalidArgument('Invalid debit card balance: '
                                  f"{options['balanceDebitCard']}") from error

    return invocation

def _parse_quantity(token: str) -> tuple[int, int]:
    product_id, separator, quantity = token.partition('-')
    if separator == '':
        raise InvalidArgument(f'Unknown argument: {token}')
    try:
        return int(product_id), int(quantity)
    except ValueError as error:
        raise InvalidArgument(f'Invalid product quantity argument: {token}') \
            from error

@Base.register("check")
class Check(Base):
    """
    Compute a receipt for a basket of products and write it to a file.
    """

    subparser_keywords: ClassVar[SubparserKeywords] = {
        'help': 'Compute a receipt for a basket of products',
        'description': 'Load the product catalog and discount cards, apply '
                       'wholesale and discount card discounts to the basket '
                       'and write the receipt to the console and a file.',
        'epilog': 'Example: 3-1 2-5 5-1 discountCard=1111 '
                  'balanceDebitCard=100 pathToFile=./products.csv '
                  'saveToFile=./result.csv'
    }
    subparser_arguments: ClassVar[SubparserArguments] = [
        ('tokens', {
            'metavar': 'ARGUMENT',
            'nargs': '*',
            'help': 'Product quantity as <id>-<quantity>, or an option as '
                    'discountCard=, balanceDebitCard=, pathToFile= or '
                    'saveToFile='
        })
    ]

    def __init__(self) -> None:
        super().__init__()
        self.tokens: list[str] = []
        # Used for the error record when the data settings are malformed.
        self.encoding = 'utf-8'
        self.delimiter = ';'

    def run(self) -> None:
        save_path = get_save_path(self.tokens)
        try:
            self.encoding = self.settings.get_encoding('data', 'encoding')
            self.delimiter = self.settings.get_delimiter('data', 'delimiter')
            invocation = parse_tokens(self.tokens)
            receipt = self.compute(invocation)
            formatter = ReceiptFormatter(self.settings.get('receipt',
                                                           'currency'))
            writer = ReceiptWriter(invocation.save_path, receipt, formatter,
                                   encoding=self.encoding,
                                   delimiter=self.delimiter)
            print(formatter.render_console(receipt))
            writer.write()
        except (CheckoutError, OSError) as error:
            if save_path is None:
                raise
            LOGGER.error('Could not compute receipt: %s', error)
            self._write_error(save_path, error)
        else:
            LOGGER.info('Receipt written to %s', save_path)

    def compute(self, invocation: Invocation) -> Receipt:
        """
        Load the catalog and discount cards and compute the receipt for the
        parameters of the invocation.
        """

        calculator = ReceiptCalculator(
            wholesale_quantity=self.settings.get_int('discounts',
                                                     'wholesale_quantity',
                                                     minimum=1),
            wholesale_rate=self.settings.get_decimal('discounts',
                                                     'wholesale_rate')
        )
        catalog = Catalog.load(invocation.products_path,
                               encoding=self.encoding,
                               delimiter=self.delimiter)
        lines = resolve(invocation.quantities, catalog)
        card = None if invocation.card_number is None else \
            self._load_cards().find(invocation.card_number)

        return calculator.compute(lines, card=card, balance=invocation.balance)

    def _load_cards(self) -> DiscountCards:
        path = self.settings.get_path('data', 'discount_cards')
        default_rate = self.settings.get_price('discounts', 'default_rate')
        return DiscountCards.load(path, encoding=self.encoding,
                                  delimiter=self.delimiter,
                                  default_rate=default_rate)

    def _write_error(self, path: Path, error: BaseException) -> None:
        try:
            ErrorWriter(path, error, encoding=self.encoding).write()
        except OSError:
            LOGGER.exception('Could not write error record to %s', path)

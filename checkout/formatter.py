"""
Rendering of computed receipts for the console and for delimited reports.
"""

from .io.base import Row
from .models.base import Price
from .models.receipt import Receipt

DATE_FORMAT = '%d.%m.%Y'
TIME_FORMAT = '%H:%M:%S'

_LINE_FORMAT = '{:<5} {:<30} {:<10} {:<10} {:<10} {:<15}'

class ReceiptFormatter:
    """
    Formatter of receipts. Only values that are already computed on the receipt
    are shown, with the currency marker of the formatter.
    """

    def __init__(self, currency: str = '$') -> None:
        self.currency = currency

    def _prefix(self, value: Price) -> str:
        return f'{self.currency}{value}'

    def _suffix(self, value: Price) -> str:
        return f'{value}{self.currency}'

    def render_console(self, receipt: Receipt) -> str:
        """
        Render the receipt as a human-readable table with a totals block.
        """

        lines = [
            f'Date: {receipt.timestamp.strftime(DATE_FORMAT)}',
            f'Time: {receipt.timestamp.strftime(TIME_FORMAT)}',
            '',
            _LINE_FORMAT.format('QTY', 'DESCRIPTION', 'PRICE', 'TOTAL',
                                'DISCOUNT', 'DISCOUNT INFO')
        ]
        for line in receipt.lines:
            lines.append(_LINE_FORMAT.format(line.quantity,
                                             line.product.description,
                                             self._prefix(line.product.price),
                                             self._prefix(line.gross_total),
                                             self._prefix(line.discount),
                                             line.discount_label))

        lines.extend([
            '',
            f'TOTAL PRICE: {self._prefix(receipt.gross_total)}',
            f'TOTAL DISCOUNT: {self._prefix(receipt.discount_total)}',
            f'TOTAL WITH DISCOUNT: {self._prefix(receipt.net_total)}'
        ])
        if receipt.discount_card is not None:
            lines.append(f'DISCOUNT CARD: {receipt.discount_card.number} '
                         f'({receipt.discount_card.rate}%)')
        if receipt.balance is not None and receipt.balance_after is not None:
            lines.extend([
                f'BALANCE DEBIT CARD: {self._prefix(receipt.balance)}',
                'TOTAL BALANCE AFTER PURCHASE: '
                f'{self._prefix(receipt.balance_after)}'
            ])

        return '\n'.join(line.rstrip() for line in lines)

    def render_records(self, receipt: Receipt) -> list[Row]:
        """
        Render the receipt as rows of fields for a delimited report file.
        """

        rows: list[Row] = [
            ['Date', receipt.timestamp.strftime(DATE_FORMAT)],
            ['Time', receipt.timestamp.strftime(TIME_FORMAT)],
            ['QTY', 'DESCRIPTION', 'PRICE', 'DISCOUNT', 'TOTAL']
        ]
        rows.extend(
            [
                str(line.quantity), line.product.description,
                self._suffix(line.product.price), self._suffix(line.discount),
                self._suffix(line.net_total)
            ]
            for line in receipt.lines
        )

        rows.append(['DISCOUNT CARD', 'DISCOUNT PERCENTAGE'])
        if receipt.discount_card is not None:
            rows.append([
                str(receipt.discount_card.number),
                f'{receipt.discount_card.rate}%'
            ])

        rows.extend([
            [],
            ['TOTAL PRICE', 'TOTAL DISCOUNT', 'TOTAL WITH DISCOUNT'],
            [
                self._suffix(receipt.gross_total),
                self._suffix(receipt.discount_total),
                self._suffix(receipt.net_total)
            ]
        ])

        if receipt.balance is not None and receipt.balance_after is not None:
            rows.extend([
                ['BALANCE DEBIT CARD', self._suffix(receipt.balance)],
                [
                    'TOTAL BALANCE AFTER PURCHASE',
                    self._suffix(receipt.balance_after)
                ]
            ])

        return rows

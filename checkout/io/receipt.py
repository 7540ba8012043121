"""
Receipt report file handling.
"""

from pathlib import Path
from typing import IO
from .base import CSVWriter, Writer
from ..formatter import ReceiptFormatter
from ..models.receipt import Receipt

class ReceiptWriter(CSVWriter[Receipt]):
    """
    Receipt report file writer.
    """

    def __init__(self, path: Path, model: Receipt,
                 formatter: ReceiptFormatter, encoding: str = 'utf-8',
                 delimiter: str = ';'):
        super().__init__(path, model, encoding=encoding, delimiter=delimiter)
        # Render before the file is opened so that no partial report remains
        # if formatting fails.
        self._rows = formatter.render_records(model)

    def serialize(self, file: IO) -> None:
        self.save(self._rows, file)

class ErrorWriter(Writer[BaseException]):
    """
    Writer of the error record which replaces a receipt report.
    """

    def serialize(self, file: IO) -> None:
        message = getattr(self._model, 'msg', str(self._model))
        file.write(f'Error: {message}')

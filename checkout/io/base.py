"""
Abstract base classes for file reading, writing and parsing.
"""

from abc import ABCMeta
from collections.abc import Iterable, Iterator
import csv
from pathlib import Path
from typing import Generic, IO, TypeVar

T = TypeVar('T')

Record = dict[str, str]
Row = list[str]

class Reader(Generic[T], metaclass=ABCMeta):
    """
    File reader.
    """

    _mode = 'r'

    def __init__(self, path: Path, encoding: str = 'utf-8'):
        self._path = path
        self._encoding = encoding

    @property
    def path(self) -> Path:
        """
        Retrieve the path from which to read the models.
        """

        return self._path

    def read(self) -> Iterator[T]:
        """
        Read the file from the path and yield specific models from it.
        """

        with self._path.open(self._mode, encoding=self._encoding,
                             newline='') as file:
            yield from self.parse(file)

    def parse(self, file: IO) -> Iterator[T]:
        """
        Parse an open file and yield specific models from it.
        """

        raise NotImplementedError('Must be implemented by subclasses')

class CSVReader(Reader[T], metaclass=ABCMeta):
    """
    Delimited file reader with a header row and trimmed values.
    """

    def __init__(self, path: Path, encoding: str = 'utf-8',
                 delimiter: str = ';'):
        super().__init__(path, encoding=encoding)
        self._delimiter = delimiter

    def load(self, file: IO) -> Iterator[Record]:
        """
        Load the records of the delimited file as mappings from the header
        fields to the values of each nonempty row.
        """

        rows = csv.reader(file, delimiter=self._delimiter)
        header = [field.strip() for field in next(rows, [])]
        if not header:
            raise ValueError(f"File '{self._path}' has no header row")
        for row in rows:
            if not any(value.strip() for value in row):
                continue
            if len(row) > len(header):
                raise ValueError(f"Row {rows.line_num} of '{self._path}' has "
                                 f"more values than the header")
            yield dict(zip(header, (value.strip() for value in row)))

class Writer(Generic[T], metaclass=ABCMeta):
    """
    File writer.
    """

    _mode = 'w'

    def __init__(self, path: Path, model: T, encoding: str = 'utf-8'):
        self._path = path
        self._model = model
        self._encoding = encoding

    @property
    def path(self) -> Path:
        """
        Retrieve the path to which to write the model.
        """

        return self._path

    def write(self) -> None:
        """
        Write the model to the path.
        """

        with self._path.open(self._mode, encoding=self._encoding,
                             newline='') as file:
            self.serialize(file)

    def serialize(self, file: IO) -> None:
        """
        Write a serialized variant of the model to the open file.
        """

        raise NotImplementedError('Must be implemented by subclasses')

class CSVWriter(Writer[T], metaclass=ABCMeta):
    """
    Delimited file writer.
    """

    def __init__(self, path: Path, model: T, encoding: str = 'utf-8',
                 delimiter: str = ';'):
        super().__init__(path, model, encoding=encoding)
        self._delimiter = delimiter

    def save(self, rows: Iterable[Row], file: IO) -> None:
        """
        Save the rows to the delimited file.
        """

        writer = csv.writer(file, delimiter=self._delimiter,
                            lineterminator='\n')
        writer.writerows(rows)

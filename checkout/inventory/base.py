"""
Read-only collection of models keyed by an identifying number.
"""

from collections.abc import Iterable, Iterator
import csv
import logging
from pathlib import Path
from typing import Any, Mapping, TypeVar
from ..errors import CheckoutError
from ..io.base import CSVReader

T = TypeVar('T')
IT = TypeVar('IT', bound='Inventory')

LOGGER = logging.getLogger(__name__)

class Inventory(Mapping[int, T]):
    """
    An inventory of a type of model keyed by an identifying number, in the
    order that the models were provided. The inventory does not change after
    it is created.
    """

    error: type[CheckoutError] = CheckoutError
    kind = 'models'

    def __init__(self, models: Iterable[T] = ()) -> None:
        self._models: dict[int, T] = {}
        for model in models:
            key = self.get_key(model)
            if key in self._models:
                raise self.error(f'Duplicate {self.kind} entry {key}')
            self._models[key] = model

    @staticmethod
    def get_key(model: T) -> int:
        """
        Retrieve the identifying number of a model.
        """

        raise NotImplementedError('Key must be implemented by subclass')

    @classmethod
    def get_reader(cls, path: Path, encoding: str = 'utf-8',
                   delimiter: str = ';') -> CSVReader[T]:
        """
        Create a reader for a file containing the models.
        """

        raise NotImplementedError('Reader must be implemented by subclass')

    @classmethod
    def load(cls: type[IT], path: Path, encoding: str = 'utf-8',
             delimiter: str = ';', **kwargs: Any) -> IT:
        """
        Create an inventory based on models stored in a delimited file.
        """

        reader = cls.get_reader(path, encoding=encoding, delimiter=delimiter)
        try:
            inventory = cls(reader.read(), **kwargs)
        except KeyError as error:
            raise cls.error(f'Could not load {cls.kind} from {path}: '
                            f'missing field {error}') from error
        except (OSError, ValueError, csv.Error) as error:
            raise cls.error(f'Could not load {cls.kind} from {path}: '
                            f'{error}') from error

        LOGGER.info('Loaded %d %s from %s', len(inventory), cls.kind, path)
        return inventory

    def __getitem__(self, key: int) -> T:
        return self._models[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

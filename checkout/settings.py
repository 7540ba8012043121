"""
Settings for data sources, receipt rendering and discounts of checkouts.
"""

import codecs
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path
from typing import Any, Optional
import tomlkit
from typing_extensions import Required, TypedDict, Union
from .errors import InvalidArgument
from .models.base import Price

ENVIRONMENT_PREFIX = 'CHECKOUT'

class Source(TypedDict, total=False):
    """
    A TOML file in the chain of settings sources.
    """

    path: Required[Union[str, os.PathLike]]
    environment: bool
    prefix: tuple[str, ...]

Chain = tuple[Source, ...]
Tables = dict[str, dict[str, Any]]

def _read_tables(path: Union[str, os.PathLike],
                 prefix: tuple[str, ...]) -> Tables:
    try:
        with Path(path).open('r', encoding='utf-8') as settings_file:
            tables: Any = tomlkit.load(settings_file).unwrap()
    except FileNotFoundError:
        return {}

    for group in prefix:
        tables = tables.get(group, {})
    return tables

class Settings:
    """
    Settings provider which looks up values in a chain of TOML files.

    The first source is a local `settings.toml` file, whose path can be
    replaced by the `CHECKOUT_SETTINGS_FILE` environment variable. Values in
    this source can be overridden by environment variables named after the
    section and key, for example `CHECKOUT_DATA_DELIMITER`. Missing values are
    looked up in the `tool.checkout` tables of a `pyproject.toml` file and
    finally in the defaults packaged with the module.
    """

    FILES: Chain = (
        {
            'path': 'settings.toml'
        },
        {
            'path': 'pyproject.toml',
            'environment': False,
            'prefix': ('tool', 'checkout')
        },
        {
            'path': Path(__file__).parent / 'settings.toml',
            'environment': False
        }
    )
    _instances: dict[tuple[tuple[Any, ...], ...], "Settings"] = {}

    @classmethod
    def get_settings(cls) -> "Settings":
        """
        Retrieve the settings singleton.
        """

        return cls._get_chain(cls.FILES)

    @classmethod
    def _get_chain(cls, chain: Chain) -> "Settings":
        key = tuple(tuple(source.items()) for source in chain)
        if key not in cls._instances:
            cls._instances[key] = cls(fallbacks=chain[1:], **chain[0])

        return cls._instances[key]

    @classmethod
    def clear(cls) -> None:
        """
        Remove the singleton instance and any fallback instances.
        """

        cls._instances = {}

    def __init__(self, path: Union[str, os.PathLike] = 'settings.toml',
                 environment: bool = True, prefix: tuple[str, ...] = (),
                 fallbacks: Chain = ()) -> None:
        if environment:
            path = os.getenv(f'{ENVIRONMENT_PREFIX}_SETTINGS_FILE', path)

        self.tables = _read_tables(path, prefix)
        self.environment = environment
        self.fallbacks = fallbacks

    def _override(self, section: str, key: str) -> Optional[str]:
        if not self.environment:
            return None

        name = f'{ENVIRONMENT_PREFIX}_{section}_{key}'.upper().replace('-', '_')
        return os.environ.get(name)

    def get(self, section: str, key: str) -> str:
        """
        Retrieve a settings value as a string based on its `section` name,
        which refers to a TOML table grouping multiple settings, and its `key`.
        """

        override = self._override(section, key)
        if override is not None:
            return override

        table = self.tables.get(section)
        if isinstance(table, dict) and key in table:
            return str(table[key])
        if self.fallbacks:
            return self._get_chain(self.fallbacks).get(section, key)

        raise KeyError(f'{section} is not a section or does not have {key}')

    def get_int(self, section: str, key: str, minimum: int = 0) -> int:
        """
        Retrieve a settings value as an integer of at least `minimum`.
        """

        value = self.get(section, key)
        try:
            number = int(value)
        except ValueError as error:
            raise InvalidArgument(f'Setting {section}.{key} must be an '
                                  f'integer, not {value!r}') from error

        if number < minimum:
            raise InvalidArgument(f'Setting {section}.{key} must be at least '
                                  f'{minimum}, not {number}')
        return number

    def get_decimal(self, section: str, key: str,
                    minimum: Decimal = Decimal(0)) -> Decimal:
        """
        Retrieve a settings value as a finite decimal number of at least
        `minimum`.
        """

        value = self.get(section, key)
        try:
            number = Decimal(value)
        except InvalidOperation as error:
            raise InvalidArgument(f'Setting {section}.{key} must be a '
                                  f'decimal number, not {value!r}') from error

        if not number.is_finite() or number < minimum:
            raise InvalidArgument(f'Setting {section}.{key} must be a number '
                                  f'of at least {minimum}, not {value!r}')
        return number

    def get_price(self, section: str, key: str) -> Price:
        """
        Retrieve a non-negative settings value as a price or rate with two
        decimals.
        """

        value = self.get_decimal(section, key)
        try:
            return Price(value)
        except ValueError as error:
            raise InvalidArgument(f'Setting {section}.{key} is not a valid '
                                  f'price: {value}') from error

    def get_path(self, section: str, key: str) -> Path:
        """
        Retrieve a settings value as a non-empty path.
        """

        value = self.get(section, key)
        if value == '':
            raise InvalidArgument(f'Setting {section}.{key} must be a path')
        return Path(value)

    def get_delimiter(self, section: str, key: str) -> str:
        """
        Retrieve a settings value as a single field delimiter character.
        """

        value = self.get(section, key)
        if len(value) != 1 or value in ('\r', '\n', '"'):
            raise InvalidArgument(f'Setting {section}.{key} must be a single '
                                  f'delimiter character, not {value!r}')
        return value

    def get_encoding(self, section: str, key: str) -> str:
        """
        Retrieve a settings value as the name of a known character encoding.
        """

        value = self.get(section, key)
        try:
            return codecs.lookup(value).name
        except LookupError as error:
            raise InvalidArgument(f'Setting {section}.{key} is not a known '
                                  f'encoding: {value!r}') from error

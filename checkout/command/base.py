"""
Base for checkout subcommands.
"""

from argparse import ArgumentParser
from collections.abc import Sequence
import logging
import os
from pathlib import Path
from typing import Any, Callable, ClassVar, Union
from typing_extensions import TypedDict
from .. import __name__ as NAME, __version__ as VERSION
from ..settings import Settings

class SubparserKeywords(TypedDict, total=False):
    """
    Keyword arguments for creating a subparser of a subcommand.
    """

    help: str
    description: str
    epilog: str

ArgumentKeywords = dict[str, Any]
SubparserArguments = list[tuple[Union[str, tuple[str, ...]], ArgumentKeywords]]

LOG_LEVELS = ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG']

class Base:
    """
    Abstract command handling.
    """

    _commands: ClassVar[dict[str, type['Base']]] = {}
    program: ClassVar[str] = NAME
    subcommand: ClassVar[str] = ''
    subparser_keywords: ClassVar[SubparserKeywords] = {}
    subparser_arguments: ClassVar[SubparserArguments] = []

    @classmethod
    def register(cls, name: str) -> Callable[[type['Base']], type['Base']]:
        """
        Register a subcommand.
        """

        def decorator(subclass: type['Base']) -> type['Base']:
            cls._commands[name] = subclass
            return subclass

        return decorator

    @classmethod
    def get_command(cls, name: str) -> 'Base':
        """
        Create a command instance for the given subcommand name.
        """

        return cls._commands[name]()

    @classmethod
    def register_arguments(cls) -> ArgumentParser:
        """
        Create an argument parser for all registered subcommands.
        """

        parser = ArgumentParser(prog=cls.program,
                                description='Checkout receipt calculator')
        parser.add_argument('--version', action='version',
                            version=f'{NAME} {VERSION}')
        parser.add_argument('--log', choices=LOG_LEVELS, default='INFO',
                            help='Log level')
        subparsers = parser.add_subparsers(dest='subcommand',
                                           help='Subcommands')
        for name, command in cls._commands.items():
            subparser = subparsers.add_parser(name,
                                              **command.subparser_keywords)
            for argument, keywords in command.subparser_arguments:
                if isinstance(argument, str):
                    subparser.add_argument(argument, **keywords)
                else:
                    subparser.add_argument(*argument, **keywords)

        return parser

    @classmethod
    def _get_program(cls, executable: str, script: str) -> str:
        path = Path(script)
        if path.name != '__main__.py':
            return path.name

        interpreter = Path(executable)
        if str(interpreter.parent) in os.get_exec_path():
            return f'{interpreter.name} -m {NAME}'
        return f'{executable} -m {NAME}'

    @classmethod
    def start(cls, executable: str, argv: Sequence[str]) -> None:
        """
        Parse command line arguments, register them to the selected command and
        execute the action of the command.
        """

        Base.program = cls._get_program(executable, argv[0])
        parser = cls.register_arguments()
        arguments = parser.parse_args(argv[1:])

        logging.basicConfig(format='%(asctime)s %(name)s %(levelname)s: '
                                   '%(message)s')
        logging.getLogger(NAME).setLevel(getattr(logging, arguments.log))

        if arguments.subcommand is None:
            parser.print_usage()
            return

        command = cls.get_command(arguments.subcommand)
        Base.subcommand = arguments.subcommand
        for key, value in vars(arguments).items():
            if key not in ('subcommand', 'log'):
                setattr(command, key, value)

        command.run()

    def __init__(self) -> None:
        self.settings = Settings.get_settings()

    def run(self) -> None:
        """
        Execute the command.
        """

        raise NotImplementedError('Must be implemented by subclasses')

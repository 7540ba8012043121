"""
Tests for checkout subcommand base.
"""

import logging
import os
from pathlib import Path
from typing import ClassVar, cast, final
from unittest.mock import ANY, MagicMock, call, patch
from typing_extensions import override
from checkout import __name__ as NAME, __version__ as VERSION
from checkout.command.base import Base, SubparserArguments, SubparserKeywords
from ..settings import SettingsTestCase

@Base.register("test")
@final
class TestCommand(Base):
    """
    Example subcommand.
    """

    latest_object: ClassVar["TestCommand | None"] = None
    subparser_keywords: ClassVar[SubparserKeywords] = {"help": "Test command"}
    subparser_arguments: ClassVar[SubparserArguments] = [
        ("fool", {"type": int, "help": "ABC"}),
        (("-b", "--bar"), {"dest": "bizarre"}),
    ]
    fool: int
    bizarre: str

    @override
    def run(self) -> None:
        self.__class__.latest_object = self

class BaseTest(SettingsTestCase):
    """
    Tests for abstract command handling.
    """

    @override
    def tearDown(self) -> None:
        super().tearDown()
        # Reset logging level
        logging.getLogger(NAME).setLevel(logging.NOTSET)
        Base.program = NAME
        TestCommand.latest_object = None

    def test_get_command(self) -> None:
        """
        Test creating a command instance.
        """

        test = Base.get_command("test")
        self.assertIsInstance(test, TestCommand)
        with self.assertRaises(KeyError):
            _ = Base.get_command("missing")

    def test_run(self) -> None:
        """
        Test executing the abstract command.
        """

        with self.assertRaises(NotImplementedError):
            Base().run()

    @patch("checkout.command.base.ArgumentParser")
    def test_register_arguments(self, parser: MagicMock) -> None:
        """
        Test creating an argument parser for all registered subcommands.
        """

        _ = Base.register_arguments()
        parser.assert_called_once_with(
            prog=NAME, description="Checkout receipt calculator"
        )
        main = cast(MagicMock, parser.return_value)
        cast(MagicMock, main.add_argument).assert_has_calls(
            [
                call("--version", action="version",
                     version=f"checkout {VERSION}"),
                call(
                    "--log",
                    choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
                    default="INFO",
                    help="Log level",
                ),
            ]
        )
        add_subparsers = cast(MagicMock, main.add_subparsers)
        add_subparsers.assert_called_once_with(
            dest="subcommand", help="Subcommands"
        )
        subparsers = cast(MagicMock, add_subparsers.return_value)
        add_parser = cast(MagicMock, subparsers.add_parser)
        add_parser.assert_any_call("test", help="Test command")
        add_parser.assert_any_call(
            "check", help="Compute a receipt for a basket of products",
            description=ANY, epilog=ANY
        )
        subparser = cast(MagicMock, add_parser.return_value)
        cast(MagicMock, subparser.add_argument).assert_has_calls(
            [
                call("fool", type=int, help="ABC"),
                call("-b", "--bar", dest="bizarre"),
            ]
        )

    @patch("checkout.command.base.ArgumentParser.print_usage")
    def test_start(self, print_usage: MagicMock) -> None:
        """
        Test parsing command line arguments, registering them to a command and
        executing the action of the command.
        """

        Base.start("python", ["env/bin/checkout"])
        self.assertEqual(Base.program, "checkout")
        print_usage.assert_called_once_with()
        self.assertIsNone(TestCommand.latest_object)

        Base.start(
            str(Path(os.get_exec_path()[0], "python")),
            ["checkout/__main__.py", "--log", "DEBUG", "test", "42"],
        )
        self.assertEqual(Base.program, "python -m checkout")
        self.assertEqual(logging.getLogger(NAME).level, logging.DEBUG)

        Base.start(
            "env/bin/python",
            ["checkout/__main__.py", "test", "1234", "-b", "qux"]
        )
        self.assertEqual(Base.program, "env/bin/python -m checkout")
        self.assertEqual(logging.getLogger(NAME).level, logging.INFO)
        if TestCommand.latest_object is None:
            self.fail("Unexpected missing latest command object")
        self.assertEqual(Base.subcommand, "test")
        self.assertEqual(TestCommand.latest_object.fool, 1234)
        self.assertEqual(TestCommand.latest_object.bizarre, "qux")

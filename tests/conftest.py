"""
Shared pytest fixtures for the console test suite.

Usage in tests:
    def test_something(console):
        console.execute("help")
        assert console.sink.last.text.startswith("Commands")
"""

import logging

import pytest

from chatcmd.commands import Command, CommandRegistry, Parameter, ParserRegistry
from chatcmd.interface import Console, HostPlugin, PluginDescriptor
from chatcmd.ui import MessageLog
from tests.helpers import POINT_PARSER


@pytest.fixture(autouse=True)
def _reset_chatcmd_logger():
    """init_logger() detaches 'chatcmd' from the root logger; undo it after each test."""
    yield
    logger = logging.getLogger("chatcmd")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sink():
    return MessageLog()


@pytest.fixture
def registry():
    return CommandRegistry()


@pytest.fixture
def parsers():
    registry = ParserRegistry()
    registry.register(POINT_PARSER, owner="test.geo")
    return registry


def _add(name, args):
    return str(args.value(0) + args.value(1))


def _say(name, args):
    return " ".join(args[0].values())


@pytest.fixture
def sample_commands():
    """Commands covering scalar, linked and parameterless schemas."""
    return [
        Command("hello", lambda name, args: "Hello!", "Say hello"),
        Command("add", _add, "Add two numbers", (Parameter("a", int), Parameter("b", int))),
        Command("say", _say, "Repeat a message", (Parameter("message", str, linked=True),)),
    ]


@pytest.fixture
def console(sink):
    """Console with built-ins only and no plugins."""
    return Console(sink)


@pytest.fixture
def geo_console(sink, sample_commands):
    """
    Console with two known host plugins; only 'test.geo' registers.

    'test.geo' contributes the sample commands plus the Point parser.
    """
    hosts = [HostPlugin("test.geo", "Geo", "1.2.0"), HostPlugin("test.idle", "Idle")]
    console = Console(sink, hosts=hosts)
    console.startup([
        lambda: PluginDescriptor("test.geo", sample_commands, parsers=[POINT_PARSER]),
    ])
    return console

# plugins/text/entrypoint.py
from __future__ import annotations

from chatcmd.commands import Parameter, command
from chatcmd.interface.loader import PluginDescriptor

from . import GUID


@command(
    name="say",
    description="Repeat a message.",
    parameters=[Parameter("message", str, linked=True)],
)
def say(name, args):
    return " ".join(args[0].values())


@command(
    name="add",
    description="Add two whole numbers.",
    parameters=[Parameter("a", int), Parameter("b", int)],
)
def add(name, args):
    return str(args.value(0) + args.value(1))


@command(
    name="shout",
    parameters=[Parameter("words", str, linked=True, description="text to upper-case")],
)
def shout(name, args):
    """Upper-case a message."""
    return " ".join(args[0].values()).upper() + "!"


def register() -> PluginDescriptor:
    return PluginDescriptor(guid=GUID, commands=[say, add, shout])

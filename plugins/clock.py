# plugins/clock.py
from __future__ import annotations

import time

from chatcmd.commands import command
from chatcmd.interface.loader import PluginDescriptor

GUID = "chatcmd.clock"
NAME = "Clock"
VERSION = "0.2.0"

_STARTED = time.monotonic()
_ticks = 0


def _on_tick() -> None:
    global _ticks
    _ticks += 1


@command(name="uptime", description="Time since the console started.")
def uptime(name, args):
    seconds = int(time.monotonic() - _STARTED)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"Up {hours:02d}:{minutes:02d}:{seconds:02d} ({_ticks} commands run)"


def register() -> PluginDescriptor:
    return PluginDescriptor(guid=GUID, commands=[uptime], update=_on_tick)

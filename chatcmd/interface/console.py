#!/usr/bin/env python3
# chatcmd/interface/console.py
from __future__ import annotations

"""
The console: registries, dispatcher and plugin lifecycle in one object.

Usage:
    console = Console(sink, hosts=catalog.hosts.values())
    console.startup(catalog.callbacks)   # once, before going interactive
    console.execute("help")
    console.suggest("he", 2)
"""

import logging
from typing import Iterable

from chatcmd.commands.command_types import Severity
from chatcmd.commands.commands import CommandRegistry
from chatcmd.commands.parsers import ParserRegistry
from chatcmd.interface.builtins import builtin_commands
from chatcmd.interface.completion import complete_name, suggest
from chatcmd.interface.handler import Dispatcher
from chatcmd.interface.loader import (
    HostPlugin,
    PluginDescriptor,
    RegistrationCallback,
    accept_plugins,
)
from chatcmd.ui.sink import MessageLog, OutputSink

logger = logging.getLogger(__name__)


class Console:
    """Owns the command and parser registries for one console instance."""

    def __init__(
        self,
        sink: OutputSink | None = None,
        hosts: Iterable[HostPlugin] = (),
        *,
        builtins: bool = True,
    ) -> None:
        self.sink: OutputSink = sink if sink is not None else MessageLog()
        self.registry = CommandRegistry()
        self.parsers = ParserRegistry()
        self.hosts: dict[str, HostPlugin] = {host.guid: host for host in hosts}
        self.plugins: list[PluginDescriptor] = []
        self.dispatcher = Dispatcher(self.registry, self.parsers, self.sink)
        self._started = False

        if builtins:
            for command_obj in builtin_commands(self):
                self.registry.register(command_obj)

    @property
    def started(self) -> bool:
        return self._started

    def startup(self, callbacks: Iterable[RegistrationCallback]) -> list[PluginDescriptor]:
        """Run every registration callback once; registration closes afterwards."""
        if self._started:
            raise RuntimeError("Console has already started; registration is closed.")
        self._started = True
        return accept_plugins(
            callbacks, self.registry, self.parsers, self.hosts, self.plugins, self.sink)

    def is_dependency(self, guid: str) -> bool:
        """True when host plugin `guid` had its descriptor accepted."""
        return any(plugin.guid == guid for plugin in self.plugins)

    # ---------------- Host events ----------------

    def execute(self, line: str) -> None:
        self.dispatcher.execute(line)

    def suggest(self, text: str, cursor_position: int | None = None) -> str | None:
        return suggest(self.registry, text, cursor_position)

    def complete(self, text: str, cursor_position: int | None = None) -> str | None:
        return complete_name(self.registry, text, cursor_position)

    def tick(self) -> None:
        """Run every accepted plugin's update callback once."""
        for plugin in self.plugins:
            if plugin.update is None:
                continue
            try:
                plugin.update()
            except Exception:
                logger.exception("Update callback of plugin %s failed", plugin.guid)

    def message(self, text: str, label: str | None = None,
                severity: Severity = Severity.INFO, size: int | None = None) -> None:
        """Emit a message on the console's sink."""
        self.sink.emit(text, label, severity, size)

#!/usr/bin/env python3
# chatcmd/interface/builtins.py
from __future__ import annotations

"""
Commands every console provides: help, clear, plugins, parsers.
"""

import logging
from typing import TYPE_CHECKING

from chatcmd.commands.command_types import Command, CommandResult, Parameter, Severity
from chatcmd.commands.errors import ArgumentParseFailure
from chatcmd.interface.handler import format_command_help, list_commands
from chatcmd.interface.parser import Arguments
from chatcmd.ui.static.table import format_table

if TYPE_CHECKING:
    from chatcmd.interface.console import Console

logger = logging.getLogger(__name__)


def builtin_commands(console: Console) -> list[Command]:
    """Build the built-in commands bound to `console`."""

    def help_(name: str, args: Arguments) -> str | CommandResult:
        target = args.value(0)
        if target is None:
            return list_commands(console.registry)
        text = format_command_help(console.registry, target)
        if text is None:
            return CommandResult(f'Command called "{target}" does not exist', Severity.WARNING)
        return text

    def clear(name: str, args: Arguments) -> str:
        console.sink.clear()
        return "Messages have been cleared!"

    def plugins(name: str, args: Arguments) -> str:
        hosts = list(console.hosts.values())
        if not hosts:
            return "No plugins have been found"
        rows = [
            [host.name, host.guid, host.version,
             "Yes" if console.is_dependency(host.guid) else "No"]
            for host in hosts
        ]
        table = format_table(rows, headers=["Name", "GUID", "Version", "Dependency"])
        return f"Plugins ({len(hosts)}):\n{table}"

    def parsers(name: str, args: Arguments) -> str | CommandResult:
        type_arg = args.value(0)
        if type_arg is None:
            if len(console.parsers) == 0:
                return "No parsers have been found"
            names = [parser.name for parser in console.parsers]
            return "\n".join([f"Parsers ({len(names)}):", *names])

        parser = console.parsers.find(type_arg)
        if parser is None:
            return CommandResult(f'Parser with type "{type_arg}" does not exist', Severity.WARNING)

        sample = args.value(1)
        if sample is not None:
            try:
                parser(2, sample)
            except ArgumentParseFailure as exc:
                return CommandResult(exc.message, exc.severity)
            except Exception:
                logger.exception("Parser for type '%s' failed on %r", parser.name, sample)
                return CommandResult("Something went wrong", Severity.ERROR)
            return "Valid"

        lines = [f"Name: {parser.name}", f"Example: {parser.example}"]
        if parser.owner is not None:
            lines.append(f"Plugin: {parser.owner}")
        return "\n".join(lines)

    return [
        Command("help", help_, "Shows a list of commands",
                (Parameter("command", str, optional=True),)),
        Command("clear", clear, "Clears all the messages"),
        Command("plugins", plugins, "Shows a list of plugins"),
        Command("parsers", parsers, "Shows a list of parsers",
                (Parameter("type", str, optional=True),
                 Parameter("input", str, optional=True))),
    ]

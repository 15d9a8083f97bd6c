#!/usr/bin/env python3
# chatcmd/interface/handler.py
from __future__ import annotations

"""
Command dispatch and help formatting.

`Dispatcher.execute` is the single entry point for a submitted line. Every
failure, whether a tagged error from binding or an exception escaping a
handler, ends up as exactly one message on the output sink.
"""

import difflib
import logging
from typing import Any

from chatcmd.commands.command_types import CommandResult, Severity, simplify
from chatcmd.commands.commands import CommandRegistry
from chatcmd.commands.errors import ConsoleError, Err, ErrorKind
from chatcmd.commands.parsers import ParserRegistry
from chatcmd.commands.schema import schema_problem
from chatcmd.interface.parser import bind_arguments, tokenize
from chatcmd.ui.sink import OutputSink

logger = logging.getLogger(__name__)

HELP_TEXT = "Type 'help <command>' for more information on a specific command."

# Symbol -> legend line, in the order they are listed by `help <command>`
_LEGEND = (
    (("?",), "? means optional"),
    (("#",), "# means the following arguments are linked"),
    (("(", ")"), "() shows a description"),
    (("[", "]"), "[] shows what type it is"),
)

# ---------------------------------------------------------------------------
# Help formatting
# ---------------------------------------------------------------------------


def _suggest_similar_names(registry: CommandRegistry, name: str) -> str:
    """Return a short suggestion string for misspelled commands."""
    matches = difflib.get_close_matches(name, registry.names(), n=3, cutoff=0.6)
    return f" Did you mean: {', '.join(matches)}?" if matches else ""


def signature_legend(signature: str) -> list[str]:
    """Explain each annotation symbol present in `signature`."""
    return [
        text for symbols, text in _LEGEND
        if all(symbol in signature for symbol in symbols)
    ]


def list_commands(registry: CommandRegistry) -> str:
    """Render the `help` overview: the command count and one name per line."""
    names = registry.names()
    return "\n".join([f"Commands ({len(names)}):", *names])


def format_command_help(registry: CommandRegistry, name: str) -> str | None:
    """Render help for one command, or None if there is no such command."""
    entry = registry.get(name)
    if entry is None:
        return None

    lines = [f"Name: {entry.name}"]
    if entry.description is not None:
        lines.append(f"Description: {entry.description}")
    if entry.owner is not None:
        lines.append(f"Plugin: {entry.owner}")
    signature = entry.signature
    if signature is not None:
        lines.append(f"Parameters: {signature}")
        lines.extend(signature_legend(signature))
    return "\n".join(lines)

# ---------------------------------------------------------------------------
# Core execution
# ---------------------------------------------------------------------------


class Dispatcher:
    """Resolves a submitted line to a command, binds its arguments and runs it."""

    def __init__(self, registry: CommandRegistry, parsers: ParserRegistry, sink: OutputSink) -> None:
        self.registry = registry
        self.parsers = parsers
        self.sink = sink

    def report(self, err: Err, label: str | None = None) -> None:
        """Emit a tagged error as one sink message."""
        self.sink.emit(err.message, label, err.severity)

    def _emit_result(self, result: Any, label: str) -> None:
        """Normalize handler output."""
        if result is None:
            return
        if isinstance(result, CommandResult):
            if result.message:
                self.sink.emit(result.message, label, result.severity)
            return
        self.sink.emit(str(result), label, Severity.INFO)

    def execute(self, input_line: str) -> None:
        """Run one submitted line; nothing raised by the command escapes."""
        tokens = tokenize(input_line)
        if not tokens:
            return

        command_name, *arg_tokens = tokens
        entry = self.registry.get(command_name)
        if entry is None:
            self.report(Err(
                ErrorKind.UNKNOWN_COMMAND,
                f'Command called "{command_name}" does not exist.'
                f'{_suggest_similar_names(self.registry, command_name)}',
                Severity.WARNING,
            ))
            return

        label = simplify(entry.name)
        problem = schema_problem(entry.parameters)
        if problem is not None:
            logger.warning("Refusing to run '%s': %s", entry.name, problem)
            self.report(Err(ErrorKind.VALIDATION, "Command parameters are invalid"), label)
            return

        bound = bind_arguments(entry.parameters, arg_tokens, self.parsers)
        if isinstance(bound, Err):
            self.report(bound, label)
            return

        try:
            result = entry.invoke(bound.value)
            # Rendering the result runs the handler's own __str__
            self._emit_result(result, label)
        except ConsoleError as exc:
            self.report(exc.err, label)
        except Exception as exc:
            logger.exception("Command '%s' failed", entry.name)
            self.report(Err(ErrorKind.HANDLER_FAILURE, f"{type(exc).__name__}: {exc}"), label)

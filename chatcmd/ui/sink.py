#!/usr/bin/env python3
# chatcmd/ui/sink.py
from __future__ import annotations

"""
Output sinks.

The console core hands every message to an `OutputSink` as plain text plus a
label and a `Severity`; colors and layout are decided here.

- MessageLog: in-memory sink keeping the message history.
- TerminalSink: MessageLog that also prints each message to a stream.
"""

import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol, TextIO

from chatcmd.commands.command_types import Severity
from chatcmd.ui.utils.ansi import clear_screen, colorize_severity
from chatcmd.ui.utils.console import print_line

DEFAULT_LABEL = "System"
DEFAULT_SIZE = 32


class OutputSink(Protocol):
    """What the console core needs from the presentation layer."""

    def emit(
        self,
        text: str,
        label: str | None = None,
        severity: Severity = Severity.INFO,
        size: int | None = None,
        timestamp: datetime | None = None,
    ) -> None:  # pragma: no cover - interface
        ...

    def clear(self) -> None:  # pragma: no cover - interface
        ...


@dataclass(frozen=True, slots=True)
class ConsoleMessage:
    text: str
    label: str = DEFAULT_LABEL
    severity: Severity = Severity.INFO
    size: int = DEFAULT_SIZE
    timestamp: datetime = field(default_factory=datetime.now)

    def render(self) -> str:
        return f"//// {self.timestamp:%d/%m/%Y %I:%M:%S %p} [{self.label}]: {self.text}"


class MessageLog:
    """Sink keeping every emitted message until cleared."""

    def __init__(self, default_size: int = DEFAULT_SIZE) -> None:
        self.default_size = default_size
        self.messages: list[ConsoleMessage] = []

    def emit(
        self,
        text: str,
        label: str | None = None,
        severity: Severity = Severity.INFO,
        size: int | None = None,
        timestamp: datetime | None = None,
    ) -> None:
        message = ConsoleMessage(
            text=str(text),
            label=label if label and label.strip() else DEFAULT_LABEL,
            severity=severity,
            size=self.default_size if size is None else size,
            timestamp=timestamp or datetime.now(),
        )
        self.messages.append(message)
        self._show(message)

    def _show(self, message: ConsoleMessage) -> None:
        pass

    def clear(self) -> None:
        self.messages.clear()

    @property
    def last(self) -> ConsoleMessage | None:
        return self.messages[-1] if self.messages else None

    def texts(self) -> list[str]:
        return [message.text for message in self.messages]


class TerminalSink(MessageLog):
    """Prints messages to a text stream, colored by severity."""

    def __init__(self, default_size: int = DEFAULT_SIZE, stream: TextIO | None = None,
                 color: bool = True) -> None:
        super().__init__(default_size)
        self.stream = stream or sys.stdout
        self.color = color

    def _show(self, message: ConsoleMessage) -> None:
        text = message.render()
        if self.color:
            text = colorize_severity(text, message.severity)
        print_line(text, file=self.stream, flush=True)

    def clear(self) -> None:
        super().clear()
        if self.stream is sys.stdout and self.stream.isatty():
            clear_screen()


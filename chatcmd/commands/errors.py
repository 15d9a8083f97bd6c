#!/usr/bin/env python3
# chatcmd/commands/errors.py
from __future__ import annotations

"""
Console error taxonomy and tagged results.

Binding and coercion never raise for user mistakes; they return either
`Ok(value)` or `Err(kind, message, severity)` and the dispatcher inspects the
tag. Handlers that would rather use exceptions call `.unwrap()`, which raises
the `ConsoleError` subclass matching the error kind; the dispatcher catches
those at the handler boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, NoReturn, TypeVar, Union

from chatcmd.commands.command_types import Severity

T = TypeVar("T")


class ErrorKind(Enum):
    VALIDATION = "validation"
    ARGUMENT_COUNT = "argument_count"
    TYPE_MISMATCH = "type_mismatch"
    PARSE_FAILURE = "parse_failure"
    UNKNOWN_PARSER = "unknown_parser"
    UNKNOWN_COMMAND = "unknown_command"
    PLUGIN_REJECTED = "plugin_rejected"
    HANDLER_FAILURE = "handler_failure"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    kind: ErrorKind
    message: str
    severity: Severity = Severity.ERROR

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise error_from(self)


Result = Union[Ok[T], Err]


class ConsoleError(Exception):
    """Base class for every recoverable console condition."""

    kind: ErrorKind = ErrorKind.VALIDATION
    default_severity: Severity = Severity.ERROR

    def __init__(self, message: str, severity: Severity | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.severity = severity or self.default_severity

    @property
    def err(self) -> Err:
        return Err(self.kind, self.message, self.severity)


class ValidationError(ConsoleError):
    kind = ErrorKind.VALIDATION


class ArgumentCountError(ConsoleError):
    kind = ErrorKind.ARGUMENT_COUNT
    default_severity = Severity.WARNING

    def __init__(self, required: int | str, severity: Severity | None = None) -> None:
        if isinstance(required, int):
            self.required: int | None = required
            message = f"Requires at least {required} argument(s)"
        else:
            self.required = None
            message = required
        super().__init__(message, severity)


class ArgumentTypeMismatch(ConsoleError):
    kind = ErrorKind.TYPE_MISMATCH
    default_severity = Severity.WARNING


class ArgumentParseFailure(ConsoleError):
    """Raised by parser functions to reject a token; forwarded verbatim."""

    kind = ErrorKind.PARSE_FAILURE


class UnknownParserError(ConsoleError):
    kind = ErrorKind.UNKNOWN_PARSER


class UnknownCommandError(ConsoleError):
    kind = ErrorKind.UNKNOWN_COMMAND
    default_severity = Severity.WARNING


class PluginRejected(ConsoleError):
    kind = ErrorKind.PLUGIN_REJECTED
    default_severity = Severity.WARNING


class HandlerFailure(ConsoleError):
    """A handler raised something other than a ConsoleError."""

    kind = ErrorKind.HANDLER_FAILURE


_ERRORS_BY_KIND: dict[ErrorKind, type[ConsoleError]] = {
    cls.kind: cls
    for cls in (
        ValidationError,
        ArgumentCountError,
        ArgumentTypeMismatch,
        ArgumentParseFailure,
        UnknownParserError,
        UnknownCommandError,
        PluginRejected,
        HandlerFailure,
    )
}


def error_from(err: Err) -> ConsoleError:
    """Build the exception matching a tagged error."""
    return _ERRORS_BY_KIND[err.kind](err.message, err.severity)

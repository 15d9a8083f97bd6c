#!/usr/bin/env python3
# chatcmd/commands/__init__.py
from __future__ import annotations

"""
Package for command definitions and registration.

Provides:
- Data structures (`Command`, `Parameter`, `RegisteredCommand`, `CommandResult`, `Severity`).
- Schema validation (`validate_parameters`).
- Registries (`CommandRegistry`, `ParserRegistry`, `TypeParser`).
- Error taxonomy and tagged results (`Ok`, `Err`, `ConsoleError` and subclasses).
"""


from .command_types import (
    Command,
    CommandHandler,
    CommandResult,
    Parameter,
    RegisteredCommand,
    Severity,
    format_signature,
    normalize_name,
    simplify,
    type_name,
)
from .schema import validate_parameters, schema_problem
from .errors import (
    ArgumentCountError,
    ArgumentParseFailure,
    ArgumentTypeMismatch,
    ConsoleError,
    Err,
    ErrorKind,
    HandlerFailure,
    Ok,
    PluginRejected,
    Result,
    UnknownCommandError,
    UnknownParserError,
    ValidationError,
    error_from,
)
from .parsers import ParserRegistry, TypeParser, is_type_parser
from .commands import CommandRegistry, command

__all__ = [
    "Command",
    "CommandHandler",
    "CommandResult",
    "Parameter",
    "RegisteredCommand",
    "Severity",
    "format_signature",
    "normalize_name",
    "simplify",
    "type_name",
    "validate_parameters",
    "schema_problem",
    "ArgumentCountError",
    "ArgumentParseFailure",
    "ArgumentTypeMismatch",
    "ConsoleError",
    "Err",
    "ErrorKind",
    "HandlerFailure",
    "Ok",
    "PluginRejected",
    "Result",
    "UnknownCommandError",
    "UnknownParserError",
    "ValidationError",
    "error_from",
    "ParserRegistry",
    "TypeParser",
    "is_type_parser",
    "CommandRegistry",
    "command",
]

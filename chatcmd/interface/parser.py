#!/usr/bin/env python3
# chatcmd/interface/parser.py
from __future__ import annotations

"""
Argument parsing helpers for commands.

Responsibilities:
- Tokenize a command line on runs of whitespace.
- Bind tokens to a command's parameter schema (scalar / linked / omitted).
- Coerce raw tokens to typed values on demand, builtin conversion first and
  the type parser registry second.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence

from chatcmd.commands.command_types import Parameter, Severity, type_name
from chatcmd.commands.errors import ArgumentParseFailure, Err, ErrorKind, Ok, Result
from chatcmd.commands.parsers import ParserRegistry

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


class _NoNativeConversion(Exception):
    """The requested type has no builtin textual representation."""


def tokenize(command_line: str) -> list[str]:
    """Split a raw command line on whitespace, dropping empty tokens."""
    return command_line.split()


def _native_value(text_value: str, annotation: type) -> Any:
    """
    Convert a string to a builtin type.

    Supported coercions:
        - str -> original text
        - bool -> '1,true,yes,y,on' / '0,false,no,n,off' (case-insensitive)
        - int/float -> cast via constructor
    """
    if annotation is str:
        return text_value
    if annotation is bool:
        lowered = text_value.lower()
        if lowered in _BOOL_TRUE:
            return True
        if lowered in _BOOL_FALSE:
            return False
        raise ValueError(f"'{text_value}' is not a valid boolean")
    if annotation in (int, float):
        return annotation(text_value)
    raise _NoNativeConversion(annotation)


def coerce_value(position: int, text_value: str, annotation: type,
                 parsers: ParserRegistry | None = None) -> Result[Any]:
    """Convert one raw token at `position` into `annotation`."""
    try:
        return Ok(_native_value(text_value, annotation))
    except _NoNativeConversion:
        pass
    except (TypeError, ValueError) as exc:
        return Err(ErrorKind.PARSE_FAILURE, f"Error parsing argument {position}: {exc}")

    parser = parsers.get(annotation) if parsers is not None else None
    if parser is None:
        return Err(ErrorKind.UNKNOWN_PARSER,
                   f'No parser has been found for type "{type_name(annotation)}"')
    try:
        return Ok(parser(position, text_value))
    except ArgumentParseFailure as exc:
        return exc.err


@dataclass(slots=True)
class Argument:
    """
    One bound argument.

    A scalar argument carries `token`; an argument bound to a linked
    parameter carries `tokens`. Read it with the matching accessor:
    `parse`/`value` for scalars, `parse_all`/`values` for linked ones.
    """
    position: int
    type: type
    token: str | None = None
    tokens: tuple[str, ...] | None = None
    parsers: ParserRegistry | None = field(default=None, repr=False, compare=False)

    @property
    def linked(self) -> bool:
        return self.tokens is not None

    @property
    def raw(self) -> str:
        return " ".join(self.tokens) if self.tokens is not None else (self.token or "")

    def _check_type(self, requested: type | None) -> Result[type]:
        requested = self.type if requested is None else requested
        if requested is not self.type:
            return Err(
                ErrorKind.TYPE_MISMATCH,
                f'The argument {self.position} has a type of "{type_name(self.type)}" '
                f'instead of the expected type "{type_name(requested)}"',
                Severity.WARNING,
            )
        return Ok(requested)

    def parse(self, requested: type | None = None) -> Result[Any]:
        if self.tokens is not None:
            return Err(ErrorKind.TYPE_MISMATCH, "Use values() instead", Severity.WARNING)
        checked = self._check_type(requested)
        if isinstance(checked, Err):
            return checked
        return coerce_value(self.position, self.token or "", checked.value, self.parsers)

    def parse_all(self, requested: type | None = None) -> Result[list[Any]]:
        if self.tokens is None:
            return Err(ErrorKind.TYPE_MISMATCH, "Use value() instead", Severity.WARNING)
        checked = self._check_type(requested)
        if isinstance(checked, Err):
            return checked
        values: list[Any] = []
        for offset, text in enumerate(self.tokens):
            result = coerce_value(self.position + offset, text, checked.value, self.parsers)
            if isinstance(result, Err):
                return result
            values.append(result.value)
        return Ok(values)

    def value(self, requested: type | None = None) -> Any:
        """Typed value of a scalar argument; raises ConsoleError on failure."""
        return self.parse(requested).unwrap()

    def values(self, requested: type | None = None) -> list[Any]:
        """Typed values of a linked argument; raises ConsoleError on failure."""
        return self.parse_all(requested).unwrap()


class Arguments:
    """Arguments bound for one dispatch, queried by 0-based parameter index."""

    def __init__(self, arguments: Sequence[Argument] = ()) -> None:
        self._arguments = tuple(arguments)

    def get(self, index: int) -> Argument | None:
        """Return the argument for parameter `index`, or None when not supplied."""
        if 0 <= index < len(self._arguments):
            return self._arguments[index]
        return None

    def value(self, index: int, default: Any = None) -> Any:
        """Typed scalar value of parameter `index`, or `default` when not supplied."""
        argument = self.get(index)
        return default if argument is None else argument.value()

    def __getitem__(self, index: int) -> Argument:
        return self._arguments[index]

    def __iter__(self) -> Iterator[Argument]:
        return iter(self._arguments)

    def __len__(self) -> int:
        return len(self._arguments)

    def __bool__(self) -> bool:
        return bool(self._arguments)

    def __repr__(self) -> str:
        return f"Arguments({list(self._arguments)!r})"


def bind_arguments(
    parameters: Sequence[Parameter] | None,
    tokens: Sequence[str],
    parsers: ParserRegistry | None = None,
) -> Result[Arguments]:
    """
    Bind a flat token list to a parameter schema.

    Supports:
        - scalar parameters (one token each, position = index + 1)
        - a trailing linked parameter swallowing every remaining token
        - optional parameters without a token, which are left out
    Tokens beyond the schema are ignored.
    """
    if not parameters:
        return Ok(Arguments())

    required_count = sum(1 for parameter in parameters if not parameter.optional)
    if len(tokens) < required_count:
        return Err(ErrorKind.ARGUMENT_COUNT,
                   f"Requires at least {required_count} argument(s)", Severity.WARNING)

    bound: list[Argument] = []
    for index, parameter in enumerate(parameters):
        if len(tokens) <= index:
            break
        if parameter.linked:
            bound.append(Argument(index + 1, parameter.type,
                                  tokens=tuple(tokens[index:]), parsers=parsers))
            break
        bound.append(Argument(index + 1, parameter.type,
                              token=tokens[index], parsers=parsers))
    return Ok(Arguments(bound))


#!/usr/bin/env python3
# chatcmd/commands/parsers.py
from __future__ import annotations

"""
Type parser registry.

Plugins contribute `TypeParser[T]` objects for value types that have no
builtin textual conversion. The registry keeps at most one parser per type:
the first registration wins and later ones are ignored (with a warning).
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, TypeVar

from chatcmd.commands.command_types import type_name

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TypeParser(Generic[T]):
    """
    Conversion from a raw token to a value of `type`.

    Attributes:
        type: The value type produced.
        parse: Called as parse(position, text); raises ArgumentParseFailure on bad input.
        example: A token the parser accepts, shown by the `parsers` command.
        owner: Plugin id, set by the console when the parser is accepted.
    """
    type: type[T]
    parse: Callable[[int, str], T]
    example: str
    owner: str | None = None

    def __call__(self, position: int, text: str) -> T:
        return self.parse(position, text)

    @property
    def name(self) -> str:
        return type_name(self.type)


def is_type_parser(obj: object) -> bool:
    """True when `obj` is a TypeParser bound to exactly one concrete class."""
    return (
        isinstance(obj, TypeParser)
        and isinstance(obj.type, type)
        and callable(obj.parse)
    )


class ParserRegistry:
    """Holds the accepted parsers keyed by value type."""

    def __init__(self) -> None:
        self._parsers: dict[type, TypeParser] = {}

    def register(self, parser: TypeParser, owner: str | None = None) -> bool:
        """
        Add `parser` unless its type already has one.

        Returns True when the parser was stored.
        """
        existing = self._parsers.get(parser.type)
        if existing is not None:
            logger.warning(
                "Parser for type '%s' from %s ignored; already provided by %s",
                parser.name, owner or "built-in", existing.owner or "built-in",
            )
            return False
        if owner is not None:
            parser = dataclasses.replace(parser, owner=owner)
        self._parsers[parser.type] = parser
        return True

    def get(self, value_type: type) -> TypeParser | None:
        return self._parsers.get(value_type)

    def find(self, name: str) -> TypeParser | None:
        """Look a parser up by its displayed type name."""
        for parser in self._parsers.values():
            if parser.name == name:
                return parser
        return None

    def list(self) -> list[tuple[type, str, str | None]]:
        """Return (type, example, owner) for every parser, in registration order."""
        return [(p.type, p.example, p.owner) for p in self._parsers.values()]

    def __iter__(self) -> Iterator[TypeParser]:
        return iter(list(self._parsers.values()))

    def __len__(self) -> int:
        return len(self._parsers)

    def __contains__(self, value_type: object) -> bool:
        return value_type in self._parsers

#!/usr/bin/env python3
# chatcmd/commands/commands.py
from __future__ import annotations

"""
Command registry and decorator utilities.

This module provides:
- CommandRegistry: ordered registry of accepted commands with duplicate renaming.
- command: decorator turning a handler function into a Command definition.
"""

import logging
from typing import Callable, Iterable, Iterator

from chatcmd.commands.command_types import Command, CommandHandler, Parameter, RegisteredCommand

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Holds all accepted commands and resolves name collisions."""

    def __init__(self) -> None:
        # Resolved name -> record, in registration order
        self._commands: dict[str, RegisteredCommand] = {}
        # Original name -> aliases generated for its collisions
        self._duplicates: dict[str, list[str]] = {}

    # ---------------- Registration ----------------

    def register(self, command_obj: Command, owner: str | None = None) -> RegisteredCommand:
        """Register a command, renaming it to `<base>_<n>` if the name is taken."""
        name = self._resolve_duplicate(command_obj.name)
        if name != command_obj.name:
            logger.info(
                "Command '%s' from %s renamed to '%s'",
                command_obj.name, owner or "built-in", name,
            )
        entry = RegisteredCommand(name=name, command=command_obj, owner=owner)
        self._commands[name] = entry
        return entry

    def _resolve_duplicate(self, name: str) -> str:
        if name not in self._commands:
            return name

        # A colliding alias is re-rooted to the name it was generated from
        base = self.lineage(name)
        aliases = self._duplicates.setdefault(base, [])
        index = len(aliases) + 1
        candidate = f"{base}_{index}"
        while candidate in self._commands:
            index += 1
            candidate = f"{base}_{index}"
        aliases.append(candidate)
        return candidate

    # ---------------- Lookup ----------------

    def get(self, name: str) -> RegisteredCommand | None:
        """Return the command registered under exactly `name`, or None."""
        return self._commands.get(name)

    def all(self) -> list[RegisteredCommand]:
        return list(self._commands.values())

    def names(self) -> list[str]:
        return list(self._commands.keys())

    def lineage(self, name: str) -> str:
        """Return the original name an alias was generated from (or `name` itself)."""
        for original, aliases in self._duplicates.items():
            if name in aliases:
                return original
        return name

    def aliases(self, name: str) -> list[str]:
        """Return the aliases generated for collisions with `name`."""
        return list(self._duplicates.get(name, ()))

    def owners(self) -> list[str]:
        """Return plugin ids owning at least one command, in first-seen order."""
        seen: dict[str, None] = {}
        for entry in self._commands.values():
            if entry.owner is not None:
                seen.setdefault(entry.owner, None)
        return list(seen)

    def __iter__(self) -> Iterator[RegisteredCommand]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands


def command(
    *,
    name: str | None = None,
    description: str | None = None,
    parameters: Iterable[Parameter] | None = None,
) -> Callable[[CommandHandler], Command]:
    """
    Decorator building a Command from a handler function.

    - Function name is used for `name` if not provided (normalized to snake_case).
    - Docstring is used for `description` if not provided.
    - The decorated name is bound to the Command, ready to be listed in a
      plugin descriptor.
    """

    def wrapper(func: CommandHandler) -> Command:
        doc = (getattr(func, "__doc__", None) or "").strip()
        return Command(
            name=name or func.__name__,  # type: ignore[attr-defined]
            handler=func,
            description=description or (doc or None),
            parameters=tuple(parameters) if parameters is not None else None,
        )

    return wrapper

#!/usr/bin/env python3
# chatcmd/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- Severity: abstract urgency of a console message (resolved to a color by sinks).
- Parameter: one entry of a command's parameter schema.
- Command: a command definition with metadata and a handler.
- RegisteredCommand: the registry-owned record (resolved name + owner).
- CommandResult: optional structured return value of a handler.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, Sequence

if TYPE_CHECKING:
    from chatcmd.interface.parser import Arguments


class Severity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


# Display names used inside `[type]` annotations for builtin types.
_TYPE_NAMES: dict[type, str] = {
    str: "string",
    int: "int",
    float: "float",
    bool: "bool",
}


def type_name(value_type: type) -> str:
    """Return the name shown for `value_type` in signatures and listings."""
    return _TYPE_NAMES.get(value_type, getattr(value_type, "__name__", str(value_type)))


def normalize_name(name: str) -> str:
    """'Roll Dice' -> 'roll_dice'."""
    return name.replace(" ", "_").lower()


def simplify(name: str | None) -> str:
    """Turn a command name into a message label: 'roll_dice' -> 'Roll Dice'."""
    if not name or not name.strip():
        return "System"
    return " ".join(part.capitalize() for part in name.split("_") if part)


class CommandHandler(Protocol):
    """Protocol for any command implementation."""

    def __call__(self, name: str, args: Arguments) -> Any:  # pragma: no cover - signature only
        ...


@dataclass(slots=True)
class Parameter:
    """
    A single parameter of a command.

    Attributes:
        name: Normalized name (spaces -> underscores, lower-case).
        type: Value type the handler expects for this position.
        optional: May be omitted by the user.
        linked: Captures every remaining token as one sequence argument.
        description: Free text shown in the signature as `(description)`.
    """
    name: str
    type: type
    optional: bool = False
    linked: bool = False
    description: str | None = None

    def __post_init__(self) -> None:
        self.name = normalize_name(self.name)

    def __str__(self) -> str:
        text = f"{'?' if self.optional else ''}{self.name}[{type_name(self.type)}]"
        if self.description is not None:
            text += f"({self.description})"
        return f"#{text}" if self.linked else text


def format_signature(parameters: Sequence[Parameter] | None) -> str | None:
    """Render a parameter list as annotations, or None when there is nothing to show."""
    if not parameters:
        return None
    return " ".join(str(parameter) for parameter in parameters)


@dataclass(slots=True)
class CommandResult:
    """
    Structured handler output.

    Handlers may also return a plain string (emitted as INFO) or None
    (nothing emitted).
    """
    message: str = ""
    severity: Severity = Severity.INFO
    data: Any = None

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class Command:
    """
    A command definition as written by its author.

    Important fields:
        name: Command word typed by the user (normalized on creation).
        handler: Called as handler(name, arguments).
        description: Short, user-facing description.
        parameters: Ordered parameter schema, or None for zero-argument commands.
    """

    name: str
    handler: CommandHandler
    description: str | None = None
    parameters: tuple[Parameter, ...] | None = None

    def __post_init__(self) -> None:
        self.name = normalize_name(self.name)
        if self.parameters is not None:
            self.parameters = tuple(self.parameters)

    @property
    def signature(self) -> str | None:
        return format_signature(self.parameters)


@dataclass(slots=True, frozen=True)
class RegisteredCommand:
    """
    Registry-owned record of an accepted command.

    `name` is the resolved unique name, which differs from `command.name`
    when the original name collided with an earlier registration.
    """

    name: str
    command: Command = field(repr=False)
    owner: str | None = None

    @property
    def description(self) -> str | None:
        return self.command.description

    @property
    def parameters(self) -> tuple[Parameter, ...] | None:
        return self.command.parameters

    @property
    def signature(self) -> str | None:
        return self.command.signature

    @property
    def is_valid(self) -> bool:
        from chatcmd.commands.schema import validate_parameters

        return validate_parameters(self.command.parameters)

    def invoke(self, args: Arguments) -> Any:
        """Execute the underlying handler with the resolved name."""
        return self.command.handler(self.name, args)

#!/usr/bin/env python3
# chatcmd/interface/completion.py
from __future__ import annotations

"""
Command line completion utilities.

This module produces, for the text being typed:
- the closest registered command (shortest name first, then ordinal order);
- ghost text: the closest command name followed by the parameter
  placeholders that have not been typed yet.
"""

import re

from chatcmd.commands.command_types import RegisteredCommand
from chatcmd.commands.commands import CommandRegistry

# Whitespace that is not inside a [..], (..) or {..} group
_PLACEHOLDER_SPLIT = re.compile(r"\s(?![^\[\]\(\)\{\}]*[\]\)\}])")


def split_signature(signature: str) -> list[str]:
    """Split a signature into placeholders without tearing bracket groups apart."""
    return [part for part in _PLACEHOLDER_SPLIT.split(signature) if part.strip()]


def _caret_char(text: str, cursor_position: int | None) -> str:
    """Return the last typed character: the one just before the cursor."""
    if not text:
        return ""
    if cursor_position is None:
        cursor_position = len(text)
    index = 0 if cursor_position <= 0 else cursor_position - 1
    return text[min(index, len(text) - 1)]


def closest_command(
    registry: CommandRegistry,
    text: str,
    cursor_position: int | None = None,
) -> RegisteredCommand | None:
    """
    Return the command the user is most likely typing, or None.

    Candidates are commands whose name starts with the first token. The match
    is dropped when it is longer than that token and the user has already
    typed a space, i.e. moved on with a word that is not a command.
    """
    parts = text.split()
    if not parts:
        return None

    first = parts[0]
    matches = [entry for entry in registry.all() if entry.name.startswith(first)]
    if not matches:
        return None

    matches.sort(key=lambda entry: (len(entry.name), entry.name))
    match = matches[0]
    if len(match.name) != len(first) and _caret_char(text, cursor_position) == " ":
        return None
    return match


def suggest(
    registry: CommandRegistry,
    text: str,
    cursor_position: int | None = None,
) -> str | None:
    """
    Produce the ghost text for the current buffer, or None.

    Strategy:
      1) Shorter than the command name: the name plus the full signature.
      2) Past the command name: the typed text plus the placeholders for the
         parameters not supplied yet; a trailing linked parameter is offered
         again once everything else has been typed.
    """
    match = closest_command(registry, text, cursor_position)
    if match is None:
        return None

    signature = match.signature
    if signature is None:
        return match.name
    if len(text) < len(match.name):
        return f"{match.name} {signature}"

    placeholders = split_signature(signature)
    last_placeholder = placeholders[-1]
    supplied = len(text.split()) - 1
    remaining = placeholders[supplied:]
    caret_is_space = _caret_char(text, cursor_position) == " "

    ghost = text
    if remaining:
        for index, placeholder in enumerate(remaining):
            separator = " " if (index != 0 or not caret_is_space) else ""
            ghost += f"{separator}{placeholder}"
    elif match.parameters and match.parameters[-1].linked:
        ghost += f"{'' if caret_is_space else ' '}{last_placeholder}"
    return ghost


def complete_name(
    registry: CommandRegistry,
    text: str,
    cursor_position: int | None = None,
) -> str | None:
    """
    Tab completion: the closest command name, when the text does not already
    start with it.
    """
    match = closest_command(registry, text, cursor_position)
    if match is None or text.startswith(match.name):
        return None
    return match.name

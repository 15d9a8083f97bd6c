#!/usr/bin/env python3
# chatcmd/commands/schema.py
from __future__ import annotations

"""
Parameter schema validation.

A command whose schema fails these checks stays registered (so `help` still
lists it) but the dispatcher refuses to run it.
"""

from typing import Sequence

from chatcmd.commands.command_types import Parameter


def schema_problem(parameters: Sequence[Parameter] | None) -> str | None:
    """Return a short description of what is wrong with `parameters`, or None."""
    if parameters is None:
        return None
    if len(parameters) == 0:
        return "parameter list is empty"

    linked_count = sum(1 for parameter in parameters if parameter.linked)
    if linked_count > 1:
        return "more than one linked parameter"
    if linked_count == 1 and not parameters[-1].linked:
        return "linked parameter is not the last one"

    optional_found = False
    for parameter in parameters:
        if parameter.optional:
            optional_found = True
        elif optional_found:
            return f"required parameter '{parameter.name}' follows an optional one"
    return None


def validate_parameters(parameters: Sequence[Parameter] | None) -> bool:
    """True when `parameters` is a usable schema (None means no parameters)."""
    return schema_problem(parameters) is None

#!/usr/bin/env python3
# chatcmd/interface/__init__.py
from __future__ import annotations

"""
Package for the console engine and its interactive frontend.

Provides:
- Argument binding and coercion (`parser`).
- Ghost-text and tab completion (`completion`).
- Command dispatcher and help formatting (`handler`).
- Built-in commands (`builtins`).
- Plugin discovery and descriptor acceptance (`loader`).
- The `Console` facade and CLI frontends.
"""


# Binding first (handler depends on it)
from .parser import Argument, Arguments, bind_arguments, coerce_value, tokenize

# Completion
from .completion import closest_command, complete_name, split_signature, suggest

# Dispatcher / help
from .handler import HELP_TEXT, Dispatcher, format_command_help, list_commands, signature_legend

# Loader
from .loader import (
    HostPlugin,
    PluginCatalog,
    PluginDescriptor,
    RegistrationCallback,
    accept_plugins,
    check_descriptor,
    discover_plugins,
)

# Console (after builtins/handler/loader are available)
from .builtins import builtin_commands
from .console import Console

# CLI frontends (after the console is available)
from .cli import BaseCLI, ConsoleAutoSuggest, PromptHistory, PromptToolkitCLI, make_cli

__all__ = [
    # parser
    "Argument",
    "Arguments",
    "bind_arguments",
    "coerce_value",
    "tokenize",
    # completion
    "closest_command",
    "complete_name",
    "split_signature",
    "suggest",
    # handler
    "HELP_TEXT",
    "Dispatcher",
    "format_command_help",
    "list_commands",
    "signature_legend",
    # loader
    "HostPlugin",
    "PluginCatalog",
    "PluginDescriptor",
    "RegistrationCallback",
    "accept_plugins",
    "check_descriptor",
    "discover_plugins",
    # console
    "builtin_commands",
    "Console",
    # cli
    "BaseCLI",
    "ConsoleAutoSuggest",
    "PromptHistory",
    "PromptToolkitCLI",
    "make_cli",
]

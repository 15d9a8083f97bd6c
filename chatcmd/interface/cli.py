#!/usr/bin/env python3
# chatcmd/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

Selection order:
    1) prompt_toolkit (ghost text + tab completion + history)
    2) plain input (last resort)
"""

from typing import TYPE_CHECKING

from prompt_toolkit.auto_suggest import AutoSuggest, Suggestion
from prompt_toolkit.history import InMemoryHistory

if TYPE_CHECKING:
    from chatcmd.interface.console import Console


class ConsoleAutoSuggest(AutoSuggest):
    """Shows the console's ghost text after the cursor."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def get_suggestion(self, buffer, document) -> Suggestion | None:
        text = document.text
        ghost = self.console.suggest(text, document.cursor_position)
        if not ghost or not ghost.startswith(text) or len(ghost) == len(text):
            return None
        return Suggestion(ghost[len(text):])


class PromptHistory(InMemoryHistory):
    """History that stores trimmed lines and skips immediate repeats."""

    def append_string(self, string: str) -> None:
        line = string.strip()
        if not line:
            return
        previous = self.get_strings()
        if previous and previous[-1] == line:
            return
        super().append_string(line)


class BaseCLI:
    """
    Base interface for CLI frontends.

    Subclasses should implement:
        - setup()
        - get_line()
        - teardown()

    This base also provides context manager support to guarantee teardown.
    The base itself reads plain lines with input().
    """

    prompt_text = "> "

    def setup(self) -> None:
        ...

    def get_line(self) -> str:
        return input(self.prompt_text)

    def teardown(self) -> None:
        ...

    # Context manager helpers
    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


class PromptToolkitCLI(BaseCLI):
    """Line editor with ghost-text suggestions, tab completion and history."""

    def __init__(self, console: Console, *, prompt_text: str = "> ",
                 tab_enabled: bool = True, ghost_text: bool = True) -> None:
        from prompt_toolkit import PromptSession
        from prompt_toolkit.key_binding import KeyBindings

        self.console = console
        self.prompt_text = prompt_text
        self.history = PromptHistory()

        kb = KeyBindings()

        @kb.add("tab")
        def _(event):
            # Replace the typed word with the closest command name
            b = event.app.current_buffer
            if not tab_enabled:
                return
            name = console.complete(b.text, b.cursor_position)
            if name is not None:
                b.text = name
                b.cursor_position = len(name)

        @kb.add(" ")
        def _(event):
            # A leading space is never part of a command line
            b = event.app.current_buffer
            if b.cursor_position == 0:
                return
            b.insert_text(" ")

        self._session = PromptSession(
            history=self.history,
            auto_suggest=ConsoleAutoSuggest(console) if ghost_text else None,
            key_bindings=kb,
        )

    def get_line(self) -> str:
        return self._session.prompt(self.prompt_text)


def make_cli(console: Console, *, prompt_text: str = "> ",
             tab_enabled: bool = True, ghost_text: bool = True) -> BaseCLI:
    """
    Factory to select the best available CLI frontend at runtime.
    """
    try:
        return PromptToolkitCLI(console, prompt_text=prompt_text,
                                tab_enabled=tab_enabled, ghost_text=ghost_text)
    except Exception:
        # No usable terminal (e.g. output redirected): plain input
        cli = BaseCLI()
        cli.prompt_text = prompt_text
        return cli

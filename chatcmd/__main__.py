#!/usr/bin/env python3
# chatcmd/__main__.py
from __future__ import annotations
"""
Interactive entry point: boot, then read lines until EOF or 'exit'.
"""

import sys

from chatcmd.boot import boot_sequence
from chatcmd.interface.cli import make_cli
from chatcmd.ui import colorize, print_line

EXIT_WORDS = {"exit", "quit"}


def main() -> int:
    try:
        state = boot_sequence()
    except Exception:
        print_line(colorize("Boot failed; see the message above.", "red"), file=sys.stderr)
        return 1

    console = state.console
    config = state.config
    cli = make_cli(
        console,
        prompt_text=config.prompt,
        tab_enabled=config.tab_enabled,
        ghost_text=config.ghost_text,
    )

    with cli:
        while True:
            try:
                line = cli.get_line()
            except KeyboardInterrupt:
                # Ctrl+C drops the current line only
                continue
            except EOFError:
                break

            if line.strip().lower() in EXIT_WORDS:
                break
            console.execute(line)
            console.tick()

    state.logger.info("Console closed")
    return 0


if __name__ == "__main__":
    sys.exit(main())

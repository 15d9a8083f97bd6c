#!/usr/bin/env python3
# chatcmd/ui/utils/console.py
from __future__ import annotations

import sys
import threading

# Shared print mutex for all terminal output (messages, boot lines, logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Single-line print serialized with the log handler."""
    stream = sys.stdout if file is None else file
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()

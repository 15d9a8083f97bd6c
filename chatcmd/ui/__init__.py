#!/usr/bin/env python3
# chatcmd/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    SEVERITY_STYLES,
    strip_ansi,
    enable_windows_vt,
    clear_screen,
    colorize,
    colorize_severity,
    PRINT_MUTEX,
    print_line,
)
from .static import (
    format_table,
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)
from .sink import OutputSink, ConsoleMessage, MessageLog, TerminalSink

__all__ = [
    "ANSI",
    "SEVERITY_STYLES",
    "strip_ansi",
    "enable_windows_vt",
    "clear_screen",
    "colorize",
    "colorize_severity",
    "PRINT_MUTEX",
    "print_line",
    "format_table",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
    "OutputSink",
    "ConsoleMessage",
    "MessageLog",
    "TerminalSink",
]

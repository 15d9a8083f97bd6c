#!/usr/bin/env python3
# chatcmd/ui/utils/__init__.py
from __future__ import annotations
from .ansi import (
    ANSI,
    SEVERITY_STYLES,
    strip_ansi,
    enable_windows_vt,
    clear_screen,
    colorize,
    colorize_severity,
)
from .console import PRINT_MUTEX, print_line

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
]

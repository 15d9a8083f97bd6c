#!/usr/bin/env python3
# chatcmd/ui/utils/ansi.py
from __future__ import annotations

import ctypes
import os
import re
from typing import Optional

from chatcmd.commands.command_types import Severity

# ---- Core SGR maps ----------------------------------------------------------

ANSI = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",

    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "bright_black": "\x1b[90m",
}

# Severity -> style keys. INFO keeps the terminal's default color.
SEVERITY_STYLES: dict[Severity, tuple[str, ...]] = {
    Severity.INFO: (),
    Severity.WARNING: ("yellow",),
    Severity.ERROR: ("red",),
}

ANSI_REGEX = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

_vt_enabled_cache: Optional[bool] = None


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_REGEX.sub("", text)


def enable_windows_vt() -> bool:
    """
    Enable ANSI (VT) processing on Windows consoles when possible.
    Returns True if ANSI escapes should work; always True off Windows.
    """
    global _vt_enabled_cache
    if _vt_enabled_cache is not None:
        return _vt_enabled_cache

    if os.name != "nt" or os.environ.get("WT_SESSION") or os.environ.get("ANSICON"):
        _vt_enabled_cache = True
        return True

    try:
        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
        handle = kernel32.GetStdHandle(-11)  # STD_OUTPUT_HANDLE
        mode = ctypes.c_uint()
        if handle in (0, -1) or not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            _vt_enabled_cache = False
        else:
            # ENABLE_VIRTUAL_TERMINAL_PROCESSING
            _vt_enabled_cache = bool(kernel32.SetConsoleMode(handle, mode.value | 0x0004))
    except (AttributeError, OSError):
        _vt_enabled_cache = False
    return _vt_enabled_cache


def clear_screen() -> None:
    """Clear the terminal screen on Windows and POSIX."""
    os.system("cls" if os.name == "nt" else "clear")


def colorize(text: str, *styles: str) -> str:
    """
    Wrap text with one or more styles from ANSI (e.g. 'red', 'bold').
    Always auto-resets at the end.
    """
    seq = "".join(ANSI[s] for s in styles if s in ANSI)
    return f"{seq}{text}{ANSI['reset']}" if seq else text


def colorize_severity(text: str, severity: Severity) -> str:
    """Color text the way messages of `severity` are shown."""
    return colorize(text, *SEVERITY_STYLES.get(severity, ()))

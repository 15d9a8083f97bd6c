#!/usr/bin/env python3
# chatcmd/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: Orchestrated startup pipeline with Linux-style [ OK ] / [FAILED] lines.
- BootState: Dataclass containing config, logger, console and plugin catalog.
- load_config / ConsoleConfig: Layered configuration loader.
"""


from .config import ConsoleConfig, load_config
from .boot import BootState, boot_sequence

__all__ = ["boot_sequence", "BootState", "ConsoleConfig", "load_config"]

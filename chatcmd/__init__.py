#!/usr/bin/env python3
# chatcmd/__init__.py
from __future__ import annotations
"""
Command console package.

Avoid eager imports that trigger package initialization cascades; the
public API lives in `chatcmd.commands`, `chatcmd.interface` and `chatcmd.boot`.
"""

__version__ = "0.1.0"

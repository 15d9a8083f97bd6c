#!/usr/bin/env python3
# chatcmd/boot/boot.py
from __future__ import annotations
"""
Boot sequence for the command console.

Goals:
- Bring up configuration, logging and the plugin catalog in a fixed order.
- Run plugin registration exactly once, before the console goes interactive.
- Maintain clear status output for each boot step.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable
import logging
import platform

from chatcmd.boot.config import ConsoleConfig, load_config
from chatcmd.interface.console import Console
from chatcmd.interface.loader import PluginCatalog, PluginDescriptor, discover_plugins
from chatcmd.ui import (
    OutputSink,
    TerminalSink,
    colorize,
    enable_windows_vt,
    init_logger,
    print_line,
)


@dataclass(slots=True)
class BootState:
    config: ConsoleConfig
    logger: logging.Logger
    console: Console
    catalog: PluginCatalog
    accepted: list[PluginDescriptor] = field(default_factory=list)


def _step(label: str, fn: Callable[[], Any], verbose: bool = True) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        if verbose:
            print_line(
                colorize(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red")
            )
        raise
    if verbose:
        print_line(colorize(f"[  OK  ] {label}", "green"))
    return out


def boot_sequence(
    config: ConsoleConfig | None = None,
    sink: OutputSink | None = None,
    verbose: bool = True,
) -> BootState:
    # ---------- console + env ----------
    _step("Enable ANSI sequences", enable_windows_vt, verbose)
    _step(
        f"Detect environment: {platform.system()} {platform.release()} / Python {platform.python_version()}",
        lambda: None,
        verbose,
    )

    # ---------- config ----------
    if config is None:
        config = _step("Load configuration", load_config, verbose)
    else:
        _step("Use supplied configuration", lambda: None, verbose)

    # ---------- logging ----------
    logger = _step(
        "Initialize logger",
        lambda: init_logger(
            "chatcmd",
            level=config.log_level or logging.INFO,
            logfile=Path(config.log_file_path) if config.log_file_path else None,
        ),
        verbose,
    )

    # ---------- plugins ----------
    catalog = _step(
        f"Discover plugins in package '{config.plugin_package}'",
        lambda: discover_plugins(config.plugin_package),
        verbose,
    )
    _step(f"Found {len(catalog.hosts)} host plugin(s), "
          f"{len(catalog.callbacks)} registration callback(s)", lambda: None, verbose)

    if sink is None:
        sink = TerminalSink(default_size=config.message_size)
    console = _step(
        "Create console",
        lambda: Console(sink, hosts=catalog.hosts.values()),
        verbose,
    )
    accepted = _step(
        "Register plugin commands and parsers",
        lambda: console.startup(catalog.callbacks),
        verbose,
    )
    _step(f"Loaded {len(console.registry)} command(s), {len(console.parsers)} parser(s)",
          lambda: None, verbose)
    _step("Boot complete", lambda: None, verbose)

    logger.debug("Accepted plugins: %s", ", ".join(p.guid for p in accepted) or "none")
    return BootState(
        config=config,
        logger=logger,
        console=console,
        catalog=catalog,
        accepted=accepted,
    )

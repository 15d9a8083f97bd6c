#!/usr/bin/env python3
# chatcmd/interface/loader.py
from __future__ import annotations

"""
Plugin discovery and acceptance.

Features:
- Imports all modules under a given package (default: 'plugins').
- A module (or a sub-package's `__init__`) describes a known host plugin with
  GUID / NAME / VERSION.
- A zero-argument `register` callable, in the module itself or in a
  sub-package's `entrypoint.py`, returns the plugin's PluginDescriptor.
- Descriptors are accepted or rejected as a whole, in callback order.
"""

import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Callable, Iterable, Mapping, MutableSequence, Sequence

from chatcmd.commands.command_types import Command, Severity
from chatcmd.commands.commands import CommandRegistry
from chatcmd.commands.errors import Err, ErrorKind, Ok, Result
from chatcmd.commands.parsers import ParserRegistry, TypeParser, is_type_parser
from chatcmd.ui.sink import OutputSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HostPlugin:
    """A plugin installed in the host, whether or not it contributes commands."""
    guid: str
    name: str
    version: str = "0.0.0"


@dataclass(slots=True)
class PluginDescriptor:
    """
    Bundle presented by a plugin at startup.

    Attributes:
        guid: Id of the owning host plugin.
        commands: Commands to register (must not be empty).
        parsers: Type parsers contributed for custom value types.
        update: Optional callable run on every host tick.
    """
    guid: str
    commands: Sequence[Command]
    parsers: Sequence[TypeParser] = ()
    update: Callable[[], None] | None = None


RegistrationCallback = Callable[[], PluginDescriptor]


@dataclass(slots=True)
class PluginCatalog:
    """Known host plugins and the registration callbacks they expose."""
    hosts: dict[str, HostPlugin] = field(default_factory=dict)
    callbacks: list[RegistrationCallback] = field(default_factory=list)

# ---------------------------------------------------------------------------
# Acceptance
# ---------------------------------------------------------------------------


def _rejected(message: str) -> Err:
    return Err(ErrorKind.PLUGIN_REJECTED, message, Severity.WARNING)


def check_descriptor(
    descriptor: object,
    hosts: Mapping[str, HostPlugin],
    accepted: Sequence[PluginDescriptor],
) -> Result[PluginDescriptor]:
    """Return Ok(descriptor) when it may be accepted, else the rejection reason."""
    if not isinstance(descriptor, PluginDescriptor):
        return _rejected(
            f"Registration returned {type(descriptor).__name__}, not a PluginDescriptor")
    guid = descriptor.guid
    if guid not in hosts:
        return _rejected(f'Plugin "{guid}" is not a known plugin')
    if any(other.guid == guid for other in accepted):
        return _rejected(f'Plugin "{guid}" is already registered')
    if not isinstance(descriptor.commands, (list, tuple)):
        return _rejected(f'Plugin "{guid}" must list its commands in a list or tuple')
    if not descriptor.commands:
        return _rejected(f'Plugin "{guid}" has no commands')
    if not all(isinstance(cmd, Command) for cmd in descriptor.commands):
        return _rejected(f'Plugin "{guid}" declares an invalid command')
    if descriptor.parsers is not None and not isinstance(descriptor.parsers, (list, tuple)):
        return _rejected(f'Plugin "{guid}" must list its parsers in a list or tuple')
    if not all(is_type_parser(parser) for parser in descriptor.parsers or ()):
        return _rejected(f'Plugin "{guid}" declares an invalid parser')
    return Ok(descriptor)


def accept_plugins(
    callbacks: Iterable[RegistrationCallback],
    registry: CommandRegistry,
    parsers: ParserRegistry,
    hosts: Mapping[str, HostPlugin],
    accepted: MutableSequence[PluginDescriptor],
    sink: OutputSink | None = None,
) -> list[PluginDescriptor]:
    """
    Invoke each registration callback once and accept its descriptor.

    Accepted descriptors are appended to `accepted` and returned; rejections
    are logged and, when a sink is given, reported on it.
    """
    newly_accepted: list[PluginDescriptor] = []
    for callback in callbacks:
        try:
            descriptor = callback()
        except Exception as exc:
            logger.exception("Registration callback %r failed", callback)
            checked: Result[PluginDescriptor] = _rejected(
                f"Registration callback {getattr(callback, '__qualname__', callback)!s} "
                f"failed: {exc}")
        else:
            checked = check_descriptor(descriptor, hosts, accepted)

        if isinstance(checked, Err):
            logger.warning("Plugin rejected: %s", checked.message)
            if sink is not None:
                sink.emit(checked.message, None, checked.severity)
            continue

        plugin = checked.value
        for command_obj in plugin.commands:
            registry.register(command_obj, owner=plugin.guid)
        for parser in plugin.parsers or ():
            parsers.register(parser, owner=plugin.guid)
        accepted.append(plugin)
        newly_accepted.append(plugin)
        logger.info(
            "Plugin %s accepted (%d commands, %d parsers)",
            plugin.guid, len(plugin.commands), len(plugin.parsers or ()),
        )
    return newly_accepted

# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def _host_from_module(module: ModuleType, fallback_name: str) -> HostPlugin | None:
    guid = getattr(module, "GUID", None)
    if not isinstance(guid, str) or not guid.strip():
        return None
    name = getattr(module, "NAME", None)
    version = getattr(module, "VERSION", None)
    return HostPlugin(
        guid=guid.strip(),
        name=name.strip() if isinstance(name, str) and name.strip() else fallback_name,
        version=str(version) if version is not None else "0.0.0",
    )


def _callback_from_module(module: ModuleType) -> RegistrationCallback | None:
    register = getattr(module, "register", None)
    return register if callable(register) else None


def discover_plugins(plugins_package: str = "plugins") -> PluginCatalog:
    """
    Import all modules under the given package (e.g., 'plugins').

    Supported layouts:
      1) Plain modules: plugins/foo.py -> GUID/NAME/VERSION and register()
      2) Packages: plugins/bar/__init__.py (GUID/NAME/VERSION)
         + plugins/bar/entrypoint.py (register())

    A plugin module that fails to import is logged and skipped.
    """
    package = importlib.import_module(plugins_package)
    package_paths = [str(p) for p in getattr(package, "__path__", [])]

    if not package_paths:
        raise RuntimeError(
            f"'{plugins_package}' must be a package (folder) with modules.")

    catalog = PluginCatalog()
    for base_path in package_paths:
        for modinfo in sorted(pkgutil.iter_modules([base_path]), key=lambda m: m.name):
            module_name = modinfo.name
            if module_name.startswith("_"):
                # Ignore private modules
                continue

            qualified = f"{plugins_package}.{module_name}"
            try:
                module = importlib.import_module(qualified)
                entry_module = module
                if modinfo.ispkg and (Path(base_path) / module_name / "entrypoint.py").exists():
                    entry_module = importlib.import_module(f"{qualified}.entrypoint")
            except Exception:
                logger.exception("Failed to import plugin module '%s'", qualified)
                continue

            host = _host_from_module(module, module_name)
            if host is not None:
                catalog.hosts.setdefault(host.guid, host)
            else:
                logger.debug("Plugin module '%s' declares no GUID", qualified)

            callback = _callback_from_module(entry_module)
            if callback is not None:
                catalog.callbacks.append(callback)

    return catalog

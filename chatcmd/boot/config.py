#!/usr/bin/env python3
# chatcmd/boot/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in the base directory: .env, config.ini, config.json, config.toml
  3) CHATCMD_* environment variables

Validation:
  - PLUGIN_PACKAGE: dotted module name
  - LOG_FILE_PATH: None or normalized path
  - LOG_LEVEL: None or one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - MESSAGE_SIZE: int >= 1
  - TAB_ENABLED / GHOST_TEXT: bool
  - PROMPT: str

Settings are read only; nothing is written back.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping
import configparser
import json
import os
import re
import tomllib

ENV_PREFIX = "CHATCMD_"

DEFAULTS: dict[str, Any] = {
    "PLUGIN_PACKAGE": "plugins",
    "LOG_FILE_PATH": None,
    "LOG_LEVEL": None,              # 'DEBUG'/'INFO'/'WARNING'/'ERROR'/'CRITICAL'
    "MESSAGE_SIZE": 32,             # size hint handed to the output sink
    "TAB_ENABLED": True,
    "GHOST_TEXT": True,
    "PROMPT": "> ",
}

# ---------- data model ----------


@dataclass(frozen=True)
class ConsoleConfig:
    plugin_package: str
    log_file_path: Path | None
    log_level: str | None
    message_size: int
    tab_enabled: bool
    ghost_text: bool
    prompt: str

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)

# ---------- file loaders ----------


def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if (v.startswith("'") and v.endswith("'")) or (v.startswith('"') and v.endswith('"')):
            v = v[1:-1]
        out[k] = v
    return out


def _load_ini_file(path: Path) -> dict[str, str]:
    cfg = configparser.ConfigParser()
    if not cfg.read(path, encoding="utf-8"):
        return {}
    flat: dict[str, str] = {}
    for sec in cfg.sections():
        for k, v in cfg.items(sec):
            flat[k.upper()] = v
    return flat


def _load_json_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        return {}


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'console': {'prompt': '$ '}} -> {'CONSOLE_PROMPT': '$ '}
    Sections named 'chatcmd' are transparent: {'chatcmd': {'prompt': ..}} -> {'PROMPT': ..}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            if not prefix and str(k).lower() == "chatcmd" and isinstance(v, Mapping):
                flat.update(_flatten_mapping(v))
                continue
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}

# ---------- normalization & coercion ----------


_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ValueError(f"Expected boolean, got: {val!r}")


def _as_int(val: Any) -> int:
    if isinstance(val, int) and not isinstance(val, bool):
        return val
    try:
        return int(str(val).strip())
    except ValueError as exc:
        raise ValueError(f"Expected integer, got: {val!r}") from exc


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str | None:
    lv = _as_opt_str(val)
    if lv is None:
        return None
    up = lv.upper()
    allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if up not in allowed:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(allowed)}, got {lv!r}")
    return up


def _as_opt_path(val: Any, base: Path) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    p = Path(os.path.expandvars(os.path.expanduser(v)))
    return p if p.is_absolute() else (base / p).resolve()


def _as_module_name(val: Any) -> str:
    s = str(val).strip()
    if not re.fullmatch(r"[A-Za-z_][\w]*(\.[A-Za-z_][\w]*)*", s):
        raise ValueError(f"PLUGIN_PACKAGE must be a dotted module name, got {val!r}")
    return s

# ---------- merge & load ----------


def _merge_sources(base: Path, environ: Mapping[str, str]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)

    merged.update(_normalize_keys(_load_env_file(base / ".env")))
    merged.update(_normalize_keys(_load_ini_file(base / "config.ini")))
    merged.update(_normalize_keys(_flatten_mapping(_load_json_file(base / "config.json"))))
    merged.update(_normalize_keys(_flatten_mapping(_load_toml_file(base / "config.toml"))))

    # Environment variables override all; only CHATCMD_-prefixed keys
    for k, v in environ.items():
        if k.startswith(ENV_PREFIX) and len(k) > len(ENV_PREFIX):
            merged[k[len(ENV_PREFIX):].upper()] = v
    return merged


def _validate_and_build(config: Mapping[str, Any], base: Path) -> ConsoleConfig:
    message_size = _as_int(config.get("MESSAGE_SIZE", DEFAULTS["MESSAGE_SIZE"]))
    if message_size < 1:
        raise ValueError("MESSAGE_SIZE must be >= 1")

    prompt = config.get("PROMPT", DEFAULTS["PROMPT"])
    recognized = set(DEFAULTS.keys())
    return ConsoleConfig(
        plugin_package=_as_module_name(config.get("PLUGIN_PACKAGE", DEFAULTS["PLUGIN_PACKAGE"])),
        log_file_path=_as_opt_path(config.get("LOG_FILE_PATH"), base),
        log_level=_as_log_level(config.get("LOG_LEVEL")),
        message_size=message_size,
        tab_enabled=_as_bool(config.get("TAB_ENABLED", DEFAULTS["TAB_ENABLED"])),
        ghost_text=_as_bool(config.get("GHOST_TEXT", DEFAULTS["GHOST_TEXT"])),
        prompt=DEFAULTS["PROMPT"] if prompt is None else str(prompt),
        extra={k: v for k, v in config.items() if k not in recognized},
    )

# ---------- public API ----------


def load_config(base: str | Path | None = None,
                environ: Mapping[str, str] | None = None) -> ConsoleConfig:
    """
    Load, merge, normalize, and validate configuration.
    Raises ValueError on invalid values. No filesystem side-effects.
    """
    base_path = Path.cwd() if base is None else Path(base)
    raw = _merge_sources(base_path, os.environ if environ is None else environ)
    return _validate_and_build(raw, base_path)

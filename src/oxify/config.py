# src/oxify/config.py
"""Resolution of merge settings: CLI → environment → defaults."""

import argparse
import logging
import os
from pathlib import Path

from .config_types import MergeConfigResolved, OriginType
from .constants import (
    DEFAULT_DISABLE_BUILD_TIMESTAMP,
    DEFAULT_ENV_DISABLE_BUILD_TIMESTAMP,
)
from .logs import getAppLogger
from .meta import PROGRAM_ENV


_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def parse_env_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    xmsg = f"Invalid boolean for {name}: {raw!r}"
    raise ValueError(xmsg)


def _env_lookup(key: str) -> tuple[str, str] | None:
    """Return (name, value) of the first set env var for `key`."""
    for name in (f"{PROGRAM_ENV}_{key}", key):
        raw = os.getenv(name)
        if raw is not None:
            return name, raw
    return None


def _resolve_disable_build_timestamp(
    args: argparse.Namespace,
) -> tuple[bool, OriginType]:
    if getattr(args, "disable_build_timestamp", False):
        return True, "cli"
    found = _env_lookup(DEFAULT_ENV_DISABLE_BUILD_TIMESTAMP)
    if found is not None:
        name, raw = found
        return parse_env_bool(name, raw), "env"
    return DEFAULT_DISABLE_BUILD_TIMESTAMP, "default"


def resolve_config(
    args: argparse.Namespace,
    cwd: Path | None = None,
) -> MergeConfigResolved:
    """Build the resolved config for one merge run.

    Relative source and target paths are resolved against `cwd`.
    """
    logger = getAppLogger()
    base = (cwd or Path.cwd()).resolve()

    source_dir = Path(args.source)
    if not source_dir.is_absolute():
        source_dir = base / source_dir
    out_path = Path(args.target)
    if not out_path.is_absolute():
        out_path = base / out_path

    disable_ts, disable_ts_origin = _resolve_disable_build_timestamp(args)

    resolved: MergeConfigResolved = {
        "source_dir": source_dir,
        "out_path": out_path,
        "plugin_name": args.plugin_name,
        "plugin_version": args.plugin_version,
        "disable_build_timestamp": disable_ts,
        "log_level": logging.getLevelName(logger.getEffectiveLevel()),
        "__meta__": {
            "source_dir": "cli",
            "out_path": "cli",
            "plugin_name": "cli",
            "plugin_version": "cli",
            "disable_build_timestamp": disable_ts_origin,
        },
    }
    logger.trace(f"[CONFIG] resolved: {resolved}")
    return resolved

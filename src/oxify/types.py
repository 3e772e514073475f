# src/oxify/types.py

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from pathlib import Path

from .classify import BraceDepth, DebugRegion
from .constants import UNKNOWN


@dataclass(frozen=True)
class InputFile:
    path: Path
    rel_path: str  # posix, relative to the source dir
    lines: tuple[str, ...]


@dataclass
class PluginMetadata:
    author: str = UNKNOWN
    resource_id: str = UNKNOWN
    plugin_url: str = UNKNOWN
    source_url: str = UNKNOWN
    # set once the first PluginInfo directive has been applied
    locked: bool = False


@dataclass
class FileCursor:
    """Per-file position state, recreated for every input file."""

    rel_path: str
    namespace: str | None = None
    depth: BraceDepth = field(default_factory=BraceDepth)
    region: DebugRegion = field(default_factory=DebugRegion)
    lineno: int = 0


@dataclass
class MergeState:
    """Everything one merge run accumulates across all input files."""

    plugin_name: str
    plugin_version: str
    debug_enabled: bool = False
    imports: OrderedDict[str, None] = field(default_factory=OrderedDict)
    namespaces: OrderedDict[str, list[str]] = field(default_factory=OrderedDict)
    metadata: PluginMetadata = field(default_factory=PluginMetadata)

    # diagnostics
    files_merged: int = 0
    dropped_lines: int = 0

    def add_import(self, line: str) -> None:
        self.imports.setdefault(line, None)

    def register_namespace(self, name: str) -> bool:
        """Create the bucket for `name`. Returns True if it is new."""
        if name in self.namespaces:
            return False
        self.namespaces[name] = []
        return True

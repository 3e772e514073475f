# src/oxify/__init__.py

"""Oxify: merge a plugin source tree into a single file.

Full developer API
==================
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - main()              → CLI entrypoint
    - run_build()         → Execute one merge run from a resolved config
    - merge_files()       → Two-pass merge of already-read input files
    - render_output()     → Render a MergeState to text
"""

from .actions import get_metadata
from .build import run_build
from .cli import main
from .config import resolve_config
from .config_types import MergeConfigResolved
from .directives import DirectiveKind, expand_directive, extract_resource_id
from .logs import getAppLogger
from .merge import (
    discover_source_files,
    merge_file,
    merge_files,
    read_input_files,
    resolve_debug_flag,
)
from .meta import PROGRAM_DISPLAY, PROGRAM_ENV, PROGRAM_PACKAGE, PROGRAM_SCRIPT
from .render import render_output
from .types import InputFile, MergeState, PluginMetadata


__all__ = [  # noqa: RUF022
    # actions
    "get_metadata",
    # build
    "run_build",
    # cli
    "main",
    # config
    "resolve_config",
    "MergeConfigResolved",
    # directives
    "DirectiveKind",
    "expand_directive",
    "extract_resource_id",
    # logs
    "getAppLogger",
    # merge
    "discover_source_files",
    "merge_file",
    "merge_files",
    "read_input_files",
    "resolve_debug_flag",
    # meta
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    # render
    "render_output",
    # types
    "InputFile",
    "MergeState",
    "PluginMetadata",
]

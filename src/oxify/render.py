# src/oxify/render.py
"""Rendering of the merged output file."""

from .constants import (
    DEBUG_FLAGS_BANNER,
    HEADER_BORDER_CHAR,
    HEADER_BORDER_PADDING,
    SOURCE_SUFFIX,
)
from .meta import PROGRAM_DISPLAY
from .types import MergeState


def build_header_lines(
    state: MergeState,
    *,
    tool_version: str,
    build_date: str,
) -> list[str]:
    meta = state.metadata
    header = [
        f"{state.plugin_name}{SOURCE_SUFFIX} generated by {PROGRAM_DISPLAY} "
        f"v{tool_version} - {build_date}",
        f'PluginInfo: Title = "{state.plugin_name}", Author = "{meta.author}", '
        f'Version = "{state.plugin_version}", ResourceId = {meta.resource_id}',
        f"OxideMod: {meta.plugin_url}",
        f"GitHub: {meta.source_url}",
    ]
    if state.debug_enabled:
        header.append(DEBUG_FLAGS_BANNER)
    return header


def make_border(header: list[str]) -> str:
    longest = max(len(h) for h in header)
    return HEADER_BORDER_CHAR * (longest + HEADER_BORDER_PADDING)


def render_output(
    state: MergeState,
    *,
    tool_version: str,
    build_date: str,
) -> str:
    """Render header, imports and namespace blocks as one text blob."""
    header = build_header_lines(state, tool_version=tool_version, build_date=build_date)
    border = make_border(header)

    parts: list[str] = [border]
    parts.extend(f"// {h}" for h in header)
    parts.append(border)
    parts.append("\n")
    parts.append("\n".join(state.imports))

    for name, body in state.namespaces.items():
        parts.append(f"\nnamespace {name} {{")
        parts.append("\n".join(body))
        parts.append("}")

    return "".join(f"{p}\n" for p in parts)

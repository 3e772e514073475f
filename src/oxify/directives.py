# src/oxify/directives.py
"""Expansion of //OX.INSERT(...) directives.

Each directive kind has exactly one handler. Unknown kinds and malformed
argument lists resolve to DirectiveKind.NOOP, which drops the line.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .classify import parse_directive_args
from .constants import COMMENT_CHAR, UNKNOWN
from .logs import getAppLogger
from .types import FileCursor, MergeState, PluginMetadata


RESOURCE_ID_PATTERN = re.compile(r"[0-9]{4}")


class DirectiveKind(Enum):
    PLUGIN_INFO = "PluginInfo"
    NOOP = ""


# number of arguments expected after the kind token
_ARITY: dict[DirectiveKind, int] = {
    DirectiveKind.PLUGIN_INFO: 3,
}


@dataclass(frozen=True)
class Directive:
    kind: DirectiveKind
    args: tuple[str, ...]
    indent: str


def extract_resource_id(plugin_url: str) -> str:
    """Return the first run of four digits in `plugin_url`, or UNKNOWN."""
    match = RESOURCE_ID_PATTERN.search(plugin_url)
    return match.group(0) if match else UNKNOWN


def directive_indent(line: str) -> str:
    """Leading text up to the directive's comment marker."""
    idx = line.find(COMMENT_CHAR)
    return line[:idx] if idx >= 0 else ""


def parse_directive(line: str) -> Directive:
    logger = getAppLogger()
    tokens = parse_directive_args(line)
    indent = directive_indent(line)

    if not tokens:
        logger.debug("Ignoring directive without arguments: %r", line.strip())
        return Directive(DirectiveKind.NOOP, (), indent)

    try:
        kind = DirectiveKind(tokens[0])
    except ValueError:
        logger.debug("Ignoring unknown directive kind %r", tokens[0])
        return Directive(DirectiveKind.NOOP, (), indent)

    args = tuple(tokens[1:])
    expected = _ARITY.get(kind, 0)
    if len(args) != expected:
        logger.debug(
            "Ignoring %s directive: expected %d arguments, got %d",
            kind.value,
            expected,
            len(args),
        )
        return Directive(DirectiveKind.NOOP, (), indent)

    return Directive(kind, args, indent)


# --------------------------------------------------------------------------- #
# Handlers
# --------------------------------------------------------------------------- #


def format_info_attribute(
    indent: str,
    *,
    plugin_name: str,
    author: str,
    plugin_version: str,
    resource_id: str,
) -> str:
    return (
        f'{indent}[Info("{plugin_name}", "{author}", "{plugin_version}", '
        f"ResourceId = {resource_id})]"
    )


def _apply_plugin_info(directive: Directive, state: MergeState) -> str:
    logger = getAppLogger()
    author, plugin_url, source_url = directive.args
    resource_id = extract_resource_id(plugin_url)

    meta = state.metadata
    if meta.locked:
        logger.warning(
            "PluginInfo already set (author=%s); keeping the first one",
            meta.author,
        )
    else:
        state.metadata = PluginMetadata(
            author=author,
            resource_id=resource_id,
            plugin_url=plugin_url,
            source_url=source_url,
            locked=True,
        )

    return format_info_attribute(
        directive.indent,
        plugin_name=state.plugin_name,
        author=author,
        plugin_version=state.plugin_version,
        resource_id=resource_id,
    )


def _apply_noop(_directive: Directive, _state: MergeState) -> None:
    return None


_HANDLERS: dict[DirectiveKind, Callable[[Directive, MergeState], str | None]] = {
    DirectiveKind.PLUGIN_INFO: _apply_plugin_info,
    DirectiveKind.NOOP: _apply_noop,
}


def expand_directive(line: str, state: MergeState, cursor: FileCursor) -> str | None:
    """Expand a directive line into its replacement, or None to drop it."""
    logger = getAppLogger()
    directive = parse_directive(line)
    replacement = _HANDLERS[directive.kind](directive, state)
    if replacement is not None:
        logger.info(
            "Inserted %s (%s:%d)", directive.kind.value, cursor.rel_path, cursor.lineno
        )
    return replacement

# src/oxify/classify.py
"""Line-level classification for merge input.

Everything here works on raw text lines with prefix tests, substring
markers and brace counting. Nothing is tokenized: braces inside string
literals or comments count the same as code braces.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .constants import (
    BLOCK_CLOSE,
    BLOCK_OPEN,
    DEBUG_ENABLE_MARKER,
    DEBUG_END_MARKER,
    DEBUG_START_MARKER,
    INSERT_MARKER,
    NAMESPACE_KEYWORD,
)


# "using X;" / "using A = B.C;" but never "using (var x = ...)"
IMPORT_PATTERN = re.compile(r"^\s*using\s+?[^(]+;$")
# first parenthesized group on the line
DIRECTIVE_ARGS_PATTERN = re.compile(r"\(([^)]*)\)")
DIRECTIVE_ARG_SPLIT = re.compile(r"[, ]")


class LineKind(Enum):
    NAMESPACE = "namespace"
    IMPORT = "import"
    DIRECTIVE = "directive"
    CONTENT = "content"


def is_namespace_line(line: str) -> bool:
    return line.lstrip(" ").startswith(NAMESPACE_KEYWORD)


def get_namespace_name(line: str) -> str:
    """Extract the namespace name from a declaration line.

    >>> get_namespace_name("namespace Oxide.Plugins {")
    'Oxide.Plugins'
    """
    return line.strip(" " + BLOCK_OPEN)[len(NAMESPACE_KEYWORD) :]


def is_import_line(line: str) -> bool:
    return IMPORT_PATTERN.match(line) is not None


def is_directive_line(line: str) -> bool:
    return INSERT_MARKER in line


def has_debug_enable(line: str) -> bool:
    return DEBUG_ENABLE_MARKER in line


def has_debug_start(line: str) -> bool:
    return DEBUG_START_MARKER in line


def has_debug_end(line: str) -> bool:
    return DEBUG_END_MARKER in line


def classify_top_level(line: str) -> LineKind | None:
    """Classify a line seen at depth 0.

    Returns None for lines that carry nothing at top level
    (blank lines, stray braces, attributes outside a namespace).
    """
    if is_namespace_line(line):
        return LineKind.NAMESPACE
    if is_import_line(line):
        return LineKind.IMPORT
    return None


def classify_body(line: str) -> LineKind:
    """Classify a line inside a namespace body."""
    if is_directive_line(line):
        return LineKind.DIRECTIVE
    return LineKind.CONTENT


def parse_directive_args(line: str) -> list[str]:
    """Split the first parenthesized group on commas and spaces.

    Empty tokens are discarded; a line without a group yields [].
    """
    match = DIRECTIVE_ARGS_PATTERN.search(line)
    if match is None:
        return []
    return [tok for tok in DIRECTIVE_ARG_SPLIT.split(match.group(1)) if tok]


def brace_delta(line: str) -> int:
    return line.count(BLOCK_OPEN) - line.count(BLOCK_CLOSE)


# --------------------------------------------------------------------------- #
# Per-file trackers
# --------------------------------------------------------------------------- #


@dataclass
class BraceDepth:
    """Running brace depth for one file. Negative depth is tolerated."""

    depth: int = 0

    def peek(self, line: str) -> int:
        """Return the depth after `line` without committing it."""
        return self.depth + brace_delta(line)

    def commit(self, new_depth: int) -> None:
        self.depth = new_depth

    @property
    def at_top_level(self) -> bool:
        return self.depth == 0


@dataclass
class DebugRegion:
    """Tracks //OX.DEBUGSTART ... //OX.DEBUGEND spans for one file.

    The start marker takes effect on its own line, the end marker only
    after its own line has been judged, so both marker lines belong to
    the region.
    """

    inside: bool = False

    def enter(self, line: str) -> None:
        if has_debug_start(line):
            self.inside = True

    def leave(self, line: str) -> None:
        if has_debug_end(line):
            self.inside = False

    def retains(self, *, debug_enabled: bool) -> bool:
        return debug_enabled or not self.inside

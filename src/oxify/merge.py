# src/oxify/merge.py
"""Two-pass merge of a plugin source tree.

Pass 1 resolves the global debug flag. Pass 2 walks every file line by
line and accumulates imports and namespace bodies into a MergeState.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path

from .classify import (
    LineKind,
    classify_body,
    classify_top_level,
    get_namespace_name,
    has_debug_enable,
)
from .constants import EXCLUDED_FILENAME, SOURCE_SUFFIX
from .directives import expand_directive
from .logs import getAppLogger
from .types import FileCursor, InputFile, MergeState


# --------------------------------------------------------------------------- #
# File collection
# --------------------------------------------------------------------------- #


def discover_source_files(source_dir: Path) -> list[Path]:
    """Return every source file under `source_dir`, in a stable order.

    Files named EXCLUDED_FILENAME are skipped. Order is by relative
    posix path so repeated runs over an unchanged tree agree.
    """
    logger = getAppLogger()
    root = source_dir.resolve()
    if not root.exists():
        xmsg = f"Source directory not found: {source_dir}"
        raise FileNotFoundError(xmsg)
    if not root.is_dir():
        xmsg = f"Source path is not a directory: {source_dir}"
        raise NotADirectoryError(xmsg)

    matches: list[Path] = []
    for p in root.rglob(f"*{SOURCE_SUFFIX}"):
        if not p.is_file():
            continue
        if p.name == EXCLUDED_FILENAME:
            logger.trace(f"[COLLECT] Excluded {p}")
            continue
        matches.append(p)

    matches.sort(key=lambda p: p.relative_to(root).as_posix())
    for i, m in enumerate(matches):
        logger.trace(f"[COLLECT]   {i + 1:02d}. {m}")
    return matches


def read_input_file(path: Path, root: Path) -> InputFile:
    # utf-8-sig: a BOM must not end up glued to the first line.
    # Undecodable bytes (legacy cp1252 sources) become U+FFFD.
    text = path.read_text(encoding="utf-8-sig", errors="replace")
    # Universal newlines already folded \r\n and \r into \n; splitlines()
    # would also break on \f, \v, \x85 and the unicode line separators.
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return InputFile(
        path=path,
        rel_path=path.relative_to(root).as_posix(),
        lines=tuple(lines),
    )


def read_input_files(source_dir: Path) -> list[InputFile]:
    root = source_dir.resolve()
    return [read_input_file(p, root) for p in discover_source_files(source_dir)]


# --------------------------------------------------------------------------- #
# Pass 1
# --------------------------------------------------------------------------- #


def resolve_debug_flag(files: Iterable[InputFile]) -> bool:
    """True if any line of any file carries the debug-enable marker."""
    logger = getAppLogger()
    for f in files:
        for line in f.lines:
            if has_debug_enable(line):
                logger.info("Debug enabled (%s)", f.rel_path)
                return True
    return False


# --------------------------------------------------------------------------- #
# Pass 2
# --------------------------------------------------------------------------- #


def _append_body_line(state: MergeState, cursor: FileCursor, line: str) -> None:
    logger = getAppLogger()
    if cursor.namespace is None:
        state.dropped_lines += 1
        logger.warning(
            "Dropping line outside any namespace (%s:%d): %r",
            cursor.rel_path,
            cursor.lineno,
            line.strip(),
        )
        return
    state.namespaces[cursor.namespace].append(line)


def _merge_line(state: MergeState, cursor: FileCursor, line: str) -> None:
    logger = getAppLogger()
    new_depth = cursor.depth.peek(line)
    cursor.region.enter(line)

    if cursor.region.retains(debug_enabled=state.debug_enabled):
        if cursor.depth.at_top_level:
            kind = classify_top_level(line)
            if kind is LineKind.NAMESPACE:
                cursor.namespace = get_namespace_name(line)
                if state.register_namespace(cursor.namespace):
                    logger.debug("Added namespace %s", cursor.namespace)
            elif kind is LineKind.IMPORT:
                state.add_import(line)
        elif new_depth != 0:
            if classify_body(line) is LineKind.DIRECTIVE:
                replacement = expand_directive(line, state, cursor)
                if replacement is not None:
                    _append_body_line(state, cursor, replacement)
            else:
                _append_body_line(state, cursor, line)
    else:
        logger.trace("[DEBUG-REGION] skip %s:%d", cursor.rel_path, cursor.lineno)

    cursor.region.leave(line)
    cursor.depth.commit(new_depth)


def merge_file(state: MergeState, input_file: InputFile) -> None:
    logger = getAppLogger()
    logger.debug("Parsing %s", input_file.rel_path)
    cursor = FileCursor(rel_path=input_file.rel_path)
    for lineno, line in enumerate(input_file.lines, start=1):
        cursor.lineno = lineno
        _merge_line(state, cursor, line)
    state.files_merged += 1


def merge_files(
    files: Sequence[InputFile],
    *,
    plugin_name: str,
    plugin_version: str,
) -> MergeState:
    """Run both passes over `files` and return the accumulated state."""
    state = MergeState(plugin_name=plugin_name, plugin_version=plugin_version)
    state.debug_enabled = resolve_debug_flag(files)
    for f in files:
        merge_file(state, f)
    return state

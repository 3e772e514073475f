# src/oxify/build.py

from datetime import datetime, timezone
from pathlib import Path

from .actions import get_metadata
from .config_types import MergeConfigResolved
from .constants import (
    BUILD_TIMESTAMP_FORMAT,
    BUILD_TIMESTAMP_PLACEHOLDER,
    SOURCE_SUFFIX,
)
from .logs import getAppLogger
from .merge import merge_files, read_input_files
from .render import render_output
from .types import MergeState


def _build_date(*, disable_build_timestamp: bool) -> str:
    if disable_build_timestamp:
        return BUILD_TIMESTAMP_PLACEHOLDER
    return datetime.now(timezone.utc).strftime(BUILD_TIMESTAMP_FORMAT)


def run_build(config: MergeConfigResolved) -> MergeState:
    """Execute one merge run using a fully resolved config.

    The destination is opened before the sources are read and stays open
    for the whole run; it is closed on every exit path.
    """
    logger = getAppLogger()
    source_dir: Path = config["source_dir"]
    out_path: Path = config["out_path"]
    plugin_name = config["plugin_name"]
    plugin_version = config["plugin_version"]

    logger.info("🔧 Merging plugin %s v%s", plugin_name, plugin_version)

    with out_path.open("w", encoding="utf-8", newline="\n") as out:
        files = read_input_files(source_dir)
        logger.info(
            "📂 Found %d %s file(s) in %s", len(files), SOURCE_SUFFIX, source_dir
        )

        state = merge_files(
            files, plugin_name=plugin_name, plugin_version=plugin_version
        )

        text = render_output(
            state,
            tool_version=get_metadata().version,
            build_date=_build_date(
                disable_build_timestamp=config["disable_build_timestamp"]
            ),
        )
        out.write(text)

    if state.dropped_lines:
        logger.warning(
            "%d line(s) outside any namespace were dropped", state.dropped_lines
        )
    logger.info("💾 Saved to %s", out_path)
    logger.info("✅ Done! Merged %d file(s).", state.files_merged)
    return state

# src/oxify/constants.py
"""Central constants used across the project."""

# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"
DEFAULT_ENV_DISABLE_BUILD_TIMESTAMP: str = "DISABLE_BUILD_TIMESTAMP"

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"
DEFAULT_DISABLE_BUILD_TIMESTAMP: bool = False
BUILD_TIMESTAMP_PLACEHOLDER: str = "<build-timestamp>"
BUILD_TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S UTC"

# --- source discovery ---
SOURCE_SUFFIX: str = ".cs"
EXCLUDED_FILENAME: str = "AssemblyInfo.cs"

# --- embedded directives ---
DEBUG_ENABLE_MARKER: str = "//OX.DEBUGENABLE"
DEBUG_START_MARKER: str = "//OX.DEBUGSTART"
DEBUG_END_MARKER: str = "//OX.DEBUGEND"
INSERT_MARKER: str = "//OX.INSERT("

# --- source syntax ---
NAMESPACE_KEYWORD: str = "namespace "
BLOCK_OPEN: str = "{"
BLOCK_CLOSE: str = "}"
COMMENT_CHAR: str = "/"

# --- output ---
UNKNOWN: str = "UNKNOWN"
HEADER_BORDER_CHAR: str = "/"
HEADER_BORDER_PADDING: int = 5
DEBUG_FLAGS_BANNER: str = "Flags: OX.DEBUGENABLE"

# src/oxify/actions.py
import re
import subprocess
from contextlib import suppress
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as dist_version
from pathlib import Path

from .logs import getAppLogger
from .meta import PROGRAM_PACKAGE, Metadata


def extract_version(pyproject_path: Path) -> str:
    """Extract version string from pyproject.toml, or "unknown"."""
    if not pyproject_path.exists():
        return "unknown"
    text = pyproject_path.read_text(encoding="utf-8")
    match = re.search(r'(?m)^\s*version\s*=\s*["\']([^"\']+)["\']', text)
    return match.group(1) if match else "unknown"


def get_metadata() -> Metadata:
    """Return version and commit for this tool.

    - Source checkout → read pyproject.toml + git
    - Installed distribution → package metadata
    """
    logger = getAppLogger()
    root = Path(__file__).resolve().parents[2]
    logger.trace(f"get_metadata ran from: {root}")

    version = extract_version(root / "pyproject.toml")
    if version == "unknown":
        with suppress(PackageNotFoundError):
            version = dist_version(PROGRAM_PACKAGE)

    commit = "unknown"
    with suppress(OSError, subprocess.CalledProcessError):
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],  # noqa: S607
            cwd=root,
            capture_output=True,
            text=True,
            check=True,
        )
        commit = result.stdout.strip()

    logger.trace(f"got version {version} with commit {commit}")
    return Metadata(version, commit)

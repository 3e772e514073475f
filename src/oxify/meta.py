# src/oxify/meta.py
"""Program identity and version lookup."""

from dataclasses import dataclass


# --- program identity ---
PROGRAM_PACKAGE = "oxify"
PROGRAM_SCRIPT = "oxify"
PROGRAM_DISPLAY = "Oxify"
PROGRAM_ENV = "OXIFY"


@dataclass(frozen=True)
class Metadata:
    """Tool version information."""

    version: str
    commit: str

    def __str__(self) -> str:
        return f"{self.version} ({self.commit})"

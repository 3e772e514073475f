# src/oxify/config_types.py


from pathlib import Path
from typing import Literal, TypedDict

from typing_extensions import NotRequired


OriginType = Literal["cli", "env", "default"]


class MergeConfigResolved(TypedDict):
    source_dir: Path
    out_path: Path
    plugin_name: str
    plugin_version: str

    disable_build_timestamp: bool
    log_level: str

    # meta only
    __meta__: NotRequired[dict[str, OriginType]]  # provenance per key

# tests/utils/__init__.py

from .constants import DEFAULT_TEST_LOG_LEVEL, PROJ_ROOT
from .inputs import make_input
from .package import DEFAULT_PLUGIN_SOURCE, make_plugin_tree, write_source
from .patch_everywhere import patch_everywhere


__all__ = [  # noqa: RUF022
    # constants
    "PROJ_ROOT",
    "DEFAULT_TEST_LOG_LEVEL",
    # inputs
    "make_input",
    # package
    "DEFAULT_PLUGIN_SOURCE",
    "make_plugin_tree",
    "write_source",
    # patch_everywhere
    "patch_everywhere",
]

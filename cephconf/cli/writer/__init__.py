"""Config file writers for Ceph daemons.

This module renders Ceph config files and keyrings from data bags and writes
them to disk with a given file mode.
"""

from pathlib import Path
from typing import Any, Union

# Custom types
PathLike = Union[str, Path]
DataBag = dict[str, Any]

#: Default directory holding the generated files
DEFAULT_CONFIG_DIR = Path("/var/snap/microceph/current/conf")

#: Default runtime directory of the daemons
DEFAULT_RUN_DIR = Path("/var/snap/microceph/current/run")

#: Default file modes
CONFIG_FILE_MODE = 0o644
KEYRING_FILE_MODE = 0o600

from .config import (  # noqa: E402
    Config,
    ConfigWriter,
    new_ceph_config,
    new_ceph_keyring,
    new_radosgw_config,
)
from .errors import ConfigWriteError, OpenError, RenderError  # noqa: E402

__all__ = [
    "CONFIG_FILE_MODE",
    "Config",
    "ConfigWriteError",
    "ConfigWriter",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_RUN_DIR",
    "DataBag",
    "KEYRING_FILE_MODE",
    "OpenError",
    "PathLike",
    "RenderError",
    "new_ceph_config",
    "new_ceph_keyring",
    "new_radosgw_config",
]

"""Config renderer for Ceph daemon configuration files."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable

from jinja2 import Template, TemplateError

from ..templates import get_template
from . import DataBag, PathLike
from .errors import OpenError, RenderError

TEMPLATE_DIR = "ceph"

CEPH_CONF = "ceph.conf"
RADOSGW_CONF = "radosgw.conf"

# Optional [client] options of ceph.conf, in output order
CLIENT_CACHE_OPTIONS = (
    ("isCache", "rbd_cache"),
    ("cacheSize", "rbd_cache_size"),
    ("isCacheWritethrough", "rbd_cache_writethrough_until_flush"),
    ("cacheMaxDirty", "rbd_cache_max_dirty"),
    ("cacheTargetDirty", "rbd_cache_target_dirty"),
)


class ConfigWriter(ABC):
    """Interface for writing config files."""

    @abstractmethod
    def write(self, data: DataBag, mode: int) -> None:
        """Write the config file.

        Args:
            data: Data bag to render
            mode: Permission bits for a newly created file
        """
        pass


def _passthrough(data: DataBag) -> dict[str, Any]:
    return dict(data)


@dataclass(frozen=True)
class Config(ConfigWriter):
    """A config file rendered from a template.

    Attributes:
        template: Compiled template
        config_dir: Directory holding the file
        config_file: File name
        prepare: Turns the data bag into the template context
    """

    template: Template
    config_dir: PathLike
    config_file: str
    prepare: Callable[[DataBag], dict[str, Any]] = field(default=_passthrough)

    @property
    def path(self) -> str:
        """Path to the config file."""
        return os.path.join(self.config_dir, self.config_file)

    def render(self, data: DataBag) -> str:
        """Render the config file without writing it.

        Args:
            data: Data bag to render

        Returns:
            str: The rendered file content

        Raises:
            RenderError: If the data does not fit the template
        """
        try:
            return self.template.render(self.prepare(data))
        except (TemplateError, KeyError, TypeError, ValueError) as e:
            raise RenderError(self.config_file, e) from e

    def write(self, data: DataBag, mode: int) -> None:
        """Write the config file given a data bag and a file mode.

        The file is created if absent and truncated if present. The mode only
        applies when the file is created.

        Args:
            data: Data bag to render
            mode: Permission bits for a newly created file

        Raises:
            OpenError: If the file cannot be opened
            RenderError: If rendering into the file fails
        """
        try:
            fd = os.open(self.path, os.O_CREAT | os.O_TRUNC | os.O_RDWR, mode)
        except OSError as e:
            raise OpenError(self.config_file, e) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(self.render(data))
        except (OSError, UnicodeError) as e:
            raise RenderError(self.config_file, e) from e


def _ceph_config_context(data: DataBag) -> dict[str, Any]:
    context = dict(data)
    context["client_options"] = [
        (option, data[key]) for key, option in CLIENT_CACHE_OPTIONS if data.get(key)
    ]
    return context


def _radosgw_context(data: DataBag) -> dict[str, Any]:
    if "rgwPort" not in data:
        raise KeyError("rgwPort")
    rgw_port = data["rgwPort"]
    if isinstance(rgw_port, bool) or not isinstance(rgw_port, int):
        raise TypeError(f"rgwPort must be an integer, got {rgw_port!r}")

    cert = data.get("sslCertificatePath")
    key = data.get("sslPrivateKeyPath")

    frontends = "beast"
    # Both clauses are emitted when a non-zero port is combined with TLS
    if rgw_port != 0 or not cert or not key:
        frontends += f" port={rgw_port}"
    if cert and key:
        if "sslPort" not in data:
            raise KeyError("sslPort")
        frontends += (
            f" ssl_port={data['sslPort']}"
            f" ssl_certificate={cert}"
            f" ssl_private_key={key}"
        )

    context = dict(data)
    context["frontends"] = frontends
    return context


def new_ceph_config(config_dir: PathLike) -> Config:
    """Create a writer for ceph.conf.

    Required keys: runDir, fsid, monitors, pubNet, ipv4, ipv6. The rbd cache
    keys (isCache, cacheSize, isCacheWritethrough, cacheMaxDirty,
    cacheTargetDirty) are rendered only when truthy.
    """
    return Config(
        template=get_template(TEMPLATE_DIR, "ceph.conf.j2"),
        config_dir=config_dir,
        config_file=CEPH_CONF,
        prepare=_ceph_config_context,
    )


def new_ceph_keyring(config_dir: PathLike, config_file: str) -> Config:
    """Create a writer for a keyring holding a single named key."""
    return Config(
        template=get_template(TEMPLATE_DIR, "keyring.j2"),
        config_dir=config_dir,
        config_file=config_file,
    )


def new_radosgw_config(config_dir: PathLike) -> Config:
    """Create a writer for radosgw.conf.

    Required keys: monitors, runDir, rgwPort. When both sslCertificatePath
    and sslPrivateKeyPath are set, sslPort is required as well.
    """
    return Config(
        template=get_template(TEMPLATE_DIR, "radosgw.conf.j2"),
        config_dir=config_dir,
        config_file=RADOSGW_CONF,
        prepare=_radosgw_context,
    )

"""Command definitions for the cephconf CLI.

This module contains all command definitions for the cephconf CLI application,
using the Typer framework to define the command structure and options.
"""

from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import BaseModel, ValidationError

from .console import console
from .writer import (
    CONFIG_FILE_MODE,
    DEFAULT_CONFIG_DIR,
    DEFAULT_RUN_DIR,
    KEYRING_FILE_MODE,
    Config,
    ConfigWriteError,
    DataBag,
    new_ceph_config,
    new_ceph_keyring,
    new_radosgw_config,
)
from .writer.models import CephConfSettings, KeyringSettings, RadosGWSettings

app = typer.Typer(
    help="Render Ceph config files and keyrings",
    no_args_is_help=True,
)

CONFIG_DIR_ENVVAR = "CEPHCONF_CONFIG_DIR"


def parse_mode(value: str) -> int:
    """Parse an octal permission string such as ``0644``.

    Args:
        value: Octal digits, optionally prefixed with ``0o``

    Returns:
        int: The permission bits

    Raises:
        typer.BadParameter: If the value is not a valid octal mode
    """
    digits = value.lower().removeprefix("0o")
    try:
        mode = int(digits, 8)
    except ValueError:
        raise typer.BadParameter(f"'{value}' is not an octal file mode")
    if mode > 0o7777:
        raise typer.BadParameter(f"'{value}' is out of range for a file mode")
    return mode


def _build_settings(model: type[BaseModel], **values: Any) -> Any:
    try:
        return model(**values)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or model.__name__
            console.error(f"{field}: {error['msg']}")
        raise typer.Exit(code=1)


def _emit(writer: Config, data: DataBag, mode: int, dry_run: bool) -> None:
    """Render to stdout on dry runs, write the file otherwise."""
    try:
        if dry_run:
            typer.echo(writer.render(data), nl=False)
            return
        writer.write(data, mode)
    except ConfigWriteError as e:
        console.error(str(e))
        raise typer.Exit(code=1)

    console.success("Wrote config file:")
    console.path(writer.path)


@app.command("ceph-conf")
def ceph_conf(
    fsid: str = typer.Option(..., "--fsid", help="Cluster fsid (UUID)"),
    monitors: list[str] = typer.Option(
        ..., "--mon-host", "-m", help="Monitor address, repeat for several"
    ),
    public_network: str = typer.Option(
        ..., "--public-network", "-n", help="Public network CIDR"
    ),
    run_dir: Path = typer.Option(
        DEFAULT_RUN_DIR, "--run-dir", help="Runtime directory of the daemons"
    ),
    ipv4: bool = typer.Option(True, "--ipv4/--no-ipv4", help="Bind to IPv4"),
    ipv6: bool = typer.Option(False, "--ipv6/--no-ipv6", help="Bind to IPv6"),
    rbd_cache: Optional[bool] = typer.Option(
        None, "--rbd-cache/--no-rbd-cache", help="Enable the RBD client cache"
    ),
    cache_size: Optional[int] = typer.Option(
        None, "--cache-size", help="RBD cache size in bytes"
    ),
    cache_writethrough: Optional[bool] = typer.Option(
        None,
        "--cache-writethrough/--no-cache-writethrough",
        help="Keep the RBD cache writethrough until the first flush",
    ),
    cache_max_dirty: Optional[int] = typer.Option(
        None, "--cache-max-dirty", help="Maximum dirty bytes in the RBD cache"
    ),
    cache_target_dirty: Optional[int] = typer.Option(
        None, "--cache-target-dirty", help="Dirty bytes at which writeback starts"
    ),
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_DIR,
        "--config-dir",
        "-c",
        envvar=CONFIG_DIR_ENVVAR,
        help="Directory to write ceph.conf into",
    ),
    mode: str = typer.Option(
        f"{CONFIG_FILE_MODE:04o}", "--mode", help="Octal mode for a new file"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the rendered file instead of writing it"
    ),
) -> None:
    """Render ceph.conf for the cluster."""
    file_mode = parse_mode(mode)
    settings = _build_settings(
        CephConfSettings,
        fsid=fsid,
        monitors=monitors,
        public_network=public_network,
        run_dir=run_dir,
        ipv4=ipv4,
        ipv6=ipv6,
        rbd_cache=rbd_cache,
        cache_size=cache_size,
        cache_writethrough=cache_writethrough,
        cache_max_dirty=cache_max_dirty,
        cache_target_dirty=cache_target_dirty,
    )
    _emit(new_ceph_config(config_dir), settings.to_data(), file_mode, dry_run)


@app.command()
def keyring(
    name: str = typer.Argument(..., help="Entity name, e.g. client.admin"),
    key: str = typer.Argument(..., help="Base64 secret"),
    filename: Optional[str] = typer.Option(
        None, "--file", "-f", help="Keyring file name (default ceph.NAME.keyring)"
    ),
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_DIR,
        "--config-dir",
        "-c",
        envvar=CONFIG_DIR_ENVVAR,
        help="Directory to write the keyring into",
    ),
    mode: str = typer.Option(
        f"{KEYRING_FILE_MODE:04o}", "--mode", help="Octal mode for a new file"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the rendered file instead of writing it"
    ),
) -> None:
    """Render a keyring holding a single key."""
    file_mode = parse_mode(mode)
    settings = _build_settings(KeyringSettings, name=name, key=key)
    writer = new_ceph_keyring(config_dir, filename or settings.default_filename)
    _emit(writer, settings.to_data(), file_mode, dry_run)


@app.command("radosgw-conf")
def radosgw_conf(
    monitors: list[str] = typer.Option(
        ..., "--mon-host", "-m", help="Monitor address, repeat for several"
    ),
    run_dir: Path = typer.Option(
        DEFAULT_RUN_DIR, "--run-dir", help="Runtime directory of the daemons"
    ),
    rgw_port: int = typer.Option(80, "--port", "-p", help="HTTP port, 0 to disable"),
    ssl_port: int = typer.Option(443, "--ssl-port", help="HTTPS port"),
    ssl_certificate: Optional[Path] = typer.Option(
        None, "--ssl-certificate", help="TLS certificate path"
    ),
    ssl_private_key: Optional[Path] = typer.Option(
        None, "--ssl-private-key", help="TLS private key path"
    ),
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_DIR,
        "--config-dir",
        "-c",
        envvar=CONFIG_DIR_ENVVAR,
        help="Directory to write radosgw.conf into",
    ),
    mode: str = typer.Option(
        f"{CONFIG_FILE_MODE:04o}", "--mode", help="Octal mode for a new file"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the rendered file instead of writing it"
    ),
) -> None:
    """Render radosgw.conf for the RADOS gateway."""
    file_mode = parse_mode(mode)
    if (ssl_certificate is None) != (ssl_private_key is None):
        console.warning(
            "TLS needs both --ssl-certificate and --ssl-private-key, serving plain HTTP"
        )
    settings = _build_settings(
        RadosGWSettings,
        monitors=monitors,
        run_dir=run_dir,
        rgw_port=rgw_port,
        ssl_port=ssl_port,
        ssl_certificate_path=ssl_certificate,
        ssl_private_key_path=ssl_private_key,
    )
    if settings.use_tls and not dry_run:
        console.info(f"Serving TLS on port {settings.ssl_port}")
    _emit(new_radosgw_config(config_dir), settings.to_data(), file_mode, dry_run)


@app.command()
def version() -> None:
    """Show the installed version."""
    from . import __version__

    typer.echo(__version__)

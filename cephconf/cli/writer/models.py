"""Settings models for the generated Ceph config files."""

from pathlib import Path
from typing import Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from . import DataBag


class _DataBagModel(BaseModel):
    """Model whose aliases are the template placeholders."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_data(self) -> DataBag:
        """Build the data bag passed to a config writer.

        Returns:
            DataBag: Field values keyed by placeholder, unset options dropped
        """
        return self.model_dump(by_alias=True, exclude_none=True)


class CephConfSettings(_DataBagModel):
    """Settings rendered into ceph.conf.

    Attributes:
        run_dir: Runtime directory of the daemons
        fsid: Cluster identifier
        monitors: Monitor addresses
        public_network: Public network CIDR
        ipv4: Bind messengers to IPv4
        ipv6: Bind messengers to IPv6
        rbd_cache: Enable the RBD client cache
        cache_size: RBD cache size in bytes
        cache_writethrough: Keep the cache writethrough until the first flush
        cache_max_dirty: Maximum dirty bytes in the cache
        cache_target_dirty: Dirty bytes at which writeback starts
    """

    run_dir: Path = Field(alias="runDir")
    fsid: UUID
    monitors: list[str] = Field(min_length=1)
    public_network: str = Field(alias="pubNet")
    ipv4: bool = Field(default=True)
    ipv6: bool = Field(default=False)
    rbd_cache: bool | None = Field(default=None, alias="isCache")
    cache_size: int | None = Field(default=None, ge=0, alias="cacheSize")
    cache_writethrough: bool | None = Field(default=None, alias="isCacheWritethrough")
    cache_max_dirty: int | None = Field(default=None, ge=0, alias="cacheMaxDirty")
    cache_target_dirty: int | None = Field(default=None, ge=0, alias="cacheTargetDirty")

    @field_validator("fsid", mode="after")
    @classmethod
    def check_fsid(cls, value: UUID) -> UUID:
        """Reject the nil UUID, which Ceph treats as unset."""
        if value.int == 0:
            raise ValueError("fsid must not be the nil UUID")
        return value

    def to_data(self) -> DataBag:
        """Build the data bag passed to a config writer."""
        data = super().to_data()
        data["fsid"] = str(self.fsid)
        return data


class KeyringSettings(_DataBagModel):
    """Settings rendered into a keyring file.

    Attributes:
        name: Entity name, e.g. client.admin
        key: Base64 secret
    """

    name: str = Field(min_length=1)
    key: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def check_section_name(cls, value: str) -> str:
        """Ensure the name fits in an INI section header."""
        if any(char in value for char in "[]\n\r"):
            raise ValueError("name must not contain brackets or line breaks")
        return value

    @property
    def default_filename(self) -> str:
        """Conventional file name for this keyring."""
        return f"ceph.{self.name}.keyring"


class RadosGWSettings(_DataBagModel):
    """Settings rendered into radosgw.conf.

    Attributes:
        monitors: Monitor addresses
        run_dir: Runtime directory of the daemons
        rgw_port: Plain HTTP port
        ssl_port: HTTPS port
        ssl_certificate_path: TLS certificate
        ssl_private_key_path: TLS private key
    """

    monitors: list[str] = Field(min_length=1)
    run_dir: Path = Field(alias="runDir")
    rgw_port: int = Field(default=80, ge=0, le=65535, alias="rgwPort")
    ssl_port: int = Field(default=443, ge=0, le=65535, alias="sslPort")
    ssl_certificate_path: Path | None = Field(default=None, alias="sslCertificatePath")
    ssl_private_key_path: Path | None = Field(default=None, alias="sslPrivateKeyPath")

    @model_validator(mode="after")
    def check_listener(self) -> Self:
        """Ensure the gateway listens on at least one port."""
        if self.rgw_port == 0 and not self.use_tls:
            raise ValueError("rgw_port must be set when TLS is not configured")
        return self

    @property
    def use_tls(self) -> bool:
        """Check if both TLS paths are configured."""
        return (
            self.ssl_certificate_path is not None
            and self.ssl_private_key_path is not None
        )

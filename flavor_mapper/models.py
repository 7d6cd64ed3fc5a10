# models.py

"""Data models for OpenStack Flavor Mapper."""

from enum import Enum
from typing import Any, Dict, Mapping, NamedTuple, Optional

from openstack.compute.v2 import flavor as _flavor

from .exceptions import CatalogError

# Column names used by `openstack flavor list --long -f json`
CLI_COLUMNS = {
    "name": "Name",
    "vcpus": "VCPUs",
    "ram": "RAM",
    "disk": "Disk",
    "ephemeral": "Ephemeral",
}

class BootPolicy(Enum):
    """Where the root disk of the instance lives."""
    DEFAULT = "default"
    BOOT_FROM_VOLUME = "boot_from_volume"

    @classmethod
    def from_flag(cls, boot_from_volume: bool) -> "BootPolicy":
        return cls.BOOT_FROM_VOLUME if boot_from_volume else cls.DEFAULT

class ResourceRequirement(NamedTuple):
    """Resources requested for a single VM."""
    cpu: int
    ram: int  # MB
    ephemeral_disk_size: int = 0  # MB

    @classmethod
    def from_mapping(cls, requirements: Mapping[str, Any]) -> "ResourceRequirement":
        return cls(
            cpu=requirements["cpu"],
            ram=requirements["ram"],
            ephemeral_disk_size=requirements.get("ephemeral_disk_size", 0),
        )

class Flavor(NamedTuple):
    """A flavor from the cloud's catalog."""
    name: str
    vcpus: int
    ram: int  # MB
    disk: int  # GB, root disk
    ephemeral: int = 0  # GB, 0 means no dedicated ephemeral disk
    disabled: bool = False

    @classmethod
    def from_openstack(cls, resource: _flavor.Flavor) -> "Flavor":
        """Build a Flavor from an openstacksdk flavor resource."""
        return cls(
            name=resource.name,
            vcpus=resource.vcpus or 0,
            ram=resource.ram or 0,
            disk=resource.disk or 0,
            ephemeral=resource.ephemeral or 0,
            disabled=bool(resource.is_disabled),
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Flavor":
        """
        Build a Flavor from a catalog record.

        Accepts either the Nova API representation (``vcpus``,
        ``OS-FLV-EXT-DATA:ephemeral``, ...) or the column layout printed by
        ``openstack flavor list --long -f json``.

        Raises CatalogError if the record is not an object or a required
        field is missing or not a number.
        """
        if not isinstance(record, Mapping):
            raise CatalogError(f"Flavor record is not an object: {record!r}")

        try:
            if CLI_COLUMNS["vcpus"] in record:
                return cls(**{
                    field: record[column] if field == "name" else int(record[column] or 0)
                    for field, column in CLI_COLUMNS.items()
                })

            missing = [key for key in ("name", "vcpus", "ram") if key not in record]
            if missing:
                raise CatalogError(
                    f"Flavor record is missing fields: {', '.join(missing)}"
                )
            return cls.from_openstack(_flavor.Flavor(**record))
        except KeyError as e:
            raise CatalogError(f"Flavor record is missing column {e}")
        except (TypeError, ValueError) as e:
            raise CatalogError(f"Invalid flavor record {record!r}: {e}")

class SelectionResult(NamedTuple):
    """The chosen flavor and an optional explicit root disk size."""
    instance_type: str
    root_disk_override: Optional[float] = None  # GB

    def to_cloud_properties(self) -> Dict[str, Any]:
        """Render the result as VM cloud properties."""
        if self.root_disk_override is None:
            return {"instance_type": self.instance_type}
        return {
            "instance_type": self.instance_type,
            "root_disk": {"size": self.root_disk_override},
        }

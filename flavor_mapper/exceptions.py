# exceptions.py

"""Custom exceptions for OpenStack Flavor Mapper."""

from .config import MB_PER_GB

class FlavorMapperError(Exception):
    """Base exception for flavor mapping errors."""
    pass

class NoMatchingFlavorError(FlavorMapperError):
    """No flavor in the catalog satisfies the requested resources.

    Carries the original requirement and the complete catalog, disabled and
    filtered flavors included, so callers can render a diagnostic.
    """

    def __init__(self, requirement, flavors):
        self.requirement = requirement
        self.flavors = tuple(flavors)
        super().__init__(
            f"Unable to meet requested VM requirements: {requirement.cpu} CPU, "
            f"{requirement.ram} MB RAM, {self.ephemeral_disk_size_gb} GB Disk"
        )

    @property
    def ephemeral_disk_size_gb(self) -> float:
        return self.requirement.ephemeral_disk_size / MB_PER_GB

class CatalogError(FlavorMapperError):
    """Exception for flavor catalogs that cannot be loaded."""
    pass

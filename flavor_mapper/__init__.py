"""Select the OpenStack flavor that best fits a VM's resource requirements."""

from .exceptions import CatalogError, FlavorMapperError, NoMatchingFlavorError
from .models import BootPolicy, Flavor, ResourceRequirement, SelectionResult
from .selector import FlavorSelector, derive_selection

__all__ = [
    "BootPolicy",
    "CatalogError",
    "Flavor",
    "FlavorMapperError",
    "FlavorSelector",
    "NoMatchingFlavorError",
    "ResourceRequirement",
    "SelectionResult",
    "derive_selection",
]

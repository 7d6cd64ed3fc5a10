# selector.py

"""Flavor selection for a single VM resource request."""

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from .config import MB_PER_GB, NO_DISK, OS_OVERHEAD_IN_GB
from .exceptions import NoMatchingFlavorError
from .models import BootPolicy, Flavor, ResourceRequirement, SelectionResult

logger = logging.getLogger(__name__)

def rank_key(flavor: Flavor) -> Tuple[int, int, int, int]:
    """Ordering used to pick the smallest adequate flavor."""
    return (flavor.vcpus, flavor.ram, flavor.disk + flavor.ephemeral, flavor.disk)

def derive_selection(flavor: Flavor, ephemeral_disk_size_gb: float) -> SelectionResult:
    """
    Build the selection result for the chosen flavor.

    Flavors whose root disk cannot hold the OS get an explicit root disk
    size. Without a dedicated ephemeral disk the root disk must also hold
    the ephemeral data.
    """
    if flavor.disk >= OS_OVERHEAD_IN_GB:
        return SelectionResult(instance_type=flavor.name)

    if flavor.ephemeral == NO_DISK:
        root_disk_size = OS_OVERHEAD_IN_GB + ephemeral_disk_size_gb
    else:
        root_disk_size = OS_OVERHEAD_IN_GB

    return SelectionResult(instance_type=flavor.name, root_disk_override=root_disk_size)

class FlavorSelector:
    """Selects the best fitting flavor from a catalog.

    The selector keeps no state between calls and can be shared.
    """

    def select(self, requirement: ResourceRequirement, flavors: Iterable[Flavor],
               boot_policy: BootPolicy = BootPolicy.DEFAULT) -> SelectionResult:
        """
        Select the smallest flavor satisfying the requirement.

        Args:
            requirement: Requested cpu, ram (MB) and ephemeral disk (MB)
            flavors: Flavor catalog, left untouched
            boot_policy: Whether the root disk is backed by a volume

        Returns:
            SelectionResult for the chosen flavor

        Raises:
            NoMatchingFlavorError if no flavor satisfies the requirement
        """
        catalog = list(flavors)
        disk_gb = requirement.ephemeral_disk_size / MB_PER_GB

        candidates = self.find_possible_flavors(requirement, disk_gb, catalog, boot_policy)
        if not candidates:
            logger.debug(
                f"No flavor matches {requirement.cpu} vCPUs, {requirement.ram}MB RAM, "
                f"{disk_gb}GB disk among {len(catalog)} flavors"
            )
            raise NoMatchingFlavorError(requirement, catalog)

        # min() keeps the first flavor in catalog order on full ties
        closest_match = min(candidates, key=rank_key)
        logger.debug(f"Selected flavor {closest_match.name} out of {len(candidates)} candidates")

        return derive_selection(closest_match, disk_gb)

    def map(self, requirements: Mapping[str, Any], flavors: Iterable[Flavor],
            boot_from_volume: bool = False) -> Dict[str, Any]:
        """Select a flavor and return the resulting cloud properties."""
        result = self.select(
            ResourceRequirement.from_mapping(requirements),
            flavors,
            BootPolicy.from_flag(boot_from_volume),
        )
        return result.to_cloud_properties()

    def find_possible_flavors(self, requirement: ResourceRequirement, disk_gb: float,
                              flavors: List[Flavor], boot_policy: BootPolicy) -> List[Flavor]:
        """Filter the catalog down to flavors that can host the VM."""
        valid_flavors = [
            flavor for flavor in flavors
            if flavor.vcpus >= requirement.cpu
            and flavor.ram >= requirement.ram
            and not flavor.disabled
        ]
        logger.debug(f"{len(valid_flavors)} of {len(flavors)} flavors meet cpu and ram requirements")

        if boot_policy is BootPolicy.BOOT_FROM_VOLUME:
            return self._boot_from_volume_flavors(disk_gb, valid_flavors)
        return self._boot_default_flavors(disk_gb, valid_flavors)

    def _boot_from_volume_flavors(self, disk_gb: float, valid_flavors: List[Flavor]) -> List[Flavor]:
        flavors = [flavor for flavor in valid_flavors if flavor.ephemeral >= disk_gb]
        if flavors:
            return flavors

        # The root volume can be sized to hold the ephemeral data as well, but a
        # dedicated ephemeral disk would be used instead of it.
        return [flavor for flavor in valid_flavors if flavor.ephemeral == NO_DISK]

    def _boot_default_flavors(self, disk_gb: float, valid_flavors: List[Flavor]) -> List[Flavor]:
        required_gb = math.ceil(disk_gb)

        flavors = [
            flavor for flavor in valid_flavors
            if flavor.ephemeral >= required_gb and flavor.disk >= OS_OVERHEAD_IN_GB
        ]
        if flavors:
            return flavors

        return [
            flavor for flavor in valid_flavors
            if flavor.ephemeral == NO_DISK
            and flavor.disk >= required_gb + OS_OVERHEAD_IN_GB
        ]

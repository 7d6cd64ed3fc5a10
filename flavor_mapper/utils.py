# utils.py

"""Utility functions for OpenStack Flavor Mapper."""

import json
import logging
from typing import List

from .config import LOG_FORMAT, LOG_DATE_FORMAT
from .exceptions import CatalogError, NoMatchingFlavorError
from .models import Flavor

logger = logging.getLogger(__name__)

def setup_logging(verbose: bool = False) -> None:
    """Configure logging with appropriate level and format."""
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT
    )

def load_flavor_catalog(path: str) -> List[Flavor]:
    """
    Load a flavor catalog from a JSON file.

    The file holds either a list of flavor records or a Nova
    ``GET /flavors/detail`` response with a ``flavors`` list.

    Args:
        path: Path to the catalog file

    Returns:
        List of Flavor in file order
    """
    try:
        with open(path) as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogError(f"Cannot read flavor catalog {path}: {e}")
    except ValueError as e:
        raise CatalogError(f"Flavor catalog {path} is not valid JSON: {e}")

    if isinstance(data, dict):
        data = data.get("flavors")
    if not isinstance(data, list):
        raise CatalogError(f"Flavor catalog {path} does not contain a list of flavors")

    flavors = [Flavor.from_record(record) for record in data]
    logger.debug(f"Loaded {len(flavors)} flavors from {path}")
    return flavors

def format_no_matching_flavor(error: NoMatchingFlavorError) -> str:
    """Render the requirement and the available flavors for an operator."""
    requirement = error.requirement
    lines = [
        f"Unable to meet requested VM requirements: {requirement.cpu} CPU, "
        f"{requirement.ram} MB RAM, {error.ephemeral_disk_size_gb} GB Disk.",
        "Available flavors:",
    ]
    lines.extend(
        f"{flavor.name}: {flavor.vcpus} CPU, {flavor.ram} MB RAM, {flavor.disk} GB Disk"
        for flavor in error.flavors
    )
    return "\n".join(lines)

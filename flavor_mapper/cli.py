# cli.py

"""Command-line interface for OpenStack Flavor Mapper."""

import argparse
import json
import logging
import sys

from .exceptions import FlavorMapperError, NoMatchingFlavorError
from .models import BootPolicy, ResourceRequirement
from .selector import FlavorSelector
from .utils import format_no_matching_flavor, load_flavor_catalog, setup_logging

logger = logging.getLogger(__name__)

def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Select the OpenStack flavor that best fits a VM's resources"
    )
    parser.add_argument(
        "--flavors",
        required=True,
        help="JSON file with the flavor catalog"
    )
    parser.add_argument(
        "--cpu",
        type=int,
        required=True,
        help="Number of vCPUs required"
    )
    parser.add_argument(
        "--ram",
        type=int,
        required=True,
        help="RAM required in MB"
    )
    parser.add_argument(
        "--ephemeral-disk-size",
        type=int,
        default=0,
        help="Ephemeral disk required in MB (default: 0)"
    )
    parser.add_argument(
        "--boot-from-volume",
        action="store_true",
        help="Root disk is backed by a block storage volume"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser.parse_args(argv)

def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    requirement = ResourceRequirement(
        cpu=args.cpu,
        ram=args.ram,
        ephemeral_disk_size=args.ephemeral_disk_size,
    )

    try:
        flavors = load_flavor_catalog(args.flavors)
        result = FlavorSelector().select(
            requirement, flavors, BootPolicy.from_flag(args.boot_from_volume)
        )
    except NoMatchingFlavorError as e:
        logger.error(format_no_matching_flavor(e))
        return 1
    except FlavorMapperError as e:
        logger.error(f"Flavor mapping error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1

    print(json.dumps(result.to_cloud_properties(), indent=2))
    return 0

if __name__ == "__main__":
    sys.exit(main())

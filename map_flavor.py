#!/usr/bin/env python3

"""
OpenStack Flavor Mapper runner script.
Allows direct execution without installation.
"""

import sys
import os

# Make the package importable from a source checkout
current_dir = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, current_dir)

from flavor_mapper.cli import main

if __name__ == "__main__":
    sys.exit(main())

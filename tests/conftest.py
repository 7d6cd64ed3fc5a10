import pytest

from flavor_mapper.models import Flavor
from flavor_mapper.selector import FlavorSelector


@pytest.fixture
def selector():
    return FlavorSelector()


@pytest.fixture
def make_flavor():
    def _make(name, vcpus=1, ram=2048, disk=20, ephemeral=0, disabled=False):
        return Flavor(name=name, vcpus=vcpus, ram=ram, disk=disk,
                      ephemeral=ephemeral, disabled=disabled)
    return _make

import pytest

from flocking.core.world import World


@pytest.fixture
def world():
    return World(960.0, 540.0)

import numpy as np
import pytest

from flocking.core.world import World, spawn_flock


def test_bounds_centered_on_origin(world):
    assert world.bounds == [-480.0, 480.0, -270.0, 270.0]


def test_edge_distances(world):
    d = world.edge_distances(np.array([-470.0, 260.0]))
    assert d["left"] == pytest.approx(10.0)
    assert d["right"] == pytest.approx(950.0)
    assert d["top"] == pytest.approx(10.0)
    assert d["bottom"] == pytest.approx(530.0)


def test_spawn_dense_ids_inside_world(world):
    state = spawn_flock(30, world, np.random.default_rng(0))
    assert list(state.agents) == list(range(30))
    for st in state.agents.values():
        assert world.contains(st.pos)
        assert 0.0 <= st.heading < 2 * np.pi
        assert np.all(st.vel == 0.0)
    assert state.tick == 0


def test_spawn_is_seeded(world):
    a = spawn_flock(5, world, np.random.default_rng(9))
    b = spawn_flock(5, world, np.random.default_rng(9))
    assert a.snapshot() == b.snapshot()


def test_spawn_empty():
    assert len(spawn_flock(0, World(10.0, 10.0), np.random.default_rng(1))) == 0

import numpy as np

from .state import BoidState, FlockState


def distance(a: BoidState, b: BoidState):
    """
    Euclidean distance between two agents' positions.
    Returned as a numpy scalar so a zero distance propagates as inf/nan
    through the turn gain instead of raising.
    """
    return np.sqrt((a.pos[0] - b.pos[0]) ** 2 + (a.pos[1] - b.pos[1]) ** 2)


def _positions(state: FlockState) -> np.ndarray:
    return np.array([a.pos for a in state.agents.values()], dtype=float).reshape(-1, 2)


def coverage_extent(state: FlockState) -> float:
    """
    Rough spread proxy: area of bounding box around all agents.
    """
    positions = _positions(state)
    if len(positions) == 0:
        return 0.0
    mins = positions.min(axis=0)
    maxs = positions.max(axis=0)
    return float(np.prod(maxs - mins))


def mean_pairwise_distance(state: FlockState) -> float:
    """
    Cohesion proxy: average pairwise distance between agents.
    """
    positions = _positions(state)
    if len(positions) < 2:
        return 0.0
    dists = np.linalg.norm(positions[:, None, :] - positions[None, :, :], axis=-1)
    # exclude self distances (zero diagonal)
    n = len(positions)
    return float(dists.sum() / (n * (n - 1)))


def collision_count(state: FlockState, threshold: float = 15.0) -> int:
    """
    Count number of agent pairs closer than threshold (default: one agent size).
    """
    positions = _positions(state)
    if len(positions) < 2:
        return 0
    dists = np.linalg.norm(positions[:, None, :] - positions[None, :, :], axis=-1)
    collisions = (dists < threshold).astype(int)
    # zero diagonal and double counted pairs
    collisions = np.triu(collisions, k=1)
    return int(collisions.sum())


def polarization(state: FlockState) -> float:
    """
    Order parameter in [0, 1]: length of the mean unit heading vector.
    1 means every agent points the same way.
    """
    headings = np.array([a.heading for a in state.agents.values()], dtype=float)
    if len(headings) == 0:
        return 0.0
    return float(np.hypot(np.cos(headings).mean(), np.sin(headings).mean()))


def out_of_bounds_count(state: FlockState, world) -> int:
    return sum(1 for a in state.agents.values() if not world.contains(a.pos))

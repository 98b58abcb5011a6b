import numpy as np

from flocking.core.state import BoidState, FlockState


def make_boid(aid, x, y, heading=0.0):
    return BoidState(id=aid, pos=np.array([x, y], dtype=float), vel=np.zeros(2), heading=heading)


def make_flock(*boids):
    return FlockState(agents={b.id: b for b in boids})

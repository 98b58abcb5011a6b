import numpy as np

from .base import Rule
from .blend import blend_toward, turn_gain


# Checked in this order; a later edge overwrites an earlier one's pending
# heading. The right edge has no entry, agents may leave the world there.
EDGE_BEARINGS = (
    ("bottom", np.pi / 2.0),
    ("top", 3.0 * np.pi / 2.0),
    ("left", 0.0),
)


class BoundaryRule(Rule):
    """Steer away from world edges closer than the separation distance."""

    name = "boundary"

    def __init__(self, world, distance: float = 50.0, sensitivity: float = 0.1):
        self.world = world
        self.distance = distance
        self.sensitivity = sensitivity

    def propose_for(self, agent, population):
        edges = self.world.edge_distances(agent.pos)
        pending = None
        for edge, bearing in EDGE_BEARINGS:
            d = edges[edge]
            if d < self.distance:
                pending = blend_toward(agent.heading, bearing, turn_gain(self.sensitivity, d))
        return pending

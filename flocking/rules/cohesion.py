import numpy as np

from .base import Rule
from .blend import blend_toward
from ..core.metrics import distance


class CohesionRule(Rule):
    """Steer toward the centroid of nearby agents."""

    name = "cohesion"

    def __init__(self, distance: float = 100.0, sensitivity: float = 0.0, agent_size: float = 15.0):
        self.distance = distance
        self.sensitivity = sensitivity
        self.agent_size = agent_size

    def propose_for(self, agent, population):
        neighbors = [
            other.pos
            for other in population.values()
            if other.id != agent.id and distance(agent, other) - self.agent_size < self.distance
        ]
        if not neighbors:
            return None
        center = np.mean(np.array(neighbors, dtype=float), axis=0)
        towards_center = np.arctan2(center[1] - agent.pos[1], center[0] - agent.pos[0])
        return blend_toward(agent.heading, towards_center, self.sensitivity)

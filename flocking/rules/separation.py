import numpy as np

from .base import Rule
from .blend import blend_away, turn_gain
from ..core.metrics import distance


class SeparationRule(Rule):
    """
    Turn away from every agent closer than distance + agent size.

    Each threatening neighbor overwrites the pending heading, so the last one
    in store order decides it; nothing is averaged.
    """

    name = "separation"

    def __init__(self, distance: float = 50.0, sensitivity: float = 0.1, agent_size: float = 15.0):
        self.distance = distance
        self.sensitivity = sensitivity
        self.agent_size = agent_size

    def propose_for(self, agent, population):
        pending = None
        for other in population.values():
            if other.id == agent.id:
                continue
            d = distance(agent, other)
            if d < self.distance + self.agent_size:
                away = np.arctan2(agent.pos[1] - other.pos[1], agent.pos[0] - other.pos[0]) + np.pi
                pending = blend_away(agent.heading, away, turn_gain(self.sensitivity, d))
        return pending

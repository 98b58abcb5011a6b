from .base import Rule
from .blend import blend_toward
from ..core.metrics import distance


class AlignmentRule(Rule):
    """Steer toward the arithmetic mean heading of nearby agents."""

    name = "alignment"

    def __init__(self, distance: float = 70.0, sensitivity: float = 0.0, agent_size: float = 15.0):
        self.distance = distance
        self.sensitivity = sensitivity
        self.agent_size = agent_size

    def propose_for(self, agent, population):
        total = 0.0
        count = 0
        for other in population.values():
            if other.id == agent.id:
                continue
            if distance(agent, other) - self.agent_size < self.distance:
                total += other.heading
                count += 1
        if count == 0:
            return None
        # runs even at zero sensitivity, the commit is then a no-op
        return blend_toward(agent.heading, total / count, self.sensitivity)

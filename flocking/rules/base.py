from abc import ABC, abstractmethod
from typing import Mapping, Optional

from ..core.state import BoidState, FlockState


class Rule(ABC):
    """
    A steering rule run as two passes: a read pass that computes a pending
    heading per agent against the pre-rule state, then a commit pass.
    """

    name = "rule"

    @abstractmethod
    def propose_for(self, agent: BoidState, population: Mapping[int, BoidState]) -> Optional[float]:
        """Return the pending heading for `agent`, or None to leave it alone."""
        ...

    def propose(self, state: FlockState) -> dict[int, float]:
        population = state.population
        updates = {}
        for aid, agent in population.items():
            heading = self.propose_for(agent, population)
            if heading is not None:
                updates[aid] = heading
        return updates

    def apply(self, state: FlockState) -> dict[int, float]:
        updates = self.propose(state)
        state.commit_headings(updates)
        return updates

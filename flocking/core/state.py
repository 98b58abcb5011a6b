from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple

import numpy as np


@dataclass
class BoidState:
    id: int
    pos: np.ndarray      # shape (2,)
    vel: np.ndarray      # shape (2,), derived from heading every tick
    heading: float       # radians, not normalized


class BoidView(NamedTuple):
    """Read-only record handed to the presentation layer."""
    id: int
    pos: tuple[float, float]
    heading: float


@dataclass
class FlockState:
    agents: dict[int, BoidState] = field(default_factory=dict)
    tick: int = 0

    def __len__(self) -> int:
        return len(self.agents)

    @property
    def population(self) -> Mapping[int, BoidState]:
        """
        Read view of the whole store, in insertion (id) order.
        Rules read through this and never write while iterating it.
        """
        return MappingProxyType(self.agents)

    def commit_headings(self, updates: Mapping[int, float]) -> int:
        """
        Write pass: apply pending headings keyed by agent id.
        Returns the number of agents updated.
        """
        for aid, heading in updates.items():
            self.agents[aid].heading = heading
        return len(updates)

    def snapshot(self) -> tuple[BoidView, ...]:
        return tuple(
            BoidView(id=st.id, pos=(float(st.pos[0]), float(st.pos[1])), heading=float(st.heading))
            for st in self.agents.values()
        )

    def copy(self) -> "FlockState":
        return FlockState(
            agents={
                i: BoidState(id=st.id, pos=st.pos.copy(), vel=st.vel.copy(), heading=st.heading)
                for i, st in self.agents.items()
            },
            tick=self.tick,
        )

import numpy as np

from .state import BoidView, FlockState
from .world import World, spawn_flock
from .integrators import update_positions, update_velocities
from ..rules.alignment import AlignmentRule
from ..rules.boundary import BoundaryRule
from ..rules.cohesion import CohesionRule
from ..rules.separation import SeparationRule
from ..config import validate_config


class Simulator:
    """
    Runs the flocking pipeline one tick at a time. Rules run in list order,
    each one seeing the headings committed by the rules before it.
    """

    def __init__(self, state: FlockState, rules, speed: float, world: World | None = None):
        self.state = state
        self.rules = list(rules)
        self.speed = speed
        self.world = world

    def step(self) -> tuple[BoidView, ...]:
        for rule in self.rules:
            rule.apply(self.state)
        update_velocities(self.state, self.speed)
        update_positions(self.state)
        self.state.tick += 1
        return self.state.snapshot()

    def run(self, steps: int, on_tick=None):
        snapshot = self.state.snapshot()
        for _ in range(steps):
            snapshot = self.step()
            if on_tick is not None:
                on_tick(self.state.tick, snapshot)
        return snapshot


def build_rules(cfg, world: World):
    size = cfg["agents"]["size"]
    sep = cfg["separation"]
    return [
        SeparationRule(distance=sep["distance"], sensitivity=sep["sensitivity"], agent_size=size),
        AlignmentRule(
            distance=cfg["alignment"]["distance"],
            sensitivity=cfg["alignment"]["sensitivity"],
            agent_size=size,
        ),
        CohesionRule(
            distance=cfg["cohesion"]["distance"],
            sensitivity=cfg["cohesion"]["sensitivity"],
            agent_size=size,
        ),
        BoundaryRule(world, distance=sep["distance"], sensitivity=sep["sensitivity"]),
    ]


def build_simulator(cfg, rng=None) -> Simulator:
    validate_config(cfg)
    world = World(cfg["world"]["width"], cfg["world"]["height"])
    rng = rng or np.random.default_rng(cfg.get("seed"))
    state = spawn_flock(cfg["agents"]["count"], world, rng)
    return Simulator(state, build_rules(cfg, world), speed=cfg["agents"]["speed"], world=world)

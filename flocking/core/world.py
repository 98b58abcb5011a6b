import numpy as np

from .state import BoidState, FlockState


class World:
    """
    Fixed-size rectangle centered at the origin.
    """

    def __init__(self, width: float, height: float):
        self.width = float(width)
        self.height = float(height)

    @property
    def bounds(self):
        # [xmin, xmax, ymin, ymax]
        return [-self.width / 2.0, self.width / 2.0, -self.height / 2.0, self.height / 2.0]

    def edge_distances(self, pos) -> dict[str, float]:
        """
        Signed distance from pos to each edge; negative once outside.
        """
        x, y = pos[0], pos[1]
        return {
            "bottom": y + self.height / 2.0,
            "top": self.height / 2.0 - y,
            "left": x + self.width / 2.0,
            "right": self.width / 2.0 - x,
        }

    def contains(self, pos) -> bool:
        xmin, xmax, ymin, ymax = self.bounds
        return bool(xmin <= pos[0] <= xmax and ymin <= pos[1] <= ymax)

    def sample_position(self, rng) -> np.ndarray:
        return np.array(
            [
                rng.uniform(0.0, self.width) - self.width / 2.0,
                rng.uniform(0.0, self.height) - self.height / 2.0,
            ],
            dtype=float,
        )


def spawn_flock(count: int, world: World, rng=None) -> FlockState:
    """
    Create `count` agents with dense ids 0..count-1, uniform position inside
    the world, uniform heading in [0, 2pi) and zero velocity.
    """
    rng = rng or np.random.default_rng()
    agents = {}
    for i in range(count):
        pos = world.sample_position(rng)
        heading = float(rng.uniform(0.0, 2.0 * np.pi))
        agents[i] = BoidState(id=i, pos=pos, vel=np.zeros(2, dtype=float), heading=heading)
    return FlockState(agents=agents, tick=0)

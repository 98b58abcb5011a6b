import numpy as np

from .state import FlockState


def update_velocities(state: FlockState, speed: float):
    """Overwrite every velocity from heading and the fixed speed."""
    for st in state.agents.values():
        st.vel = np.array([np.cos(st.heading) * speed, np.sin(st.heading) * speed], dtype=float)


def update_positions(state: FlockState):
    """Explicit Euler step, no clamping to the world."""
    for st in state.agents.values():
        st.pos = st.pos + st.vel

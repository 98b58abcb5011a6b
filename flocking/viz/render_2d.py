import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
import numpy as np


class FlockRenderer2D:
    def __init__(self, world, agent_size: float = 15.0, separation_distance: float | None = None):
        self.world = world
        self.agent_size = agent_size
        self.separation_distance = separation_distance
        self.fig, self.ax = plt.subplots(figsize=(9.6, 5.4))
        backend = plt.get_backend().lower()
        self._interactive = backend not in {"agg", "pdf", "svg"}
        if self._interactive:
            plt.ion()
        self.quiver = None
        xmin, xmax, ymin, ymax = world.bounds
        margin = separation_distance or 0.0
        self.ax.set_xlim(xmin - 2 * margin, xmax + margin)
        self.ax.set_ylim(ymin - margin, ymax + 2 * margin)
        self.ax.set_aspect("equal")
        self.ax.set_facecolor("dimgray")
        self._draw_static()

    def _draw_static(self):
        xmin, xmax, ymin, ymax = self.world.bounds
        bounds = mpatches.Rectangle(
            (xmin, ymin), xmax - xmin, ymax - ymin, facecolor="gray", edgecolor="white", lw=1.0, zorder=0
        )
        self.ax.add_patch(bounds)
        if self.separation_distance:
            # reference disc just outside the top-left corner
            marker = mpatches.Circle(
                (xmin - self.separation_distance, ymax + self.separation_distance),
                self.separation_distance,
                color="purple",
                alpha=0.8,
                zorder=1,
            )
            self.ax.add_patch(marker)

    def render(self, tick: int, snapshot):
        """Draw one committed tick; snapshot is a sequence of BoidView."""
        if not snapshot:
            return
        positions = np.array([b.pos for b in snapshot], dtype=float)
        headings = np.array([b.heading for b in snapshot], dtype=float)
        u = np.cos(headings) * self.agent_size
        v = np.sin(headings) * self.agent_size
        if self.quiver is None:
            self.quiver = self.ax.quiver(
                positions[:, 0],
                positions[:, 1],
                u,
                v,
                color="turquoise",
                angles="xy",
                scale_units="xy",
                scale=1.0,
                width=0.004,
                zorder=4,
            )
        else:
            self.quiver.set_offsets(positions)
            self.quiver.set_UVC(u, v)
        self.ax.set_title(f"tick={tick}")
        if self._interactive:
            plt.pause(0.001)

    def close(self):
        plt.close(self.fig)

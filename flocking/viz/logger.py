import json
from pathlib import Path
from ..core.state import FlockState


class FlockLogger:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.records = []

    def log_state(self, state: FlockState, metrics=None):
        snapshot = {
            "tick": state.tick,
            "agents": {
                aid: {
                    "pos": st.pos.tolist(),
                    "vel": st.vel.tolist(),
                    "heading": float(st.heading),
                }
                for aid, st in state.agents.items()
            },
        }
        if metrics is not None:
            snapshot["metrics"] = metrics
        self.records.append(snapshot)

    def flush(self):
        with self.path.open("w") as f:
            json.dump(self.records, f, indent=2)

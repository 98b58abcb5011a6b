import json
import sys
import numpy as np
import matplotlib.pyplot as plt


def load_log(path):
    with open(path, "r") as f:
        return json.load(f)


def main(log_path="logs/sim.json"):
    data = load_log(log_path)
    ticks = [entry["tick"] for entry in data]
    order = []
    spread = []
    for entry in data:
        if not entry["agents"]:
            order.append(0.0)
            spread.append(0.0)
            continue
        headings = np.array([a["heading"] for a in entry["agents"].values()])
        order.append(float(np.hypot(np.cos(headings).mean(), np.sin(headings).mean())))
        positions = np.array([a["pos"] for a in entry["agents"].values()])
        mins = positions.min(axis=0)
        maxs = positions.max(axis=0)
        spread.append(float(np.prod(maxs - mins)))

    fig, (ax_order, ax_spread) = plt.subplots(2, 1, sharex=True)
    ax_order.plot(ticks, order)
    ax_order.set_ylabel("polarization")
    ax_spread.plot(ticks, spread)
    ax_spread.set_ylabel("coverage (bbox area)")
    ax_spread.set_xlabel("tick")
    ax_order.set_title("Flock order over time")
    plt.show()


if __name__ == "__main__":
    log = sys.argv[1] if len(sys.argv) > 1 else "logs/sim.json"
    main(log)

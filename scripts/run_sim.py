import argparse
import pathlib
import sys
import time

# Ensure repository root is on PYTHONPATH when running without installation.
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from flocking.config import load_config
from flocking.core.simulator import build_simulator
from flocking.core.metrics import (
    collision_count,
    coverage_extent,
    mean_pairwise_distance,
    out_of_bounds_count,
    polarization,
)
from flocking.viz.render_2d import FlockRenderer2D
from flocking.viz.logger import FlockLogger


def apply_overrides(cfg: dict, args) -> dict:
    for key in ("steps", "seed", "render_every", "delay_ms", "report_every"):
        value = getattr(args, key)
        if value is not None:
            cfg[key] = value
    if args.count is not None:
        cfg["agents"]["count"] = args.count
    for rule in ("separation", "alignment", "cohesion"):
        value = getattr(args, f"{rule}_sensitivity")
        if value is not None:
            cfg[rule]["sensitivity"] = value
    return cfg


def run_loop(sim, cfg: dict, renderer=None, logger=None, clock=time.perf_counter, sleep=time.sleep):
    """
    Drive the simulation for cfg["steps"] ticks. The reported tick rate
    counts compute time only; the pacing delay is excluded.
    """
    delay = cfg["delay_ms"] / 1000.0
    report_every = cfg["report_every"]
    busy = 0.0
    for _ in range(cfg["steps"]):
        start = clock()
        snapshot = sim.step()
        tick = sim.state.tick
        if renderer and tick % cfg["render_every"] == 0:
            renderer.render(tick, snapshot)
        if logger:
            logger.log_state(
                sim.state,
                metrics={"polarization": polarization(sim.state), "coverage": coverage_extent(sim.state)},
            )
        busy += clock() - start
        if report_every and tick % report_every == 0:
            rate = report_every / busy if busy > 0 else float("inf")
            print(
                f"tick {tick}: {rate:.1f} ticks/s, "
                f"polarization {polarization(sim.state):.3f}, "
                f"mean spacing {mean_pairwise_distance(sim.state):.1f}, "
                f"close pairs {collision_count(sim.state, cfg['agents']['size'])}, "
                f"outside {out_of_bounds_count(sim.state, sim.world)}"
            )
            busy = 0.0
        if delay > 0:
            sleep(delay)


def main():
    parser = argparse.ArgumentParser(description="Run boids flocking simulation.")
    parser.add_argument("--config", type=pathlib.Path, help="Path to YAML config.")
    parser.add_argument("--no-render", action="store_true", help="Disable live rendering (headless).")
    parser.add_argument("--log", type=pathlib.Path, help="Optional path to write JSON trajectory.")
    parser.add_argument("--steps", type=int, help="Override total simulation ticks.")
    parser.add_argument("--seed", type=int, help="Seed for initial positions and headings.")
    parser.add_argument("--count", type=int, help="Override population count.")
    parser.add_argument("--render-every", type=int, dest="render_every", help="Render every N ticks.")
    parser.add_argument("--delay-ms", type=int, dest="delay_ms", help="Pause after each tick (ms).")
    parser.add_argument("--report-every", type=int, dest="report_every", help="Print diagnostics every N ticks.")
    parser.add_argument("--separation-sensitivity", type=float, dest="separation_sensitivity")
    parser.add_argument("--alignment-sensitivity", type=float, dest="alignment_sensitivity")
    parser.add_argument("--cohesion-sensitivity", type=float, dest="cohesion_sensitivity")
    args = parser.parse_args()

    cfg = apply_overrides(load_config(args.config), args)
    sim = build_simulator(cfg)
    renderer = None
    if not args.no_render:
        renderer = FlockRenderer2D(
            sim.world,
            agent_size=cfg["agents"]["size"],
            separation_distance=cfg["separation"]["distance"],
        )
        renderer.render(sim.state.tick, sim.state.snapshot())
    logger = FlockLogger(args.log) if args.log else None

    print(f"Flock of {len(sim.state)} boids in {sim.world.width:g} x {sim.world.height:g} world")
    run_loop(sim, cfg, renderer=renderer, logger=logger)

    if logger:
        logger.flush()
        print(f"Trajectory written to {args.log}")
    if renderer:
        renderer.close()


if __name__ == "__main__":
    main()

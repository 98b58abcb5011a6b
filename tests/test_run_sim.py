from flocking.config import DEFAULT_CONFIG, deep_update
from flocking.core.simulator import build_simulator
from run_sim import run_loop


class FakeClock:
    def __init__(self, step=0.005):
        self.now = 0.0
        self.step = step
        self.slept = 0.0

    def __call__(self):
        self.now += self.step
        return self.now

    def sleep(self, seconds):
        self.now += seconds
        self.slept += seconds


def test_tick_rate_excludes_pacing_delay(capsys):
    cfg = deep_update(
        DEFAULT_CONFIG,
        {"seed": 4, "steps": 4, "report_every": 2, "delay_ms": 500, "agents": {"count": 3}},
    )
    sim = build_simulator(cfg)
    clock = FakeClock()
    run_loop(sim, cfg, clock=clock, sleep=clock.sleep)

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    # two ticks of 5 ms compute each, the 500 ms sleeps are not counted
    assert lines[0].startswith("tick 2: 200.0 ticks/s")
    assert lines[1].startswith("tick 4: 200.0 ticks/s")
    assert clock.slept == 2.0
    assert sim.state.tick == 4


def test_no_reports_when_disabled(capsys):
    cfg = deep_update(DEFAULT_CONFIG, {"seed": 4, "steps": 3, "report_every": 0, "delay_ms": 0})
    sim = build_simulator(cfg)
    run_loop(sim, cfg)
    assert capsys.readouterr().out == ""
    assert sim.state.tick == 3

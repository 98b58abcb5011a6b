import copy
import pathlib

import yaml


DEFAULT_CONFIG = {
    "seed": None,
    "steps": 5000,
    "render_every": 1,
    "delay_ms": 20,
    "report_every": 100,
    "world": {"width": 960.0, "height": 540.0},
    "agents": {"count": 30, "size": 15.0, "speed": 3.0},
    "separation": {"distance": 50.0, "sensitivity": 0.1},
    "alignment": {"distance": 70.0, "sensitivity": 0.0},
    "cohesion": {"distance": 100.0, "sensitivity": 0.0},
}


class ConfigError(ValueError):
    pass


def deep_update(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: pathlib.Path | None) -> dict:
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    path = pathlib.Path(path)
    cfg = yaml.safe_load(path.read_text())
    if cfg is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    if "inherits" in cfg:
        base_path = path.parent / cfg["inherits"]
        base_cfg = copy.deepcopy(load_config(base_path))
        cfg = {k: v for k, v in cfg.items() if k != "inherits"}
        return deep_update(base_cfg, cfg)
    return deep_update(copy.deepcopy(DEFAULT_CONFIG), cfg)


def validate_config(cfg: dict) -> dict:
    """
    Reject setup-time programmer errors. Returns cfg unchanged.
    """
    count = cfg["agents"]["count"]
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise ConfigError(f"agents.count must be a non-negative integer, got {count!r}")
    render_every = cfg["render_every"]
    if isinstance(render_every, bool) or not isinstance(render_every, int) or render_every < 1:
        raise ConfigError(f"render_every must be a positive integer, got {render_every!r}")
    if cfg["report_every"] < 0:
        raise ConfigError(f"report_every must be non-negative, got {cfg['report_every']!r}")
    for key in ("width", "height"):
        if cfg["world"][key] <= 0:
            raise ConfigError(f"world.{key} must be positive, got {cfg['world'][key]!r}")
    for key in ("size", "speed"):
        if cfg["agents"][key] < 0:
            raise ConfigError(f"agents.{key} must be non-negative, got {cfg['agents'][key]!r}")
    for rule in ("separation", "alignment", "cohesion"):
        if cfg[rule]["distance"] < 0:
            raise ConfigError(f"{rule}.distance must be non-negative, got {cfg[rule]['distance']!r}")
    return cfg

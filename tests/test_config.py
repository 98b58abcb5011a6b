import pytest

from flocking.config import DEFAULT_CONFIG, ConfigError, deep_update, load_config, validate_config
from flocking.core.simulator import build_simulator


def test_defaults_match_reference_constants():
    cfg = load_config(None)
    assert cfg["world"] == {"width": 960.0, "height": 540.0}
    assert cfg["agents"] == {"count": 30, "size": 15.0, "speed": 3.0}
    assert cfg["separation"] == {"distance": 50.0, "sensitivity": 0.1}
    assert cfg["alignment"]["sensitivity"] == 0.0
    assert cfg["cohesion"]["sensitivity"] == 0.0
    assert cfg["delay_ms"] == 20


def test_load_config_returns_independent_copy():
    cfg = load_config(None)
    cfg["agents"]["count"] = 3
    assert DEFAULT_CONFIG["agents"]["count"] == 30


def test_deep_update_keeps_sibling_keys():
    out = deep_update({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 5}})
    assert out == {"a": {"x": 1, "y": 5}, "b": 1}


def test_yaml_inherits(tmp_path):
    (tmp_path / "base.yaml").write_text("agents:\n  count: 12\nseparation:\n  sensitivity: 0.2\n")
    (tmp_path / "child.yaml").write_text("inherits: base.yaml\nalignment:\n  sensitivity: 0.05\n")
    cfg = load_config(tmp_path / "child.yaml")
    assert cfg["agents"]["count"] == 12
    assert cfg["agents"]["speed"] == 3.0
    assert cfg["separation"] == {"distance": 50.0, "sensitivity": 0.2}
    assert cfg["alignment"]["sensitivity"] == 0.05
    assert "inherits" not in cfg


def test_empty_yaml_is_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "override",
    [
        {"agents": {"count": -1}},
        {"agents": {"count": 2.5}},
        {"world": {"width": 0.0}},
        {"agents": {"speed": -3.0}},
        {"cohesion": {"distance": -1.0}},
    ],
)
def test_bad_setup_is_rejected(override):
    cfg = deep_update(DEFAULT_CONFIG, override)
    with pytest.raises(ConfigError):
        validate_config(cfg)
    with pytest.raises(ValueError):
        build_simulator(cfg)


def test_partial_yaml_does_not_share_default_sections(tmp_path):
    path = tmp_path / "partial.yaml"
    path.write_text("seed: 1\n")
    cfg = load_config(path)
    cfg["agents"]["count"] = 3
    cfg["separation"]["sensitivity"] = 0.9
    assert DEFAULT_CONFIG["agents"]["count"] == 30
    assert DEFAULT_CONFIG["separation"]["sensitivity"] == 0.1


def test_inherited_yaml_does_not_share_default_sections(tmp_path):
    (tmp_path / "base.yaml").write_text("seed: 2\n")
    (tmp_path / "child.yaml").write_text("inherits: base.yaml\nsteps: 10\n")
    cfg = load_config(tmp_path / "child.yaml")
    cfg["cohesion"]["sensitivity"] = 0.5
    assert DEFAULT_CONFIG["cohesion"]["sensitivity"] == 0.0


@pytest.mark.parametrize("render_every", [0, -2, 1.5])
def test_render_cadence_must_be_positive_integer(render_every):
    cfg = deep_update(DEFAULT_CONFIG, {"render_every": render_every})
    with pytest.raises(ConfigError):
        validate_config(cfg)

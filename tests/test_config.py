# MIT License (see LICENSE)
import json

import pytest
from particle_box.config import SimulationConfig
from particle_box.errors import ConfigError
from particle_box.io.json_io import config_from_json, config_to_json, load_config, save_config


def test_defaults():
    c = SimulationConfig()
    assert c.k_electrostatic == 0.1
    assert c.k_gravity == 0.1
    assert c.k_drag == 0.1
    assert c.overlap_eps == 1e-4
    assert c.time_scale == 1.0
    assert c.enable_electrostatics and c.enable_gravity and c.enable_drag


@pytest.mark.parametrize(
    "changes",
    [
        {"k_electrostatic": 0.0},
        {"k_electrostatic": -1.0},
        {"k_gravity": 0.0},
        {"k_drag": -0.1},
        {"overlap_eps": 0.0},
        {"time_scale": -1.0},
        {"k_gravity": float("nan")},
        {"k_drag": float("inf")},
        {"k_electrostatic": "1.0"},
        {"k_gravity": True},
        {"enable_drag": 1},
    ],
)
def test_invalid_values(changes):
    with pytest.raises(ConfigError):
        SimulationConfig(**changes)


def test_zero_drag_and_time_scale_allowed():
    c = SimulationConfig(k_drag=0.0, time_scale=0)
    assert c.k_drag == 0.0
    assert c.time_scale == 0


def test_replace_returns_validated_copy():
    c = SimulationConfig()
    c2 = c.replace(k_electrostatic=1.5)
    assert c2.k_electrostatic == 1.5
    assert c.k_electrostatic == 0.1

    with pytest.raises(ConfigError):
        c.replace(k_gravity=-2.0)
    with pytest.raises(ConfigError):
        c.replace(no_such_field=1.0)


def test_config_is_frozen():
    c = SimulationConfig()
    with pytest.raises(AttributeError):
        c.k_gravity = 5.0


def test_to_json_skips_defaults():
    assert config_to_json(SimulationConfig()) == {}
    assert config_to_json(SimulationConfig(k_gravity=8.0, enable_drag=False)) == {
        "k_gravity": 8.0,
        "enable_drag": False,
    }


def test_from_json_partial():
    c = config_from_json({"k_electrostatic": 1, "enable_gravity": False})
    assert c.k_electrostatic == 1
    assert not c.enable_gravity
    assert c.k_drag == 0.1


def test_from_json_rejects_unknown_keys():
    with pytest.raises(ConfigError, match="k_grav"):
        config_from_json({"k_grav": 1.0})


def test_from_json_rejects_non_object():
    with pytest.raises(ConfigError):
        config_from_json([1, 2, 3])


def test_save_load_roundtrip(tmp_path):
    path = tmp_path / "settings.json"
    c = SimulationConfig(k_electrostatic=1.2, k_gravity=3.0, k_drag=0.0, time_scale=0.5)

    save_config(c, str(path))
    assert json.loads(path.read_text()) == config_to_json(c)

    assert load_config(str(path)) == c


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_load_invalid_value(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"overlap_eps": -1}))
    with pytest.raises(ConfigError, match="overlap_eps"):
        load_config(str(path))


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))

import json

import pytest

from pickroute.spec.config_loader import load_config
from pickroute.spec.engine_config import EngineConfig


def test_default_config_is_valid_and_summarizes():
    cfg = EngineConfig.default()
    cfg.validate()
    s = cfg.summary()
    assert "=== CONFIGURACIÓN DEL MOTOR ===" in s
    assert "Layout por defecto: 7x7" in s
    assert "sin límite" in s


def test_from_dict_roundtrip_and_unknown_keys():
    cfg = EngineConfig.from_dict({"time_per_stop": 5.0, "workers": 2})
    assert cfg.time_per_stop == 5.0 and cfg.workers == 2
    assert EngineConfig.from_dict(cfg.to_dict()) == cfg
    with pytest.raises(ValueError):
        EngineConfig.from_dict({"time_per_pick": 3})


@pytest.mark.parametrize("kwargs", [
    {"workers": 0},
    {"cell_size_m": 0},
    {"default_width": 2},
    {"matrix_timeout_s": -1.0},
    {"log_level": "verbose"},
])
def test_validate_rejects_bad_values(kwargs):
    with pytest.raises(AssertionError):
        EngineConfig(**kwargs).validate()


def test_load_config_json_and_yaml(tmp_path):
    pj = tmp_path / "engine.json"
    pj.write_text(json.dumps({"unit_time_per_step": 1.0}), encoding="utf-8")
    assert load_config(pj) == {"unit_time_per_step": 1.0}

    py = tmp_path / "engine.yaml"
    py.write_text("workers: 3\nlog_level: DEBUG\n", encoding="utf-8")
    cfg = EngineConfig.from_dict(load_config(py))
    assert cfg.workers == 3 and cfg.log_level == "DEBUG"

    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert load_config(empty) == {}


def test_load_config_rejects_other_formats(tmp_path):
    p = tmp_path / "engine.toml"
    p.write_text("workers = 2", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)

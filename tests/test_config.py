import json

import pytest

from seqdiff.config import Settings, load_settings


def test_defaults():
    s = Settings()
    assert s.calculus.order == 1
    assert s.extrema.epsilon == pytest.approx(0.1)
    assert s.logging.level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("SEQDIFF_EXTREMA__EPSILON", "0.25")
    monkeypatch.setenv("SEQDIFF_CALCULUS__ORDER", "2")
    s = Settings()
    assert s.extrema.epsilon == pytest.approx(0.25)
    assert s.calculus.order == 2


def test_load_settings_json(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"extrema": {"epsilon": 0.5}, "calculus": {"order": 3}}))
    s = load_settings(p)
    assert s.extrema.epsilon == 0.5
    assert s.calculus.order == 3


def test_load_settings_yaml(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("extrema:\n  epsilon: 1.5\nlogging:\n  level: DEBUG\n")
    s = load_settings(p)
    assert s.extrema.epsilon == 1.5
    assert s.logging.level == "DEBUG"


def test_load_settings_requires_mapping(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text("[1, 2]")
    with pytest.raises(TypeError):
        load_settings(p)


def test_unknown_keys_are_ignored(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"extrema": {"epsilon": 0.2, "colour": "red"}, "extra": 1}))
    s = load_settings(p)
    assert s.extrema.epsilon == 0.2

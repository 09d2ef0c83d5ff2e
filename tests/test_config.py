from pathlib import Path

import pytest

from fuzler.config import FuzlerConfig, config_from_dict, config_from_yaml, load_config


def test_defaults_match_documented_thresholds():
    cfg = load_config()
    assert cfg == FuzlerConfig()
    assert cfg.hamming_window == 2
    assert cfg.short_string_band == 64
    assert (cfg.chunk_min, cfg.chunk_max) == (50, 100)
    assert cfg.window_pad_ratio == 0.30
    assert cfg.round_precision == 2
    assert cfg.case_sensitive is True


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict({"chunk_min": 10, "unknown": "value"})
    assert cfg.chunk_min == 10
    assert "unknown" not in cfg.to_dict()
    assert config_from_dict(None) == FuzlerConfig()


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "fuzler.yaml"
    path.write_text("hamming_window: 0\ncase_sensitive: false\n", encoding="utf-8")
    cfg = config_from_yaml(path)
    assert cfg.hamming_window == 0
    assert cfg.case_sensitive is False


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"hamming_window": "two"},
        {"case_sensitive": "yes"},
        {"round_precision": True},
        {"window_pad_ratio": "0.3"},
    ],
)
def test_config_rejects_wrongly_typed_values(overrides):
    with pytest.raises(TypeError):
        config_from_dict(overrides)


def test_config_rejects_negative_thresholds():
    with pytest.raises(ValueError):
        config_from_dict({"chunk_min": -1})


def test_config_coerces_integer_ratios_to_float():
    cfg = config_from_dict({"window_pad_ratio": 1, "token_weight": 1})
    assert cfg.window_pad_ratio == 1.0
    assert isinstance(cfg.token_weight, float)


def test_config_from_yaml_names_file_in_type_errors(tmp_path: Path):
    path = tmp_path / "typo.yaml"
    path.write_text("hamming_window: two\n", encoding="utf-8")
    with pytest.raises(TypeError, match="typo.yaml"):
        config_from_yaml(path)

"""Tests for TOML configuration loading."""

import pytest

from shared.config import KitConfig, get_config


def test_defaults():
    config = KitConfig()
    assert config.caesar.default_shift == 3
    assert config.caesar.top_candidates == 26
    assert config.global_settings.log_level == "INFO"
    assert config.global_settings.log_file is None


def test_load_overrides_and_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "colour = true\n"
        "[caesar]\n"
        "default_shift = 13\n"
        "top_candidates = 5\n"
        "[vigenere]\n"
        'key = "lemon"\n',
        encoding="utf-8",
    )
    config = KitConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.caesar.default_shift == 13
    assert config.caesar.top_candidates == 5
    assert config.caesar.show_scores is True


def test_explicit_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        KitConfig.load(tmp_path / "nope.toml")


def test_to_dict():
    data = KitConfig().to_dict()
    assert data["caesar"]["default_shift"] == 3
    assert "global_settings" in data


def test_get_config_caches(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[caesar]\ndefault_shift = 7\n", encoding="utf-8")
    first = get_config(path)
    assert first.caesar.default_shift == 7
    assert get_config() is first

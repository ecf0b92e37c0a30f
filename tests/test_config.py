"""Tests for configuration loading."""

import pytest

from farmyard.config import DEFAULT_CONFIG_TOML, Config, _deep_merge, find_project_root


def test_defaults_without_file(tmp_path):
    config = Config.load(tmp_path)
    assert config.sex_notation == "en"
    assert config.default_species == "dog"
    assert config.log_level == "WARNING"
    assert config.config_dir == tmp_path / ".farmyard"


def test_user_values_override_defaults(tmp_path):
    (tmp_path / ".farmyard").mkdir()
    (tmp_path / ".farmyard" / "config.toml").write_text(
        '[animals]\nsex_notation = "es"\n\n[logging]\nlevel = "debug"\n'
    )
    config = Config.load(tmp_path)
    assert config.sex_notation == "es"
    assert config.default_species == "dog"
    assert config.log_level == "DEBUG"


def test_default_toml_matches_defaults(tmp_path):
    (tmp_path / ".farmyard").mkdir()
    (tmp_path / ".farmyard" / "config.toml").write_text(DEFAULT_CONFIG_TOML)
    config = Config.load(tmp_path)
    assert config.sex_notation == "en"
    assert config.default_species == "dog"


def test_deep_merge_keeps_nested_defaults():
    merged = _deep_merge({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}})
    assert merged == {"a": {"x": 1, "y": 3}}


def test_find_project_root_walks_up(tmp_path):
    (tmp_path / ".farmyard").mkdir()
    nested = tmp_path / "pens" / "north"
    nested.mkdir(parents=True)
    assert find_project_root(nested) == tmp_path.resolve()



def test_unknown_sex_notation_rejected(tmp_path):
    (tmp_path / ".farmyard").mkdir()
    (tmp_path / ".farmyard" / "config.toml").write_text('[animals]\nsex_notation = "fr"\n')
    with pytest.raises(ValueError, match="animals.sex_notation must be one of"):
        Config.load(tmp_path)


def test_unknown_log_level_rejected(tmp_path):
    (tmp_path / ".farmyard").mkdir()
    (tmp_path / ".farmyard" / "config.toml").write_text('[logging]\nlevel = "chatty"\n')
    with pytest.raises(ValueError, match="logging.level must be one of"):
        Config.load(tmp_path)


def test_log_level_number(tmp_path):
    assert Config.load(tmp_path).log_level_number == 30


def test_write_default_creates_once(tmp_path):
    path, created = Config.write_default(tmp_path)
    assert created
    assert path == tmp_path / ".farmyard" / "config.toml"
    assert path.read_text() == DEFAULT_CONFIG_TOML

    path.write_text('[animals]\nsex_notation = "es"\n')
    again, created_again = Config.write_default(tmp_path)
    assert again == path
    assert not created_again
    assert Config.load(tmp_path).sex_notation == "es"

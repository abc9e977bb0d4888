# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Matthias Bilger matthias@bilger.info
from __future__ import annotations

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pydantic
import pytest
import yaml
from assets_fairing.config import CONFIG_FILENAME
from assets_fairing.config import find_config_file
from assets_fairing.config import load_config
from assets_fairing.errors import ConfigError
from assets_fairing.models.config import AssetConfig
from assets_fairing.models.config import DEFAULT_MAX_AGE


def write_config(path: Path, data) -> Path:
    path.write_text(yaml.dump(data))
    return path


def test_find_config_file_default_location():
    with patch("pathlib.Path.exists", return_value=True):
        assert find_config_file() == Path(CONFIG_FILENAME)


def test_find_config_file_not_found():
    with patch("pathlib.Path.exists", return_value=False):
        assert find_config_file() == Path(CONFIG_FILENAME)


def test_load_config_from_file(tmp_path, asset_dir):
    file_path = write_config(
        tmp_path / CONFIG_FILENAME,
        {"assets_dir": "fixtures", "assets_max_age": 86400},
    )
    config = load_config(file_path, environ={})
    assert config.root_dir == asset_dir.resolve()
    assert config.max_age_seconds == 86400
    assert config.cache_control == "max-age=86400"


def test_relative_dir_is_anchored_at_config_file(tmp_path, asset_dir):
    conf_dir = tmp_path / "conf"
    conf_dir.mkdir()
    file_path = write_config(conf_dir / CONFIG_FILENAME, {"assets_dir": "../fixtures"})
    config = load_config(file_path, environ={})
    assert config.root_dir == asset_dir.resolve()


def test_default_max_age(tmp_path, asset_dir):
    file_path = write_config(tmp_path / CONFIG_FILENAME, {"assets_dir": str(asset_dir)})
    config = load_config(file_path, environ={})
    assert config.max_age_seconds == DEFAULT_MAX_AGE == 86400


def test_environment_only(tmp_path, asset_dir):
    config = load_config(
        tmp_path / "missing.yaml",
        environ={"ASSETS_DIR": str(asset_dir), "ASSETS_MAX_AGE": "60"},
    )
    assert config.root_dir == asset_dir.resolve()
    assert config.max_age_seconds == 60


def test_environment_overrides_file(tmp_path, asset_dir):
    other = tmp_path / "other"
    other.mkdir()
    file_path = write_config(
        tmp_path / CONFIG_FILENAME,
        {"assets_dir": "fixtures", "assets_max_age": 10},
    )
    config = load_config(
        file_path,
        environ={"ASSETS_DIR": str(other), "ASSETS_MAX_AGE": "0"},
    )
    assert config.root_dir == other.resolve()
    assert config.max_age_seconds == 0


def test_empty_environment_values_are_ignored(tmp_path, asset_dir):
    file_path = write_config(
        tmp_path / CONFIG_FILENAME,
        {"assets_dir": "fixtures", "assets_max_age": 5},
    )
    config = load_config(file_path, environ={"ASSETS_DIR": "", "ASSETS_MAX_AGE": ""})
    assert config.root_dir == asset_dir.resolve()
    assert config.max_age_seconds == 5


def test_missing_assets_dir(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.yaml", environ={})
    assert "assets_dir" in caplog.text


def test_empty_config_file_without_environment(tmp_path):
    file_path = tmp_path / CONFIG_FILENAME
    file_path.write_text("")
    with pytest.raises(ConfigError):
        load_config(file_path, environ={})


def test_nonexistent_assets_dir(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml", environ={"ASSETS_DIR": str(tmp_path / "nope")})


def test_assets_dir_is_a_file(tmp_path, asset_dir):
    with pytest.raises(ConfigError):
        load_config(
            tmp_path / "missing.yaml",
            environ={"ASSETS_DIR": str(asset_dir / "style.css")},
        )


def test_unreadable_assets_dir(tmp_path, asset_dir):
    with patch("assets_fairing.config.os.access", return_value=False):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.yaml", environ={"ASSETS_DIR": str(asset_dir)})


@pytest.mark.parametrize("max_age", ["-1", "abc", "1.5"])
def test_invalid_max_age_from_environment(tmp_path, asset_dir, max_age):
    environ = {"ASSETS_DIR": str(asset_dir), "ASSETS_MAX_AGE": max_age}
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml", environ=environ)


@pytest.mark.parametrize("max_age", [-5, "soon", True, 2.5, [1]])
def test_invalid_max_age_from_file(tmp_path, asset_dir, max_age):
    file_path = write_config(
        tmp_path / CONFIG_FILENAME,
        {"assets_dir": "fixtures", "assets_max_age": max_age},
    )
    with pytest.raises(ConfigError):
        load_config(file_path, environ={})


def test_invalid_yaml(tmp_path):
    file_path = tmp_path / CONFIG_FILENAME
    file_path.write_text("assets_dir: [unclosed")
    with pytest.raises(ConfigError):
        load_config(file_path, environ={})


def test_yaml_not_a_mapping(tmp_path):
    file_path = write_config(tmp_path / CONFIG_FILENAME, ["fixtures"])
    with pytest.raises(ConfigError):
        load_config(file_path, environ={})


def test_load_config_uses_process_environment(tmp_path, asset_dir):
    with patch.dict(os.environ, {"ASSETS_DIR": str(asset_dir), "ASSETS_MAX_AGE": "7"}):
        config = load_config(tmp_path / "missing.yaml")
    assert config.max_age_seconds == 7


def test_asset_config_is_frozen(asset_config):
    with pytest.raises(pydantic.ValidationError):
        asset_config.max_age_seconds = 1

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Matthias Bilger <matthias@bilger.info>
import logging
import os
from pathlib import Path
from typing import Mapping

import pydantic
import yaml
from assets_fairing.errors import ConfigError
from assets_fairing.models.config import AssetConfig

_logger = logging.getLogger(__name__)

CONFIG_FILENAME = "assets.yaml"

DIR_KEY = "assets_dir"
MAX_AGE_KEY = "assets_max_age"

ENV_OVERLAY = {
    "ASSETS_DIR": DIR_KEY,
    "ASSETS_MAX_AGE": MAX_AGE_KEY,
}


def find_config_file() -> Path:
    """Return assets.yaml from the working directory, else from the XDG config dir."""
    file_path = Path(CONFIG_FILENAME)
    home_config_path = (
        Path.home() / os.environ.get("XDG_CONFIG_HOME", ".config") / CONFIG_FILENAME
    )

    if not file_path.exists() and home_config_path.exists():
        file_path = home_config_path

    return file_path


def read_config_file(file_path: Path) -> dict:
    """Read the raw settings from a YAML file.

    A missing file yields no settings, the environment may still provide them.
    Relative ``assets_dir`` values are anchored at the file's directory.
    """
    try:
        _logger.info("Loading asset config from file: %s", file_path)
        with open(file_path, "r") as file:
            config_data = yaml.safe_load(file)
    except FileNotFoundError:
        _logger.info("No asset config file found at %s", file_path)
        return {}
    except (yaml.YAMLError, IOError) as e:
        _logger.error("Error in asset configuration file: %s", e)
        raise ConfigError(f"Cannot read {file_path}: {e}") from e

    if config_data is None:
        return {}
    if not isinstance(config_data, dict):
        _logger.error("Asset configuration file %s is not a mapping", file_path)
        raise ConfigError(f"{file_path} must contain a mapping")

    settings = {k: config_data[k] for k in (DIR_KEY, MAX_AGE_KEY) if k in config_data}
    if settings.get(DIR_KEY) is not None:
        settings[DIR_KEY] = Path(file_path).parent / str(settings[DIR_KEY])
    return settings


def read_environment(environ: Mapping[str, str]) -> dict:
    settings: dict = {}
    for variable, key in ENV_OVERLAY.items():
        value = environ.get(variable)
        if value is None or value == "":
            continue
        _logger.debug("Using %s from environment", variable)
        settings[key] = value
    if DIR_KEY in settings:
        settings[DIR_KEY] = Path(settings[DIR_KEY])
    return settings


def normalize_root_dir(root_dir: Path) -> Path:
    try:
        path = Path(root_dir).absolute().resolve(strict=True)
    except (OSError, RuntimeError) as e:
        _logger.error("Invalid assets directory '%s': %s", root_dir, e)
        raise ConfigError(f"Invalid assets directory '{root_dir}': {e}") from e

    if not path.is_dir():
        _logger.error("Invalid assets directory '%s': not a directory", root_dir)
        raise ConfigError(f"Invalid assets directory '{root_dir}': not a directory")
    if not os.access(path, os.R_OK | os.X_OK):
        _logger.error("Invalid assets directory '%s': not readable", root_dir)
        raise ConfigError(f"Invalid assets directory '{root_dir}': not readable")
    return path


def load_config(
    file_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AssetConfig:
    """Build the asset configuration from file and environment.

    Raises:
        ConfigError: if ``assets_dir`` is missing or unusable, or if
            ``assets_max_age`` is not a non-negative integer.
    """
    if file_path is None:
        file_path = find_config_file()
    if environ is None:
        environ = os.environ

    settings = read_config_file(file_path)
    settings.update(read_environment(environ))

    if settings.get(DIR_KEY) is None:
        _logger.error("Missing required setting '%s'", DIR_KEY)
        raise ConfigError(f"Missing required setting '{DIR_KEY}'")

    root_dir = normalize_root_dir(settings[DIR_KEY])

    values: dict = {"root_dir": root_dir}
    if settings.get(MAX_AGE_KEY) is not None:
        values["max_age_seconds"] = settings[MAX_AGE_KEY]

    try:
        config = AssetConfig(**values)
    except pydantic.ValidationError as e:
        _logger.error("Asset configuration errors:")
        for error in e.errors():
            _logger.error("%s: %s", error["loc"], error["msg"])
        raise ConfigError(f"Invalid '{MAX_AGE_KEY}': {e}") from e

    _logger.info(
        "Serving assets from %s with max-age %d",
        config.root_dir,
        config.max_age_seconds,
    )
    return config

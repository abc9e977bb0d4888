# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Matthias Bilger matthias@bilger.info
import logging
from pathlib import Path

from aiohttp import web
from assets_fairing.assets import Assets
from assets_fairing.config import load_config
from assets_fairing.models.config import AssetConfig

_logger = logging.getLogger(__name__)

ASSETS_KEY = web.AppKey("assets", Assets)


class AssetsFairing:
    """Attaches an :class:`Assets` collection to an aiohttp application.

    The configuration is loaded when the fairing is attached, so a broken
    configuration raises ``ConfigError`` before the application serves
    anything.
    """

    name = "Static Assets"

    def __init__(
        self,
        config: AssetConfig | None = None,
        config_file: Path | None = None,
    ):
        self._config = config
        self._config_file = config_file

    def attach(self, app: web.Application) -> Assets:
        if ASSETS_KEY in app:
            _logger.warning("%s fairing already attached", self.name)
            return app[ASSETS_KEY]
        config = self._config
        if config is None:
            config = load_config(self._config_file)
        assets = Assets(config)
        app[ASSETS_KEY] = assets
        app.on_startup.append(self._on_startup)
        _logger.debug("%s fairing attached", self.name)
        return assets

    async def _on_startup(self, app: web.Application) -> None:
        assets = app[ASSETS_KEY]
        _logger.info("%s:", self.name)
        _logger.info("    directory: %s", assets.root_dir)
        _logger.info("    cache max age: %d", assets.config.max_age_seconds)


def get_assets(request: web.Request) -> Assets:
    try:
        return request.app[ASSETS_KEY]
    except KeyError:
        _logger.error("No %s fairing attached to the application", AssetsFairing.name)
        raise web.HTTPNotFound()

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Matthias Bilger matthias@bilger.info
"""Serve static assets from a configured directory with a cache policy.

Usage::

    from aiohttp import web
    from assets_fairing.webserver import AssetsFairing, get_assets, Helper

    app = web.Application()
    AssetsFairing().attach(app)

    async def style(request):
        asset = await get_assets(request).open("style.css")
        return Helper.asset_response(asset)

    app.router.add_get("/assets/style.css", style)
"""
from assets_fairing.assets import Asset
from assets_fairing.assets import Assets
from assets_fairing.assets import resolve
from assets_fairing.config import load_config
from assets_fairing.errors import AssetError
from assets_fairing.errors import ConfigError
from assets_fairing.errors import InvalidPath
from assets_fairing.errors import IoError
from assets_fairing.errors import NotFound
from assets_fairing.models.config import AssetConfig
from assets_fairing.version import __version__

__all__ = [
    "Asset",
    "AssetConfig",
    "AssetError",
    "Assets",
    "ConfigError",
    "InvalidPath",
    "IoError",
    "NotFound",
    "__version__",
    "load_config",
    "resolve",
]

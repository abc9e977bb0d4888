# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Matthias Bilger matthias@bilger.info
import logging

from aiohttp import web
from assets_fairing.errors import AssetError
from assets_fairing.errors import IoError
from assets_fairing.webserver.fairing import get_assets
from assets_fairing.webserver.helper import Helper

_logger = logging.getLogger(__name__)


class AssetHandler:
    async def handle_asset(self, request: web.Request) -> web.Response:
        assets = get_assets(request)
        relative_path = request.match_info["path"]
        try:
            asset = await assets.open(relative_path)
        except IoError as e:
            _logger.error("Error serving asset %r: %s", relative_path, e.__cause__)
            raise web.HTTPInternalServerError() from e
        except AssetError as e:
            _logger.debug("Asset %r unavailable: %s", relative_path, e)
            raise web.HTTPNotFound() from e
        return Helper.asset_response(asset)

    def setup_routes(self, app: web.Application, prefix: str = "/assets") -> None:
        app.router.add_route("GET", f"{prefix}/{{path:.*}}", self.handle_asset)

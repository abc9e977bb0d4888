# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Matthias Bilger matthias@bilger.info
import aiohttp.web as web
from assets_fairing.assets import Asset


class Helper:
    @staticmethod
    def asset_response(asset: Asset, status=200):
        response = web.Response(
            body=asset.body,
            content_type=asset.content_type,
            status=status,
        )
        response.headers["Cache-Control"] = asset.cache_control
        return response

import logging

from aiohttp import web
from assets_fairing.models.config import AssetConfig
from assets_fairing.webserver.fairing import ASSETS_KEY
from assets_fairing.webserver.fairing import AssetsFairing
from assets_fairing.webserver.fairing import get_assets
from assets_fairing.webserver.helper import Helper
from assets_fairing.webserver.static import AssetHandler

_logger = logging.getLogger(__name__)

__all__ = [
    "ASSETS_KEY",
    "AssetHandler",
    "AssetsFairing",
    "Helper",
    "WebServer",
    "get_assets",
]


class WebServer:
    def __init__(
        self,
        config: AssetConfig,
        host: str = "127.0.0.1",
        port: int = 8080,
        prefix: str = "/assets",
    ):
        self._host = host
        self._port = port
        self._prefix = prefix
        self.app = web.Application()
        self.fairing = AssetsFairing(config)
        self.assets = self.fairing.attach(self.app)
        self._setup_handlers()
        self._setup_routes()

    def _setup_handlers(self):
        self.asset_handler = AssetHandler()

    def _setup_routes(self):
        self.asset_handler.setup_routes(self.app, self._prefix)

    def run(self):  # pragma: no cover
        _logger.info("WebServer running at http://%s:%s", self._host, self._port)
        web.run_app(self.app, host=self._host, port=self._port, access_log=None)

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

from assets_fairing.config import load_config
from assets_fairing.errors import ConfigError
from assets_fairing.version import __version__
from assets_fairing.webserver import WebServer

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)-25s [%(levelname)-8s]: %(message)s",
)
_logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Static asset server")
    parser.add_argument("--config", type=pathlib.Path, help="Path to the assets.yaml file")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", type=int, default=8080, help="Bind port")
    parser.add_argument("--prefix", type=str, default="/assets", help="URL prefix for assets")
    parser.add_argument("--version", action="version", version=__version__)
    return parser.parse_args(argv)


def main(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config)
    except ConfigError as e:
        _logger.error("Cannot start: %s", e)
        return 1

    server = WebServer(config, host=args.host, port=args.port, prefix=args.prefix)
    server.run()
    return 0


def run():  # pragma: no cover
    sys.exit(main(parse_arguments()))


if __name__ == "__main__":
    run()

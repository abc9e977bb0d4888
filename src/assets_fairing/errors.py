# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Matthias Bilger matthias@bilger.info
"""Errors raised while loading the asset configuration or resolving assets.

Messages only ever carry the relative path a client asked for, never the
location of the asset directory on disk.
"""


class ConfigError(Exception):
    """The asset configuration is missing or invalid. Fatal at startup."""


class AssetError(Exception):
    """Base class for failures while resolving a single asset."""

    status: int = 500

    def __init__(self, relative_path: str, message: str | None = None):
        self.relative_path = relative_path
        super().__init__(message or f"{self.__class__.__name__}: {relative_path!r}")


class NotFound(AssetError):
    status = 404


class InvalidPath(AssetError):
    # reported like a missing file so the tree layout is not revealed
    status = 404


class IoError(AssetError):
    status = 500

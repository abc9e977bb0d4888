# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Matthias Bilger matthias@bilger.info
"""Safe lookup of files below the configured asset directory."""
import asyncio
import errno
import logging
import mimetypes
import re
from pathlib import Path

import pydantic
from assets_fairing.errors import InvalidPath
from assets_fairing.errors import IoError
from assets_fairing.errors import NotFound
from assets_fairing.models.config import AssetConfig

_logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\\/]")
_DRIVE = re.compile(r"^[A-Za-z]:")

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# stat failures reported as a missing asset
_MISSING_ERRNOS = (errno.ENOENT, errno.ENOTDIR, errno.ENAMETOOLONG, errno.ELOOP)


class Asset(pydantic.BaseModel):
    """A file read from the asset directory, ready to be sent."""

    model_config = pydantic.ConfigDict(frozen=True)

    body: bytes = pydantic.Field(description="The full file contents.")
    cache_control: str = pydantic.Field(
        description="Value of the Cache-Control header.",
        examples=["max-age=86400"],
    )
    path: Path = pydantic.Field(description="The resolved file on disk.")
    content_type: str = pydantic.Field(
        description="The guessed media type.",
        default=DEFAULT_CONTENT_TYPE,
    )


def guess_content_type(path: Path) -> str:
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or DEFAULT_CONTENT_TYPE


def normalize_path(relative_path: str) -> list[str]:
    """Split a request path into safe segments.

    Both ``/`` and ``\\`` separate segments. Empty and ``.`` segments are
    dropped. Absolute paths and ``..`` segments raise :class:`InvalidPath`.
    """
    if not relative_path:
        raise InvalidPath(relative_path, "Empty asset path")
    if "\0" in relative_path:
        raise InvalidPath(relative_path, "Asset path contains a NUL byte")
    if relative_path[0] in "/\\" or _DRIVE.match(relative_path):
        raise InvalidPath(relative_path, f"Absolute asset path {relative_path!r}")

    segments = []
    for segment in _SEPARATORS.split(relative_path):
        if segment == "..":
            raise InvalidPath(relative_path, f"Asset path {relative_path!r} escapes root")
        if segment in ("", "."):
            continue
        segments.append(segment)

    if not segments:
        raise InvalidPath(relative_path, f"Asset path {relative_path!r} names no file")
    return segments


def _locate(config: AssetConfig, relative_path: str) -> Path:
    segments = normalize_path(relative_path)
    try:
        root = config.root_dir.resolve()
        candidate = root.joinpath(*segments).resolve()
    except (OSError, RuntimeError) as e:
        # symlink loops and the like
        raise NotFound(relative_path) from e

    if root not in candidate.parents:
        _logger.warning("Rejected asset path %r: outside asset directory", relative_path)
        raise InvalidPath(relative_path, f"Asset path {relative_path!r} escapes root")
    return candidate


def resolve(config: AssetConfig, relative_path: str) -> Asset:
    """Read the asset at ``relative_path`` below ``config.root_dir``.

    Raises:
        InvalidPath: the path is malformed or points outside the root.
        NotFound: there is no regular file at the path.
        IoError: the file exists but could not be read.
    """
    path = _locate(config, relative_path)

    try:
        is_file = path.is_file()
    except OSError as e:
        if e.errno in _MISSING_ERRNOS:
            raise NotFound(relative_path) from e
        _logger.error("Failed to stat asset %r: %s", relative_path, e.strerror)
        raise IoError(relative_path) from e

    if not is_file:
        _logger.debug("Asset %r not found", relative_path)
        raise NotFound(relative_path)

    try:
        body = path.read_bytes()
    except FileNotFoundError as e:
        raise NotFound(relative_path) from e
    except OSError as e:
        _logger.error("Failed to read asset %r: %s", relative_path, e.strerror)
        raise IoError(relative_path) from e

    return Asset(
        body=body,
        cache_control=config.cache_control,
        path=path,
        content_type=guess_content_type(path),
    )


class Assets:
    """The asset collection located in the configured directory."""

    def __init__(self, config: AssetConfig):
        self._config = config

    @property
    def config(self) -> AssetConfig:
        return self._config

    @property
    def root_dir(self) -> Path:
        return self._config.root_dir

    @property
    def cache_control(self) -> str:
        return self._config.cache_control

    def resolve(self, relative_path: str) -> Asset:
        return resolve(self._config, relative_path)

    async def open(self, relative_path: str) -> Asset:
        """Resolve an asset without blocking the event loop."""
        return await asyncio.to_thread(resolve, self._config, relative_path)

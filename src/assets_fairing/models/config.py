# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Matthias Bilger <matthias@bilger.info>
from pathlib import Path

import pydantic
from pydantic import BaseModel
from pydantic import Field

DEFAULT_MAX_AGE = 86400


class AssetConfig(BaseModel):
    """
    Location of the asset directory and the cache policy applied to every asset.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    root_dir: Path = Field(
        description="Absolute, symlink-free path of the asset directory.",
        examples=["/srv/app/assets"],
    )
    max_age_seconds: pydantic.NonNegativeInt = Field(
        default=DEFAULT_MAX_AGE,
        description="Value of the max-age directive sent with every asset.",
        examples=[0, 3600, 86400],
    )

    @pydantic.field_validator("max_age_seconds", mode="before")
    @classmethod
    def reject_bool(cls, value):
        if isinstance(value, bool):
            raise ValueError("max age must be an integer, not a boolean")
        return value

    @property
    def cache_control(self) -> str:
        return f"max-age={self.max_age_seconds}"

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Matthias Bilger matthias@bilger.info
import pytest
from assets_fairing.models.config import AssetConfig


@pytest.fixture
def asset_dir(tmp_path):
    root = tmp_path / "fixtures"
    root.mkdir()
    (root / "style.css").write_text("body{}")
    (root / "js").mkdir()
    (root / "js" / "app.js").write_text("console.log(1);")
    (tmp_path / "secret.txt").write_text("top secret")
    return root


@pytest.fixture
def asset_config(asset_dir):
    return AssetConfig(root_dir=asset_dir.resolve(), max_age_seconds=86400)

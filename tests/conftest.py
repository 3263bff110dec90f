"""Pytest configuration helpers for asset_catalogue tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the source directory is importable without requiring an editable install.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture(autouse=True)
def reset_catalogue_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure each test runs with the default catalogue configuration."""

    from asset_catalogue.config import LOG_LEVEL_ENV_VAR, SEED_DEFAULTS_ENV_VAR, configure

    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv(SEED_DEFAULTS_ENV_VAR, raising=False)
    configure()
    yield
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv(SEED_DEFAULTS_ENV_VAR, raising=False)
    configure()


@pytest.fixture
def store():
    """Return a store holding the three demo assets."""

    from asset_catalogue.store import AssetMetadata, AssetStore, AssetType

    asset_store = AssetStore()
    asset_store.insert(
        AssetMetadata(
            "Texture1",
            "Textures/Texture1.png",
            AssetType.TEXTURE,
            ("background", "game"),
            "Game Assets",
            1,
        )
    )
    asset_store.insert(
        AssetMetadata(
            "Audio1",
            "Audio/Audio1.wav",
            AssetType.AUDIO,
            ("background", "game"),
            "Game Assets",
            1,
        )
    )
    asset_store.insert(
        AssetMetadata(
            "Model1",
            "Models/Model1.obj",
            AssetType.MODEL,
            ("3d", "game"),
            "Game Assets",
            1,
        )
    )
    return asset_store

"""Tests for the catalogue service facade."""

from __future__ import annotations

import logging

import pytest

from asset_catalogue.service import DEFAULT_ASSET_SEEDS, AssetSeed, CatalogueService
from asset_catalogue.store import AssetStore, AssetType, DuplicateAssetError


def test_seed_loads_demo_assets_once() -> None:
    service = CatalogueService()

    created = service.seed()
    assert [record.name for record in created] == ["Texture1", "Audio1", "Model1"]

    # Seeding again skips names that are already stored.
    assert service.seed() == []
    assert len(service.list_assets()) == len(DEFAULT_ASSET_SEEDS)


def test_add_asset_parses_request_values() -> None:
    service = CatalogueService()

    record = service.add_asset(
        "Explosion",
        "Audio/explosion.ogg",
        "1",
        keywords=["sfx", "combat"],
        category="Effects",
        version=3,
    )

    assert record.metadata.type is AssetType.AUDIO
    assert record.metadata.keywords == ("sfx", "combat")
    assert record.metadata.version == 3
    assert service.get_asset("Explosion") is record
    assert service.describe(record) == "Explosion - Audio/explosion.ogg"


def test_add_asset_rejects_duplicates_and_bad_types() -> None:
    service = CatalogueService()
    service.seed()

    with pytest.raises(DuplicateAssetError):
        service.add_asset("Model1", "Models/other.obj", AssetType.MODEL)
    with pytest.raises(ValueError, match="Unknown asset type"):
        service.add_asset("Sprite", "Sprites/s.png", "sprite")
    assert service.get_asset("Sprite") is None


def test_lookups_delegate_to_store() -> None:
    store = AssetStore()
    service = CatalogueService(store)
    service.seed()

    assert service.store is store
    assert [record.name for record in service.assets_by_type("model")] == ["Model1"]
    assert [record.name for record in service.assets_by_keyword(" game ")] == [
        "Texture1",
        "Audio1",
        "Model1",
    ]

    service.relate("Model1", "Texture1")
    assert [record.name for record in service.related_assets("Model1")] == ["Texture1"]

    assert service.remove_asset("Texture1") is True
    assert service.related_assets("Model1") == []
    assert service.remove_asset("Texture1") is False


def test_custom_seeds_and_logging(caplog: pytest.LogCaptureFixture) -> None:
    service = CatalogueService()
    seeds = (AssetSeed("Hero", "Models/hero.fbx", AssetType.MODEL, ("character",)),)

    with caplog.at_level(logging.INFO, logger="asset_catalogue"):
        service.seed(seeds)
        service.remove_asset("Hero")

    assert "Seeded 1 demo assets" in caplog.text
    assert "Removed asset Hero" in caplog.text


def test_service_writes_into_a_supplied_empty_store() -> None:
    store = AssetStore()
    service = CatalogueService(store)

    record = service.add_asset("Rock", "Textures/rock.png", AssetType.TEXTURE)

    assert service.store is store
    assert store.find_by_name("Rock") is record
    assert [hit.name for hit in service.search("rock")] == ["Rock"]


def test_seed_skips_names_stored_with_surrounding_whitespace() -> None:
    service = CatalogueService()
    service.add_asset(" Texture1 ", "Textures/custom.png", AssetType.TEXTURE)

    created = service.seed()

    assert [record.name for record in created] == ["Audio1", "Model1"]
    texture = service.get_asset("Texture1")
    assert texture is not None
    assert texture.metadata.path == "Textures/custom.png"

"""High level service facade translating catalogue requests into store calls."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .search import CatalogueSearch, SearchHit
from .store import AssetMetadata, AssetRecord, AssetStore, AssetType

__all__ = [
    "AssetSeed",
    "CatalogueService",
    "DEFAULT_ASSET_SEEDS",
]


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AssetSeed:
    """Describe an asset used when bootstrapping demo data."""

    name: str
    path: str
    type: AssetType
    keywords: tuple[str, ...] = ()
    category: str = ""
    version: int = 1

    def to_metadata(self) -> AssetMetadata:
        return AssetMetadata(
            name=self.name,
            path=self.path,
            type=self.type,
            keywords=self.keywords,
            category=self.category,
            version=self.version,
        )


DEFAULT_ASSET_SEEDS: tuple[AssetSeed, ...] = (
    AssetSeed(
        name="Texture1",
        path="Textures/Texture1.png",
        type=AssetType.TEXTURE,
        keywords=("background", "game"),
        category="Game Assets",
    ),
    AssetSeed(
        name="Audio1",
        path="Audio/Audio1.wav",
        type=AssetType.AUDIO,
        keywords=("background", "game"),
        category="Game Assets",
    ),
    AssetSeed(
        name="Model1",
        path="Models/Model1.obj",
        type=AssetType.MODEL,
        keywords=("3d", "game"),
        category="Game Assets",
    ),
)


class CatalogueService:
    """Coordinate high level operations on :class:`AssetRecord` objects."""

    def __init__(self, store: AssetStore | None = None) -> None:
        self._store = store if store is not None else AssetStore()
        self._search = CatalogueSearch(self._store)

    # ------------------------------------------------------------------
    # Basic accessors
    # ------------------------------------------------------------------
    @property
    def store(self) -> AssetStore:
        """Expose the underlying store instance."""

        return self._store

    def list_assets(self) -> list[AssetRecord]:
        return self._store.list_records()

    def get_asset(self, name: str) -> AssetRecord | None:
        return self._store.find_by_name(name)

    def add_asset(
        self,
        name: str,
        path: str,
        asset_type: AssetType | int | str,
        *,
        keywords: Iterable[str] = (),
        category: str = "",
        version: int = 1,
    ) -> AssetRecord:
        """Validate the request and insert a new asset."""

        metadata = AssetMetadata(
            name=name,
            path=path,
            type=AssetType.parse(asset_type),
            keywords=tuple(keywords),
            category=category,
            version=version,
        )
        record = self._store.insert(metadata)
        logger.info("Added %s asset %s", metadata.type.label, metadata.name)
        return record

    def remove_asset(self, name: str) -> bool:
        removed = self._store.remove(name)
        if removed:
            logger.info("Removed asset %s", name)
        else:
            logger.debug("Ignoring removal of unknown asset %s", name)
        return removed

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def assets_by_type(self, asset_type: AssetType | int | str) -> list[AssetRecord]:
        return self._store.find_by_type(asset_type)

    def assets_by_keyword(self, keyword: str) -> list[AssetRecord]:
        return self._store.find_by_keyword(str(keyword).strip())

    def related_assets(self, name: str) -> list[AssetRecord]:
        return self._store.related_of(name)

    def relate(self, source_name: str, target_name: str) -> None:
        """Record that *target_name* is related to *source_name*."""

        self._store.add_relation(source_name, target_name)
        logger.info("Related asset %s -> %s", source_name, target_name)

    def search(
        self,
        query: str,
        *,
        types: Iterable[AssetType | int | str] | None = None,
        limit: int | None = None,
    ) -> list[SearchHit]:
        return self._search.search(query, types=types, limit=limit)

    # ------------------------------------------------------------------
    # Bootstrapping
    # ------------------------------------------------------------------
    def seed(self, seeds: Sequence[AssetSeed] = DEFAULT_ASSET_SEEDS) -> list[AssetRecord]:
        """Insert *seeds* that are not stored yet and return the new records."""

        created: list[AssetRecord] = []
        for seed in seeds:
            if seed.name in self._store:
                continue
            created.append(self._store.insert(seed.to_metadata()))
        if created:
            logger.info("Seeded %d demo assets", len(created))
        return created

    @staticmethod
    def describe(record: AssetRecord) -> str:
        """Return the one-line listing used by console output."""

        metadata = record.metadata
        return f"{metadata.name} - {metadata.path}"

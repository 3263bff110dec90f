"""In-memory asset store owning records and their keyword index."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from itertools import count

from .keyword_index import KeywordIndex
from .records import AssetMetadata, AssetRecord, AssetType, normalize_name

__all__ = ["AssetStore", "DuplicateAssetError"]


logger = logging.getLogger(__name__)


class DuplicateAssetError(ValueError):
    """Raised when inserting an asset whose name is already present."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Asset {name!r} already exists")
        self.name = name


class AssetStore:
    """Own :class:`AssetRecord` instances and keep secondary indices in sync.

    The store is the only writer of its :class:`KeywordIndex`. Every record
    is reachable through an integer handle; handles of removed records stop
    resolving and are never reused.
    """

    def __init__(self) -> None:
        self._records: dict[int, AssetRecord] = {}
        self._names: dict[str, int] = {}
        self._keywords = KeywordIndex()
        self._ids = count(1)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, metadata: AssetMetadata) -> AssetRecord:
        """Create a record for *metadata* and index its keywords.

        Raises
        ------
        DuplicateAssetError
            If a record with the same name is already stored. The store is
            left untouched in that case.
        """

        if metadata.name in self._names:
            raise DuplicateAssetError(metadata.name)

        record = AssetRecord(next(self._ids), metadata, self)
        self._records[record.id] = record
        self._names[metadata.name] = record.id
        self._keywords.add(record.id, metadata.keywords)
        logger.debug("Inserted asset %s (id=%d)", metadata.name, record.id)
        return record

    def remove(self, name: str) -> bool:
        """Remove the record called *name*, returning whether one was found."""

        record_id = self._names.pop(normalize_name(name), None)
        if record_id is None:
            return False

        record = self._records.pop(record_id)
        self._keywords.discard(record_id, record.metadata.keywords)
        record._detach()
        logger.debug("Removed asset %s (id=%d)", name, record_id)
        return True

    def add_relation(self, source: AssetRecord | str, target: AssetRecord | str) -> None:
        """Link *source* to *target*; names are resolved through the store."""

        self._require(source).add_relation(self._require(target))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def resolve(self, record_id: int) -> AssetRecord | None:
        """Return the record behind *record_id* or ``None`` once removed."""

        return self._records.get(record_id)

    def find_by_name(self, name: str) -> AssetRecord | None:
        record_id = self._names.get(normalize_name(name))
        if record_id is None:
            return None
        return self._records[record_id]

    def find_by_type(self, asset_type: AssetType | int | str) -> list[AssetRecord]:
        """Return records of *asset_type* in insertion order."""

        wanted = AssetType.parse(asset_type)
        return [record for record in self._records.values() if record.metadata.type is wanted]

    def find_by_keyword(self, keyword: str) -> list[AssetRecord]:
        """Return records carrying *keyword* in the order they were indexed."""

        return [self._records[handle] for handle in self._keywords.lookup(keyword)]

    def related_of(self, name: str) -> list[AssetRecord]:
        """Return the records related to *name*; unknown names yield ``[]``."""

        record = self.find_by_name(name)
        if record is None:
            return []
        return record.relations

    def keywords(self) -> list[str]:
        """Return every keyword currently carried by at least one record."""

        return self._keywords.keywords()

    def list_records(self) -> list[AssetRecord]:
        return list(self._records.values())

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[AssetRecord]:
        return iter(list(self._records.values()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._names

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _require(self, value: AssetRecord | str) -> AssetRecord:
        if isinstance(value, AssetRecord):
            return value
        record = self.find_by_name(value)
        if record is None:
            raise KeyError(f"Asset {value!r} does not exist")
        return record

"""Free-text search helpers across catalogue assets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .store import AssetMetadata, AssetRecord, AssetStore, AssetType

__all__ = ["CatalogueSearch", "SearchHit"]


@dataclass(frozen=True, slots=True)
class SearchHit:
    """Describe an item returned from :class:`CatalogueSearch.search`."""

    record: AssetRecord
    """Record that satisfied the query."""

    matched_fields: tuple[str, ...]
    """Sequence of field names that satisfied the search query."""

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def path(self) -> str:
        return self.record.metadata.path


class CatalogueSearch:
    """Search record names, paths, keywords, and categories."""

    def __init__(self, store: AssetStore) -> None:
        self._store = store

    def search(
        self,
        query: str,
        *,
        types: Iterable[AssetType | int | str] | None = None,
        limit: int | None = None,
    ) -> list[SearchHit]:
        """Return records whose text matches every term of *query*."""

        terms = _normalise_terms(query)
        if not terms:
            return []

        type_filter = _normalise_types(types)

        ranked: list[tuple[int, SearchHit]] = []
        for position, record in enumerate(self._store.list_records()):
            metadata = record.metadata
            if type_filter and metadata.type not in type_filter:
                continue
            matched_fields = _matched_fields(terms, _field_texts(metadata))
            if matched_fields:
                ranked.append((position, SearchHit(record=record, matched_fields=matched_fields)))

        ranked.sort(
            key=lambda item: (
                -len(item[1].matched_fields),
                item[1].name.casefold(),
                item[0],
            )
        )
        hits = [hit for _position, hit in ranked]

        if limit is not None and limit >= 0:
            return hits[:limit]
        return hits


def _normalise_terms(query: str) -> tuple[str, ...]:
    parts = [part.casefold() for part in str(query).split() if part.strip()]
    return tuple(parts)


def _normalise_types(types: Iterable[AssetType | int | str] | None) -> frozenset[AssetType]:
    if types is None:
        return frozenset()
    return frozenset(AssetType.parse(value) for value in types)


def _field_texts(metadata: AssetMetadata) -> dict[str, str]:
    """Return casefolded text per searchable field, in display order."""

    texts = {
        "name": metadata.name,
        "keywords": " ".join(keyword for keyword in metadata.keywords if keyword.strip()),
        "path": metadata.path,
        "category": metadata.category,
    }
    return {field: text.casefold() for field, text in texts.items() if text.strip()}


def _matched_fields(terms: tuple[str, ...], texts: dict[str, str]) -> tuple[str, ...]:
    # Every term must hit some field; an empty result means no match.
    matched: set[str] = set()
    for term in terms:
        hits = {field for field, text in texts.items() if term in text}
        if not hits:
            return ()
        matched |= hits
    return tuple(field for field in texts if field in matched)

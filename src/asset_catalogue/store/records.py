"""Asset metadata value types and the records owned by :class:`AssetStore`."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imported for annotations only
    from .asset_store import AssetStore

__all__ = ["AssetMetadata", "AssetRecord", "AssetType", "normalize_name"]


class AssetType(Enum):
    """Closed set of media kinds tracked by the catalogue."""

    TEXTURE = 0
    AUDIO = 1
    MODEL = 2

    @property
    def label(self) -> str:
        """Return the display label used by listings and prompts."""

        return self.name.title()

    @classmethod
    def parse(cls, value: AssetType | int | str) -> AssetType:
        """Coerce *value* into an :class:`AssetType`.

        Accepts a member, its integer value, or its name in any case. Numeric
        strings such as ``"2"`` are treated as integer values.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unknown asset type: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Unknown asset type: {value!r}") from None

        text = str(value).strip()
        if text.isdigit():
            return cls.parse(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Unknown asset type: {value!r}") from None


@dataclass(frozen=True, slots=True)
class AssetMetadata:
    """Immutable description of an asset tracked by the catalogue."""

    name: str
    path: str
    type: AssetType
    keywords: tuple[str, ...] = field(default_factory=tuple)
    category: str = ""
    version: int = 1

    def __post_init__(self) -> None:
        name = normalize_name(self.name)
        if not name:
            raise ValueError("Asset name cannot be empty")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "path", str(self.path))
        object.__setattr__(self, "type", AssetType.parse(self.type))
        object.__setattr__(self, "keywords", _coerce_keywords(self.keywords))
        object.__setattr__(self, "category", str(self.category))
        object.__setattr__(self, "version", int(self.version))


def normalize_name(name: object) -> str:
    """Return *name* in the form used as the store's primary key."""

    return str(name).strip()


def _coerce_keywords(keywords: Iterable[str] | str | None) -> tuple[str, ...]:
    if keywords is None:
        return ()
    if isinstance(keywords, str):
        # A bare string is one keyword, not a sequence of characters.
        return (keywords,)
    return tuple(str(keyword) for keyword in keywords)


class AssetRecord:
    """Bundle of immutable metadata plus outgoing relations to other records.

    Records are created by :meth:`AssetStore.insert` only. Relations are kept
    as integer handles and resolved through the owning store on every read,
    so a record that has since been removed is simply skipped.
    """

    __slots__ = ("_id", "_metadata", "_relations", "_store")

    def __init__(self, record_id: int, metadata: AssetMetadata, store: AssetStore) -> None:
        self._id = record_id
        self._metadata = metadata
        self._relations: list[int] = []
        self._store: AssetStore | None = store

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def id(self) -> int:
        """Return the stable handle assigned by the owning store."""

        return self._id

    @property
    def metadata(self) -> AssetMetadata:
        return self._metadata

    @property
    def name(self) -> str:
        return self._metadata.name

    @property
    def is_attached(self) -> bool:
        """Return ``True`` while the record is still present in its store."""

        return self._store is not None

    @property
    def relations(self) -> list[AssetRecord]:
        """Return related records in the order they were added.

        Handles whose target has been removed from the store are skipped.
        """

        store = self._store
        if store is None:
            return []
        related: list[AssetRecord] = []
        for handle in self._relations:
            target = store.resolve(handle)
            if target is not None:
                related.append(target)
        return related

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add_relation(self, other: AssetRecord) -> None:
        """Append a non-owning link from this record to *other*.

        Duplicate and cyclic links are permitted.
        """

        if self._store is None:
            raise ValueError(f"Asset {self.name!r} is no longer in a store")
        if other._store is not self._store:
            raise ValueError(
                f"Asset {other.name!r} does not belong to the same store as {self.name!r}"
            )
        self._relations.append(other._id)

    def _detach(self) -> None:
        self._store = None
        self._relations.clear()

    def __repr__(self) -> str:
        return f"AssetRecord(id={self._id}, name={self.name!r}, type={self._metadata.type.label})"

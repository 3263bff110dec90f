"""Keyword to record-handle mapping maintained by :class:`AssetStore`."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["KeywordIndex"]


class KeywordIndex:
    """Map keyword strings to the handles of records carrying them.

    Buckets keep insertion order. A record listing the same keyword twice
    occupies a single slot in that bucket. Buckets emptied by :meth:`discard`
    are retained so that a known keyword keeps resolving to an empty result.
    """

    def __init__(self) -> None:
        self._buckets: dict[str, list[int]] = {}

    def add(self, record_id: int, keywords: Iterable[str]) -> None:
        for keyword in _unique(keywords):
            bucket = self._buckets.setdefault(keyword, [])
            if record_id not in bucket:
                bucket.append(record_id)

    def discard(self, record_id: int, keywords: Iterable[str]) -> None:
        for keyword in _unique(keywords):
            bucket = self._buckets.get(keyword)
            if bucket is None:
                continue
            bucket[:] = [handle for handle in bucket if handle != record_id]

    def lookup(self, keyword: str) -> list[int]:
        """Return a copy of the handles stored under *keyword*."""

        return list(self._buckets.get(keyword, ()))

    def keywords(self) -> list[str]:
        """Return keywords with at least one handle, sorted case-insensitively."""

        return sorted(
            (keyword for keyword, bucket in self._buckets.items() if bucket),
            key=lambda keyword: (keyword.casefold(), keyword),
        )

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._buckets


def _unique(keywords: Iterable[str]) -> list[str]:
    seen: dict[str, None] = {}
    for keyword in keywords:
        seen.setdefault(keyword, None)
    return list(seen)

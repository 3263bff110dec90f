"""In-memory storage primitives for catalogue assets."""

from .asset_store import AssetStore, DuplicateAssetError
from .keyword_index import KeywordIndex
from .records import AssetMetadata, AssetRecord, AssetType

__all__ = [
    "AssetMetadata",
    "AssetRecord",
    "AssetStore",
    "AssetType",
    "DuplicateAssetError",
    "KeywordIndex",
]

"""Top-level package for the asset catalogue.

The :mod:`asset_catalogue.store` package holds the in-memory store and its
indices; :mod:`asset_catalogue.service` wraps it for front-ends.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"

#!/usr/bin/env python3
"""Entry-point shim for running the catalogue console from a checkout."""

from __future__ import annotations

from asset_catalogue.cli import main


if __name__ == "__main__":
    raise SystemExit(main())

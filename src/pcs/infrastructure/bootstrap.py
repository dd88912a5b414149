"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

The data directory is resolved from, in order: an explicit override set
by the CLI, the ``PCS_DATA_DIR`` environment variable, and finally the
``data/`` directory at the project root.
"""

from __future__ import annotations

import os
from pathlib import Path

from pcs.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DATA_DIR_ENV = "PCS_DATA_DIR"
CATALOG_FILE = "products.json"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_data_dir_override: Path | None = None


def set_data_dir(path: Path | None) -> None:
    """Pin the data directory for the rest of the process (None clears it)."""
    global _data_dir_override
    _data_dir_override = path


def data_dir() -> Path:
    if _data_dir_override is not None:
        return _data_dir_override
    env_value = os.environ.get(DATA_DIR_ENV)
    if env_value:
        return Path(env_value)
    return _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / CATALOG_FILE)

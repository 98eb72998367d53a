"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from pms.application.product_manager import ProductManager
from pms.application.product_service import ProductService
from pms.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DATA_DIR_ENV = "PMS_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(override: Path | None = None) -> Path:
    """Pick the data directory: explicit path, then environment, then default."""
    if override is not None:
        return override
    from_env = os.environ.get(DATA_DIR_ENV)
    if from_env:
        return Path(from_env)
    return _DEFAULT_DATA_DIR


def product_repository(directory: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository(data_dir(directory) / "products.json")


def product_manager(directory: Path | None = None) -> ProductManager:
    return ProductService(product_repository(directory))

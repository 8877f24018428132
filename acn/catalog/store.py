"""
Read-only data store for the catalog API.

``PRODUCTS`` is populated once at import time from the seed file
``acn/data/products.json`` (or ``PRODUCTS_FILE`` when set). It is a
tuple of frozen ``Product`` instances: there is no write path, so the
request handlers can share it without any locking.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Tuple

from ..config import get_settings
from .schemas import Product

logger = logging.getLogger(__name__)


def load_products(path: Path) -> Tuple[Product, ...]:
    """Load the product catalog from a JSON file.

    Parameters
    ----------
    path : Path
        A JSON file holding a list of product objects (camelCase keys).

    Returns
    -------
    Tuple[Product, ...]
        The products in file order.

    Raises
    ------
    ValueError
        If the file does not hold a list or two products share an ``id``.
    """
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{path} must contain a JSON list of products")

    products = tuple(Product.model_validate(entry) for entry in raw)
    seen = set()
    for product in products:
        if product.id in seen:
            raise ValueError(f"Duplicate product id {product.id} in {path}")
        seen.add(product.id)

    logger.info("Loaded %d products from %s", len(products), path)
    return products


PRODUCTS: Tuple[Product, ...] = load_products(get_settings().products_file)


def get_products() -> Tuple[Product, ...]:
    """FastAPI dependency returning the catalog snapshot."""
    return PRODUCTS

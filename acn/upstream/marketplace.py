"""
Coupang seller API proxy for the marketplace product page.

Two calls are supported: a paged product listing (optionally narrowed
to a pet category) and a single seller product lookup. Listing never
fails from the caller's point of view: whenever the upstream is not
configured, unreachable, answers with an error or sends a listing that
cannot be read, the static sample catalog in
``acn/data/marketplace_samples.json`` is returned instead and flagged
with ``isSample``.
"""

from __future__ import annotations

import json
import logging
import urllib.parse
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config import PACKAGE_DIR, Settings
from . import transport

logger = logging.getLogger(__name__)

SELLER_PRODUCTS_URL = (
    "https://api-gateway.coupang.com/v2/providers/seller_api/apis/api/v1"
    "/marketplace/seller-products"
)
PRODUCT_PAGE_URL = "https://www.coupang.com/vp/products/{product_id}"
PET_SUPPLIES_CATEGORY = "50000008"

# Every pet category currently resolves to the same top-level code.
CATEGORY_CODES: Dict[str, str] = {
    "food": PET_SUPPLIES_CATEGORY,
    "treats": PET_SUPPLIES_CATEGORY,
    "supplies": PET_SUPPLIES_CATEGORY,
}

DEFAULT_RATING = 4.5
DEFAULT_CATEGORY = "supplies"

SAMPLES_FILE = PACKAGE_DIR / "data" / "marketplace_samples.json"


def _load_samples(path: Path) -> Dict[str, List[Dict[str, Any]]]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    return {str(k): list(v) for k, v in raw.items()}


SAMPLES: Dict[str, List[Dict[str, Any]]] = _load_samples(SAMPLES_FILE)


def sample_products(category: Optional[str]) -> List[Dict[str, Any]]:
    """Fallback products for ``category``, or every sample if unknown."""
    if category and category in SAMPLES:
        return [dict(p) for p in SAMPLES[category]]
    return [dict(p) for items in SAMPLES.values() for p in items]


def category_code(category: str) -> str:
    return CATEGORY_CODES.get(category, PET_SUPPLIES_CATEGORY)


def _headers(settings: Settings) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {settings.coupang_access_token}",
        "X-Requested-By": settings.coupang_api_key,
        "Content-Type": "application/json",
    }


def map_item(item: Dict[str, Any], category: Optional[str]) -> Dict[str, Any]:
    """Convert one seller product into the storefront card shape."""
    product_id = item.get("productId")
    return {
        "id": item.get("sellerProductId") or product_id,
        "name": item.get("productName") or item.get("name"),
        "price": item.get("salePrice") or item.get("price"),
        "image": item.get("productImage") or item.get("imageUrl"),
        "link": (
            item.get("productUrl")
            or item.get("coupangUrl")
            or PRODUCT_PAGE_URL.format(product_id=product_id)
        ),
        "brand": item.get("brandName") or item.get("brand"),
        "category": category or DEFAULT_CATEGORY,
        "rating": item.get("rating") or DEFAULT_RATING,
        "description": item.get("productDescription") or item.get("description") or "",
    }


def _extract_items(payload: Any) -> List[Dict[str, Any]]:
    """Pull the product list out of a listing payload.

    ``data.content`` is preferred, then ``data`` itself. A missing or
    empty ``data`` list is an empty listing. An object without
    ``content``, or anything else that is not a list of objects, raises
    ``ValueError``.
    """
    data = payload.get("data") if isinstance(payload, dict) else None
    if isinstance(data, dict):
        items = data.get("content") or data
    else:
        items = data or []
    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        raise ValueError(f"unexpected listing shape: {type(items).__name__}")
    return items


def _extract_total(payload: Any, default: int) -> int:
    data = payload.get("data") if isinstance(payload, dict) else None
    if isinstance(data, dict) and data.get("totalElements"):
        return data["totalElements"]
    return default


def fetch_seller_product(settings: Settings, seller_product_id: str) -> Any:
    """Return the raw upstream record for one seller product."""
    url = f"{SELLER_PRODUCTS_URL}/{urllib.parse.quote(seller_product_id, safe='')}"
    return transport.get_json(
        url, headers=_headers(settings), timeout=settings.upstream_timeout
    )


def list_products(
    settings: Settings,
    page: int,
    limit: int,
    category: Optional[str] = None,
) -> Dict[str, Any]:
    """List marketplace products, falling back to the sample catalog.

    Returns the response body (without the ``success`` flag): either
    ``{"data": [...], "pagination": {...}}`` or, on any upstream
    failure, ``{"data": [...samples], "isSample": True}``.
    """
    params: Dict[str, Any] = {"page": page, "limit": limit}
    if category:
        params["categoryId"] = category_code(category)
    url = transport.build_url(SELLER_PRODUCTS_URL, params)

    try:
        payload = transport.get_json(
            url, headers=_headers(settings), timeout=settings.upstream_timeout
        )
    except transport.UpstreamError as exc:
        logger.warning("Coupang listing failed, serving sample data: %s", exc)
        return {"data": sample_products(category), "isSample": True}

    try:
        items = _extract_items(payload)
    except ValueError as exc:
        logger.warning("Coupang listing unreadable, serving sample data: %s", exc)
        return {"data": sample_products(category), "isSample": True}

    return {
        "data": [map_item(item, category) for item in items],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": _extract_total(payload, len(items)),
        },
    }

"""
Abandoned animal registry proxy.

The public-data portal answers with a deeply nested envelope::

    {"response": {"body": {"items": {"item": [...]}, "totalCount": 42}}}

where ``item`` is a list, a single object when only one animal
matches, or missing altogether. :func:`normalize` flattens that into
the ``{data, totalCount, page, size}`` shape the shelter page renders.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..config import Settings
from . import transport

logger = logging.getLogger(__name__)

ABANDONED_ANIMALS_URL = (
    "https://apis.data.go.kr/1543061/abandonmentPublicSrvc/abandonmentPublic"
)
DEFAULT_PAGE = 1
DEFAULT_SIZE = 12


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def normalize(payload: Any, page: int, size: int) -> Dict[str, Any]:
    """Flatten the registry envelope.

    Single items are wrapped in a list; a missing ``items`` block or
    ``totalCount`` yields ``[]`` and ``0``.
    """
    body = _as_dict(_as_dict(_as_dict(payload).get("response")).get("body"))
    items = _as_dict(body.get("items")).get("item") or []
    if not isinstance(items, list):
        items = [items]
    animals: List[Any] = items
    return {
        "data": animals,
        "totalCount": body.get("totalCount") or 0,
        "page": page,
        "size": size,
    }


def fetch_abandoned_animals(settings: Settings, page: int, size: int) -> Dict[str, Any]:
    """Fetch one page of sheltered animals from the registry.

    Raises ``transport.UpstreamError`` (or its status subclass) untouched;
    the router decides which HTTP error to return.
    """
    url = transport.build_url(
        ABANDONED_ANIMALS_URL,
        {
            "serviceKey": settings.abandoned_api_key,
            "_type": "json",
            "pageNo": page,
            "numOfRows": size,
        },
    )
    payload = transport.get_json(url, timeout=settings.upstream_timeout)
    result = normalize(payload, page, size)
    logger.info(
        "Fetched %d abandoned animals (page=%s, size=%s, total=%s)",
        len(result["data"]), page, size, result["totalCount"],
    )
    return result

"""
Route definitions for the upstream proxy endpoints.

Endpoints:
- GET  /api/abandoned-animals : sheltered animals from the public-data registry
- GET  /api/coupang-products  : marketplace products (sample data on failure)
- POST /api/chat              : customer-service chat

Upstream error details are logged, never forwarded to the client.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..catalog.engine import parse_int
from ..config import Settings, get_settings
from . import animals, chat, marketplace, transport
from .schemas import AnimalPage, AnimalPageResponse, ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["upstream"])


def _int_or(value: Optional[str], default: int) -> int:
    parsed = parse_int(value)
    return default if parsed is None else parsed


@router.get("/abandoned-animals", response_model=AnimalPageResponse)
def list_abandoned_animals(
    page: Optional[str] = Query(default=None, description="페이지 번호"),
    size: Optional[str] = Query(default=None, description="페이지당 건수"),
    settings: Settings = Depends(get_settings),
) -> AnimalPageResponse:
    pg = _int_or(page, animals.DEFAULT_PAGE)
    sz = _int_or(size, animals.DEFAULT_SIZE)
    try:
        result = animals.fetch_abandoned_animals(settings, pg, sz)
    except transport.UpstreamStatusError as exc:
        logger.error("abandoned-animals upstream status %s", exc.status)
        raise HTTPException(status_code=502, detail="Upstream API error") from exc
    except transport.UpstreamError as exc:
        logger.error("abandoned-animals proxy error: %s", exc)
        raise HTTPException(
            status_code=500, detail="유기동물 데이터를 불러올 수 없습니다."
        ) from exc
    return AnimalPageResponse(data=AnimalPage.model_validate(result))


@router.get("/coupang-products")
def list_coupang_products(
    page: Optional[str] = Query(default=None, description="페이지 번호 (기본 1)"),
    limit: Optional[str] = Query(default=None, description="페이지당 상품 수 (기본 50)"),
    category: Optional[str] = Query(default=None, description="food | treats | supplies"),
    seller_product_id: Optional[str] = Query(default=None, alias="sellerProductId"),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Marketplace products, or one seller product when ``sellerProductId`` is given."""
    if seller_product_id:
        try:
            data = marketplace.fetch_seller_product(settings, seller_product_id)
        except transport.UpstreamStatusError as exc:
            raise HTTPException(status_code=502, detail="쿠팡 API 오류") from exc
        except transport.UpstreamError as exc:
            logger.error("coupang-products proxy error: %s", exc)
            return {
                "success": True,
                "data": marketplace.sample_products(category),
                "isSample": True,
            }
        return {"success": True, "data": data}

    pg = _int_or(page, 1)
    lim = _int_or(limit, 50)
    body = marketplace.list_products(settings, pg, lim, category)
    return {"success": True, **body}


@router.post("/chat", response_model=ChatResponse)
def chat_reply(
    req: ChatRequest,
    settings: Settings = Depends(get_settings),
) -> ChatResponse:
    message = req.message or ""
    if not message.strip():
        raise HTTPException(status_code=400, detail="메시지를 입력해주세요.")
    reply = chat.generate_reply(settings, message)
    return ChatResponse(reply=reply)

"""
Route definitions for the product catalog API.

Endpoints:
- GET /api/products                      : list with category/search/sort/pagination
- GET /api/products/price-range          : products priced within [min, max]
- GET /api/products/category/{category}  : every product in one category
- GET /api/products/search/{query}       : every product matching a search term
- GET /api/products/{product_id}         : one product
- GET /api/brands                        : distinct brand names

Integer query parameters are taken as raw strings and parsed with
``engine.parse_int`` so that malformed values degrade to the defaults
instead of producing a 422.
"""

from __future__ import annotations

from typing import Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query

from . import engine
from .schemas import (
    BrandsResponse,
    CategoryResponse,
    PriceRange,
    PriceRangeResponse,
    Product,
    ProductListResponse,
    ProductResponse,
    SearchResponse,
)
from .store import get_products

router = APIRouter(prefix="/api", tags=["catalog"])

NOT_FOUND_MESSAGE = "상품을 찾을 수 없습니다."
PRICE_RANGE_MESSAGE = "최소값과 최대값을 모두 입력해주세요."


@router.get(
    "/products",
    response_model=ProductListResponse,
    response_model_exclude_none=True,
)
def list_products(
    category: Optional[str] = Query(default=None, description="카테고리 (food, treats, supplies ...)"),
    search: Optional[str] = Query(default=None, description="상품명/브랜드/설명 검색어"),
    sort: Optional[str] = Query(default=None, description="name | price-low | price-high | rating"),
    limit: Optional[str] = Query(default=None, description="페이지당 상품 수 (기본 20)"),
    page: Optional[str] = Query(default=None, description="페이지 번호 (1부터)"),
    products: Tuple[Product, ...] = Depends(get_products),
) -> ProductListResponse:
    """Return one page of the filtered and sorted catalog.

    ``page`` and ``limit`` are echoed back as given; see ``engine`` for
    what non-positive values do.
    """
    lim = engine.parse_int(limit)
    pg = engine.parse_int(page)
    params = engine.ProductQuery(
        category=category,
        search=search,
        sort=sort,
        limit=engine.DEFAULT_LIMIT if lim is None else lim,
        page=engine.DEFAULT_PAGE if pg is None else pg,
    )
    result = engine.query(products, params)
    return ProductListResponse(data=result.items, pagination=result.pagination)


# Declared before /products/{product_id} so the literal path wins.
@router.get(
    "/products/price-range",
    response_model=PriceRangeResponse,
    response_model_exclude_none=True,
)
def list_price_range(
    min_price: Optional[str] = Query(default=None, alias="min", description="최소 가격 (포함)"),
    max_price: Optional[str] = Query(default=None, alias="max", description="최대 가격 (포함)"),
    products: Tuple[Product, ...] = Depends(get_products),
) -> PriceRangeResponse:
    low = engine.parse_int(min_price)
    high = engine.parse_int(max_price)
    if low is None or high is None:
        raise HTTPException(status_code=400, detail=PRICE_RANGE_MESSAGE)
    return PriceRangeResponse(
        data=engine.price_range(products, low, high),
        price_range=PriceRange(min=low, max=high),
    )


@router.get(
    "/products/category/{category}",
    response_model=CategoryResponse,
    response_model_exclude_none=True,
)
def list_category(
    category: str,
    products: Tuple[Product, ...] = Depends(get_products),
) -> CategoryResponse:
    return CategoryResponse(data=engine.by_category(products, category), category=category)


@router.get(
    "/products/search/{query}",
    response_model=SearchResponse,
    response_model_exclude_none=True,
)
def search_products(
    query: str,
    products: Tuple[Product, ...] = Depends(get_products),
) -> SearchResponse:
    term = query.lower()
    data = engine.search(products, term)
    return SearchResponse(data=data, query=term, count=len(data))


@router.get(
    "/products/{product_id}",
    response_model=ProductResponse,
    response_model_exclude_none=True,
)
def get_product(
    product_id: str,
    products: Tuple[Product, ...] = Depends(get_products),
) -> ProductResponse:
    pid = engine.parse_int(product_id)
    product = engine.get_by_id(products, pid) if pid is not None else None
    if product is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return ProductResponse(data=product)


@router.get("/brands", response_model=BrandsResponse)
def list_brands(products: Tuple[Product, ...] = Depends(get_products)) -> BrandsResponse:
    return BrandsResponse(data=engine.brands(products))

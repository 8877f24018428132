"""
Catalog query engine.

Everything here is a pure function over a sequence of ``Product``
records: nothing is mutated and nothing raises for odd input. The main
entry point is :func:`query`, which runs the listing pipeline

    category filter -> search filter -> sort -> paginate -> metadata

in that order. The other functions are the single-purpose reads behind
the path-style endpoints.

Pagination deliberately does not validate ``page`` or ``limit``. A page
of 0 or below produces a negative start index and the slice behaves
exactly as a Python slice with that index does.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .schemas import Pagination, Product

DEFAULT_LIMIT = 20
DEFAULT_PAGE = 1

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


class SortKey(str, enum.Enum):
    NAME = "name"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SortKey"]:
        """Return the matching key, or ``None`` for absent/unknown values."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class ProductQuery:
    category: Optional[str] = None
    search: Optional[str] = None
    sort: Optional[str] = None
    limit: int = DEFAULT_LIMIT
    page: int = DEFAULT_PAGE


@dataclass(frozen=True)
class QueryResult:
    items: List[Product]
    pagination: Pagination


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``value``.

    Leading whitespace and a sign are accepted and anything after the
    digits is ignored, so ``"12abc"`` is 12. Only ASCII digits count.
    Returns ``None`` when no digits are found or the digit run is too
    long for ``int()`` to convert.
    """
    if value is None:
        return None
    m = _INT_PREFIX.match(str(value))
    if not m:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        return None


def _matches(product: Product, term: str) -> bool:
    # term is already lower-cased
    return (
        term in product.name.lower()
        or term in product.brand.lower()
        or term in product.description.lower()
    )


def filter_category(products: Iterable[Product], category: Optional[str]) -> List[Product]:
    if not category:
        return list(products)
    return [p for p in products if p.category == category]


def filter_search(products: Iterable[Product], term: Optional[str]) -> List[Product]:
    if not term:
        return list(products)
    q = term.lower()
    return [p for p in products if _matches(p, q)]


def sort_products(products: Iterable[Product], sort: Optional[str]) -> List[Product]:
    """Return ``products`` ordered by ``sort``.

    Python's sort is stable, including with ``reverse=True``, so ties
    keep their filtered order. Unknown keys leave the order untouched.
    """
    items = list(products)
    key = SortKey.parse(sort)
    if key is SortKey.NAME:
        items.sort(key=lambda p: p.name.casefold())
    elif key is SortKey.PRICE_LOW:
        items.sort(key=lambda p: p.price)
    elif key is SortKey.PRICE_HIGH:
        items.sort(key=lambda p: p.price, reverse=True)
    elif key is SortKey.RATING:
        items.sort(key=lambda p: p.rating, reverse=True)
    else:
        # absent or unrecognised key
        pass
    return items


def total_pages(total_items: int, limit: int) -> int:
    if limit == 0:
        return 0
    return -(-total_items // limit)


def paginate(products: Sequence[Product], page: int, limit: int) -> QueryResult:
    start = (page - 1) * limit
    items = list(products[start:start + limit])
    return QueryResult(
        items=items,
        pagination=Pagination(
            current_page=page,
            total_pages=total_pages(len(products), limit),
            total_items=len(products),
            items_per_page=limit,
        ),
    )


def query(products: Sequence[Product], params: ProductQuery) -> QueryResult:
    """Filter, search, sort and paginate ``products``."""
    items = filter_category(products, params.category)
    items = filter_search(items, params.search)
    items = sort_products(items, params.sort)
    return paginate(items, params.page, params.limit)


def get_by_id(products: Iterable[Product], product_id: int) -> Optional[Product]:
    return next((p for p in products if p.id == product_id), None)


def by_category(products: Iterable[Product], category: str) -> List[Product]:
    return [p for p in products if p.category == category]


def search(products: Iterable[Product], term: str) -> List[Product]:
    return filter_search(products, term)


def brands(products: Iterable[Product]) -> List[str]:
    """Distinct brand names in order of first appearance."""
    return list(dict.fromkeys(p.brand for p in products))


def price_range(products: Iterable[Product], low: int, high: int) -> List[Product]:
    """Products priced within ``[low, high]``, both ends inclusive."""
    return [p for p in products if low <= p.price <= high]

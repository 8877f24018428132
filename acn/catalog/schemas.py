"""
Pydantic schema definitions for the catalog module.

The ``Product`` model is the record the storefront renders as a product
card. Records are frozen: the catalog is loaded once and never changes
while the process runs. Field names are snake_case in Python and
camelCase on the wire (``age_range`` is sent as ``ageRange``), which is
what the front-end scripts read.

The response models wrap results in the ``{"success": true, ...}``
envelope every ``/api`` endpoint returns.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(CamelModel):
    """A single catalog entry.

    Only ``category``, ``name``, ``brand``, ``description``, ``price``
    and ``rating`` are interpreted by the query engine. The remaining
    attributes are category specific (a bag of food has a ``weight``,
    a harness has a ``size`` and a ``material``) and are passed through
    untouched, as is any extra attribute found in the seed file.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    id: int
    category: str
    name: str
    brand: str
    description: str = ""
    price: int
    rating: float = 0.0
    image: Optional[str] = None
    weight: Optional[str] = None
    ingredients: Optional[str] = None
    age_range: Optional[str] = None
    size: Optional[str] = None
    material: Optional[str] = None
    color: Optional[str] = None
    link: Optional[str] = None


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class PriceRange(CamelModel):
    min: int
    max: int


class ProductListResponse(CamelModel):
    success: bool = True
    data: List[Product]
    pagination: Pagination


class ProductResponse(CamelModel):
    success: bool = True
    data: Product


class CategoryResponse(CamelModel):
    success: bool = True
    data: List[Product]
    category: str


class SearchResponse(CamelModel):
    success: bool = True
    data: List[Product]
    query: str
    count: int


class BrandsResponse(CamelModel):
    success: bool = True
    data: List[str]


class PriceRangeResponse(CamelModel):
    success: bool = True
    data: List[Product]
    price_range: PriceRange

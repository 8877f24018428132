"""
Catalog endpoint tests against the seeded catalog in acn/data/products.json.
"""
import math
import sys

import pytest

from acn.catalog.store import PRODUCTS


def test_list_products_defaults(client):
    r = client.get("/api/products")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert len(body["data"]) == len(PRODUCTS)
    assert body["pagination"] == {
        "currentPage": 1,
        "totalPages": 1,
        "totalItems": len(PRODUCTS),
        "itemsPerPage": 20,
    }


def test_products_use_camel_case_and_omit_missing_attributes(client):
    r = client.get("/api/products/1")
    data = r.json()["data"]
    assert data["ageRange"] == "10개월~8세"
    assert "age_range" not in data
    assert "material" not in data


def test_list_products_by_category(client):
    r = client.get("/api/products", params={"category": "treats"})
    body = r.json()
    assert body["data"]
    assert all(p["category"] == "treats" for p in body["data"])
    assert body["pagination"]["totalItems"] == sum(p.category == "treats" for p in PRODUCTS)


def test_list_products_unknown_category(client):
    r = client.get("/api/products", params={"category": "reptiles"})
    assert r.status_code == 200
    assert r.json()["data"] == []
    assert r.json()["pagination"]["totalItems"] == 0


def test_search_matches_korean_brand(client):
    r = client.get("/api/products", params={"search": "로얄"})
    names = [p["name"] for p in r.json()["data"]]
    assert names
    assert all("로얄캐닌" in n for n in names)


def test_sort_and_paginate(client):
    r = client.get("/api/products", params={"sort": "price-low", "limit": "3", "page": "2"})
    body = r.json()
    prices = sorted(p.price for p in PRODUCTS)
    assert [p["price"] for p in body["data"]] == prices[3:6]
    assert body["pagination"]["totalPages"] == math.ceil(len(PRODUCTS) / 3)
    assert body["pagination"]["currentPage"] == 2
    assert body["pagination"]["itemsPerPage"] == 3


def test_malformed_paging_falls_back_to_defaults(client):
    r = client.get("/api/products", params={"limit": "many", "page": "first"})
    assert r.status_code == 200
    assert r.json()["pagination"]["itemsPerPage"] == 20
    assert r.json()["pagination"]["currentPage"] == 1


def test_repeated_query_is_identical(client):
    params = {"category": "food", "sort": "rating", "limit": "2"}
    assert client.get("/api/products", params=params).content == client.get(
        "/api/products", params=params
    ).content


def test_get_product(client):
    r = client.get("/api/products/2")
    assert r.status_code == 200
    assert r.json() == {"success": True, "data": r.json()["data"]}
    assert r.json()["data"]["id"] == 2


def test_get_product_not_found(client):
    for pid in ("999", "abc"):
        r = client.get(f"/api/products/{pid}")
        assert r.status_code == 404
        assert r.json() == {"success": False, "message": "상품을 찾을 수 없습니다."}


def test_category_path(client):
    r = client.get("/api/products/category/supplies")
    body = r.json()
    assert body["category"] == "supplies"
    assert len(body["data"]) == sum(p.category == "supplies" for p in PRODUCTS)

    r = client.get("/api/products/category/birds")
    assert r.status_code == 200
    assert r.json()["data"] == []


def test_search_path(client):
    r = client.get("/api/products/search/NOW")
    body = r.json()
    assert body["query"] == "now"
    assert body["count"] == len(body["data"]) == 1

    r = client.get("/api/products/search/nothing-like-this")
    assert r.json()["count"] == 0


def test_brands_have_no_duplicates(client):
    r = client.get("/api/brands")
    brands = r.json()["data"]
    assert len(brands) == len(set(brands))
    assert set(brands) == {p.brand for p in PRODUCTS}
    assert brands.count("로얄캐닌") == 1


def test_price_range(client):
    r = client.get("/api/products/price-range", params={"min": "10000", "max": "20000"})
    assert r.status_code == 200
    body = r.json()
    assert body["priceRange"] == {"min": 10000, "max": 20000}
    assert body["data"]
    assert all(10000 <= p["price"] <= 20000 for p in body["data"])
    assert len(body["data"]) == sum(10000 <= p.price <= 20000 for p in PRODUCTS)


def test_price_range_requires_both_bounds(client):
    r = client.get("/api/products/price-range", params={"min": "10000"})
    assert r.status_code == 400
    assert r.json()["success"] is False

    r = client.get("/api/products/price-range", params={"min": "cheap", "max": "20000"})
    assert r.status_code == 400


HUGE = "9" * 5000

needs_int_digit_limit = pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"), reason="int() has no digit limit before 3.11"
)


@needs_int_digit_limit
def test_oversized_paging_falls_back_to_defaults(client):
    r = client.get("/api/products", params={"page": HUGE, "limit": HUGE})
    assert r.status_code == 200
    assert r.json()["pagination"]["currentPage"] == 1
    assert r.json()["pagination"]["itemsPerPage"] == 20


@needs_int_digit_limit
def test_oversized_id_is_not_found(client):
    r = client.get(f"/api/products/{HUGE}")
    assert r.status_code == 404
    assert r.json()["message"] == "상품을 찾을 수 없습니다."


@needs_int_digit_limit
def test_oversized_price_bound_is_400(client):
    r = client.get("/api/products/price-range", params={"min": HUGE, "max": "2"})
    assert r.status_code == 400
    assert r.json()["success"] is False


def test_non_ascii_digits_are_not_numbers(client):
    r = client.get("/api/products/price-range", params={"min": "١٢", "max": "20000"})
    assert r.status_code == 400

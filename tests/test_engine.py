"""Catalog query engine tests (pure functions, no HTTP)."""
import sys

import pytest

from acn.catalog import engine
from acn.catalog.engine import ProductQuery, SortKey


def ids(products):
    return [p.id for p in products]


def test_no_filters_counts_whole_catalog(catalog):
    result = engine.query(catalog, ProductQuery())
    assert result.pagination.total_items == len(catalog)
    assert ids(result.items) == ids(catalog)
    assert result.pagination.current_page == 1
    assert result.pagination.items_per_page == 20
    assert result.pagination.total_pages == 1


def test_category_filter_is_exact(catalog):
    result = engine.query(catalog, ProductQuery(category="toys"))
    assert ids(result.items) == [3, 7]
    assert engine.query(catalog, ProductQuery(category="Toys")).items == []


def test_unknown_category_gives_empty_result(catalog):
    result = engine.query(catalog, ProductQuery(category="birds"))
    assert result.items == []
    assert result.pagination.total_items == 0
    assert result.pagination.total_pages == 0


def test_search_is_case_insensitive_across_fields(catalog):
    # brand
    assert ids(engine.query(catalog, ProductQuery(search="ROYAL")).items) == [1, 6]
    # name
    assert ids(engine.query(catalog, ProductQuery(search="squeaky")).items) == [7]
    # description
    assert ids(engine.query(catalog, ProductQuery(search="Wild SALMON")).items) == [5]
    assert ids(engine.query(catalog, ProductQuery(search="salmon dinner")).items) == []


def test_search_composes_with_category(catalog):
    result = engine.query(catalog, ProductQuery(category="toys", search="pettoy"))
    assert ids(result.items) == [3, 7]
    result = engine.query(catalog, ProductQuery(category="food", search="pettoy"))
    assert result.items == []


def test_price_low_and_high_are_reversed(catalog):
    low = engine.query(catalog, ProductQuery(sort="price-low")).items
    high = engine.query(catalog, ProductQuery(sort="price-high")).items
    assert ids(low) == list(reversed(ids(high)))
    assert [p.price for p in low] == sorted(p.price for p in catalog)


def test_rating_sort_is_descending(catalog):
    items = engine.query(catalog, ProductQuery(sort="rating")).items
    assert [p.rating for p in items] == sorted((p.rating for p in catalog), reverse=True)


def test_name_sort_ignores_case(catalog):
    items = engine.query(catalog, ProductQuery(category="food", sort="name")).items
    assert items[0].name == "apple crunch"
    assert items[-1].name == "Turkey Bites"


def test_unknown_sort_keeps_order(catalog):
    items = engine.query(catalog, ProductQuery(sort="popularity")).items
    assert ids(items) == ids(catalog)


def test_sort_is_stable_for_ties(catalog):
    tied = [p.model_copy(update={"price": 1000}) for p in catalog[:4]]
    assert ids(engine.sort_products(tied, "price-high")) == [1, 2, 3, 4]
    assert ids(engine.sort_products(tied, "price-low")) == [1, 2, 3, 4]


def test_pagination_second_page_of_eight(catalog):
    result = engine.query(catalog, ProductQuery(category="food", limit=2, page=2))
    food = [p for p in catalog if p.category == "food"]
    assert len(food) == 8
    assert ids(result.items) == ids(food[2:4])
    assert result.pagination.total_pages == 4
    assert result.pagination.total_items == 8
    assert result.pagination.current_page == 2
    assert result.pagination.items_per_page == 2


def test_pagination_rounds_total_pages_up(catalog):
    result = engine.query(catalog, ProductQuery(limit=3, page=4))
    assert result.pagination.total_pages == 4
    assert ids(result.items) == [10]


def test_page_past_the_end_is_empty(catalog):
    result = engine.query(catalog, ProductQuery(limit=5, page=9))
    assert result.items == []
    assert result.pagination.total_items == 10


def test_non_positive_page_follows_slice_semantics(catalog):
    # page 0 -> catalog[-5:0] -> empty
    assert engine.query(catalog, ProductQuery(limit=5, page=0)).items == []
    # page -1 with limit 2 -> catalog[-4:-2]
    result = engine.query(catalog, ProductQuery(limit=2, page=-1))
    assert ids(result.items) == ids(catalog[-4:-2])
    assert result.pagination.current_page == -1


def test_zero_limit_gives_empty_page(catalog):
    result = engine.query(catalog, ProductQuery(limit=0))
    assert result.items == []
    assert result.pagination.total_pages == 0
    assert result.pagination.items_per_page == 0


def test_query_is_idempotent(catalog):
    params = ProductQuery(category="food", search="r", sort="rating", limit=3, page=2)
    first = engine.query(catalog, params)
    second = engine.query(catalog, params)
    assert first == second
    assert ids(catalog) == list(range(1, 11))


def test_get_by_id(catalog):
    assert engine.get_by_id(catalog, 5).name == "Salmon Feast"
    assert engine.get_by_id(catalog, 999) is None


def test_brands_are_distinct_in_first_seen_order(catalog):
    assert engine.brands(catalog) == [
        "Royal Canin", "Hills", "PetToy", "Nature", "Orijen", "NOW", "Acana", "Purina",
    ]


def test_price_range_is_inclusive(catalog):
    assert ids(engine.price_range(catalog, 8000, 15000)) == [1, 2, 4, 10]
    assert engine.price_range(catalog, 100, 200) == []


def test_by_category_and_search_return_full_sets(catalog):
    assert len(engine.by_category(catalog, "food")) == 8
    assert ids(engine.search(catalog, "recipe")) == [5, 9]


@pytest.mark.parametrize(
    "raw, expected",
    [("12", 12), (" 7", 7), ("-3", -3), ("+4", 4), ("12abc", 12), ("abc", None), ("", None), (None, None),
     ("\u0661\u0662", None), ("3\u0664", 3)],
)
def test_parse_int(raw, expected):
    assert engine.parse_int(raw) == expected


def test_sort_key_parse():
    assert SortKey.parse("price-low") is SortKey.PRICE_LOW
    assert SortKey.parse("cheapest") is None
    assert SortKey.parse(None) is None


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"), reason="int() has no digit limit before 3.11"
)
def test_parse_int_digit_run_too_long_for_int():
    assert engine.parse_int("9" * 5000) is None
    assert engine.parse_int(" -" + "1" * 5000 + "px") is None

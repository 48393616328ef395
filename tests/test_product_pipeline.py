"""Tests for the filter/sort pipeline behind the shop page."""

import pytest

import schemas
from services.product_pipeline import apply_filter, apply_sort, derive_product_list

from conftest import make_product


def _value(product, key):
    v = getattr(product, key)
    return v.casefold() if isinstance(v, str) else v


class TestFilter:
    """Name-substring filtering."""

    def test_orange_example_any_case(self):
        products = [make_product(1, "Orange", 99), make_product(2, "Orange orange", 299)]
        for needle in ("orange", "ORANGE", "oRaNgE"):
            result = derive_product_list(products, schemas.FilterState(name=needle))
            assert [p.id for p in result] == [1, 2]

    def test_filter_excludes_non_matching(self, sample_products):
        result = apply_filter(sample_products, schemas.FilterState(name="rice"))
        assert [p.name for p in result] == ["Brown Rice"]

    def test_filter_is_idempotent(self, sample_products):
        f = schemas.FilterState(name="an")
        once = apply_filter(sample_products, f)
        twice = apply_filter(once, f)
        assert once == twice

    def test_empty_or_missing_filter_keeps_everything(self, sample_products):
        assert apply_filter(sample_products, None) == sample_products
        assert apply_filter(sample_products, schemas.FilterState()) == sample_products
        assert apply_filter(sample_products, schemas.FilterState(name="")) == sample_products

    def test_no_match_gives_empty_list(self, sample_products):
        assert apply_filter(sample_products, schemas.FilterState(name="durian")) == []


class TestSort:
    """Single-key ordering."""

    @pytest.mark.parametrize("key", schemas.SORT_KEYS)
    @pytest.mark.parametrize("direction", list(schemas.SortOrder))
    def test_adjacent_pairs_are_ordered(self, sample_products, key, direction):
        result = apply_sort(sample_products, schemas.SortState(key=key, direction=direction))
        assert sorted(p.id for p in result) == sorted(p.id for p in sample_products)
        for a, b in zip(result, result[1:]):
            if direction is schemas.SortOrder.ASCENDING:
                assert _value(a, key) <= _value(b, key)
            else:
                assert _value(a, key) >= _value(b, key)

    def test_price_descending_example(self):
        products = [make_product(1, "Orange", 99), make_product(2, "Orange orange", 299)]
        result = derive_product_list(
            products,
            schemas.FilterState(name="orange"),
            schemas.SortState(key="price", direction="Descending"),
        )
        assert [p.price for p in result] == [299, 99]

    def test_ties_keep_original_order_in_both_directions(self, sample_products):
        # Orange (id 1) and Mango (id 6) share price 99.
        asc = apply_sort(sample_products, schemas.SortState(key="price", direction="Ascending"))
        desc = apply_sort(sample_products, schemas.SortState(key="price", direction="Descending"))
        assert [p.id for p in asc if p.price == 99] == [1, 6]
        assert [p.id for p in desc if p.price == 99] == [1, 6]

    def test_name_sort_ignores_case(self, sample_products):
        result = apply_sort(sample_products, schemas.SortState(key="name", direction="Ascending"))
        assert [p.name for p in result] == [
            "Brown Rice", "carabao milk", "Eggplant", "Mango", "Orange", "Orange orange",
        ]


class TestDerive:
    def test_input_is_not_mutated(self, sample_products):
        before = list(sample_products)
        derive_product_list(sample_products, schemas.FilterState(name="o"), schemas.SortState(key="quantity"))
        assert sample_products == before

    def test_reset_returns_source_exactly(self, sample_products):
        result = derive_product_list(sample_products, schemas.FilterState(), None)
        assert result == sample_products
        assert result is not sample_products

    def test_filter_then_sort(self, sample_products):
        result = derive_product_list(
            sample_products,
            schemas.FilterState(name="fruit"),
            schemas.SortState(key="price"),
        )
        # "fruit" is a type, not part of any name.
        assert result == []
        result = derive_product_list(
            sample_products, schemas.FilterState(name="O"), schemas.SortState(key="quantity", direction="Descending"),
        )
        assert [p.quantity for p in result] == sorted((p.quantity for p in result), reverse=True)
        assert all("o" in p.name.casefold() for p in result)

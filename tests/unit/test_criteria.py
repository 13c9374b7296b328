"""Unit tests for filter criteria and sort keys."""

from datetime import datetime, timezone

import pytest

from shop_catalog.models.criteria import DEFAULT_PAGE_SIZE, FilterCriteria, SortKey


class TestSortKeyParse:
    """Tests for SortKey.parse."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (SortKey.NEWEST, SortKey.NEWEST),
            ("price_asc", SortKey.PRICE_ASC),
            ("priceDesc", SortKey.PRICE_DESC),
            ("price-low", SortKey.PRICE_ASC),
            ("price-high", SortKey.PRICE_DESC),
            ("rating", SortKey.RATING_DESC),
            ("popular", SortKey.POPULARITY),
            ("name-desc", SortKey.NAME_DESC),
            ("relevance", SortKey.DEFAULT),
        ],
    )
    def test_known_tokens(self, value, expected):
        assert SortKey.parse(value) is expected

    @pytest.mark.parametrize("value", ["cheapest-first", "", None, 42])
    def test_unknown_falls_back_to_default(self, value):
        assert SortKey.parse(value) is SortKey.DEFAULT

    def test_criteria_accepts_legacy_token(self):
        criteria = FilterCriteria.model_validate({"sort_key": "price-high"})
        assert criteria.sort_key is SortKey.PRICE_DESC


class TestFilterCriteriaDefaults:
    """Tests for default construction and emptiness."""

    def test_create_default(self):
        criteria = FilterCriteria.create_default()
        assert criteria.search_text == ""
        assert criteria.categories == set()
        assert criteria.brands == set()
        assert criteria.min_rating == 0
        assert criteria.min_price == 0
        assert criteria.max_price is None
        assert criteria.sort_key is SortKey.DEFAULT
        assert criteria.page == 1
        assert criteria.page_size == DEFAULT_PAGE_SIZE
        assert criteria.is_empty() is True

    @pytest.mark.parametrize(
        "field,value",
        [
            ("search_text", "nike"),
            ("categories", {"Shoes"}),
            ("brands", {"Adidas"}),
            ("min_rating", 4),
            ("min_price", 500),
            ("max_price", 10_000),
            ("on_sale_only", True),
            ("free_shipping_only", True),
            ("in_stock_only", True),
        ],
    )
    def test_any_restrictive_field_makes_non_empty(self, field, value):
        criteria = FilterCriteria.create_default().with_updates(**{field: value})
        assert criteria.is_empty() is False

    def test_sort_and_page_do_not_count_as_filters(self):
        criteria = FilterCriteria.create_default().with_updates(
            sort_key=SortKey.PRICE_DESC, page=4, page_size=48
        )
        assert criteria.is_empty() is True

    def test_whitespace_search_is_empty(self):
        assert FilterCriteria(search_text="   ").is_empty() is True

    @pytest.mark.parametrize("field", ["min_rating", "min_price"])
    def test_negative_bound_is_not_empty(self, field):
        assert FilterCriteria(**{field: -5}).is_empty() is False

    def test_malformed_values_are_accepted(self):
        criteria = FilterCriteria(min_price=5000, max_price=1000, page=-3, page_size=0)
        assert criteria.min_price == 5000
        assert criteria.page == -3
        assert criteria.page_size == 0


class TestFilterCriteriaCopyAndEquality:
    """Tests for clone, with_updates and equality."""

    def test_clone_has_independent_sets(self):
        original = FilterCriteria(categories={"Shoes"}, brands={"Nike"})
        copy = original.clone()

        copy.categories.add("Clothing")
        copy.brands.clear()

        assert original.categories == {"Shoes"}
        assert original.brands == {"Nike"}
        assert copy == FilterCriteria(categories={"Shoes", "Clothing"})

    def test_with_updates_leaves_source_untouched(self):
        original = FilterCriteria(categories={"Shoes"})
        updated = original.with_updates(search_text="air")

        assert original.search_text == ""
        assert updated.search_text == "air"
        assert updated.categories == {"Shoes"}
        assert updated.categories is not original.categories

    def test_sets_compare_order_independent(self):
        a = FilterCriteria(categories={"Shoes", "Clothing"}, brands={"Nike", "Adidas"})
        b = FilterCriteria.model_validate(
            {"categories": ["Clothing", "Shoes"], "brands": ["Adidas", "Nike", "Nike"]}
        )
        assert a == b

    def test_last_updated_ignored_in_equality(self):
        a = FilterCriteria(last_updated=datetime(2024, 1, 1, tzinfo=timezone.utc))
        b = FilterCriteria(last_updated=datetime(2025, 6, 1, tzinfo=timezone.utc))
        assert a == b

    def test_any_other_field_difference_breaks_equality(self):
        assert FilterCriteria() != FilterCriteria(page=2)
        assert FilterCriteria() != FilterCriteria(sort_key=SortKey.NEWEST)
        assert FilterCriteria() != FilterCriteria(max_price=100)

    def test_not_equal_to_other_types(self):
        assert FilterCriteria() != {"search_text": ""}

    def test_json_round_trip_is_lossless(self):
        original = FilterCriteria(
            search_text="Air",
            categories={"Shoes", "Clothing"},
            brands={"Nike"},
            min_rating=3.5,
            min_price=100,
            max_price=90_000,
            on_sale_only=True,
            free_shipping_only=True,
            in_stock_only=True,
            sort_key=SortKey.RATING_DESC,
            page=3,
            page_size=24,
        )
        restored = FilterCriteria.model_validate_json(original.model_dump_json())

        assert restored == original
        assert restored.last_updated == original.last_updated

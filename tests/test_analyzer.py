"""Contract tests for the chainable analysis pipeline."""
from __future__ import annotations

from datetime import datetime

import pydantic
import pytest

from data_analyzer.analytics.analyzer import DataAnalyzer, create_analyzer
from data_analyzer.analytics.errors import InvalidFieldError
from data_analyzer.analytics.models import AnalyzerConfig
from data_analyzer.domain.records import SALE_SHAPE
from data_analyzer.domain.types import SortOrder


def _ids(records: list[dict]) -> list[int]:
    return [r["id"] for r in records]


@pytest.fixture
def analyzer(sales) -> DataAnalyzer:
    return create_analyzer(sales, SALE_SHAPE)


# ============================================================================
# Filtering
# ============================================================================

class TestFiltering:
    def test_filter_predicate_preserves_order(self, analyzer):
        result = analyzer.filter(lambda s: s["quantity"] > 2).get_results()
        assert _ids(result) == [2, 3, 4]

    def test_filter_by_field(self, analyzer):
        assert _ids(analyzer.filter_by("category", "Electronics").get_results()) == [1, 3, 4]

    def test_filter_by_is_idempotent(self, analyzer, sales):
        once = create_analyzer(sales, SALE_SHAPE).filter_by("category", "Furniture").get_results()
        twice = analyzer.filter_by("category", "Furniture").filter_by("category", "Furniture").get_results()
        assert once == twice

    def test_filter_by_is_type_strict(self):
        data = [{"q": 1}, {"q": True}, {"q": 2.0}, {"q": "2"}]
        assert DataAnalyzer(data).filter_by("q", True).get_results() == [{"q": True}]
        assert DataAnalyzer(data).filter_by("q", 1).get_results() == [{"q": 1}]
        assert DataAnalyzer(data).filter_by("q", 2).get_results() == [{"q": 2.0}]

    def test_filter_by_range_inclusive(self, analyzer):
        assert _ids(analyzer.filter_by_range("price", 150, 300).get_results()) == [2, 4, 5]

    def test_filter_by_range_rejects_text_field(self, analyzer):
        with pytest.raises(InvalidFieldError):
            analyzer.filter_by_range("product", 0, 10)

    def test_unknown_field_rejected(self, analyzer):
        with pytest.raises(InvalidFieldError):
            analyzer.filter_by("colour", "red")
        with pytest.raises(InvalidFieldError):
            analyzer.aggregate("colour", "sum")


# ============================================================================
# Sorting
# ============================================================================

class TestSorting:
    def test_sort_by_number_ascending(self, analyzer):
        assert _ids(analyzer.sort_by("price").get_results()) == [3, 2, 5, 4, 1]

    def test_sort_stability_across_directions(self, analyzer):
        analyzer.sort_by("price", SortOrder.ASC)
        assert _ids(analyzer.get_results()) == [3, 2, 5, 4, 1]
        analyzer.sort_by("price", SortOrder.DESC)
        # ids 2 and 5 share a price and keep their relative order
        assert _ids(analyzer.get_results()) == [1, 4, 2, 5, 3]

    def test_sort_by_text(self, analyzer):
        result = analyzer.sort_by("product", "asc").get_results()
        assert [r["product"] for r in result] == ["Bookshelf", "Desk Chair", "Headphones", "Laptop", "Monitor"]

    def test_incomparable_values_keep_order(self):
        data = [{"id": 1, "v": True}, {"id": 2, "v": None}, {"id": 3, "v": False}]
        assert _ids(DataAnalyzer(data).sort_by("v").get_results()) == [1, 2, 3]

    def test_custom_comparator(self, analyzer):
        result = analyzer.sort(lambda a, b: b["quantity"] - a["quantity"]).get_results()
        assert _ids(result) == [3, 2, 4, 1, 5]


# ============================================================================
# Grouping, slicing, distinct
# ============================================================================

class TestGroupingAndSlicing:
    def test_group_by_is_complete(self, analyzer, sales):
        groups = analyzer.group_by("category")
        assert list(groups) == ["Electronics", "Furniture"]
        assert _ids(groups["Electronics"]) == [1, 3, 4]
        assert _ids(groups["Furniture"]) == [2, 5]
        assert sum(len(g) for g in groups.values()) == len(sales)

    def test_group_by_does_not_touch_working_set(self, analyzer):
        analyzer.group_by("category")["Electronics"].clear()
        assert len(analyzer.get_results()) == 5

    def test_group_key_is_string(self, analyzer):
        assert set(analyzer.group_by("price")) == {"1200", "150", "80", "300"}

    def test_limit_and_skip(self, analyzer):
        assert _ids(analyzer.skip(1).limit(2).get_results()) == [2, 3]

    def test_limit_beyond_size_and_negative(self, analyzer):
        assert len(analyzer.limit(50)) == 5
        assert len(analyzer.limit(-1)) == 0

    def test_distinct_is_structural(self, sales):
        reordered = {k: sales[0][k] for k in reversed(list(sales[0]))}
        data = [sales[0], reordered, sales[1], dict(sales[1])]
        assert _ids(DataAnalyzer(data, SALE_SHAPE).distinct().get_results()) == [1, 2]

    def test_distinct_treats_whole_floats_as_ints(self, sales):
        as_float = dict(sales[1], price=150.0)
        assert as_float == sales[1]
        result = DataAnalyzer([sales[1], as_float], SALE_SHAPE).distinct().get_results()
        assert len(result) == 1
        assert result[0]["price"] == 150 and isinstance(result[0]["price"], int)


# ============================================================================
# Aggregation and results
# ============================================================================

class TestAggregation:
    def test_aggregate_correctness(self):
        analyzer = DataAnalyzer([{"price": 10}, {"price": 20}, {"price": 30}])
        assert analyzer.aggregate("price", "sum") == 60
        assert analyzer.aggregate("price", "avg") == 20
        assert analyzer.aggregate("price", "min") == 10
        assert analyzer.aggregate("price", "max") == 30
        assert analyzer.aggregate("price", "count") == 3

    @pytest.mark.parametrize("operation", ["sum", "avg", "min", "max", "count"])
    def test_empty_working_set_defaults_to_zero(self, analyzer, operation):
        analyzer.filter_by("category", "Toys")
        assert analyzer.aggregate("price", operation) == 0

    def test_text_field_aggregates_to_zero(self, analyzer):
        assert analyzer.aggregate("product", "sum") == 0

    def test_multi_aggregate_keys_follow_config_order(self, analyzer):
        result = analyzer.multi_aggregate({"quantity": "sum", "price": "max"})
        assert list(result) == ["quantity_sum", "price_max"]
        assert result == {"quantity_sum": 20, "price_max": 1200}

    def test_analyze_snapshot(self, analyzer):
        result = analyzer.filter_by("category", "Furniture").analyze({"price": "sum"})
        assert result.summary.total == 2
        assert isinstance(result.summary.timestamp, datetime)
        assert result.aggregates == {"price_sum": 300}
        assert _ids(result.data) == [2, 5]
        # analyze is terminal but does not reset the working set
        assert len(analyzer) == 2

    def test_analyze_without_config(self, analyzer):
        assert analyzer.analyze().aggregates is None

    def test_result_is_immutable(self, analyzer):
        result = analyzer.analyze()
        with pytest.raises(pydantic.ValidationError):
            result.aggregates = {}
        analyzer.limit(1)
        assert result.summary.total == 5

    def test_result_data_cannot_grow(self, analyzer):
        result = analyzer.limit(1).analyze()
        assert isinstance(result.data, tuple)
        with pytest.raises(AttributeError):
            result.data.append({"id": 99})
        assert result.summary.total == len(result.data) == 1

    def test_apply_config(self, analyzer):
        config = AnalyzerConfig(sort_by="price", sort_order="desc", limit=2)
        assert _ids(analyzer.apply(config).get_results()) == [1, 4]


# ============================================================================
# Isolation
# ============================================================================

class TestIsolation:
    def test_constructor_copies_input(self, sales):
        analyzer = DataAnalyzer(sales, SALE_SHAPE)
        sales[0]["price"] = 0
        sales.append(dict(sales[1]))
        assert analyzer.aggregate("price", "max") == 1200
        assert len(analyzer) == 5

    def test_reset_isolation(self, analyzer, users):
        analyzer_users = DataAnalyzer([], None).reset(users)
        users[0]["age"] = 99
        users.pop()
        assert analyzer_users.aggregate("age", "max") == 45
        assert len(analyzer_users) == 3

    def test_reset_source_unaffected_by_engine_changes(self, users):
        snapshot = [dict(u) for u in users]
        analyzer = DataAnalyzer([]).reset(users)
        analyzer.filter_by("role", "developer").limit(1)
        analyzer.get_results()[0]["age"] = 99
        analyzer.analyze().data[0]["name"] = "changed"
        assert users == snapshot
        assert len(users) == 3

    def test_results_are_copies(self, analyzer):
        analyzer.get_results()[0]["price"] = -1
        assert analyzer.aggregate("price", "min") == 80

    def test_reset_discards_previous_working_set(self, analyzer, sales):
        analyzer.filter_by("category", "Furniture")
        assert len(analyzer.reset(sales)) == 5

    def test_inferred_shape_follows_reset(self, users):
        analyzer = DataAnalyzer([])
        assert analyzer.shape is None
        assert analyzer.aggregate("anything", "sum") == 0
        analyzer.reset(users)
        assert analyzer.shape is not None
        with pytest.raises(InvalidFieldError):
            analyzer.sort_by("price")


# ============================================================================
# End-to-end chain
# ============================================================================

class TestEndToEnd:
    def test_electronics_revenue(self, analyzer):
        result = (
            analyzer.filter_by("category", "Electronics")
            .sort_by("price", SortOrder.DESC)
            .analyze({"price": "sum"})
        )
        assert result.aggregates["price_sum"] == 1200 + 300 + 80
        assert result.summary.total == 3
        assert _ids(result.data) == [1, 4, 3]

"""Tests for result windowing and query filtering."""

import pytest

from src.wtt.core.exceptions import ValidationError
from src.wtt.schemas import UNBOUNDED, Company, apply_window, company_sort_key, filter_by_query

pytestmark = pytest.mark.unit


class TestApplyWindow:
    """Test offset/limit windows."""

    def test_unbounded_returns_everything_from_position(self):
        assert apply_window([1, 2, 3, 4], 1, UNBOUNDED) == [2, 3, 4]

    def test_window_inside_range(self):
        assert apply_window(list(range(10)), 3, 4) == [3, 4, 5, 6]

    def test_window_past_end_is_short(self):
        assert apply_window([1, 2, 3], 2, 5) == [3]
        assert apply_window([1, 2, 3], 7, 5) == []

    def test_zero_size(self):
        assert apply_window([1, 2, 3], 0, 0) == []

    @pytest.mark.parametrize(("position", "size"), [(-1, None), (0, -1)])
    def test_negative_values_rejected(self, position, size):
        with pytest.raises(ValidationError):
            apply_window([1, 2, 3], position, size)


class TestFilterByQuery:
    """Test case-insensitive substring filtering."""

    def test_no_query_keeps_all(self):
        assert filter_by_query(["a", "b"], lambda s: s, None) == ["a", "b"]
        assert filter_by_query(["a", "b"], lambda s: s, "") == ["a", "b"]

    def test_substring_match_ignores_case(self):
        titles = ["Acme Corp", "Globex", "ACME Labs"]

        assert filter_by_query(titles, lambda s: s, "acme", "title") == ["Acme Corp", "ACME Labs"]

    def test_missing_text_never_matches(self):
        assert filter_by_query([None, "x"], lambda s: s, "x") == ["x"]


class TestCompanySortKey:
    """Test title ordering of companies."""

    def test_sorts_by_title_then_id(self):
        companies = [
            Company(id="2", title="beta"),
            Company(id="3", title="Alpha"),
            Company(id="1", title="beta"),
        ]

        ordered = sorted(companies, key=company_sort_key)

        assert [c.id for c in ordered] == ["3", "1", "2"]

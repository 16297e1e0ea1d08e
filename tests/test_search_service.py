"""
Substring search tests - identity on empty query, order preservation and case folding.
"""

import pytest

from remotetasks.core.sample_data import SAMPLE_LOCATIONS
from remotetasks.core.schema import Location, StudyGroup
from remotetasks.core.search_service import SearchState, filter_records


def _location(name):
    return Location(name=name, current_temp=0, high_temp=0, low_temp=0, description="", icon="")


@pytest.fixture
def cities():
    return [_location("San Francisco"), _location("New York"), _location("London")]


class TestFilterRecords:
    """Test the pure filter function."""

    def test_empty_query_is_identity(self, cities):
        """An empty query returns every record in the original order."""
        assert filter_records(cities, "", "name") == cities

    def test_empty_query_returns_new_list(self, cities):
        result = filter_records(cities, "", "name")
        result.append(_location("Paris"))
        assert len(cities) == 3

    def test_mixed_case_query_matches(self, cities):
        """'sAn' only matches San Francisco among the three cities."""
        result = filter_records(cities, "sAn", "name")
        assert [c.name for c in result] == ["San Francisco"]

    def test_relative_order_preserved(self):
        result = filter_records(SAMPLE_LOCATIONS, "san", "name")
        assert [c.name for c in result] == ["San Francisco", "San Mateo"]

    def test_every_result_contains_query_and_no_miss_left_behind(self):
        query = "o"
        result = filter_records(SAMPLE_LOCATIONS, query, "name")

        for location in result:
            assert query in location.name.lower()
        for location in SAMPLE_LOCATIONS:
            if location not in result:
                assert query not in location.name.lower()

    def test_no_match_returns_empty_list(self, cities):
        assert filter_records(cities, "Tokyo", "name") == []

    def test_unicode_case_folding(self):
        streets = [_location("Hauptstraße"), _location("Main Street")]
        result = filter_records(streets, "STRASSE", "name")
        assert [s.name for s in result] == ["Hauptstraße"]

    def test_input_not_mutated(self, cities):
        before = list(cities)
        filter_records(cities, "lon", "name")
        assert cities == before

    def test_idempotent(self, cities):
        assert filter_records(cities, "new", "name") == filter_records(cities, "new", "name")

    def test_substring_in_middle_matches(self):
        groups = [StudyGroup(name="Intro to Biology", description=""), StudyGroup(name="Calculus 101", description="")]
        result = filter_records(groups, "bio", "name")
        assert [g.name for g in result] == ["Intro to Biology"]

    def test_unknown_field_raises(self, cities):
        with pytest.raises(ValueError, match="Unknown search field"):
            filter_records(cities, "san", "title")

    def test_non_string_field_raises(self, cities):
        with pytest.raises(ValueError, match="not a string"):
            filter_records(cities, "5", "current_temp")

    def test_unknown_field_with_empty_query_is_still_identity(self, cities):
        assert filter_records(cities, "", "title") == cities


class TestSearchState:
    """Test the live search holder."""

    def test_initial_results_are_all_records(self, cities):
        search = SearchState(cities, field="name")
        assert search.results.get() == cities

    def test_query_change_recomputes_results(self, cities):
        search = SearchState(cities, field="name")
        results = search.set_query("york")
        assert [c.name for c in results] == ["New York"]
        assert search.results.get() == results

    def test_subscribers_see_new_results(self, cities):
        search = SearchState(cities, field="name")
        seen = []
        search.subscribe(seen.append)

        search.set_query("lon")

        assert len(seen) == 1
        assert [c.name for c in seen[0]] == ["London"]

    def test_reset_restores_all(self, cities):
        search = SearchState(cities, field="name")
        search.set_query("lon")
        search.reset()
        assert search.results.get() == cities
        assert search.query.get() == ""

    def test_is_empty_on_no_match(self, cities):
        search = SearchState(cities, field="name")
        search.set_query("zzz")
        assert search.is_empty

    def test_callable_source_is_read_at_query_time(self):
        records = [_location("London")]
        search = SearchState(lambda: records, field="name")

        records.append(_location("Londonderry"))
        search.refresh()

        assert [c.name for c in search.results.get()] == ["London", "Londonderry"]

"""
Substring search over sample stores and collections.
Case-insensitive containment on one designated string field; no ranking.
"""

from typing import Any, Callable, Iterable, List, Sequence

from .state import ObservableValue

_MISSING = object()


def _field_text(record: Any, field: str) -> str:
    value = getattr(record, field, _MISSING)
    if value is _MISSING:
        raise ValueError(f"Unknown search field: {field}")
    if not isinstance(value, str):
        raise ValueError(f"Search field '{field}' is not a string on {type(record).__name__}")
    return value


def filter_records(records: Iterable[Any], query: str, field: str) -> List[Any]:
    """
    Return the records whose `field` contains `query`, ignoring case.

    An empty query is a pass-through: every record comes back in its original
    order. Matching uses Unicode case folding, so "STRASSE" matches "Straße".
    The input is never modified; a new list is returned.

    Args:
        records: Ordered records to search
        query: Search text, possibly empty
        field: Name of a string attribute present on every record

    Returns:
        Matching records, relative order preserved. Empty when nothing matches.
    """
    if query == "":
        return list(records)

    needle = query.casefold()
    return [record for record in records if needle in _field_text(record, field).casefold()]


class SearchState:
    """
    Live search: a query holder whose results recompute on every change.

    The source can be a fixed sequence or a callable returning the current
    records, so a growing collection is searched as it stands at query time.
    """

    def __init__(self, source, field: str, query: str = ""):
        self._source = source
        self.field = field
        self.query = ObservableValue(query)
        self.results = ObservableValue(self._compute(query))
        self.query.subscribe(self._on_query_changed)

    def _records(self) -> Sequence[Any]:
        return self._source() if callable(self._source) else self._source

    def _compute(self, query: str) -> List[Any]:
        return filter_records(self._records(), query, self.field)

    def _on_query_changed(self, query: str) -> None:
        self.results.set(self._compute(query))

    def set_query(self, query: str) -> List[Any]:
        """Update the query text and return the new results."""
        self.query.set(query)
        return self.results.get()

    def refresh(self) -> List[Any]:
        """Recompute results for the current query (after the source grew)."""
        self.results.set(self._compute(self.query.get()))
        return self.results.get()

    def reset(self) -> None:
        self.set_query("")

    def subscribe(self, callback: Callable[[List[Any]], None]) -> Callable[[], None]:
        """Subscribe to result changes."""
        return self.results.subscribe(callback)

    @property
    def is_empty(self) -> bool:
        """True when the current query matched nothing."""
        return len(self.results.get()) == 0

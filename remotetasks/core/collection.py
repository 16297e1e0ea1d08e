"""
Append-only in-memory collections.
Candidates are validated by a pydantic draft before a record is built; a
rejected candidate leaves the collection untouched.
"""

from typing import Any, Callable, Generic, Iterable, Iterator, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import RecordValidationError
from .state import ObservableValue
from ..util.logging import logger

T = TypeVar("T")


class AppendOnlyCollection(Generic[T]):
    """
    Ordered records that grow by explicit create actions only.

    Args:
        name: Label used in logs
        draft_model: pydantic model validating candidate fields
        factory: Builds the record from a validated draft; assigns the id
        initial: Seed records, copied in order
    """

    def __init__(
        self,
        name: str,
        draft_model: Type[BaseModel],
        factory: Callable[[BaseModel], T],
        initial: Iterable[T] = (),
    ):
        self.name = name
        self.draft_model = draft_model
        self.factory = factory
        self._items = ObservableValue(tuple(initial))

    def append(self, **fields: Any) -> T:
        """
        Validate, build and append a record.

        Raises:
            RecordValidationError: a required field is missing or empty;
                `field` names the first offending field.
        """
        try:
            draft = self.draft_model(**fields)
        except ValidationError as e:
            first = e.errors()[0]
            field = str(first["loc"][0]) if first.get("loc") else "unknown"
            error = first.get("ctx", {}).get("error")
            message = str(error) if error is not None else first.get("msg", "")
            logger.log_validation_error(f"{self.name}.append", field, message)
            raise RecordValidationError(field, message) from e

        record = self.factory(draft)
        existing = self._items.get()
        self._items.set(existing + (record,))

        logger.log_append(self.name, getattr(record, "id", None), len(existing) + 1, fields)
        return record

    def items(self) -> List[T]:
        """Snapshot of the records in insertion order."""
        return list(self._items.get())

    def subscribe(self, callback: Callable[[List[T]], None]) -> Callable[[], None]:
        """Subscribe to growth; the callback receives the full record list."""
        return self._items.subscribe(lambda items: callback(list(items)))

    def __len__(self) -> int:
        return len(self._items.get())

    def __iter__(self) -> Iterator[T]:
        return iter(self._items.get())

    def __getitem__(self, index: int) -> T:
        return self._items.get()[index]

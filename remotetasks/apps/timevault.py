"""
TimeVault - photo and note capsules that open on a chosen date.
Entries are kept in memory for the life of the view-model.
"""

from datetime import datetime
from typing import Callable, List, Optional

from ..core.collection import AppendOnlyCollection
from ..core.drafts import TimeVaultDraft
from ..core.errors import RecordValidationError
from ..core.pickers import PickRequest
from ..core.schema import TimeVaultEntry
from ..core.state import ObservableValue, SelectionState

TITLE = "Time Vault"
EMPTY_MESSAGE = "No time vault memories created"
DATE_HEADER_FORMAT = "%b %d, %Y"


def format_open_date(value: datetime) -> str:
    return value.strftime(DATE_HEADER_FORMAT)


def with_date_header(comment: str, header: str) -> str:
    """Replace the comment's first line with `header`; a single-line comment is replaced entirely."""
    _, newline, rest = comment.partition("\n")
    if newline:
        return f"{header}\n{rest}"
    return f"{header}\n"


class TimeVaultComposer:
    """Creation screen state: picked photos, comment text and open date."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock
        self.photos: ObservableValue[tuple] = ObservableValue(())
        self.comment = ObservableValue("")
        self.open_date: ObservableValue[Optional[datetime]] = ObservableValue(None)

    def request_photos(self) -> PickRequest[bytes]:
        """Start an image pick; every picked image is added to the composer."""

        def on_picked(images: List[bytes]) -> None:
            self.photos.set(self.photos.get() + tuple(images))

        return PickRequest("timevault.photos", on_picked)

    def set_comment(self, text: str) -> None:
        self.comment.set(text)

    def set_open_date(self, value: datetime) -> None:
        """
        Choose when the capsule opens and stamp the date on the comment's first line.

        Raises:
            RecordValidationError: the date carries a timezone or is before today.
        """
        if value.utcoffset() is not None:
            raise RecordValidationError("open_date", "open_date must not carry a timezone")
        if value.date() < self.clock().date():
            raise RecordValidationError("open_date", "open date cannot be in the past")

        self.open_date.set(value)
        self.comment.set(with_date_header(self.comment.get(), format_open_date(value)))

    def reset(self) -> None:
        self.photos.set(())
        self.comment.set("")
        self.open_date.set(None)


class TimeVaultViewModel:
    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock
        self.entries: AppendOnlyCollection[TimeVaultEntry] = AppendOnlyCollection(
            "timevault.entries",
            TimeVaultDraft,
            self._build_entry,
        )
        self.selection: SelectionState[TimeVaultEntry] = SelectionState("timevault.entry")
        self.composer = TimeVaultComposer(clock)

    def _build_entry(self, draft: TimeVaultDraft) -> TimeVaultEntry:
        now = self.clock()
        return TimeVaultEntry(
            photos=tuple(draft.photos),
            comment=draft.comment,
            open_date=draft.open_date or now,
            created_at=now,
        )

    @property
    def is_empty(self) -> bool:
        return len(self.entries) == 0

    def entry_titles(self) -> List[str]:
        return [entry.title for entry in self.entries]

    def create(self) -> TimeVaultEntry:
        """
        Seal the composer into a new entry and reset it.

        Raises:
            RecordValidationError: the comment is empty; the composer keeps its state.
        """
        entry = self.entries.append(
            photos=list(self.composer.photos.get()),
            comment=self.composer.comment.get(),
            open_date=self.composer.open_date.get(),
        )
        self.composer.reset()
        return entry

    def select_entry(self, entry: TimeVaultEntry) -> None:
        self.selection.select(entry)

    def is_unlocked(self, entry: TimeVaultEntry) -> bool:
        return self.clock() >= entry.open_date

    def visible_photos(self, entry: TimeVaultEntry) -> List[bytes]:
        """Photos are withheld until the capsule opens."""
        if not self.is_unlocked(entry):
            return []
        return list(entry.photos)

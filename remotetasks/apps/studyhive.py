"""
StudyHive - study group cards, group creation, live chat sessions and file sharing.
Groups, messages and shared files live only as long as the view-model.
"""

import os
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional
from uuid import UUID

from ..core import config
from ..core.collection import AppendOnlyCollection
from ..core.drafts import ChatMessageDraft, SharedFileDraft, StudyGroupDraft
from ..core.errors import RecordValidationError
from ..core.pickers import PickRequest
from ..core.sample_data import SAMPLE_MESSAGES, SAMPLE_STUDY_GROUPS
from ..core.schema import ChatMessage, SharedFile, StudyGroup
from ..core.search_service import SearchState
from ..core.state import ObservableValue, SelectionState

TITLE = "Study Hive"


class ChatSessionViewModel:
    """
    Live session for one group.

    Each session starts from its own copy of the sample messages; sent
    messages are appended locally and never leave the process.
    """

    def __init__(
        self,
        group_name: str,
        seed: Iterable[ChatMessage] = SAMPLE_MESSAGES,
        sender: Optional[str] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.group_name = group_name
        self.sender = sender or config.DEFAULT_SENDER
        self.clock = clock
        self.draft = ObservableValue("")
        self.messages: AppendOnlyCollection[ChatMessage] = AppendOnlyCollection(
            "studyhive.messages",
            ChatMessageDraft,
            lambda d: ChatMessage(sender=d.sender, text=d.text, sent_at=d.sent_at),
            initial=seed,
        )

    @property
    def title(self) -> str:
        return f"Live Session: {self.group_name}"

    def set_draft(self, text: str) -> None:
        self.draft.set(text)

    def send(self) -> ChatMessage:
        """
        Send the current draft. The draft is cleared only on success.

        Raises:
            RecordValidationError: the draft is empty.
        """
        message = self.messages.append(sender=self.sender, text=self.draft.get(), sent_at=self.clock())
        self.draft.set("")
        return message


class StudyHiveViewModel:
    def __init__(self, groups: Iterable[StudyGroup] = SAMPLE_STUDY_GROUPS):
        self.groups: AppendOnlyCollection[StudyGroup] = AppendOnlyCollection(
            "studyhive.groups",
            StudyGroupDraft,
            lambda d: StudyGroup(name=d.name, description=d.description),
            initial=groups,
        )
        self.search = SearchState(self.groups.items, field="name")
        self.groups.subscribe(lambda _: self.search.refresh())
        self.selection: SelectionState[StudyGroup] = SelectionState("studyhive.group")
        self.is_creating = ObservableValue(False)
        self.create_error: ObservableValue[Optional[RecordValidationError]] = ObservableValue(None)
        self._shared_files: Dict[UUID, AppendOnlyCollection[SharedFile]] = {}

    def visible_groups(self) -> List[StudyGroup]:
        return self.search.results.get()

    def begin_create(self) -> None:
        self.is_creating.set(True)

    def create_group(self, name: str, description: str) -> Optional[StudyGroup]:
        """
        Create a group from the creation sheet.

        The sheet is dismissed whether or not the group was created; an
        invalid candidate returns None, leaves the list unchanged and is
        published on `create_error` so the caller can re-prompt.
        """
        try:
            group = self.groups.append(name=name, description=description)
        except RecordValidationError as e:
            self.create_error.set(e)
            return None
        else:
            self.create_error.set(None)
            return group
        finally:
            self.is_creating.set(False)

    def select_group(self, group: StudyGroup) -> None:
        self.selection.select(group)

    def join_session(self, group: StudyGroup) -> ChatSessionViewModel:
        return ChatSessionViewModel(group.name)

    def shared_files(self, group: StudyGroup) -> AppendOnlyCollection[SharedFile]:
        if group.id not in self._shared_files:
            self._shared_files[group.id] = AppendOnlyCollection(
                f"studyhive.files.{group.name}",
                SharedFileDraft,
                lambda d: SharedFile(name=d.name, path=d.path),
            )
        return self._shared_files[group.id]

    def request_upload(self, group: StudyGroup) -> PickRequest[str]:
        """
        Start a single-file document pick for `group`.

        The picked file reference is attached to the group's shared files.
        """
        files = self.shared_files(group)

        def on_picked(paths: List[str]) -> None:
            path = paths[0]
            files.append(name=os.path.basename(path) or path, path=path)

        return PickRequest("studyhive.document", on_picked, allow_multiple=False)

"""
Draft models validated before a record is appended to a collection.
Required text fields must be non-empty after trimming.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator


def _require_text(name: str, v: str) -> str:
    if not v.strip():
        raise ValueError(f'{name} cannot be empty')
    return v


class StudyGroupDraft(BaseModel):
    name: str
    description: str

    @field_validator('name')
    @classmethod
    def name_must_not_be_empty(cls, v):
        return _require_text('name', v)

    @field_validator('description')
    @classmethod
    def description_must_not_be_empty(cls, v):
        return _require_text('description', v)


class ChatMessageDraft(BaseModel):
    sender: str
    text: str
    sent_at: Optional[datetime] = None

    @field_validator('sender')
    @classmethod
    def sender_must_not_be_empty(cls, v):
        return _require_text('sender', v)

    @field_validator('text')
    @classmethod
    def text_must_not_be_empty(cls, v):
        return _require_text('text', v)


class SharedFileDraft(BaseModel):
    name: str
    path: str

    @field_validator('path')
    @classmethod
    def path_must_not_be_empty(cls, v):
        return _require_text('path', v)


class TimeVaultDraft(BaseModel):
    comment: str
    photos: List[bytes] = []
    open_date: Optional[datetime] = None

    @field_validator('comment')
    @classmethod
    def comment_must_not_be_empty(cls, v):
        return _require_text('comment', v)

    @field_validator('open_date')
    @classmethod
    def open_date_must_be_naive(cls, v):
        if v is not None and v.utcoffset() is not None:
            raise ValueError('open_date must not carry a timezone')
        return v

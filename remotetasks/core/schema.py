"""
Domain records shared by the demo app view-models.
Records are frozen; identifiers are assigned at construction and never reused.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Video:
    title: str
    description: str
    thumbnail_url: str
    video_url: str
    rating: Optional[float] = None
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class StudyGroup:
    name: str
    description: str
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class ChatMessage:
    sender: str
    text: str
    sent_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class SharedFile:
    """A file reference handed over by the document picker."""

    name: str
    path: str
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class TimeVaultEntry:
    photos: Tuple[bytes, ...]
    comment: str
    open_date: datetime
    created_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)

    @property
    def title(self) -> str:
        """First line of the comment, used as the list label."""
        return self.comment.split("\n", 1)[0]


@dataclass(frozen=True)
class Location:
    name: str
    current_temp: int
    high_temp: int
    low_temp: int
    description: str
    icon: str
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class HourlyForecast:
    time: datetime
    temperature: float
    weather_icon: str
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class DailyForecast:
    date: date
    high_temp: float
    low_temp: float
    weather_icon: str
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class TutorialCard:
    title: str
    headline: str
    icon: str
    id: UUID = field(default_factory=uuid4)
